"""Mint call builder for Mintbase token contracts."""

import json
from decimal import Decimal
from typing import Any

from ._exceptions import ValidationError, ValidationErrorCode
from .constants import (
    BASIS_POINTS,
    GAS,
    MAX_MINT_AMOUNT,
    MAX_ROYALTY_PERCENTAGE,
    MAX_SPLITS,
    MIN_SPLITS,
    MINT_METHOD,
    MINTING_FEE,
    STORAGE_PRICE_PER_BYTE,
    STORE_COMMON,
    STORE_TOKEN,
)
from .types import MintArgs, MintbaseConfig, MintCallDescription, MintIntent, MintResult, RoyaltyArgs


def to_basis_points(share: float) -> int:
    """
    Convert a fractional share (0-1) to basis points, truncating.

    The decimal text of the float is used so 0.29 becomes 2900, not 2899.

    Example:
        >>> to_basis_points(0.5)
        5000
    """
    return int(Decimal(str(share)) * BASIS_POINTS)


def to_split_owners(splits: dict[str, float]) -> dict[str, int]:
    """
    Convert ownership splits to basis points.

    Returns a new mapping; the input is left untouched.

    Raises:
        ValidationError: If the converted shares don't sum to 10_000
    """
    split_owners = {account: to_basis_points(share) for account, share in splits.items()}
    if sum(split_owners.values()) != BASIS_POINTS:
        raise ValidationError(ValidationErrorCode.SPLITS_PERCENTAGE)
    return split_owners


def to_royalty_args(splits: dict[str, float], royalty_percentage: float | None) -> RoyaltyArgs:
    """
    Build royalty arguments in basis points.

    Unlike ownership splits, royalty splits are not required to sum to 100%.
    Without a royalty percentage, `percentage` is sent as null.
    """
    return RoyaltyArgs(
        split_between={account: to_basis_points(share) for account, share in splits.items()},
        percentage=to_basis_points(royalty_percentage) if royalty_percentage is not None else None,
    )


def metadata_byte_length(metadata: dict[str, Any]) -> int:
    """UTF-8 length of the compact JSON form of the metadata."""
    return len(json.dumps(metadata, separators=(",", ":"), ensure_ascii=False).encode("utf-8"))


def minting_deposit(
    n_tokens: int,
    n_splits: int,
    n_royalties: int,
    metadata: dict[str, Any],
) -> str:
    """
    Storage deposit (yoctoNEAR) to attach to a mint call.

    JSON serialization is always longer than the contract's borsh
    serialization, so this is an upper bound.

    Returns:
        Deposit as a base-10 string
    """
    royalties_deposit = STORE_COMMON * n_royalties
    splits_deposit = STORE_COMMON * n_splits
    metadata_deposit = STORAGE_PRICE_PER_BYTE * metadata_byte_length(metadata)
    deposit_per_token = STORE_TOKEN + splits_deposit

    total = STORE_COMMON + MINTING_FEE + royalties_deposit + metadata_deposit + n_tokens * deposit_per_token
    return str(total)


def build_mint_call(intent: MintIntent, config: MintbaseConfig | None = None) -> MintCallDescription:
    """
    Build the contract call that mints tokens described by `intent`.

    Args:
        intent: What to mint, for whom, with which splits and royalties
        config: Supplies the default contract address

    Returns:
        MintCallDescription to hand to a wallet for signing

    Raises:
        ValidationError: If the intent is invalid (see ValidationErrorCode)

    Example:
        >>> call = build_mint_call(MintIntent(
        ...     contract_address="mystore.mintbase1.near",
        ...     owner_id="bob.near",
        ...     metadata=TokenMetadata(reference="ref", media="media"),
        ...     options=MintOptions(amount=2),
        ... ))
        >>> call.args.num_to_mint
        2
    """
    contract_address = intent.contract_address or (config.contract_address if config else None)
    if not contract_address:
        raise ValidationError(ValidationErrorCode.CONTRACT_ADDRESS)

    # Reference and media need to be present or explicitly opted out of
    metadata = intent.metadata
    if not intent.no_reference and not metadata.reference:
        raise ValidationError(ValidationErrorCode.NO_REFERENCE)
    if not intent.no_media and not metadata.media:
        raise ValidationError(ValidationErrorCode.NO_MEDIA)

    options = intent.options
    splits = None if intent.no_splits else options.splits

    # Shares must add up before their count is looked at
    split_owners = to_split_owners(splits) if splits is not None else None

    if splits is not None and len(splits) > MAX_SPLITS:
        raise ValidationError(ValidationErrorCode.MAX_SPLITS)
    if splits is not None and len(splits) < MIN_SPLITS:
        raise ValidationError(ValidationErrorCode.SPLITS)

    amount = 1 if options.amount is None else options.amount
    if amount > MAX_MINT_AMOUNT:
        raise ValidationError(ValidationErrorCode.MAX_AMOUNT)
    if amount < 1:
        raise ValidationError(ValidationErrorCode.MIN_AMOUNT)

    royalty_percentage = options.royalty_percentage
    if royalty_percentage is not None and not 0 <= royalty_percentage <= MAX_ROYALTY_PERCENTAGE:
        raise ValidationError(ValidationErrorCode.INVALID_ROYALTY_PERCENTAGE)

    # Royalties are paid to the same accounts as the ownership splits
    royalty_args = None
    if options.splits is not None:
        royalty_args = to_royalty_args(options.splits, royalty_percentage)

    metadata_json = metadata.model_dump(exclude_unset=True)

    return MintCallDescription(
        contract_address=contract_address,
        method_name=MINT_METHOD,
        args=MintArgs(
            owner_id=intent.owner_id,
            metadata=metadata_json,
            num_to_mint=amount,
            royalty_args=royalty_args,
            split_owners=split_owners,
            token_ids_to_mint=list(intent.token_ids_to_mint) if intent.token_ids_to_mint is not None else None,
        ),
        gas=GAS,
        deposit=minting_deposit(
            n_tokens=amount,
            n_splits=len(split_owners) if split_owners else 0,
            n_royalties=len(royalty_args.split_between) if royalty_args else 0,
            metadata=metadata_json,
        ),
    )


def prepare_mint(intent: MintIntent, config: MintbaseConfig | None = None) -> MintResult:
    """
    Build a mint call without raising.

    - If the intent is valid: returns READY with the call
    - Otherwise: returns FAILED with the ValidationErrorCode as reason

    Example:
        >>> result = prepare_mint(intent, MintbaseConfig(contract_address="mystore.mintbase1.near"))
        >>> if result.status == "READY":
        ...     submit(result.call)
    """
    try:
        call = build_mint_call(intent, config)
    except ValidationError as e:
        return MintResult(status="FAILED", reason=e.code, message=str(e))

    return MintResult(status="READY", call=call)
