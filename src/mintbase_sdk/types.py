"""Type definitions for mintbase-sdk."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ._exceptions import ValidationErrorCode
from .constants import GAS, MINT_METHOD, get_rpc_url

Network = Literal["mainnet", "testnet"]


class MintbaseConfig(BaseModel):
    """
    Explicit SDK configuration.

    Passed to the builder and the client instead of living in module state.

    Example:
        MintbaseConfig(network="testnet", contract_address="mystore.mintspace2.testnet")
    """

    network: Network = "mainnet"
    contract_address: str | None = None
    """Default contract used when a mint intent names none."""

    rpc_url: str | None = None
    """Override the public RPC endpoint of the network."""

    model_config = {"frozen": True}

    @property
    def endpoint(self) -> str:
        """RPC endpoint to talk to."""
        return self.rpc_url or get_rpc_url(self.network)


class TokenMetadata(BaseModel):
    """
    NEP-177 token metadata.

    Unknown fields are kept and serialized as given. `reference` and `media`
    are required unless the intent opts out with `no_reference`/`no_media`.
    """

    title: str | None = None
    description: str | None = None
    media: str | None = None
    media_hash: str | None = None
    copies: int | None = None
    issued_at: str | None = None
    expires_at: str | None = None
    starts_at: str | None = None
    updated_at: str | None = None
    extra: str | None = None
    reference: str | None = None
    reference_hash: str | None = None

    model_config = {"frozen": True, "extra": "allow"}


class MintOptions(BaseModel):
    """
    Optional mint parameters.

    splits: account -> fractional share (0-1), must add up to 1
    amount: number of copies to mint (1-125)
    royalty_percentage: share of resales paid as royalties (0-0.5)
    """

    splits: dict[str, float] | None = None
    amount: int | None = None
    royalty_percentage: float | None = None

    model_config = {"frozen": True}


class MintIntent(BaseModel):
    """Everything needed to build a mint call."""

    owner_id: str
    metadata: TokenMetadata
    contract_address: str | None = None
    options: MintOptions = Field(default_factory=MintOptions)
    no_media: bool = False
    no_reference: bool = False
    no_splits: bool = False
    token_ids_to_mint: list[str] | None = None

    model_config = {"frozen": True}


class RoyaltyArgs(BaseModel):
    """Royalty structure as the contract expects it (basis points)."""

    split_between: dict[str, int]
    percentage: int | None = None

    model_config = {"frozen": True}


class MintArgs(BaseModel):
    """Arguments of the mint contract call."""

    owner_id: str
    metadata: dict[str, Any]
    num_to_mint: int
    royalty_args: RoyaltyArgs | None = None
    split_owners: dict[str, int] | None = None
    token_ids_to_mint: list[str] | None = None

    model_config = {"frozen": True}


class MintCallDescription(BaseModel):
    """
    A contract call ready to be signed and submitted.

    deposit is a decimal string in yoctoNEAR since it does not fit a float.
    """

    contract_address: str
    method_name: str = MINT_METHOD
    args: MintArgs
    gas: int = GAS
    deposit: str

    model_config = {"frozen": True}


TxnStatus = Literal["pending", "success", "failure"]


class PayoutSplit(BaseModel):
    """One beneficiary of a payout, percent as a fraction (0.5 = 50%)."""

    account: str
    percent: float

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class UiPayout(BaseModel):
    """
    Payout of a token in a UI-friendly shape.

    royalty_percent and split_percent are placeholders (0 and 100) until
    royalties are read from the payout as well.
    """

    equal_accounts: bool = True
    splits: list[PayoutSplit]
    royalties: list[PayoutSplit] = Field(default_factory=list)
    royalty_percent: float = 0
    split_percent: float = 100
    token_id: str

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# Result status types
MintStatus = Literal["READY", "FAILED"]
TxnLookupStatus = Literal["RESOLVED", "FAILED"]
FailedReason = Literal[
    "rpc_error",
    "malformed_response",
    "network_error",
]


class MintResult(BaseModel):
    """
    Result of prepare_mint.

    status: READY | FAILED
    """

    status: MintStatus
    call: MintCallDescription | None = None
    reason: ValidationErrorCode | None = None
    message: str | None = None

    model_config = {"frozen": True}


class TxnStatusResult(BaseModel):
    """
    Result of get_txn_status.

    status: RESOLVED | FAILED
    """

    status: TxnLookupStatus
    txn_status: TxnStatus | None = None
    reason: FailedReason | None = None
    message: str | None = None

    model_config = {"frozen": True}
