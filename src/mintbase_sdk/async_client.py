"""Async high-level client for mintbase-sdk."""

from ._exceptions import ConfigurationError, NetworkNotSupportedError
from .async_rpc import AsyncNearRpc
from .constants import is_supported_network
from .mint import build_mint_call as _build_mint_call
from .mint import prepare_mint as _prepare_mint
from .payouts import fetch_payouts as _fetch_payouts
from .txn_status import get_txn_status as _get_txn_status
from .txn_status import resolve_txn_status as _resolve_txn_status
from .types import (
    MintbaseConfig,
    MintCallDescription,
    MintIntent,
    MintOptions,
    MintResult,
    TokenMetadata,
    TxnStatus,
    TxnStatusResult,
    UiPayout,
)


class AsyncMintbaseClient:
    """
    Async high-level client for minting on Mintbase contracts.

    Example:
        >>> import asyncio
        >>> from mintbase_sdk import AsyncMintbaseClient, TokenMetadata
        >>>
        >>> async def main():
        ...     async with AsyncMintbaseClient(
        ...         network="testnet",
        ...         contract_address="mystore.mintspace2.testnet",
        ...     ) as client:
        ...         result = client.mint(
        ...             owner_id="bob.testnet",
        ...             metadata=TokenMetadata(reference="ref", media="media"),
        ...             amount=2,
        ...         )
        ...         # sign and submit result.call with your wallet, then:
        ...         status = await client.get_txn_status(txn_hash, "bob.testnet")
        >>>
        >>> asyncio.run(main())
    """

    def __init__(
        self,
        network: str = "mainnet",
        rpc_url: str | None = None,
        contract_address: str | None = None,
    ) -> None:
        """
        Initialize the async Mintbase client.

        Args:
            network: "mainnet" or "testnet"
            rpc_url: Custom RPC endpoint (uses the network's public one if not provided)
            contract_address: Default contract for mints and payout lookups

        Raises:
            NetworkNotSupportedError: If network is not supported
        """
        if not is_supported_network(network):
            raise NetworkNotSupportedError(network)

        self.config = MintbaseConfig(
            network=network,
            rpc_url=rpc_url,
            contract_address=contract_address,
        )
        self.rpc = AsyncNearRpc(self.config.endpoint)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.rpc.close()

    async def __aenter__(self) -> "AsyncMintbaseClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager and close session."""
        await self.close()

    @property
    def contract_address(self) -> str | None:
        """Get the default contract address."""
        return self.config.contract_address

    def mint(
        self,
        owner_id: str,
        metadata: TokenMetadata,
        contract_address: str | None = None,
        splits: dict[str, float] | None = None,
        amount: int | None = None,
        royalty_percentage: float | None = None,
        no_media: bool = False,
        no_reference: bool = False,
        no_splits: bool = False,
        token_ids_to_mint: list[str] | None = None,
    ) -> MintResult:
        """
        Prepare a mint call.

        Args:
            owner_id: Account receiving the minted tokens
            metadata: Token metadata (reference and media required unless opted out)
            contract_address: Contract to mint on (defaults to the client's)
            splits: account -> share (0-1), must add up to 1
            amount: Number of tokens to mint (1-125, default 1)
            royalty_percentage: Resale royalty (0-0.5)
            no_media: Allow metadata without media
            no_reference: Allow metadata without reference
            no_splits: Ignore splits for ownership
            token_ids_to_mint: Explicit token ids

        Returns:
            MintResult with status READY or FAILED
        """
        intent = MintIntent(
            contract_address=contract_address,
            owner_id=owner_id,
            metadata=metadata,
            options=MintOptions(splits=splits, amount=amount, royalty_percentage=royalty_percentage),
            no_media=no_media,
            no_reference=no_reference,
            no_splits=no_splits,
            token_ids_to_mint=token_ids_to_mint,
        )
        return _prepare_mint(intent, self.config)

    def build_mint_call(self, intent: MintIntent) -> MintCallDescription:
        """Build a mint call, raising ValidationError on invalid input."""
        return _build_mint_call(intent, self.config)

    async def get_txn_status(self, txn_hash: str, sender_id: str) -> TxnStatusResult:
        """
        Look up a transaction status.

        Returns:
            TxnStatusResult with status RESOLVED or FAILED
        """
        return await _get_txn_status(self.rpc, txn_hash, sender_id)

    async def resolve_txn_status(self, txn_hash: str, sender_id: str) -> TxnStatus:
        """Look up a transaction status, raising on RPC or response errors."""
        return await _resolve_txn_status(self.rpc, txn_hash, sender_id)

    async def payouts(self, token_id: str, contract_id: str | None = None) -> UiPayout:
        """
        Get the payout of a token.

        Args:
            token_id: Token to look up
            contract_id: Contract holding the token (defaults to the client's)

        Raises:
            ConfigurationError: If no contract is given and the client has no default
        """
        contract_id = contract_id or self.config.contract_address
        if not contract_id:
            raise ConfigurationError("contract_id is required when the client has no default contract_address")
        return await _fetch_payouts(self.rpc, contract_id, token_id)

    async def account_exists(self, account_id: str) -> bool:
        """Check if an account exists."""
        return await self.rpc.account_exists(account_id)

    async def get_balance(self, account_id: str) -> int:
        """Get the balance of an account (in yoctoNEAR)."""
        return await self.rpc.get_balance(account_id)

    async def get_block_hash(self) -> str:
        """Get the latest block hash."""
        return await self.rpc.get_block_hash()
