"""
Mintbase SDK

Build mint calls for Mintbase token contracts on NEAR and track the
outcome of submitted transactions.

Usage (async client):
    import asyncio
    from mintbase_sdk import AsyncMintbaseClient, TokenMetadata

    async def main():
        async with AsyncMintbaseClient(
            network="testnet",
            contract_address="mystore.mintspace2.testnet",
        ) as client:
            result = client.mint(
                owner_id="bob.testnet",
                metadata=TokenMetadata(reference="ref", media="media"),
                splits={"alice.testnet": 0.6, "bob.testnet": 0.4},
                royalty_percentage=0.1,
            )
            if result.status == "READY":
                ...  # sign and submit result.call

            status = await client.get_txn_status("9fD...", "bob.testnet")

    asyncio.run(main())

Low-level functions:
    from mintbase_sdk import AsyncNearRpc, MintIntent, build_mint_call, resolve_txn_status

    call = build_mint_call(MintIntent(...))
    rpc = AsyncNearRpc("https://rpc.testnet.near.org")
    status = await resolve_txn_status(rpc, "9fD...", "bob.testnet")
"""

from ._exceptions import (
    ConfigurationError,
    MalformedResponseError,
    MintbaseError,
    NetworkNotSupportedError,
    RpcError,
    ValidationError,
    ValidationErrorCode,
)
from ._version import __version__

# Async client
from .async_client import AsyncMintbaseClient
from .async_rpc import AsyncNearRpc

# Constants
from .constants import (
    BASIS_POINTS,
    GAS,
    MAX_MINT_AMOUNT,
    MAX_ROYALTY_PERCENTAGE,
    MAX_SPLITS,
    MIN_SPLITS,
    MINT_METHOD,
    MINTING_FEE,
    RPC_URLS,
    STORE_COMMON,
    STORE_TOKEN,
    SUPPORTED_NETWORKS,
    get_rpc_url,
    is_supported_network,
)

# Mint builder
from .mint import (
    build_mint_call,
    minting_deposit,
    prepare_mint,
    to_basis_points,
    to_royalty_args,
    to_split_owners,
)
from .payouts import fetch_payouts, normalize_payout
from .txn_status import get_txn_status, reduce_receipts_outcome, resolve_txn_status

# Types
from .types import (
    FailedReason,
    MintArgs,
    MintbaseConfig,
    MintCallDescription,
    MintIntent,
    MintOptions,
    MintResult,
    MintStatus,
    PayoutSplit,
    RoyaltyArgs,
    TokenMetadata,
    TxnLookupStatus,
    TxnStatus,
    TxnStatusResult,
    UiPayout,
)

__all__ = [
    # Version
    "__version__",
    # Client and transport
    "AsyncMintbaseClient",
    "AsyncNearRpc",
    # Operations
    "build_mint_call",
    "prepare_mint",
    "resolve_txn_status",
    "get_txn_status",
    "fetch_payouts",
    "normalize_payout",
    # Helpers
    "to_basis_points",
    "to_split_owners",
    "to_royalty_args",
    "minting_deposit",
    "reduce_receipts_outcome",
    # Types
    "MintbaseConfig",
    "TokenMetadata",
    "MintOptions",
    "MintIntent",
    "MintArgs",
    "RoyaltyArgs",
    "MintCallDescription",
    "MintResult",
    "MintStatus",
    "TxnStatus",
    "TxnLookupStatus",
    "TxnStatusResult",
    "FailedReason",
    "PayoutSplit",
    "UiPayout",
    # Constants
    "RPC_URLS",
    "SUPPORTED_NETWORKS",
    "MINT_METHOD",
    "GAS",
    "STORE_COMMON",
    "STORE_TOKEN",
    "MINTING_FEE",
    "BASIS_POINTS",
    "MIN_SPLITS",
    "MAX_SPLITS",
    "MAX_MINT_AMOUNT",
    "MAX_ROYALTY_PERCENTAGE",
    "get_rpc_url",
    "is_supported_network",
    # Exceptions
    "MintbaseError",
    "ConfigurationError",
    "NetworkNotSupportedError",
    "ValidationError",
    "ValidationErrorCode",
    "RpcError",
    "MalformedResponseError",
]
