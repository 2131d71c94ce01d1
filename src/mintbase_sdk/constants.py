"""Network endpoints and protocol constants for mintbase-sdk."""

from ._exceptions import NetworkNotSupportedError

# Public NEAR RPC endpoints per network.
RPC_URLS: dict[str, str] = {
    "mainnet": "https://rpc.mainnet.near.org",
    "testnet": "https://rpc.testnet.near.org",
}

SUPPORTED_NETWORKS: list[str] = ["mainnet", "testnet"]

# Contract method and gas budget for minting
MINT_METHOD = "nft_batch_mint"
GAS = 200_000_000_000_000  # 200 TGas

# Storage costs in yoctoNEAR. These overestimate what the contract
# actually stores so the attached deposit is never too small.
STORAGE_PRICE_PER_BYTE = 10**19
STORE_COMMON = 80 * STORAGE_PRICE_PER_BYTE
STORE_TOKEN = 360 * STORAGE_PRICE_PER_BYTE
MINTING_FEE = 10**21  # 0.001 NEAR

# Mint limits (enforced by contract)
MIN_SPLITS = 2
MAX_SPLITS = 50
MAX_MINT_AMOUNT = 125
MAX_ROYALTY_PERCENTAGE = 0.5

# 10_000 = 100%
BASIS_POINTS = 10_000

# nft_payout amounts are fixed-point with this denominator
PAYOUT_DENOMINATOR = 10**12
PAYOUT_BALANCE = "10000000000000000"
MAX_LEN_PAYOUT = 1000


def get_rpc_url(network: str) -> str:
    """Get the public RPC endpoint for a network."""
    url = RPC_URLS.get(network)
    if not url:
        raise NetworkNotSupportedError(network)
    return url


def is_supported_network(network: str) -> bool:
    """Check if a network is supported."""
    return network in RPC_URLS
