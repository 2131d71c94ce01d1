"""Token payout lookup and normalization."""

from ._exceptions import MalformedResponseError
from .async_rpc import AsyncNearRpc
from .constants import MAX_LEN_PAYOUT, PAYOUT_BALANCE, PAYOUT_DENOMINATOR
from .types import PayoutSplit, UiPayout


def normalize_payout(payout: dict[str, str | int], token_id: str) -> UiPayout:
    """
    Convert a raw `nft_payout` mapping into percentages.

    Amounts are fixed-point with a 10^12 denominator, so "500000000000"
    becomes 0.5. Account order is preserved.

    Example:
        >>> normalize_payout({"alice.near": "500000000000"}, "1").splits[0].percent
        0.5
    """
    return UiPayout(
        splits=[
            PayoutSplit(account=account, percent=int(amount) / PAYOUT_DENOMINATOR)
            for account, amount in payout.items()
        ],
        token_id=token_id,
    )


async def fetch_payouts(rpc: AsyncNearRpc, contract_id: str, token_id: str) -> UiPayout:
    """
    Fetch and normalize the payout of a token.

    Raises:
        RpcError: If the view call fails
        MalformedResponseError: If the contract returns no payout mapping
    """
    # max_len_payout is required by Mintbase contracts
    nep_payout = await rpc.call_view_method(
        contract_id,
        "nft_payout",
        {
            "token_id": token_id,
            "balance": PAYOUT_BALANCE,
            "max_len_payout": MAX_LEN_PAYOUT,
        },
    )
    payout = nep_payout.get("payout") if isinstance(nep_payout, dict) else None
    if not isinstance(payout, dict):
        raise MalformedResponseError(nep_payout)
    return normalize_payout(payout, token_id)
