"""Async JSON-RPC transport for NEAR nodes."""

import base64
import json
import logging
from typing import Any

from web3 import AsyncWeb3

from ._exceptions import MalformedResponseError, RpcError

logger = logging.getLogger(__name__)

# Type alias for raw JSON-RPC responses
RpcResponse = dict[str, Any]


class AsyncNearRpc:
    """
    Thin async JSON-RPC client for a NEAR RPC endpoint.

    Uses web3's AsyncHTTPProvider as the HTTP channel only; no Ethereum
    semantics are involved. There is no retry: callers who need one wrap
    these methods themselves.

    Example:
        >>> rpc = AsyncNearRpc("https://rpc.testnet.near.org")
        >>> response = await rpc.request("status", [])
        >>> await rpc.close()
    """

    def __init__(self, rpc_url: str) -> None:
        self.rpc_url = rpc_url
        self.provider = AsyncWeb3.AsyncHTTPProvider(rpc_url)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.provider.disconnect()

    async def request(self, method: str, params: Any) -> RpcResponse:
        """
        Send one JSON-RPC request and return the raw response.

        The response is returned as-is, including any `error` member.
        """
        logger.debug("RPC %s on %s", method, self.rpc_url)
        response = await self.provider.make_request(method, params)
        if response.get("error"):
            logger.warning("RPC error on %s: %s", method, response["error"])
        return dict(response)

    async def call_view_method(self, contract_id: str, method: str, args: dict[str, Any]) -> Any:
        """
        Call a read-only contract method and decode its JSON return value.

        Raises:
            RpcError: If the node or the contract reports an error
            MalformedResponseError: If the result carries no return bytes
        """
        args_base64 = base64.b64encode(json.dumps(args).encode("utf-8")).decode("ascii")
        response = await self.request(
            "query",
            {
                "request_type": "call_function",
                "finality": "final",
                "account_id": contract_id,
                "method_name": method,
                "args_base64": args_base64,
            },
        )
        if response.get("error"):
            raise RpcError(response["error"])

        result = response.get("result")
        if not isinstance(result, dict):
            raise MalformedResponseError(response)
        # Contract panics come back inside the result
        if result.get("error"):
            raise RpcError(result["error"])

        raw = result.get("result")
        if not isinstance(raw, list):
            raise MalformedResponseError(response)
        return json.loads(bytes(raw).decode("utf-8"))

    async def view_account(self, account_id: str) -> RpcResponse:
        """Raw `view_account` query for an account."""
        return await self.request(
            "query",
            {
                "request_type": "view_account",
                "finality": "final",
                "account_id": account_id,
            },
        )

    async def account_exists(self, account_id: str) -> bool:
        """Check if an account exists. Any RPC error counts as non-existent."""
        response = await self.view_account(account_id)
        return not response.get("error")

    async def get_balance(self, account_id: str) -> int:
        """
        Get the balance of an account.

        Returns:
            Balance in yoctoNEAR
        """
        response = await self.view_account(account_id)
        if response.get("error"):
            raise RpcError(response["error"])

        amount = (response.get("result") or {}).get("amount")
        if amount is None:
            raise MalformedResponseError(response)
        return int(amount)

    async def get_block_hash(self) -> str:
        """Get the hash of the latest block."""
        response = await self.request("status", [])
        sync_info = (response.get("result") or {}).get("sync_info") or {}
        block_hash = sync_info.get("latest_block_hash")
        if not block_hash:
            raise MalformedResponseError(response)
        return block_hash
