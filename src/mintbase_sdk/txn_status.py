"""Transaction status resolution from NEAR receipt outcomes."""

from typing import Any

from ._exceptions import MalformedResponseError, RpcError
from .async_rpc import AsyncNearRpc, RpcResponse
from .types import TxnStatus, TxnStatusResult


def _status_markers(outcome: Any, response: RpcResponse) -> set[str]:
    # ExecutionStatusView is either a bare variant name ("Unknown") or a
    # single-key object ({"Failure": {...}}, {"SuccessValue": ""}).
    execution = outcome.get("outcome") if isinstance(outcome, dict) else None
    status = execution.get("status") if isinstance(execution, dict) else None
    if isinstance(status, str) and status:
        return {status}
    if isinstance(status, dict):
        return set(status)
    raise MalformedResponseError(response)


def reduce_receipts_outcome(response: RpcResponse) -> TxnStatus:
    """
    Reduce a `tx` RPC response to a single status.

    Every outcome is inspected. Failure wins over pending, pending wins
    over success.

    Raises:
        RpcError: If the response carries an error
        MalformedResponseError: If receipts_outcome or an outcome status is missing
    """
    if response.get("error"):
        raise RpcError(response["error"])

    result = response.get("result")
    outcomes = result.get("receipts_outcome") if isinstance(result, dict) else None
    if not isinstance(outcomes, list):
        raise MalformedResponseError(response)

    failure = False
    pending = False
    for outcome in outcomes:
        markers = _status_markers(outcome, response)
        if "Unknown" in markers:
            pending = True
        if "Failure" in markers:
            failure = True

    if failure:
        return "failure"
    if pending:
        return "pending"
    return "success"


async def resolve_txn_status(rpc: AsyncNearRpc, txn_hash: str, sender_id: str) -> TxnStatus:
    """
    Look up a transaction and report whether it is pending, succeeded or failed.

    Args:
        rpc: Transport to the NEAR node
        txn_hash: Transaction hash (base58)
        sender_id: Account that signed the transaction

    Returns:
        "pending", "success" or "failure"

    Raises:
        RpcError: If the node answers with an error
        MalformedResponseError: If the response has no usable receipt outcomes
    """
    response = await rpc.request("tx", [txn_hash, sender_id])
    return reduce_receipts_outcome(response)


async def get_txn_status(rpc: AsyncNearRpc, txn_hash: str, sender_id: str) -> TxnStatusResult:
    """
    Non-raising variant of resolve_txn_status.

    - On success: returns RESOLVED with txn_status set
    - On error: returns FAILED with reason rpc_error, malformed_response
      or network_error
    """
    try:
        txn_status = await resolve_txn_status(rpc, txn_hash, sender_id)
    except RpcError as e:
        return TxnStatusResult(status="FAILED", reason="rpc_error", message=str(e))
    except MalformedResponseError as e:
        return TxnStatusResult(status="FAILED", reason="malformed_response", message=str(e))
    except Exception as e:
        # Transport errors (connection refused, HTTP status, timeouts)
        return TxnStatusResult(status="FAILED", reason="network_error", message=str(e))

    return TxnStatusResult(status="RESOLVED", txn_status=txn_status)
