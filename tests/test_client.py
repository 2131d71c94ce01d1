"""Tests for AsyncMintbaseClient.

These tests verify that the client fails fast on invalid configuration and
routes calls through its configuration and transport.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from mintbase_sdk import (
    RPC_URLS,
    AsyncMintbaseClient,
    ConfigurationError,
    MintIntent,
    NetworkNotSupportedError,
    TokenMetadata,
    ValidationError,
    ValidationErrorCode,
    get_rpc_url,
    is_supported_network,
)

STORE = "store.mintbase1.near"


def _create_client(**kwargs) -> tuple[AsyncMintbaseClient, MagicMock]:
    """Create a client with a mocked transport."""
    with patch("mintbase_sdk.async_client.AsyncNearRpc") as mock_rpc_class:
        mock_rpc = MagicMock()
        mock_rpc_class.return_value = mock_rpc
        client = AsyncMintbaseClient(**kwargs)
    return client, mock_rpc


class TestClientInitialization:
    """Tests for client initialization."""

    def test_rejects_unsupported_network(self) -> None:
        with pytest.raises(NetworkNotSupportedError) as exc_info:
            AsyncMintbaseClient(network="betanet")

        assert exc_info.value.network == "betanet"
        assert "betanet" in str(exc_info.value)

    def test_uses_public_endpoint_by_default(self) -> None:
        with patch("mintbase_sdk.async_client.AsyncNearRpc") as mock_rpc_class:
            client = AsyncMintbaseClient(network="testnet")

        mock_rpc_class.assert_called_once_with(RPC_URLS["testnet"])
        assert client.config.network == "testnet"
        assert client.contract_address is None

    def test_custom_rpc_url(self) -> None:
        with patch("mintbase_sdk.async_client.AsyncNearRpc") as mock_rpc_class:
            AsyncMintbaseClient(rpc_url="https://near.lava.build")

        mock_rpc_class.assert_called_once_with("https://near.lava.build")

    def test_default_contract_address(self) -> None:
        client, _ = _create_client(contract_address=STORE)
        assert client.contract_address == STORE
        assert client.config.contract_address == STORE


class TestConstants:
    """Tests for network helpers."""

    def test_get_rpc_url(self) -> None:
        assert get_rpc_url("mainnet") == "https://rpc.mainnet.near.org"
        assert get_rpc_url("testnet") == "https://rpc.testnet.near.org"

    def test_get_rpc_url_unsupported(self) -> None:
        with pytest.raises(NetworkNotSupportedError):
            get_rpc_url("localnet")

    def test_network_not_supported_is_configuration_error(self) -> None:
        assert issubclass(NetworkNotSupportedError, ConfigurationError)

    def test_is_supported_network(self) -> None:
        assert is_supported_network("mainnet") is True
        assert is_supported_network("testnet") is True
        assert is_supported_network("betanet") is False


class TestClientMint:
    """Tests for mint building through the client."""

    def test_mint_uses_default_contract(self) -> None:
        client, _ = _create_client(contract_address=STORE)

        result = client.mint(
            owner_id="bob.near",
            metadata=TokenMetadata(reference="r", media="m"),
            splits={"alice.near": 0.6, "bob.near": 0.4},
            royalty_percentage=0.1,
            amount=3,
        )

        assert result.status == "READY"
        assert result.call.contract_address == STORE
        assert result.call.args.num_to_mint == 3
        assert result.call.args.split_owners == {"alice.near": 6000, "bob.near": 4000}
        assert result.call.args.royalty_args.percentage == 1000

    def test_mint_without_contract(self) -> None:
        client, _ = _create_client()

        result = client.mint(owner_id="bob.near", metadata=TokenMetadata(reference="r", media="m"))

        assert result.status == "FAILED"
        assert result.reason == ValidationErrorCode.CONTRACT_ADDRESS

    def test_build_mint_call_raises(self) -> None:
        client, _ = _create_client(contract_address=STORE)
        intent = MintIntent(owner_id="bob.near", metadata=TokenMetadata(media="m"))

        with pytest.raises(ValidationError) as exc_info:
            client.build_mint_call(intent)

        assert exc_info.value.code == ValidationErrorCode.NO_REFERENCE


class TestClientQueries:
    """Tests for RPC-backed client methods."""

    @pytest.mark.asyncio
    async def test_get_txn_status(self) -> None:
        client, mock_rpc = _create_client()
        mock_rpc.request = AsyncMock(
            return_value={"result": {"receipts_outcome": [{"outcome": {"status": {"SuccessValue": ""}}}]}}
        )

        result = await client.get_txn_status("hash", "bob.near")

        assert result.status == "RESOLVED"
        assert result.txn_status == "success"
        mock_rpc.request.assert_awaited_once_with("tx", ["hash", "bob.near"])

    @pytest.mark.asyncio
    async def test_resolve_txn_status(self) -> None:
        client, mock_rpc = _create_client()
        mock_rpc.request = AsyncMock(return_value={"result": {"receipts_outcome": [{"outcome": {"status": "Unknown"}}]}})

        assert await client.resolve_txn_status("hash", "bob.near") == "pending"

    @pytest.mark.asyncio
    async def test_payouts_default_contract(self) -> None:
        client, mock_rpc = _create_client(contract_address=STORE)
        mock_rpc.call_view_method = AsyncMock(return_value={"payout": {"alice.near": "1000000000000"}})

        ui_payout = await client.payouts("42")

        assert ui_payout.splits[0].percent == 1.0
        assert mock_rpc.call_view_method.await_args.args[0] == STORE

    @pytest.mark.asyncio
    async def test_payouts_without_contract(self) -> None:
        client, _ = _create_client()
        with pytest.raises(ConfigurationError):
            await client.payouts("42")

    @pytest.mark.asyncio
    async def test_account_queries_delegate(self) -> None:
        client, mock_rpc = _create_client()
        mock_rpc.account_exists = AsyncMock(return_value=True)
        mock_rpc.get_balance = AsyncMock(return_value=10)
        mock_rpc.get_block_hash = AsyncMock(return_value="EfV8...")

        assert await client.account_exists("bob.near") is True
        assert await client.get_balance("bob.near") == 10
        assert await client.get_block_hash() == "EfV8..."

    @pytest.mark.asyncio
    async def test_context_manager_closes(self) -> None:
        client, mock_rpc = _create_client()
        mock_rpc.close = AsyncMock()

        async with client as entered:
            assert entered is client

        mock_rpc.close.assert_awaited_once()
