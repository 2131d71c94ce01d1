"""Tests for payout normalization and lookup."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from mintbase_sdk import MalformedResponseError, fetch_payouts, normalize_payout


class TestNormalizePayout:
    """Tests for normalize_payout."""

    def test_single_account(self) -> None:
        ui_payout = normalize_payout({"alice.near": "500000000000"}, "token:1")

        assert len(ui_payout.splits) == 1
        assert ui_payout.splits[0].account == "alice.near"
        assert ui_payout.splits[0].percent == 0.5
        assert ui_payout.token_id == "token:1"

    def test_placeholders(self) -> None:
        ui_payout = normalize_payout({"alice.near": "1000000000000"}, "1")

        assert ui_payout.royalties == []
        assert ui_payout.royalty_percent == 0
        assert ui_payout.split_percent == 100
        assert ui_payout.equal_accounts is True

    def test_preserves_account_order(self) -> None:
        payout = {"zed.near": "100000000000", "alice.near": "600000000000", "mia.near": "300000000000"}
        ui_payout = normalize_payout(payout, "1")

        assert [s.account for s in ui_payout.splits] == ["zed.near", "alice.near", "mia.near"]
        assert [s.percent for s in ui_payout.splits] == [0.1, 0.6, 0.3]

    def test_integer_amounts(self) -> None:
        ui_payout = normalize_payout({"alice.near": 250_000_000_000}, "1")
        assert ui_payout.splits[0].percent == 0.25

    def test_amounts_beyond_float_precision(self) -> None:
        ui_payout = normalize_payout({"alice.near": "10000000000000000"}, "1")
        assert ui_payout.splits[0].percent == 10_000

    def test_empty_payout(self) -> None:
        assert normalize_payout({}, "1").splits == []

    def test_camel_case_dump(self) -> None:
        dumped = normalize_payout({"alice.near": "500000000000"}, "1").model_dump(by_alias=True)

        assert dumped["royaltyPercent"] == 0
        assert dumped["splitPercent"] == 100
        assert dumped["tokenId"] == "1"
        assert dumped["equalAccounts"] is True
        assert dumped["splits"] == [{"account": "alice.near", "percent": 0.5}]


class TestFetchPayouts:
    """Tests for fetch_payouts."""

    @pytest.mark.asyncio
    async def test_calls_nft_payout(self) -> None:
        mock_rpc = MagicMock()
        mock_rpc.call_view_method = AsyncMock(return_value={"payout": {"alice.near": "500000000000"}})

        ui_payout = await fetch_payouts(mock_rpc, "store.mintbase1.near", "7")

        mock_rpc.call_view_method.assert_awaited_once_with(
            "store.mintbase1.near",
            "nft_payout",
            {"token_id": "7", "balance": "10000000000000000", "max_len_payout": 1000},
        )
        assert ui_payout.token_id == "7"
        assert ui_payout.splits[0].percent == 0.5

    @pytest.mark.asyncio
    async def test_missing_payout_field(self) -> None:
        mock_rpc = MagicMock()
        mock_rpc.call_view_method = AsyncMock(return_value={"unexpected": True})

        with pytest.raises(MalformedResponseError):
            await fetch_payouts(mock_rpc, "store.mintbase1.near", "7")

    @pytest.mark.asyncio
    async def test_null_view_result(self) -> None:
        mock_rpc = MagicMock()
        mock_rpc.call_view_method = AsyncMock(return_value=None)

        with pytest.raises(MalformedResponseError):
            await fetch_payouts(mock_rpc, "store.mintbase1.near", "7")
