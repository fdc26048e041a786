import pytest

from erc20kit import (
    BaseFeeUnavailableError,
    ConfigurationError,
    RpcError,
    TransactionBuilder,
    UnsignedTransaction,
    ValidationError,
    compute_fees,
)

from .conftest import HOLESKY_CHAIN_ID, RECIPIENT, SENDER, FakeChainDataProvider, checksum


class TestComputeFees:
    def test_reference_quote(self):
        assert compute_fees(100, 1) == (1, 151)

    def test_zero_tip_is_floored(self):
        assert compute_fees(100, 0) == (1, 151)

    def test_negative_tip_is_floored(self):
        assert compute_fees(100, -5) == (1, 151)

    def test_headroom_truncates(self):
        # 7 * 150 / 100 = 10.5 -> 10
        assert compute_fees(7, 2) == (2, 12)

    def test_zero_base_fee(self):
        assert compute_fees(0, 3) == (3, 3)

    def test_values_beyond_64_bits(self):
        base_fee = 2**70 + 1
        tip, max_fee = compute_fees(base_fee, 2**65)
        assert tip == 2**65
        assert max_fee == base_fee * 150 // 100 + 2**65

    @pytest.mark.parametrize("base_fee", [0, 1, 2, 3, 99, 100, 101, 10**9 + 7, 2**200])
    @pytest.mark.parametrize("tip", [-1, 0, 1, 2, 10**9])
    def test_max_fee_never_below_tip(self, base_fee, tip):
        effective_tip, max_fee = compute_fees(base_fee, tip)
        assert effective_tip >= 1
        assert max_fee >= effective_tip


class TestBuildTransaction:
    def test_assembles_all_fields(self, builder, provider):
        tx = builder.build_transaction(SENDER, RECIPIENT, 5, b"\x01\x02")

        assert isinstance(tx, UnsignedTransaction)
        assert tx.chain_id == HOLESKY_CHAIN_ID
        assert tx.nonce == 7
        assert tx.gas_limit == 52_000
        assert tx.max_priority_fee_per_gas == 1
        assert tx.max_fee_per_gas == 151
        assert tx.to == checksum(RECIPIENT)
        assert tx.value == 5
        assert tx.data == b"\x01\x02"

    def test_queries_chain_state_in_order(self, builder, provider):
        builder.build_transaction(SENDER, RECIPIENT, None, b"")

        assert provider.call_names == [
            "chain_id",
            "pending_nonce",
            "estimate_gas",
            "suggested_priority_fee",
            "latest_header",
        ]

    def test_nonce_and_estimate_use_sender(self, builder, provider):
        builder.build_transaction(SENDER, RECIPIENT, 9, b"\xab")

        calls = dict(provider.calls)
        assert calls["pending_nonce"] == (checksum(SENDER),)
        assert calls["estimate_gas"] == (checksum(SENDER), checksum(RECIPIENT), 9, b"\xab")

    def test_absent_value_becomes_zero(self, builder, provider):
        tx = builder.build_transaction(SENDER, RECIPIENT)

        assert tx.value == 0
        assert dict(provider.calls)["estimate_gas"][2] == 0

    def test_zero_tip_suggestion_is_floored(self):
        builder = TransactionBuilder(FakeChainDataProvider(tip=0, base_fee=100))
        tx = builder.build_transaction(SENDER, RECIPIENT)

        assert tx.max_priority_fee_per_gas == 1
        assert tx.max_fee_per_gas == 151

    def test_large_tip_passes_through(self):
        builder = TransactionBuilder(FakeChainDataProvider(tip=2_000_000_000, base_fee=30_000_000_000))
        tx = builder.build_transaction(SENDER, RECIPIENT)

        assert tx.max_priority_fee_per_gas == 2_000_000_000
        assert tx.max_fee_per_gas == 45_000_000_000 + 2_000_000_000

    def test_missing_base_fee_fails(self):
        builder = TransactionBuilder(FakeChainDataProvider(base_fee=None, block_number=42))

        with pytest.raises(BaseFeeUnavailableError) as exc_info:
            builder.build_transaction(SENDER, RECIPIENT)

        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.block_number == 42

    def test_gas_estimate_failure_aborts_before_pricing(self):
        reverted = RpcError("eth_estimateGas failed: execution reverted")
        provider = FakeChainDataProvider(gas=reverted)

        with pytest.raises(RpcError) as exc_info:
            TransactionBuilder(provider).build_transaction(SENDER, RECIPIENT)

        assert exc_info.value is reverted
        assert "suggested_priority_fee" not in provider.call_names
        assert "latest_header" not in provider.call_names

    def test_wrong_checksum_rejected_before_any_call(self):
        provider = FakeChainDataProvider()

        with pytest.raises(ValidationError, match="to has an invalid EIP-55 checksum"):
            TransactionBuilder(provider).build_transaction(
                SENDER, "0xDAC17F958D2ee523a2206206994597C13D831ec7"
            )

        assert provider.calls == []

    @pytest.mark.parametrize(
        "failing",
        ["chain_id", "nonce", "gas", "tip", "base_fee"],
    )
    def test_provider_errors_propagate_unchanged(self, failing):
        error = ConnectionError(f"{failing} unavailable")
        provider = FakeChainDataProvider(**{failing: error})

        with pytest.raises(ConnectionError) as exc_info:
            TransactionBuilder(provider).build_transaction(SENDER, RECIPIENT)

        assert exc_info.value is error

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"from_address": "0x1234", "to": RECIPIENT},
            {"from_address": SENDER, "to": "not-an-address"},
            {"from_address": SENDER, "to": ""},
            {"from_address": SENDER, "to": RECIPIENT, "value": -1},
            {"from_address": SENDER, "to": RECIPIENT, "value": 2**256},
            {"from_address": SENDER, "to": RECIPIENT, "data": "0xa9059cbb"},
        ],
    )
    def test_caller_errors_fail_before_any_rpc(self, builder, provider, kwargs):
        with pytest.raises(ValidationError):
            builder.build_transaction(**kwargs)

        assert provider.calls == []

    def test_every_build_reads_fresh_state(self, builder, provider):
        first = builder.build_transaction(SENDER, RECIPIENT)
        provider._nonce = 8
        provider._base_fee = 200
        second = builder.build_transaction(SENDER, RECIPIENT)

        assert first.nonce == 7
        assert second.nonce == 8
        assert second.max_fee_per_gas == 301
        assert provider.call_names.count("chain_id") == 2
