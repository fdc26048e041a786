"""Shared fixtures: a scripted chain-data provider and well-known addresses."""

from typing import Any, List, Optional, Tuple

import pytest
from web3 import Web3

from erc20kit import BlockHeader, EthereumConnector, TransactionBuilder

# Private key for tests (DO NOT USE IN PRODUCTION)
TEST_PRIVATE_KEY = "0x" + "11" * 32

SENDER = "0x94b6d081b604953fe0720046d4d8023291a91656"
RECIPIENT = "0x646d15ccc9157ee02a51747a6fd5d8b914f655f0"
SPENDER = "0x38c108cebf53edd0b025d6390ff7eb473d98babe"
TOKEN = "0xb27e39fb20333ac358e7fb37a9994f44f1a7f66b"

HOLESKY_CHAIN_ID = 17000

checksum = Web3.to_checksum_address


class FakeChainDataProvider:
    """Deterministic provider; records every call in ``calls``.

    Any value may be replaced by an exception instance, which is raised when
    the corresponding method is called.
    """

    def __init__(
        self,
        chain_id: Any = HOLESKY_CHAIN_ID,
        nonce: Any = 7,
        gas: Any = 52_000,
        tip: Any = 1,
        base_fee: Any = 100,
        block_number: Optional[int] = 123,
        call_result: Any = b"",
        broadcast_result: Any = None,
    ):
        self._chain_id = chain_id
        self._nonce = nonce
        self._gas = gas
        self._tip = tip
        self._base_fee = base_fee
        self._block_number = block_number
        self._call_result = call_result
        self._broadcast_result = broadcast_result
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.broadcasts: List[bytes] = []

    def _answer(self, name: str, value: Any, *args: Any) -> Any:
        self.calls.append((name, args))
        if isinstance(value, Exception):
            raise value
        return value

    @property
    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def chain_id(self) -> int:
        return self._answer("chain_id", self._chain_id)

    def pending_nonce(self, address):
        return self._answer("pending_nonce", self._nonce, address)

    def estimate_gas(self, from_address, to, value, data):
        return self._answer("estimate_gas", self._gas, from_address, to, value, data)

    def suggested_priority_fee(self) -> int:
        return self._answer("suggested_priority_fee", self._tip)

    def latest_header(self) -> BlockHeader:
        if isinstance(self._base_fee, Exception):
            return self._answer("latest_header", self._base_fee)
        return self._answer("latest_header", BlockHeader(base_fee=self._base_fee, number=self._block_number))

    def call(self, to, data) -> bytes:
        return self._answer("call", self._call_result, to, data)

    def broadcast(self, raw_transaction: bytes) -> bytes:
        self.broadcasts.append(raw_transaction)
        return self._answer("broadcast", self._broadcast_result, raw_transaction)


@pytest.fixture()
def provider() -> FakeChainDataProvider:
    return FakeChainDataProvider()


@pytest.fixture()
def builder(provider) -> TransactionBuilder:
    return TransactionBuilder(provider)


@pytest.fixture()
def connector(provider) -> EthereumConnector:
    return EthereumConnector(provider)
