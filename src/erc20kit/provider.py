"""Chain-data provider capability and its web3.py implementation.

The builder and the ERC-20 encoder only ever talk to a ``ChainDataProvider``.
Tests inject a deterministic fake; production code wraps a ``Web3`` instance
with ``Web3ChainDataProvider``.
"""

from typing import Any, Callable, Optional, Protocol, TypeVar

from eth_typing import ChecksumAddress
from web3 import Web3

from .abi import decode_uint256
from .config import Network, ProviderSettings, get_network_config
from .constants import ABI_SELECTOR_LENGTH, ABI_WORD_LENGTH, PROVIDER_TIMEOUT_SECONDS, REVERT_SELECTOR
from .errors import RpcError
from .models import BlockHeader
from .utils.logging import get_logger

__all__ = ["ChainDataProvider", "Web3ChainDataProvider"]

_logger = get_logger(__name__)

T = TypeVar("T")


class ChainDataProvider(Protocol):
    def chain_id(self) -> int:
        ...

    def pending_nonce(self, address: ChecksumAddress) -> int:
        ...

    def estimate_gas(self, from_address: ChecksumAddress, to: ChecksumAddress, value: int, data: bytes) -> int:
        ...

    def suggested_priority_fee(self) -> int:
        ...

    def latest_header(self) -> BlockHeader:
        ...

    def call(self, to: ChecksumAddress, data: bytes) -> bytes:
        ...

    def broadcast(self, raw_transaction: bytes) -> bytes:
        ...


def _revert_reason(data: str) -> Optional[str]:
    """Message carried by a Solidity ``Error(string)`` revert, if ``data`` is one."""
    if not data.startswith(REVERT_SELECTOR):
        return None
    try:
        body = bytes.fromhex(data[2:])[ABI_SELECTOR_LENGTH:]
    except ValueError:
        return None
    if len(body) < 2 * ABI_WORD_LENGTH:
        return None
    start = decode_uint256(body[:ABI_WORD_LENGTH])
    length = decode_uint256(body[start : start + ABI_WORD_LENGTH])
    message = body[start + ABI_WORD_LENGTH : start + ABI_WORD_LENGTH + length]
    if len(message) != length:
        return None
    return message.decode("utf-8", errors="replace") or None


def _error_message(exc: Exception) -> str:
    """Best-effort human message for a web3/JSON-RPC failure."""
    reason = None
    payload = exc.args[0] if exc.args else None
    data = getattr(exc, "data", None)
    if isinstance(payload, dict):
        reason = payload.get("message") or payload.get("reason")
        data = data or payload.get("data")
    if isinstance(data, str):
        decoded = _revert_reason(data)
        if decoded:
            reason = decoded
    return reason or str(exc) or exc.__class__.__name__


class Web3ChainDataProvider:
    """``ChainDataProvider`` backed by a web3.py ``Web3`` instance.

    Every JSON-RPC failure is re-raised as ``RpcError`` with the original
    exception chained; nothing is retried.
    """

    def __init__(self, w3: Web3):
        self.w3 = w3

    @classmethod
    def from_settings(cls, settings: ProviderSettings) -> "Web3ChainDataProvider":
        # Configure HTTPProvider with timeout so a stalled node cannot hang the caller forever
        return cls(Web3(Web3.HTTPProvider(settings.rpc_url, request_kwargs={"timeout": settings.timeout})))

    @classmethod
    def from_network(
        cls,
        network: Network,
        rpc_url: Optional[str] = None,
        timeout: int = PROVIDER_TIMEOUT_SECONDS,
    ) -> "Web3ChainDataProvider":
        cfg = get_network_config(network, rpc_url)
        return cls.from_settings(ProviderSettings(rpc_url=cfg.rpc_url, timeout=timeout))

    def chain_id(self) -> int:
        return int(self._rpc("eth_chainId", lambda: self.w3.eth.chain_id))

    def pending_nonce(self, address: ChecksumAddress) -> int:
        return int(self._rpc("eth_getTransactionCount", self.w3.eth.get_transaction_count, address, "pending"))

    def estimate_gas(self, from_address: ChecksumAddress, to: ChecksumAddress, value: int, data: bytes) -> int:
        params = {
            "from": from_address,
            "to": to,
            "value": value,
            "data": "0x" + bytes(data).hex(),
        }
        return int(self._rpc("eth_estimateGas", self.w3.eth.estimate_gas, params))

    def suggested_priority_fee(self) -> int:
        return int(self._rpc("eth_maxPriorityFeePerGas", lambda: self.w3.eth.max_priority_fee))

    def latest_header(self) -> BlockHeader:
        block = self._rpc("eth_getBlockByNumber", self.w3.eth.get_block, "latest")
        base_fee = block.get("baseFeePerGas")
        return BlockHeader(
            base_fee=int(base_fee) if base_fee is not None else None,
            number=block.get("number"),
        )

    def call(self, to: ChecksumAddress, data: bytes) -> bytes:
        result = self._rpc("eth_call", self.w3.eth.call, {"to": to, "data": "0x" + bytes(data).hex()}, "latest")
        return bytes(result)

    def broadcast(self, raw_transaction: bytes) -> bytes:
        return bytes(self._rpc("eth_sendRawTransaction", self.w3.eth.send_raw_transaction, raw_transaction))

    def _rpc(self, method: str, fn: Callable[..., T], *args: Any) -> T:
        try:
            return fn(*args)
        except Exception as e:
            msg = _error_message(e)
            _logger.debug("RPC call failed", extra={"method": method, "error": msg})
            raise RpcError(f"{method} failed: {msg}") from e
