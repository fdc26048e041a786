from dataclasses import dataclass
from typing import Any, Dict, Optional

from eth_typing import ChecksumAddress

from .constants import DYNAMIC_FEE_TX_TYPE
from .errors import ValidationError
from .utils.validation import validate_address

__all__ = ["BlockHeader", "UnsignedTransaction", "SignedTransaction"]


@dataclass(frozen=True)
class BlockHeader:
    """The slice of a block header fee pricing needs.

    ``base_fee`` is ``None`` on chains that predate EIP-1559.
    """
    base_fee: Optional[int]
    number: Optional[int] = None


@dataclass(frozen=True)
class UnsignedTransaction:
    """EIP-1559 (type 2) transaction ready for signing.

    Built from a point-in-time snapshot of chain state; never reuse one
    across sends, the nonce and fees go stale.

    Attributes:
        chain_id: Network identifier bound into the signing digest
        nonce: Sender's pending transaction count
        max_priority_fee_per_gas: Tip offered to the block producer (wei)
        max_fee_per_gas: Fee ceiling per gas (wei), never below the tip
        gas_limit: Gas allowance from simulation
        to: Recipient or contract address
        value: Ether attached (wei)
        data: Call data
    """
    chain_id: int
    nonce: int
    max_priority_fee_per_gas: int
    max_fee_per_gas: int
    gas_limit: int
    to: ChecksumAddress
    value: int = 0
    data: bytes = b""

    def __post_init__(self) -> None:
        for name in ("chain_id", "nonce", "max_priority_fee_per_gas", "max_fee_per_gas", "gas_limit", "value"):
            field_value = getattr(self, name)
            if isinstance(field_value, bool) or not isinstance(field_value, int):
                raise ValidationError(f"{name} must be an integer")
            if field_value < 0:
                raise ValidationError(f"{name} must be non-negative")
        if self.max_fee_per_gas < self.max_priority_fee_per_gas:
            raise ValidationError(
                f"max_fee_per_gas ({self.max_fee_per_gas}) is below "
                f"max_priority_fee_per_gas ({self.max_priority_fee_per_gas})"
            )
        if not isinstance(self.data, (bytes, bytearray)):
            raise ValidationError("data must be bytes")
        object.__setattr__(self, "data", bytes(self.data))
        object.__setattr__(self, "to", validate_address(self.to, "to"))

    def to_tx_params(self) -> Dict[str, Any]:
        """Transaction dict in the shape eth-account signs."""
        return {
            "type": DYNAMIC_FEE_TX_TYPE,
            "chainId": self.chain_id,
            "nonce": self.nonce,
            "maxPriorityFeePerGas": self.max_priority_fee_per_gas,
            "maxFeePerGas": self.max_fee_per_gas,
            "gas": self.gas_limit,
            "to": self.to,
            "value": self.value,
            "data": "0x" + self.data.hex(),
            "accessList": [],
        }


@dataclass(frozen=True)
class SignedTransaction:
    transaction: UnsignedTransaction
    v: int
    r: int
    s: int
    raw_transaction: bytes
    hash: bytes
    sender: ChecksumAddress

    @property
    def tx_hash(self) -> str:
        return "0x" + self.hash.hex()

    @property
    def raw_transaction_hex(self) -> str:
        return "0x" + self.raw_transaction.hex()
