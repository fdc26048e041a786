"""EIP-1559 transaction builder.

Assembles an ``UnsignedTransaction`` from a fresh snapshot of chain state:

1. chain id
2. sender's pending nonce
3. gas limit from simulation (a revert aborts the build)
4. priority fee suggestion, floored at 1 wei
5. latest base fee (mandatory)
6. ``max_fee = base_fee * 150 // 100 + tip``

Nothing is cached and nothing is retried; the first provider failure is
re-raised as-is and no partial transaction is returned.
"""

from typing import Optional, Tuple, Union

from eth_typing import ChecksumAddress

from .constants import (
    BASE_FEE_MULTIPLIER_DENOMINATOR,
    BASE_FEE_MULTIPLIER_NUMERATOR,
    MIN_PRIORITY_FEE,
)
from .errors import BaseFeeUnavailableError, ValidationError
from .models import UnsignedTransaction
from .provider import ChainDataProvider
from .utils.logging import get_logger
from .utils.validation import validate_address, validate_optional_amount

__all__ = ["TransactionBuilder", "compute_fees"]

_logger = get_logger(__name__)


def compute_fees(base_fee: int, suggested_tip: int) -> Tuple[int, int]:
    """Derive ``(max_priority_fee_per_gas, max_fee_per_gas)``.

    The base fee gets 50% headroom (integer floor division) to survive a few
    blocks of base-fee growth between submission and inclusion.

    Example:
        >>> compute_fees(100, 0)
        (1, 151)
    """
    tip = max(suggested_tip, MIN_PRIORITY_FEE)
    adjusted_base_fee = base_fee * BASE_FEE_MULTIPLIER_NUMERATOR // BASE_FEE_MULTIPLIER_DENOMINATOR
    return tip, adjusted_base_fee + tip


class TransactionBuilder:
    """Builds unsigned EIP-1559 transactions priced from live chain state."""

    def __init__(self, provider: ChainDataProvider):
        self.provider = provider

    def build_transaction(
        self,
        from_address: Union[str, bytes],
        to: Union[str, bytes],
        value: Optional[int] = None,
        data: bytes = b"",
    ) -> UnsignedTransaction:
        """Build an unsigned transaction from ``from_address`` to ``to``.

        Args:
            from_address: Sender; used for nonce lookup and gas simulation
            to: Recipient or contract address
            value: Wei to attach; ``None`` for a pure contract call
            data: Call data

        Returns:
            Unsigned transaction ready for ``TransactionSigner.sign``

        Raises:
            ValidationError: If an address or the value is malformed
            BaseFeeUnavailableError: If the latest header has no base fee
            Exception: Whatever the provider raised, unchanged
        """
        sender: ChecksumAddress = validate_address(from_address, "from_address")
        recipient: ChecksumAddress = validate_address(to, "to")
        wei = validate_optional_amount(value, "value")
        if not isinstance(data, (bytes, bytearray)):
            raise ValidationError("data must be bytes")
        payload = bytes(data)

        chain_id = self.provider.chain_id()
        nonce = self.provider.pending_nonce(sender)
        gas_limit = self.provider.estimate_gas(sender, recipient, wei, payload)
        suggested_tip = self.provider.suggested_priority_fee()

        header = self.provider.latest_header()
        if header.base_fee is None:
            raise BaseFeeUnavailableError(header.number)

        tip, max_fee_per_gas = compute_fees(header.base_fee, suggested_tip)
        _logger.debug(
            "Fee quote",
            extra={
                "chain_id": chain_id,
                "base_fee": header.base_fee,
                "suggested_tip": suggested_tip,
                "max_priority_fee_per_gas": tip,
                "max_fee_per_gas": max_fee_per_gas,
                "gas_limit": gas_limit,
            },
        )

        return UnsignedTransaction(
            chain_id=chain_id,
            nonce=nonce,
            max_priority_fee_per_gas=tip,
            max_fee_per_gas=max_fee_per_gas,
            gas_limit=gas_limit,
            to=recipient,
            value=wei,
            data=payload,
        )
