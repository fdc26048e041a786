"""
Validation utilities for erc20kit.

Provides input validation functions for:
- Ethereum addresses
- uint256 amounts (token quantities, wei values)

All validation functions raise ValidationError on failure. They run before
any provider call so a bad argument never costs a round-trip.
"""

from __future__ import annotations

from typing import Optional, Union

from eth_typing import ChecksumAddress
from web3 import Web3

from erc20kit.constants import MAX_UINT256
from erc20kit.errors import ValidationError


def validate_address(address: Union[str, bytes], field: str = "address") -> ChecksumAddress:
    """
    Validate an Ethereum address and normalise it.

    Accepts 0x-prefixed hex (lowercase, or mixed case with a valid EIP-55
    checksum) or 20 raw bytes.

    Args:
        address: Address to validate
        field: Field name for error messages

    Returns:
        EIP-55 checksummed address

    Raises:
        ValidationError: If address is missing or malformed
    """
    if not address:
        raise ValidationError(f"{field} is required")
    if not isinstance(address, (str, bytes)):
        raise ValidationError(f"{field} must be a hex string or 20 bytes")
    if not Web3.is_address(address):
        raise ValidationError(f"{field} must be a valid Ethereum address")
    if isinstance(address, str) and _is_mixed_case(address) and not Web3.is_checksum_address(address):
        raise ValidationError(f"{field} has an invalid EIP-55 checksum")
    return Web3.to_checksum_address(address)


def _is_mixed_case(address: str) -> bool:
    body = address[2:] if address[:2].lower() == "0x" else address
    return body != body.lower() and body != body.upper()


def validate_amount(amount: int, field: str = "amount") -> int:
    """
    Validate an amount fits an ABI uint256 word.

    Args:
        amount: Amount to validate
        field: Field name for error messages

    Returns:
        The amount, unchanged

    Raises:
        ValidationError: If amount is not an int, negative, or wider than 256 bits
    """
    # bool is an int subclass; True is not a token amount
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValidationError(f"{field} must be an integer")
    if amount < 0:
        raise ValidationError(f"{field} must be non-negative")
    if amount > MAX_UINT256:
        raise ValidationError(f"{field} exceeds uint256 range")
    return amount


def validate_optional_amount(amount: Optional[int], field: str = "value") -> int:
    """Validate an amount that may be absent; absence means zero."""
    if amount is None:
        return 0
    return validate_amount(amount, field)
