"""Hand-rolled ABI call-data encoding for fixed-width arguments.

Call data is a 4-byte function selector followed by 32-byte argument words,
in signature order. Only static ``address`` and ``uint256`` words are
needed for ERC-20, so no schema compiler or ABI JSON is involved.
"""

from typing import Dict, List, Tuple, Union

from eth_typing import ChecksumAddress
from web3 import Web3

from .constants import (
    ABI_SELECTOR_LENGTH,
    ABI_WORD_LENGTH,
    ADDRESS_LENGTH,
    ALLOWANCE_SIGNATURE,
    APPROVE_SIGNATURE,
    BALANCE_OF_SIGNATURE,
    TRANSFER_FROM_SIGNATURE,
    TRANSFER_SIGNATURE,
)
from .errors import ValidationError
from .utils.validation import validate_address, validate_amount

__all__ = [
    "function_selector",
    "encode_address",
    "encode_uint256",
    "encode_call",
    "decode_uint256",
    "decode_address",
    "split_call_data",
    "ERC20_SELECTORS",
]


def function_selector(signature: str) -> bytes:
    """First 4 bytes of Keccak-256 over the canonical signature.

    NOTE: Keccak-256 != SHA3-256 (NIST). Never use hashlib.sha3_256 here.
    """
    if not signature or " " in signature or "(" not in signature or not signature.endswith(")"):
        raise ValidationError(f"not a canonical function signature: {signature!r}")
    return bytes(Web3.keccak(text=signature)[:ABI_SELECTOR_LENGTH])


def encode_address(address: Union[str, bytes], field: str = "address") -> bytes:
    checksummed = validate_address(address, field)
    raw = bytes.fromhex(checksummed[2:])
    return raw.rjust(ABI_WORD_LENGTH, b"\x00")


def encode_uint256(value: int, field: str = "amount") -> bytes:
    validate_amount(value, field)
    return value.to_bytes(ABI_WORD_LENGTH, "big")


def encode_call(signature: str, *words: bytes) -> bytes:
    """Concatenate the selector for ``signature`` with pre-encoded words."""
    for index, word in enumerate(words):
        if len(word) != ABI_WORD_LENGTH:
            raise ValidationError(f"argument {index} is {len(word)} bytes, expected {ABI_WORD_LENGTH}")
    return function_selector(signature) + b"".join(words)


def decode_uint256(raw: bytes) -> int:
    """Interpret return data as a big-endian unsigned integer.

    Empty return data decodes to 0.
    """
    return int.from_bytes(bytes(raw), "big")


def decode_address(word: bytes) -> ChecksumAddress:
    if len(word) != ABI_WORD_LENGTH:
        raise ValidationError(f"address word must be {ABI_WORD_LENGTH} bytes")
    padding = ABI_WORD_LENGTH - ADDRESS_LENGTH
    if any(word[:padding]):
        raise ValidationError("address word has non-zero padding")
    return Web3.to_checksum_address(word[padding:])


def split_call_data(data: bytes) -> Tuple[bytes, List[bytes]]:
    """Split call data into its selector and 32-byte argument words."""
    data = bytes(data)
    if len(data) < ABI_SELECTOR_LENGTH:
        raise ValidationError("call data shorter than a selector")
    body = data[ABI_SELECTOR_LENGTH:]
    if len(body) % ABI_WORD_LENGTH:
        raise ValidationError("call data arguments are not word-aligned")
    words = [body[i:i + ABI_WORD_LENGTH] for i in range(0, len(body), ABI_WORD_LENGTH)]
    return data[:ABI_SELECTOR_LENGTH], words


ERC20_SELECTORS: Dict[str, bytes] = {
    "balanceOf": function_selector(BALANCE_OF_SIGNATURE),
    "transfer": function_selector(TRANSFER_SIGNATURE),
    "approve": function_selector(APPROVE_SIGNATURE),
    "allowance": function_selector(ALLOWANCE_SIGNATURE),
    "transferFrom": function_selector(TRANSFER_FROM_SIGNATURE),
}
