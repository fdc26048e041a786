"""ERC-20 token calls without a generated contract binding.

``ERC20`` holds a ``TransactionBuilder``. Reads (``balance_of``,
``allowance``) go straight to the builder's provider as ``eth_call``;
writes (``transfer``, ``approve``, ``transfer_from``) come back as unsigned
transactions addressed to the token contract with no ether attached.

Example:
    >>> erc20 = ERC20(TransactionBuilder(provider))
    >>> tx = erc20.transfer(token, sender, recipient, to_base_units(100, 18))
    >>> signed = TransactionSigner().sign(tx, private_key)
"""

from typing import Union

from eth_typing import ChecksumAddress

from .abi import decode_uint256, encode_address, encode_call, encode_uint256
from .builder import TransactionBuilder
from .constants import (
    ALLOWANCE_SIGNATURE,
    APPROVE_SIGNATURE,
    BALANCE_OF_SIGNATURE,
    TRANSFER_FROM_SIGNATURE,
    TRANSFER_SIGNATURE,
)
from .models import UnsignedTransaction
from .provider import ChainDataProvider
from .utils.validation import validate_address

__all__ = ["ERC20"]

AddressLike = Union[str, bytes]


class ERC20:
    """ERC-20 call encoder layered over a transaction builder."""

    def __init__(self, builder: TransactionBuilder):
        self.builder = builder

    @property
    def provider(self) -> ChainDataProvider:
        return self.builder.provider

    # ------------------------------------------------------------------
    # Call data
    # ------------------------------------------------------------------
    @staticmethod
    def encode_balance_of(account: AddressLike) -> bytes:
        return encode_call(BALANCE_OF_SIGNATURE, encode_address(account, "account"))

    @staticmethod
    def encode_transfer(to: AddressLike, amount: int) -> bytes:
        return encode_call(TRANSFER_SIGNATURE, encode_address(to, "to"), encode_uint256(amount))

    @staticmethod
    def encode_approve(spender: AddressLike, amount: int) -> bytes:
        return encode_call(APPROVE_SIGNATURE, encode_address(spender, "spender"), encode_uint256(amount))

    @staticmethod
    def encode_allowance(owner: AddressLike, spender: AddressLike) -> bytes:
        return encode_call(
            ALLOWANCE_SIGNATURE,
            encode_address(owner, "owner"),
            encode_address(spender, "spender"),
        )

    @staticmethod
    def encode_transfer_from(sender: AddressLike, receiver: AddressLike, amount: int) -> bytes:
        return encode_call(
            TRANSFER_FROM_SIGNATURE,
            encode_address(sender, "sender"),
            encode_address(receiver, "receiver"),
            encode_uint256(amount),
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def balance_of(self, contract_address: AddressLike, account: AddressLike) -> int:
        """Token balance of ``account`` in base units."""
        data = self.encode_balance_of(account)
        return self._read(contract_address, data)

    def allowance(self, contract_address: AddressLike, owner: AddressLike, spender: AddressLike) -> int:
        """Amount ``spender`` may still pull from ``owner``, in base units."""
        data = self.encode_allowance(owner, spender)
        return self._read(contract_address, data)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def transfer(
        self,
        contract_address: AddressLike,
        from_address: AddressLike,
        to: AddressLike,
        amount: int,
    ) -> UnsignedTransaction:
        """Build ``transfer(to, amount)`` sent by ``from_address``."""
        data = self.encode_transfer(to, amount)
        return self._write(contract_address, from_address, data)

    def approve(
        self,
        contract_address: AddressLike,
        from_address: AddressLike,
        spender: AddressLike,
        amount: int,
    ) -> UnsignedTransaction:
        """Build ``approve(spender, amount)``.

        ``MAX_UINT256`` is the conventional "unlimited" allowance.
        """
        data = self.encode_approve(spender, amount)
        return self._write(contract_address, from_address, data)

    def transfer_from(
        self,
        contract_address: AddressLike,
        from_address: AddressLike,
        sender: AddressLike,
        receiver: AddressLike,
        amount: int,
    ) -> UnsignedTransaction:
        """Build ``transferFrom(sender, receiver, amount)``.

        ``from_address`` is the spender submitting the transaction; it needs
        an allowance from ``sender`` of at least ``amount``.
        """
        data = self.encode_transfer_from(sender, receiver, amount)
        return self._write(contract_address, from_address, data)

    def _read(self, contract_address: AddressLike, data: bytes) -> int:
        contract: ChecksumAddress = validate_address(contract_address, "contract_address")
        return decode_uint256(self.provider.call(contract, data))

    def _write(self, contract_address: AddressLike, from_address: AddressLike, data: bytes) -> UnsignedTransaction:
        contract = validate_address(contract_address, "contract_address")
        return self.builder.build_transaction(from_address, contract, None, data)
