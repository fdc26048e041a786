"""Transaction signing with the London (EIP-1559) signing scheme.

The signing digest is ``keccak256(0x02 || rlp([chain_id, nonce, tip,
max_fee, gas, to, value, data, access_list]))``. The chain id lives inside
the digest, so a signature for one chain is useless on another.
"""

from typing import Optional, Union

import rlp
from eth_account import Account
from eth_keys import keys
from eth_keys.exceptions import BadSignature
from eth_keys.exceptions import ValidationError as KeyValidationError
from eth_typing import ChecksumAddress
from web3 import Web3

from .constants import DYNAMIC_FEE_TX_TYPE
from .errors import SigningError
from .models import SignedTransaction, UnsignedTransaction

__all__ = ["TransactionSigner", "signing_hash", "recover_sender"]


def signing_hash(tx: UnsignedTransaction) -> bytes:
    """Chain-bound digest an EIP-1559 signature commits to."""
    fields = [
        tx.chain_id,
        tx.nonce,
        tx.max_priority_fee_per_gas,
        tx.max_fee_per_gas,
        tx.gas_limit,
        bytes.fromhex(tx.to[2:]),
        tx.value,
        tx.data,
        [],  # access list
    ]
    return bytes(Web3.keccak(bytes([DYNAMIC_FEE_TX_TYPE]) + rlp.encode(fields)))


def _recover(digest: bytes, v: int, r: int, s: int) -> Optional[ChecksumAddress]:
    try:
        signature = keys.Signature(vrs=(v, r, s))
        return signature.recover_public_key_from_msg_hash(digest).to_checksum_address()
    except (BadSignature, KeyValidationError):
        return None


def recover_sender(signed: SignedTransaction) -> ChecksumAddress:
    """Recover the signer of ``signed`` from its chain-bound digest.

    Raises:
        SigningError: If the signature does not recover to any key
    """
    sender = _recover(signing_hash(signed.transaction), signed.v, signed.r, signed.s)
    if sender is None:
        raise SigningError("signature does not recover to a public key")
    return sender


class TransactionSigner:
    """Attaches secp256k1 ECDSA signatures to unsigned transactions."""

    def sign(self, tx: UnsignedTransaction, private_key: Union[str, bytes]) -> SignedTransaction:
        """Sign ``tx`` and return a new signed transaction.

        ``tx`` itself is left untouched.

        Raises:
            SigningError: If the key is malformed, signing fails, or the
                produced signature does not verify against the digest
        """
        # Sanitize private key errors to prevent key leakage in stack traces
        try:
            account = Account.from_key(private_key)
        except Exception:
            raise SigningError("Invalid private key format (key not shown for security)") from None

        try:
            signed = account.sign_transaction(tx.to_tx_params())
        except Exception as e:
            raise SigningError(f"failed to sign transaction: {e}") from e

        digest = signing_hash(tx)
        if _recover(digest, signed.v, signed.r, signed.s) != account.address:
            raise SigningError("signature attachment rejected: signature does not match signing digest")

        return SignedTransaction(
            transaction=tx,
            v=signed.v,
            r=signed.r,
            s=signed.s,
            raw_transaction=bytes(signed.raw_transaction),
            hash=bytes(signed.hash),
            sender=account.address,
        )
