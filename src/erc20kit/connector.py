"""Ethereum connector facade.

Wires a chain-data provider to the builder, signer and ERC-20 encoder, and
adds broadcasting. Connection setup and key custody stay with the caller.

Example:
    >>> from erc20kit import EthereumConnector, Network
    >>> conn = EthereumConnector.from_network(Network.HOLESKY)
    >>> tx = conn.erc20.transfer(conn.config.usdc, sender, recipient, 10**18)
    >>> tx_hash = conn.sign_and_send(tx, private_key)
"""

from typing import Optional, Union

from .builder import TransactionBuilder
from .config import Network, NetworkConfig, ProviderSettings, get_network_config
from .constants import PROVIDER_TIMEOUT_SECONDS
from .erc20 import ERC20
from .models import SignedTransaction, UnsignedTransaction
from .provider import ChainDataProvider, Web3ChainDataProvider
from .signer import TransactionSigner
from .utils.logging import get_logger

__all__ = ["EthereumConnector"]

_logger = get_logger(__name__)


class EthereumConnector:
    """Builder, signer and ERC-20 encoder sharing one provider."""

    def __init__(
        self,
        provider: ChainDataProvider,
        signer: Optional[TransactionSigner] = None,
        config: Optional[NetworkConfig] = None,
    ):
        self.provider = provider
        self.config = config
        self.builder = TransactionBuilder(provider)
        self.signer = signer or TransactionSigner()
        self.erc20 = ERC20(self.builder)

    @classmethod
    def from_network(
        cls,
        network: Network,
        rpc_url: Optional[str] = None,
        timeout: int = PROVIDER_TIMEOUT_SECONDS,
    ) -> "EthereumConnector":
        config = get_network_config(network, rpc_url)
        settings = ProviderSettings(rpc_url=config.rpc_url, timeout=timeout)
        return cls(Web3ChainDataProvider.from_settings(settings), config=config)

    def build_transaction(
        self,
        from_address: Union[str, bytes],
        to: Union[str, bytes],
        value: Optional[int] = None,
        data: bytes = b"",
    ) -> UnsignedTransaction:
        return self.builder.build_transaction(from_address, to, value, data)

    def sign(self, tx: UnsignedTransaction, private_key: Union[str, bytes]) -> SignedTransaction:
        return self.signer.sign(tx, private_key)

    def send(self, signed: SignedTransaction) -> str:
        """Broadcast ``signed`` and return its hash as 0x-prefixed hex.

        The locally computed hash is returned; a node that echoes a
        different one is logged, not trusted.
        """
        returned = self.provider.broadcast(signed.raw_transaction)
        if returned and bytes(returned) != signed.hash:
            _logger.warning(
                "Node returned unexpected transaction hash",
                extra={"expected": signed.tx_hash, "returned": "0x" + bytes(returned).hex()},
            )
        _logger.info(
            "Transaction sent",
            extra={"tx_hash": signed.tx_hash, "nonce": signed.transaction.nonce, "sender": signed.sender},
        )
        return signed.tx_hash

    def sign_and_send(self, tx: UnsignedTransaction, private_key: Union[str, bytes]) -> str:
        return self.send(self.sign(tx, private_key))
