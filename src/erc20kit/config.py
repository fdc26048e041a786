import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import PROVIDER_TIMEOUT_SECONDS, RPC_URL_ENV_VAR

__all__ = ["Network", "NetworkConfig", "NETWORKS", "ProviderSettings", "get_network_config"]


class Network(str, Enum):
    MAINNET = "mainnet"
    HOLESKY = "holesky"


@dataclass
class NetworkConfig:
    name: Network
    chain_id: int
    rpc_url: str
    usdt: str
    usdc: str


NETWORKS: dict[Network, NetworkConfig] = {
    Network.MAINNET: NetworkConfig(
        name=Network.MAINNET,
        chain_id=1,
        rpc_url="https://ethereum-rpc.publicnode.com",
        usdt="0xdAC17F958D2ee523a2206206994597C13D831ec7",
        usdc="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
    ),
    Network.HOLESKY: NetworkConfig(
        name=Network.HOLESKY,
        chain_id=17000,
        rpc_url="https://ethereum-holesky-rpc.publicnode.com",
        # Test tokens, 18 decimals
        usdt="0xb27e39fb20333ac358e7fb37a9994f44f1a7f66b",
        usdc="0xb6fd173b7d71fae7413a7aa880d4cbd57d29908d",
    ),
}


class ProviderSettings(BaseModel):
    """
    Transport settings for the web3-backed chain-data provider.

    Example:
        ```python
        settings = ProviderSettings(rpc_url=os.environ["ETH_RPC_URL"], timeout=10)
        ```
    """

    model_config = ConfigDict(frozen=True)

    rpc_url: str = Field(
        ...,
        min_length=1,
        description="HTTP(S) JSON-RPC endpoint",
    )
    timeout: int = Field(
        default=PROVIDER_TIMEOUT_SECONDS,
        ge=1,
        description="Per-request HTTP timeout in seconds",
    )


def get_network_config(network: Network, rpc_url: Optional[str] = None) -> NetworkConfig:
    """Return the config for ``network``, overriding the RPC endpoint if asked.

    The endpoint is taken from ``rpc_url``, then the ``ETH_RPC_URL``
    environment variable, then the built-in default.
    """
    cfg = NETWORKS[network]
    rpc_url = rpc_url or os.environ.get(RPC_URL_ENV_VAR)
    if rpc_url:
        return NetworkConfig(
            name=cfg.name,
            chain_id=cfg.chain_id,
            rpc_url=rpc_url,
            usdt=cfg.usdt,
            usdc=cfg.usdc,
        )
    return cfg
