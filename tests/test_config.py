import pytest
from pydantic import ValidationError

from erc20kit import NETWORKS, PROVIDER_TIMEOUT_SECONDS, Network, ProviderSettings, get_network_config


def test_known_networks():
    assert NETWORKS[Network.MAINNET].chain_id == 1
    assert NETWORKS[Network.HOLESKY].chain_id == 17000
    assert NETWORKS[Network.MAINNET].usdt == "0xdAC17F958D2ee523a2206206994597C13D831ec7"


def test_default_rpc_url(monkeypatch):
    monkeypatch.delenv("ETH_RPC_URL", raising=False)
    assert get_network_config(Network.HOLESKY) is NETWORKS[Network.HOLESKY]


def test_env_override(monkeypatch):
    monkeypatch.setenv("ETH_RPC_URL", "http://node.internal:8545")
    cfg = get_network_config(Network.MAINNET)

    assert cfg.rpc_url == "http://node.internal:8545"
    assert cfg.chain_id == 1
    # shared defaults stay untouched
    assert NETWORKS[Network.MAINNET].rpc_url == "https://ethereum-rpc.publicnode.com"


def test_explicit_url_beats_env(monkeypatch):
    monkeypatch.setenv("ETH_RPC_URL", "http://node.internal:8545")
    assert get_network_config(Network.MAINNET, "http://other:8545").rpc_url == "http://other:8545"


class TestProviderSettings:
    def test_defaults(self):
        settings = ProviderSettings(rpc_url="http://localhost:8545")
        assert settings.timeout == PROVIDER_TIMEOUT_SECONDS

    def test_rejects_empty_url(self):
        with pytest.raises(ValidationError):
            ProviderSettings(rpc_url="")

    def test_rejects_zero_timeout(self):
        with pytest.raises(ValidationError):
            ProviderSettings(rpc_url="http://localhost:8545", timeout=0)

    def test_frozen(self):
        settings = ProviderSettings(rpc_url="http://localhost:8545")
        with pytest.raises(ValidationError):
            settings.timeout = 5
