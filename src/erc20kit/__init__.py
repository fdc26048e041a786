from .abi import (
    ERC20_SELECTORS,
    decode_address,
    decode_uint256,
    encode_address,
    encode_call,
    encode_uint256,
    function_selector,
    split_call_data,
)
from .builder import TransactionBuilder, compute_fees
from .config import NETWORKS, Network, NetworkConfig, ProviderSettings, get_network_config
from .connector import EthereumConnector
from .constants import (
    ABI_SELECTOR_LENGTH,
    ABI_WORD_LENGTH,
    BASE_FEE_MULTIPLIER_DENOMINATOR,
    BASE_FEE_MULTIPLIER_NUMERATOR,
    MAX_UINT256,
    MIN_PRIORITY_FEE,
    PROVIDER_TIMEOUT_SECONDS,
)
from .erc20 import ERC20
from .errors import (
    BaseFeeUnavailableError,
    ConfigurationError,
    Erc20KitError,
    RpcError,
    SigningError,
    ValidationError,
)
from .models import BlockHeader, SignedTransaction, UnsignedTransaction
from .provider import ChainDataProvider, Web3ChainDataProvider
from .signer import TransactionSigner, recover_sender, signing_hash
from .utils.logging import configure_logging, get_logger
from .utils.units import from_base_units, to_base_units

__all__ = [
    # Core
    "EthereumConnector",
    "TransactionBuilder",
    "TransactionSigner",
    "ERC20",
    "compute_fees",
    "signing_hash",
    "recover_sender",
    # Provider
    "ChainDataProvider",
    "Web3ChainDataProvider",
    # Config
    "Network",
    "NetworkConfig",
    "NETWORKS",
    "ProviderSettings",
    "get_network_config",
    # Models
    "BlockHeader",
    "UnsignedTransaction",
    "SignedTransaction",
    # Errors
    "Erc20KitError",
    "ValidationError",
    "ConfigurationError",
    "BaseFeeUnavailableError",
    "RpcError",
    "SigningError",
    # ABI
    "ERC20_SELECTORS",
    "function_selector",
    "encode_address",
    "encode_uint256",
    "encode_call",
    "decode_uint256",
    "decode_address",
    "split_call_data",
    # Constants
    "ABI_SELECTOR_LENGTH",
    "ABI_WORD_LENGTH",
    "BASE_FEE_MULTIPLIER_NUMERATOR",
    "BASE_FEE_MULTIPLIER_DENOMINATOR",
    "MAX_UINT256",
    "MIN_PRIORITY_FEE",
    "PROVIDER_TIMEOUT_SECONDS",
    # Logging
    "configure_logging",
    "get_logger",
    # Units
    "to_base_units",
    "from_base_units",
]
