__all__ = [
    "Erc20KitError",
    "ValidationError",
    "ConfigurationError",
    "BaseFeeUnavailableError",
    "RpcError",
    "SigningError",
]


class Erc20KitError(Exception):
    """Base exception for erc20kit."""


class ValidationError(Erc20KitError):
    """Raised when caller input is rejected before any network call."""


class ConfigurationError(Erc20KitError):
    """Raised when the connected chain cannot support the requested operation."""


class BaseFeeUnavailableError(ConfigurationError):
    """Raised when the latest block header carries no base fee.

    EIP-1559 pricing needs ``baseFeePerGas``; a chain that does not report it
    is not London-compatible and the build is aborted instead of guessing.

    Attributes:
        block_number: Number of the header that lacked the field, if known
    """

    def __init__(self, block_number=None):
        self.block_number = block_number
        where = f" (block {block_number})" if block_number is not None else ""
        super().__init__(f"base fee is required for EIP-1559 pricing but header has none{where}")


class RpcError(Erc20KitError):
    """Raised when an RPC/provider request fails."""


class SigningError(Erc20KitError):
    """Raised when a transaction cannot be signed or the signature is rejected."""
