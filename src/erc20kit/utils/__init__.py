"""
erc20kit utilities.

Input validation, unit conversion and logging helpers shared across the
package.
"""

from erc20kit.utils.logging import (
    configure_logging,
    disable_logging,
    enable_debug,
    get_logger,
    set_level,
)
from erc20kit.utils.units import from_base_units, to_base_units
from erc20kit.utils.validation import (
    validate_address,
    validate_amount,
    validate_optional_amount,
)

__all__ = [
    # Structured logging
    "get_logger",
    "configure_logging",
    "set_level",
    "disable_logging",
    "enable_debug",
    # Units
    "to_base_units",
    "from_base_units",
    # Validation
    "validate_address",
    "validate_amount",
    "validate_optional_amount",
]
