"""
Structured logging for erc20kit.

Thin layer over the standard library: every module logger lives under the
``erc20kit`` namespace so applications can tune the whole package at once.
Context goes in ``extra=``; private keys and raw signatures never do.

Example:
    ```python
    from erc20kit.utils.logging import configure_logging, get_logger

    configure_logging("DEBUG")
    _logger = get_logger(__name__)
    _logger.debug("Fee quote", extra={"max_fee_per_gas": 151})
    ```
"""

from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "erc20kit"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``erc20kit`` namespace."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again replaces the previous handler instead of stacking them.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(logger.handlers):
        if getattr(existing, "_erc20kit_handler", False):
            logger.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    handler._erc20kit_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def set_level(level: Union[int, str]) -> None:
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def disable_logging() -> None:
    logging.getLogger(ROOT_LOGGER_NAME).disabled = True


def enable_debug() -> None:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.disabled = False
    logger.setLevel(logging.DEBUG)
