"""Exception policy for host-toolkit boundary calls."""

from __future__ import annotations

import logging
from typing import TypeAlias

RecoverableHostErrors: TypeAlias = tuple[type[BaseException], ...]

# Failures a host canvas backend may raise while registering handlers or
# answering size queries. Anything else propagates.
RECOVERABLE_HOST_ERRORS: RecoverableHostErrors = (
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
    AttributeError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *args: object,
    level: int = logging.DEBUG,
) -> None:
    """Log a tolerated host failure together with its traceback."""
    logger.log(level, message, *args, exc_info=True)


__all__ = ["RECOVERABLE_HOST_ERRORS", "RecoverableHostErrors", "log_recoverable"]
