"""Precedence vocabulary for exception handlers.

Handlers for the same exception type run in precedence order, highest
first. Only five values have a symbolic name in the exception control
API; the integer boundaries live in one place, ``PrecedenceLevel``.
"""

import logging
from enum import IntEnum

from ..errors import PrecedenceError

logger = logging.getLogger(__name__)


class PrecedenceLevel(IntEnum):
    """Named precedence levels and their canonical integer values."""

    BUILT_IN = -100
    FRAMEWORK = -50
    DEFAULT = 0
    LOW = 50
    HIGH = 100


def resolve_level(value: int, strict: bool = False) -> PrecedenceLevel:
    """Map an integer precedence to its named level.

    Args:
        value: Requested precedence
        strict: Reject values that are not one of the canonical levels

    Returns:
        The matching level; DEFAULT for unrecognised values unless strict

    Raises:
        PrecedenceError: ``strict`` is set and ``value`` has no named level
    """
    try:
        return PrecedenceLevel(value)
    except ValueError:
        if strict:
            allowed = ", ".join(f"{level.value} ({level.name})" for level in PrecedenceLevel)
            raise PrecedenceError(f"Unknown precedence {value!r}; expected one of {allowed}")
        logger.debug("Precedence %r has no named level, using DEFAULT", value)
        return PrecedenceLevel.DEFAULT
