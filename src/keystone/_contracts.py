"""
Single reporting point for programmer errors.

Everything that indicates a logic error in the caller or in keystone itself
(out-of-range calendar components, numerals outside a numeral system,
malformed digit tables, unreachable branches) ends up in
:func:`contract_violation`. Recoverable input errors never come through here.
"""

from __future__ import annotations

import logging
from typing import NoReturn

logger = logging.getLogger(__name__)


class ContractViolation(AssertionError):
    """Raised when a precondition of the library is violated."""


def contract_violation(message: str) -> NoReturn:
    logger.critical("Contract violation: %s", message)
    raise ContractViolation(message)
