"""
keystone
~~~~~~~~

Arbitrary-precision numerals and calendar date conversion.

Sub-packages
------------
keystone.precision   Whole, integer and rational value types.
keystone.numerals    Digit parsing and numeral-system rendering.
keystone.calendar    Gregorian and Hebrew date conversion.
"""

from __future__ import annotations

from keystone._contracts import ContractViolation

__version__ = "0.1.0"

__all__ = [
    "ContractViolation",
    "__version__",
]
