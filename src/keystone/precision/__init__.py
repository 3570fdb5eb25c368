"""
keystone.precision
~~~~~~~~~~~~~~~~~~

Arbitrary-precision whole numbers, integers and rational numbers, the
abstract arithmetic bases they implement, and discrete local-extremum
search.

Basic usage::

    from keystone.precision import Integer, RationalNumber, WholeNumber

    WholeNumber("1 000") + 24          # → WholeNumber(value=1024)
    Integer.parse_hexadecimal("−ff")   # → Integer(value=-255)
    Integer(-7) // 2, Integer(-7) % 2  # → Integer(-4), Integer(1)   (Euclid)
    RationalNumber.parse("0.125")      # → RationalNumber(value=Fraction(1, 8))
    RationalNumber(Fraction(2, 3)).in_digits(maximum_decimal_places=4)  # → "0.666 7"

Local search over any domain supporting ``+ 1`` / ``- 1``::

    from keystone.precision import find_local_minimum

    find_local_minimum(0, lambda x: (x - 7) ** 2, within=(0, 10))  # → 7

Public API
----------
WholeNumber, Integer, RationalNumber
Addable, Subtractable, WholeArithmetic, IntegralArithmetic, RationalArithmetic
find_local_minimum, find_local_maximum
"""

from __future__ import annotations

from keystone.precision.analysis import find_local_maximum, find_local_minimum
from keystone.precision.protocols import (
    Addable,
    IntegralArithmetic,
    RationalArithmetic,
    Subtractable,
    WholeArithmetic,
)
from keystone.precision.values import Integer, RationalNumber, WholeNumber

__all__ = [
    "Addable",
    "Integer",
    "IntegralArithmetic",
    "RationalArithmetic",
    "RationalNumber",
    "Subtractable",
    "WholeArithmetic",
    "WholeNumber",
    "find_local_maximum",
    "find_local_minimum",
]
