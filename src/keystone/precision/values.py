"""
Arbitrary-precision number types.

``WholeNumber`` (≥ 0), ``Integer`` and ``RationalNumber`` wrap Python's
``int`` and ``fractions.Fraction``. Mixed arithmetic promotes along
Whole → Integer → Rational, so ``WholeNumber(2) - Integer(5)`` is
``Integer(-3)`` while ``WholeNumber(2) - WholeNumber(5)`` is a contract
violation.
"""

from __future__ import annotations

import functools
import operator
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable, ClassVar, Iterable, Optional, Sequence

from keystone._contracts import contract_violation
from keystone.numerals.digits import FORMATTING_SEPARATORS, RADIX_CHARACTERS, digit_table
from keystone.numerals.formatting import DEFAULT_THOUSANDS_SEPARATOR, in_digits, rational_in_digits
from keystone.numerals.ordinals import (
    GrammaticalCase,
    GrammaticalGender,
    GrammaticalNumber,
    Locale,
    abbreviated_ordinal,
)
from keystone.numerals.parsing import parse_integer, parse_rational, parse_whole
from keystone.numerals.systems import greek_numerals, hebrew_numerals, roman_numerals
from .protocols import IntegralArithmetic, RationalArithmetic, WholeArithmetic


def _euclidean_quotient(dividend: Any, divisor: Any) -> int:
    if divisor == 0:
        contract_violation(f"Cannot divide {dividend} by zero.")
    quotient = dividend // abs(divisor)
    return quotient if divisor > 0 else -quotient


def _integral(value: Any) -> int:
    if isinstance(value, Fraction):
        if value.denominator != 1:
            contract_violation(f"{value} is not an integer.")
        return value.numerator
    return operator.index(value)


@functools.total_ordering
class _Number:
    """Promotion, comparison, parsing and conversion shared by the concrete types."""

    _rank: ClassVar[int]
    _parser: ClassVar[Callable[..., Any]]

    value: Any

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, str):
            value = type(self).parse(value).value
        elif isinstance(value, _Number):
            value = value.value
        object.__setattr__(self, "value", self._normalized(value))

    @staticmethod
    def _normalized(value: Any) -> Any:
        raise NotImplementedError

    # ── parsing ──────────────────────────────────────────────────────────

    @classmethod
    def parse(cls, representation: str, base: int = 10):
        return cls.parse_representation(representation, digit_table(base))

    @classmethod
    def parse_decimal(cls, representation: str):
        return cls.parse(representation, 10)

    @classmethod
    def parse_hexadecimal(cls, representation: str):
        return cls.parse(representation, 16)

    @classmethod
    def parse_octal(cls, representation: str):
        return cls.parse(representation, 8)

    @classmethod
    def parse_binary(cls, representation: str):
        return cls.parse(representation, 2)

    @classmethod
    def parse_representation(
        cls,
        representation: str,
        digits: Sequence[Iterable[str]],
        radix_characters: Iterable[str] = RADIX_CHARACTERS,
        formatting_separators: Iterable[str] = FORMATTING_SEPARATORS,
    ):
        return cls(cls._parser(representation, digits, radix_characters, formatting_separators))

    # ── arithmetic ───────────────────────────────────────────────────────

    def _lift(self, other: Any) -> Any:
        if isinstance(other, _Number):
            return other
        if isinstance(other, int):
            return WholeNumber(other) if other >= 0 else Integer(other)
        if isinstance(other, Fraction):
            return RationalNumber(other)
        return NotImplemented

    def _combine(self, other: Any, operation: Callable[[Any, Any], Any]) -> Any:
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        kind = type(self) if self._rank >= other._rank else type(other)
        return kind(operation(self.value, other.value))

    def __add__(self, other: Any) -> Any:
        return self._combine(other, operator.add)

    def __sub__(self, other: Any) -> Any:
        return self._combine(other, operator.sub)

    def __mul__(self, other: Any) -> Any:
        return self._combine(other, operator.mul)

    def __rmul__(self, other: Any) -> Any:
        return self._combine(other, operator.mul)

    def divided_according_to_euclid(self, divisor: Any) -> Any:
        result = self._combine(divisor, _euclidean_quotient)
        if result is NotImplemented:
            raise TypeError(f"Cannot divide {type(self).__name__} by {type(divisor).__name__}.")
        return result

    def __rfloordiv__(self, other: Any) -> Any:
        lifted = self._lift(other)
        if lifted is NotImplemented:
            return NotImplemented
        return lifted.divided_according_to_euclid(self)

    def __rmod__(self, other: Any) -> Any:
        lifted = self._lift(other)
        if lifted is NotImplemented:
            return NotImplemented
        return lifted.mod(self)

    # ── comparison ───────────────────────────────────────────────────────

    @staticmethod
    def _raw(other: Any) -> Any:
        if isinstance(other, _Number):
            return other.value
        if isinstance(other, (int, Fraction)):
            return other
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        raw = self._raw(other)
        if raw is NotImplemented:
            return NotImplemented
        return self.value == raw

    def __lt__(self, other: Any) -> bool:
        raw = self._raw(other)
        if raw is NotImplemented:
            return NotImplemented
        return self.value < raw

    def __hash__(self) -> int:
        return hash(self.value)

    # ── conversion ───────────────────────────────────────────────────────

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __bool__(self) -> bool:
        return bool(self.value)

    def __str__(self) -> str:
        return str(self.value)


class _IntegralText:
    """Text renderings available to whole numbers and integers."""

    value: int

    def __index__(self) -> int:
        return self.value

    def in_digits(
        self,
        base: int = 10,
        thousands_separator: Optional[str] = DEFAULT_THOUSANDS_SEPARATOR,
    ) -> str:
        return in_digits(self.value, base, thousands_separator)

    def in_roman_numerals(self, lowercase: bool = False) -> str:
        return roman_numerals(self.value, lowercase)

    def in_greek_numerals(self, lowercase: bool = False, keraia: bool = True) -> str:
        return greek_numerals(self.value, lowercase, keraia)

    def in_hebrew_numerals(self, gershayim: bool = True) -> str:
        return hebrew_numerals(self.value, gershayim)

    def abbreviated_ordinal(
        self,
        locale: Locale | str,
        gender: GrammaticalGender = GrammaticalGender.MASCULINE,
        number: GrammaticalNumber = GrammaticalNumber.SINGULAR,
        case: GrammaticalCase = GrammaticalCase.NOMINATIVE,
    ) -> str:
        return abbreviated_ordinal(self.value, locale, gender, number, case)


@dataclass(frozen=True, eq=False)
class WholeNumber(_IntegralText, _Number, WholeArithmetic):
    value: int = 0

    _rank: ClassVar[int] = 0
    _parser: ClassVar[Callable[..., Any]] = staticmethod(parse_whole)

    @staticmethod
    def _normalized(value: Any) -> int:
        value = _integral(value)
        if value < 0:
            contract_violation(f"Whole numbers cannot be negative; got {value}.")
        return value


@dataclass(frozen=True, eq=False)
class Integer(_IntegralText, _Number, IntegralArithmetic):
    value: int = 0

    _rank: ClassVar[int] = 1
    _parser: ClassVar[Callable[..., Any]] = staticmethod(parse_integer)

    @staticmethod
    def _normalized(value: Any) -> int:
        return _integral(value)

    def __neg__(self) -> Integer:
        return Integer(-self.value)


@dataclass(frozen=True, eq=False)
class RationalNumber(_Number, RationalArithmetic):
    value: Fraction = Fraction(0)

    _rank: ClassVar[int] = 2
    _parser: ClassVar[Callable[..., Any]] = staticmethod(parse_rational)

    @staticmethod
    def _normalized(value: Any) -> Fraction:
        return Fraction(value)

    @property
    def numerator(self) -> Integer:
        return Integer(self.value.numerator)

    @property
    def denominator(self) -> WholeNumber:
        return WholeNumber(self.value.denominator)

    def __neg__(self) -> RationalNumber:
        return RationalNumber(-self.value)

    def __truediv__(self, other: Any) -> Any:
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        if other.value == 0:
            contract_violation(f"Cannot divide {self.value} by zero.")
        return RationalNumber(self.value / other.value)

    def __rtruediv__(self, other: Any) -> Any:
        lifted = self._lift(other)
        if lifted is NotImplemented:
            return NotImplemented
        return RationalNumber(lifted) / self

    def __pow__(self, exponent: Any) -> Any:
        if exponent < 0:
            return super().__pow__(-exponent).reciprocal()
        return super().__pow__(exponent)

    def in_digits(
        self,
        maximum_decimal_places: int,
        radix_character: str = ".",
        thousands_separator: Optional[str] = DEFAULT_THOUSANDS_SEPARATOR,
        base: int = 10,
    ) -> str:
        return rational_in_digits(
            self.value, maximum_decimal_places, radix_character, thousands_separator, base
        )
