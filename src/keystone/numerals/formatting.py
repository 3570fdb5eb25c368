from __future__ import annotations

from fractions import Fraction
from typing import Optional

from keystone._contracts import contract_violation
from .digits import MINUS_SIGN, WESTERN_DIGITS, digit_table

DEFAULT_THOUSANDS_SEPARATOR = " "

# Four-digit values stay ungrouped ("1234"); grouping starts at five digits.
_MINIMUM_GROUPED_LENGTH = 5


def _positional_digits(magnitude: int, base: int) -> list[str]:
    """Digits of a non-negative value, least significant first."""
    if magnitude == 0:
        return [WESTERN_DIGITS[0]]
    digits: list[str] = []
    while magnitude:
        magnitude, position_value = divmod(magnitude, base)
        digits.append(WESTERN_DIGITS[position_value])
    return digits


def _group(digits: list[str], separator: Optional[str]) -> str:
    """Groups least-significant-first ``digits`` in threes and returns them in reading order."""
    if not separator or len(digits) < _MINIMUM_GROUPED_LENGTH:
        return "".join(reversed(digits))
    grouped: list[str] = []
    for position, digit in enumerate(digits):
        if position and position % 3 == 0:
            grouped.append(separator)
        grouped.append(digit)
    return "".join(reversed(grouped))


def in_digits(
    value: int,
    base: int = 10,
    thousands_separator: Optional[str] = DEFAULT_THOUSANDS_SEPARATOR,
) -> str:
    """
    Renders an integral value with Western digits.

    ``in_digits(1234567) == "1 234 567"``, ``in_digits(1234) == "1234"``,
    ``in_digits(-255, base=16) == "−FF"``.
    """
    digit_table(base)
    value = int(value)
    text = _group(_positional_digits(abs(value), base), thousands_separator)
    return MINUS_SIGN + text if value < 0 else text


def rational_in_digits(
    value: Fraction | int,
    maximum_decimal_places: int,
    radix_character: str = ".",
    thousands_separator: Optional[str] = DEFAULT_THOUSANDS_SEPARATOR,
    base: int = 10,
) -> str:
    """
    Renders a rational value, rounding half away from zero to at most
    ``maximum_decimal_places`` fractional digits. Trailing zeros are dropped.
    """
    digit_table(base)
    if maximum_decimal_places < 0:
        contract_violation(
            f"maximum_decimal_places must be non-negative; got {maximum_decimal_places}."
        )

    value = Fraction(value)
    scale = base**maximum_decimal_places
    scaled = abs(value) * scale
    rounded = int(scaled + Fraction(1, 2))
    whole, fraction = divmod(rounded, scale)

    result = _group(_positional_digits(whole, base), thousands_separator)
    if value < 0 and rounded != 0:
        result = MINUS_SIGN + result

    if fraction:
        places = list(reversed(_positional_digits(fraction, base)))
        places = [WESTERN_DIGITS[0]] * (maximum_decimal_places - len(places)) + places
        while places[-1] == WESTERN_DIGITS[0]:
            places.pop()

        result += radix_character
        for index, digit in enumerate(places):
            if index and index % 3 == 0 and thousands_separator:
                result += thousands_separator
            result += digit

    return result
