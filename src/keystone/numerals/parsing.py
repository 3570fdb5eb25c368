"""
Place-value parsing of digit strings.

The three entry points mirror the three number kinds::

    parse_whole("1 024", digit_table(10))          # → 1024
    parse_integer("−ff", digit_table(16))          # → -255
    parse_rational("0.101", digit_table(2))        # → Fraction(5, 8)

Every scalar in the digit table, the radix characters and the formatting
separators must be NFKD-irreducible; this is checked before any parsing.
"""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Iterable, Mapping, Sequence

from ._exceptions import ParseError
from .digits import (
    FORMATTING_SEPARATORS,
    MINUS_SIGNS,
    RADIX_CHARACTERS,
    assert_nfkd,
    digit_mapping,
    digit_table,
)

logger = logging.getLogger(__name__)


def _whole(
    representation: str,
    entire: str,
    base: int,
    mapping: Mapping[str, int],
    separators: frozenset[str],
) -> tuple[int, int]:
    """Returns ``(value, number of digits consumed)``."""
    value = 0
    position = 0
    for character in reversed(representation):
        digit = mapping.get(character)
        if digit is not None and digit < base:
            value += digit * base**position
            position += 1
        elif character not in separators:
            raise ParseError(character, entire)
    return value, position


def _split_sign(representation: str) -> tuple[bool, str]:
    if representation and representation[0] in MINUS_SIGNS:
        return True, representation[1:]
    return False, representation


def _prepare(
    digits: Sequence[Iterable[str]],
    radix_characters: Iterable[str],
    formatting_separators: Iterable[str],
) -> tuple[int, dict[str, int], frozenset[str], frozenset[str]]:
    digits = [tuple(row) for row in digits]
    radix = frozenset(radix_characters)
    separators = frozenset(formatting_separators)
    assert_nfkd(digits, radix, separators)
    return len(digits), digit_mapping(digits), radix, separators


def parse_whole(
    representation: str,
    digits: Sequence[Iterable[str]],
    radix_characters: Iterable[str] = RADIX_CHARACTERS,
    formatting_separators: Iterable[str] = FORMATTING_SEPARATORS,
) -> int:
    base, mapping, _, separators = _prepare(digits, radix_characters, formatting_separators)
    value, _ = _whole(representation, representation, base, mapping, separators)
    return value


def parse_integer(
    representation: str,
    digits: Sequence[Iterable[str]],
    radix_characters: Iterable[str] = RADIX_CHARACTERS,
    formatting_separators: Iterable[str] = FORMATTING_SEPARATORS,
) -> int:
    base, mapping, _, separators = _prepare(digits, radix_characters, formatting_separators)
    negative, magnitude = _split_sign(representation)
    value, _ = _whole(magnitude, representation, base, mapping, separators)
    return -value if negative else value


def parse_rational(
    representation: str,
    digits: Sequence[Iterable[str]],
    radix_characters: Iterable[str] = RADIX_CHARACTERS,
    formatting_separators: Iterable[str] = FORMATTING_SEPARATORS,
) -> Fraction:
    base, mapping, radix, separators = _prepare(digits, radix_characters, formatting_separators)
    negative, magnitude = _split_sign(representation)

    split = next((i for i, c in enumerate(magnitude) if c in radix), None)
    if split is None:
        whole_part, fractional_part = magnitude, ""
    else:
        whole_part, fractional_part = magnitude[:split], magnitude[split + 1:]

    whole, _ = _whole(whole_part, representation, base, mapping, separators)
    numerator, places = _whole(fractional_part, representation, base, mapping, separators)

    value = whole + Fraction(numerator, base**places)
    return -value if negative else value


def parse(representation: str, base: int = 10) -> Fraction:
    """Parses any signed, possibly fractional representation with the built-in digits."""
    logger.debug("Parsing %r in base %d", representation, base)
    return parse_rational(representation, digit_table(base))
