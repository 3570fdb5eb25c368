"""
keystone.numerals
~~~~~~~~~~~~~~~~~

Parsing and rendering of numbers as text: place-value digits in bases 2–16
across ten digit scripts, Roman, Greek and Hebrew numerals, and abbreviated
ordinals.

Basic usage::

    from keystone.numerals import (
        abbreviated_ordinal, hebrew_numerals, in_digits, parse, roman_numerals,
    )

    parse("1 024")                 # → Fraction(1024, 1)
    parse("٣٫٥")                   # → Fraction(7, 2)
    parse("−ff", base=16)          # → Fraction(-255, 1)
    in_digits(1234567)             # → "1 234 567"
    roman_numerals(1994)           # → "MCMXCIV"
    hebrew_numerals(5784)          # → "ה׳תשפ״ד"
    abbreviated_ordinal(22, "en")  # → "22nd"

Characters that are neither digits of the base nor formatting separators
raise :class:`ParseError`, which names the offending character::

    parse("12a4")                  # ParseError: 'a' (U+0061) is not a valid digit …

Public API
----------
parse, parse_whole, parse_integer, parse_rational
digit_table, DIGITS, RADIX_CHARACTERS, FORMATTING_SEPARATORS
in_digits, rational_in_digits
roman_numerals, greek_numerals, hebrew_numerals
abbreviated_ordinal, Locale, GrammaticalGender, GrammaticalNumber, GrammaticalCase
ParseError     Raised for unrecognised digit characters.
"""

from __future__ import annotations

from keystone.numerals._exceptions import ParseError
from keystone.numerals.digits import (
    DIGITS,
    FORMATTING_SEPARATORS,
    RADIX_CHARACTERS,
    digit_table,
)
from keystone.numerals.formatting import in_digits, rational_in_digits
from keystone.numerals.ordinals import (
    GrammaticalCase,
    GrammaticalGender,
    GrammaticalNumber,
    Locale,
    abbreviated_ordinal,
)
from keystone.numerals.parsing import parse, parse_integer, parse_rational, parse_whole
from keystone.numerals.systems import greek_numerals, hebrew_numerals, roman_numerals

__all__ = [
    "DIGITS",
    "FORMATTING_SEPARATORS",
    "RADIX_CHARACTERS",
    "GrammaticalCase",
    "GrammaticalGender",
    "GrammaticalNumber",
    "Locale",
    "ParseError",
    "abbreviated_ordinal",
    "digit_table",
    "greek_numerals",
    "hebrew_numerals",
    "in_digits",
    "parse",
    "parse_integer",
    "parse_rational",
    "parse_whole",
    "rational_in_digits",
    "roman_numerals",
]
