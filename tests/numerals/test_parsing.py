"""
tests/numerals/test_parsing.py

Covers:
  - Whole, integer and rational parsing in base 10
  - Bases 2–16 and case-insensitive hexadecimal digits
  - Non-Latin digit scripts and radix characters
  - Formatting separators are skipped
  - ParseError for unrecognised characters
  - NFKD validation of custom digit tables
  - Round trip through in_digits for every base
"""

from fractions import Fraction

import pytest

from keystone import ContractViolation
from keystone.numerals import (
    ParseError,
    digit_table,
    in_digits,
    parse,
    parse_integer,
    parse_rational,
    parse_whole,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def decimal():
    return digit_table(10)


@pytest.fixture
def hexadecimal():
    return digit_table(16)


# ── Whole numbers ─────────────────────────────────────────────────────────────

class TestParseWhole:

    def test_simple(self, decimal):
        assert parse_whole("1024", decimal) == 1024

    def test_zero(self, decimal):
        assert parse_whole("0", decimal) == 0

    def test_empty_string_is_zero(self, decimal):
        assert parse_whole("", decimal) == 0

    def test_space_separator_is_skipped(self, decimal):
        assert parse_whole("12 4", decimal) == 124
        assert parse_whole("1 000 000", decimal) == 1_000_000

    def test_arabic_thousands_separator_is_skipped(self, decimal):
        assert parse_whole("١٬٠٠٠", decimal) == 1000

    def test_minus_sign_is_not_a_digit(self, decimal):
        with pytest.raises(ParseError):
            parse_whole("−5", decimal)

    def test_large_value_keeps_precision(self, decimal):
        digits = "9" * 60
        assert parse_whole(digits, decimal) == int(digits)


# ── Integers ──────────────────────────────────────────────────────────────────

class TestParseInteger:

    def test_positive(self, decimal):
        assert parse_integer("42", decimal) == 42

    def test_unicode_minus(self, decimal):
        assert parse_integer("−42", decimal) == -42

    def test_ascii_hyphen_minus(self, decimal):
        assert parse_integer("-42", decimal) == -42

    def test_minus_only_at_start(self, decimal):
        with pytest.raises(ParseError) as info:
            parse_integer("4−2", decimal)
        assert info.value.scalar == "−"

    def test_hexadecimal_is_case_insensitive(self, hexadecimal):
        assert parse_integer("ff", hexadecimal) == 255
        assert parse_integer("FF", hexadecimal) == 255
        assert parse_integer("−Ff", hexadecimal) == -255


# ── Rationals ─────────────────────────────────────────────────────────────────

class TestParseRational:

    def test_decimal_point(self, decimal):
        assert parse_rational("1.5", decimal) == Fraction(3, 2)

    def test_decimal_comma(self, decimal):
        assert parse_rational("1,25", decimal) == Fraction(5, 4)

    def test_arabic_decimal_separator(self, decimal):
        assert parse_rational("٣٫٥", decimal) == Fraction(7, 2)

    def test_negative_applies_to_whole_value(self, decimal):
        assert parse_rational("−1.5", decimal) == Fraction(-3, 2)
        assert parse_rational("−0.5", decimal) == Fraction(-1, 2)

    def test_no_radix_is_integral(self, decimal):
        assert parse_rational("12", decimal) == 12

    def test_leading_radix(self, decimal):
        assert parse_rational(".25", decimal) == Fraction(1, 4)

    def test_fractional_separators_do_not_count_as_places(self, decimal):
        assert parse_rational("0.000 1", decimal) == Fraction(1, 10_000)

    def test_binary_fraction(self):
        assert parse_rational("0.101", digit_table(2)) == Fraction(5, 8)

    def test_second_radix_character_is_rejected(self, decimal):
        with pytest.raises(ParseError) as info:
            parse_rational("1.2.3", decimal)
        assert info.value.scalar == "."


# ── Scripts and bases ─────────────────────────────────────────────────────────

class TestScripts:

    @pytest.mark.parametrize(
        "representation",
        ["123", "١٢٣", "۱۲۳", "१२३", "১২৩", "௧௨௩", "၁၂၃", "១២៣", "๑๒๓", "໑໒໓"],
    )
    def test_every_script_reads_the_same_value(self, representation):
        assert parse(representation) == 123

    def test_scripts_may_be_mixed(self):
        assert parse("1٢३") == 123


class TestBases:

    def test_binary(self):
        assert parse("1010", base=2) == 10

    def test_octal(self):
        assert parse("777", base=8) == 511

    def test_digit_beyond_base_is_rejected(self):
        with pytest.raises(ParseError) as info:
            parse("12", base=2)
        assert info.value.scalar == "2"

    @pytest.mark.parametrize("base", [0, 1, 17, 100])
    def test_unsupported_base_is_a_contract_violation(self, base):
        with pytest.raises(ContractViolation):
            digit_table(base)

    @pytest.mark.parametrize("base", range(2, 17))
    def test_round_trip_through_in_digits(self, base):
        for value in (0, 1, base - 1, base, 255, 4096, 999_999, 2**70 + 3):
            assert parse(in_digits(value, base=base), base=base) == value


# ── Errors ────────────────────────────────────────────────────────────────────

class TestParseError:

    def test_identifies_the_offending_character(self):
        with pytest.raises(ParseError) as info:
            parse("12a4")
        assert info.value.scalar == "a"
        assert info.value.representation == "12a4"
        assert "U+0061" in str(info.value)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse("x")

    def test_hexadecimal_letter_in_decimal(self):
        with pytest.raises(ParseError):
            parse("1F")


# ── Custom digit tables ───────────────────────────────────────────────────────

class TestCustomTables:

    def test_custom_digits(self):
        digits = [("o",), ("i",)]
        assert parse_whole("iio", digits, radix_characters=(), formatting_separators=("_",)) == 6

    def test_custom_separator(self, decimal):
        assert parse_whole("1_000", decimal, formatting_separators=("_",)) == 1000

    def test_decomposable_digit_is_a_contract_violation(self):
        # U+00B2 SUPERSCRIPT TWO decomposes to "2" under NFKD.
        digits = [("0",), ("1",), ("²",)]
        with pytest.raises(ContractViolation) as info:
            parse_whole("1", digits)
        assert "U+00B2" in str(info.value)

    def test_decomposable_separator_is_a_contract_violation(self, decimal):
        # U+00A0 NO-BREAK SPACE decomposes to a plain space.
        with pytest.raises(ContractViolation):
            parse_whole("1 000", decimal, formatting_separators=("\u00a0",))

    def test_multi_character_digit_is_a_contract_violation(self):
        with pytest.raises(ContractViolation):
            parse_whole("1", [("0",), ("10",)])
