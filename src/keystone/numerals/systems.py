"""
Alphabetic and additive numeral systems.

Each system decomposes the value into decimal tiers (units, tens, hundreds,
thousands) by repeated Euclidean division by 10 and maps every tier digit to
that tier's glyph sequence. Values outside a system's range are contract
violations.
"""

from __future__ import annotations

from keystone._contracts import contract_violation

ROMAN_RANGE = (1, 3999)
GREEK_RANGE = (1, 9999)
HEBREW_RANGE = (1, 9999)

_ROMAN_TIERS: tuple[tuple[str, ...], ...] = (
    ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX"),
    ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC"),
    ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM"),
    ("", "M", "MM", "MMM"),
)

_GREEK_TIERS: tuple[tuple[str, ...], ...] = (
    ("", "Α", "Β", "Γ", "Δ", "Ε", "Ϛ", "Ζ", "Η", "Θ"),
    ("", "Ι", "Κ", "Λ", "Μ", "Ν", "Ξ", "Ο", "Π", "Ϟ"),
    ("", "Ρ", "Σ", "Τ", "Υ", "Φ", "Χ", "Ψ", "Ω", "Ϡ"),
)
GREEK_KERAIA = "ʹ"
GREEK_LOWER_KERAIA = "͵"

_HEBREW_TIERS: tuple[tuple[str, ...], ...] = (
    ("", "א", "ב", "ג", "ד", "ה", "ו", "ז", "ח", "ט"),
    ("", "י", "כ", "ל", "מ", "נ", "ס", "ע", "פ", "צ"),
    ("", "ק", "ר", "ש", "ת", "תק", "תר", "תש", "תת", "תתק"),
)
HEBREW_GERESH = "׳"
HEBREW_GERSHAYIM = "״"

# 15 and 16 are never spelled with the letters of the divine name.
_HEBREW_SUBSTITUTIONS = (("יה", "טו"), ("יו", "טז"))


def _check_range(value: int, bounds: tuple[int, int], system: str) -> int:
    value = int(value)
    lower, upper = bounds
    if not lower <= value <= upper:
        contract_violation(
            f"{value} cannot be written in {system} numerals; "
            f"the value must be between {lower} and {upper} inclusive."
        )
    return value


def _tiers(value: int, count: int) -> tuple[list[int], int]:
    """Splits ``value`` into ``count`` decimal tier digits (lowest first) and the rest."""
    digits = []
    for _ in range(count):
        value, digit = divmod(value, 10)
        digits.append(digit)
    return digits, value


def _spell(digits: list[int], tiers: tuple[tuple[str, ...], ...]) -> str:
    return "".join(tiers[tier][digit] for tier, digit in reversed(list(enumerate(digits))))


def roman_numerals(value: int, lowercase: bool = False) -> str:
    """``roman_numerals(1994) == "MCMXCIV"``"""
    value = _check_range(value, ROMAN_RANGE, "Roman")
    digits, _ = _tiers(value, len(_ROMAN_TIERS))
    result = _spell(digits, _ROMAN_TIERS)
    return result.lower() if lowercase else result


def greek_numerals(value: int, lowercase: bool = False, keraia: bool = True) -> str:
    """``greek_numerals(1821) == "͵ΑΩΚΑʹ"``"""
    value = _check_range(value, GREEK_RANGE, "Greek")
    digits, thousands = _tiers(value, len(_GREEK_TIERS))

    result = _spell(digits, _GREEK_TIERS)
    if keraia and result:
        result += GREEK_KERAIA

    thousands_glyph = _GREEK_TIERS[0][thousands]
    if keraia and thousands_glyph:
        thousands_glyph = GREEK_LOWER_KERAIA + thousands_glyph

    result = thousands_glyph + result
    return result.lower() if lowercase else result


def hebrew_numerals(value: int, gershayim: bool = True) -> str:
    """``hebrew_numerals(5784) == "ה׳תשפ״ד"``"""
    value = _check_range(value, HEBREW_RANGE, "Hebrew")
    digits, thousands = _tiers(value, len(_HEBREW_TIERS))

    result = _spell(digits, _HEBREW_TIERS)
    for forbidden, replacement in _HEBREW_SUBSTITUTIONS:
        result = result.replace(forbidden, replacement)

    if gershayim and result:
        if len(result) == 1:
            result += HEBREW_GERESH
        else:
            result = result[:-1] + HEBREW_GERSHAYIM + result[-1]

    thousands_glyph = _HEBREW_TIERS[0][thousands]
    if gershayim and thousands_glyph:
        thousands_glyph += HEBREW_GERESH

    return thousands_glyph + result
