from __future__ import annotations

import unicodedata
from typing import Iterable, Sequence

from keystone._contracts import contract_violation

# Each row lists every character with the row's value; the number of rows is the base.
#   Latin, Arabic-Indic, Extended Arabic-Indic (Persian), Devanagari, Bengali,
#   Tamil, Myanmar, Khmer, Thai, Lao
DIGITS: tuple[tuple[str, ...], ...] = (
    ("0", "٠", "۰", "०", "০", "௦", "၀", "០", "๐", "໐"),
    ("1", "١", "۱", "१", "১", "௧", "၁", "១", "๑", "໑"),
    ("2", "٢", "۲", "२", "২", "௨", "၂", "២", "๒", "໒"),
    ("3", "٣", "۳", "३", "৩", "௩", "၃", "៣", "๓", "໓"),
    ("4", "٤", "۴", "४", "৪", "௪", "၄", "៤", "๔", "໔"),
    ("5", "٥", "۵", "५", "৫", "௫", "၅", "៥", "๕", "໕"),
    ("6", "٦", "۶", "६", "৬", "௬", "၆", "៦", "๖", "໖"),
    ("7", "٧", "۷", "७", "৭", "௭", "၇", "៧", "๗", "໗"),
    ("8", "٨", "۸", "८", "৮", "௮", "၈", "៨", "๘", "໘"),
    ("9", "٩", "۹", "९", "৯", "௯", "၉", "៩", "๙", "໙"),
    ("A", "a"),
    ("B", "b"),
    ("C", "c"),
    ("D", "d"),
    ("E", "e"),
    ("F", "f"),
)

RADIX_CHARACTERS: frozenset[str] = frozenset({",", ".", "٫"})
FORMATTING_SEPARATORS: frozenset[str] = frozenset({" ", "٬"})

MINUS_SIGNS: frozenset[str] = frozenset({"−", "-"})
MINUS_SIGN = "−"

# Rendering always uses the first character of each row.
WESTERN_DIGITS: str = "".join(row[0] for row in DIGITS)

MINIMUM_BASE = 2
MAXIMUM_BASE = len(DIGITS)


def digit_table(base: int) -> tuple[tuple[str, ...], ...]:
    """The built-in table sliced to ``base`` rows."""
    if not isinstance(base, int) or not MINIMUM_BASE <= base <= MAXIMUM_BASE:
        contract_violation(
            f"Base {base} is not supported. The base must be an integer between "
            f"{MINIMUM_BASE} and {MAXIMUM_BASE} inclusive."
        )
    return DIGITS[:base]


def digit_mapping(digits: Sequence[Iterable[str]]) -> dict[str, int]:
    mapping: dict[str, int] = {}
    for value, characters in enumerate(digits):
        for character in characters:
            mapping[character] = value
    return mapping


def _is_decomposable(scalar: str) -> bool:
    return unicodedata.normalize("NFKD", scalar) != scalar


def assert_nfkd(
    digits: Sequence[Iterable[str]],
    radix_characters: Iterable[str],
    formatting_separators: Iterable[str],
) -> None:
    scalars: set[str] = set()
    for row in digits:
        scalars.update(row)
    scalars.update(radix_characters)
    scalars.update(formatting_separators)

    for scalar in scalars:
        if len(scalar) != 1:
            contract_violation(f"{scalar!r} is not a single Unicode scalar.")

    decomposable = sorted(s for s in scalars if _is_decomposable(s))
    if decomposable:
        listed = ", ".join(f"{s} U+{ord(s):04X}" for s in decomposable)
        contract_violation(f"Some scalars are not in NFKD: {listed}")
