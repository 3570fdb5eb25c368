from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping

from keystone._contracts import contract_violation
from .formatting import in_digits


class Locale(str, Enum):
    ENGLISH = "en"
    GERMAN = "de"
    FRENCH = "fr"
    GREEK = "el"


class GrammaticalGender(Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class GrammaticalNumber(Enum):
    SINGULAR = "singular"
    PLURAL = "plural"


class GrammaticalCase(Enum):
    NOMINATIVE = "nominative"
    ACCUSATIVE = "accusative"
    GENITIVE = "genitive"
    VOCATIVE = "vocative"


@dataclass(frozen=True, slots=True)
class Inflection:
    gender: GrammaticalGender = GrammaticalGender.MASCULINE
    number: GrammaticalNumber = GrammaticalNumber.SINGULAR
    case: GrammaticalCase = GrammaticalCase.NOMINATIVE


SuffixFn = Callable[[int, Inflection], str]


def _english_suffix(value: int, inflection: Inflection) -> str:
    magnitude = abs(value)
    if (magnitude // 10) % 10 == 1:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(magnitude % 10, "th")


def _german_suffix(value: int, inflection: Inflection) -> str:
    return "."


def _french_suffix(value: int, inflection: Inflection) -> str:
    if value == 1:
        suffix = "re" if inflection.gender is GrammaticalGender.FEMININE else "er"
    else:
        suffix = "e"
    if inflection.number is GrammaticalNumber.PLURAL:
        suffix += "s"
    return suffix


_M, _F, _N = GrammaticalGender.MASCULINE, GrammaticalGender.FEMININE, GrammaticalGender.NEUTER
_NOM, _ACC, _GEN, _VOC = (
    GrammaticalCase.NOMINATIVE,
    GrammaticalCase.ACCUSATIVE,
    GrammaticalCase.GENITIVE,
    GrammaticalCase.VOCATIVE,
)

# (gender, case) → ending
_GREEK_SINGULAR: dict[tuple[GrammaticalGender, GrammaticalCase], str] = {
    (_M, _NOM): "ος", (_M, _ACC): "ο", (_M, _GEN): "ου", (_M, _VOC): "ε",
    (_F, _NOM): "η", (_F, _ACC): "η", (_F, _GEN): "ης", (_F, _VOC): "η",
    (_N, _NOM): "ο", (_N, _ACC): "ο", (_N, _GEN): "ου", (_N, _VOC): "ο",
}
_GREEK_PLURAL: dict[tuple[GrammaticalGender, GrammaticalCase], str] = {
    (_M, _NOM): "οι", (_M, _ACC): "ους", (_M, _GEN): "ων", (_M, _VOC): "οι",
    (_F, _NOM): "ες", (_F, _ACC): "ες", (_F, _GEN): "ων", (_F, _VOC): "ες",
    (_N, _NOM): "α", (_N, _ACC): "α", (_N, _GEN): "ων", (_N, _VOC): "α",
}


def _greek_suffix(value: int, inflection: Inflection) -> str:
    table = _GREEK_PLURAL if inflection.number is GrammaticalNumber.PLURAL else _GREEK_SINGULAR
    return table[(inflection.gender, inflection.case)]


class OrdinalRegistry:
    """
    Locale → suffix generator.

    The magnitude of the number is always rendered with :func:`in_digits`;
    a generator only decides the abbreviated suffix appended to it.
    """

    def __init__(self, registry: Mapping[Locale, SuffixFn]) -> None:
        self._registry: dict[Locale, SuffixFn] = dict(registry)

    def register(self, locale: Locale, suffix: SuffixFn) -> None:
        self._registry[locale] = suffix

    def __contains__(self, locale: object) -> bool:
        return locale in self._registry

    def abbreviated(self, value: int, locale: Locale, inflection: Inflection) -> str:
        suffix = self._registry.get(locale)
        if suffix is None:
            contract_violation(f"No ordinal abbreviation is registered for {locale!r}.")
        magnitude = abs(int(value))
        return in_digits(magnitude) + suffix(magnitude, inflection)


ORDINALS = OrdinalRegistry(
    {
        Locale.ENGLISH: _english_suffix,
        Locale.GERMAN: _german_suffix,
        Locale.FRENCH: _french_suffix,
        Locale.GREEK: _greek_suffix,
    }
)


def abbreviated_ordinal(
    value: int,
    locale: Locale | str,
    gender: GrammaticalGender = GrammaticalGender.MASCULINE,
    number: GrammaticalNumber = GrammaticalNumber.SINGULAR,
    case: GrammaticalCase = GrammaticalCase.NOMINATIVE,
) -> str:
    """
    ``abbreviated_ordinal(21, "en") == "21st"``,
    ``abbreviated_ordinal(1, Locale.FRENCH, GrammaticalGender.FEMININE) == "1re"``.
    """
    return ORDINALS.abbreviated(int(value), Locale(locale), Inflection(gender, number, case))
