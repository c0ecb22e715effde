"""Rule-based declension of Russian given names.

Rules are evaluated top-to-bottom and the first match wins, so longer and more specific suffixes
come before shorter, generic ones ("ий" before "й", "ья" before "я"). Every rule carries one ending
per grammatical case; a rule without an ending for the requested case is skipped for that case.

Suffix checks are case-sensitive. Only gender inference lower-cases the final letter.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from src.declension.dictionaries import (
    CONSONANTS,
    FEMININE_ENDINGS,
    SOFT_SIGN,
    VELAR_AND_HUSHING,
    is_feminine_soft_sign_name,
)
from src.declension.schema import Gender, GrammaticalCase


@dataclass(frozen=True)
class Ending:
    """Drop `strip` trailing letters, then append `suffix`."""

    strip: int
    suffix: str

    def apply(self, name: str) -> str:
        return name[: len(name) - self.strip] + self.suffix


@dataclass(frozen=True)
class Rule:
    """One row of the declension table."""

    label: str
    matches: Callable[[str], bool]
    endings: Mapping[GrammaticalCase, Ending]


def _ends_with(suffix: str) -> Callable[[str], bool]:
    return lambda name: name.endswith(suffix)


def _velar_or_hushing_a(name: str) -> bool:
    return name.endswith("а") and len(name) >= 2 and name[-2] in VELAR_AND_HUSHING


def _ends_with_consonant(name: str) -> bool:
    return name[-1] in CONSONANTS


_I = GrammaticalCase.instrumental
_G = GrammaticalCase.genitive

RULES: tuple[Rule, ...] = (
    # Дмитрий -> Дмитрием / Дмитрия
    Rule("ий", _ends_with("ий"), {_I: Ending(2, "ием"), _G: Ending(2, "ия")}),
    # Илья -> Ильёй / Ильи
    Rule("ья", _ends_with("ья"), {_I: Ending(1, "ёй"), _G: Ending(1, "и")}),
    # Андрей -> Андреем / Андрея
    Rule("й", _ends_with("й"), {_I: Ending(1, "ем"), _G: Ending(1, "я")}),
    # Любовь -> Любовью / Любови
    Rule(
        "ь-feminine",
        lambda name: name.endswith(SOFT_SIGN) and is_feminine_soft_sign_name(name),
        {_I: Ending(0, "ю"), _G: Ending(1, "и")},
    ),
    # Игорь -> Игорем / Игоря
    Rule("ь", _ends_with(SOFT_SIGN), {_I: Ending(1, "ем"), _G: Ending(1, "я")}),
    # Ольга -> Ольги. Genitive only; the instrumental form falls through to the generic "а" row.
    Rule("а-velar", _velar_or_hushing_a, {_G: Ending(1, "и")}),
    # Анна -> Анной / Анны
    Rule("а", _ends_with("а"), {_I: Ending(1, "ой"), _G: Ending(1, "ы")}),
    # Мария -> Марией / Марии
    Rule("я", _ends_with("я"), {_I: Ending(1, "ей"), _G: Ending(1, "и")}),
    # Владимир -> Владимиром / Владимира
    Rule("consonant", _ends_with_consonant, {_I: Ending(0, "ом"), _G: Ending(0, "а")}),
)


def infer_gender(name: str) -> Gender:
    """Infer grammatical gender from a nominative given name.

    Names ending in "а"/"я" and the known 3rd-declension feminine names are feminine; everything
    else, including an empty name, falls through to masculine.
    """

    if not name:
        return Gender.masculine

    last_char = name[-1].lower()
    if last_char in FEMININE_ENDINGS:
        return Gender.feminine
    if last_char == SOFT_SIGN and is_feminine_soft_sign_name(name):
        return Gender.feminine
    return Gender.masculine


def decline(name: str, case: GrammaticalCase) -> str:
    """Decline a nominative given name into `case`.

    Falsy input (empty string or None) is returned as-is. A name with an unrecognized ending is
    returned unchanged; the function never raises.
    """

    if not name:
        return name

    for rule in RULES:
        ending = rule.endings.get(case)
        if ending is None:
            continue
        if rule.matches(name):
            return ending.apply(name)
    return name


def to_instrumental(name: str) -> str:
    """Decline into the instrumental case ("с кем?")."""

    return decline(name, GrammaticalCase.instrumental)


def to_genitive(name: str) -> str:
    """Decline into the genitive case ("кого?")."""

    return decline(name, GrammaticalCase.genitive)
