"""Tests for Russian given-name declension and gender inference."""

from __future__ import annotations

import pytest

from src.declension import (
    Gender,
    GrammaticalCase,
    decline,
    infer_gender,
    to_genitive,
    to_instrumental,
)
from src.declension.dictionaries import FEMININE_SOFT_SIGN_NAMES


@pytest.mark.parametrize(
    ("name", "instrumental", "genitive"),
    [
        ("Дмитрий", "Дмитрием", "Дмитрия"),
        ("Илья", "Ильёй", "Ильи"),
        ("Андрей", "Андреем", "Андрея"),
        ("Любовь", "Любовью", "Любови"),
        ("Игорь", "Игорем", "Игоря"),
        ("Анна", "Анной", "Анны"),
        ("Мария", "Марией", "Марии"),
        ("Владимир", "Владимиром", "Владимира"),
    ],
)
def test_decline_reference_names(name: str, instrumental: str, genitive: str) -> None:
    assert decline(name, GrammaticalCase.instrumental) == instrumental
    assert decline(name, GrammaticalCase.genitive) == genitive
    assert to_instrumental(name) == instrumental
    assert to_genitive(name) == genitive


def test_genitive_after_velar_or_hushing_consonant_uses_i() -> None:
    assert to_genitive("Ольга") == "Ольги"
    assert to_genitive("Наташа") == "Наташи"
    assert to_genitive("Вероника") == "Вероники"


def test_instrumental_ignores_velar_rule() -> None:
    # Only the genitive has the velar/hushing row; the instrumental keeps the generic "а" ending.
    assert to_instrumental("Ольга") == "Ольгой"
    assert to_instrumental("Наташа") == "Наташой"


def test_feminine_soft_sign_names_use_third_declension() -> None:
    assert to_instrumental("Нинель") == "Нинелью"
    assert to_genitive("Эсфирь") == "Эсфири"


@pytest.mark.parametrize("case", list(GrammaticalCase))
def test_decline_empty_and_none_are_returned_unchanged(case: GrammaticalCase) -> None:
    assert decline("", case) == ""
    assert decline(None, case) is None  # type: ignore[arg-type]


@pytest.mark.parametrize("name", ["Пьеро", "Жозе", "Kate", "Ли", "ИГОРЬ "])
def test_unknown_endings_are_returned_unchanged(name: str) -> None:
    assert to_instrumental(name) == name
    assert to_genitive(name) == name


def test_suffix_match_is_case_sensitive() -> None:
    assert to_genitive("ОЛЕГ") == "ОЛЕГ"
    assert to_genitive("Олег") == "Олега"


def test_infer_gender_by_ending() -> None:
    assert infer_gender("Анна") == Gender.feminine
    assert infer_gender("Мария") == Gender.feminine
    assert infer_gender("АННА") == Gender.feminine
    assert infer_gender("Илья") == Gender.feminine  # ending rule applies to any name in -я
    assert infer_gender("Дмитрий") == Gender.masculine
    assert infer_gender("Игорь") == Gender.masculine


@pytest.mark.parametrize("name", sorted(FEMININE_SOFT_SIGN_NAMES))
def test_infer_gender_exception_names_are_feminine(name: str) -> None:
    assert infer_gender(name) == Gender.feminine


def test_infer_gender_defaults_to_masculine_for_empty_name() -> None:
    assert infer_gender("") == Gender.masculine
    assert infer_gender(None) == Gender.masculine  # type: ignore[arg-type]


def test_exception_set_is_immutable() -> None:
    assert isinstance(FEMININE_SOFT_SIGN_NAMES, frozenset)
