"""Enumerations shared by the declension rules and their callers."""

from __future__ import annotations

from enum import StrEnum


class GrammaticalCase(StrEnum):
    """Target cases supported by `decline`."""

    instrumental = "instrumental"
    genitive = "genitive"


class Gender(StrEnum):
    """Grammatical gender inferred from a given name."""

    masculine = "masculine"
    feminine = "feminine"
