"""Fixed letter sets and name lists used by the declension rules.

These sets are built once at import time and must not be mutated.
"""

from __future__ import annotations

# Feminine names of the 3rd declension. Without this list they look masculine ("Игорь").
FEMININE_SOFT_SIGN_NAMES: frozenset[str] = frozenset(
    {
        "Любовь",
        "Нинель",
        "Рахиль",
        "Руфь",
        "Юдифь",
        "Эсфирь",
    }
)

FEMININE_ENDINGS: frozenset[str] = frozenset({"а", "я"})

# After these letters the genitive ending is "и", not "ы" (Ольга -> Ольги, Наташа -> Наташи).
VELAR_AND_HUSHING: frozenset[str] = frozenset("кгхжшщч")

CONSONANTS: frozenset[str] = frozenset("бвгджзклмнпрстфхцчшщ")

SOFT_SIGN = "ь"


def is_feminine_soft_sign_name(name: str) -> bool:
    """Whether `name` is one of the known feminine names ending in a soft sign."""

    return name in FEMININE_SOFT_SIGN_NAMES
