"""Russian given-name declension.

The engine converts a nominative-case given name into the instrumental or genitive case and infers
grammatical gender for salutations. It is a small rule table, not a morphological analyzer: names
it does not recognize are returned unchanged.
"""

from src.declension.rules import decline, infer_gender, to_genitive, to_instrumental
from src.declension.schema import Gender, GrammaticalCase

__all__ = [
    "Gender",
    "GrammaticalCase",
    "decline",
    "infer_gender",
    "to_genitive",
    "to_instrumental",
]
