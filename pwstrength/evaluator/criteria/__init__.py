"""Password criteria and the fixed order in which they run.

The order of ``DEFAULT_CRITERIA`` is part of the report contract: results
are always listed Length, Character Complexity, Repetition, Dictionary.
"""

from __future__ import annotations

from pwstrength.evaluator.criteria.base import Criterion
from pwstrength.evaluator.criteria.complexity import (
    CHARACTER_CLASSES,
    SPECIAL_CHARACTERS,
    CharacterComplexityCriterion,
)
from pwstrength.evaluator.criteria.dictionary import WEAK_WORDS, DictionaryFreedomCriterion
from pwstrength.evaluator.criteria.length import MIN_LENGTH, LengthCriterion
from pwstrength.evaluator.criteria.repetition import RepetitionFreedomCriterion

DEFAULT_CRITERIA: tuple[Criterion, ...] = (
    LengthCriterion(),
    CharacterComplexityCriterion(),
    RepetitionFreedomCriterion(),
    DictionaryFreedomCriterion(),
)


def get_default_criteria() -> tuple[Criterion, ...]:
    """Return the built-in criteria in evaluation order."""
    return DEFAULT_CRITERIA


__all__ = [
    "CHARACTER_CLASSES",
    "DEFAULT_CRITERIA",
    "MIN_LENGTH",
    "SPECIAL_CHARACTERS",
    "WEAK_WORDS",
    "CharacterComplexityCriterion",
    "Criterion",
    "DictionaryFreedomCriterion",
    "LengthCriterion",
    "RepetitionFreedomCriterion",
    "get_default_criteria",
]
