"""Character complexity criterion, the only rule with partial credit."""

from __future__ import annotations

import string
from dataclasses import dataclass

from pwstrength.evaluator import CriterionResult
from pwstrength.evaluator.criteria.base import Criterion

SPECIAL_CHARACTERS = frozenset("!@#$%^&*()-+={}[]|\\:;\"'<>,.?/`~")

# Checked in priority order; a character lands in the first class it matches.
CHARACTER_CLASSES: tuple[tuple[str, frozenset[str]], ...] = (
    ("Uppercase", frozenset(string.ascii_uppercase)),
    ("Lowercase", frozenset(string.ascii_lowercase)),
    ("Digit", frozenset(string.digits)),
    ("Special Char", SPECIAL_CHARACTERS),
)


def classify(char: str) -> str | None:
    """Return the name of the first character class ``char`` belongs to."""
    for label, members in CHARACTER_CLASSES:
        if char in members:
            return label
    return None


@dataclass(frozen=True)
class CharacterComplexityCriterion(Criterion):
    """Awards ``weight * types_met // 4`` for the character classes present.

    Passes only when all four classes appear. The failure message lists the
    missing classes in fixed order.
    """

    name: str = "Character Complexity (4 types)"
    weight: int = 50

    def evaluate(self, password: str) -> CriterionResult:
        present = {classify(char) for char in password}
        missing = [label for label, _ in CHARACTER_CLASSES if label not in present]
        types_met = len(CHARACTER_CLASSES) - len(missing)
        score = self.weight * types_met // len(CHARACTER_CLASSES)

        if not missing:
            return self._result(True, "Excellent! All 4 character types are present.", score)
        return self._result(False, f"Missing: {', '.join(missing)}.", score)
