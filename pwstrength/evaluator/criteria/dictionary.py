"""Common word / pattern criterion."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

from pwstrength.evaluator import CriterionResult
from pwstrength.evaluator.criteria.base import Criterion

WEAK_WORDS: frozenset[str] = frozenset({
    "password",
    "123456",
    "qwerty",
    "admin",
    "qazwsx",
    "12345678",
    "abc",
    "god",
    "user",
    "access",
})

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lowercase ``A-Z`` only, leaving every other code point untouched."""
    return text.translate(_ASCII_LOWER)


@dataclass(frozen=True)
class DictionaryFreedomCriterion(Criterion):
    """Fails when any weak word occurs anywhere inside the password.

    Matching is case-insensitive substring containment, so ``mypassword1``
    fails on ``password``.
    """

    name: str = "Not a Common Word/Pattern"
    weight: int = 10
    weak_words: frozenset[str] = field(default=WEAK_WORDS)

    def find_weak_word(self, password: str) -> str | None:
        lowered = ascii_lower(password)
        for word in sorted(self.weak_words):
            if word in lowered:
                return word
        return None

    def evaluate(self, password: str) -> CriterionResult:
        if self.find_weak_word(password) is not None:
            return self._result(False, "Warning: Contains a common or dictionary word/sequence.")
        return self._result(True, "Password does not contain common dictionary words.")
