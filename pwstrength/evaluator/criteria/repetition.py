"""Repeated-character criterion."""

from __future__ import annotations

import re
from dataclasses import dataclass

from pwstrength.evaluator import CriterionResult
from pwstrength.evaluator.criteria.base import Criterion

# Any code point, newline included, followed by two copies of itself.
TRIPLE_RUN = re.compile(r"(.)\1\1", re.DOTALL)


def has_triple_run(password: str) -> bool:
    return TRIPLE_RUN.search(password) is not None


@dataclass(frozen=True)
class RepetitionFreedomCriterion(Criterion):
    name: str = "No Repetitive Sequences (AAA)"
    weight: int = 15

    def evaluate(self, password: str) -> CriterionResult:
        if has_triple_run(password):
            return self._result(
                False,
                "Warning: Contains three or more identical characters in a row (e.g., 'aaa').",
            )
        return self._result(True, "No obvious triple repetitions found.")
