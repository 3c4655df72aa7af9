"""Minimum length criterion."""

from __future__ import annotations

from dataclasses import dataclass

from pwstrength.evaluator import CriterionResult
from pwstrength.evaluator.criteria.base import Criterion

MIN_LENGTH = 8


@dataclass(frozen=True)
class LengthCriterion(Criterion):
    name: str = f"Minimum Length ({MIN_LENGTH} characters)"
    weight: int = 25
    min_length: int = MIN_LENGTH

    def evaluate(self, password: str) -> CriterionResult:
        if len(password) >= self.min_length:
            return self._result(True, f"Great! Password is {self.min_length}+ characters long.")
        missing = self.min_length - len(password)
        return self._result(False, f"Needs {missing} more character(s).")
