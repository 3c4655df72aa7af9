"""Base dataclass for password criteria."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pwstrength.evaluator import CriterionResult


@dataclass(frozen=True)
class Criterion(ABC):
    """A single independently weighted password rule."""

    name: str
    weight: int  # maximum score this criterion can contribute

    @abstractmethod
    def evaluate(self, password: str) -> CriterionResult:
        """Inspect ``password`` and return a verdict. Must never raise."""

    def _result(self, passed: bool, message: str, score: int | None = None) -> CriterionResult:
        """Build a result tagged with this criterion's name.

        All-or-nothing criteria omit ``score``: it becomes ``weight`` when
        passed and 0 otherwise.
        """
        if score is None:
            score = self.weight if passed else 0
        return CriterionResult(name=self.name, passed=passed, message=message, score=score)
