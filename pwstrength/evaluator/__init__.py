"""Pydantic models for evaluation results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

MAX_TOTAL_SCORE = 100


class Strength(str, Enum):
    VERY_STRONG = "Very Strong"
    STRONG = "Strong"
    MEDIUM = "Medium"
    NONE = "N/A"


class CriterionResult(BaseModel):
    """Verdict of a single criterion, tagged with the criterion's name."""

    model_config = ConfigDict(frozen=True)

    name: str
    passed: bool
    message: str
    score: int  # the evaluator bounds this to [0, weight]


class EvaluationReport(BaseModel):
    """Aggregate outcome of one password evaluation."""

    model_config = ConfigDict(frozen=True)

    total_score: int = Field(ge=0, le=MAX_TOTAL_SCORE)
    results: list[CriterionResult] = Field(default_factory=list)
    strength: Strength = Strength.NONE

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def max_score(self) -> int:
        return MAX_TOTAL_SCORE


__all__ = [
    "MAX_TOTAL_SCORE",
    "CriterionResult",
    "EvaluationReport",
    "Strength",
]
