"""Unit tests for evaluation Pydantic models."""

import pytest
from pydantic import ValidationError

from pwstrength.evaluator import CriterionResult, EvaluationReport, Strength


class TestCriterionResult:
    def test_out_of_range_score_left_to_evaluator(self):
        result = CriterionResult(name="x", passed=False, message="", score=-1)
        assert result.score == -1

    def test_frozen(self):
        result = CriterionResult(name="x", passed=True, message="ok", score=5)
        with pytest.raises(ValidationError):
            result.score = 6


class TestEvaluationReport:
    def test_invalid_total_raises(self):
        with pytest.raises(ValidationError):
            EvaluationReport(total_score=-1)
        with pytest.raises(ValidationError):
            EvaluationReport(total_score=101)

    def test_passed_count(self):
        report = EvaluationReport(
            total_score=35,
            results=[
                CriterionResult(name="a", passed=True, message="", score=25),
                CriterionResult(name="b", passed=False, message="", score=10),
            ],
        )
        assert report.passed_count == 1

    def test_serializes_in_order(self):
        report = EvaluationReport(
            total_score=25,
            results=[
                CriterionResult(name="first", passed=True, message="", score=25),
                CriterionResult(name="second", passed=False, message="", score=0),
            ],
            strength=Strength.MEDIUM,
        )
        dumped = report.model_dump(mode="json")
        assert [r["name"] for r in dumped["results"]] == ["first", "second"]
        assert dumped["strength"] == "Medium"


class TestStrength:
    def test_values(self):
        assert {s.value for s in Strength} == {"Very Strong", "Strong", "Medium", "N/A"}
