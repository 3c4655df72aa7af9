"""Password evaluation service: runs every criterion and aggregates the score.

Provides a ``PasswordEvaluator`` that holds an ordered, immutable sequence
of criteria and returns an ``EvaluationReport`` per password. Evaluations
share no state, so one evaluator can serve any number of calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pwstrength.config.eval_config import DEFAULT_SCALE, StrengthScale
from pwstrength.evaluator import MAX_TOTAL_SCORE, CriterionResult, EvaluationReport, Strength
from pwstrength.evaluator.criteria import Criterion, get_default_criteria

logger = logging.getLogger(__name__)


class PasswordEvaluator:
    """Runs a fixed list of criteria against a password.

    Attributes:
        criteria: Criteria in evaluation (and display) order.
        scale: Thresholds used to label the total score.
    """

    def __init__(
        self,
        criteria: Iterable[Criterion] | None = None,
        scale: StrengthScale = DEFAULT_SCALE,
    ) -> None:
        self.criteria: tuple[Criterion, ...] = (
            tuple(criteria) if criteria is not None else get_default_criteria()
        )
        self.scale = scale

    def check(self, password: str) -> EvaluationReport:
        """Evaluate ``password`` against every criterion in order.

        An empty password short-circuits to a zero score with no results.
        Otherwise each score is clamped to ``[0, weight]``, then the scores
        are summed and the total clamped to 100. Never raises for any string.
        """
        if not password:
            logger.debug("Empty password, skipping evaluation")
            return EvaluationReport(total_score=0, results=[], strength=Strength.NONE)

        results = [self._run(criterion, password) for criterion in self.criteria]
        raw_total = sum(r.score for r in results)
        total = min(raw_total, MAX_TOTAL_SCORE)
        if raw_total > MAX_TOTAL_SCORE:
            logger.warning("Score %d exceeds %d, clamping", raw_total, MAX_TOTAL_SCORE)

        logger.debug(
            "Evaluated password of length %d: %s -> %d",
            len(password),
            ", ".join(f"{r.name}={r.score}" for r in results),
            total,
        )
        return EvaluationReport(
            total_score=total,
            results=results,
            strength=self.scale.get_strength(total),
        )

    @staticmethod
    def _run(criterion: Criterion, password: str) -> CriterionResult:
        result = criterion.evaluate(password)
        bounded = max(0, min(result.score, criterion.weight))
        if bounded != result.score:
            logger.warning(
                "%s returned score %d outside [0, %d], clamping to %d",
                criterion.name,
                result.score,
                criterion.weight,
                bounded,
            )
            return result.model_copy(update={"score": bounded})
        return result
