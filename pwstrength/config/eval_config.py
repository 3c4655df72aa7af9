"""Strength label thresholds applied to the total score."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pwstrength.evaluator import Strength


class StrengthScale(BaseModel):
    """Minimum total score for each strength label."""

    very_strong: int = Field(default=75, ge=0, le=100)
    strong: int = Field(default=50, ge=0, le=100)
    medium: int = Field(default=1, ge=0, le=100)

    def get_strength(self, score: int) -> Strength:
        """Determine the strength label from a total score."""
        if score >= self.very_strong:
            return Strength.VERY_STRONG
        elif score >= self.strong:
            return Strength.STRONG
        elif score >= self.medium:
            return Strength.MEDIUM
        return Strength.NONE


DEFAULT_SCALE = StrengthScale()
