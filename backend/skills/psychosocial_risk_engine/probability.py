"""
Psychosocial Risk Engine - Probability Resolver

Probability comes from the psychologist's assessment when one exists for
the factor, otherwise it is derived from the severity band.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .definition import (
    InvalidScoreError,
    ProbabilityAssessment,
    ProbabilityLevel,
    ProbabilitySource,
    RiskFactor,
    ScoringPolicy,
)
from .severity import HIGH_THRESHOLD, MEDIUM_THRESHOLD, SCORE_MAX, SCORE_MIN, SeverityResult

logger = logging.getLogger(__name__)


def classify_probability(score: float) -> ProbabilityLevel:
    """Same closed-above 3-band thresholds as severity."""
    if not SCORE_MIN <= score <= SCORE_MAX:
        raise InvalidScoreError(score, kind="probability")

    if score >= HIGH_THRESHOLD:
        return ProbabilityLevel.HIGH
    elif score >= MEDIUM_THRESHOLD:
        return ProbabilityLevel.MEDIUM
    return ProbabilityLevel.LOW


@dataclass(frozen=True)
class ProbabilityResult:
    score: float
    level: ProbabilityLevel
    source: ProbabilitySource


class ProbabilityResolver:
    """
    Resolves the probability score of a factor in external or automatic mode.

    Automatic mode is a step function of the severity band (see
    ScoringPolicy.automatic_probability_scores): LOW=1.0, MEDIUM=2.5,
    HIGH=4.0 by default, so probability always lands in the same band
    as severity.
    """

    def __init__(self, policy: Optional[ScoringPolicy] = None):
        self.policy = policy or ScoringPolicy()

    def resolve(
        self,
        factor: RiskFactor,
        severity: SeverityResult,
        assessment: Optional[ProbabilityAssessment] = None,
    ) -> ProbabilityResult:
        external = assessment.score_for(factor.id) if assessment is not None else None

        if external is not None:
            logger.debug(f"Factor '{factor.key}': external probability {external}")
            return ProbabilityResult(
                score=float(external),
                level=classify_probability(external),
                source=ProbabilitySource.EXTERNAL,
            )

        return self.derive(severity)

    def derive(self, severity: SeverityResult) -> ProbabilityResult:
        score = self.policy.automatic_probability_scores[severity.level]
        return ProbabilityResult(
            score=score,
            level=classify_probability(score),
            source=ProbabilitySource.AUTOMATIC,
        )
