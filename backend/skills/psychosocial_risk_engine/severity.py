"""
Psychosocial Risk Engine - Severity Aggregator

Sector-wide severity per factor: the mean of every normalized answer of
every respondent in the sector for that factor's question block.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .definition import (
    InvalidScoreError,
    RiskFactor,
    ScoringPolicy,
    SeverityLevel,
    SurveyResponse,
)
from .normalizer import NormalizedSample, ResponseNormalizer

logger = logging.getLogger(__name__)


SCORE_MIN = 0.0
SCORE_MAX = 4.0

# Closed-above bands shared by severity and probability
HIGH_THRESHOLD = 3.0
MEDIUM_THRESHOLD = 2.0


def classify_severity(score: float) -> SeverityLevel:
    """
    Map a severity score to its band.

    Boundaries belong to the higher band: 2.0 is MEDIUM, 3.0 is HIGH.

    Raises:
        InvalidScoreError: If score is outside [0, 4].
    """
    if not SCORE_MIN <= score <= SCORE_MAX:
        raise InvalidScoreError(score, kind="severity")

    if score >= HIGH_THRESHOLD:
        return SeverityLevel.HIGH
    elif score >= MEDIUM_THRESHOLD:
        return SeverityLevel.MEDIUM
    return SeverityLevel.LOW


@dataclass(frozen=True)
class SeverityResult:
    raw_score: float
    score: float
    level: SeverityLevel
    sample_size: int
    rejected_answers: int
    defaulted: bool = False


class SeverityAggregator:
    """
    Computes severity for one factor across all respondents of a sector.

    Usage:
        aggregator = SeverityAggregator(ResponseNormalizer(catalog))
        result = aggregator.aggregate(catalog.get_by_key("workload"), responses)
        result.level  # classified on the unrounded mean
    """

    def __init__(
        self,
        normalizer: ResponseNormalizer,
        policy: Optional[ScoringPolicy] = None,
    ):
        self.normalizer = normalizer
        self.policy = policy or ScoringPolicy()

    def collect(self, factor: RiskFactor, responses: Sequence[SurveyResponse]) -> NormalizedSample:
        sample = NormalizedSample()
        for response in responses:
            sample.extend(self.normalizer.factor_samples(response, factor))
        return sample

    def aggregate(self, factor: RiskFactor, responses: Sequence[SurveyResponse]) -> SeverityResult:
        sample = self.collect(factor, responses)

        if sample.values:
            raw_score = sum(sample.values) / len(sample.values)
            defaulted = False
        else:
            raw_score = self.policy.default_severity_score
            defaulted = True
            logger.info(
                f"Factor '{factor.key}' has no valid answers, "
                f"using default severity {raw_score}"
            )

        level = classify_severity(raw_score)

        return SeverityResult(
            raw_score=raw_score,
            score=round(raw_score, self.policy.display_decimals),
            level=level,
            sample_size=len(sample.values),
            rejected_answers=sample.rejected,
            defaulted=defaulted,
        )
