"""
Psychosocial Risk Engine - Response Normalizer

Turns raw 0..4 answers into polarity-corrected values. Absent and
out-of-scale answers are dropped, never imputed.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .catalog import FactorCatalog
from .definition import RiskFactor, SurveyResponse

logger = logging.getLogger(__name__)


MIN_ANSWER = 0
MAX_ANSWER = 4


@dataclass
class NormalizedSample:
    """Normalized answers of one or more respondents for a single factor."""

    values: List[int] = field(default_factory=list)
    rejected: int = 0

    def extend(self, other: "NormalizedSample") -> None:
        self.values.extend(other.values)
        self.rejected += other.rejected


class ResponseNormalizer:
    """
    Pure polarity correction over the injected catalog.

    Usage:
        normalizer = ResponseNormalizer(catalog)
        normalizer.normalize(response, 12)   # 4 - raw if 12 is inverted
    """

    def __init__(
        self,
        catalog: FactorCatalog,
        min_answer: int = MIN_ANSWER,
        max_answer: int = MAX_ANSWER,
    ):
        self.catalog = catalog
        self.min_answer = min_answer
        self.max_answer = max_answer

    def is_valid(self, raw: int) -> bool:
        return self.min_answer <= raw <= self.max_answer

    def normalize(self, response: SurveyResponse, question: int) -> Optional[int]:
        """
        Polarity-corrected answer for ``question``.

        Returns:
            The corrected value, or None when the respondent skipped the
            question or answered outside the scale.
        """
        raw = response.answers.get(question)
        if raw is None:
            return None

        if not self.is_valid(raw):
            logger.warning(
                f"Discarding out-of-range answer: response={response.id} "
                f"question={question} value={raw}"
            )
            return None

        if self.catalog.is_inverted(question):
            return self.max_answer - raw
        return raw

    def factor_samples(self, response: SurveyResponse, factor: RiskFactor) -> NormalizedSample:
        """Normalized answers of one respondent over ``factor``'s question block."""
        sample = NormalizedSample()
        for question in factor.questions:
            raw = response.answers.get(question)
            if raw is None:
                continue
            value = self.normalize(response, question)
            if value is None:
                sample.rejected += 1
            else:
                sample.values.append(value)
        return sample
