"""
Psychosocial Risk Engine - Factor Catalog

Static configuration of the risk factors and of the questions whose
answer polarity is reversed. Validated once, at construction.

Author: Diagnostic Team
"""

import logging
from typing import Dict, FrozenSet, Iterable, Iterator, Optional, Tuple

from .definition import CatalogConfigurationError, RiskFactor

logger = logging.getLogger(__name__)


QUESTIONS_PER_FACTOR = 10
EXPECTED_FACTOR_COUNT = 9

DEFAULT_RISK_FACTORS: Tuple[RiskFactor, ...] = (
    RiskFactor(id=1, key="harassment", label="Moral and Sexual Harassment",
               start_question=1, end_question=10),
    RiskFactor(id=2, key="workload", label="Excessive Workload",
               start_question=11, end_question=20),
    RiskFactor(id=3, key="recognition", label="Lack of Recognition and Rewards",
               start_question=21, end_question=30),
    RiskFactor(id=4, key="climate", label="Organizational Climate",
               start_question=31, end_question=40),
    RiskFactor(id=5, key="autonomy", label="Lack of Autonomy and Control over Work",
               start_question=41, end_question=50),
    RiskFactor(id=6, key="pressure", label="Pressure and Unrealistic Targets",
               start_question=51, end_question=60),
    RiskFactor(id=7, key="insecurity", label="Insecurity and Threats",
               start_question=61, end_question=70),
    RiskFactor(id=8, key="conflicts", label="Interpersonal Conflicts and Poor Communication",
               start_question=71, end_question=80),
    RiskFactor(id=9, key="work_life_balance", label="Work-Life Balance",
               start_question=81, end_question=90),
)


class FactorCatalog:
    """
    Immutable catalog of risk factors plus the inverted-question set.

    Usage:
        catalog = FactorCatalog(DEFAULT_RISK_FACTORS, inverted_questions={12, 47})
        factor = catalog.get_by_key("workload")
        catalog.is_inverted(12)  # True

    Raises:
        CatalogConfigurationError: If ranges overlap, leave gaps, have the
            wrong size, or an inverted question is outside every factor.
    """

    __slots__ = ("_factors", "_inverted", "_by_id", "_by_key")

    def __init__(
        self,
        factors: Iterable[RiskFactor],
        inverted_questions: Iterable[int] = (),
        questions_per_factor: int = QUESTIONS_PER_FACTOR,
        expected_factor_count: Optional[int] = EXPECTED_FACTOR_COUNT,
    ):
        ordered = tuple(sorted(factors, key=lambda f: f.start_question))
        inverted = frozenset(inverted_questions)

        self._validate(ordered, inverted, questions_per_factor, expected_factor_count)

        self._factors = ordered
        self._inverted = inverted
        self._by_id: Dict[int, RiskFactor] = {f.id: f for f in ordered}
        self._by_key: Dict[str, RiskFactor] = {f.key: f for f in ordered}

        logger.debug(
            f"Catalog loaded: {len(ordered)} factors, "
            f"questions {self.first_question}-{self.last_question}, "
            f"{len(inverted)} inverted"
        )

    @staticmethod
    def _validate(
        factors: Tuple[RiskFactor, ...],
        inverted: FrozenSet[int],
        questions_per_factor: int,
        expected_factor_count: Optional[int],
    ) -> None:
        if not factors:
            raise CatalogConfigurationError("no factors configured")

        if expected_factor_count is not None and len(factors) != expected_factor_count:
            raise CatalogConfigurationError(
                f"expected {expected_factor_count} factors, got {len(factors)}"
            )

        ids = [f.id for f in factors]
        if len(set(ids)) != len(ids):
            raise CatalogConfigurationError(f"duplicate factor ids: {sorted(ids)}")

        keys = [f.key for f in factors]
        if len(set(keys)) != len(keys):
            raise CatalogConfigurationError(f"duplicate factor keys: {sorted(keys)}")

        for factor in factors:
            span = len(factor.questions)
            if span != questions_per_factor:
                raise CatalogConfigurationError(
                    f"factor '{factor.key}' spans {span} questions "
                    f"({factor.start_question}-{factor.end_question}), "
                    f"expected {questions_per_factor}"
                )

        for previous, current in zip(factors, factors[1:]):
            if current.start_question <= previous.end_question:
                raise CatalogConfigurationError(
                    f"factors '{previous.key}' and '{current.key}' overlap "
                    f"at question {current.start_question}"
                )
            if current.start_question != previous.end_question + 1:
                raise CatalogConfigurationError(
                    f"gap between '{previous.key}' (ends {previous.end_question}) "
                    f"and '{current.key}' (starts {current.start_question})"
                )

        first, last = factors[0].start_question, factors[-1].end_question
        stray = sorted(q for q in inverted if not first <= q <= last)
        if stray:
            raise CatalogConfigurationError(
                f"inverted questions outside the catalog range {first}-{last}: {stray}"
            )

    @property
    def factors(self) -> Tuple[RiskFactor, ...]:
        return self._factors

    @property
    def inverted_questions(self) -> FrozenSet[int]:
        return self._inverted

    @property
    def first_question(self) -> int:
        return self._factors[0].start_question

    @property
    def last_question(self) -> int:
        return self._factors[-1].end_question

    @property
    def question_count(self) -> int:
        return self.last_question - self.first_question + 1

    def __len__(self) -> int:
        return len(self._factors)

    def __iter__(self) -> Iterator[RiskFactor]:
        return iter(self._factors)

    def get(self, factor_id: int) -> RiskFactor:
        """Return the factor with ``factor_id`` or raise KeyError."""
        try:
            return self._by_id[factor_id]
        except KeyError:
            raise KeyError(f"Unknown factor id: {factor_id}") from None

    def get_by_key(self, key: str) -> RiskFactor:
        """Return the factor with the exact ``key`` or raise KeyError."""
        try:
            return self._by_key[key]
        except KeyError:
            raise KeyError(f"Unknown factor key: {key!r}") from None

    def factor_for_question(self, question: int) -> Optional[RiskFactor]:
        for factor in self._factors:
            if factor.owns(question):
                return factor
        return None

    def is_inverted(self, question: int) -> bool:
        return question in self._inverted


def build_default_catalog(inverted_questions: Iterable[int] = ()) -> FactorCatalog:
    """Catalog with the nine NR-01 factors and the given inverted questions."""
    return FactorCatalog(DEFAULT_RISK_FACTORS, inverted_questions=inverted_questions)
