"""
Psychosocial Risk Engine - Implementation

Deterministic sector analysis with:
- Polarity-corrected answer normalization
- Sector-wide severity per factor
- External or automatic probability
- Fixed 3x3 risk matrix
- Severity / risk counts for the report

Author: Diagnostic Team
"""

import logging
from typing import List, Optional, Sequence

from .aggregator import SectorAggregator
from .catalog import FactorCatalog, build_default_catalog
from .definition import (
    FactorAnalysis,
    ProbabilityAssessment,
    RiskFactor,
    ScoringPolicy,
    SectorAnalysisData,
    SurveyResponse,
    UnknownFactorError,
)
from .matrix import RiskMatrixClassifier
from .normalizer import ResponseNormalizer
from .probability import ProbabilityResolver
from .severity import SeverityAggregator

logger = logging.getLogger(__name__)


class PsychosocialRiskEngine:
    """
    Sector-level risk scoring and classification.

    Stateless between calls: the catalog and policy are injected once and
    every call recomputes everything from the given snapshot.

    Usage:
        engine = PsychosocialRiskEngine(build_default_catalog())
        result = engine.analyze("sector-1", responses, assessment)

        for item in result.factors:
            print(item.factor.label, item.severity_level, item.risk_level)
    """

    def __init__(
        self,
        catalog: FactorCatalog,
        policy: Optional[ScoringPolicy] = None,
    ):
        """
        Initialize the engine.

        Args:
            catalog: Validated factor catalog (factors + inverted questions).
            policy: Scoring policy; defaults to ScoringPolicy().
        """
        self.catalog = catalog
        self.policy = policy or ScoringPolicy()

        self.normalizer = ResponseNormalizer(catalog)
        self.severity = SeverityAggregator(self.normalizer, self.policy)
        self.probability = ProbabilityResolver(self.policy)
        self.matrix = RiskMatrixClassifier(self.policy)
        self.aggregator = SectorAggregator()

    def analyze(
        self,
        sector_id: str,
        responses: Sequence[SurveyResponse],
        assessment: Optional[ProbabilityAssessment] = None,
    ) -> SectorAnalysisData:
        """
        Analyze every catalog factor for one sector.

        Args:
            sector_id: Sector being analyzed.
            responses: Survey responses; other sectors' responses are skipped.
            assessment: Optional psychologist probability assessment.

        Returns:
            SectorAnalysisData with one FactorAnalysis per catalog factor.

        Raises:
            UnknownFactorError: If the assessment is keyed by ids outside the catalog.
        """
        sector_responses = [r for r in responses if r.sector_id == sector_id]
        skipped = len(responses) - len(sector_responses)
        if skipped:
            logger.info(f"Skipping {skipped} responses from other sectors (sector={sector_id})")

        if assessment is not None and assessment.sector_id != sector_id:
            logger.warning(
                f"Probability assessment is for sector '{assessment.sector_id}', "
                f"not '{sector_id}'; using automatic probability"
            )
            assessment = None

        if assessment is not None:
            self._check_factor_ids(assessment.scores)

        logger.info(
            f"Analyzing sector '{sector_id}': {len(sector_responses)} respondents, "
            f"{'external' if assessment else 'automatic'} probability"
        )

        factors: List[FactorAnalysis] = []
        rejected = 0
        for factor in self.catalog:
            analysis, factor_rejected = self._analyze_factor(factor, sector_responses, assessment)
            factors.append(analysis)
            rejected += factor_rejected

        severity_stats, risk_stats = self.aggregator.aggregate(factors)

        return SectorAnalysisData(
            sector_id=sector_id,
            factors=factors,
            severity_stats=severity_stats,
            risk_stats=risk_stats,
            total_respondents=len(sector_responses),
            job_functions=self._job_functions(sector_responses),
            rejected_answers=rejected,
            low_confidence=not sector_responses,
        )

    def _analyze_factor(
        self,
        factor: RiskFactor,
        responses: Sequence[SurveyResponse],
        assessment: Optional[ProbabilityAssessment],
    ) -> tuple:
        severity = self.severity.aggregate(factor, responses)
        probability = self.probability.resolve(factor, severity, assessment)
        risk = self.matrix.classify(
            severity.level,
            probability.level,
            probability_score=probability.score,
            probability_source=probability.source,
        )

        logger.debug(
            f"Factor '{factor.key}': severity={severity.raw_score:.4f} ({severity.level.value}), "
            f"probability={probability.score} ({probability.level.value}, {probability.source.value}), "
            f"risk={risk.value}"
        )

        analysis = FactorAnalysis(
            factor=factor,
            severity_score=severity.score,
            severity_level=severity.level,
            probability_score=probability.score,
            probability_level=probability.level,
            probability_source=probability.source,
            risk_level=risk,
            sample_size=severity.sample_size,
        )
        return analysis, severity.rejected_answers

    def _check_factor_ids(self, scores) -> None:
        unknown = set(scores) - {factor.id for factor in self.catalog}
        if unknown:
            logger.warning(f"Probability assessment references unknown factor ids: {sorted(unknown)}")
            raise UnknownFactorError(unknown)

    @staticmethod
    def _job_functions(responses: Sequence[SurveyResponse]) -> List[str]:
        seen: List[str] = []
        for response in responses:
            function = response.job_function.strip()
            if function and function not in seen:
                seen.append(function)
        return seen


# Convenience function
def analyze_sector(
    sector_id: str,
    responses: Sequence[SurveyResponse],
    assessment: Optional[ProbabilityAssessment] = None,
) -> SectorAnalysisData:
    """
    Analyze a sector with the default catalog and policy.

    Convenience function for simple use cases.
    """
    engine = PsychosocialRiskEngine(build_default_catalog())
    return engine.analyze(sector_id, responses, assessment)


def format_analysis_summary(analysis: SectorAnalysisData) -> str:
    """Human-readable multi-line summary, for logs and the console."""
    lines = [
        "=" * 60,
        f"SECTOR ANALYSIS: {analysis.sector_id}",
        "=" * 60,
        f"Respondents: {analysis.total_respondents}"
        + (" (low confidence)" if analysis.low_confidence else ""),
        f"Severity: low={analysis.severity_stats.low} "
        f"medium={analysis.severity_stats.medium} high={analysis.severity_stats.high}",
        f"Risk: low={analysis.risk_stats.low} medium={analysis.risk_stats.medium} "
        f"high={analysis.risk_stats.high} critical={analysis.risk_stats.critical}",
        "",
    ]
    for item in analysis.factors:
        lines.append(
            f"  {item.factor.label[:40]:<40} "
            f"S={item.severity_score:.2f} ({item.severity_level.value:<6}) "
            f"P={item.probability_score:.2f} ({item.probability_level.value:<6}) "
            f"-> {item.risk_level.value.upper()}"
        )
    lines.append("=" * 60)
    return "\n".join(lines)
