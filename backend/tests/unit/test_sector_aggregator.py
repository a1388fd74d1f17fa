"""
Unit tests for SectorAggregator.
"""

import pytest

from skills.psychosocial_risk_engine import (
    EmptyFactorListError,
    FactorAnalysis,
    ProbabilityLevel,
    ProbabilitySource,
    RiskLevel,
    SectorAggregator,
    SeverityLevel,
)


@pytest.fixture
def make_analysis(catalog):
    def _create(factor_id: int, severity: SeverityLevel, risk: RiskLevel):
        return FactorAnalysis(
            factor=catalog.get(factor_id),
            severity_score=1.0,
            severity_level=severity,
            probability_score=1.0,
            probability_level=ProbabilityLevel.LOW,
            probability_source=ProbabilitySource.AUTOMATIC,
            risk_level=risk,
        )
    return _create


class TestSectorAggregator:

    def test_counts_per_level(self, make_analysis):
        factors = [
            make_analysis(1, SeverityLevel.LOW, RiskLevel.LOW),
            make_analysis(2, SeverityLevel.MEDIUM, RiskLevel.MEDIUM),
            make_analysis(3, SeverityLevel.HIGH, RiskLevel.HIGH),
            make_analysis(4, SeverityLevel.HIGH, RiskLevel.CRITICAL),
            make_analysis(5, SeverityLevel.HIGH, RiskLevel.MEDIUM),
        ]

        severity, risk = SectorAggregator().aggregate(factors)

        assert (severity.low, severity.medium, severity.high) == (1, 1, 3)
        assert (risk.low, risk.medium, risk.high, risk.critical) == (1, 2, 1, 1)

    def test_totals_equal_factor_count(self, catalog, make_analysis):
        factors = [make_analysis(f.id, SeverityLevel.LOW, RiskLevel.LOW) for f in catalog]

        severity, risk = SectorAggregator().aggregate(factors)

        assert severity.total == 9
        assert risk.total == 9

    def test_empty_input_fails_fast(self):
        with pytest.raises(EmptyFactorListError):
            SectorAggregator().aggregate([])

    def test_total_is_serialized(self, make_analysis):
        severity, risk = SectorAggregator().aggregate(
            [make_analysis(1, SeverityLevel.LOW, RiskLevel.LOW)]
        )

        assert severity.model_dump()["total"] == 1
        assert risk.model_dump()["total"] == 1
