"""
Unit tests for RiskMatrixClassifier.
"""

import pytest

from skills.psychosocial_risk_engine import (
    RISK_MATRIX,
    ClassificationTableError,
    ProbabilityLevel,
    ProbabilitySource,
    RiskLevel,
    RiskMatrixClassifier,
    ScoringPolicy,
    SeverityLevel,
)

S, P, R = SeverityLevel, ProbabilityLevel, RiskLevel


class TestRiskMatrixTable:
    """The fixed 3x3 table."""

    @pytest.mark.parametrize(
        "severity,probability,expected",
        [
            (S.LOW, P.LOW, R.LOW),
            (S.LOW, P.MEDIUM, R.MEDIUM),
            (S.LOW, P.HIGH, R.MEDIUM),
            (S.MEDIUM, P.LOW, R.MEDIUM),
            (S.MEDIUM, P.MEDIUM, R.MEDIUM),
            (S.MEDIUM, P.HIGH, R.HIGH),
            (S.HIGH, P.LOW, R.MEDIUM),
            (S.HIGH, P.MEDIUM, R.HIGH),
            (S.HIGH, P.HIGH, R.HIGH),
        ],
    )
    def test_every_cell(self, severity, probability, expected):
        assert RiskMatrixClassifier().classify(severity, probability) == expected

    def test_table_is_total_and_has_no_critical_cell(self):
        assert len(RISK_MATRIX) == 9
        assert RiskLevel.CRITICAL not in RISK_MATRIX.values()

    def test_high_severity_low_probability_is_medium(self):
        assert RiskMatrixClassifier().classify(S.HIGH, P.LOW) == R.MEDIUM

    def test_missing_cell_is_a_table_error(self):
        classifier = RiskMatrixClassifier(table={(S.LOW, P.LOW): R.LOW})

        with pytest.raises(ClassificationTableError) as exc_info:
            classifier.classify(S.HIGH, P.HIGH)

        assert "severidad=high" in str(exc_info.value)


class TestCriticalRule:
    """CRITICAL requires HIGH severity plus an external probability at the ceiling."""

    def test_external_ceiling_with_high_severity_is_critical(self):
        result = RiskMatrixClassifier().classify(
            S.HIGH, P.HIGH, probability_score=4.0, probability_source=ProbabilitySource.EXTERNAL
        )
        assert result == R.CRITICAL

    def test_automatic_ceiling_is_not_critical(self):
        result = RiskMatrixClassifier().classify(
            S.HIGH, P.HIGH, probability_score=4.0, probability_source=ProbabilitySource.AUTOMATIC
        )
        assert result == R.HIGH

    def test_external_below_ceiling_is_high(self):
        result = RiskMatrixClassifier().classify(
            S.HIGH, P.HIGH, probability_score=3.5, probability_source=ProbabilitySource.EXTERNAL
        )
        assert result == R.HIGH

    def test_medium_severity_never_escalates(self):
        result = RiskMatrixClassifier().classify(
            S.MEDIUM, P.HIGH, probability_score=4.0, probability_source=ProbabilitySource.EXTERNAL
        )
        assert result == R.HIGH

    def test_threshold_comes_from_policy(self):
        classifier = RiskMatrixClassifier(ScoringPolicy(critical_probability_threshold=3.5))
        result = classifier.classify(
            S.HIGH, P.HIGH, probability_score=3.5, probability_source=ProbabilitySource.EXTERNAL
        )
        assert result == R.CRITICAL


class TestRiskColors:

    def test_every_level_has_a_color(self):
        assert {RiskMatrixClassifier.color_for(level) for level in RiskLevel} == {
            "green", "yellow", "red", "black"
        }
