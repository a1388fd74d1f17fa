"""
Psychosocial Risk Engine - Risk Matrix Classifier

Fixed ordinal 3x3 lookup. A table avoids the jumps of a severity x
probability product near band boundaries.
"""

from typing import Dict, Optional, Tuple

from .definition import (
    ClassificationTableError,
    ProbabilityLevel,
    ProbabilitySource,
    RiskLevel,
    ScoringPolicy,
    SeverityLevel,
)


# (severity, probability) -> risk
RISK_MATRIX: Dict[Tuple[SeverityLevel, ProbabilityLevel], RiskLevel] = {
    (SeverityLevel.LOW, ProbabilityLevel.LOW): RiskLevel.LOW,
    (SeverityLevel.LOW, ProbabilityLevel.MEDIUM): RiskLevel.MEDIUM,
    (SeverityLevel.LOW, ProbabilityLevel.HIGH): RiskLevel.MEDIUM,
    (SeverityLevel.MEDIUM, ProbabilityLevel.LOW): RiskLevel.MEDIUM,
    (SeverityLevel.MEDIUM, ProbabilityLevel.MEDIUM): RiskLevel.MEDIUM,
    (SeverityLevel.MEDIUM, ProbabilityLevel.HIGH): RiskLevel.HIGH,
    (SeverityLevel.HIGH, ProbabilityLevel.LOW): RiskLevel.MEDIUM,
    (SeverityLevel.HIGH, ProbabilityLevel.MEDIUM): RiskLevel.HIGH,
    (SeverityLevel.HIGH, ProbabilityLevel.HIGH): RiskLevel.HIGH,
}

# Report badge colors, one per risk level
RISK_COLORS: Dict[RiskLevel, str] = {
    RiskLevel.LOW: "green",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.HIGH: "red",
    RiskLevel.CRITICAL: "black",
}


class RiskMatrixClassifier:
    """
    (severity level, probability level) -> risk level.

    CRITICAL is only reachable with HIGH severity and a probability
    entered by the psychologist at or above
    ``policy.critical_probability_threshold``.

    Usage:
        classifier = RiskMatrixClassifier()
        classifier.classify(SeverityLevel.HIGH, ProbabilityLevel.LOW)  # MEDIUM
    """

    def __init__(
        self,
        policy: Optional[ScoringPolicy] = None,
        table: Optional[Dict[Tuple[SeverityLevel, ProbabilityLevel], RiskLevel]] = None,
    ):
        self.policy = policy or ScoringPolicy()
        self.table = table if table is not None else RISK_MATRIX

    def lookup(self, severity: SeverityLevel, probability: ProbabilityLevel) -> RiskLevel:
        try:
            return self.table[(severity, probability)]
        except KeyError:
            raise ClassificationTableError(severity, probability) from None

    def classify(
        self,
        severity: SeverityLevel,
        probability: ProbabilityLevel,
        probability_score: Optional[float] = None,
        probability_source: Optional[ProbabilitySource] = None,
    ) -> RiskLevel:
        risk = self.lookup(severity, probability)

        if (
            severity == SeverityLevel.HIGH
            and risk == RiskLevel.HIGH
            and probability_source == ProbabilitySource.EXTERNAL
            and probability_score is not None
            and probability_score >= self.policy.critical_probability_threshold
        ):
            return RiskLevel.CRITICAL

        return risk

    @staticmethod
    def color_for(risk: RiskLevel) -> str:
        return RISK_COLORS[risk]
