"""
Psychosocial Risk Engine - Sector Aggregator

Counts factors per severity band and per risk level. Never recomputes
scores.
"""

from typing import Sequence, Tuple

from .definition import (
    EmptyFactorListError,
    FactorAnalysis,
    RiskEngineError,
    RiskLevel,
    RiskStats,
    SeverityLevel,
    SeverityStats,
)


class SectorAggregator:
    """Rolls per-factor results into sector-wide counts."""

    def aggregate(self, factors: Sequence[FactorAnalysis]) -> Tuple[SeverityStats, RiskStats]:
        """
        Build severity and risk counts.

        Raises:
            EmptyFactorListError: If ``factors`` is empty.
        """
        if not factors:
            raise EmptyFactorListError()

        severity_counts = {level: 0 for level in SeverityLevel}
        risk_counts = {level: 0 for level in RiskLevel}

        for item in factors:
            severity_counts[item.severity_level] += 1
            risk_counts[item.risk_level] += 1

        severity_stats = SeverityStats(**{level.value: n for level, n in severity_counts.items()})
        risk_stats = RiskStats(**{level.value: n for level, n in risk_counts.items()})

        if severity_stats.total != len(factors) or risk_stats.total != len(factors):
            raise RiskEngineError(
                f"Stats do not add up to {len(factors)} factors: "
                f"severity={severity_stats.total}, risk={risk_stats.total}"
            )

        return severity_stats, risk_stats
