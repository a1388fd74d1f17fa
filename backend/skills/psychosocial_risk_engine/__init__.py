"""
Psychosocial Risk Engine Skill

Deterministic NR-01 psychosocial risk classification.
Converts survey answers and a probability assessment into severity,
probability and risk levels per factor and per sector.
"""

from .definition import (
    CatalogConfigurationError,
    ClassificationTableError,
    EmptyFactorListError,
    FactorAnalysis,
    InvalidScoreError,
    ProbabilityAssessment,
    ProbabilityLevel,
    ProbabilitySource,
    RiskEngineError,
    RiskFactor,
    RiskLevel,
    RiskStats,
    ScoringPolicy,
    SectorAnalysisData,
    SeverityLevel,
    SeverityStats,
    SurveyResponse,
    UnknownFactorError,
)

from .catalog import (
    DEFAULT_RISK_FACTORS,
    EXPECTED_FACTOR_COUNT,
    QUESTIONS_PER_FACTOR,
    FactorCatalog,
    build_default_catalog,
)
from .normalizer import NormalizedSample, ResponseNormalizer
from .severity import SeverityAggregator, SeverityResult, classify_severity
from .probability import ProbabilityResolver, ProbabilityResult, classify_probability
from .matrix import RISK_COLORS, RISK_MATRIX, RiskMatrixClassifier
from .aggregator import SectorAggregator

from .impl import (
    PsychosocialRiskEngine,
    analyze_sector,
    format_analysis_summary,
)

__all__ = [
    # Classes
    "PsychosocialRiskEngine",
    "FactorCatalog",
    "ResponseNormalizer",
    "NormalizedSample",
    "SeverityAggregator",
    "SeverityResult",
    "ProbabilityResolver",
    "ProbabilityResult",
    "RiskMatrixClassifier",
    "SectorAggregator",
    # Models
    "FactorAnalysis",
    "ProbabilityAssessment",
    "ProbabilityLevel",
    "ProbabilitySource",
    "RiskFactor",
    "RiskLevel",
    "RiskStats",
    "ScoringPolicy",
    "SectorAnalysisData",
    "SeverityLevel",
    "SeverityStats",
    "SurveyResponse",
    # Exceptions
    "CatalogConfigurationError",
    "ClassificationTableError",
    "EmptyFactorListError",
    "InvalidScoreError",
    "RiskEngineError",
    "UnknownFactorError",
    # Functions
    "analyze_sector",
    "build_default_catalog",
    "classify_probability",
    "classify_severity",
    "format_analysis_summary",
    # Constants
    "DEFAULT_RISK_FACTORS",
    "EXPECTED_FACTOR_COUNT",
    "QUESTIONS_PER_FACTOR",
    "RISK_COLORS",
    "RISK_MATRIX",
]
