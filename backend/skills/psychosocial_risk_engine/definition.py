"""
Psychosocial Risk Engine - Data Definitions

Pydantic models for NR-01 psychosocial risk scoring.
Survey answers go in, audited severity/probability/risk levels come out.

Author: Diagnostic Team
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class SeverityLevel(str, Enum):
    """
    Banda de severidad de un factor.

    - LOW: score < 2.0
    - MEDIUM: 2.0 <= score < 3.0
    - HIGH: score >= 3.0
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ProbabilityLevel(str, Enum):
    """Banda de probabilidad de ocurrencia (mismos umbrales que severidad)."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskLevel(str, Enum):
    """
    Nivel de riesgo compuesto de la matriz.

    CRITICAL queda reservado a una probabilidad externa en el techo
    de la escala combinada con una celda HIGH.
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ProbabilitySource(str, Enum):
    """Origen del score de probabilidad."""
    EXTERNAL = "external"
    AUTOMATIC = "automatic"


class RiskFactor(BaseModel):
    """
    Uno de los factores de riesgo psicosocial del catálogo.

    Cada factor es dueño de un bloque contiguo de preguntas
    [start_question, end_question], ambos inclusive.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="Identificador estable del factor.")
    key: str = Field(..., min_length=1, description="Clave corta, ej. 'workload'.")
    label: str = Field(..., min_length=1, description="Nombre visible en el informe.")
    start_question: int = Field(..., ge=1)
    end_question: int = Field(..., ge=1)

    @model_validator(mode="after")
    def validate_range(self) -> "RiskFactor":
        if self.end_question < self.start_question:
            raise ValueError(
                f"Factor '{self.key}': end_question ({self.end_question}) "
                f"is before start_question ({self.start_question})"
            )
        return self

    @property
    def questions(self) -> range:
        """Question numbers owned by this factor, inclusive."""
        return range(self.start_question, self.end_question + 1)

    def owns(self, question: int) -> bool:
        return self.start_question <= question <= self.end_question


class SurveyResponse(BaseModel):
    """
    Un cuestionario completado por un colaborador.

    Las respuestas se guardan tal como llegaron (escala 0..4). Valores
    fuera de rango no invalidan el cuestionario: el normalizador los
    descarta individualmente.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    sector_id: str = Field(..., min_length=1)
    job_function: str = Field(default="")
    completed_at: Optional[datetime] = Field(default=None)
    answers: Dict[int, int] = Field(
        default_factory=dict,
        description="Respuesta cruda por número de pregunta.",
    )


ProbabilityScore = Annotated[float, Field(ge=1.0, le=4.0)]


class ProbabilityAssessment(BaseModel):
    """
    Evaluación de probabilidad cargada por la psicóloga responsable.

    Siempre indexada por id de factor, en escala 1..4.
    """

    model_config = ConfigDict(frozen=True)

    sector_id: str = Field(..., min_length=1)
    scores: Dict[int, ProbabilityScore] = Field(default_factory=dict)

    def score_for(self, factor_id: int) -> Optional[float]:
        return self.scores.get(factor_id)


class ScoringPolicy(BaseModel):
    """
    Parámetros de política del motor de scoring.

    Se inyecta en el motor al construirlo; no hay estado global.
    """

    model_config = ConfigDict(frozen=True)

    default_severity_score: float = Field(
        default=1.0,
        ge=0.0,
        le=4.0,
        description="Severidad usada cuando un factor no tiene respuestas.",
    )
    automatic_probability_scores: Dict[SeverityLevel, float] = Field(
        default_factory=lambda: {
            SeverityLevel.LOW: 1.0,
            SeverityLevel.MEDIUM: 2.5,
            SeverityLevel.HIGH: 4.0,
        },
        description="Probabilidad derivada por banda de severidad.",
    )
    critical_probability_threshold: float = Field(
        default=4.0,
        ge=1.0,
        le=4.0,
        description="Probabilidad externa mínima para escalar HIGH a CRITICAL.",
    )
    display_decimals: int = Field(default=2, ge=0, le=6)

    @model_validator(mode="after")
    def validate_probability_mapping(self) -> "ScoringPolicy":
        missing = [level.value for level in SeverityLevel if level not in self.automatic_probability_scores]
        if missing:
            raise ValueError(f"automatic_probability_scores missing bands: {missing}")

        ordered = [self.automatic_probability_scores[level] for level in SeverityLevel]
        if ordered != sorted(ordered):
            raise ValueError("automatic_probability_scores must be non-decreasing from LOW to HIGH")
        if any(not 0.0 <= value <= 4.0 for value in ordered):
            raise ValueError("automatic_probability_scores must lie in [0, 4]")
        return self


class FactorAnalysis(BaseModel):
    """Resultado del motor para un factor en un sector."""

    factor: RiskFactor
    severity_score: float = Field(ge=0.0, le=4.0, description="Media redondeada para mostrar.")
    severity_level: SeverityLevel
    probability_score: float = Field(ge=0.0, le=4.0)
    probability_level: ProbabilityLevel
    probability_source: ProbabilitySource
    risk_level: RiskLevel
    sample_size: int = Field(default=0, ge=0, description="Respuestas válidas agregadas.")


class SeverityStats(BaseModel):
    """Cantidad de factores por banda de severidad."""

    low: int = Field(default=0, ge=0)
    medium: int = Field(default=0, ge=0)
    high: int = Field(default=0, ge=0)

    @computed_field
    @property
    def total(self) -> int:
        return self.low + self.medium + self.high


class RiskStats(BaseModel):
    """Cantidad de factores por nivel de riesgo."""

    low: int = Field(default=0, ge=0)
    medium: int = Field(default=0, ge=0)
    high: int = Field(default=0, ge=0)
    critical: int = Field(default=0, ge=0)

    @computed_field
    @property
    def total(self) -> int:
        return self.low + self.medium + self.high + self.critical


class SectorAnalysisData(BaseModel):
    """
    Análisis completo de un sector.

    Se recalcula bajo demanda; el motor nunca lo persiste.
    """

    sector_id: str
    factors: List[FactorAnalysis] = Field(default_factory=list)
    severity_stats: SeverityStats
    risk_stats: RiskStats
    total_respondents: int = Field(default=0, ge=0)
    job_functions: List[str] = Field(default_factory=list)
    rejected_answers: int = Field(
        default=0,
        ge=0,
        description="Respuestas fuera de la escala 0..4 descartadas.",
    )
    low_confidence: bool = Field(
        default=False,
        description="True si el sector no tiene respondentes.",
    )

    def factor(self, factor_id: int) -> Optional[FactorAnalysis]:
        for item in self.factors:
            if item.factor.id == factor_id:
                return item
        return None


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RiskEngineError(Exception):
    """Error base del motor de riesgo psicosocial."""
    pass


class CatalogConfigurationError(RiskEngineError):
    """El catálogo de factores está mal formado."""
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Catálogo de factores inválido: {reason}")


class InvalidScoreError(RiskEngineError):
    """Un score quedó fuera de la escala 0..4."""
    def __init__(self, score: float, kind: str = "severity"):
        self.score = score
        self.kind = kind
        super().__init__(f"Score de {kind} fuera de escala [0, 4]: {score}")


class EmptyFactorListError(RiskEngineError):
    """Se intentó agregar un sector sin factores."""
    def __init__(self):
        super().__init__(
            "La lista de factores está vacía. "
            "El catálogo siempre debe producir al menos un factor."
        )


class ClassificationTableError(RiskEngineError):
    """La matriz de riesgo no tiene la celda pedida."""
    def __init__(self, severity: SeverityLevel, probability: ProbabilityLevel):
        self.severity = severity
        self.probability = probability
        super().__init__(
            f"Matriz de riesgo sin celda para "
            f"severidad={severity.value}, probabilidad={probability.value}"
        )


class UnknownFactorError(RiskEngineError):
    """Datos indexados por un id de factor que el catálogo no conoce."""
    def __init__(self, factor_ids, source: str = "la evaluación de probabilidad"):
        self.factor_ids = sorted(factor_ids)
        self.source = source
        super().__init__(
            f"Ids de factor desconocidos en {source}: {self.factor_ids}. "
            f"Las claves deben ser ids del catálogo."
        )
