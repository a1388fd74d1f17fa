from datetime import date

from pydantic import BaseModel, Field

from skills.psychosocial_risk_engine import ProbabilityAssessment, SurveyResponse


class SectorAnalysisRequest(BaseModel):
    sector_id: str = Field(..., min_length=1, max_length=200)
    sector_name: str | None = Field(default=None, max_length=200)
    author: str | None = Field(default=None, max_length=200)
    elaboration_date: date | None = None
    responses: list[SurveyResponse] = Field(default_factory=list)
    probability: ProbabilityAssessment | None = None

    # Secciones narrativas del informe, editadas por la psicóloga
    hazard_sources: dict[int, str] = Field(default_factory=dict)
    health_effects: str | None = None
    control_measures: str | None = None
    conclusion: str | None = None
