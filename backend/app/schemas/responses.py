from pydantic import BaseModel, Field

from skills.psychosocial_risk_engine import RiskFactor


class CatalogResponse(BaseModel):
    factors: list[RiskFactor]
    inverted_questions: list[int] = Field(default_factory=list)
    questions_per_factor: int
