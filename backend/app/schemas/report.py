from datetime import date

from pydantic import BaseModel, Field

from skills.psychosocial_risk_engine import SectorAnalysisData


class SectorReport(BaseModel):
    """Datos de cabecera del informe diagnóstico + análisis del motor."""
    sector_id: str = Field(description="Identificador del sector analizado")
    sector_name: str = Field(description="Nombre visible del sector")
    author: str | None = Field(default=None, description="Psicóloga responsable técnica")
    elaboration_date: date = Field(description="Fecha de elaboración del informe")
    analysis: SectorAnalysisData = Field(description="Resultado del motor de riesgo")
    risk_colors: dict[int, str] = Field(
        default_factory=dict,
        description="Color de la insignia de riesgo por id de factor",
    )
    hazard_sources: dict[int, str] = Field(
        default_factory=dict,
        description="Fuentes generadoras por id de factor",
    )
    health_effects: str | None = Field(default=None, description="Agravos a la salud")
    control_measures: str | None = Field(default=None, description="Medidas de control")
    conclusion: str | None = Field(default=None, description="Conclusión del informe")
