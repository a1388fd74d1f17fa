"""Endpoints de análisis de riesgo psicosocial por sector."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.exceptions import AnalysisProcessingError
from app.core.logging import get_logger
from app.schemas import SectorAnalysisRequest, SectorReport
from app.services import DependencyContainer, get_container
from skills.psychosocial_risk_engine import RiskEngineError

logger = get_logger(__name__)
router = APIRouter()


@router.post("/analysis/sector", response_model=SectorReport)
async def analyze_sector(
    request: SectorAnalysisRequest,
    container: DependencyContainer = Depends(get_container),
) -> SectorReport:
    """Calcula severidad, probabilidad y riesgo de cada factor del sector."""
    try:
        return container.analysis_service.build_report(request)
    except RiskEngineError as e:
        logger.warning(f"[ANALYSIS] Datos inválidos para sector '{request.sector_id}': {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
    except AnalysisProcessingError as e:
        logger.error(f"[ANALYSIS] Error procesando sector: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error procesando análisis: {e.message}",
        )
