"""Endpoints de consulta del catálogo de factores."""

from fastapi import APIRouter, Depends

from app.schemas import CatalogResponse
from app.services import DependencyContainer, get_container
from skills.psychosocial_risk_engine import QUESTIONS_PER_FACTOR

router = APIRouter()


@router.get("/factors", response_model=CatalogResponse)
async def get_factors(container: DependencyContainer = Depends(get_container)) -> CatalogResponse:
    """Devuelve los factores configurados y las preguntas invertidas."""
    catalog = container.catalog
    return CatalogResponse(
        factors=list(catalog.factors),
        inverted_questions=sorted(catalog.inverted_questions),
        questions_per_factor=QUESTIONS_PER_FACTOR,
    )
