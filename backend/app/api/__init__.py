from fastapi import APIRouter

from app.api.routes import analysis_router, catalog_router

router = APIRouter()
router.include_router(catalog_router)
router.include_router(analysis_router)

__all__ = ["router"]
