"""Coleccion de routers de la API."""

from app.api.routes.analysis import router as analysis_router
from app.api.routes.catalog import router as catalog_router

__all__ = ["analysis_router", "catalog_router"]
