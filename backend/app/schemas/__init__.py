from app.schemas.requests import SectorAnalysisRequest
from app.schemas.report import SectorReport
from app.schemas.responses import CatalogResponse

__all__ = [
    "CatalogResponse",
    "SectorAnalysisRequest",
    "SectorReport",
]
