from app.services.analysis_service import SectorAnalysisService
from app.services.container import DependencyContainer, get_container, reset_container

__all__ = [
    "DependencyContainer",
    "SectorAnalysisService",
    "get_container",
    "reset_container",
]
