from app.core.config import Settings, get_settings, settings
from app.core.exceptions import AnalysisProcessingError, ConfigurationError, DiagnosticBaseException
from app.core.logging import AnalysisLogger, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "get_logger",
    "AnalysisLogger",
    "DiagnosticBaseException",
    "AnalysisProcessingError",
    "ConfigurationError",
]
