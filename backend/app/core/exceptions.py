"""
Custom exceptions for the Psychosocial Risk Diagnostic backend.

This module provides a hierarchy of exceptions for consistent error handling
across the application. All exceptions inherit from DiagnosticBaseException.

Example:
    try:
        report = service.build_report(request)
    except AnalysisProcessingError as e:
        logger.error(f"Analysis failed: {e}")
"""

from typing import Optional


class DiagnosticBaseException(Exception):
    """
    Base exception class for all diagnostic backend errors.

    All custom exceptions in the project should inherit from this class
    to enable consistent error handling and logging.

    Attributes:
        message: Human-readable description of the error.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable description of the error.
            details: Optional additional context for debugging.
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation with optional details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class AnalysisProcessingError(DiagnosticBaseException):
    """
    Exception raised when a sector analysis cannot be completed.

    Wraps unexpected failures of the risk engine so that the API layer
    reports them uniformly.

    Attributes:
        sector_id: Sector whose analysis failed.
        original_error: The underlying exception if available.
    """

    def __init__(
        self,
        message: str,
        sector_id: str,
        original_error: Optional[Exception] = None,
        details: Optional[str] = None,
    ) -> None:
        """
        Initialize analysis processing error.

        Args:
            message: Human-readable description of the error.
            sector_id: Sector whose analysis failed.
            original_error: The underlying exception if available.
            details: Optional additional context for debugging.
        """
        self.sector_id = sector_id
        self.original_error = original_error

        enhanced_message = f"[Sector: {sector_id}] {message}"
        if original_error:
            enhanced_message = f"{enhanced_message} | Caused by: {type(original_error).__name__}: {str(original_error)[:200]}"

        super().__init__(enhanced_message, details)


class ConfigurationError(DiagnosticBaseException):
    """
    Exception raised when the engine cannot be built from settings.

    Raised at startup so that a malformed catalog never reaches a request.

    Attributes:
        setting: Name of the offending setting, if known.
    """

    def __init__(
        self,
        message: str,
        setting: Optional[str] = None,
        details: Optional[str] = None,
    ) -> None:
        self.setting = setting

        enhanced_message = f"[Config] {message}"
        if setting:
            enhanced_message = f"{enhanced_message} (setting: {setting})"

        super().__init__(enhanced_message, details)
