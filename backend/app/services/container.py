"""
Dependency Injection Container.

This module provides a centralized container for managing service dependencies
across the application. The factor catalog and scoring policy are built once
from settings and injected into the risk engine, so no scoring configuration
lives in module-level globals.

The container pattern enables:
- Centralized dependency management
- Easy testing with overridden catalogs or policies
- Fail-fast validation of the catalog at startup

Example:
    from app.services.container import get_container

    container = get_container()
    analysis = container.engine.analyze("sector-1", responses)
"""

from functools import lru_cache
from typing import Optional

from app.core.config import Settings, get_settings
from app.core.exceptions import ConfigurationError
from app.core.logging import AnalysisLogger
from skills.psychosocial_risk_engine import (
    DEFAULT_RISK_FACTORS,
    CatalogConfigurationError,
    FactorCatalog,
    PsychosocialRiskEngine,
    ScoringPolicy,
    SeverityLevel,
)


class DependencyContainer:
    """
    Centralized container for application dependencies.

    Attributes:
        _settings: Settings used to build the catalog and policy.
        _catalog: Cached FactorCatalog instance.
        _policy: Cached ScoringPolicy instance.
        _engine: Cached PsychosocialRiskEngine instance.
        _analysis_service: Cached SectorAnalysisService instance.
        _logger: Logger instance for analysis tracing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize the container with lazy service references."""
        self._settings = settings or get_settings()
        self._catalog: Optional[FactorCatalog] = None
        self._policy: Optional[ScoringPolicy] = None
        self._engine: Optional[PsychosocialRiskEngine] = None
        self._analysis_service = None
        self._logger: Optional[AnalysisLogger] = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def catalog(self) -> FactorCatalog:
        """
        Get the validated factor catalog.

        Raises:
            ConfigurationError: If the configured catalog is malformed.
        """
        if self._catalog is None:
            try:
                self._catalog = FactorCatalog(
                    DEFAULT_RISK_FACTORS,
                    inverted_questions=self._settings.inverted_questions,
                )
            except CatalogConfigurationError as e:
                raise ConfigurationError(str(e), setting="catalog") from e
        return self._catalog

    @property
    def policy(self) -> ScoringPolicy:
        """
        Get the scoring policy built from settings.

        Raises:
            ConfigurationError: If the automatic probability mapping is invalid.
        """
        if self._policy is None:
            try:
                self._policy = ScoringPolicy(
                    default_severity_score=self._settings.default_severity_score,
                    critical_probability_threshold=self._settings.critical_probability_threshold,
                    automatic_probability_scores={
                        SeverityLevel.LOW: self._settings.auto_probability_low,
                        SeverityLevel.MEDIUM: self._settings.auto_probability_medium,
                        SeverityLevel.HIGH: self._settings.auto_probability_high,
                    },
                )
            except ValueError as e:
                raise ConfigurationError(str(e), setting="auto_probability_*") from e
        return self._policy

    @property
    def logger(self) -> AnalysisLogger:
        """
        Get the analysis logger instance.

        Returns:
            AnalysisLogger for tracing sector analyses.
        """
        if self._logger is None:
            self._logger = AnalysisLogger("sector")
        return self._logger

    @property
    def engine(self) -> PsychosocialRiskEngine:
        """
        Get the PsychosocialRiskEngine instance.

        The engine is initialized with the container's catalog and policy.
        """
        if self._engine is None:
            self._engine = PsychosocialRiskEngine(self.catalog, self.policy)
        return self._engine

    @property
    def analysis_service(self):
        """
        Get the SectorAnalysisService instance.

        Returns:
            SectorAnalysisService wired to the container's engine.
        """
        if self._analysis_service is None:
            # Import here to avoid circular imports
            from app.services.analysis_service import SectorAnalysisService
            self._analysis_service = SectorAnalysisService(
                engine=self.engine,
                logger=self.logger,
            )
        return self._analysis_service

    def validate(self) -> None:
        """
        Build catalog, policy and engine eagerly.

        Called from the application lifespan so configuration errors
        surface at startup rather than on the first request.
        """
        _ = self.engine

    def reset(self) -> None:
        """
        Reset all cached services.

        Useful for testing to ensure fresh instances.
        """
        self._catalog = None
        self._policy = None
        self._engine = None
        self._analysis_service = None
        self._logger = None

    def override_catalog(self, catalog: FactorCatalog) -> None:
        """
        Override the factor catalog.

        Args:
            catalog: Pre-validated catalog, e.g. with custom inverted questions.
        """
        self._catalog = catalog
        # Reset engine and service to pick up new catalog
        self._engine = None
        self._analysis_service = None

    def override_policy(self, policy: ScoringPolicy) -> None:
        """
        Override the scoring policy.

        Args:
            policy: Scoring policy to inject into the engine.
        """
        self._policy = policy
        self._engine = None
        self._analysis_service = None


@lru_cache(maxsize=1)
def get_container() -> DependencyContainer:
    """
    Get the singleton DependencyContainer instance.

    Uses lru_cache to ensure only one container exists per process.

    Returns:
        The global DependencyContainer instance.

    Example:
        >>> container = get_container()
        >>> engine = container.engine
    """
    return DependencyContainer()


def reset_container() -> None:
    """
    Reset the global container singleton.

    Clears the lru_cache and allows a fresh container to be created.
    Useful for testing isolation.
    """
    get_container.cache_clear()
