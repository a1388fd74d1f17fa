"""
Sector Analysis Service.

Builds the diagnostic report header (sector name, author, elaboration date)
around the risk engine output. Persistence of edited report fields stays
with the caller.
"""

from datetime import date
from typing import Optional

from app.core.exceptions import AnalysisProcessingError
from app.core.logging import AnalysisLogger, get_logger
from app.schemas import SectorAnalysisRequest, SectorReport
from skills.psychosocial_risk_engine import (
    PsychosocialRiskEngine,
    RiskEngineError,
    RiskMatrixClassifier,
    UnknownFactorError,
)

logger = get_logger(__name__)

UNKNOWN_SECTOR_NAME = "Unknown sector"


class SectorAnalysisService:
    """
    Runs the engine for one sector and packages the report.

    Attributes:
        engine: Injected PsychosocialRiskEngine.
    """

    def __init__(
        self,
        engine: PsychosocialRiskEngine,
        logger: Optional[AnalysisLogger] = None,
    ) -> None:
        self.engine = engine
        self._logger = logger or AnalysisLogger("sector")

    def build_report(
        self,
        request: SectorAnalysisRequest,
        today: Optional[date] = None,
    ) -> SectorReport:
        """
        Analyze the requested sector and build its report.

        Args:
            request: Sector id, responses and optional probability assessment.
            today: Elaboration date used when the request has none.

        Returns:
            SectorReport with the engine analysis and header fields.

        Raises:
            RiskEngineError: Propagated for invalid engine input or for
                hazard sources keyed by unknown factor ids.
            AnalysisProcessingError: For any other failure.
        """
        self._logger.analysis_start(
            request.sector_id,
            len(request.responses),
            request.probability is not None,
        )

        try:
            analysis = self.engine.analyze(
                request.sector_id,
                request.responses,
                request.probability,
            )
        except RiskEngineError as e:
            self._logger.error(request.sector_id, e)
            raise
        except Exception as e:
            self._logger.error(request.sector_id, e)
            raise AnalysisProcessingError(
                "Failed to analyze sector",
                sector_id=request.sector_id,
                original_error=e,
            ) from e

        unknown = set(request.hazard_sources) - {item.factor.id for item in analysis.factors}
        if unknown:
            raise UnknownFactorError(unknown, source="las fuentes generadoras")

        for item in analysis.factors:
            self._logger.factor_result(item.factor.key, item.risk_level.value)
        self._logger.analysis_end(analysis)

        sector_name = (request.sector_name or "").strip() or UNKNOWN_SECTOR_NAME
        if sector_name == UNKNOWN_SECTOR_NAME:
            logger.debug(f"No sector name supplied for '{request.sector_id}'")

        return SectorReport(
            sector_id=request.sector_id,
            sector_name=sector_name,
            author=request.author,
            elaboration_date=request.elaboration_date or today or date.today(),
            analysis=analysis,
            risk_colors={
                item.factor.id: RiskMatrixClassifier.color_for(item.risk_level)
                for item in analysis.factors
            },
            hazard_sources=request.hazard_sources,
            health_effects=request.health_effects,
            control_measures=request.control_measures,
            conclusion=request.conclusion,
        )
