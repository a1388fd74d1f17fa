import logging
import sys
from functools import lru_cache
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Directorio de logs (backend/logs/)
_LOG_DIR = Path(__file__).parent.parent.parent / "logs"

# Símbolos para visualizar el flujo
FLOW_SYMBOLS = {
    "start": "╔",
    "node": "║",
    "arrow": "→",
    "end": "╚",
    "route": "◆",
}


def _configure_root_logger(level: LogLevel, log_to_file: bool = True) -> None:
    """Configura el logger raíz con handlers de consola y archivo."""
    root = logging.getLogger()
    if root.handlers:
        return

    # Silenciar loggers ruidosos de terceros
    noisy_loggers = [
        "watchfiles",
        "watchfiles.main",
        "httpx",
        "httpcore",
        "uvicorn.access",
    ]
    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)

    # Handler de consola (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    # Handler de archivo con rotación diaria (mantiene 7 días)
    if log_to_file:
        try:
            _LOG_DIR.mkdir(exist_ok=True)
            file_handler = TimedRotatingFileHandler(
                _LOG_DIR / "psychosocial_risk.log",
                when="midnight",
                interval=1,
                backupCount=7,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
        except OSError as e:
            # Si falla la creación del archivo, solo usar consola
            root.warning(f"File logging disabled: {e}")

    root.setLevel(level)


@lru_cache(maxsize=128)
def get_logger(name: str) -> logging.Logger:
    """
    Retorna un logger configurado para el módulo especificado.

    Uso:
        from app.core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Mensaje")
    """
    from app.core.config import settings

    _configure_root_logger(settings.log_level, settings.log_to_file)
    return logging.getLogger(name)


class AnalysisLogger:
    """Logger especializado para trazabilidad de análisis por sector."""

    def __init__(self, component: str):
        self._logger = get_logger(f"analysis.{component}")
        self.component = component

    def analysis_start(self, sector_id: str, respondents: int, has_assessment: bool) -> None:
        """Log inicio del análisis de un sector."""
        mode = "external" if has_assessment else "automatic"
        self._logger.info("=" * 70)
        self._logger.info(f"{FLOW_SYMBOLS['start']}══ SECTOR ANALYSIS START ═══════════════════════════════════════════")
        self._logger.info(f"{FLOW_SYMBOLS['node']} Sector: {sector_id} | Respondents: {respondents} | Probability: {mode}")
        self._logger.info(f"{FLOW_SYMBOLS['node']} Flow: normalize → severity → probability → matrix → sector stats")
        self._logger.info("=" * 70)

    def analysis_end(self, analysis) -> None:
        """Log fin del análisis con resumen de conteos."""
        sev = analysis.severity_stats
        risk = analysis.risk_stats

        self._logger.info("=" * 70)
        self._logger.info(f"{FLOW_SYMBOLS['end']}══ SECTOR ANALYSIS COMPLETE ════════════════════════════════════════")
        self._logger.info(f"   {FLOW_SYMBOLS['route']} Sector: {analysis.sector_id} | Factors: {len(analysis.factors)}")
        self._logger.info(f"   {FLOW_SYMBOLS['route']} Severity: low={sev.low} medium={sev.medium} high={sev.high}")
        self._logger.info(
            f"   {FLOW_SYMBOLS['route']} Risk: low={risk.low} medium={risk.medium} "
            f"high={risk.high} critical={risk.critical}"
        )
        if analysis.rejected_answers:
            self._logger.warning(
                f"   {FLOW_SYMBOLS['route']} Rejected out-of-range answers: {analysis.rejected_answers}"
            )
        if analysis.low_confidence:
            self._logger.warning(f"   {FLOW_SYMBOLS['route']} No respondents: default severity applied")
        self._logger.info("=" * 70)

    def factor_result(self, factor_key: str, risk_level: str) -> None:
        self._logger.debug(f"{FLOW_SYMBOLS['node']} [{factor_key.upper()}] {FLOW_SYMBOLS['arrow']} {risk_level}")

    def error(self, sector_id: str, error: Exception) -> None:
        self._logger.error(
            f"{FLOW_SYMBOLS['node']} [{sector_id}] ERROR: {type(error).__name__}: {error}",
            exc_info=True,
        )
