from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración centralizada del backend con validación de tipos."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_to_file: bool = True
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )

    # Catálogo: preguntas con polaridad invertida (normalizado = 4 - crudo), ej. INVERTED_QUESTIONS=[12,47]
    inverted_questions: list[int] = Field(default_factory=list)

    # Política de scoring
    default_severity_score: float = Field(default=1.0, ge=0.0, le=4.0)
    critical_probability_threshold: float = Field(default=4.0, ge=1.0, le=4.0)
    auto_probability_low: float = Field(default=1.0, ge=0.0, le=4.0)
    auto_probability_medium: float = Field(default=2.5, ge=0.0, le=4.0)
    auto_probability_high: float = Field(default=4.0, ge=0.0, le=4.0)

    @field_validator("inverted_questions")
    @classmethod
    def validate_inverted_questions(cls, v: list[int]) -> list[int]:
        if any(q < 1 for q in v):
            raise ValueError("inverted_questions must be positive question numbers")
        return sorted(set(v))


@lru_cache
def get_settings() -> Settings:
    """Singleton cacheado para evitar recargar .env en cada request."""
    return Settings()


settings = get_settings()
