from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from kasiski.models.schemas import Language


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Kasiski Examiner"
    app_env: Literal["development", "staging", "production"] = "development"
    api_v1_prefix: str = "/api/v1"
    log_level: str = "WARNING"

    # Analysis settings
    kasiski_threshold: float = Field(default=0.5, gt=0.0, lt=1.0)
    kasiski_prime_limit: int = Field(default=65536, ge=97)
    default_language: Language = Language.ENGLISH
    max_ciphertext_length: int = 100_000

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
