"""Analyzer configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Dict, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Analyzer settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    app_env: str = "production"
    environment_mapping: Dict[str, str] = {}  # e.g. {"production-us": "production"}

    # Reporting
    show_code_snippets: bool = True
    snippet_context_lines: int = 8

    # File discovery
    base_path: str | None = None
    exclude_patterns: List[str] = []

    @field_validator("snippet_context_lines", mode="after")
    @classmethod
    def validate_context_lines(cls, v: int) -> int:
        """Ensure the snippet radius is not negative."""
        if v < 0:
            raise ValueError("snippet_context_lines must be zero or greater")
        return v

    @property
    def resolved_environment(self) -> str:
        """Standard environment name after applying ``environment_mapping``."""
        return self.environment_mapping.get(self.app_env, self.app_env)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
