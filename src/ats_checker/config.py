"""Configuration management for the ATS checker."""

from functools import lru_cache
from typing import TYPE_CHECKING, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from ats_checker.models.llm import LLMBudget


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ATS_CHECKER_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Keys (no prefix, standard env vars)
    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    anthropic_api_key: str | None = Field(default=None, alias="ANTHROPIC_API_KEY")
    google_api_key: str | None = Field(default=None, alias="GOOGLE_API_KEY")

    # Provider configuration
    provider: Literal["openai", "anthropic", "google"] = "anthropic"
    model: str | None = Field(
        default=None,
        description="Model ID (defaults to the provider's default model)",
    )

    # Enhancement limits
    llm_timeout_ms: int = Field(
        default=30_000,
        ge=1,
        le=600_000,
        description="Timeout for a single enhancement call in milliseconds",
    )
    llm_max_calls: int = Field(default=3, ge=0, le=50)
    llm_max_tokens_per_call: int = Field(default=2000, ge=0)
    llm_max_total_tokens: int = Field(default=5000, ge=0)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    def api_key_for(self, provider: str) -> str | None:
        """API key configured for ``provider``, if any."""
        return {
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
            "google": self.google_api_key,
        }.get(provider)

    @property
    def llm_budget(self) -> "LLMBudget":
        """Enhancement budget built from the configured limits."""
        from ats_checker.models.llm import LLMBudget

        return LLMBudget(
            max_calls=self.llm_max_calls,
            max_tokens_per_call=self.llm_max_tokens_per_call,
            max_total_tokens=self.llm_max_total_tokens,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
