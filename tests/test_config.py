"""Tests for configuration and settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from ats_checker.config import Settings, get_settings


class TestSettings:
    """Tests for Settings configuration class."""

    def test_default_values(self) -> None:
        """Test that defaults are set correctly when no env vars are set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)  # Disable env file loading
            assert settings.provider == "anthropic"
            assert settings.model is None
            assert settings.llm_timeout_ms == 30_000
            assert settings.llm_max_calls == 3
            assert settings.log_level == "WARNING"
            assert settings.openai_api_key is None
            assert settings.anthropic_api_key is None
            assert settings.google_api_key is None

    def test_provider_from_env(self) -> None:
        with patch.dict(os.environ, {"ATS_CHECKER_PROVIDER": "openai"}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.provider == "openai"

    def test_timeout_from_env(self) -> None:
        with patch.dict(os.environ, {"ATS_CHECKER_LLM_TIMEOUT_MS": "5000"}, clear=True):
            assert Settings(_env_file=None).llm_timeout_ms == 5000

    def test_timeout_must_be_positive(self) -> None:
        with patch.dict(os.environ, {"ATS_CHECKER_LLM_TIMEOUT_MS": "0"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_invalid_provider(self) -> None:
        with patch.dict(os.environ, {"ATS_CHECKER_PROVIDER": "cohere"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_api_keys_use_standard_names(self) -> None:
        env = {"OPENAI_API_KEY": "sk-test", "GOOGLE_API_KEY": "g-test"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
            assert settings.api_key_for("openai") == "sk-test"
            assert settings.api_key_for("google") == "g-test"
            assert settings.api_key_for("anthropic") is None

    def test_llm_budget(self) -> None:
        env = {"ATS_CHECKER_LLM_MAX_CALLS": "1", "ATS_CHECKER_LLM_MAX_TOTAL_TOKENS": "900"}
        with patch.dict(os.environ, env, clear=True):
            budget = Settings(_env_file=None).llm_budget
            assert budget.max_calls == 1
            assert budget.max_tokens_per_call == 2000
            assert budget.max_total_tokens == 900


class TestGetSettings:
    def test_returns_cached_instance(self) -> None:
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
