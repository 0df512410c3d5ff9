"""Base LLM provider abstraction."""

from abc import ABC, abstractmethod
from typing import Literal

from langchain_core.language_models import BaseChatModel

ProviderName = Literal["openai", "anthropic", "google"]

DEFAULT_MODELS: dict[str, str] = {
    "openai": "gpt-5.2",
    "anthropic": "claude-sonnet-4-5-20250929",
    "google": "gemini-3-flash-preview",
}


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Chat models are cached per (model, max_tokens) so repeated calls within
    one analysis reuse the same client.
    """

    model: str

    def __init__(self) -> None:
        self._models: dict[tuple[str, int], BaseChatModel] = {}

    def get_extraction_model(self, model: str | None = None, max_tokens: int = 2000) -> BaseChatModel:
        """Get a cached temperature-0 model for structured output."""
        key = (model or self.model, max_tokens)
        if key not in self._models:
            self._models[key] = self._create_extraction_model(*key)
        return self._models[key]

    @abstractmethod
    def _create_extraction_model(self, model: str, max_tokens: int) -> BaseChatModel:
        """Create a new extraction model instance. Override in subclasses."""


def get_llm_provider(
    provider: ProviderName,
    model: str | None = None,
    api_key: str | None = None,
    timeout: float | None = None,
) -> LLMProvider:
    """Factory function to get an LLM provider instance."""
    kwargs: dict[str, float] = {"timeout": timeout} if timeout is not None else {}
    if provider == "openai":
        from ats_checker.llm.openai import OpenAIProvider

        return OpenAIProvider(model=model or DEFAULT_MODELS["openai"], api_key=api_key, **kwargs)
    elif provider == "anthropic":
        from ats_checker.llm.anthropic import AnthropicProvider

        return AnthropicProvider(
            model=model or DEFAULT_MODELS["anthropic"], api_key=api_key, **kwargs
        )
    elif provider == "google":
        from ats_checker.llm.google import GoogleProvider

        return GoogleProvider(model=model or DEFAULT_MODELS["google"], api_key=api_key, **kwargs)
    else:
        raise ValueError(f"Unknown provider: {provider}")
