"""Anthropic Claude LLM provider."""

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel

from ats_checker.llm.base import DEFAULT_MODELS, LLMProvider

# Default timeout in seconds for API requests
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 2


class AnthropicProvider(LLMProvider):
    """Anthropic Claude provider with model caching."""

    def __init__(
        self,
        model: str = DEFAULT_MODELS["anthropic"],
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        super().__init__()
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self.max_retries = max_retries

    def _create_extraction_model(self, model: str, max_tokens: int) -> BaseChatModel:
        return ChatAnthropic(
            model=model,
            api_key=self.api_key,
            temperature=0,
            max_tokens=max_tokens,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )
