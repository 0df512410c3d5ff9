"""OpenAI LLM provider."""

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from ats_checker.llm.base import DEFAULT_MODELS, LLMProvider

# Default timeout in seconds for API requests
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 1  # 1 retry = 2 total attempts max


class OpenAIProvider(LLMProvider):
    """OpenAI GPT provider."""

    def __init__(
        self,
        model: str = DEFAULT_MODELS["openai"],
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
        return ChatOpenAI(
            model=model,
            temperature=0,
            max_tokens=max_tokens,
            api_key=self.api_key,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )
