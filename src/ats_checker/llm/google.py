"""Google Gemini LLM provider."""

import os

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from ats_checker.llm.base import DEFAULT_MODELS, LLMProvider

# Default timeout in seconds for API requests
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 2


class GoogleProvider(LLMProvider):
    """Google Gemini provider using langchain-google-genai."""

    def __init__(
        self,
        model: str = DEFAULT_MODELS["google"],
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        """Initialize the Google provider.

        Args:
            model: Gemini model name.
            api_key: Google API key. If not provided, uses GOOGLE_API_KEY env var.
            timeout: Request timeout in seconds.
            max_retries: Maximum number of retries on failure.
        """
        super().__init__()
        self.model = model
        self.api_key = api_key or os.getenv("GOOGLE_API_KEY")
        self.timeout = timeout
        self.max_retries = max_retries

    def _create_extraction_model(self, model: str, max_tokens: int) -> BaseChatModel:
        return ChatGoogleGenerativeAI(
            model=model,
            temperature=0,
            max_output_tokens=max_tokens,
            google_api_key=self.api_key,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )
