"""Models for the optional LLM enhancement layer."""

from typing import Any, Generic, Literal, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class CompletionMessage(BaseModel):
    role: Literal["system", "user"]
    content: str


class CompletionRequest(BaseModel):
    """Everything a text-generation client needs for one structured completion."""

    model: str
    messages: list[CompletionMessage]
    max_tokens: int
    response_format: dict[str, Any]  # JSON schema the reply must satisfy


class CompletionUsage(BaseModel):
    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None


class CompletionResponse(BaseModel):
    """Raw reply: a JSON string or an already-structured value."""

    content: Any = None
    usage: CompletionUsage | None = None


@runtime_checkable
class TextGenerationClient(Protocol):
    """Contract for the caller-supplied text-generation transport."""

    async def create_completion(self, request: CompletionRequest) -> CompletionResponse: ...


class LLMBudget(BaseModel):
    """Hard limits for one analysis call."""

    max_calls: int = Field(default=3, ge=0)
    max_tokens_per_call: int = Field(default=2000, ge=0)
    max_total_tokens: int = Field(default=5000, ge=0)


class LLMFeatures(BaseModel):
    """Which LLM capabilities are switched on."""

    skill_normalization: bool = False
    section_classification: bool = False
    suggestions: bool = False
    jd_clarification: bool = False


class LLMModels(BaseModel):
    default: str = "gpt-4o-mini"
    thinking: str | None = None


class LLMConfig(BaseModel):
    """Caller-supplied enhancement configuration, scoped to one analysis."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    client: TextGenerationClient
    models: LLMModels = Field(default_factory=LLMModels)
    limits: LLMBudget = Field(default_factory=LLMBudget)
    enable: LLMFeatures = Field(default_factory=LLMFeatures)
    timeout_ms: int = Field(default=30_000, gt=0)


class LLMResult(BaseModel, Generic[T]):
    """Outcome of a guarded LLM call."""

    success: bool
    fallback: bool
    data: T | None = None
    error: str | None = None
    tokens_used: int | None = None


class BudgetStats(BaseModel):
    calls_used: int
    calls_remaining: int
    tokens_used: int
    tokens_remaining: int
    total_calls: int
    total_tokens: int
