"""TextGenerationClient backed by a LangChain chat model."""

import logging
from typing import Any

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from ats_checker.exceptions import LLMCallError
from ats_checker.llm.base import LLMProvider
from ats_checker.models.llm import CompletionRequest, CompletionResponse, CompletionUsage

logger = logging.getLogger(__name__)

# Function-calling tools need a name and description
RESPONSE_TOOL_NAME = "ats_response"
RESPONSE_TOOL_DESCRIPTION = "Structured response for the ATS analysis task."


class LangChainCompletionClient:
    """Adapt an LLMProvider to the ``create_completion`` contract.

    The response format is bound as a function-calling tool, so ``content``
    comes back already structured.
    """

    def __init__(self, provider: LLMProvider):
        self.provider = provider

    async def create_completion(self, request: CompletionRequest) -> CompletionResponse:
        model = self.provider.get_extraction_model(request.model, request.max_tokens)
        schema = {
            "title": RESPONSE_TOOL_NAME,
            "description": RESPONSE_TOOL_DESCRIPTION,
            **request.response_format,
        }
        structured_model = model.with_structured_output(
            schema, method="function_calling", include_raw=True
        )

        result = await structured_model.ainvoke(_to_messages(request))
        if result.get("parsing_error") is not None:
            raise LLMCallError(f"Could not parse tool call: {result['parsing_error']}")

        return CompletionResponse(
            content=result.get("parsed"),
            usage=_usage_from(result.get("raw")),
        )


def _to_messages(request: CompletionRequest) -> list[BaseMessage]:
    return [
        SystemMessage(content=m.content) if m.role == "system" else HumanMessage(content=m.content)
        for m in request.messages
    ]


def _usage_from(raw: Any) -> CompletionUsage | None:
    metadata = getattr(raw, "usage_metadata", None)
    if not metadata:
        return None
    usage = CompletionUsage(
        prompt_tokens=metadata.get("input_tokens"),
        completion_tokens=metadata.get("output_tokens"),
        total_tokens=metadata.get("total_tokens"),
    )
    logger.debug(f"Token usage: {usage.model_dump()}")
    return usage
