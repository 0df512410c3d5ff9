"""LLM call manager.

Runs at most one outstanding structured call at a time, guarded by a token
budget, a schema precondition, a timeout and response validation. Every
failure is converted into an ``LLMResult`` flagged for fallback; nothing is
raised to the caller.

Calls that outlive their timeout are not awaited further. Each one moves
through explicit states recorded on its ``CallRecord``::

    pending -> completed | failed
    pending -> timed_out_draining -> drained | discarded

While draining, the abandoned call gets a short grace window to settle; if
it settles, its outcome (including any exception) is consumed and dropped.
If not, it is cancelled and a done-callback consumes whatever it produces.
"""

import asyncio
import json
import logging
import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from ats_checker.exceptions import BudgetExceededError, LLMCallError
from ats_checker.llm.budget import LLMBudgetManager
from ats_checker.llm.schema import ObjectSchema, is_structured_object_schema, validate_schema
from ats_checker.models.llm import (
    BudgetStats,
    CompletionMessage,
    CompletionRequest,
    CompletionResponse,
    LLMConfig,
    LLMResult,
)
from ats_checker.prompts.enhancement import JSON_ONLY_INSTRUCTION

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 2000
CHARS_PER_TOKEN = 4
# Bounds (seconds) of the grace window given to an abandoned call
MIN_DRAIN_SECONDS = 0.1
MAX_DRAIN_SECONDS = 0.5


class CallState(str, Enum):
    """Lifecycle of a single dispatched call."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT_DRAINING = "timed_out_draining"
    DRAINED = "drained"  # Abandoned call settled inside the grace window
    DISCARDED = "discarded"  # Abandoned call still running after the grace window


class CallRecord(BaseModel):
    """State history of one dispatched call."""

    model: str
    estimated_tokens: int
    states: list[CallState] = Field(default_factory=lambda: [CallState.PENDING])

    @property
    def state(self) -> CallState:
        return self.states[-1]

    def transition(self, state: CallState) -> None:
        logger.debug(f"LLM call {self.state.value} -> {state.value}")
        self.states.append(state)


class LLMManager:
    """Guarded access to the caller's text-generation client.

    Owns a fresh LLMBudgetManager; create one manager per analysis call.
    """

    def __init__(self, config: LLMConfig):
        self.config = config
        self.client = config.client
        self.budget = LLMBudgetManager(config.limits)
        self.timeout_seconds = config.timeout_ms / 1000
        self.warnings: list[str] = []
        self.calls: list[CallRecord] = []

    @property
    def drain_seconds(self) -> float:
        return min(max(self.timeout_seconds * 2, MIN_DRAIN_SECONDS), MAX_DRAIN_SECONDS)

    async def call_llm(
        self,
        system_prompt: str,
        user_prompt: str,
        schema: ObjectSchema,
        requested_tokens: int | None = None,
        use_thinking: bool = False,
    ) -> LLMResult[Any]:
        """Make one structured call and validate the reply against ``schema``.

        Args:
            system_prompt: System message.
            user_prompt: User message; a JSON-only instruction is appended.
            schema: Expected response shape, also sent as the response format.
            requested_tokens: Explicit token request; also the output cap.
            use_thinking: Prefer the configured thinking model.

        Returns:
            LLMResult with the parsed payload on success, or an error flagged
            for fallback.
        """
        estimated_tokens = self.estimate_tokens(system_prompt, user_prompt, requested_tokens)

        try:
            self.budget.assert_can_call(estimated_tokens)
        except BudgetExceededError as e:
            return self._fail(f"LLM budget exhausted: {e}")

        if not is_structured_object_schema(schema):
            return self._fail("Invalid JSON schema provided")

        request = CompletionRequest(
            model=self._select_model(use_thinking),
            messages=[
                CompletionMessage(role="system", content=system_prompt),
                CompletionMessage(role="user", content=f"{user_prompt}\n\n{JSON_ONLY_INSTRUCTION}"),
            ],
            max_tokens=requested_tokens or DEFAULT_MAX_TOKENS,
            response_format=schema.to_json_schema(),
        )
        record = CallRecord(model=request.model, estimated_tokens=estimated_tokens)
        self.calls.append(record)

        try:
            response = await self._dispatch(request, record)
        except LLMCallError as e:
            return self._fail(f"LLM call failed: {e}")

        if response.content is None or response.content == "":
            return self._fail("Empty response from LLM")

        content = response.content
        if isinstance(content, str):
            try:
                content = json.loads(content)
            except json.JSONDecodeError as e:
                return self._fail(f"Invalid JSON in LLM response: {e}")

        if not validate_schema(content, schema):
            return self._fail("LLM response does not match schema")

        usage = response.usage
        tokens_used = usage.total_tokens if usage and usage.total_tokens else estimated_tokens
        self.budget.record_usage(tokens_used)
        logger.info(f"LLM call succeeded ({tokens_used} tokens)")

        return LLMResult(success=True, fallback=False, data=content, tokens_used=tokens_used)

    async def _dispatch(self, request: CompletionRequest, record: CallRecord) -> CompletionResponse:
        """Race the client call against the timeout.

        Raises:
            LLMCallError: On timeout, transport failure or a malformed reply object.
        """
        try:
            task = asyncio.ensure_future(self.client.create_completion(request))
        except Exception as e:
            record.transition(CallState.FAILED)
            raise LLMCallError(str(e) or type(e).__name__) from e

        try:
            # shield: a timeout abandons the call instead of cancelling it outright
            raw = await asyncio.wait_for(asyncio.shield(task), timeout=self.timeout_seconds)
        except asyncio.TimeoutError as e:
            if task.done():
                # The client raised TimeoutError itself; the wait did not expire
                record.transition(CallState.FAILED)
                raise LLMCallError(str(e) or type(e).__name__) from e
            record.transition(CallState.TIMED_OUT_DRAINING)
            await self._drain(task, record)
            raise LLMCallError(
                f"LLM call timeout after {self.config.timeout_ms}ms"
            ) from None
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                task.cancel()
                raise
            record.transition(CallState.FAILED)
            raise LLMCallError("cancelled") from None
        except Exception as e:
            record.transition(CallState.FAILED)
            raise LLMCallError(str(e) or type(e).__name__) from e

        record.transition(CallState.COMPLETED)
        if isinstance(raw, CompletionResponse):
            return raw
        try:
            return CompletionResponse.model_validate(raw)
        except ValidationError as e:
            raise LLMCallError(f"Unexpected response object: {e.error_count()} errors") from e

    async def _drain(self, task: "asyncio.Future[Any]", record: CallRecord) -> None:
        done, _ = await asyncio.wait({task}, timeout=self.drain_seconds)
        if task in done:
            _consume_outcome(task)
            record.transition(CallState.DRAINED)
            return
        task.add_done_callback(_consume_outcome)
        task.cancel()
        record.transition(CallState.DISCARDED)

    def _select_model(self, use_thinking: bool) -> str:
        models = self.config.models
        if use_thinking and models.thinking:
            return models.thinking
        return models.default

    def _fail(self, message: str) -> LLMResult[Any]:
        self.warnings.append(message)
        logger.warning(message)
        return LLMResult(success=False, fallback=True, error=message)

    @staticmethod
    def estimate_tokens(
        system_prompt: str, user_prompt: str, requested_tokens: int | None = None
    ) -> int:
        """Rough input+output estimate: ~4 chars per token, output half the input."""
        if requested_tokens:
            return requested_tokens
        input_tokens = math.ceil((len(system_prompt) + len(user_prompt)) / CHARS_PER_TOKEN)
        return input_tokens + math.ceil(input_tokens / 2)

    def get_warnings(self) -> list[str]:
        return list(self.warnings)

    def budget_stats(self) -> BudgetStats:
        return self.budget.stats()

    def is_feature_enabled(self, feature: str) -> bool:
        return getattr(self.config.enable, feature, False) is True


def _consume_outcome(task: "asyncio.Future[Any]") -> None:
    """Retrieve a settled call's outcome so a late failure is never left unobserved."""
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.debug(f"Abandoned LLM call settled with error: {error}")
