"""Call and token budget for the LLM enhancement layer."""

from ats_checker.exceptions import BudgetExceededError
from ats_checker.models.llm import BudgetStats, LLMBudget


class LLMBudgetManager:
    """Enforce call and token limits for a single analysis.

    One instance per analysis call; never shared between concurrent analyses.
    """

    def __init__(self, limits: LLMBudget):
        self.limits = limits
        self.call_count = 0
        self.total_tokens_used = 0

    def assert_can_call(self, requested_tokens: int) -> None:
        """Raise BudgetExceededError if a call of this size would break a limit."""
        if self.call_count >= self.limits.max_calls:
            raise BudgetExceededError(
                f"LLM call limit exceeded: {self.call_count}/{self.limits.max_calls} calls used"
            )
        if requested_tokens > self.limits.max_tokens_per_call:
            raise BudgetExceededError(
                f"Requested tokens {requested_tokens} exceeds per-call limit "
                f"{self.limits.max_tokens_per_call}"
            )
        if self.total_tokens_used + requested_tokens > self.limits.max_total_tokens:
            raise BudgetExceededError(
                f"Total token budget exceeded: {self.total_tokens_used + requested_tokens}"
                f"/{self.limits.max_total_tokens}"
            )

    def record_usage(self, tokens_used: int) -> None:
        self.call_count += 1
        self.total_tokens_used += tokens_used

    def stats(self) -> BudgetStats:
        return BudgetStats(
            calls_used=self.call_count,
            calls_remaining=max(0, self.limits.max_calls - self.call_count),
            tokens_used=self.total_tokens_used,
            tokens_remaining=max(0, self.limits.max_total_tokens - self.total_tokens_used),
            total_calls=self.limits.max_calls,
            total_tokens=self.limits.max_total_tokens,
        )

    def is_exhausted(self) -> bool:
        return (
            self.call_count >= self.limits.max_calls
            or self.total_tokens_used >= self.limits.max_total_tokens
        )

    def reset(self) -> None:
        self.call_count = 0
        self.total_tokens_used = 0
