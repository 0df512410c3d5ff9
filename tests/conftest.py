"""Pytest configuration and fixtures."""

import asyncio
from datetime import date
from pathlib import Path
from typing import Any

import pytest

from ats_checker.models.config import ATSConfig, ResolvedATSConfig
from ats_checker.models.llm import (
    CompletionRequest,
    CompletionResponse,
    CompletionUsage,
    LLMBudget,
    LLMConfig,
    LLMFeatures,
)
from ats_checker.scoring.weights import resolve_config

# Fixed reference date so "Present" ranges are reproducible
TODAY = date(2025, 1, 15)


class FakeClient:
    """Text-generation client returning a canned reply (or raising it)."""

    def __init__(self, reply: Any = None, delay: float = 0.0, usage: int | None = None):
        self.reply = reply
        self.delay = delay
        self.usage = usage
        self.requests: list[CompletionRequest] = []

    async def create_completion(self, request: CompletionRequest) -> CompletionResponse:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if isinstance(self.reply, BaseException):
            raise self.reply
        usage = CompletionUsage(total_tokens=self.usage) if self.usage is not None else None
        return CompletionResponse(content=self.reply, usage=usage)


@pytest.fixture
def sample_resume_text() -> str:
    """Load sample resume text."""
    sample_path = Path(__file__).parent.parent / "examples" / "sample_resume.md"
    return sample_path.read_text(encoding="utf-8")


@pytest.fixture
def sample_job_text() -> str:
    """Load sample job description text."""
    sample_path = Path(__file__).parent.parent / "examples" / "sample_job.md"
    return sample_path.read_text(encoding="utf-8")


@pytest.fixture
def scenario_resume() -> str:
    """Small resume with all four required sections."""
    return (
        "Summary\n"
        "Frontend engineer focused on web performance.\n"
        "Skills\n"
        "JavaScript, TypeScript, React\n"
        "Experience\n"
        "Senior Engineer (Jan 2020 - Present)\n"
        "Education\n"
        "B.S. Computer Science\n"
    )


@pytest.fixture
def scenario_job() -> str:
    return "Requirements: React, TypeScript. Must have 3+ years. Bachelor's degree required."


@pytest.fixture
def resolved_config() -> ResolvedATSConfig:
    """Defaults with no profile and no user rules."""
    return resolve_config(ATSConfig())


def make_llm_config(client: Any, timeout_ms: int = 1000, **limits: int) -> LLMConfig:
    """LLMConfig with only suggestion enhancement switched on."""
    return LLMConfig(
        client=client,
        limits=LLMBudget(**limits),
        enable=LLMFeatures(suggestions=True),
        timeout_ms=timeout_ms,
    )


@pytest.fixture
def fake_client() -> type[FakeClient]:
    """The FakeClient class, for building clients with custom replies."""
    return FakeClient


@pytest.fixture
def llm_config_factory() -> Any:
    return make_llm_config
