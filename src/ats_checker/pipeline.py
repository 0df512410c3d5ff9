"""Analysis entry points.

``analyze`` runs the deterministic pipeline only. ``analyze_async`` runs the
same pipeline and then, when configured, asks an LLM to rephrase the
suggestions. The score, breakdown and keyword lists never depend on the LLM.
"""

import logging

from pydantic import BaseModel, Field

from ats_checker.exceptions import InputValidationError
from ats_checker.extractors import JobExtractor, ResumeExtractor
from ats_checker.llm.adapters import adapt_suggestion_enhancement
from ats_checker.llm.manager import LLMManager
from ats_checker.llm.schemas import SUGGESTION_ENHANCEMENT_SCHEMA
from ats_checker.models.config import ATSConfig
from ats_checker.models.llm import LLMConfig
from ats_checker.models.result import ATSAnalysisResult
from ats_checker.processors.suggestions import SuggestionEngine
from ats_checker.prompts.enhancement import (
    SUGGESTION_ENHANCEMENT_SYSTEM,
    suggestion_enhancement_user,
)
from ats_checker.rules.engine import RuleEngine
from ats_checker.scoring.algorithmic import AlgorithmicScorer
from ats_checker.scoring.weights import resolve_config
from ats_checker.utils.text import clamp

logger = logging.getLogger(__name__)

SYNC_LLM_SKIPPED_WARNING = (
    "LLM suggestion enhancement skipped - use analyze_async for LLM features"
)
NO_ACTIONABLE_WARNING = "LLM returned no actionable enhanced suggestions"
ENHANCEMENT_TOKENS = 2000


class EnhancementOutcome(BaseModel):
    success: bool
    suggestions: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


def _validate_inputs(resume_text: str, job_description: str) -> None:
    if not resume_text or not resume_text.strip():
        raise InputValidationError("resume_text must be a non-empty string")
    if not job_description or not job_description.strip():
        raise InputValidationError("job_description must be a non-empty string")


def _run_deterministic(
    resume_text: str, job_description: str, config: ATSConfig | None
) -> ATSAnalysisResult:
    resolved = resolve_config(config)
    resume = ResumeExtractor(resolved).extract(resume_text)
    job = JobExtractor(resolved).extract(job_description)

    scoring = AlgorithmicScorer(resolved).compute(resume, job)
    rules = RuleEngine(resolved).evaluate(
        resume,
        job,
        breakdown=scoring.breakdown,
        matched_keywords=scoring.matched_keywords,
        overused_keywords=scoring.overused_keywords,
    )
    suggestion_set = SuggestionEngine().generate(resume, job, scoring, rules.warnings)

    score = round(clamp(scoring.score - rules.total_penalty, 0, 100), 2)
    logger.debug(
        f"Composite {scoring.score} - penalty {rules.total_penalty} = final {score}"
    )

    return ATSAnalysisResult(
        score=score,
        breakdown=scoring.breakdown,
        matched_keywords=scoring.matched_keywords,
        missing_keywords=scoring.missing_keywords,
        overused_keywords=scoring.overused_keywords,
        suggestions=suggestion_set.suggestions,
        warnings=suggestion_set.warnings,
    )


def analyze(
    resume_text: str,
    job_description: str,
    config: ATSConfig | None = None,
    llm: LLMConfig | None = None,
) -> ATSAnalysisResult:
    """Score a resume against a job description.

    Args:
        resume_text: Resume as plain text or markdown.
        job_description: Job posting text.
        config: Optional partial configuration merged over defaults.
        llm: Ignored here apart from a warning; use :func:`analyze_async`.

    Returns:
        ATSAnalysisResult with score, breakdown, keywords, suggestions and warnings.

    Raises:
        InputValidationError: If either text is empty.
    """
    _validate_inputs(resume_text, job_description)
    result = _run_deterministic(resume_text, job_description, config)
    if llm is not None:
        result.warnings.append(SYNC_LLM_SKIPPED_WARNING)
    return result


async def analyze_async(
    resume_text: str,
    job_description: str,
    config: ATSConfig | None = None,
    llm: LLMConfig | None = None,
) -> ATSAnalysisResult:
    """Like :func:`analyze`, plus optional LLM rephrasing of the suggestions.

    Enhancement failures never raise; they leave the deterministic
    suggestions in place and add a warning.
    """
    _validate_inputs(resume_text, job_description)
    result = _run_deterministic(resume_text, job_description, config)

    if llm is not None and llm.enable.suggestions and result.suggestions:
        outcome = await enhance_suggestions(llm, result.suggestions)
        if outcome.success:
            result.suggestions = outcome.suggestions
        result.warnings.extend(outcome.warnings)

    return result


async def enhance_suggestions(llm: LLMConfig, suggestions: list[str]) -> EnhancementOutcome:
    """Ask the LLM to rewrite ``suggestions``; returns the fallback outcome on any failure."""
    if not llm.enable.suggestions:
        return EnhancementOutcome(success=False)

    logger.info(f"Enhancing {len(suggestions)} suggestions with {llm.models.default}")
    manager = LLMManager(llm)
    try:
        result = await manager.call_llm(
            SUGGESTION_ENHANCEMENT_SYSTEM,
            suggestion_enhancement_user(suggestions),
            SUGGESTION_ENHANCEMENT_SCHEMA,
            requested_tokens=ENHANCEMENT_TOKENS,
        )
    except Exception as e:
        logger.exception("Unexpected error in LLM enhancement")
        return EnhancementOutcome(
            success=False, warnings=[f"Unexpected error in LLM enhancement: {e}"]
        )

    if not result.success:
        return EnhancementOutcome(success=False, warnings=manager.get_warnings())

    enhanced = [
        item.enhanced
        for item in adapt_suggestion_enhancement(result.data)
        if item.actionable is not False
    ]
    if not enhanced:
        logger.warning(NO_ACTIONABLE_WARNING)
        return EnhancementOutcome(
            success=False, warnings=[*manager.get_warnings(), NO_ACTIONABLE_WARNING]
        )

    return EnhancementOutcome(success=True, suggestions=enhanced, warnings=manager.get_warnings())
