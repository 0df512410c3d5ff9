"""ATS Checker - explainable resume scoring against a job description."""

from ats_checker.exceptions import (
    ATSCheckerError,
    BudgetExceededError,
    InputValidationError,
    LLMCallError,
)
from ats_checker.models import (
    ATSAnalysisResult,
    ATSBreakdown,
    ATSConfig,
    ATSProfile,
    ATSRule,
    ATSWeights,
    LLMBudget,
    LLMConfig,
    LLMFeatures,
    LLMModels,
)
from ats_checker.pipeline import analyze, analyze_async
from ats_checker.profiles import DEFAULT_PROFILES, DEFAULT_SKILL_ALIASES, get_profile

__version__ = "0.2.0"

__all__ = [
    "ATSAnalysisResult",
    "ATSBreakdown",
    "ATSCheckerError",
    "ATSConfig",
    "ATSProfile",
    "ATSRule",
    "ATSWeights",
    "BudgetExceededError",
    "DEFAULT_PROFILES",
    "DEFAULT_SKILL_ALIASES",
    "InputValidationError",
    "LLMBudget",
    "LLMCallError",
    "LLMConfig",
    "LLMFeatures",
    "LLMModels",
    "analyze",
    "analyze_async",
    "get_profile",
]
