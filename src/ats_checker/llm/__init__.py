"""Optional LLM enhancement layer."""

from ats_checker.llm.adapters import (
    EnhancedSuggestion,
    JDClarification,
    SectionClassification,
    SkillNormalization,
    adapt_jd_clarification,
    adapt_section_classification,
    adapt_skill_normalization,
    adapt_suggestion_enhancement,
)
from ats_checker.llm.base import LLMProvider, get_llm_provider
from ats_checker.llm.budget import LLMBudgetManager
from ats_checker.llm.client import LangChainCompletionClient
from ats_checker.llm.manager import CallRecord, CallState, LLMManager
from ats_checker.llm.schema import validate_schema

__all__ = [
    "CallRecord",
    "CallState",
    "EnhancedSuggestion",
    "JDClarification",
    "LLMBudgetManager",
    "LLMManager",
    "LLMProvider",
    "LangChainCompletionClient",
    "SectionClassification",
    "SkillNormalization",
    "adapt_jd_clarification",
    "adapt_section_classification",
    "adapt_skill_normalization",
    "adapt_suggestion_enhancement",
    "get_llm_provider",
    "validate_schema",
]
