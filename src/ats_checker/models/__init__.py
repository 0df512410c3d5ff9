"""Data models for ATS Checker."""

from ats_checker.models.config import (
    ATSConfig,
    ATSProfile,
    ATSRule,
    ATSWeights,
    KeywordDensityConfig,
    ResolvedATSConfig,
    RuleContext,
    SectionPenaltyConfig,
)
from ats_checker.models.job_spec import ParsedJobDescription
from ats_checker.models.llm import (
    BudgetStats,
    CompletionMessage,
    CompletionRequest,
    CompletionResponse,
    CompletionUsage,
    LLMBudget,
    LLMConfig,
    LLMFeatures,
    LLMModels,
    LLMResult,
    TextGenerationClient,
)
from ats_checker.models.result import ATSAnalysisResult, ATSBreakdown
from ats_checker.models.resume import (
    REQUIRED_SECTIONS,
    DateRange,
    ExperienceEntry,
    ParsedResume,
    ResumeSection,
)

__all__ = [
    "ATSAnalysisResult",
    "ATSBreakdown",
    "ATSConfig",
    "ATSProfile",
    "ATSRule",
    "ATSWeights",
    "BudgetStats",
    "CompletionMessage",
    "CompletionRequest",
    "CompletionResponse",
    "CompletionUsage",
    "DateRange",
    "ExperienceEntry",
    "KeywordDensityConfig",
    "LLMBudget",
    "LLMConfig",
    "LLMFeatures",
    "LLMModels",
    "LLMResult",
    "ParsedJobDescription",
    "ParsedResume",
    "REQUIRED_SECTIONS",
    "ResolvedATSConfig",
    "ResumeSection",
    "RuleContext",
    "SectionPenaltyConfig",
    "TextGenerationClient",
]
