"""Scoring configuration models.

``ATSConfig`` is the partial, caller-facing configuration; every field is
optional and falls back to a default. ``ResolvedATSConfig`` is the fully
defaulted, frozen form produced once per analysis by
:func:`ats_checker.scoring.weights.resolve_config`.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ats_checker.models.job_spec import ParsedJobDescription
from ats_checker.models.result import ATSBreakdown
from ats_checker.models.resume import ParsedResume


class ATSWeights(BaseModel):
    """Relative weight of each component in the composite score."""

    model_config = ConfigDict(frozen=True)

    skills: float = Field(default=0.30, ge=0)
    experience: float = Field(default=0.30, ge=0)
    keywords: float = Field(default=0.25, ge=0)
    education: float = Field(default=0.15, ge=0)

    @property
    def total(self) -> float:
        return self.skills + self.experience + self.keywords + self.education


class KeywordDensityConfig(BaseModel):
    """Keyword density thresholds (occurrences / total tokens)."""

    model_config = ConfigDict(frozen=True)

    min: float = Field(default=0.0025, ge=0, description="Below this a keyword is underused")
    max: float = Field(default=0.04, ge=0, description="Above this a keyword is stuffed")
    overuse_penalty: float = Field(default=5, ge=0, description="Penalty per stuffed keyword")


class SectionPenaltyConfig(BaseModel):
    """Score penalty for each required section that is missing."""

    model_config = ConfigDict(frozen=True)

    missing_summary: float = Field(default=4, ge=0)
    missing_experience: float = Field(default=10, ge=0)
    missing_skills: float = Field(default=8, ge=0)
    missing_education: float = Field(default=6, ge=0)

    def for_section(self, section: str) -> float:
        return getattr(self, f"missing_{section}", 0.0)


class ATSProfile(BaseModel):
    """Named bundle of skills and experience that augments a job description."""

    model_config = ConfigDict(frozen=True)

    name: str
    mandatory_skills: tuple[str, ...] = ()
    optional_skills: tuple[str, ...] = ()
    min_experience: int | None = None


class RuleContext(BaseModel):
    """Read-only view handed to every rule predicate."""

    model_config = ConfigDict(frozen=True)

    resume: ParsedResume
    job: ParsedJobDescription
    weights: ATSWeights
    keyword_density: KeywordDensityConfig
    breakdown: ATSBreakdown | None = None
    matched_keywords: tuple[str, ...] = ()
    overused_keywords: tuple[str, ...] = ()


class ATSRule(BaseModel):
    """User-supplied penalty rule, evaluated after the built-in rules."""

    model_config = ConfigDict(frozen=True)

    id: str
    description: str | None = None
    penalty: float = Field(ge=0)
    warning: str | None = None
    condition: Callable[[RuleContext], bool]


class ATSConfig(BaseModel):
    """Partial analysis configuration merged over defaults."""

    weights: ATSWeights | None = None
    skill_aliases: dict[str, list[str]] = Field(default_factory=dict)
    profile: ATSProfile | None = None
    rules: list[ATSRule] = Field(default_factory=list)
    keyword_density: KeywordDensityConfig | None = None
    section_penalties: SectionPenaltyConfig | None = None
    allow_partial_matches: bool = True

    @field_validator("profile", mode="before")
    @classmethod
    def resolve_profile_name(cls, v: Any) -> Any:
        """Allow a built-in profile to be selected by name."""
        if isinstance(v, str):
            from ats_checker.profiles import get_profile

            return get_profile(v)
        return v


class ResolvedATSConfig(BaseModel):
    """Fully defaulted configuration for a single analysis call."""

    model_config = ConfigDict(frozen=True)

    weights: ATSWeights
    skill_aliases: dict[str, tuple[str, ...]]
    profile: ATSProfile | None = None
    rules: tuple[ATSRule, ...] = ()
    keyword_density: KeywordDensityConfig
    section_penalties: SectionPenaltyConfig
    allow_partial_matches: bool = True
