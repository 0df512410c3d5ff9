"""Analysis result models returned to callers."""

from pydantic import BaseModel, Field


class ATSBreakdown(BaseModel):
    """Component scores (0-100 scale)."""

    skills: float = Field(ge=0, le=100)
    experience: float = Field(ge=0, le=100)
    keywords: float = Field(ge=0, le=100)
    education: float = Field(ge=0, le=100)


class ATSAnalysisResult(BaseModel):
    """Final, explainable analysis of a resume against a job description."""

    score: float = Field(ge=0, le=100)
    breakdown: ATSBreakdown
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    overused_keywords: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
