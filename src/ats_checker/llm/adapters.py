"""Turn loosely-typed LLM payloads into typed records.

Adapters never raise: malformed items are skipped and a malformed payload
yields an empty result.
"""

from typing import Any

from pydantic import BaseModel, Field


class EnhancedSuggestion(BaseModel):
    original: str
    enhanced: str
    actionable: bool | None = None


class SkillNormalization(BaseModel):
    input: str
    normalized: str
    confidence: float | None = None


class SectionClassification(BaseModel):
    header: str
    classification: str
    confidence: float | None = None


class ImplicitExperience(BaseModel):
    min_years: float | None = None
    domains: list[str] | None = None


class JDClarification(BaseModel):
    implicit_skills: list[str] = Field(default_factory=list)
    implicit_experience: ImplicitExperience | None = None
    clarity_score: float | None = None


def safe_extract_string(obj: Any, key: str) -> str | None:
    if not isinstance(obj, dict):
        return None
    value = obj.get(key)
    return value if isinstance(value, str) else None


def safe_extract_array(obj: Any, key: str) -> list[Any]:
    if not isinstance(obj, dict):
        return []
    value = obj.get(key)
    return value if isinstance(value, list) else []


def safe_extract_number(obj: Any, key: str) -> float | None:
    if not isinstance(obj, dict):
        return None
    value = obj.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _safe_extract_bool(obj: dict[str, Any], key: str) -> bool | None:
    value = obj.get(key)
    return value if isinstance(value, bool) else None


def adapt_suggestion_enhancement(data: Any) -> list[EnhancedSuggestion]:
    """Keep entries carrying non-empty ``original`` and ``enhanced`` text."""
    results = []
    for item in safe_extract_array(data, "suggestions"):
        original = safe_extract_string(item, "original")
        enhanced = safe_extract_string(item, "enhanced")
        if original and enhanced:
            results.append(
                EnhancedSuggestion(
                    original=original,
                    enhanced=enhanced,
                    actionable=_safe_extract_bool(item, "actionable"),
                )
            )
    return results


def adapt_skill_normalization(data: Any) -> list[SkillNormalization]:
    results = []
    for item in safe_extract_array(data, "canonicalSkills"):
        source = safe_extract_string(item, "input")
        normalized = safe_extract_string(item, "normalized")
        if source and normalized:
            results.append(
                SkillNormalization(
                    input=source,
                    normalized=normalized,
                    confidence=safe_extract_number(item, "confidence"),
                )
            )
    return results


def adapt_section_classification(data: Any) -> list[SectionClassification]:
    results = []
    for item in safe_extract_array(data, "sections"):
        header = safe_extract_string(item, "header")
        classification = safe_extract_string(item, "classification")
        if header and classification:
            results.append(
                SectionClassification(
                    header=header,
                    classification=classification,
                    confidence=safe_extract_number(item, "confidence"),
                )
            )
    return results


def adapt_jd_clarification(data: Any) -> JDClarification:
    """Implicit requirements inferred from a job description."""
    if not isinstance(data, dict):
        return JDClarification()

    skills = [s for s in safe_extract_array(data, "implicitSkills") if isinstance(s, str)]

    experience = None
    raw_experience = data.get("implicitExperience")
    if isinstance(raw_experience, dict):
        min_years = safe_extract_number(raw_experience, "minYears")
        domains = [d for d in safe_extract_array(raw_experience, "domains") if isinstance(d, str)]
        if min_years or domains:
            experience = ImplicitExperience(min_years=min_years, domains=domains or None)

    return JDClarification(
        implicit_skills=skills,
        implicit_experience=experience,
        clarity_score=safe_extract_number(data, "clarityScore"),
    )
