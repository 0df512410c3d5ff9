"""Deterministic suggestions derived from scoring gaps."""

from pydantic import BaseModel, Field

from ats_checker.models.job_spec import ParsedJobDescription
from ats_checker.models.resume import ParsedResume
from ats_checker.scoring.models import ScoreComputation

MAX_LISTED_ITEMS = 6
MIN_ACTION_VERBS = 3


def format_list(values: list[str], max_items: int = MAX_LISTED_ITEMS) -> str:
    """Join up to ``max_items`` distinct values, appending "..." when truncated.

    Examples:
        >>> format_list(["a", "b", "a"])
        'a, b'
        >>> format_list(["a", "b", "c"], max_items=2)
        'a, b...'
    """
    distinct = list(dict.fromkeys(values))
    listed = ", ".join(distinct[:max_items])
    return listed + ("..." if len(distinct) > max_items else "")


class SuggestionSet(BaseModel):
    suggestions: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class SuggestionEngine:
    """Turn scoring gaps into fixed-template, human-readable advice.

    Same inputs always produce the same suggestions in the same order.
    """

    def generate(
        self,
        resume: ParsedResume,
        job: ParsedJobDescription,
        score: ScoreComputation,
        rule_warnings: list[str],
    ) -> SuggestionSet:
        suggestions: list[str] = []

        if score.missing_skills:
            suggestions.append(
                f"Highlight these required skills: {format_list(score.missing_skills)}"
            )

        if score.missing_keywords:
            suggestions.append(
                f"Incorporate job-specific keywords: {format_list(score.missing_keywords)}"
            )

        if score.overused_keywords:
            suggestions.append(
                f"Avoid keyword stuffing for: {format_list(score.overused_keywords)}"
            )

        if score.missing_experience_years > 0:
            years = score.required_experience_years or score.missing_experience_years
            suggestions.append(
                f"Clarify at least {years} years of relevant experience "
                "with quantified achievements."
            )

        if score.unmet_education:
            suggestions.append(
                f"State your education credentials matching: {format_list(score.unmet_education)}"
            )

        if len(resume.action_verbs) < MIN_ACTION_VERBS:
            suggestions.append(
                "Strengthen bullet points with impact verbs (led, built, improved, delivered)."
            )

        return SuggestionSet(
            suggestions=suggestions,
            warnings=[*rule_warnings, *resume.warnings],
        )
