"""Penalty rules applied on top of the composite score."""

import logging

from pydantic import BaseModel, Field

from ats_checker.models.config import ResolvedATSConfig, RuleContext
from ats_checker.models.job_spec import ParsedJobDescription
from ats_checker.models.result import ATSBreakdown
from ats_checker.models.resume import REQUIRED_SECTIONS, ParsedResume
from ats_checker.utils.text import contains_table_like_structure

logger = logging.getLogger(__name__)

TABLE_LAYOUT_PENALTY = 8
FEW_SECTIONS_PENALTY = 5
MIN_SECTION_COUNT = 3


class RuleEvaluation(BaseModel):
    """Accumulated penalty and the warnings explaining it."""

    total_penalty: float = 0.0
    warnings: list[str] = Field(default_factory=list)

    def add(self, penalty: float, warning: str | None) -> None:
        self.total_penalty += penalty
        if warning:
            self.warnings.append(warning)


class RuleEngine:
    """Apply built-in rules, then user rules in declaration order.

    Rules only add to the penalty total and the warning list; the composite
    score itself is never visible to them beyond the read-only breakdown.
    """

    def __init__(self, config: ResolvedATSConfig):
        self.config = config

    def evaluate(
        self,
        resume: ParsedResume,
        job: ParsedJobDescription,
        breakdown: ATSBreakdown | None = None,
        matched_keywords: list[str] | None = None,
        overused_keywords: list[str] | None = None,
    ) -> RuleEvaluation:
        """Run every rule and return the combined penalty.

        Args:
            resume: Parsed resume.
            job: Parsed job description.
            breakdown: Component scores, exposed to user rules.
            matched_keywords: Job keywords found in the resume.
            overused_keywords: Keywords above the density threshold.

        Returns:
            RuleEvaluation with the penalty total and warnings in rule order.
        """
        result = RuleEvaluation()
        overused = list(overused_keywords or [])

        self._apply_section_penalties(resume, result)

        if contains_table_like_structure(resume.raw):
            result.add(
                TABLE_LAYOUT_PENALTY,
                f"Detected table-like or columnar formatting (penalty {TABLE_LAYOUT_PENALTY})",
            )

        if overused:
            penalty = len(overused) * self.config.keyword_density.overuse_penalty
            result.add(
                penalty,
                f"Keyword stuffing detected for: {', '.join(overused)} (penalty {_fmt(penalty)})",
            )

        if len(resume.detected_sections) < MIN_SECTION_COUNT:
            result.add(
                FEW_SECTIONS_PENALTY,
                f"Few recognizable sections found (penalty {FEW_SECTIONS_PENALTY})",
            )

        if self.config.rules:
            context = RuleContext(
                resume=resume,
                job=job,
                weights=self.config.weights,
                keyword_density=self.config.keyword_density,
                breakdown=breakdown,
                matched_keywords=tuple(matched_keywords or ()),
                overused_keywords=tuple(overused),
            )
            self._apply_user_rules(context, result)

        logger.debug(f"Rule penalty total: {result.total_penalty}")
        return result

    def _apply_section_penalties(self, resume: ParsedResume, result: RuleEvaluation) -> None:
        penalties = self.config.section_penalties
        for section in REQUIRED_SECTIONS:
            if section not in resume.detected_sections:
                penalty = penalties.for_section(section)
                result.add(penalty, f"{section} section missing (penalty {_fmt(penalty)})")

    def _apply_user_rules(self, context: RuleContext, result: RuleEvaluation) -> None:
        for rule in self.config.rules:
            try:
                triggered = bool(rule.condition(context))
            except Exception as e:
                logger.warning(f"Rule '{rule.id}' raised and was skipped: {e}")
                result.add(0, f"Rule '{rule.id}' could not be evaluated: {e}")
                continue
            if triggered:
                result.add(rule.penalty, rule.warning)


def _fmt(value: float) -> str:
    """Render whole-number penalties without a trailing ".0"."""
    return str(int(value)) if float(value).is_integer() else f"{value:g}"
