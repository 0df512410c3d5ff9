"""Algorithmic scoring for resume-job matching.

Computes four deterministic, reproducible component scores (0-100) and their
weighted composite. Uses exact and alias-aware string matching only.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ats_checker.models.result import ATSBreakdown
from ats_checker.scoring.models import ScoreComputation
from ats_checker.utils.education import degree_mentioned
from ats_checker.utils.skills import normalize_skills
from ats_checker.utils.text import clamp, contains_phrase, count_frequencies, tokenize, unique

if TYPE_CHECKING:
    from ats_checker.models.config import ResolvedATSConfig
    from ats_checker.models.job_spec import ParsedJobDescription
    from ats_checker.models.resume import ParsedResume

logger = logging.getLogger(__name__)


class AlgorithmicScorer:
    """Compute the skills, experience, keywords and education components."""

    REQUIRED_SKILL_WEIGHT = 0.7
    OPTIONAL_SKILL_WEIGHT = 0.3
    EXPERIENCE_YEARS_WEIGHT = 0.75
    EXPERIENCE_ROLE_WEIGHT = 0.25
    # Years beyond twice the requirement earn nothing extra
    MAX_YEARS_RATIO = 2.0

    def __init__(self, config: ResolvedATSConfig):
        self.config = config

    def compute(self, resume: ParsedResume, job: ParsedJobDescription) -> ScoreComputation:
        """Compute all component scores and the weighted composite.

        Args:
            resume: Parsed resume.
            job: Parsed job description.

        Returns:
            ScoreComputation with breakdown, keyword lists and gaps.
        """
        skills_score, missing_skills = self.score_skills(resume, job)
        experience_score, required_years, missing_years = self.score_experience(resume, job)
        keywords_score, matched, missing, overused = self.score_keywords(resume, job)
        education_score, unmet_education = self.score_education(resume, job)

        breakdown = ATSBreakdown(
            skills=round(skills_score, 2),
            experience=round(experience_score, 2),
            keywords=round(keywords_score, 2),
            education=round(education_score, 2),
        )
        weights = self.config.weights
        composite = (
            breakdown.skills * weights.skills
            + breakdown.experience * weights.experience
            + breakdown.keywords * weights.keywords
            + breakdown.education * weights.education
        )
        logger.debug(f"Component scores: {breakdown.model_dump()}, composite={composite:.2f}")

        return ScoreComputation(
            score=clamp(round(composite, 2), 0, 100),
            breakdown=breakdown,
            matched_keywords=matched,
            missing_keywords=missing,
            overused_keywords=overused,
            missing_skills=missing_skills,
            required_experience_years=required_years,
            missing_experience_years=missing_years,
            education_score=breakdown.education,
            unmet_education=unmet_education,
        )

    def _has_skill(self, skill: str, resume_skills: set[str], resume_text: str) -> bool:
        if skill in resume_skills:
            return True
        return self.config.allow_partial_matches and contains_phrase(resume_text, skill)

    def score_skills(
        self, resume: ParsedResume, job: ParsedJobDescription
    ) -> tuple[float, list[str]]:
        """Required coverage weighted 0.7 plus preferred coverage weighted 0.3.

        An empty requirement set counts as full coverage.
        """
        aliases = self.config.skill_aliases
        profile = self.config.profile
        profile_required = profile.mandatory_skills if profile else ()
        profile_optional = profile.optional_skills if profile else ()

        required = normalize_skills([*job.required_skills, *profile_required], aliases)
        optional = normalize_skills([*job.preferred_skills, *profile_optional], aliases)
        resume_skills = set(normalize_skills(resume.skills, aliases))
        resume_text = resume.normalized_text.lower()

        missing = [s for s in required if not self._has_skill(s, resume_skills, resume_text)]
        matched_optional = [s for s in optional if self._has_skill(s, resume_skills, resume_text)]

        required_coverage = (len(required) - len(missing)) / len(required) if required else 1.0
        optional_coverage = len(matched_optional) / len(optional) if optional else 1.0

        score = (
            required_coverage * self.REQUIRED_SKILL_WEIGHT
            + optional_coverage * self.OPTIONAL_SKILL_WEIGHT
        ) * 100
        return clamp(score, 0, 100), missing

    def score_experience(
        self, resume: ParsedResume, job: ParsedJobDescription
    ) -> tuple[float, int | None, float]:
        """Years coverage weighted 0.75 plus role-title overlap weighted 0.25.

        Returns:
            Tuple of (score, required_years, missing_years).
        """
        required_years = job.min_experience_years
        if required_years is None and self.config.profile is not None:
            required_years = self.config.profile.min_experience
        if not required_years:
            return 100.0, required_years, 0.0

        actual = resume.total_experience_years
        year_coverage = clamp(min(actual / required_years, self.MAX_YEARS_RATIO), 0, 1)

        role_keywords = {keyword.lower() for keyword in job.role_keywords}
        title_tokens = {token for title in resume.job_titles for token in tokenize(title)}
        if role_keywords:
            role_coverage = len(role_keywords & title_tokens) / len(role_keywords)
        else:
            role_coverage = 1.0

        score = (
            year_coverage * self.EXPERIENCE_YEARS_WEIGHT
            + clamp(role_coverage, 0, 1) * self.EXPERIENCE_ROLE_WEIGHT
        ) * 100
        missing_years = round(max(required_years - actual, 0.0), 2)
        return clamp(score, 0, 100), required_years, missing_years

    def score_keywords(
        self, resume: ParsedResume, job: ParsedJobDescription
    ) -> tuple[float, list[str], list[str], list[str]]:
        """Share of job keywords present among resume tokens.

        A matched keyword is overused when its density (occurrences / total
        tokens) is strictly above the configured maximum.

        Returns:
            Tuple of (score, matched, missing, overused).
        """
        job_keywords = unique([keyword.lower() for keyword in job.keywords])
        if not job_keywords:
            return 100.0, [], [], []

        resume_tokens = tokenize(resume.normalized_text)
        token_set = set(resume_tokens)
        matched = [keyword for keyword in job_keywords if keyword in token_set]
        missing = [keyword for keyword in job_keywords if keyword not in token_set]

        frequencies = count_frequencies(resume_tokens)
        total_tokens = len(resume_tokens) or 1
        max_density = self.config.keyword_density.max
        overused = [
            keyword
            for keyword in matched
            if frequencies.get(keyword, 0) / total_tokens > max_density
        ]

        score = clamp(len(matched) / len(job_keywords) * 100, 0, 100)
        return score, matched, missing, overused

    def score_education(
        self, resume: ParsedResume, job: ParsedJobDescription
    ) -> tuple[float, list[str]]:
        """Proportional coverage of the job's degree requirements.

        Returns:
            Tuple of (score, unmet_requirements).
        """
        requirements = list(job.education_requirements)
        if not requirements:
            return 100.0, []

        education_text = " ".join(resume.education_entries).lower()
        unmet = [req for req in requirements if not degree_mentioned(education_text, req)]
        met = len(requirements) - len(unmet)
        if met == 0:
            return 0.0, unmet
        return clamp(met / len(requirements) * 100, 0, 100), unmet


def calculate_score(
    resume: ParsedResume, job: ParsedJobDescription, config: ResolvedATSConfig
) -> ScoreComputation:
    """Convenience wrapper around :class:`AlgorithmicScorer`."""
    return AlgorithmicScorer(config).compute(resume, job)
