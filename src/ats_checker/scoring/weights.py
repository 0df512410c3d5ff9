"""Default weights and per-call configuration resolution."""

import logging

from ats_checker.models.config import (
    ATSConfig,
    ATSWeights,
    KeywordDensityConfig,
    ResolvedATSConfig,
    SectionPenaltyConfig,
)
from ats_checker.profiles import DEFAULT_SKILL_ALIASES
from ats_checker.utils.text import unique

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS = ATSWeights()
DEFAULT_KEYWORD_DENSITY = KeywordDensityConfig()
DEFAULT_SECTION_PENALTIES = SectionPenaltyConfig()


def normalize_weights(weights: ATSWeights) -> ATSWeights:
    """Scale weights to sum to 1.

    All-zero weights are returned unchanged, which yields a composite of 0.
    """
    total = weights.total
    if total == 0:
        logger.debug("All component weights are zero; skipping normalization")
        return weights
    return ATSWeights(
        skills=weights.skills / total,
        experience=weights.experience / total,
        keywords=weights.keywords / total,
        education=weights.education / total,
    )


def _merge_aliases(overrides: dict[str, list[str]]) -> dict[str, tuple[str, ...]]:
    merged = dict(DEFAULT_SKILL_ALIASES)
    for canonical, aliases in overrides.items():
        key = canonical.strip().lower()
        combined = [*merged.get(key, ()), *(alias.strip().lower() for alias in aliases)]
        merged[key] = tuple(unique([alias for alias in combined if alias]))
    return merged


def resolve_config(config: ATSConfig | None = None) -> ResolvedATSConfig:
    """Merge a partial config over the defaults.

    A fresh ResolvedATSConfig is built for every call; the module-level
    defaults are never mutated.
    """
    config = config or ATSConfig()
    return ResolvedATSConfig(
        weights=normalize_weights(config.weights or DEFAULT_WEIGHTS),
        skill_aliases=_merge_aliases(config.skill_aliases),
        profile=config.profile,
        rules=tuple(config.rules),
        keyword_density=config.keyword_density or DEFAULT_KEYWORD_DENSITY,
        section_penalties=config.section_penalties or DEFAULT_SECTION_PENALTIES,
        allow_partial_matches=config.allow_partial_matches,
    )
