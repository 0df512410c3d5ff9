"""Degree vocabulary shared by the job parser and the education scorer."""

import re

# Canonical degree family -> spellings seen in resumes and postings
DEGREE_FAMILIES: dict[str, tuple[str, ...]] = {
    "bachelor": ("bachelor", "bachelors", "b.s", "bs", "bsc", "b.sc", "b.a", "ba", "b.eng", "beng"),
    "master": ("master", "masters", "m.s", "ms", "msc", "m.sc", "m.a", "m.eng", "meng"),
    "phd": ("phd", "ph.d", "doctorate", "doctoral"),
    "mba": ("mba",),
    "associate": ("associate's", "associates degree", "associate degree"),
}

# Too ambiguous to read as a requirement in job text ("MS Office", "BA team")
AMBIGUOUS_ALIASES = frozenset({"bs", "ba", "ms"})


def _mentions(text: str, alias: str) -> bool:
    return re.search(rf"(?<![a-z0-9]){re.escape(alias)}(?![a-z0-9])", text) is not None


def degree_mentioned(text: str, family: str, strict: bool = False) -> bool:
    """Check whether ``text`` mentions any spelling of a degree family.

    Args:
        text: Lowercased text to search.
        family: Key of ``DEGREE_FAMILIES``.
        strict: Skip ambiguous short aliases (used for job text).
    """
    for alias in DEGREE_FAMILIES.get(family, (family,)):
        if strict and alias in AMBIGUOUS_ALIASES:
            continue
        if _mentions(text, alias):
            return True
    return False


def extract_degree_requirements(text: str) -> list[str]:
    """Degree families mentioned in job text, in vocabulary order."""
    lowered = text.lower()
    return [family for family in DEGREE_FAMILIES if degree_mentioned(lowered, family, strict=True)]
