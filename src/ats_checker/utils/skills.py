"""Skill canonicalization through a many-to-one alias table."""

from collections.abc import Iterable, Mapping

from ats_checker.utils.text import unique

SkillAliases = Mapping[str, Iterable[str]]


def normalize_skill(skill: str, aliases: SkillAliases) -> str:
    """Map a skill to its lowercase canonical name.

    Unknown skills are returned trimmed and lowercased.

    Examples:
        >>> normalize_skill(" Node.js ", {"javascript": ["node.js"]})
        'javascript'
        >>> normalize_skill("Rust", {})
        'rust'
    """
    normalized = skill.strip().lower()
    for canonical, alias_list in aliases.items():
        if canonical.lower() == normalized:
            return canonical.lower()
        if any(alias.lower() == normalized for alias in alias_list):
            return canonical.lower()
    return normalized


def normalize_skills(skills: Iterable[str], aliases: SkillAliases) -> list[str]:
    """Canonicalize and deduplicate, dropping empty entries."""
    normalized = (normalize_skill(skill, aliases) for skill in skills)
    return unique([skill for skill in normalized if skill])


def expand_aliases(skills: Iterable[str], aliases: SkillAliases) -> list[str]:
    """Canonical names followed by every known alias of each skill."""
    expanded: list[str] = []
    for skill in skills:
        canonical = normalize_skill(skill, aliases)
        expanded.append(canonical)
        expanded.extend(alias.lower() for alias in aliases.get(canonical, ()))
    return unique(expanded)


def skill_matched(candidate: str, target_skills: set[str], aliases: SkillAliases) -> bool:
    """Check whether ``candidate`` (or its canonical form) is among ``target_skills``."""
    canonical = normalize_skill(candidate, aliases)
    if canonical in target_skills:
        return True
    return any(
        alias.lower() in target_skills
        for name, alias_list in aliases.items()
        if name.lower() == canonical
        for alias in alias_list
    )
