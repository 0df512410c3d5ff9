"""Built-in skill aliases and role profiles.

These are read-only defaults. Callers extend them through ``ATSConfig``;
the merged result lives only in that call's ``ResolvedATSConfig``.
"""

from collections.abc import Mapping
from types import MappingProxyType

from ats_checker.models.config import ATSProfile

DEFAULT_SKILL_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "javascript": ("js", "node", "node.js", "nodejs"),
        "typescript": ("ts",),
        "react": ("reactjs", "react.js"),
        "c++": ("cpp",),
        "c#": ("csharp",),
        "python": ("py",),
        "sql": ("postgres", "mysql", "sqlite"),
        "graphql": ("gql",),
        "aws": ("amazon web services",),
        "azure": ("microsoft azure",),
        "gcp": ("google cloud", "google cloud platform"),
        "docker": ("containers",),
        "kubernetes": ("k8s",),
        "html": ("html5",),
        "css": ("css3",),
    }
)

SOFTWARE_ENGINEER_PROFILE = ATSProfile(
    name="software-engineer",
    mandatory_skills=("javascript", "typescript", "react", "node"),
    optional_skills=("graphql", "sql", "docker"),
    min_experience=3,
)

DATA_SCIENTIST_PROFILE = ATSProfile(
    name="data-scientist",
    mandatory_skills=("python", "sql", "statistics"),
    optional_skills=("pandas", "numpy", "pytorch", "tensorflow"),
    min_experience=2,
)

PRODUCT_MANAGER_PROFILE = ATSProfile(
    name="product-manager",
    mandatory_skills=("roadmap", "stakeholder management", "prioritization"),
    optional_skills=("a/b testing", "analytics", "sql"),
    min_experience=3,
)

DEFAULT_PROFILES: Mapping[str, ATSProfile] = MappingProxyType(
    {
        profile.name: profile
        for profile in (SOFTWARE_ENGINEER_PROFILE, DATA_SCIENTIST_PROFILE, PRODUCT_MANAGER_PROFILE)
    }
)


def get_profile(name: str) -> ATSProfile:
    """Look up a built-in profile by name."""
    try:
        return DEFAULT_PROFILES[name.strip().lower()]
    except KeyError:
        available = ", ".join(sorted(DEFAULT_PROFILES))
        raise ValueError(f"Unknown profile: {name} (available: {available})") from None
