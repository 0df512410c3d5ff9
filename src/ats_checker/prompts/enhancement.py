"""Prompt templates for the optional LLM enhancement tasks."""

# Appended to every user prompt by the call manager
JSON_ONLY_INSTRUCTION = """Return ONLY valid JSON matching the schema below.
No explanations. No markdown. No additional text."""

SUGGESTION_ENHANCEMENT_SYSTEM = """You are a resume advice expert.
Improve suggestions to be more actionable and specific.
Maintain the core message but make it more concrete.
Return ONLY valid JSON."""

SUGGESTION_ENHANCEMENT_USER = """Enhance these suggestions for clarity and actionability:
{suggestions}

Make them specific and measurable where possible.

CRITICAL: You MUST return ONLY valid JSON in this exact format (no markdown, no extra text):
{{
  "suggestions": [
    {{
      "original": "the original suggestion text",
      "enhanced": "your improved, more actionable version",
      "actionable": true
    }}
  ]
}}"""

SKILL_NORMALIZATION_SYSTEM = """You are a technical skill normalization expert.
Your task is to normalize and canonicalize technical skill names.
Handle aliases, abbreviations, and variations.
Be conservative - only group skills that are genuinely synonymous.
Return ONLY valid JSON."""

SKILL_NORMALIZATION_USER = """Normalize these skills:
{skills}

Return the canonical names with confidence scores."""

SECTION_CLASSIFICATION_SYSTEM = """You are a resume section classifier.
Classify ambiguous section headers into standard resume categories.
Be strict - if uncertain, classify as "other".
Provide confidence scores.
Return ONLY valid JSON."""

SECTION_CLASSIFICATION_USER = """Classify these resume section headers:
{headers}

Use categories: summary, experience, skills, education, projects, certifications, other."""

JD_CLARIFICATION_SYSTEM = """You are a job description analyzer.
Extract implicit requirements not explicitly stated.
Be conservative - stick to reasonable inferences.
Rate the clarity of the job description.
Return ONLY valid JSON."""

JD_CLARIFICATION_USER = """Analyze this job description for implicit requirements:

{job_description}

What skills are implied but not explicitly mentioned?
What experience domains are indicated?
How clear is this job description (0-1)?"""


def _bullets(values: list[str]) -> str:
    return "\n".join(f"- {value}" for value in values)


def suggestion_enhancement_user(suggestions: list[str]) -> str:
    return SUGGESTION_ENHANCEMENT_USER.format(suggestions=_bullets(suggestions))


def skill_normalization_user(skills: list[str]) -> str:
    return SKILL_NORMALIZATION_USER.format(skills=_bullets(skills))


def section_classification_user(headers: list[str]) -> str:
    return SECTION_CLASSIFICATION_USER.format(headers=_bullets([f'"{h}"' for h in headers]))


def jd_clarification_user(job_description: str) -> str:
    return JD_CLARIFICATION_USER.format(job_description=job_description)
