"""Response schemas for each LLM task."""

from ats_checker.llm.schema import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    StringSchema,
)

SUGGESTION_ENHANCEMENT_SCHEMA = ObjectSchema(
    properties={
        "suggestions": ArraySchema(
            items=ObjectSchema(
                properties={
                    "original": StringSchema(
                        description="Original suggestion from deterministic engine"
                    ),
                    "enhanced": StringSchema(description="Improved phrasing of the suggestion"),
                    "actionable": BooleanSchema(
                        description="Whether the suggestion is concrete and actionable"
                    ),
                },
                required=["original", "enhanced"],
            ),
            description="Array of enhanced suggestions",
        )
    },
    required=["suggestions"],
)

SKILL_NORMALIZATION_SCHEMA = ObjectSchema(
    properties={
        "canonicalSkills": ArraySchema(
            items=ObjectSchema(
                properties={
                    "input": StringSchema(description="Original skill name from input"),
                    "normalized": StringSchema(description="Canonical/normalized skill name"),
                    "confidence": NumberSchema(description="Confidence 0-1"),
                },
                required=["input", "normalized"],
            ),
            description="Array of skill normalizations",
        )
    },
    required=["canonicalSkills"],
)

SECTION_CLASSIFICATION_SCHEMA = ObjectSchema(
    properties={
        "sections": ArraySchema(
            items=ObjectSchema(
                properties={
                    "header": StringSchema(description="The section header text"),
                    "classification": StringSchema(
                        enum=[
                            "summary",
                            "experience",
                            "skills",
                            "education",
                            "projects",
                            "certifications",
                            "other",
                        ],
                        description="Classified section type",
                    ),
                    "confidence": NumberSchema(description="Confidence 0-1"),
                },
                required=["header", "classification"],
            ),
            description="Array of section classifications",
        )
    },
    required=["sections"],
)

JD_CLARIFICATION_SCHEMA = ObjectSchema(
    properties={
        "implicitSkills": ArraySchema(
            items=StringSchema(),
            description="Skills implied but not explicitly mentioned",
        ),
        "implicitExperience": ObjectSchema(
            properties={
                "minYears": NumberSchema(description="Inferred minimum experience years"),
                "domains": ArraySchema(items=StringSchema(), description="Implied domains"),
            },
            description="Inferred experience requirements",
        ),
        "clarityScore": NumberSchema(description="0-1 score indicating JD clarity"),
    },
    required=["implicitSkills", "clarityScore"],
)

VALIDATION_SCHEMA = ObjectSchema(
    properties={
        "valid": BooleanSchema(description="Whether the input is valid"),
        "message": StringSchema(description="Validation message"),
    },
    required=["valid"],
)
