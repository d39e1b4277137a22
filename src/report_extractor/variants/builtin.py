"""Built-in report variants.

Synonym lists carry every section title the generating prompts have used
over time, newest first.
"""

from __future__ import annotations

from report_extractor.variants.models import FieldConfig, ReportVariant

_DOCUMENTS = FieldConfig(
    name="documents_reviewed",
    synonyms=("Documents Reviewed", "Document Review", "Reviewed Documents"),
    strategies=("documents",),
)

_STRATEGIES = FieldConfig(
    name="strategies",
    synonyms=("Key Support Strategies", "Support Strategies", "Strategies", "Validated Findings"),
    strategies=("table", "findings_strategies", "freeform"),
)

_STRENGTHS = FieldConfig(
    name="strengths",
    synonyms=("Strengths", "Student Strengths", "Validated Findings"),
    strategies=("table", "findings_strengths", "freeform"),
)

_CHALLENGES = FieldConfig(
    name="challenges",
    synonyms=("Challenges", "Student Challenges", "Areas of Need", "Validated Findings"),
    strategies=("table", "findings_challenges", "freeform"),
)

K12 = ReportVariant(
    name="k12",
    display_name="K-12 Teacher Guide",
    description="Classroom guide: overview, support strategies, strengths and challenges.",
    fields=(_DOCUMENTS, _STRATEGIES, _STRENGTHS, _CHALLENGES),
)

TUTORING = ReportVariant(
    name="tutoring",
    display_name="Tutoring Guide",
    description="Tutor-facing guide with exactly three strengths and four challenges.",
    fields=(_DOCUMENTS, _STRATEGIES, _STRENGTHS, _CHALLENGES),
    cardinality={"strengths": 3, "challenges": 4},
)

POST_SECONDARY = ReportVariant(
    name="post_secondary",
    display_name="Post-Secondary Accommodation Report",
    description="Disability services report: functional barriers and accommodations.",
    fields=(
        FieldConfig(
            name="documents_reviewed",
            synonyms=("Documents Reviewed", "Review of Documentation"),
            strategies=("documents",),
        ),
        FieldConfig(
            name="barriers",
            synonyms=("Functional Impact", "Functional Barriers", "Observed Barriers"),
            strategies=("numbered",),
        ),
        FieldConfig(
            name="accommodations",
            synonyms=("Accommodations", "Recommended Accommodations", "Accommodations & Supports"),
            strategies=("accommodations",),
        ),
        FieldConfig(
            name="accommodation_subsections",
            synonyms=("Accommodations", "Recommended Accommodations", "Accommodations & Supports"),
            strategies=("accommodation_subsections",),
        ),
    ),
)

BUILTIN_VARIANTS: tuple[ReportVariant, ...] = (K12, TUTORING, POST_SECONDARY)
