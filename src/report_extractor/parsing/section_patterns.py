"""Regex patterns for known report section titles.

Used by the section splitter's plain-heading strategy and by
``classify_title`` to tag every section with a ``SectionKind``.
Patterns are case-insensitive and match at word boundaries.
"""

from __future__ import annotations

import re
from typing import Pattern

from report_extractor.models import SectionKind

SECTION_PATTERNS: dict[SectionKind, list[Pattern[str]]] = {
    SectionKind.CASE_INFORMATION: [
        re.compile(r"^\s*(?:case|student)\s+information\b", re.IGNORECASE),
        re.compile(r"^\s*student\s+details\b", re.IGNORECASE),
    ],
    SectionKind.DOCUMENTS_REVIEWED: [
        re.compile(r"\bdocuments?\s+reviewed\b", re.IGNORECASE),
        re.compile(r"\bdocument\s+review\b", re.IGNORECASE),
        re.compile(r"\breviewed\s+documents?\b", re.IGNORECASE),
    ],
    SectionKind.OVERVIEW: [
        re.compile(r"^\s*(?:student\s+)?overview\b", re.IGNORECASE),
        re.compile(r"^\s*student\s+profile\b", re.IGNORECASE),
        re.compile(r"^\s*at\s+a\s+glance\b", re.IGNORECASE),
    ],
    SectionKind.STRATEGIES: [
        re.compile(r"\b(?:key\s+)?support\s+strategies\b", re.IGNORECASE),
        re.compile(r"^\s*(?:teaching\s+)?strategies\b", re.IGNORECASE),
    ],
    SectionKind.STRENGTHS: [
        re.compile(r"^\s*(?:student\s+)?strengths\b", re.IGNORECASE),
    ],
    SectionKind.CHALLENGES: [
        re.compile(r"^\s*(?:student\s+)?challenges\b", re.IGNORECASE),
        re.compile(r"^\s*areas\s+of\s+need\b", re.IGNORECASE),
    ],
    SectionKind.VALIDATED_FINDINGS: [
        re.compile(r"\bvalidated\s+findings\b", re.IGNORECASE),
    ],
    SectionKind.FUNCTIONAL_IMPACT: [
        re.compile(r"\bfunctional\s+impact\b", re.IGNORECASE),
        re.compile(r"\bobserved\s+barriers?\b", re.IGNORECASE),
    ],
    SectionKind.ACCOMMODATIONS: [
        re.compile(r"^\s*(?:recommended\s+)?accommodations\b", re.IGNORECASE),
        re.compile(r"\baccommodations?\s*(?:&|and)\s*supports?\b", re.IGNORECASE),
    ],
    SectionKind.ADDITIONAL_NOTES: [
        re.compile(r"^\s*additional\s+notes\b", re.IGNORECASE),
    ],
}


def classify_title(title: str) -> SectionKind:
    """Fast regex classification from a section title alone."""
    for kind, patterns in SECTION_PATTERNS.items():
        for pattern in patterns:
            if pattern.search(title):
                return kind
    return SectionKind.UNKNOWN
