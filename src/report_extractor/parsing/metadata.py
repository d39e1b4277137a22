"""Case metadata and overview extraction.

Never raises: anything not found falls back to the sentinels defined in
``report_extractor.models``.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from report_extractor.models import (
    DEFAULT_GRADE,
    DEFAULT_SCHOOL,
    DEFAULT_SCHOOL_YEAR,
    DEFAULT_STUDENT_NAME,
    FALLBACK_SECTION_TITLE,
    CaseInfo,
    Section,
)
from report_extractor.parsing.markers import clean_text
from report_extractor.parsing.sections import find_first_section

log = logging.getLogger(__name__)

# Only this many leading lines are scanned for the two-field header line
HEADER_SCAN_LINES = 25

_NAME_LABELS = r"(?:Student|Subject)(?:\s+Name)?"

HEADER_LINE_RE = re.compile(
    rf"\*\*{_NAME_LABELS}:\*\*\s*([^*\n]+?)\s*\*\*Grade(?:\s+Level)?:\*\*\s*([^*\n]+)",
    re.IGNORECASE,
)
NAME_LABEL_RE = re.compile(
    rf"(?:\*\*{_NAME_LABELS}:\*\*|^\s*(?:[-*]\s+)?{_NAME_LABELS}:)[ \t]*([^\n*|]+)",
    re.IGNORECASE | re.MULTILINE,
)
GRADE_LABEL_RE = re.compile(
    r"(?:\*\*Grade(?:\s+Level)?:\*\*|^\s*(?:[-*]\s+)?Grade(?:\s+Level)?:)[ \t]*([^\n*|]+)",
    re.IGNORECASE | re.MULTILINE,
)
SCHOOL_YEAR_RE = re.compile(r"\*\*School\s+Year:\*\*[ \t]*([^\n*|]+)", re.IGNORECASE)
SCHOOL_RE = re.compile(r"\*\*School:\*\*[ \t]*([^\n*|]+)", re.IGNORECASE)

# "Maya Lopez is a curious fifth grader ..."
OVERVIEW_NAME_RE = re.compile(r"\b([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)\s+is\s+an?\b")
_NOT_NAMES = {"This", "The", "She", "He", "They", "It", "Overall", "Student", "Each", "Our"}

# Metadata labels stripped from the overview paragraph
_OVERVIEW_HEADER_RE = re.compile(
    r"\*\*Student:\*\*[^*]*\*\*Grade:\*\*[^*]*(?:\*\*School:\*\*[^*]*)?\*\*Background & Context:\*\*",
    re.IGNORECASE,
)
_OVERVIEW_LABEL_RE = re.compile(
    r"\*\*(?:Student|Grade|School|School Year|Background & Context):\*\*[^*\n]*",
    re.IGNORECASE,
)

OVERVIEW_SYNONYMS = ("Student Overview", "Overview", "Student Profile", "At a Glance")


def _first(pattern: re.Pattern[str], text: str) -> Optional[str]:
    match = pattern.search(text)
    if not match:
        return None
    value = clean_text(match.group(1))
    return value or None


def _first_section_scope(text: str, sections: Sequence[Section]) -> str:
    """Preamble plus first section, i.e. everything before the second header."""
    if len(sections) > 1:
        return text[: sections[1].offset]
    return text


def name_from_overview(overview: str) -> Optional[str]:
    """Infer a name from the first sentence shaped like ``<Name> is a …``."""
    for sentence in re.split(r"(?<=[.!?])\s+", overview):
        for match in OVERVIEW_NAME_RE.finditer(sentence):
            words = match.group(1).split()
            while words and words[0] in _NOT_NAMES:
                words = words[1:]
            if words:
                return " ".join(words)
    return None


def extract_case_info(
    text: str,
    sections: Sequence[Section],
    overview_synonyms: Sequence[str] = OVERVIEW_SYNONYMS,
) -> CaseInfo:
    """Resolve student name, grade, school and school year.

    Order: the two-field header line near the top, then independent label
    lines in the first section, then a name inferred from the overview.
    """
    head = "\n".join(text.splitlines()[:HEADER_SCAN_LINES])
    name: Optional[str] = None
    grade: Optional[str] = None

    header = HEADER_LINE_RE.search(head)
    if header:
        name = clean_text(header.group(1)) or None
        grade = clean_text(header.group(2)) or None

    scope = _first_section_scope(text, sections)
    if name is None:
        name = _first(NAME_LABEL_RE, scope)
    if grade is None:
        grade = _first(GRADE_LABEL_RE, scope)

    if name is None:
        overview = find_first_section(sections, overview_synonyms)
        if overview is not None and overview.title != FALLBACK_SECTION_TITLE:
            name = name_from_overview(overview.body)

    if name is None:
        log.debug("No student name found, using %r", DEFAULT_STUDENT_NAME)

    return CaseInfo(
        student_name=name or DEFAULT_STUDENT_NAME,
        grade=grade or DEFAULT_GRADE,
        school=_first(SCHOOL_RE, scope) or DEFAULT_SCHOOL,
        school_year=_first(SCHOOL_YEAR_RE, scope) or DEFAULT_SCHOOL_YEAR,
    )


def extract_overview(sections: Sequence[Section], synonyms: Sequence[str] = OVERVIEW_SYNONYMS) -> str:
    """Overview paragraph with the metadata labels removed; empty if absent."""
    section = find_first_section(sections, synonyms)
    if section is None or not section.body:
        return ""
    cleaned = _OVERVIEW_HEADER_RE.sub("", section.body)
    cleaned = _OVERVIEW_LABEL_RE.sub("", cleaned).strip()
    return cleaned or section.body
