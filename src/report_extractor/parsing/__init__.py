"""Markdown block parsers: sections, tables, freeform, numbered entries, metadata."""

from __future__ import annotations

from report_extractor.parsing.documents import parse_reviewed_documents
from report_extractor.parsing.findings import parse_findings
from report_extractor.parsing.freeform import entries_from_freeform
from report_extractor.parsing.markers import classify_action, clean_text, strip_markdown
from report_extractor.parsing.metadata import extract_case_info, extract_overview
from report_extractor.parsing.numbered import (
    parse_accommodation_subsections,
    parse_accommodations,
    parse_numbered_entries,
)
from report_extractor.parsing.sections import find_section, split_sections
from report_extractor.parsing.tables import entries_from_table, has_table, parse_table_rows

__all__ = [
    "classify_action",
    "clean_text",
    "entries_from_freeform",
    "entries_from_table",
    "extract_case_info",
    "extract_overview",
    "find_section",
    "has_table",
    "parse_accommodation_subsections",
    "parse_accommodations",
    "parse_findings",
    "parse_numbered_entries",
    "parse_reviewed_documents",
    "parse_table_rows",
    "split_sections",
    "strip_markdown",
]
