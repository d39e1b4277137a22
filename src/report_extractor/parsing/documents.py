"""Reviewed-document lists: tables, numbered lists, bullets, bold lines."""

from __future__ import annotations

import logging
import re
from typing import Optional

from report_extractor.models import (
    AUTHOR_NOT_SPECIFIED,
    DATE_NOT_SPECIFIED,
    FINDINGS_NOT_SPECIFIED,
    ReviewedDocumentRecord,
)
from report_extractor.parsing.markers import clean_text, strip_bold
from report_extractor.parsing.tables import parse_table

log = logging.getLogger(__name__)

# "September 2024", "Sep 2024", "2024", "09/12/2024", "2024-09-12", "09/2024"
DATE_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}|\d{1,2}/\d{1,2}/\d{2,4}|\d{1,2}/\d{4}|[A-Za-z]+\.? \d{1,2}, \d{4}|[A-Za-z]+\.? \d{4}|\d{4})\b"
)

NUMBERED_DOC_RE = re.compile(r"^\s*\d+\.\s*\*\*([^*]+)\*\*\s*[-–—:]\s*([^,\n]+),?\s*([^\n]*)", re.MULTILINE)
BULLET_DOC_RE = re.compile(r"^\s*[-*•]\s*\*\*([^*]+)\*\*\s*[-–—:]?\s*([^\n]*)", re.MULTILINE)
BOLD_ANYWHERE_RE = re.compile(r"\*\*([^*]+)\*\*")


def _or(value: str, sentinel: str) -> str:
    value = clean_text(value).strip(" ,;:-")
    return value or sentinel


def split_date(rest: str) -> tuple[str, str]:
    """Split ``"September 2024, key findings"`` into ``(date, findings)``."""
    rest = rest.strip()
    match = DATE_RE.match(rest)
    if not match:
        return "", rest
    return match.group(1), rest[match.end():].lstrip(",:;- \t").strip()


_DOCUMENT_COLUMNS: tuple[tuple[str, tuple[str, ...], int], ...] = (
    ("title", ("document", "title", "source"), 0),
    ("author", ("author", "by", "provider", "evaluator"), 1),
    ("date", ("date",), 2),
    ("findings", ("finding", "summary", "result"), 3),
)


def document_columns(header: tuple[str, ...]) -> dict[str, Optional[int]]:
    """Map each document field to a column index.

    Header keywords claim columns first; a field left unnamed falls back to
    its positional default unless another field already claimed it.
    """
    names = [h.lower() for h in header]
    columns: dict[str, Optional[int]] = {}
    claimed: set[int] = set()
    for role, keys, _ in _DOCUMENT_COLUMNS:
        for idx, name in enumerate(names):
            if idx not in claimed and any(k in name for k in keys):
                columns[role] = idx
                claimed.add(idx)
                break
    for role, _, default in _DOCUMENT_COLUMNS:
        if role in columns:
            continue
        if default in claimed:
            columns[role] = None
        else:
            columns[role] = default
            claimed.add(default)
    return columns


def documents_from_table(text: str) -> list[ReviewedDocumentRecord]:
    """``| Document | Author | Date | Key Findings |`` tables."""
    block = parse_table(text)
    if block is None:
        return []

    columns = document_columns(block.header)
    title_col = columns["title"]
    author_col = columns["author"]
    date_col = columns["date"]
    findings_col = columns["findings"]

    def cell(row: tuple[str, ...], idx: Optional[int]) -> str:
        return row[idx] if idx is not None and idx < len(row) else ""

    records = []
    for row in block.rows:
        title = clean_text(cell(row, title_col))
        if not title:
            continue
        records.append(
            ReviewedDocumentRecord(
                title=title,
                author=_or(cell(row, author_col), AUTHOR_NOT_SPECIFIED),
                date=_or(cell(row, date_col), DATE_NOT_SPECIFIED),
                key_findings=_or(cell(row, findings_col), FINDINGS_NOT_SPECIFIED),
            )
        )
    return records


def documents_from_numbered_list(text: str) -> list[ReviewedDocumentRecord]:
    """``1. **Title** - Author, September 2024, findings``."""
    records = []
    for match in NUMBERED_DOC_RE.finditer(text):
        title = clean_text(match.group(1))
        if not title:
            continue
        date, findings = split_date(match.group(3))
        records.append(
            ReviewedDocumentRecord(
                title=title,
                author=_or(match.group(2), AUTHOR_NOT_SPECIFIED),
                date=_or(date, DATE_NOT_SPECIFIED),
                key_findings=_or(findings, FINDINGS_NOT_SPECIFIED),
            )
        )
    return records


def documents_from_bullets(text: str) -> list[ReviewedDocumentRecord]:
    """``- **Title** - Author, 2024, findings``; author/date only when both present."""
    records = []
    for match in BULLET_DOC_RE.finditer(text):
        title = clean_text(match.group(1)).rstrip(":")
        if not title:
            continue
        rest = match.group(2).strip()
        author, date, findings = "", "", rest
        head, sep, tail = rest.partition(",")
        if sep:
            candidate_date, after = split_date(tail)
            if candidate_date:
                author, date, findings = head, candidate_date, after
        records.append(
            ReviewedDocumentRecord(
                title=title,
                author=_or(author, AUTHOR_NOT_SPECIFIED),
                date=_or(date, DATE_NOT_SPECIFIED),
                key_findings=_or(findings, FINDINGS_NOT_SPECIFIED),
            )
        )
    return records


def documents_from_bold_lines(text: str) -> list[ReviewedDocumentRecord]:
    """Any line holding bold text: the bold run is the title, the rest findings."""
    records = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "---" in stripped:
            continue
        match = BOLD_ANYWHERE_RE.search(stripped)
        if not match:
            continue
        title = clean_text(match.group(1)).rstrip(":")
        if not title:
            continue
        rest = strip_bold(stripped[: match.start()] + stripped[match.end():])
        records.append(
            ReviewedDocumentRecord(
                title=title,
                key_findings=_or(rest.lstrip("-–—:• \t"), FINDINGS_NOT_SPECIFIED),
            )
        )
    return records


DOCUMENT_STRATEGIES = (
    documents_from_table,
    documents_from_numbered_list,
    documents_from_bullets,
    documents_from_bold_lines,
)


def parse_reviewed_documents(text: str) -> list[ReviewedDocumentRecord]:
    """Try each document-list layout in turn; first non-empty result wins."""
    for strategy in DOCUMENT_STRATEGIES:
        records = strategy(text)
        if records:
            log.debug("Document strategy %s found %d documents", strategy.__name__, len(records))
            return records
    return []
