"""Barrier and accommodation lists keyed by numbering.

Three conventions are tried in order:

1. multi-level bold numbering, ``**2.1. Reading Fluency**``
2. simple numbered list with a bold title, ``1. **Reading Fluency**``
3. legacy labeled blocks, ``**Observed Barrier 1:** Reading Fluency``

Each entry yields a description (the line right after the title) and an
optional evidence citation (a ``(…) […]`` fragment in the entry body).
"""

from __future__ import annotations

import logging
import math
import re
from typing import Callable, Optional, Sequence

from report_extractor.models import AccommodationSubsection, NumberedEntry
from report_extractor.parsing.markers import clean_text, strip_markdown

log = logging.getLogger(__name__)

MULTILEVEL_RE = re.compile(r"\*\*(\d+)\.(\d+)\.?\s*([^*\n]+?)\s*\*\*")
SIMPLE_RE = re.compile(r"^[ \t]*(\d+)\.[ \t]*\*\*([^*\n]+?)\*\*", re.MULTILINE)
LEGACY_RE = re.compile(r"\*\*Observed Barrier\s+(\d+):\*\*[ \t]*([^\n]+)", re.IGNORECASE)

# "(WJ-IV [12th percentile])": brackets nested inside the parentheses
NESTED_EVIDENCE_RE = re.compile(r"\(([^()]*\[[^\]]+\][^()]*)\)")
# "(WJ-IV) [12th percentile]": parentheses followed by brackets
ADJACENT_EVIDENCE_RE = re.compile(r"\(([^()]+)\)\s*\[([^\]]+)\]")

_LEAD_MARKER_RE = re.compile(r"^\s*(?:[-–—•:]+|\*(?!\*))\s*")
_IMPACT_PREFIX_RE = re.compile(r"^\*\*Functional Impact:?\*\*:?\s*", re.IGNORECASE)
_LEGACY_IMPACT_RE = re.compile(r"\*\*Functional Impact:\*\*\s*([^\n]+(?:\n(?!\s*- \*\*)[^\n]+)*)", re.IGNORECASE)
_LEGACY_EVIDENCE_RE = re.compile(r"\*\*Evidence:\*\*\s*([^\n]+(?:\n(?!\s*- \*\*)[^\n]+)*)", re.IGNORECASE)


# ── Evidence & description helpers ───────────────────────────────────


def _evidence_spans(text: str) -> list[tuple[int, int, str]]:
    spans = [
        (m.start(), m.end(), f"{m.group(1).strip()} [{m.group(2).strip()}]")
        for m in ADJACENT_EVIDENCE_RE.finditer(text)
    ]
    for m in NESTED_EVIDENCE_RE.finditer(text):
        if not any(start <= m.start() < end for start, end, _ in spans):
            spans.append((m.start(), m.end(), re.sub(r"\s+", " ", m.group(1)).strip()))
    return sorted(spans)


def find_evidence(text: str) -> Optional[str]:
    """Return the last ``(…) […]`` citation in *text*, if any."""
    spans = _evidence_spans(text)
    return spans[-1][2] if spans else None


def remove_evidence(text: str) -> str:
    for start, end, _ in reversed(_evidence_spans(text)):
        text = text[:start] + text[end:]
    return text


def clean_description(line: str) -> str:
    """Strip a leading bullet, a ``Functional Impact:`` label, and citations."""
    text = _LEAD_MARKER_RE.sub("", line.strip())
    text = _IMPACT_PREFIX_RE.sub("", text)
    text = remove_evidence(text)
    text = clean_text(text)
    return text.rstrip(" -–—,;").strip()


def _first_description_line(rest_of_title_line: str, body_lines: Sequence[str]) -> str:
    candidate = clean_description(rest_of_title_line)
    if candidate:
        return candidate
    for line in body_lines:
        if line.strip():
            return clean_description(line)
    return ""


# ── Entry builders per convention ────────────────────────────────────


def _entries_from_matches(
    text: str,
    matches: list[re.Match[str]],
    ordinal_of: Callable[[re.Match[str]], int],
    title_of: Callable[[re.Match[str]], str],
) -> list[NumberedEntry]:
    entries: list[NumberedEntry] = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        title = strip_markdown(title_of(match)).rstrip(".").strip()
        if not title:
            continue
        chunk = text[match.end():end]
        first_line, _, remainder = chunk.partition("\n")
        description = _first_description_line(first_line, remainder.splitlines())
        entries.append(
            NumberedEntry(
                ordinal=ordinal_of(match),
                title=title,
                description=description or title,
                evidence=find_evidence(chunk),
            )
        )
    return entries


def parse_multilevel(text: str) -> list[NumberedEntry]:
    """``**2.1. Title**`` entries; the ordinal is the sub-number."""
    matches = list(MULTILEVEL_RE.finditer(text))
    return _entries_from_matches(text, matches, lambda m: int(m.group(2)), lambda m: m.group(3))


def parse_simple(text: str) -> list[NumberedEntry]:
    """``1. **Title**`` entries; the ordinal is the list number."""
    matches = list(SIMPLE_RE.finditer(text))
    return _entries_from_matches(text, matches, lambda m: int(m.group(1)), lambda m: m.group(2))


def parse_legacy(text: str) -> list[NumberedEntry]:
    """``**Observed Barrier N:** Title`` blocks with labeled sub-fields."""
    matches = list(LEGACY_RE.finditer(text))
    entries: list[NumberedEntry] = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        title = strip_markdown(match.group(2))
        if not title:
            continue
        block = text[match.end():end]

        impact = _LEGACY_IMPACT_RE.search(block)
        description = clean_text(impact.group(1)) if impact else ""
        labeled_evidence = _LEGACY_EVIDENCE_RE.search(block)
        evidence = clean_text(labeled_evidence.group(1)) if labeled_evidence else find_evidence(block)

        entries.append(
            NumberedEntry(
                ordinal=int(match.group(1)),
                title=title,
                description=description or title,
                evidence=evidence or None,
            )
        )
    return entries


NUMBERED_STRATEGIES = (parse_multilevel, parse_simple, parse_legacy)


def parse_numbered_entries(text: str) -> list[NumberedEntry]:
    """Try each numbering convention in turn and return the first non-empty result."""
    if not text:
        return []
    for strategy in NUMBERED_STRATEGIES:
        entries = strategy(text)
        if entries:
            log.debug("Numbered strategy %s found %d entries", strategy.__name__, len(entries))
            return entries
    return []


# ── Accommodation lines ──────────────────────────────────────────────

# "1. **Extended Time:** Description"
_ACC_TITLE_COLON_RE = re.compile(r"^(\d+)\.\s+\*\*(.+?)\*\*:?\s*(.*)$")
# "**1. Extended Time on Exams**"
_ACC_BOLD_TITLE_RE = re.compile(r"^\*\*(\d+)\.\s+(.+?)\*\*\s*$")
# "**1.** Extended time description"
_ACC_BOLD_NUMBER_RE = re.compile(r"^\*\*(\d+)\.\*\*\s+(.+)$")
# "1. Extended time"
_ACC_SIMPLE_RE = re.compile(r"^(\d+)\.\s+(.+)$")


def parse_accommodation_lines(text: str) -> list[NumberedEntry]:
    """Line-oriented accommodation lists with continuation lines.

    Continuation lines (not bold, not headings) are joined onto the open
    entry's description with a single space.
    """
    entries: list[NumberedEntry] = []
    current: Optional[tuple[int, str]] = None
    description = ""

    def close() -> None:
        if current is None:
            return
        ordinal, title = current
        entries.append(
            NumberedEntry(
                ordinal=ordinal,
                title=title,
                description=clean_description(description) or title,
                evidence=find_evidence(description),
            )
        )

    for raw_line in text.splitlines():
        line = raw_line.strip()
        titled = _ACC_TITLE_COLON_RE.match(line)
        other = None if titled else (
            _ACC_BOLD_TITLE_RE.match(line)
            or _ACC_BOLD_NUMBER_RE.match(line)
            or _ACC_SIMPLE_RE.match(line)
        )
        match = titled or other
        if match:
            close()
            title = strip_markdown(match.group(2))
            current = (int(match.group(1)), title)
            description = match.group(3).strip() if titled and match.group(3) else ""
            if not title:
                current = None
            continue
        if current is not None and line and not line.startswith(("**", "#")):
            description = f"{description} {line}".strip()

    close()
    return entries


def parse_accommodations(text: str) -> list[NumberedEntry]:
    """Numbered-entry conventions first, then line-oriented lists."""
    return parse_numbered_entries(text) or parse_accommodation_lines(text)


# ── Accommodation subsections ────────────────────────────────────────

REQUIRED_ACCOMMODATION_CATEGORIES: tuple[tuple[str, str, str], ...] = (
    ("3.1", "Academic Accommodations",
     "Academic accommodations will be determined based on individual needs."),
    ("3.2", "Instructional / Program Accommodations",
     "Instructional and program accommodations will be determined based on individual needs."),
    ("3.3", "Auxiliary Aids & Services",
     "Auxiliary aids and services will be determined based on individual needs."),
    ("3.4", "Non-Accommodation Supports / Referrals",
     "Non-accommodation supports and referrals will be determined based on individual needs."),
)

_SUBSECTION_RE = re.compile(r"^###[ \t]+(?:(\d+\.\d+)\.?[ \t]*)?(.+?)[ \t]*$", re.MULTILINE)


def parse_accommodation_subsections(text: str) -> list[AccommodationSubsection]:
    """Split an accommodations section on ``### 3.N Title`` sub-headers.

    When some but not all of the four required categories are present, the
    missing ones are added with default text and flagged ``is_default``.
    Without any sub-header the section's lines are shared out across the
    four categories.
    """
    if not text.strip():
        return []
    matches = list(_SUBSECTION_RE.finditer(text))
    if not matches:
        return distribute_accommodation_lines(text)

    found: list[AccommodationSubsection] = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        ordinal = i + 1
        sub_id = match.group(1) or f"3.{ordinal}"
        title = strip_markdown(match.group(2))
        body = text[match.end():end].strip()
        found.append(
            AccommodationSubsection(
                id=sub_id,
                title=title,
                body=body,
                ordinal=int(sub_id.split(".")[1]),
                entries=tuple(parse_accommodations(body)),
            )
        )

    if len(found) < len(REQUIRED_ACCOMMODATION_CATEGORIES):
        for sub_id, title, default in REQUIRED_ACCOMMODATION_CATEGORIES:
            keyword = title.split(" ")[0].lower()
            if any(keyword in s.title.lower() for s in found):
                continue
            found.append(
                AccommodationSubsection(
                    id=sub_id,
                    title=title,
                    body=default,
                    ordinal=int(sub_id.split(".")[1]),
                    is_default=True,
                )
            )
        found.sort(key=lambda s: s.ordinal)

    return found


def distribute_accommodation_lines(text: str) -> list[AccommodationSubsection]:
    """Split non-empty lines into four consecutive quarters, one per category.

    A category whose quarter is empty gets its default text.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    quarter = math.ceil(len(lines) / len(REQUIRED_ACCOMMODATION_CATEGORIES))

    subsections = []
    for idx, (sub_id, title, default) in enumerate(REQUIRED_ACCOMMODATION_CATEGORIES):
        body = "\n".join(lines[idx * quarter:(idx + 1) * quarter])
        subsections.append(
            AccommodationSubsection(
                id=sub_id,
                title=title,
                body=body or default,
                ordinal=idx + 1,
                entries=tuple(parse_accommodations(body)) if body else (),
                is_default=not body,
            )
        )
    return subsections
