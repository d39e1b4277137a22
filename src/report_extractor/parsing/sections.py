"""Section splitting: break a document into top-level labeled blocks.

Header conventions are tried in priority order; the first strategy that
yields at least one section wins.  More specific markers come first because
they are also valid substrings of the looser ones (``### Section 2: Title``
is also a ``###`` heading).
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional, Pattern, Sequence

from report_extractor.core.types import SplitStrategy
from report_extractor.models import FALLBACK_SECTION_TITLE, Section, SectionKind
from report_extractor.parsing.markers import strip_bold
from report_extractor.parsing.section_patterns import classify_title

log = logging.getLogger(__name__)

# (a) ### Section 2: Title
SECTION_COLON_RE = re.compile(r"^#{2,3}[ \t]*Section[ \t]+\d+[ \t]*:[ \t]*(.+?)[ \t]*$", re.MULTILINE)
# (b) ### 2. Title
NUMBERED_HEADING_RE = re.compile(r"^###[ \t]*\d+\.[ \t]+(.+?)[ \t]*$", re.MULTILINE)
# (c) **Section 2: Title** anywhere in a line
BOLD_SECTION_RE = re.compile(r"\*\*Section[ \t]+\d+[ \t]*:[ \t]*([^*\n]+?)[ \t]*\*\*")
# (d) plain heading line; the title must be a known section name
PLAIN_HEADING_RE = re.compile(r"^#{1,3}[ \t]+(.+?)[ \t]*#*[ \t]*$", re.MULTILINE)

_HEADING_NUMBER_RE = re.compile(r"^(?:section\s+)?\d+(?:\.\d+)*[.):]?\s*", re.IGNORECASE)
_TRAILING_RULE_RE = re.compile(r"(?:\n\s*(?:-{3,}|\*{3,}|_{3,})\s*)+$")


def _clean_title(raw: str) -> str:
    title = strip_bold(raw).strip()
    title = _HEADING_NUMBER_RE.sub("", title)
    return title.rstrip(":").strip()


def _clean_body(raw: str) -> str:
    return _TRAILING_RULE_RE.sub("", raw.strip()).strip()


def _sections_from_matches(text: str, matches: Sequence[re.Match[str]]) -> list[Section]:
    sections: list[Section] = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        title = _clean_title(match.group(1))
        if not title:
            continue
        sections.append(
            Section(
                title=title,
                body=_clean_body(text[match.end():end]),
                ordinal=len(sections) + 1,
                kind=classify_title(title),
                offset=match.start(),
            )
        )
    return sections


def _split_on(pattern: Pattern[str], text: str) -> list[Section]:
    return _sections_from_matches(text, list(pattern.finditer(text)))


def split_section_colon(text: str) -> list[Section]:
    """Headers like ``### Section 2: Functional Impact``."""
    return _split_on(SECTION_COLON_RE, text)


def split_numbered_heading(text: str) -> list[Section]:
    """Headers like ``### 2. Functional Impact``."""
    return _split_on(NUMBERED_HEADING_RE, text)


def split_bold_section(text: str) -> list[Section]:
    """Inline markers like ``**Section 2: Functional Impact**``."""
    return _split_on(BOLD_SECTION_RE, text)


def split_known_headings(text: str) -> list[Section]:
    """Plain ``#``/``##``/``###`` headings whose text is a known section name."""
    matches = [
        m for m in PLAIN_HEADING_RE.finditer(text)
        if classify_title(_clean_title(m.group(1))) is not SectionKind.UNKNOWN
    ]
    return _sections_from_matches(text, matches)


SPLIT_STRATEGIES: tuple[SplitStrategy, ...] = (
    split_section_colon,
    split_numbered_heading,
    split_bold_section,
    split_known_headings,
)


def split_sections(text: str) -> list[Section]:
    """Split *text* into ordered sections.

    Returns a single ``body`` section holding the whole document when no
    header convention matches; callers treat that as "structure not found".
    """
    for strategy in SPLIT_STRATEGIES:
        sections = strategy(text)
        if sections:
            log.debug(
                "Section strategy %s found %d sections: %s",
                strategy.__name__,
                len(sections),
                [s.title for s in sections],
            )
            return sections

    log.debug("No section headers recognized, using single %r section", FALLBACK_SECTION_TITLE)
    return [Section(title=FALLBACK_SECTION_TITLE, body=text.strip(), ordinal=1)]


def _normalize(name: str) -> str:
    return re.sub(r"\s+", " ", name).strip().lower()


def find_section(sections: Iterable[Section], name: str) -> Optional[Section]:
    """Locate a section by title: exact, then prefix, then substring match."""
    wanted = _normalize(name)
    if not wanted:
        return None
    candidates = [(s, _normalize(s.title)) for s in sections]
    for matcher in (
        lambda t: t == wanted,
        lambda t: t.startswith(wanted),
        lambda t: wanted in t,
    ):
        for section, title in candidates:
            if matcher(title):
                return section
    return None


def find_first_section(sections: Sequence[Section], names: Iterable[str]) -> Optional[Section]:
    """Return the section matching the first name in *names* that resolves."""
    for name in names:
        section = find_section(sections, name)
        if section is not None:
            return section
    return None
