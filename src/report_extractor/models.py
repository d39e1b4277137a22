"""Report data models: enums, frozen dataclasses and the aggregate record.

Every record produced by the extractor is immutable: sequence fields are
tuples and dataclasses are frozen, so a ``ReportRecord`` can be handed to
any number of readers (or cached by the caller) without copying.
"""

from __future__ import annotations

import dataclasses
import hashlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

# Bumped whenever format-detection heuristics change.  Callers key their
# caches on this value.
EXTRACTOR_VERSION = "1.4.0"

# ── Sentinels ────────────────────────────────────────────────────────

DEFAULT_STUDENT_NAME = "Student"
DEFAULT_GRADE = "Grade Not Specified"
DEFAULT_SCHOOL = "School Not Specified"
DEFAULT_SCHOOL_YEAR = "School Year Not Specified"
AUTHOR_NOT_SPECIFIED = "Author not specified"
DATE_NOT_SPECIFIED = "Date not specified"
FINDINGS_NOT_SPECIFIED = "Key findings not specified"

FALLBACK_SECTION_TITLE = "body"


# ── Enums ────────────────────────────────────────────────────────────


class Polarity(str, Enum):
    """Whether an action is recommended or to be avoided."""

    DO = "do"
    DONT = "dont"


class SectionKind(str, Enum):
    """Known top-level report sections."""

    CASE_INFORMATION = "case_information"
    DOCUMENTS_REVIEWED = "documents_reviewed"
    OVERVIEW = "overview"
    STRATEGIES = "strategies"
    STRENGTHS = "strengths"
    CHALLENGES = "challenges"
    VALIDATED_FINDINGS = "validated_findings"
    FUNCTIONAL_IMPACT = "functional_impact"
    ACCOMMODATIONS = "accommodations"
    ADDITIONAL_NOTES = "additional_notes"
    UNKNOWN = "unknown"


# ── Input ────────────────────────────────────────────────────────────


def compute_fingerprint(text: str) -> str:
    """Stable SHA-256 hex digest of the UTF-8 encoded text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class RawDocument:
    """A complete markdown document handed over by the caller.

    ``identity`` is the caller's identifier for the document (report id,
    path, ...).  It takes no part in extraction, only in cache keys.
    """

    text: str
    identity: str = ""

    @property
    def fingerprint(self) -> str:
        return compute_fingerprint(self.text)

    def __len__(self) -> int:
        return len(self.text)


# ── Intermediate records ─────────────────────────────────────────────


@dataclass(frozen=True)
class Section:
    """A top-level labeled block of the document."""

    title: str
    body: str
    ordinal: int
    kind: SectionKind = SectionKind.UNKNOWN
    # Character offset of the header within the source document
    offset: int = 0


@dataclass(frozen=True)
class ActionItem:
    polarity: Polarity
    text: str


@dataclass(frozen=True)
class LabeledEntry:
    """Shared shape for strengths, challenges, and strategies."""

    title: str
    observations: tuple[str, ...] = ()
    actions: tuple[ActionItem, ...] = ()

    @property
    def dos(self) -> tuple[ActionItem, ...]:
        return tuple(a for a in self.actions if a.polarity is Polarity.DO)

    @property
    def donts(self) -> tuple[ActionItem, ...]:
        return tuple(a for a in self.actions if a.polarity is Polarity.DONT)


@dataclass(frozen=True)
class ReviewedDocumentRecord:
    """A source document listed in the report's review section."""

    title: str
    author: str = AUTHOR_NOT_SPECIFIED
    date: str = DATE_NOT_SPECIFIED
    key_findings: str = FINDINGS_NOT_SPECIFIED


@dataclass(frozen=True)
class NumberedEntry:
    """A barrier or accommodation keyed by its position in a numbered list."""

    ordinal: int
    title: str
    description: str
    evidence: Optional[str] = None


@dataclass(frozen=True)
class AccommodationSubsection:
    """One accommodation category (e.g. ``3.1 Academic Accommodations``)."""

    id: str
    title: str
    body: str
    ordinal: int
    entries: tuple[NumberedEntry, ...] = ()
    is_default: bool = False


@dataclass(frozen=True)
class CaseInfo:
    student_name: str = DEFAULT_STUDENT_NAME
    grade: str = DEFAULT_GRADE
    school: str = DEFAULT_SCHOOL
    school_year: str = DEFAULT_SCHOOL_YEAR


# ── Aggregate ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ReportRecord:
    """Structured result of one extraction call."""

    variant: str
    case_info: CaseInfo = field(default_factory=CaseInfo)
    overview: str = ""
    documents_reviewed: tuple[ReviewedDocumentRecord, ...] = ()
    strategies: tuple[LabeledEntry, ...] = ()
    strengths: tuple[LabeledEntry, ...] = ()
    challenges: tuple[LabeledEntry, ...] = ()
    barriers: tuple[NumberedEntry, ...] = ()
    accommodations: tuple[NumberedEntry, ...] = ()
    accommodation_subsections: tuple[AccommodationSubsection, ...] = ()
    sections: tuple[Section, ...] = ()
    fingerprint: str = ""
    extractor_version: str = EXTRACTOR_VERSION

    @property
    def structure_found(self) -> bool:
        """False when the splitter fell back to a single ``body`` section."""
        return not (
            len(self.sections) == 1
            and self.sections[0].title == FALLBACK_SECTION_TITLE
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


# Field names a variant may declare, mapped to their ``ReportRecord`` slots.
REPORT_FIELDS: tuple[str, ...] = (
    "documents_reviewed",
    "strategies",
    "strengths",
    "challenges",
    "barriers",
    "accommodations",
    "accommodation_subsections",
)
