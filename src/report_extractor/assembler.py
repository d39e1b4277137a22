"""Report assembler: markdown in, ``ReportRecord`` out.

Usage::

    from report_extractor import ReportExtractor

    extractor = ReportExtractor()
    record = extractor.extract(markdown, variant="tutoring")
    print(record.case_info.student_name, len(record.strengths))

The extractor is stateless between calls.  It holds only its registry of
variant definitions, which it never mutates, so one instance can be shared
across threads.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from report_extractor.exceptions import InputTooLarge, SchemaViolation
from report_extractor.models import EXTRACTOR_VERSION, RawDocument, ReportRecord
from report_extractor.parsing.metadata import extract_case_info, extract_overview
from report_extractor.parsing.sections import split_sections
from report_extractor.strategies import resolve_field
from report_extractor.variants.registry import VariantRegistry, default_registry

if TYPE_CHECKING:
    from report_extractor.core.config import ExtractorSettings
    from report_extractor.variants.models import ReportVariant

log = logging.getLogger(__name__)

DocumentInput = Union[RawDocument, str]


def _as_document(document: DocumentInput) -> RawDocument:
    if isinstance(document, RawDocument):
        return document
    return RawDocument(text=document)


def ensure_within_limit(document: DocumentInput, max_chars: int) -> None:
    """Reject documents above *max_chars* before they reach the extractor.

    Raises:
        InputTooLarge: If the document is longer than the ceiling.
    """
    size = len(_as_document(document).text)
    if size > max_chars:
        raise InputTooLarge(size, max_chars)


def check_cardinality(record: ReportRecord, variant: ReportVariant) -> None:
    """Raise ``SchemaViolation`` for the first field whose count is off."""
    for field_name, expected in variant.cardinality.items():
        actual = len(getattr(record, field_name))
        if actual != expected:
            raise SchemaViolation(field_name, expected, actual)


class ReportExtractor:
    """Turns AI-generated report markdown into a typed ``ReportRecord``."""

    def __init__(
        self,
        registry: Optional[VariantRegistry] = None,
        *,
        default_variant: str = "k12",
        enforce_cardinality: bool = True,
    ) -> None:
        self._registry = registry if registry is not None else default_registry()
        self._default_variant = default_variant
        self._enforce_cardinality = enforce_cardinality
        # Fail at construction rather than on the first document
        self._registry.get(default_variant)

    @classmethod
    def from_settings(cls, settings: ExtractorSettings) -> ReportExtractor:
        """Build an extractor from host settings."""
        cfg = settings.extraction
        return cls(
            default_registry(cfg.variants_path),
            default_variant=cfg.default_variant,
            enforce_cardinality=cfg.enforce_cardinality,
        )

    @property
    def registry(self) -> VariantRegistry:
        return self._registry

    @property
    def version(self) -> str:
        return EXTRACTOR_VERSION

    def extract(self, document: DocumentInput, variant: Optional[str] = None) -> ReportRecord:
        """Parse *document* with the named variant (default variant if omitted).

        Raises:
            VariantNotFound: If *variant* is not registered.
            SchemaViolation: If the variant declares a cardinality the
                document does not meet.
        """
        doc = _as_document(document)
        definition = self._registry.get(variant or self._default_variant)

        sections = tuple(split_sections(doc.text))
        case_info = extract_case_info(doc.text, sections, definition.overview_synonyms)
        overview = extract_overview(sections, definition.overview_synonyms)

        values = {}
        for field_spec in definition.field_specs():
            values[field_spec.name] = resolve_field(field_spec, sections).items

        record = ReportRecord(
            variant=definition.name,
            case_info=case_info,
            overview=overview,
            sections=sections,
            fingerprint=doc.fingerprint,
            **values,
        )

        log.info(
            "Extracted %s report %s: %s",
            definition.name,
            doc.identity or doc.fingerprint[:12],
            ", ".join(f"{name}={len(items)}" for name, items in values.items()) or "no fields",
        )

        if self._enforce_cardinality:
            check_cardinality(record, definition)
        return record


def extract_report(document: DocumentInput, variant: str = "k12") -> ReportRecord:
    """One-shot helper using the built-in variants."""
    return ReportExtractor().extract(document, variant)
