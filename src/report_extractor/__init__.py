"""report-extractor: typed records from AI-generated assessment report markdown.

Usage::

    from report_extractor import ReportExtractor, RawDocument

    extractor = ReportExtractor()
    record = extractor.extract(RawDocument(markdown, identity="report-42"), "k12")
    for strength in record.strengths:
        print(strength.title, [a.text for a in strength.dos])
"""

from __future__ import annotations

from report_extractor.assembler import (
    ReportExtractor,
    check_cardinality,
    ensure_within_limit,
    extract_report,
)
from report_extractor.cache import ReportCache, compute_cache_key, create_report_cache
from report_extractor.core.config import ExtractorSettings
from report_extractor.core.logging_config import setup_logging
from report_extractor.exceptions import (
    ExtractorError,
    InputTooLarge,
    SchemaViolation,
    StructureNotFound,
    VariantConfigError,
    VariantNotFound,
)
from report_extractor.formatters import JSONFormatter
from report_extractor.models import (
    EXTRACTOR_VERSION,
    AccommodationSubsection,
    ActionItem,
    CaseInfo,
    LabeledEntry,
    NumberedEntry,
    Polarity,
    RawDocument,
    ReportRecord,
    ReviewedDocumentRecord,
    Section,
)
from report_extractor.strategies import STRATEGY_CATALOG, FieldSpec, resolve_field
from report_extractor.variants import ReportVariant, VariantRegistry, default_registry

__version__ = EXTRACTOR_VERSION

__all__ = [
    "EXTRACTOR_VERSION",
    "STRATEGY_CATALOG",
    "AccommodationSubsection",
    "ActionItem",
    "CaseInfo",
    "ExtractorError",
    "ExtractorSettings",
    "FieldSpec",
    "InputTooLarge",
    "JSONFormatter",
    "LabeledEntry",
    "NumberedEntry",
    "Polarity",
    "RawDocument",
    "ReportCache",
    "ReportExtractor",
    "ReportRecord",
    "ReportVariant",
    "ReviewedDocumentRecord",
    "SchemaViolation",
    "Section",
    "StructureNotFound",
    "VariantConfigError",
    "VariantNotFound",
    "VariantRegistry",
    "check_cardinality",
    "compute_cache_key",
    "create_report_cache",
    "default_registry",
    "ensure_within_limit",
    "extract_report",
    "resolve_field",
    "setup_logging",
]
