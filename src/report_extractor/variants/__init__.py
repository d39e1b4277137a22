"""Report variants: field tables, built-ins, registry, file loading."""

from __future__ import annotations

from report_extractor.variants.builtin import BUILTIN_VARIANTS, K12, POST_SECONDARY, TUTORING
from report_extractor.variants.file_backend import FileVariantBackend
from report_extractor.variants.models import FieldConfig, ReportVariant
from report_extractor.variants.registry import VariantRegistry, default_registry

__all__ = [
    "BUILTIN_VARIANTS",
    "FieldConfig",
    "FileVariantBackend",
    "K12",
    "POST_SECONDARY",
    "ReportVariant",
    "TUTORING",
    "VariantRegistry",
    "default_registry",
]
