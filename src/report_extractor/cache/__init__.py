"""Caller-owned caching of extraction results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from report_extractor.cache.key_strategy import compute_cache_key, document_cache_key
from report_extractor.cache.memory import ReportCache
from report_extractor.cache.protocols import IReportCache

if TYPE_CHECKING:
    from report_extractor.core.config import CacheConfig

__all__ = [
    "IReportCache",
    "ReportCache",
    "compute_cache_key",
    "create_report_cache",
    "document_cache_key",
]


def create_report_cache(settings: object | None = None) -> IReportCache:
    """Create a report cache from settings.

    Args:
        settings: An ``ExtractorSettings`` or ``CacheConfig`` instance.
            If None, returns ReportCache with defaults.
    """
    config: CacheConfig | None = None
    if settings is not None:
        config = getattr(settings, "cache", None)
        if config is None and hasattr(settings, "max_entries"):
            config = settings  # type: ignore[assignment]

    if config is None:
        return ReportCache()
    return ReportCache(max_entries=config.max_entries, ttl_seconds=config.ttl_seconds)
