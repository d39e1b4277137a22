"""Caching contract for hosts that memoize extraction results."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from report_extractor.models import ReportRecord


@runtime_checkable
class IReportCache(Protocol):
    """Protocol for caller-owned report caches."""

    def get(self, key: str) -> Optional[ReportRecord]:
        """Retrieve a cached record by key. Returns None on miss."""
        ...

    def put(self, key: str, record: ReportRecord, *, identity: str = "", ttl_seconds: Optional[int] = None) -> None:
        """Store a record under the given key.

        Args:
            key: Cache key, see ``compute_cache_key``.
            record: The extraction result.
            identity: Document identity, used by ``invalidate_document``.
            ttl_seconds: Time-to-live in seconds. None = use backend default.
        """
        ...

    def invalidate(self, key: str) -> None:
        """Remove a specific key from the cache."""
        ...

    def invalidate_document(self, identity: str) -> int:
        """Remove every entry stored for *identity*; returns the count."""
        ...

    def clear(self) -> None:
        """Remove all entries from the cache."""
        ...
