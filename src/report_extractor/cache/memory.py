"""In-memory LRU cache of extraction results with TTL support."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import TYPE_CHECKING, Callable, Optional

from report_extractor.cache.key_strategy import document_cache_key
from report_extractor.cache.models import CacheEntry
from report_extractor.models import RawDocument, ReportRecord

if TYPE_CHECKING:
    from report_extractor.assembler import ReportExtractor

log = logging.getLogger(__name__)


class ReportCache:
    """OrderedDict-based LRU cache with TTL expiry.

    Thread-safe via ``threading.Lock``.  The extractor never reads or writes
    it; hosts call :meth:`get_or_extract` or manage keys themselves.
    """

    def __init__(self, max_entries: int = 50, ttl_seconds: int = 300) -> None:
        self._max_entries = max_entries
        self._ttl_seconds = ttl_seconds
        self._store: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def get(self, key: str) -> Optional[ReportRecord]:
        """Retrieve a record by key. Returns None on miss or TTL expiry."""
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if entry.is_expired:
                del self._store[key]
                return None
            entry.hit_count += 1
            # Move to end (most recently used)
            self._store.move_to_end(key)
            return entry.value

    def put(
        self,
        key: str,
        record: ReportRecord,
        *,
        identity: str = "",
        ttl_seconds: Optional[int] = None,
    ) -> None:
        """Store a record. Evicts LRU entries if at capacity."""
        ttl = self._ttl_seconds if ttl_seconds is None else ttl_seconds
        with self._lock:
            if key in self._store:
                del self._store[key]
            self._store[key] = CacheEntry(key=key, value=record, identity=identity, ttl_seconds=ttl)
            while len(self._store) > self._max_entries:
                evicted, _ = self._store.popitem(last=False)
                log.debug("Evicted cache entry %s", evicted[:12])

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def invalidate_document(self, identity: str) -> int:
        """Drop every entry stored for *identity*, whatever its fingerprint."""
        with self._lock:
            stale = [k for k, e in self._store.items() if e.identity == identity]
            for key in stale:
                del self._store[key]
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def get_or_extract(
        self,
        document: RawDocument,
        extract: Callable[[RawDocument], ReportRecord],
        *,
        variant: str = "",
    ) -> ReportRecord:
        """Return the cached record for *document*, extracting on a miss.

        ``extract`` runs outside the lock; concurrent misses on the same key
        may both extract, and the later result wins.
        """
        key = document_cache_key(document, variant)
        cached = self.get(key)
        if cached is not None:
            return cached
        record = extract(document)
        self.put(key, record, identity=document.identity)
        return record

    def get_or_extract_with(
        self,
        extractor: ReportExtractor,
        document: RawDocument,
        variant: Optional[str] = None,
    ) -> ReportRecord:
        """Shortcut for :meth:`get_or_extract` around ``extractor.extract``."""
        return self.get_or_extract(
            document,
            lambda doc: extractor.extract(doc, variant),
            variant=variant or "",
        )
