"""Cache key computation for extraction results."""

from __future__ import annotations

import hashlib

from report_extractor.models import EXTRACTOR_VERSION, RawDocument


def compute_cache_key(
    identity: str,
    fingerprint: str,
    version: str = EXTRACTOR_VERSION,
    variant: str = "",
) -> str:
    """Compute a deterministic SHA-256 cache key.

    A change to the document identity, its content fingerprint or the
    extractor version yields a different key.
    """
    parts = [identity, fingerprint, version]
    if variant:
        parts.append(variant)
    raw = "|".join(parts)
    return hashlib.sha256(raw.encode()).hexdigest()


def document_cache_key(document: RawDocument, variant: str = "") -> str:
    return compute_cache_key(document.identity, document.fingerprint, EXTRACTOR_VERSION, variant)
