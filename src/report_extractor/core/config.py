"""Nested pydantic-settings configuration for hosts embedding the extractor.

Extraction itself never reads the environment.  Hosts build an
``ExtractorSettings`` once and pass it to ``ReportExtractor.from_settings``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class ExtractionConfig(BaseSettings):
    """Extraction behaviour.

    Env vars use ``EXTRACTOR_EXTRACTION_`` prefix::

        export EXTRACTOR_EXTRACTION_DEFAULT_VARIANT=tutoring
        export EXTRACTOR_EXTRACTION_VARIANTS_PATH=./variants.yaml
    """

    model_config = {"env_prefix": "EXTRACTOR_EXTRACTION_"}

    default_variant: str = "k12"
    enforce_cardinality: bool = True
    max_document_chars: int = Field(default=2_000_000, gt=0)
    variants_path: Optional[Path] = None


class CacheConfig(BaseSettings):
    """Caller-side result cache sizing.

    Env vars use ``EXTRACTOR_CACHE_`` prefix.
    """

    model_config = {"env_prefix": "EXTRACTOR_CACHE_"}

    max_entries: int = Field(default=50, ge=1)
    ttl_seconds: int = Field(default=300, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``EXTRACTOR_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "EXTRACTOR_OBSERVABILITY_"}

    log_level: str = "INFO"
    json_logs: bool = False


class ExtractorSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs.

    Each sub-config reads its own ``EXTRACTOR_<GROUP>_*`` env vars.
    """

    extraction: ExtractionConfig = ExtractionConfig()
    cache: CacheConfig = CacheConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
