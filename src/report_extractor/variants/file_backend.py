"""File-backed variant definitions loaded from YAML or JSON on disk.

Example ``variants.yaml``::

    variants:
      - name: reading_clinic
        display_name: Reading Clinic Summary
        fields:
          - name: strengths
            synonyms: [Reading Strengths, Strengths]
            strategies: [table, freeform]
        cardinality:
          strengths: 2
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from report_extractor.exceptions import VariantConfigError
from report_extractor.variants.models import ReportVariant

log = logging.getLogger(__name__)


class FileVariantBackend:
    """Loads report variants from a YAML or JSON file.

    The file is lazy-loaded on first ``list_variants()`` call.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._variants: dict[str, ReportVariant] | None = None

    def list_variants(self) -> list[ReportVariant]:
        self._ensure_loaded()
        assert self._variants is not None
        return list(self._variants.values())

    def _ensure_loaded(self) -> None:
        if self._variants is not None:
            return

        if not self._path.exists():
            raise FileNotFoundError(f"Variants file not found: {self._path}")

        raw_text = self._path.read_text(encoding="utf-8")
        try:
            if self._path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(raw_text)
            else:
                data = json.loads(raw_text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise VariantConfigError(f"Cannot parse {self._path}: {exc}") from exc

        self._parse(data)

    def _parse(self, data: Any) -> None:
        if not isinstance(data, dict) or not isinstance(data.get("variants"), list):
            raise VariantConfigError(f"{self._path} must contain a top-level 'variants' list")

        variants: dict[str, ReportVariant] = {}
        for raw in data["variants"]:
            try:
                variant = ReportVariant.model_validate(raw)
            except ValidationError as exc:
                raise VariantConfigError(f"Invalid variant in {self._path}: {exc}") from exc
            variants[variant.name] = variant

        self._variants = variants
        log.info("Loaded %d variant(s) from %s", len(variants), self._path)
