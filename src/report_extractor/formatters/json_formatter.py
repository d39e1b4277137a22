"""JSON output formatter for API callers and fixtures."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any

from report_extractor.models import ReportRecord


class JSONFormatter:
    """Renders ReportRecord as indented JSON bytes.

    Pass ``include_sections=False`` to drop the raw section bodies, which
    repeat most of the source document.
    """

    def format(self, record: ReportRecord, *, include_sections: bool = True, **kwargs: Any) -> bytes:
        data = dataclasses.asdict(record)
        if not include_sections:
            data.pop("sections", None)
        return json.dumps(data, indent=2, ensure_ascii=False, default=str).encode()

    def format_to_file(self, record: ReportRecord, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(record, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
