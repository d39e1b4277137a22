"""Output formatter protocol."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from report_extractor.models import ReportRecord


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for ReportRecord renderers."""

    def format(self, record: ReportRecord, **kwargs: Any) -> bytes:
        ...

    def format_to_file(self, record: ReportRecord, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format."""
        ...
