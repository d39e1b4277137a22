"""Output formatters for rendering ReportRecord.

Usage::

    from report_extractor.formatters import JSONFormatter

    payload = JSONFormatter().format(record)
"""

from __future__ import annotations

from report_extractor.formatters.json_formatter import JSONFormatter
from report_extractor.formatters.protocols import IOutputFormatter

__all__ = ["IOutputFormatter", "JSONFormatter"]
