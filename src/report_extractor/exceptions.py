"""Exception hierarchy for report-extractor."""

from __future__ import annotations


class ExtractorError(Exception):
    """Base exception for all report-extractor errors."""


class StructureNotFound(ExtractorError):
    """A section or sub-pattern could not be located.

    Internal and non-fatal: raised inside a parsing strategy and absorbed by
    the caller, which moves on to the next strategy or a sentinel value.
    """


class SchemaViolation(ExtractorError):
    """A strict-schema cardinality invariant failed after all fallbacks ran."""

    def __init__(self, field: str, expected: int, actual: int) -> None:
        super().__init__(
            f"{field} must contain exactly {expected} entries, found {actual}"
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class InputTooLarge(ExtractorError):
    """Document exceeds the caller's size ceiling."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Document has {size} characters, limit is {limit}")
        self.size = size
        self.limit = limit


class VariantNotFound(ExtractorError, KeyError):
    """Requested report variant is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(f"Variant {name!r} not found. Available: {available}")
        self.name = name
        self.available = available

    def __str__(self) -> str:
        return str(self.args[0])


class VariantConfigError(ExtractorError):
    """A variant definition file could not be parsed or validated."""
