"""Report variant definitions: which fields a report has and how to find them."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from report_extractor.parsing.metadata import OVERVIEW_SYNONYMS
from report_extractor.strategies import STRATEGY_CATALOG, FieldSpec

FieldName = Literal[
    "documents_reviewed",
    "strategies",
    "strengths",
    "challenges",
    "barriers",
    "accommodations",
    "accommodation_subsections",
]


class FieldConfig(BaseModel):
    """Section-title synonyms and strategy names for one report field."""

    model_config = {"frozen": True}

    name: FieldName
    synonyms: tuple[str, ...] = Field(min_length=1)
    strategies: tuple[str, ...] = Field(min_length=1)

    @field_validator("strategies")
    @classmethod
    def _known_strategies(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        unknown = [name for name in value if name not in STRATEGY_CATALOG]
        if unknown:
            raise ValueError(
                f"Unknown strategies {unknown}. Available: {sorted(STRATEGY_CATALOG)}"
            )
        return value

    def to_spec(self) -> FieldSpec:
        return FieldSpec(name=self.name, synonyms=self.synonyms, strategies=self.strategies)


class ReportVariant(BaseModel):
    """A report type as data.

    ``cardinality`` maps a field name to the exact number of entries a
    document of this variant must yield; any other count is a schema
    violation.
    """

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    display_name: str = ""
    description: str = ""
    overview_synonyms: tuple[str, ...] = OVERVIEW_SYNONYMS
    fields: tuple[FieldConfig, ...] = ()
    cardinality: dict[str, int] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_fields(self) -> ReportVariant:
        names = [f.name for f in self.fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Variant {self.name!r} declares fields twice: {duplicates}")
        undeclared = sorted(set(self.cardinality) - set(names))
        if undeclared:
            raise ValueError(
                f"Variant {self.name!r} sets cardinality for undeclared fields: {undeclared}"
            )
        negative = sorted(k for k, v in self.cardinality.items() if v < 0)
        if negative:
            raise ValueError(f"Variant {self.name!r} has negative cardinality for {negative}")
        return self

    def field_specs(self) -> tuple[FieldSpec, ...]:
        return tuple(f.to_spec() for f in self.fields)

    def get_field(self, name: str) -> FieldConfig | None:
        for field_config in self.fields:
            if field_config.name == name:
                return field_config
        return None
