"""Field strategy dispatcher: synonyms x ordered parse strategies.

A ``FieldSpec`` names a logical report field, the section titles it may
live under (primary name first, then historical synonyms) and the parse
strategies to try on the section body.  The first strategy that returns a
non-empty, well-formed result wins; exhausting every pair resolves the
field to an empty tuple.

Strategies are addressed by name through ``STRATEGY_CATALOG`` so variant
definitions (including ones loaded from YAML) stay pure data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from report_extractor.core.types import ParseStrategy
from report_extractor.exceptions import StructureNotFound
from report_extractor.models import Section
from report_extractor.parsing.documents import parse_reviewed_documents
from report_extractor.parsing.findings import (
    challenges_from_findings,
    strategies_from_findings,
    strengths_from_findings,
)
from report_extractor.parsing.freeform import entries_from_freeform
from report_extractor.parsing.numbered import (
    parse_accommodation_subsections,
    parse_accommodations,
    parse_numbered_entries,
)
from report_extractor.parsing.sections import find_section
from report_extractor.parsing.tables import entries_from_table

log = logging.getLogger(__name__)

STRATEGY_CATALOG: dict[str, ParseStrategy] = {
    "table": entries_from_table,
    "freeform": entries_from_freeform,
    "findings_strengths": strengths_from_findings,
    "findings_challenges": challenges_from_findings,
    "findings_strategies": strategies_from_findings,
    "documents": parse_reviewed_documents,
    "numbered": parse_numbered_entries,
    "accommodations": parse_accommodations,
    "accommodation_subsections": parse_accommodation_subsections,
}


@dataclass(frozen=True)
class FieldSpec:
    """Where to look for one field and how to parse it."""

    name: str
    synonyms: tuple[str, ...]
    strategies: tuple[str, ...]

    def strategy_functions(self) -> tuple[ParseStrategy, ...]:
        return tuple(get_strategy(name) for name in self.strategies)


@dataclass(frozen=True)
class FieldResolution:
    """Outcome of resolving one field; ``section_title``/``strategy`` are None when empty."""

    field: str
    items: tuple[Any, ...] = ()
    section_title: Optional[str] = None
    strategy: Optional[str] = None


def get_strategy(name: str) -> ParseStrategy:
    try:
        return STRATEGY_CATALOG[name]
    except KeyError:
        raise KeyError(
            f"Strategy {name!r} not found. Available: {sorted(STRATEGY_CATALOG)}"
        ) from None


def is_well_formed(item: Any) -> bool:
    """Records with a ``title`` must have a non-empty one."""
    title = getattr(item, "title", None)
    return title is None or bool(str(title).strip())


def locate_section(sections: Sequence[Section], synonym: str) -> Section:
    section = find_section(sections, synonym)
    if section is None or not section.body:
        raise StructureNotFound(f"No section titled {synonym!r}")
    return section


def resolve_field(field_spec: FieldSpec, sections: Sequence[Section]) -> FieldResolution:
    """Try every (synonym, strategy) pair in order and keep the first hit."""
    strategies = field_spec.strategy_functions()

    for synonym in field_spec.synonyms:
        try:
            section = locate_section(sections, synonym)
        except StructureNotFound as exc:
            log.debug("%s: %s", field_spec.name, exc)
            continue

        for strategy_name, strategy in zip(field_spec.strategies, strategies):
            try:
                result = strategy(section.body)
            except StructureNotFound as exc:
                log.debug("%s: strategy %s found no structure: %s", field_spec.name, strategy_name, exc)
                continue
            except Exception:
                log.exception(
                    "%s: strategy %s failed on section %r", field_spec.name, strategy_name, section.title
                )
                continue

            items = tuple(item for item in (result or ()) if is_well_formed(item))
            if items:
                log.debug(
                    "%s: %d item(s) from section %r via %s",
                    field_spec.name,
                    len(items),
                    section.title,
                    strategy_name,
                )
                return FieldResolution(
                    field=field_spec.name,
                    items=items,
                    section_title=section.title,
                    strategy=strategy_name,
                )

    log.debug("%s: no data found", field_spec.name)
    return FieldResolution(field=field_spec.name)
