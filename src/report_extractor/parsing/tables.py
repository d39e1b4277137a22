"""Pipe-table parsing: rows, continuation rows, and do/don't actions.

A table block is recognised by pipe characters plus a separator row of
dashes.  Rows whose first cell is empty are continuation rows: they extend
the entry opened by the last row that had a title.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from report_extractor.models import ActionItem, LabeledEntry
from report_extractor.parsing.markers import classify_action, leading_glyph, split_cell_items, strip_bold

log = logging.getLogger(__name__)

SEPARATOR_RE = re.compile(r"^\s*\|?\s*:?-{3,}:?\s*(?:\|\s*:?-{3,}:?\s*)*\|?\s*$")
_CELL_SPLIT_RE = re.compile(r"(?<!\\)\|")

# Header keywords that assign a column to observations or actions
OBSERVATION_HEADERS = ("what you see", "what you'll see", "observ", "looks like", "evidence", "description")
ACTION_HEADERS = ("what to do", "not to do", "avoid", "strateg", "support", "action", "try")


@dataclass(frozen=True)
class TableBlock:
    """The first pipe table of a text block."""

    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]


def has_table(text: str) -> bool:
    """True when *text* holds pipes and a dash separator row."""
    if "|" not in text:
        return False
    return any(SEPARATOR_RE.match(line) and "|" in line for line in text.splitlines())


def split_row(line: str) -> list[str]:
    """Split a table row on unescaped pipes, dropping the outer empty cells."""
    stripped = line.strip()
    cells = _CELL_SPLIT_RE.split(stripped)
    if stripped.startswith("|") and cells and not cells[0].strip():
        cells = cells[1:]
    if stripped.endswith("|") and cells and not cells[-1].strip():
        cells = cells[:-1]
    return [c.strip().replace("\\|", "|") for c in cells]


def _is_table_line(line: str) -> bool:
    return "|" in line and bool(line.strip())


def parse_table(text: str) -> Optional[TableBlock]:
    """Parse the first table in *text*, or ``None`` if there is none."""
    if not has_table(text):
        return None

    lines = text.splitlines()
    for idx, line in enumerate(lines):
        if not (SEPARATOR_RE.match(line) and "|" in line):
            continue
        header: tuple[str, ...] = ()
        if idx > 0 and _is_table_line(lines[idx - 1]):
            header = tuple(split_row(lines[idx - 1]))
        rows: list[tuple[str, ...]] = []
        for row_line in lines[idx + 1:]:
            if not _is_table_line(row_line):
                break
            if SEPARATOR_RE.match(row_line):
                continue
            rows.append(tuple(split_row(row_line)))
        return TableBlock(header=header, rows=tuple(rows))
    return None


def parse_table_rows(text: str) -> list[list[str]]:
    """Return the data rows of the first table, header and separator excluded."""
    block = parse_table(text)
    if block is None:
        return []
    return [list(row) for row in block.rows]


# ── Labeled entries ──────────────────────────────────────────────────


@dataclass
class _OpenEntry:
    title: str
    observations: list[str] = field(default_factory=list)
    actions: list[ActionItem] = field(default_factory=list)

    def freeze(self) -> LabeledEntry:
        return LabeledEntry(
            title=self.title,
            observations=tuple(self.observations),
            actions=tuple(self.actions),
        )


def column_roles(header: tuple[str, ...], width: int) -> list[str]:
    """Assign ``title``/``observation``/``action`` roles to each column.

    Column 0 is always the title.  Headers naming observations or actions
    decide their column; otherwise column 1 holds observations and every
    later column holds actions.
    """
    roles = ["title"]
    for idx in range(1, width):
        name = header[idx].lower() if idx < len(header) else ""
        if any(key in name for key in OBSERVATION_HEADERS):
            roles.append("observation")
        elif any(key in name for key in ACTION_HEADERS):
            roles.append("action")
        else:
            roles.append("observation" if idx == 1 else "action")
    return roles


def _absorb_cells(entry: _OpenEntry, cells: tuple[str, ...], roles: list[str]) -> None:
    for cell, role in zip(cells[1:], roles[1:]):
        if not cell:
            continue
        if role == "action":
            for item in split_cell_items(cell) or [cell]:
                action = classify_action(item)
                if action is not None:
                    entry.actions.append(action)
        else:
            for item in split_cell_items(cell):
                # A glyph-led item is an action whatever its column
                action = classify_action(item) if leading_glyph(item) is not None else None
                if action is not None:
                    entry.actions.append(action)
                else:
                    entry.observations.append(item)


def entries_from_table(text: str) -> list[LabeledEntry]:
    """Turn the first table of *text* into ``LabeledEntry`` records.

    Continuation rows (empty first cell) aggregate into the open entry and
    are dropped when no entry is open yet.
    """
    block = parse_table(text)
    if block is None or not block.rows:
        return []

    width = max(len(block.header), *(len(r) for r in block.rows))
    roles = column_roles(block.header, width)

    entries: list[LabeledEntry] = []
    current: Optional[_OpenEntry] = None
    for row in block.rows:
        if not row:
            continue
        title = strip_bold(row[0]).strip()
        if title:
            if current is not None:
                entries.append(current.freeze())
            current = _OpenEntry(title=title)
        elif current is None:
            log.debug("Dropping continuation row with no open entry: %s", row)
            continue
        _absorb_cells(current, row, roles)

    if current is not None:
        entries.append(current.freeze())
    return entries
