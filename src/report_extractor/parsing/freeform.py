"""Fallback extractor for bold-label bullet and paragraph content.

Handles sections written as prose rather than tables::

    **Use Strengths:** Lean on her visual memory.
    Pair new words with pictures.

    - **Working Memory**
      **What you see:** Loses track of multi-step directions.
      **What to do:**
      ✔ Chunk directions
      ✘ Repeat the whole list louder
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from report_extractor.models import ActionItem, LabeledEntry
from report_extractor.parsing.markers import classify_action, clean_text, leading_glyph

log = logging.getLogger(__name__)

# "**Label:** rest", "**Label**: rest", "- **Label**", "1. **Label**"
BOLD_LABEL_RE = re.compile(r"^(?:[-•*+]\s+|\d+[.)]\s+)?\*\*(?P<label>[^*\n]+?)\*\*(?P<rest>.*)$")
_BULLET_LINE_RE = re.compile(r"^\s*(?:[-•*+]|\d+[.)])\s+")
_RULE_RE = re.compile(r"^\s*(?:-{3,}|\*{3,}|_{3,})\s*$")

# Sub-labels folded into the open entry instead of opening a new one
OBSERVATION_LABELS = {
    "what you see": "",
    "what you'll see": "",
    "observable behaviors": "",
    "evidence": "Evidence: ",
    "impact": "Impact: ",
    "impact on learning": "Impact: ",
}
ACTION_LABELS = ("what to do", "what not to do", "what to avoid", "try", "avoid")


@dataclass
class _Builder:
    title: str
    observations: list[str] = field(default_factory=list)
    actions: list[ActionItem] = field(default_factory=list)
    in_actions: bool = False

    def add_text(self, text: str) -> None:
        """Append continuation text to the last observation with one space."""
        if not text:
            return
        if not self.observations:
            self.observations.append(text)
            return
        last = self.observations[-1]
        if last and not last.endswith(": "):
            self.observations[-1] = f"{last} {text}"
        else:
            self.observations[-1] = f"{last}{text}"

    def add_action(self, text: str) -> None:
        action = classify_action(text)
        if action is not None:
            self.actions.append(action)

    def freeze(self) -> LabeledEntry:
        return LabeledEntry(
            title=self.title,
            observations=tuple(
                o.strip() for o in self.observations if o.strip() and not o.endswith(": ")
            ),
            actions=tuple(self.actions),
        )


def _split_label(match: re.Match[str]) -> tuple[str, str]:
    label = match.group("label").strip()
    rest = match.group("rest").strip()
    if label.endswith(":"):
        label = label[:-1].strip()
    elif rest.startswith(":"):
        rest = rest[1:].strip()
    return label, rest


def _fold_sublabel(builder: _Builder, label: str, rest: str) -> bool:
    key = label.lower()
    if key in OBSERVATION_LABELS:
        builder.in_actions = False
        builder.observations.append(OBSERVATION_LABELS[key] + clean_text(rest))
        return True
    if key in ACTION_LABELS:
        builder.in_actions = True
        if rest:
            builder.add_action(rest)
        return True
    return False


def entries_from_freeform(text: str) -> list[LabeledEntry]:
    """Build ``LabeledEntry`` records from bold-label lines.

    Lines before the first bold label are lead-in prose and are skipped.
    """
    entries: list[LabeledEntry] = []
    current: Optional[_Builder] = None

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or _RULE_RE.match(line) or line.startswith("|"):
            continue

        match = BOLD_LABEL_RE.match(line)
        if match:
            label, rest = _split_label(match)
            if current is not None and _fold_sublabel(current, label, rest):
                continue
            title = clean_text(label)
            if not title:
                continue
            if current is not None:
                entries.append(current.freeze())
            current = _Builder(title=title)
            if rest:
                current.observations.append(clean_text(rest))
            continue

        if current is None:
            continue

        if leading_glyph(line) is not None or (current.in_actions and _BULLET_LINE_RE.match(line)):
            current.add_action(line)
        else:
            current.add_text(clean_text(line))

    if current is not None:
        entries.append(current.freeze())

    log.debug("Freeform parser produced %d entries", len(entries))
    return entries
