"""Validated-findings blocks: ``#### N. Title`` followed by labeled fields.

Older K-12 generations emit strengths and challenges together as one list
of findings with QC fields attached::

    #### 1. Strong Visual Memory
    **Evidence:** WISC-V VSI 118
    **Observable Behaviors:** Recalls diagrams after one viewing
    **Primary Support Strategy:** Use graphic organizers
    **Implementation Caution:** Avoid text-only handouts

Each block is classified as a strength or a challenge by keyword.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from report_extractor.models import ActionItem, LabeledEntry, Polarity
from report_extractor.parsing.markers import clean_text

log = logging.getLogger(__name__)

FINDING_HEADER_RE = re.compile(r"^####[ \t]+\d+\.[ \t]*(.+?)[ \t]*$", re.MULTILINE)

STRENGTH_KEYWORDS = (
    "strength", "strong", "excels", "excellent", "proficient", "skilled",
    "ability", "capable", "competent", "advanced", "superior", "effective",
    "successful", "good at", "talent", "gifted",
)
CHALLENGE_KEYWORDS = (
    "challenge", "difficulty", "struggle", "weakness", "deficit", "impairment",
    "delay", "below", "poor", "limited", "needs support", "requires",
    "area of need", "concern",
)


@dataclass(frozen=True)
class Finding:
    """One validated-findings block, already split into its fields."""

    title: str
    evidence: str = ""
    teacher_description: str = ""
    observable: str = ""
    primary_support: str = ""
    secondary_support: str = ""
    caution: str = ""

    @property
    def is_strength(self) -> bool:
        # Ambiguous or unmarked findings are treated as challenges
        combined = f"{self.title} {self.teacher_description}".lower()
        has_strength = any(k in combined for k in STRENGTH_KEYWORDS)
        has_challenge = any(k in combined for k in CHALLENGE_KEYWORDS)
        return has_strength and not has_challenge

    def to_entry(self) -> LabeledEntry:
        observations: list[str] = []
        if self.observable:
            observations.append(self.observable)
        elif self.teacher_description:
            observations.append(self.teacher_description)
        if self.evidence:
            observations.append(f"Evidence: {self.evidence}")

        actions: list[ActionItem] = []
        if self.primary_support:
            actions.append(ActionItem(Polarity.DO, self.primary_support))
        if self.secondary_support:
            actions.append(ActionItem(Polarity.DO, self.secondary_support))
        if self.caution:
            actions.append(ActionItem(Polarity.DONT, self.caution))

        return LabeledEntry(title=self.title, observations=tuple(observations), actions=tuple(actions))


def extract_field(block: str, name: str) -> str:
    """Value of ``**Name:**`` in *block*, including wrapped lines."""
    pattern = re.compile(
        rf"\*\*{re.escape(name)}:\*\*\s*([^\n*]+(?:\n(?!\s*\*\*)[^\n]+)*)",
        re.IGNORECASE,
    )
    match = pattern.search(block)
    return clean_text(match.group(1)) if match else ""


def parse_findings(text: str) -> list[Finding]:
    matches = list(FINDING_HEADER_RE.finditer(text))
    findings: list[Finding] = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        title = clean_text(match.group(1))
        if not title:
            continue
        block = text[match.end():end]
        findings.append(
            Finding(
                title=title,
                evidence=extract_field(block, "Evidence"),
                teacher_description=extract_field(block, "Teacher-Friendly Description"),
                observable=extract_field(block, "Observable Behaviors"),
                primary_support=extract_field(block, "Primary Support Strategy"),
                secondary_support=extract_field(block, "Secondary Support Strategy"),
                caution=extract_field(block, "Implementation Caution"),
            )
        )
    log.debug("Parsed %d validated finding(s)", len(findings))
    return findings


def _has_observations(entry: LabeledEntry) -> bool:
    return bool(entry.observations)


def strengths_from_findings(text: str) -> list[LabeledEntry]:
    entries = [f.to_entry() for f in parse_findings(text) if f.is_strength]
    return [e for e in entries if _has_observations(e)]


def challenges_from_findings(text: str) -> list[LabeledEntry]:
    entries = [f.to_entry() for f in parse_findings(text) if not f.is_strength]
    return [e for e in entries if _has_observations(e)]


def strategies_from_findings(text: str) -> list[LabeledEntry]:
    """One strategy per distinct primary support, titled by its finding."""
    seen: set[str] = set()
    strategies: list[LabeledEntry] = []
    for finding in parse_findings(text):
        support = finding.primary_support
        if not support or support in seen:
            continue
        seen.add(support)
        strategies.append(LabeledEntry(title=finding.title, observations=(support,)))
    return strategies
