"""Tests for numbered barrier/accommodation parsing."""

from __future__ import annotations

import pytest

from report_extractor.models import NumberedEntry
from report_extractor.parsing.numbered import (
    NUMBERED_STRATEGIES,
    REQUIRED_ACCOMMODATION_CATEGORIES,
    clean_description,
    find_evidence,
    parse_accommodation_lines,
    parse_accommodation_subsections,
    parse_accommodations,
    parse_numbered_entries,
)


class TestEvidence:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Struggles (WJ-IV [12th percentile])", "WJ-IV [12th percentile]"),
            ("Loses focus (Conners-3) [T-score 72]", "Conners-3 [T-score 72]"),
            ("Reads slowly (teacher report)", None),
            ("(A [1]) then (B [2])", "B [2]"),
        ],
    )
    def test_find_evidence(self, text: str, expected: str | None) -> None:
        assert find_evidence(text) == expected

    def test_clean_description(self) -> None:
        line = "- **Functional Impact:** Loses focus quickly (Conners-3) [T-score 72]"
        assert clean_description(line) == "Loses focus quickly"


class TestNumberedEntries:
    def test_multilevel_scenario(self) -> None:
        text = "**2.1. Reading Fluency** - Struggles with decoding (WJ-IV [12th percentile])"
        assert parse_numbered_entries(text) == [
            NumberedEntry(
                ordinal=1,
                title="Reading Fluency",
                description="Struggles with decoding",
                evidence="WJ-IV [12th percentile]",
            )
        ]

    def test_multilevel_description_on_next_line(self) -> None:
        text = (
            "**2.1. Reading Fluency**\n"
            "- Struggles with decoding\n"
            "\n"
            "**2.2. Sustained Attention**\n"
            "- **Functional Impact:** Loses focus after 15 minutes (Conners-3) [T-score 72]\n"
        )
        entries = parse_numbered_entries(text)
        assert [(e.ordinal, e.title) for e in entries] == [(1, "Reading Fluency"), (2, "Sustained Attention")]
        assert entries[0].description == "Struggles with decoding"
        assert entries[0].evidence is None
        assert entries[1].description == "Loses focus after 15 minutes"
        assert entries[1].evidence == "Conners-3 [T-score 72]"

    def test_simple_numbered_list(self) -> None:
        text = "1. **Reading Fluency**\n   Slow decoding\n2. **Written Expression**\n   Short sentences\n"
        entries = parse_numbered_entries(text)
        assert [(e.ordinal, e.title, e.description) for e in entries] == [
            (1, "Reading Fluency", "Slow decoding"),
            (2, "Written Expression", "Short sentences"),
        ]

    def test_legacy_labeled_blocks(self) -> None:
        text = (
            "**Observed Barrier 1:** Reading Fluency\n"
            "- **Functional Impact:** Needs extra time for readings\n"
            "- **Evidence:** WJ-IV Reading Fluency SS 78\n"
        )
        (entry,) = parse_numbered_entries(text)
        assert entry == NumberedEntry(
            ordinal=1,
            title="Reading Fluency",
            description="Needs extra time for readings",
            evidence="WJ-IV Reading Fluency SS 78",
        )

    def test_missing_description_reuses_title(self) -> None:
        (entry,) = parse_numbered_entries("**3.1. Test Anxiety**")
        assert entry.description == "Test Anxiety"

    def test_multilevel_preferred_over_simple(self) -> None:
        text = "**2.1. Reading**\n1. **Not this one**\n"
        entries = parse_numbered_entries(text)
        assert [e.title for e in entries] == ["Reading"]

    def test_empty_input(self) -> None:
        assert parse_numbered_entries("") == []
        assert parse_numbered_entries("No numbering here.") == []

    def test_strategy_order(self) -> None:
        assert [s.__name__ for s in NUMBERED_STRATEGIES] == [
            "parse_multilevel",
            "parse_simple",
            "parse_legacy",
        ]


class TestAccommodationLines:
    def test_line_formats(self) -> None:
        text = (
            "**1. Extended Time on Exams**\n"
            "Time and a half on all timed work.\n"
            "**2.** Reduced-distraction testing room\n"
            "3. Audio textbooks\n"
            "   for all required readings\n"
        )
        entries = parse_accommodation_lines(text)
        assert [(e.ordinal, e.title) for e in entries] == [
            (1, "Extended Time on Exams"),
            (2, "Reduced-distraction testing room"),
            (3, "Audio textbooks"),
        ]
        assert entries[0].description == "Time and a half on all timed work."
        assert entries[2].description == "for all required readings"

    def test_title_colon_format(self) -> None:
        (entry,) = parse_accommodation_lines("1. **Extended Time:** 1.5x on exams\nin a quiet room.")
        assert entry.title == "Extended Time"
        assert entry.description == "1.5x on exams in a quiet room."

    def test_numbered_entries_take_precedence(self) -> None:
        text = "1. **Extended Time:** 1.5x on exams\n2. **Note-Taking Support:** Slides\n"
        entries = parse_accommodations(text)
        assert [e.title for e in entries] == ["Extended Time", "Note-Taking Support"]
        assert entries[0].description == "1.5x on exams"

    def test_falls_back_to_line_formats(self) -> None:
        entries = parse_accommodations("1. Audio textbooks\n2. Preferential seating\n")
        assert [e.title for e in entries] == ["Audio textbooks", "Preferential seating"]


class TestAccommodationSubsections:
    def test_missing_categories_filled(self) -> None:
        text = (
            "### 3.1 Academic Accommodations\n"
            "1. **Extended Time:** 1.5x on exams\n"
            "\n"
            "### 3.3 Auxiliary Aids & Services\n"
            "1. **Screen Reader:** Text-to-speech software\n"
        )
        subsections = parse_accommodation_subsections(text)
        assert [s.id for s in subsections] == ["3.1", "3.2", "3.3", "3.4"]
        assert [s.is_default for s in subsections] == [False, True, False, True]
        assert subsections[0].entries[0].title == "Extended Time"
        assert subsections[1].body == REQUIRED_ACCOMMODATION_CATEGORIES[1][2]

    def test_all_categories_present(self) -> None:
        text = "\n".join(
            f"### {sub_id} {title}\n1. Something" for sub_id, title, _ in REQUIRED_ACCOMMODATION_CATEGORIES
        )
        subsections = parse_accommodation_subsections(text)
        assert len(subsections) == 4
        assert not any(s.is_default for s in subsections)

    def test_no_subheaders_distributes_lines(self) -> None:
        text = "1. **Extended Time:** 1.5x on exams\n2. **Screen Reader:** TTS software\n"
        subsections = parse_accommodation_subsections(text)
        assert [s.id for s in subsections] == ["3.1", "3.2", "3.3", "3.4"]
        assert subsections[0].body == "1. **Extended Time:** 1.5x on exams"
        assert subsections[1].body == "2. **Screen Reader:** TTS software"
        assert subsections[1].entries[0].title == "Screen Reader"
        assert [s.is_default for s in subsections] == [False, False, True, True]
        assert subsections[3].body == REQUIRED_ACCOMMODATION_CATEGORIES[3][2]

    def test_no_subheaders_quarters_round_up(self) -> None:
        text = "\n".join(f"{i}. Support {i}" for i in range(1, 6))
        subsections = parse_accommodation_subsections(text)
        assert [len(s.body.splitlines()) for s in subsections[:3]] == [2, 2, 1]
        assert subsections[3].is_default

    def test_empty_section(self) -> None:
        assert parse_accommodation_subsections("  \n") == []
