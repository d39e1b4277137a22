"""Tests for inline markdown cleanup and do/don't glyph classification."""

from __future__ import annotations

import pytest

from report_extractor.models import Polarity
from report_extractor.parsing.markers import (
    classify_action,
    clean_text,
    leading_glyph,
    split_cell_items,
    strip_markdown,
)


class TestClassifyAction:
    @pytest.mark.parametrize("glyph", ["✔", "✓", "✅", "☑", "✔️"])
    def test_do_glyphs(self, glyph: str) -> None:
        action = classify_action(f"{glyph} Give leadership roles")
        assert action is not None
        assert action.polarity is Polarity.DO
        assert action.text == "Give leadership roles"

    @pytest.mark.parametrize("glyph", ["✘", "✗", "✖", "❌", "✖️"])
    def test_dont_glyphs(self, glyph: str) -> None:
        action = classify_action(f"{glyph} Ignore her desire to lead")
        assert action is not None
        assert action.polarity is Polarity.DONT
        assert action.text == "Ignore her desire to lead"

    def test_no_glyph_defaults_to_do(self) -> None:
        action = classify_action("Offer a quiet corner")
        assert action is not None
        assert action.polarity is Polarity.DO

    def test_bulleted_glyph_line(self) -> None:
        action = classify_action("- ✘ Call on her without warning")
        assert action is not None
        assert action.polarity is Polarity.DONT
        assert action.text == "Call on her without warning"

    def test_glyph_only_is_dropped(self) -> None:
        assert classify_action("✔ ") is None
        assert classify_action("") is None

    def test_formatting_removed(self) -> None:
        action = classify_action("✔ **Use** a <sub>timer</sub>")
        assert action is not None
        assert action.text == "Use a timer"


class TestLeadingGlyph:
    def test_detects_polarity(self) -> None:
        assert leading_glyph("✓ yes") is Polarity.DO
        assert leading_glyph("  ❌ no") is Polarity.DONT

    def test_none_without_glyph(self) -> None:
        assert leading_glyph("plain text ✔") is None


class TestCleanup:
    def test_strip_markdown(self) -> None:
        assert strip_markdown("**Extended Time:**") == "Extended Time"
        assert strip_markdown("*Reading*") == "Reading"

    def test_clean_text_collapses_whitespace(self) -> None:
        assert clean_text("- **Bold**   and\n *italic*  ") == "Bold and italic"

    def test_clean_text_keeps_inner_asterisks(self) -> None:
        assert clean_text("5 * 3 = 15") == "5 * 3 = 15"

    def test_split_cell_items(self) -> None:
        cell = "Asks why<br/><sub>**evidence:** teacher notes</sub><br> "
        assert split_cell_items(cell) == ["Asks why", "evidence: teacher notes"]
