"""Inline markdown cleanup and do/don't glyph classification."""

from __future__ import annotations

import re
from typing import Optional

from report_extractor.models import ActionItem, Polarity

DO_GLYPHS = ("✔", "✓", "✅", "☑")
DONT_GLYPHS = ("✘", "✗", "✖", "❌")

# Emoji presentation selector that AI output often appends to glyphs (✔️)
_VARIATION_SELECTOR = "\ufe0f"

_BULLET_RE = re.compile(r"^\s*(?:[-•*+]|\d+[.)])\s+")
_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
_ITALIC_RE = re.compile(r"(?<![*\w])\*(?!\s)(.+?)(?<!\s)\*(?![*\w])")
_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_INLINE_TAG_RE = re.compile(r"</?(?:sub|sup|small|em|strong|b|i)>", re.IGNORECASE)
_WS_RE = re.compile(r"\s+")


def strip_bold(text: str) -> str:
    return _BOLD_RE.sub(r"\1", text).replace("**", "")


def strip_markdown(text: str) -> str:
    """Remove bold/italic markers plus leading and trailing colons."""
    text = strip_bold(text)
    text = _ITALIC_RE.sub(r"\1", text)
    text = re.sub(r"^\s*:\s*", "", text)
    text = re.sub(r":\s*$", "", text)
    return text.strip()


def strip_bullet(text: str) -> str:
    return _BULLET_RE.sub("", text, count=1)


def clean_text(text: str) -> str:
    """Drop formatting, a leading bullet, inline tags; collapse whitespace."""
    text = _INLINE_TAG_RE.sub("", text)
    text = strip_bold(text)
    text = _ITALIC_RE.sub(r"\1", text)
    text = strip_bullet(text)
    return _WS_RE.sub(" ", text).strip()


def split_cell_items(cell: str) -> list[str]:
    """Split a table cell on ``<br>`` into non-empty cleaned items."""
    items = []
    for part in _BR_RE.split(cell):
        cleaned = clean_text(part)
        if cleaned:
            items.append(cleaned)
    return items


def leading_glyph(text: str) -> Optional[Polarity]:
    """Return the polarity signalled by a leading glyph, if any."""
    candidate = strip_bullet(text.strip()).lstrip()
    if candidate.startswith(DO_GLYPHS):
        return Polarity.DO
    if candidate.startswith(DONT_GLYPHS):
        return Polarity.DONT
    return None


def classify_action(text: str) -> Optional[ActionItem]:
    """Classify one cell or line as a Do or Don't action.

    A leading do glyph yields ``DO``, a leading don't glyph ``DONT``; with
    neither, the action defaults to ``DO``.  Returns ``None`` if nothing is
    left once glyph and formatting are removed.
    """
    candidate = strip_bullet(_INLINE_TAG_RE.sub("", text).strip()).lstrip()
    polarity = Polarity.DO
    for glyph in DO_GLYPHS + DONT_GLYPHS:
        if candidate.startswith(glyph):
            polarity = Polarity.DONT if glyph in DONT_GLYPHS else Polarity.DO
            candidate = candidate[len(glyph):]
            break
    candidate = candidate.lstrip(_VARIATION_SELECTOR)
    body = clean_text(candidate)
    if not body:
        return None
    return ActionItem(polarity=polarity, text=body)
