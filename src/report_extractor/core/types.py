"""Shared type aliases for the parsing layer."""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

# A parse strategy: section text in, records out.  ``None`` or an empty list
# means "no structure found here, try the next strategy".
ParseStrategy = Callable[[str], Optional[Sequence[Any]]]

# A header-splitting strategy over the whole document.
SplitStrategy = Callable[[str], list]
