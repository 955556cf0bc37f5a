"""Tab-separated LSB mapping formatter.

WHY: The quickest way to check numbering results is one line per LSB in
the terminal, and tab-separated text also pastes cleanly into a
spreadsheet.

RULES:
- One ``<lsb>\\t<articulation>`` line per pair
- Lines joined with ``\\n``, no trailing newline
- Media type: "text/tab-separated-values"
"""

from __future__ import annotations

from typing import List, Tuple

from reabank_numberer.formatters.base import BaseFormatter, FormatterOutput


class TsvFormatter(BaseFormatter):
    """Renders each pair as ``LSB<TAB>Articulation``."""

    @property
    def name(self) -> str:
        return "Tab-separated"

    def format(self, pairs: List[Tuple[str, str]]) -> FormatterOutput:
        content = "\n".join("{}\t{}".format(lsb, articulation) for lsb, articulation in pairs)
        return FormatterOutput(content=content, media_type="text/tab-separated-values")
