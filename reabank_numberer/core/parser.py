"""Line matching and LSB substitution for Reabank files.

WHY: Only two kinds of Reabank lines carry LSBs: ``//def-lsb`` definition
lines and plain articulation lines (``LSB Articulation``). Everything else
(bank headers, ``//!`` metadata, comments, blank lines) must pass through
untouched. The numberer needs to find the LSB and articulation name on the
matching lines and write a new LSB back without disturbing anything else.

HOW: One compiled regex per line shape. A match becomes an LsbLine that
remembers every untouched part of the line (marker, separators, name,
suffix, line ending) so with_lsb() can rebuild the line with only the digits
swapped. The parse_* helpers hand the pieces to a callback, the update_*
helpers feed an updater's return value straight back into the line.

RULES:
- Definition shape: ``//def-lsb <digits> <name>[ -<suffix>][\\r]``
- Articulation shape: ``<digits> <name>[ -<suffix>][\\r]``
- The name never includes the `` -suffix`` part or the trailing ``\\r``
- Rebuilding with the original LSB reproduces the original line exactly
- Non-matching lines are not errors; callbacks are simply not called
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

# //def-lsb 1 Legato - C1
_DEFINITION_RE = re.compile(
    r"(?P<marker>//def-lsb\s)(?P<lsb>[0-9]+)(?P<sep>\s)(?P<articulation>[^-\r\n]+)"
    r"(?P<suffix>\s-[^\r\n]+)?(?P<eol>\r?)",
)

# 1 Legato - C1
_ARTICULATION_RE = re.compile(
    r"(?P<marker>)(?P<lsb>[0-9]+)(?P<sep>\s)(?P<articulation>[^-\r\n]+)"
    r"(?P<suffix>\s-[^\r\n]+)?(?P<eol>\r?)",
)

GetNewLine = Callable[[str], str]
LineParsedCallback = Callable[[str, str, GetNewLine], None]
LsbUpdater = Callable[[str, str], str]


@dataclass(frozen=True)
class LsbLine:
    """A Reabank line that carries an LSB, split into its parts.

    Attributes:
        marker: Text before the LSB (``"//def-lsb "`` or ``""``).
        lsb: The LSB digits as written in the file.
        separator: The whitespace character between LSB and name.
        articulation: The articulation name.
        suffix: Optional trailing `` - note`` part, ``""`` if absent.
        line_ending: ``"\\r"`` for CRLF files, otherwise ``""``.
    """

    marker: str
    lsb: str
    separator: str
    articulation: str
    suffix: str = ""
    line_ending: str = ""

    def with_lsb(self, lsb: str) -> str:
        """Return the original line text with the LSB replaced."""
        return "{}{}{}{}{}{}".format(
            self.marker, lsb, self.separator, self.articulation,
            self.suffix, self.line_ending,
        )


def _match(line: str, pattern: re.Pattern) -> Optional[LsbLine]:
    if not line:
        return None
    match = pattern.fullmatch(line)
    if match is None:
        return None
    return LsbLine(
        marker=match.group("marker"),
        lsb=match.group("lsb"),
        separator=match.group("sep"),
        articulation=match.group("articulation"),
        suffix=match.group("suffix") or "",
        line_ending=match.group("eol"),
    )


def match_definition(line: str) -> Optional[LsbLine]:
    """Match a ``//def-lsb LSB Articulation`` line.

    Returns:
        The parsed LsbLine, or None if the line is not a definition.
    """
    return _match(line, _DEFINITION_RE)


def match_articulation(line: str) -> Optional[LsbLine]:
    """Match an ``LSB Articulation`` line.

    Returns:
        The parsed LsbLine, or None if the line is not an articulation.
    """
    return _match(line, _ARTICULATION_RE)


def parse_definition(line: str, callback: LineParsedCallback) -> None:
    """Call ``callback(lsb, articulation, get_new_line)`` for a definition line.

    WHY: Callers that only want to read definitions (the numberer's
    pre-scan) or that need the line rebuilder without committing to a new
    LSB get all three pieces at once.

    RULES:
    - callback is not called for non-matching lines
    - get_new_line(new_lsb) returns the full rebuilt line
    """
    parsed = match_definition(line)
    if parsed is not None:
        callback(parsed.lsb, parsed.articulation, parsed.with_lsb)


def parse_articulation(line: str, callback: LineParsedCallback) -> None:
    """Call ``callback(lsb, articulation, get_new_line)`` for an articulation line."""
    parsed = match_articulation(line)
    if parsed is not None:
        callback(parsed.lsb, parsed.articulation, parsed.with_lsb)


def update_definition(line: str, updater: LsbUpdater) -> str:
    """Replace the LSB of a definition line with ``updater(lsb, articulation)``.

    Returns:
        The rebuilt line, or the original line unchanged if it is not a
        definition.
    """
    parsed = match_definition(line)
    if parsed is None:
        return line
    return parsed.with_lsb(updater(parsed.lsb, parsed.articulation))


def update_articulation(line: str, updater: LsbUpdater) -> str:
    """Replace the LSB of an articulation line with ``updater(lsb, articulation)``.

    Returns:
        The rebuilt line, or the original line unchanged if it is not an
        articulation.
    """
    parsed = match_articulation(line)
    if parsed is None:
        return line
    return parsed.with_lsb(updater(parsed.lsb, parsed.articulation))
