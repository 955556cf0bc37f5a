"""Two-pass LSB numbering for a whole Reabank file.

WHY: Reaticulate identifies articulations by LSB. When a library's
articulations do not follow a standard such as UACC, users want every
articulation name numbered uniquely and consistently across all banks in
the file, with any ``//def-lsb`` definitions taking precedence.

HOW: The file is split into lines once. The definitions pass handles
``//def-lsb`` lines: unless every definition is being renumbered, it first
registers all non-zero definitions, then assigns fresh LSBs to the rest.
The articulations pass then walks every ``LSB Articulation`` line, reusing
the registered LSB for names already known and allocating fresh LSBs for
new names. Both passes go through LsbRegistry.

RULES:
- Definitions are always numbered before articulations, wherever they are
- Within a pass, lines are processed in file order
- LSB "0" means "not numbered yet"
- Non-matching lines are never modified
- Conflicts only warn; numbering always completes
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, List, Optional, Tuple

from reabank_numberer.core.parser import (
    parse_definition,
    update_articulation,
    update_definition,
)
from reabank_numberer.core.registry import LsbRegistry

UNNUMBERED_LSB = "0"

DebugLogger = Callable[..., None]

logger = logging.getLogger(__name__)


def console_log(*args: object) -> None:
    """Print debug messages to stderr.

    WHY: Debug output is asked for explicitly, so it has to show up even
    when the host application never configured logging.
    """
    print(*args, file=sys.stderr, flush=True)


class ReabankNumberer:
    """Numbers the LSBs of one Reabank file.

    Args:
        data: The full contents of the Reabank file.
        debug: Whether to emit progress messages through ``logger``.
        logger: Callable taking loggable arguments. Defaults to
            console_log(), which prints to stderr.

    Raises:
        TypeError: If data is not a string.
    """

    def __init__(
        self,
        data: str,
        debug: bool = False,
        logger: Optional[DebugLogger] = None,
    ) -> None:
        if not isinstance(data, str):
            raise TypeError("Reabank data must be passed as a string.")
        self._lines: List[str] = data.split("\n")
        self._registry = LsbRegistry()
        self.debug = debug
        self.logger = logger if logger is not None else console_log

    def _log(self, *args: object) -> None:
        if self.debug:
            self.logger(*args)

    def _read_definitions(self) -> None:
        self._log("Reading definitions...")

        def register(lsb: str, articulation: str, _get_new_line: Callable) -> None:
            if lsb != UNNUMBERED_LSB:
                self._registry.register_lsb(lsb, articulation)

        for line in self._lines:
            parse_definition(line, register)

    def _number_definitions(self, renumber_all: bool) -> None:
        # Existing definitions claim their LSBs before anything is allocated
        if not renumber_all:
            self._read_definitions()

        self._log("Numbering definitions...")

        def number(lsb: str, articulation: str) -> str:
            if lsb != UNNUMBERED_LSB and not renumber_all:
                return lsb
            new_lsb = self._registry.get_next_free_lsb()
            self._registry.register_lsb(new_lsb, articulation)
            return new_lsb

        self._lines = [update_definition(line, number) for line in self._lines]

    def _number_articulations(self, maintain: bool) -> None:
        self._log("Numbering articulations...")

        def number(lsb: str, articulation: str) -> str:
            if maintain and lsb != UNNUMBERED_LSB:
                self._registry.register_lsb(lsb, articulation)
                return lsb

            existing = self._registry.get_lsb(articulation)
            if existing is not None:
                return existing

            new_lsb = self._registry.get_next_free_lsb()
            self._registry.register_lsb(new_lsb, articulation)
            return new_lsb

        self._lines = [update_articulation(line, number) for line in self._lines]

    def number_lsbs(self, maintain: bool = False, renumber_definitions: bool = False) -> None:
        """Number all definition and articulation LSBs in the file.

        Args:
            maintain: Keep every articulation LSB that is not 0.
            renumber_definitions: Renumber every ``//def-lsb`` line, not
                just those set to 0.
        """
        self._number_definitions(renumber_definitions)
        self._number_articulations(maintain)
        logger.debug(
            "Numbered %d lines (maintain=%s, renumber_definitions=%s)",
            len(self._lines), maintain, renumber_definitions,
        )
        self._log("Finished numbering LSBs.")

    def articulations(self) -> List[Tuple[str, str]]:
        """All registered (LSB, articulation) pairs ordered by numeric LSB."""
        return self._registry.registered_lsbs()

    def output(self) -> str:
        """The processed Reabank file contents."""
        return "\n".join(self._lines)
