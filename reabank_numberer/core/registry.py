"""Bidirectional LSB/articulation registry with conflict warnings.

WHY: Every articulation name must map to exactly one LSB across the whole
Reabank file, and every LSB to exactly one articulation. The numberer fills
the registry as it walks the file and consults it to reuse LSBs for names it
has already seen and to find LSBs nobody has claimed yet.

HOW: Two dicts (LSB -> articulation and articulation -> LSB) checked
independently on every registration. The first binding for a key wins; a
conflicting binding is refused and reported through the warning sink. A
per-key record of the last reported pair keeps identical conflicts from
being reported again. get_next_free_lsb() walks up from a cursor until it
finds an LSB missing from the LSB -> articulation dict.

RULES:
- LSBs are kept as the decimal strings found in the file
- First registration for a key always wins
- One warning per distinct conflicting pair; exact repeats are silent
- get_next_free_lsb() never registers the LSB it returns
- registered_lsbs() orders by numeric LSB, not string order
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

WarningSink = Callable[..., None]


class LsbRegistry:
    """Keeps track of which LSBs belong to which articulations.

    Args:
        warn: Called with a %-style message and its arguments for every new
            conflict. Defaults to this module's ``logger.warning``.
    """

    def __init__(self, warn: Optional[WarningSink] = None) -> None:
        self._warn = warn if warn is not None else logger.warning
        self._lsb_articulations: Dict[str, str] = {}
        self._articulation_lsbs: Dict[str, str] = {}
        # Key is the conflicting articulation / LSB, value the last pair warned about
        self._warned_lsb_conflicts: Dict[str, Tuple[str, str]] = {}
        self._warned_articulation_conflicts: Dict[str, Tuple[str, str]] = {}
        self._last_lsb = 0

    def _warn_conflicting_lsb(self, lsb1: str, lsb2: str, articulation: str) -> None:
        warned = self._warned_lsb_conflicts.get(articulation)
        if warned is not None and warned[0] == lsb1 and warned[1] == lsb2:
            return
        self._warn(
            "Conflicting LSBs %s and %s for articulation %s.",
            lsb1, lsb2, articulation,
        )
        self._warned_lsb_conflicts[articulation] = (lsb1, lsb2)

    def _warn_conflicting_articulation(
        self, articulation1: str, articulation2: str, lsb: str,
    ) -> None:
        warned = self._warned_articulation_conflicts.get(lsb)
        if warned is not None and warned[0] == articulation1 and warned[1] == articulation2:
            return
        self._warn(
            "Conflicting articulations %s and %s for LSB %s.",
            articulation1, articulation2, lsb,
        )
        self._warned_articulation_conflicts[lsb] = (articulation1, articulation2)

    def register_lsb(self, lsb: str, articulation: str) -> None:
        """Bind an LSB and an articulation to each other.

        WHY: Registration both records a decision and reserves the LSB so
        the free-LSB search skips it.

        HOW: Each direction is checked on its own. An unbound key gets
        bound; a key already bound to something else keeps its binding and
        the conflict is reported.

        RULES:
        - Identical repeat registrations are silent no-ops
        - A conflict in one direction does not stop the other direction
          from being bound if it is still free
        """
        found_articulation = self._lsb_articulations.get(lsb)
        if found_articulation is None:
            self._lsb_articulations[lsb] = articulation
        elif found_articulation != articulation:
            self._warn_conflicting_articulation(found_articulation, articulation, lsb)

        found_lsb = self._articulation_lsbs.get(articulation)
        if found_lsb is None:
            self._articulation_lsbs[articulation] = lsb
        elif found_lsb != lsb:
            self._warn_conflicting_lsb(found_lsb, lsb, articulation)

    def has_articulation(self, lsb: str) -> bool:
        """Whether an articulation is registered for the given LSB."""
        return lsb in self._lsb_articulations

    def get_articulation(self, lsb: str) -> Optional[str]:
        """The articulation registered for the LSB, or None."""
        return self._lsb_articulations.get(lsb)

    def has_lsb(self, articulation: str) -> bool:
        """Whether an LSB is registered for the given articulation."""
        return articulation in self._articulation_lsbs

    def get_lsb(self, articulation: str) -> Optional[str]:
        """The LSB registered for the articulation, or None."""
        return self._articulation_lsbs.get(articulation)

    def get_next_free_lsb(self) -> str:
        """Return the next LSB above the cursor that has no articulation.

        The cursor moves to the returned LSB whether or not the caller
        registers it, so two calls without a registration in between return
        two different LSBs.
        """
        lsb = self._last_lsb + 1
        while str(lsb) in self._lsb_articulations:
            lsb += 1
        self._last_lsb = lsb
        return str(lsb)

    def registered_lsbs(self) -> List[Tuple[str, str]]:
        """All (LSB, articulation) pairs ordered by numeric LSB."""
        return sorted(self._lsb_articulations.items(), key=lambda item: int(item[0]))
