"""Abstract base formatter and output container for LSB mappings.

WHY: ``--show`` prints the final LSB/articulation pairs after numbering.
People read them in a terminal, scripts want something machine-readable.
This base class keeps every mapping format behind one interface so the CLI
can pick one by name.

HOW: BaseFormatter is an ABC with two requirements, a ``name`` property and
a ``format()`` method. FormatterOutput bundles the rendered text with its
MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` receives pairs already ordered by numeric LSB and must keep
  that order
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class FormatterOutput:
    """Rendered LSB mapping.

    Attributes:
        content: The text to print.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all LSB mapping formatters.

    To add a new mapping format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Tab-separated'."""

    @abstractmethod
    def format(self, pairs: List[Tuple[str, str]]) -> FormatterOutput:
        """Render (LSB, articulation) pairs.

        Args:
            pairs: Registered pairs as returned by
                   ``ReabankNumberer.articulations()``.

        Returns:
            The rendered mapping.
        """
