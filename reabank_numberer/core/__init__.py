"""Core parsing, registry and numbering modules.

WHY: The core package holds all of the numbering logic. It takes the
contents of a Reabank file as a string and gives back the rewritten string
and the LSB mapping, so it can be tested without touching the filesystem.

HOW: parser.py matches LSB lines and rebuilds them with new LSBs,
registry.py keeps the LSB/articulation bindings and finds free LSBs,
numberer.py runs the definitions and articulations passes.

RULES:
- No file I/O and no printing in the core
- Conflicts are reported through logging, never raised
"""

from reabank_numberer.core.numberer import ReabankNumberer
from reabank_numberer.core.registry import LsbRegistry

__all__ = ["ReabankNumberer", "LsbRegistry"]
