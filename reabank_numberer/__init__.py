"""Reabank LSB Numberer: unique, consistent LSBs for Reaticulate banks.

WHY: Reaticulate selects articulations by LSB. Libraries whose
articulations do not map onto a standard such as UACC end up with ad-hoc
numbers, and the same articulation name gets different LSBs in different
banks. This package renumbers a Reabank file so every articulation name
has exactly one LSB across the whole file.

HOW: Three layers. core/ parses LSB lines, keeps the LSB registry and runs
the two-pass numbering. formatters/ renders the final LSB mapping. cli.py
reads and writes files around the core.

RULES:
- The core works on strings only; all file I/O lives in the CLI
- ``//def-lsb`` definitions always win over articulation lines
- Lines the numberer does not recognise are never changed
"""

__version__ = "1.0.0"
