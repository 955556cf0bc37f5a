"""Shared test fixtures for the reabank_numberer test suite.

WHY: The numberer, CLI and formatter tests all need the same sample
Reabank file and the expected results for each policy combination.
Centralizing them here keeps every test module checking against one
authoritative table.

HOW: Module-level constants hold the sample input, the four expected
outputs and the four expected LSB mappings. Fixtures hand them out, and
``scenario`` bundles (maintain, renumber_definitions, output, mapping)
for parametrized tests.

RULES:
- The sample contains malformed near-miss lines (``// def-lsb``,
  ``//def-lsbX``, ``//def-lsb X``, ``//def-lsb 7``) that must never change.
- Definitions appear both before and after articulation lines.
- Mappings are (LSB, articulation) tuples ordered by numeric LSB.
"""

from typing import List, NamedTuple, Tuple

import pytest

REABANK_INPUT = """
//-------------------------
// Source: user - https://forum.cockos.com/showpost.php?p=123456789&postcount=100
//
// def-lsb 1 Articulation A
//def-lsbX 1 Articulation A
//def-lsb X Articulation A
//def-lsb 7
//def-lsb 5 Articulation A
//def-lsb 0 Articulation B

//! g="Publisher/Library" n="Instrument 1"
//! m="Informational Message"
Bank 1 1 PB-LB - Instrument 1 Multi
//! c=short-dark i=pizz o=@1
1 Articulation A
//! c=legato i=legato o=@2
2 Articulation B
//! c=short-light i=staccato o=note@3:24
17 Articulation C - C1
//! c=short i=spiccato o=note@3:25
15 Articulation D - C#1
//def-lsb 1 Articulation C
//def-lsb 0 Articulation D
//! c=long-dark i=accented-quarter o=note@3:26
22 Articulation E - D1
//! c=short-light i=tremolo-measured o=note@3:27
0 Articulation F - D#1
"""

OUTPUT_DEFAULT = """
//-------------------------
// Source: user - https://forum.cockos.com/showpost.php?p=123456789&postcount=100
//
// def-lsb 1 Articulation A
//def-lsbX 1 Articulation A
//def-lsb X Articulation A
//def-lsb 7
//def-lsb 5 Articulation A
//def-lsb 2 Articulation B

//! g="Publisher/Library" n="Instrument 1"
//! m="Informational Message"
Bank 1 1 PB-LB - Instrument 1 Multi
//! c=short-dark i=pizz o=@1
5 Articulation A
//! c=legato i=legato o=@2
2 Articulation B
//! c=short-light i=staccato o=note@3:24
1 Articulation C - C1
//! c=short i=spiccato o=note@3:25
3 Articulation D - C#1
//def-lsb 1 Articulation C
//def-lsb 3 Articulation D
//! c=long-dark i=accented-quarter o=note@3:26
4 Articulation E - D1
//! c=short-light i=tremolo-measured o=note@3:27
6 Articulation F - D#1
"""

MAPPING_DEFAULT: List[Tuple[str, str]] = [
    ("1", "Articulation C"),
    ("2", "Articulation B"),
    ("3", "Articulation D"),
    ("4", "Articulation E"),
    ("5", "Articulation A"),
    ("6", "Articulation F"),
]

OUTPUT_MAINTAIN = """
//-------------------------
// Source: user - https://forum.cockos.com/showpost.php?p=123456789&postcount=100
//
// def-lsb 1 Articulation A
//def-lsbX 1 Articulation A
//def-lsb X Articulation A
//def-lsb 7
//def-lsb 5 Articulation A
//def-lsb 2 Articulation B

//! g="Publisher/Library" n="Instrument 1"
//! m="Informational Message"
Bank 1 1 PB-LB - Instrument 1 Multi
//! c=short-dark i=pizz o=@1
1 Articulation A
//! c=legato i=legato o=@2
2 Articulation B
//! c=short-light i=staccato o=note@3:24
17 Articulation C - C1
//! c=short i=spiccato o=note@3:25
15 Articulation D - C#1
//def-lsb 1 Articulation C
//def-lsb 3 Articulation D
//! c=long-dark i=accented-quarter o=note@3:26
22 Articulation E - D1
//! c=short-light i=tremolo-measured o=note@3:27
4 Articulation F - D#1
"""

MAPPING_MAINTAIN: List[Tuple[str, str]] = [
    ("1", "Articulation C"),
    ("2", "Articulation B"),
    ("3", "Articulation D"),
    ("4", "Articulation F"),
    ("5", "Articulation A"),
    ("15", "Articulation D"),
    ("17", "Articulation C"),
    ("22", "Articulation E"),
]

OUTPUT_RENUMBER_DEFS = """
//-------------------------
// Source: user - https://forum.cockos.com/showpost.php?p=123456789&postcount=100
//
// def-lsb 1 Articulation A
//def-lsbX 1 Articulation A
//def-lsb X Articulation A
//def-lsb 7
//def-lsb 1 Articulation A
//def-lsb 2 Articulation B

//! g="Publisher/Library" n="Instrument 1"
//! m="Informational Message"
Bank 1 1 PB-LB - Instrument 1 Multi
//! c=short-dark i=pizz o=@1
1 Articulation A
//! c=legato i=legato o=@2
2 Articulation B
//! c=short-light i=staccato o=note@3:24
3 Articulation C - C1
//! c=short i=spiccato o=note@3:25
4 Articulation D - C#1
//def-lsb 3 Articulation C
//def-lsb 4 Articulation D
//! c=long-dark i=accented-quarter o=note@3:26
5 Articulation E - D1
//! c=short-light i=tremolo-measured o=note@3:27
6 Articulation F - D#1
"""

MAPPING_RENUMBER_DEFS: List[Tuple[str, str]] = [
    ("1", "Articulation A"),
    ("2", "Articulation B"),
    ("3", "Articulation C"),
    ("4", "Articulation D"),
    ("5", "Articulation E"),
    ("6", "Articulation F"),
]

OUTPUT_MAINTAIN_RENUMBER_DEFS = """
//-------------------------
// Source: user - https://forum.cockos.com/showpost.php?p=123456789&postcount=100
//
// def-lsb 1 Articulation A
//def-lsbX 1 Articulation A
//def-lsb X Articulation A
//def-lsb 7
//def-lsb 1 Articulation A
//def-lsb 2 Articulation B

//! g="Publisher/Library" n="Instrument 1"
//! m="Informational Message"
Bank 1 1 PB-LB - Instrument 1 Multi
//! c=short-dark i=pizz o=@1
1 Articulation A
//! c=legato i=legato o=@2
2 Articulation B
//! c=short-light i=staccato o=note@3:24
17 Articulation C - C1
//! c=short i=spiccato o=note@3:25
15 Articulation D - C#1
//def-lsb 3 Articulation C
//def-lsb 4 Articulation D
//! c=long-dark i=accented-quarter o=note@3:26
22 Articulation E - D1
//! c=short-light i=tremolo-measured o=note@3:27
5 Articulation F - D#1
"""

MAPPING_MAINTAIN_RENUMBER_DEFS: List[Tuple[str, str]] = [
    ("1", "Articulation A"),
    ("2", "Articulation B"),
    ("3", "Articulation C"),
    ("4", "Articulation D"),
    ("5", "Articulation F"),
    ("15", "Articulation D"),
    ("17", "Articulation C"),
    ("22", "Articulation E"),
]


class Scenario(NamedTuple):
    """One policy combination and its expected results."""

    maintain: bool
    renumber_definitions: bool
    output: str
    mapping: List[Tuple[str, str]]


SCENARIOS = {
    "default": Scenario(False, False, OUTPUT_DEFAULT, MAPPING_DEFAULT),
    "maintain": Scenario(True, False, OUTPUT_MAINTAIN, MAPPING_MAINTAIN),
    "renumber_definitions": Scenario(False, True, OUTPUT_RENUMBER_DEFS, MAPPING_RENUMBER_DEFS),
    "maintain_renumber_definitions": Scenario(
        True, True, OUTPUT_MAINTAIN_RENUMBER_DEFS, MAPPING_MAINTAIN_RENUMBER_DEFS,
    ),
}


@pytest.fixture
def reabank_input():
    """The sample Reabank file shared by all numbering tests."""
    return REABANK_INPUT


@pytest.fixture(params=sorted(SCENARIOS))
def scenario(request):
    """Each policy combination with its expected output and mapping."""
    return SCENARIOS[request.param]


@pytest.fixture
def reabank_file(tmp_path, reabank_input):
    """The sample Reabank file written to a temporary directory."""
    path = tmp_path / "Reaticulate.reabank"
    path.write_text(reabank_input, encoding="utf-8")
    return path
