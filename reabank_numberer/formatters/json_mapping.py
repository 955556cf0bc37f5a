"""JSON LSB mapping formatter.

WHY: Scripts that post-process a numbered Reabank file (generating
keyswitch maps, checking several files against each other) need the
final LSB assignments in a structured form.

HOW: Each pair becomes ``{"lsb": <int>, "articulation": <str>}`` in a JSON
array. The array is validated against lsb_mapping_schema.json with
jsonschema before it is returned.

RULES:
- Array order is the numeric LSB order of the input pairs
- ``lsb`` is a JSON integer, not a string
- Non-ASCII articulation names are written as-is (ensure_ascii=False)
- Schema validation is mandatory; raises on invalid output
- Media type: "application/json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import jsonschema

from reabank_numberer.formatters.base import BaseFormatter, FormatterOutput

SCHEMA_PATH = Path(__file__).resolve().parent / "lsb_mapping_schema.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


class JsonMappingFormatter(BaseFormatter):
    """Renders the pairs as a JSON array of objects."""

    @property
    def name(self) -> str:
        return "JSON"

    def format(self, pairs: List[Tuple[str, str]]) -> FormatterOutput:
        """Render the pairs as JSON.

        Raises:
            jsonschema.ValidationError: If the generated JSON does not
                conform to the LSB mapping schema.
        """
        output = [
            {"lsb": int(lsb), "articulation": articulation}
            for lsb, articulation in pairs
        ]

        jsonschema.validate(instance=output, schema=_get_schema())

        return FormatterOutput(
            content=json.dumps(output, indent=2, ensure_ascii=False),
            media_type="application/json",
        )
