"""LSB mapping formatter registry.

WHY: The CLI's ``--show-format`` flag needs a single lookup to find the
right formatter by name. Adding a format means one new module and one new
line here.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["tsv"]()``.

RULES:
- Keys are the values accepted by ``--show-format``
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

from reabank_numberer.formatters.json_mapping import JsonMappingFormatter
from reabank_numberer.formatters.tsv import TsvFormatter

if TYPE_CHECKING:
    from reabank_numberer.formatters.base import BaseFormatter

FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    "tsv": TsvFormatter,
    "json": JsonMappingFormatter,
}
