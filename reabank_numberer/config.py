"""Configuration defaults and .env loading.

WHY: People who always run the numberer the same way (for example always
maintaining existing LSBs so their projects keep working) should not have
to repeat the flags on every run. Defaults live in one place where both
humans and coding agents can find and change them.

HOW: python-dotenv loads the .env file on import. Each default is a
module-level constant read from the environment with a fallback.

RULES:
- All defaults can be overridden via environment variables or .env
- Boolean variables are true only when set to "true" (case-insensitive)
- Command-line flags can switch a policy on, never off
- SHOW_FORMATS lists the keys accepted by --show-format
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the directory the numberer is run from
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() == "true"


# ---------------------------------------------------------------------------
# File handling
# ---------------------------------------------------------------------------

DEFAULT_ENCODING = os.getenv("REABANK_ENCODING", "utf-8")
"""Encoding used to read and write Reabank files."""

# ---------------------------------------------------------------------------
# Numbering policy defaults
# ---------------------------------------------------------------------------

DEFAULT_MAINTAIN = _env_flag("REABANK_MAINTAIN")
DEFAULT_RESET = _env_flag("REABANK_RESET")

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

SHOW_FORMATS = ("tsv", "json")
DEFAULT_SHOW_FORMAT = os.getenv("REABANK_SHOW_FORMAT", "tsv").strip().lower()
DEFAULT_LOG_LEVEL = os.getenv("REABANK_LOG_LEVEL", "WARNING").strip().upper()
