"""Configuration constants and .env loading.

WHY: Section headings, the minimum transcript length, and server
settings differ between note vaults and deployments. Keeping them as
plain module-level values, overridable from the environment, makes
them easy to find and change without touching the cleaning logic.

HOW: python-dotenv loads the .env file on import. Each setting is read
from the environment with a default. Integer settings go through
load_int_setting() so a typo fails loudly instead of silently.

RULES:
- The cleaning engine itself reads no configuration; only the note
  helpers, CLI, and HTTP API do
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def load_int_setting(name: str, default: int) -> int:
    """Read an integer environment variable.

    Raises ValueError naming the variable if the value is not an integer.
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "{} must be an integer, got {!r}. Fix it in the environment or .env file.".format(
                name, raw
            )
        ) from None


def load_bool_setting(name: str, default: bool) -> bool:
    """Read a boolean environment variable ("true"/"false", "1"/"0", "yes"/"no").

    Raises ValueError naming the variable for any other value.
    """
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(
        "{} must be true or false, got {!r}. Fix it in the environment or .env file.".format(
            name, raw
        )
    )


# ---------------------------------------------------------------------------
# Meeting note sections
# ---------------------------------------------------------------------------

TRANSCRIPT_HEADING = os.getenv("TRANSCRIPT_HEADING", "## Transcript")
SUMMARY_HEADING = os.getenv("SUMMARY_HEADING", "## Copilot Summary")

MIN_TRANSCRIPT_LENGTH = load_int_setting("MIN_TRANSCRIPT_LENGTH", 10)
"""Transcript sections shorter than this (after stripping) are left alone."""

SKIP_IF_SUMMARY = load_bool_setting("SKIP_IF_SUMMARY", True)
"""Leave the transcript untouched when the note already has a summary."""

# ---------------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------------

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = load_int_setting("API_PORT", 8000)
MAX_REQUEST_CHARS = load_int_setting("MAX_REQUEST_CHARS", 2_000_000)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
