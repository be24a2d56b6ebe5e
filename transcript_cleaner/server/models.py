"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint has its own request and response model. All fields
carry Field descriptions so the /docs page is self-explanatory.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Cleaner keys match keys in transcript_cleaner.cleaners.CLEANERS exactly
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class CleanRequest(BaseModel):
    """Raw transcript text to clean."""

    text: str = Field(description="Transcript text in any supported layout.")
    cleaner: Optional[str] = Field(
        default=None,
        description="Force a cleaner by key instead of detecting one.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "text": "**John Smith** 10:30 AM\nHello everyone\n\n**Jane Doe** 10:31 AM\nHi John!",
            }
        ]
    }}


class DetectRequest(BaseModel):
    """Transcript text whose layout should be identified."""

    text: str = Field(description="Transcript text in any supported layout.")


class NoteCleanRequest(BaseModel):
    """A full markdown meeting note."""

    document: str = Field(description="Markdown note containing a transcript section.")
    skip_if_summary: Optional[bool] = Field(
        default=None,
        description="Leave the note alone if it already has a summary. "
                    "Defaults to the server's SKIP_IF_SUMMARY setting.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class CleanResponse(BaseModel):
    """Canonical transcript produced by a cleaner.

    RULES:
    - empty is True when no speaker turns were recognized; callers should
      then keep their original text rather than replace it with ""
    """

    cleaner: str = Field(description="Human-readable name of the cleaner used.")
    cleaner_key: str = Field(description="Registry key of the cleaner used.")
    cleaned: str = Field(description="Canonical 'Speaker / utterance' text.")
    empty: bool = Field(description="True if nothing was recognized.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "cleaner": "Teams Downloaded (Format 2)",
                "cleaner_key": "teams_downloaded",
                "cleaned": "John Smith\nHello everyone\n\nJane Doe\nHi John!",
                "empty": False,
            }
        ]
    }}


class DetectResponse(BaseModel):
    cleaner: str = Field(description="Human-readable name of the detected cleaner.")
    cleaner_key: str = Field(description="Registry key of the detected cleaner.")


class NoteCleanResponse(BaseModel):
    """Updated note and what happened to its transcript section."""

    document: str = Field(description="The note, updated or unchanged.")
    changed: bool = Field(description="True if the transcript section was replaced.")
    cleaner: Optional[str] = Field(
        default=None,
        description="Cleaner used, absent when cleaning was skipped before detection.",
    )
    reason: str = Field(
        description="One of: cleaned, no_section, too_short, has_summary, empty_result.",
    )


class CleanerInfo(BaseModel):
    """Description of a registered cleaner."""

    key: str = Field(description="Cleaner identifier used in API requests.")
    name: str = Field(description="Human-readable cleaner name.")
    priority: int = Field(description="Detection order, 1 is probed first.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
