"""Intermediate representation for recovered speaker turns.

WHY: Each input layout marks speakers differently, but once a turn has
been recognized it is just "who spoke" and "what they said". A single
dataclass lets every cleaner hand the same shape to the formatter.

RULES:
- speaker is never empty in an emitted entry
- content is the turn's lines joined by newline, stripped, never empty
- Entries keep input order; same-named speakers are never merged
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SpeakerEntry:
    """One speaker turn recovered from a transcript.

    Attributes:
        speaker: Display name or generic label ("Speaker 1").
        content: Everything the speaker said in this turn, one source
                 line per output line.
    """

    speaker: str
    content: str
