"""Canonical rendering and per-call turn accumulation.

WHY: The canonical "Name / utterance / blank line" shape is what callers
diff, splice into notes, and feed to summarizers. It must be byte-for-byte
identical regardless of which layout it was recovered from, so the
rendering lives in exactly one place.

HOW: EntryCollector holds the mutable state of a single parse call
(current speaker plus pending lines) and emits SpeakerEntry objects on
each speaker change. format_entries() renders the result.

RULES:
- A collector is created per parse call and never stored on a cleaner
- A turn with no content lines is dropped, never emitted
- Lines seen before the first speaker are discarded
- Output never ends with a blank line
"""

from __future__ import annotations

from typing import List, Optional

from transcript_cleaner.core.ir import SpeakerEntry


class EntryCollector:
    """Accumulates lines into speaker turns while a cleaner scans its input."""

    def __init__(self) -> None:
        self.entries: List[SpeakerEntry] = []
        self._speaker: Optional[str] = None
        self._lines: List[str] = []

    def start(self, speaker: str, first_line: Optional[str] = None) -> None:
        """Close the current turn and open a new one for *speaker*."""
        self._flush()
        self._speaker = speaker
        self._lines = [first_line] if first_line else []

    def add(self, line: str) -> None:
        """Attach *line* to the open turn; orphan lines are dropped."""
        if self._speaker:
            self._lines.append(line)

    def finish(self) -> List[SpeakerEntry]:
        """Close the last turn and return all collected entries."""
        self._flush()
        self._speaker = None
        return self.entries

    def _flush(self) -> None:
        if not self._speaker or not self._lines:
            return
        content = "\n".join(self._lines).strip()
        if content:
            self.entries.append(SpeakerEntry(speaker=self._speaker, content=content))
        self._lines = []


def format_entries(entries: List[SpeakerEntry]) -> str:
    """Render entries into canonical text.

    Each entry becomes its speaker line, its content line(s) and a blank
    separator. Trailing blank lines are removed, so zero entries render
    as an empty string.
    """
    formatted: List[str] = []
    for entry in entries:
        if not entry.content:
            continue
        formatted.append(entry.speaker)
        formatted.append(entry.content)
        formatted.append("")

    while formatted and formatted[-1] == "":
        formatted.pop()

    return "\n".join(formatted)
