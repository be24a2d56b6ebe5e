"""Fallback cleaner for loosely formatted transcripts.

WHY: Hand-written notes, exports from other meeting tools, and partially
cleaned text all share a loose "Name: text" or "Name - text" convention,
often with times sprinkled in. When no specific layout is recognized this
cleaner still recovers whatever speaker turns it can.

HOW: Common timestamp shapes are removed from each line first. The
remaining text is tried against three speaker patterns in order:

1. ``Name: content`` (content optional)
2. ``Name - content`` (content required)
3. a bare ``Firstname Lastname`` line (speaker only)

Any other line is content for the current speaker.

RULES:
- can_handle() always returns True; it must be probed last
- Timestamps stripped: [H:MM], [H:MM:SS], (H:MM), (H:MM:SS),
  H:MM AM/PM anywhere (case-insensitive), and a leading bare H:MM[:SS]
- A bare "Name -" with nothing after it is not a speaker line
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from transcript_cleaner.cleaners.base import BaseCleaner
from transcript_cleaner.core.canonical import EntryCollector
from transcript_cleaner.core.ir import SpeakerEntry

# Applied in order; the leading bare time must run after the others.
_TIMESTAMP_PATTERNS = (
    re.compile(r"\[\d{1,2}:\d{2}(:\d{2})?\]"),
    re.compile(r"\(\d{1,2}:\d{2}(:\d{2})?\)"),
    re.compile(r"\d{1,2}:\d{2}\s*[AP]M", re.IGNORECASE),
)
_LEADING_TIME_RE = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?\s+")

_COLON_SPEAKER_RE = re.compile(r"^([A-Z][a-zA-Z\s'-]+?):\s*(.*)$")
_DASH_SPEAKER_RE = re.compile(r"^([A-Z][a-zA-Z\s'-]+?)\s*-\s*(.*)$")
_NAME_LINE_RE = re.compile(r"^[A-Z][a-z]+\s+[A-Z][a-z]")


def remove_timestamps(line: str) -> str:
    """Strip the known timestamp shapes from *line* and trim it."""
    for pattern in _TIMESTAMP_PATTERNS:
        line = pattern.sub("", line)
    line = _LEADING_TIME_RE.sub("", line, count=1)
    return line.strip()


def extract_speaker(line: str) -> Optional[Tuple[str, str]]:
    """Return (speaker, inline content) for a speaker line, else None.

    *line* must already have had its timestamps removed. Inline content
    is "" when the line only names the speaker.
    """
    match = _COLON_SPEAKER_RE.match(line)
    if match:
        return match.group(1).strip(), match.group(2).strip()

    match = _DASH_SPEAKER_RE.match(line)
    if match and match.group(2):
        return match.group(1).strip(), match.group(2).strip()

    if _NAME_LINE_RE.match(line):
        return line.strip(), ""

    return None


class SimpleTranscriptCleaner(BaseCleaner):
    """Colon, dash and bare-name speaker lines, with timestamps ignored."""

    @property
    def key(self) -> str:
        return "simple"

    @property
    def name(self) -> str:
        return "Simple/Generic (Format 4)"

    def can_handle(self, content: str) -> bool:
        return True

    def parse(self, content: str) -> List[SpeakerEntry]:
        collector = EntryCollector()

        for raw in content.split("\n"):
            line = raw.strip()
            if not line:
                continue

            stripped = remove_timestamps(line)
            if not stripped:
                continue

            found = extract_speaker(stripped)
            if found is not None:
                speaker, inline = found
                collector.start(speaker, inline or None)
                continue

            collector.add(stripped)

        return collector.finish()
