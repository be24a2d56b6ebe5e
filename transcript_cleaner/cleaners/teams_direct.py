"""Cleaner for transcripts pasted straight out of the Teams meeting chat.

WHY: Copying a transcript from the Teams side panel produces the speaker
name on its own line, then a timestamp line carrying a message permalink,
then the utterance. Neither the timestamp nor the permalink belongs in
the cleaned output.

HOW: A line is a speaker line exactly when the line after it is a
timestamp+permalink line. That timestamp line is then skipped; every
other non-blank line is content for the current speaker.

Example input::

    John Smith
    10:30:45 AM → https://teams.microsoft.com/l/message/...
    Hello everyone

    Jane Doe
    10:31:20 AM → https://teams.microsoft.com/l/message/...
    Hi John!

RULES:
- Detection needs BOTH an H:MM:SS AM/PM timestamp and an arrow+permalink
- Timestamp lines are anchored at line start
- Timestamp lines never become content, even without a preceding speaker
"""

from __future__ import annotations

import re
from typing import List

from transcript_cleaner.cleaners.base import BaseCleaner
from transcript_cleaner.core.canonical import EntryCollector
from transcript_cleaner.core.ir import SpeakerEntry

_PERMALINK_RE = re.compile(r"→\s*https://teams\.microsoft\.com")
_LONG_TIMESTAMP_RE = re.compile(r"\d{1,2}:\d{2}:\d{2}\s+[AP]M")
_TIMESTAMP_LINE_RE = re.compile(
    r"^\d{1,2}:\d{2}:\d{2}\s+[AP]M\s*→\s*https://teams\.microsoft\.com"
)


def is_timestamp_line(line: str) -> bool:
    """True for a stripped ``10:30:45 AM → https://teams...`` line."""
    return _TIMESTAMP_LINE_RE.match(line) is not None


class TeamsDirectPasteCleaner(BaseCleaner):
    """Speaker line, timestamp+permalink line, then utterance lines."""

    @property
    def key(self) -> str:
        return "teams_direct_paste"

    @property
    def name(self) -> str:
        return "Teams Direct Paste (Format 1)"

    def can_handle(self, content: str) -> bool:
        return (
            _PERMALINK_RE.search(content) is not None
            and _LONG_TIMESTAMP_RE.search(content) is not None
        )

    def parse(self, content: str) -> List[SpeakerEntry]:
        lines = content.split("\n")
        collector = EntryCollector()
        skip_next = False

        for i, raw in enumerate(lines):
            line = raw.strip()
            if not line:
                continue

            if skip_next:
                skip_next = False
                continue

            if is_timestamp_line(line):
                continue

            next_line = lines[i + 1].strip() if i + 1 < len(lines) else ""
            if is_timestamp_line(next_line):
                collector.start(line)
                skip_next = True
                continue

            collector.add(line)

        return collector.finish()
