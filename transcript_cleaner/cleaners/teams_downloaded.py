"""Cleaner for transcripts downloaded from Teams.

WHY: The downloaded transcript fuses speaker and time into one bold
header line ("**John Smith** 10:30 AM"), with the utterance on the
following lines. Depending on the export path the bold is markdown
asterisks or an HTML <b> tag.

HOW: Each stripped line is searched (anywhere, not only at line start)
for bold text followed by an H:MM AM/PM time. A hit opens a new turn
with the bold text as speaker; anything else is content.

RULES:
- Asterisk bold is tried before <b> bold
- Text after the time on a header line is NOT content
- Detection only looks for the asterisk form
"""

from __future__ import annotations

import re
from typing import List, Optional

from transcript_cleaner.cleaners.base import BaseCleaner
from transcript_cleaner.core.canonical import EntryCollector
from transcript_cleaner.core.ir import SpeakerEntry

_BOLD_HEADER_RE = re.compile(r"\*\*([^*]+)\*\*\s+\d{1,2}:\d{2}\s+[AP]M")
_HTML_BOLD_HEADER_RE = re.compile(r"<b>([^<]+)</b>\s+\d{1,2}:\d{2}\s+[AP]M")


def extract_speaker(line: str) -> Optional[str]:
    """Return the bold speaker name from a header line, or None."""
    for pattern in (_BOLD_HEADER_RE, _HTML_BOLD_HEADER_RE):
        match = pattern.search(line)
        if match:
            return match.group(1).strip()
    return None


class TeamsDownloadedCleaner(BaseCleaner):
    """Bold "**Name** H:MM AM" header lines followed by utterance lines."""

    @property
    def key(self) -> str:
        return "teams_downloaded"

    @property
    def name(self) -> str:
        return "Teams Downloaded (Format 2)"

    def can_handle(self, content: str) -> bool:
        return _BOLD_HEADER_RE.search(content) is not None

    def parse(self, content: str) -> List[SpeakerEntry]:
        collector = EntryCollector()

        for raw in content.split("\n"):
            line = raw.strip()
            if not line:
                continue

            speaker = extract_speaker(line)
            if speaker:
                collector.start(speaker)
                continue

            collector.add(line)

        return collector.finish()
