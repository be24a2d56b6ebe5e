"""Cleaner for transcripts exported from Teams as .docx and pasted as text.

WHY: The .docx export loses all markup. What survives is indentation,
a "Name H:MM AM" header line, and sometimes the first words of the turn
on the same line as the time.

HOW: Detection is by elimination: a short H:MM AM/PM time and indented
lines, but neither a Teams permalink nor bold markup (those belong to
the direct-paste and downloaded layouts). Parsing matches a capitalized
name followed by the time; trailing text after the time opens the turn.

Example input::

        John Smith 10:30 AM
        Hello everyone

        Jane Doe 10:31 AM - Hi John!

RULES:
- The detection predicate is kept exactly as tuned against real exports;
  incidental asterisks or a quoted teams.microsoft.com link disqualify it
- Header lines are matched after stripping indentation
- Non-empty text after the time becomes the turn's first content line
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from transcript_cleaner.cleaners.base import BaseCleaner
from transcript_cleaner.core.canonical import EntryCollector
from transcript_cleaner.core.ir import SpeakerEntry

_TIME_RE = re.compile(r"\d{1,2}:\d{2}\s+[AP]M")
_INDENTED_LINE_RE = re.compile(r"^\s{2,}", re.MULTILINE)
_TEAMS_URL_RE = re.compile(r"teams\.microsoft\.com")
_BOLD_RE = re.compile(r"\*\*[^*]+\*\*")
_HEADER_RE = re.compile(r"^([A-Z][a-zA-Z\s'-]+?)\s+(\d{1,2}:\d{2}\s+[AP]M)(.*)$")


def extract_header(line: str) -> Optional[Tuple[str, str]]:
    """Split a "Name H:MM AM [rest]" line into (speaker, rest), or None."""
    match = _HEADER_RE.match(line)
    if match is None:
        return None
    return match.group(1).strip(), match.group(3).strip()


class TeamsDocxCleaner(BaseCleaner):
    """Indented plain text with "Name H:MM AM" header lines."""

    @property
    def key(self) -> str:
        return "teams_docx"

    @property
    def name(self) -> str:
        return "Teams .docx Export (Format 3)"

    def can_handle(self, content: str) -> bool:
        return (
            _TIME_RE.search(content) is not None
            and _TEAMS_URL_RE.search(content) is None
            and _BOLD_RE.search(content) is None
            and _INDENTED_LINE_RE.search(content) is not None
        )

    def parse(self, content: str) -> List[SpeakerEntry]:
        collector = EntryCollector()

        for raw in content.split("\n"):
            line = raw.strip()
            if not line:
                continue

            header = extract_header(line)
            if header is not None:
                speaker, rest = header
                collector.start(speaker, rest or None)
                continue

            collector.add(line)

        return collector.finish()
