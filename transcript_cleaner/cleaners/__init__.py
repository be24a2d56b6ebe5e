"""Cleaner registry in detection priority order.

WHY: The detector, CLI, and HTTP API need one place that lists every
cleaner and, crucially, the order in which they are probed. Layouts
overlap (the fallback accepts everything, the .docx cleaner is defined
by the absence of the others' markers), so the order decides which
cleaner wins.

HOW: CLEANERS maps string keys to cleaner *classes*, most specific first.
Dicts keep insertion order, so iteration order is priority order.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API requests)
- Values are BaseCleaner subclasses (not instances)
- SimpleTranscriptCleaner stays last; reordering is a behavior change
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from transcript_cleaner.cleaners.simple import SimpleTranscriptCleaner
from transcript_cleaner.cleaners.teams_direct import TeamsDirectPasteCleaner
from transcript_cleaner.cleaners.teams_docx import TeamsDocxCleaner
from transcript_cleaner.cleaners.teams_downloaded import TeamsDownloadedCleaner

if TYPE_CHECKING:
    from transcript_cleaner.cleaners.base import BaseCleaner

CLEANERS: dict[str, type[BaseCleaner]] = {
    "teams_direct_paste": TeamsDirectPasteCleaner,
    "teams_downloaded": TeamsDownloadedCleaner,
    "teams_docx": TeamsDocxCleaner,
    "simple": SimpleTranscriptCleaner,
}

__all__ = [
    "CLEANERS",
    "SimpleTranscriptCleaner",
    "TeamsDirectPasteCleaner",
    "TeamsDocxCleaner",
    "TeamsDownloadedCleaner",
]
