"""Abstract base cleaner.

WHY: The detector, CLI, and HTTP API all need to treat the four input
layouts generically: ask "is this yours?", then "clean it". This base
class fixes that interface and shares the parse-then-render step so a
cleaner only has to describe how its lines are scanned.

HOW: BaseCleaner is an ABC. Subclasses provide ``key`` and ``name``
properties, a ``can_handle()`` predicate, and a ``parse()`` method
returning SpeakerEntry objects. ``clean()`` is implemented here once:
parse, then render with the canonical formatter.

RULES:
- Cleaners are stateless; all scan state lives in a per-call EntryCollector
- ``can_handle()`` and ``clean()`` must never raise on any string input
- ``clean()`` returns "" when nothing is recognized
- Lines are split on "\\n" and stripped, so "\\r\\n" input behaves the same

To add a new input layout:
1. Create a new module in cleaners/
2. Subclass BaseCleaner, implement key, name, can_handle() and parse()
3. Register it in CLEANERS in cleaners/__init__.py at the right priority
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from transcript_cleaner.core.canonical import format_entries
from transcript_cleaner.core.ir import SpeakerEntry


class BaseCleaner(ABC):
    """Abstract base for all transcript cleaners."""

    @property
    @abstractmethod
    def key(self) -> str:
        """Registry identifier, e.g. 'teams_downloaded'."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable layout name, e.g. 'Teams Downloaded (Format 2)'."""

    @abstractmethod
    def can_handle(self, content: str) -> bool:
        """Return True if *content* plausibly uses this cleaner's layout."""

    @abstractmethod
    def parse(self, content: str) -> List[SpeakerEntry]:
        """Recover speaker turns from *content*, in input order."""

    def clean(self, content: str) -> str:
        """Parse *content* and render it in canonical form."""
        return format_entries(self.parse(content))

    def __repr__(self) -> str:
        return "{}(key={!r})".format(type(self).__name__, self.key)
