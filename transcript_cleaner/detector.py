"""Transcript layout detection.

WHY: Transcripts carry no format tag. The only way to pick a cleaner is
to ask each one whether the text looks like its layout, and the answer
depends on the order of asking: the .docx cleaner is defined by the
absence of the other layouts' markers, and the fallback says yes to
everything.

HOW: TranscriptDetector instantiates the registry in priority order and
returns the first cleaner whose can_handle() accepts the text. Because
the fallback always accepts, detection is total.

RULES:
- Priority: direct paste, downloaded, .docx export, simple fallback
- detect() never returns None and never raises
- The detector holds no per-call state; one instance can be shared
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from transcript_cleaner.cleaners import CLEANERS
from transcript_cleaner.cleaners.base import BaseCleaner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of detect_and_clean().

    Attributes:
        cleaner_name: Human-readable name of the selected cleaner.
        cleaned_text: Canonical text ("" when nothing was recognized).
        cleaner_key: Registry key of the selected cleaner.
    """

    cleaner_name: str
    cleaned_text: str
    cleaner_key: str


class TranscriptDetector:
    """Selects the cleaner for a transcript by probing in priority order."""

    def __init__(self, cleaners: Optional[Sequence[BaseCleaner]] = None) -> None:
        # Tests pass an explicit sequence to show that the order matters.
        if cleaners is None:
            cleaners = [cleaner_cls() for cleaner_cls in CLEANERS.values()]
        if not cleaners:
            raise ValueError("TranscriptDetector needs at least one cleaner")
        self._cleaners: List[BaseCleaner] = list(cleaners)

    def detect(self, content: str) -> BaseCleaner:
        """Return the first cleaner that accepts *content*."""
        for cleaner in self._cleaners:
            if cleaner.can_handle(content):
                logger.info("Detected transcript format: %s", cleaner.name)
                return cleaner

        # Unreachable with the default registry; the fallback accepts everything.
        fallback = self._cleaners[-1]
        logger.warning("No cleaner accepted the transcript, using %s", fallback.name)
        return fallback

    def detect_and_clean(self, content: str) -> DetectionResult:
        """Detect the layout and clean *content* in one call."""
        cleaner = self.detect(content)
        cleaned = cleaner.clean(content)
        if not cleaned and content.strip():
            logger.info("%s recognized no speaker turns", cleaner.name)
        return DetectionResult(
            cleaner_name=cleaner.name,
            cleaned_text=cleaned,
            cleaner_key=cleaner.key,
        )

    def available_cleaners(self) -> List[BaseCleaner]:
        """All cleaners in probe order (a copy)."""
        return list(self._cleaners)

    def get_cleaner(self, key: str) -> BaseCleaner:
        """Look up a cleaner by registry key.

        Raises:
            KeyError: If no cleaner has this key.
        """
        for cleaner in self._cleaners:
            if cleaner.key == key:
                return cleaner
        available = ", ".join(c.key for c in self._cleaners)
        raise KeyError("Unknown cleaner '{}'. Available cleaners: {}".format(key, available))
