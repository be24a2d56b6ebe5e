"""Transcript section handling for markdown meeting notes.

WHY: Transcripts usually live inside a larger meeting note, under a
"## Transcript" heading next to attendees, action items, and summaries.
Only that section should be rewritten; everything else in the note must
survive byte-for-byte. And since a cleaner that recognizes nothing
returns "", the caller has to refuse to replace a real transcript with
an empty one.

HOW: A regex locates the section body (heading to the next "##" heading
or end of text). clean_note() extracts it, runs the detector, and
splices the canonical text back in, returning a NoteCleanResult that
says what happened and why.

RULES:
- Only the first transcript section is touched
- Notes with a non-empty summary section are skipped by default
- Sections shorter than MIN_TRANSCRIPT_LENGTH are skipped
- An empty cleaning result never replaces the original text
- The replaced section is written as "<heading>\\n\\n<cleaned>\\n\\n"
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from transcript_cleaner.config import (
    MIN_TRANSCRIPT_LENGTH,
    SKIP_IF_SUMMARY,
    SUMMARY_HEADING,
    TRANSCRIPT_HEADING,
)
from transcript_cleaner.detector import TranscriptDetector

logger = logging.getLogger(__name__)

REASON_CLEANED = "cleaned"
REASON_NO_SECTION = "no_section"
REASON_TOO_SHORT = "too_short"
REASON_HAS_SUMMARY = "has_summary"
REASON_EMPTY_RESULT = "empty_result"


@dataclass(frozen=True)
class NoteCleanResult:
    """Outcome of clean_note().

    Attributes:
        document: The updated note, or the original when nothing changed.
        changed: True only when the transcript section was replaced.
        cleaner_name: Name of the cleaner used, None if cleaning never ran.
        reason: One of the REASON_* constants.
    """

    document: str
    changed: bool
    cleaner_name: Optional[str]
    reason: str


def _section_pattern(heading: str) -> re.Pattern:
    return re.compile(re.escape(heading) + r"[ \t]*\n(.*?)(?=\n##|\Z)", re.DOTALL)


def extract_section(document: str, heading: str) -> Optional[str]:
    """Return the stripped body under *heading*, or None if it is absent."""
    match = _section_pattern(heading).search(document)
    if match is None:
        return None
    return match.group(1).strip()


def extract_transcript_section(document: str, heading: str = TRANSCRIPT_HEADING) -> Optional[str]:
    return extract_section(document, heading)


def has_summary(document: str, heading: str = SUMMARY_HEADING) -> bool:
    """True if the note has a summary section with any content."""
    body = extract_section(document, heading)
    return bool(body)


def replace_transcript_section(
    document: str,
    cleaned: str,
    heading: str = TRANSCRIPT_HEADING,
) -> str:
    """Replace the first transcript section of *document* with *cleaned*.

    Text before the heading and from the next "\\n##" onward is kept as is.
    Returns *document* unchanged if there is no transcript section.
    """
    replacement = "{}\n\n{}\n\n".format(heading, cleaned)
    # A function replacement keeps backslashes in the transcript literal.
    return _section_pattern(heading).sub(lambda _match: replacement, document, count=1)


def clean_note(
    document: str,
    detector: Optional[TranscriptDetector] = None,
    heading: str = TRANSCRIPT_HEADING,
    summary_heading: str = SUMMARY_HEADING,
    min_length: int = MIN_TRANSCRIPT_LENGTH,
    skip_if_summary: bool = SKIP_IF_SUMMARY,
) -> NoteCleanResult:
    """Clean the transcript section of a meeting note.

    Args:
        document: Full markdown note.
        detector: Detector to use; a default one is created if omitted.
        heading: Heading line that starts the transcript section.
        summary_heading: Heading of the summary section checked when
                         *skip_if_summary* is set.
        min_length: Minimum stripped section length worth cleaning.
        skip_if_summary: Leave the note alone if it already has a summary.

    Returns:
        NoteCleanResult describing the new document and what happened.
    """
    if skip_if_summary and has_summary(document, summary_heading):
        logger.info("Note already has a summary, skipping transcript cleaning")
        return NoteCleanResult(document, False, None, REASON_HAS_SUMMARY)

    section = extract_transcript_section(document, heading)
    if section is None:
        logger.info("No transcript section found")
        return NoteCleanResult(document, False, None, REASON_NO_SECTION)

    if len(section) < min_length:
        logger.info("Transcript section is empty or too short")
        return NoteCleanResult(document, False, None, REASON_TOO_SHORT)

    if detector is None:
        detector = TranscriptDetector()
    result = detector.detect_and_clean(section)

    if not result.cleaned_text:
        logger.warning(
            "%s produced no output, keeping the original transcript", result.cleaner_name
        )
        return NoteCleanResult(document, False, result.cleaner_name, REASON_EMPTY_RESULT)

    logger.info("Cleaned transcript using: %s", result.cleaner_name)
    updated = replace_transcript_section(document, result.cleaned_text, heading)
    return NoteCleanResult(updated, updated != document, result.cleaner_name, REASON_CLEANED)
