"""Shared test fixtures for the transcript_cleaner test suite.

WHY: Several test modules need the same sample transcripts in each of
the four layouts, plus the canonical text they should all reduce to.
Centralizing them here keeps every test on the same authoritative data.

HOW: Module-level constants hold the raw samples; pytest fixtures hand
them out and build a fresh detector per test.

RULES:
- Every Teams sample describes the same two-turn conversation, so they
  all clean to CANONICAL_TWO_SPEAKERS
- Samples use "\\n" line endings; CRLF variants are built in the tests
"""

import pytest

from transcript_cleaner.detector import TranscriptDetector

CANONICAL_TWO_SPEAKERS = "John Smith\nHello everyone\n\nJane Doe\nHi John!"

DIRECT_PASTE_SAMPLE = (
    "John Smith\n"
    "10:30:45 AM → https://teams.microsoft.com/l/message/x\n"
    "Hello everyone\n"
    "\n"
    "Jane Doe\n"
    "10:31:20 AM → https://teams.microsoft.com/l/message/y\n"
    "Hi John!"
)

DOWNLOADED_SAMPLE = (
    "**John Smith** 10:30 AM\n"
    "Hello everyone\n"
    "\n"
    "**Jane Doe** 10:31 AM\n"
    "Hi John!"
)

DOCX_SAMPLE = (
    "    John Smith 10:30 AM\n"
    "    Hello everyone\n"
    "\n"
    "    Jane Doe 10:31 AM\n"
    "    Hi John!\n"
)

SIMPLE_SAMPLE = "Sarah Connor: We shipped the release.\nKyle Reese - Great work team."
SIMPLE_CANONICAL = "Sarah Connor\nWe shipped the release.\n\nKyle Reese\nGreat work team."

UNSTRUCTURED_SAMPLE = "just some free text\nwith no structure at all"

MEETING_NOTE = (
    "# Weekly Sync\n"
    "\n"
    "## Attendees\n"
    "- John Smith\n"
    "- Jane Doe\n"
    "\n"
    "## Transcript\n"
    + DOWNLOADED_SAMPLE + "\n"
    "\n"
    "## Action Items\n"
    "- Ship the release\n"
)


@pytest.fixture
def detector():
    """A detector with the default priority order."""
    return TranscriptDetector()


@pytest.fixture
def direct_paste_sample():
    return DIRECT_PASTE_SAMPLE


@pytest.fixture
def downloaded_sample():
    return DOWNLOADED_SAMPLE


@pytest.fixture
def docx_sample():
    return DOCX_SAMPLE


@pytest.fixture
def simple_sample():
    return SIMPLE_SAMPLE


@pytest.fixture
def meeting_note():
    """A markdown meeting note with a downloaded-layout transcript section."""
    return MEETING_NOTE


@pytest.fixture
def canonical_two_speakers():
    """What every Teams sample cleans to."""
    return CANONICAL_TWO_SPEAKERS


@pytest.fixture
def simple_canonical():
    return SIMPLE_CANONICAL


@pytest.fixture
def unstructured_sample():
    return UNSTRUCTURED_SAMPLE
