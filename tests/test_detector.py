"""Tests for layout detection and the detect-then-clean pipeline.

WHY: Detection order is part of the contract. The fallback accepts
everything and the .docx cleaner is defined by the absence of the other
layouts' markers, so a reordering silently reroutes real transcripts.

HOW: Tests run the reference scenarios end to end, check totality and
determinism, and build detectors with other orders to prove the default
order is load-bearing.
"""

import logging

import pytest

from transcript_cleaner.cleaners import (
    SimpleTranscriptCleaner,
    TeamsDirectPasteCleaner,
    TeamsDocxCleaner,
    TeamsDownloadedCleaner,
)
from transcript_cleaner.detector import DetectionResult, TranscriptDetector

# Carries both the downloaded header and the direct-paste permalink pairing.
DIRECT_AND_DOWNLOADED = (
    "**John Smith** 10:30 AM\n"
    "John Smith\n"
    "10:30:45 AM → https://teams.microsoft.com/l/message/x\n"
    "Hello everyone"
)

# Teams permalink pairing plus docx-style indentation.
DIRECT_WITH_INDENTATION = (
    "  John Smith\n"
    "  10:30:45 AM → https://teams.microsoft.com/l/message/x\n"
    "  Hello everyone\n"
    "\n"
    "  Jane Doe\n"
    "  10:31:20 AM → https://teams.microsoft.com/l/message/y\n"
    "  Hi John!"
)


class TestDetectionScenarios:
    """Reference inputs and the cleaner each must select."""

    def test_direct_paste(self, detector, direct_paste_sample, canonical_two_speakers):
        result = detector.detect_and_clean(direct_paste_sample)
        assert result.cleaner_name == "Teams Direct Paste (Format 1)"
        assert result.cleaner_key == "teams_direct_paste"
        assert result.cleaned_text == canonical_two_speakers

    def test_downloaded(self, detector, downloaded_sample, canonical_two_speakers):
        result = detector.detect_and_clean(downloaded_sample)
        assert result.cleaner_name == "Teams Downloaded (Format 2)"
        assert result.cleaned_text == canonical_two_speakers

    def test_docx(self, detector, docx_sample, canonical_two_speakers):
        result = detector.detect_and_clean(docx_sample)
        assert result.cleaner_name == "Teams .docx Export (Format 3)"
        assert result.cleaned_text == canonical_two_speakers

    def test_unstructured_falls_back_to_empty(self, detector, unstructured_sample):
        result = detector.detect_and_clean(unstructured_sample)
        assert result.cleaner_name == "Simple/Generic (Format 4)"
        assert result.cleaned_text == ""

    def test_simple(self, detector, simple_sample, simple_canonical):
        result = detector.detect_and_clean(simple_sample)
        assert result.cleaner_key == "simple"
        assert result.cleaned_text == simple_canonical

    def test_permalink_beats_indentation(self, detector, canonical_two_speakers):
        assert isinstance(detector.detect(DIRECT_WITH_INDENTATION), TeamsDirectPasteCleaner)
        assert not TeamsDocxCleaner().can_handle(DIRECT_WITH_INDENTATION)
        result = detector.detect_and_clean(DIRECT_WITH_INDENTATION)
        assert result.cleaned_text == canonical_two_speakers

    def test_result_type(self, detector, downloaded_sample):
        assert isinstance(detector.detect_and_clean(downloaded_sample), DetectionResult)


class TestDetectorProperties:

    @pytest.mark.parametrize("text", ["", " ", "\n\n", "x", "**", "→"])
    def test_detection_is_total(self, detector, text):
        assert detector.detect(text) is not None

    def test_empty_text_goes_to_fallback(self, detector):
        assert isinstance(detector.detect(""), SimpleTranscriptCleaner)

    def test_deterministic(self, detector, direct_paste_sample, docx_sample, simple_sample):
        for text in (direct_paste_sample, docx_sample, simple_sample):
            assert detector.detect_and_clean(text) == detector.detect_and_clean(text)

    def test_no_trailing_blank_lines(self, detector):
        text = "Alice: one\n\n\n\nBob: two\n\n\n\n\n"
        cleaned = detector.detect_and_clean(text).cleaned_text
        assert cleaned == "Alice\none\n\nBob\ntwo"

    def test_shared_detector_is_reusable(self, detector, downloaded_sample, simple_sample):
        first = detector.detect_and_clean(downloaded_sample)
        detector.detect_and_clean(simple_sample)
        assert detector.detect_and_clean(downloaded_sample) == first

    def test_logs_detected_format(self, detector, downloaded_sample, caplog):
        with caplog.at_level(logging.INFO, logger="transcript_cleaner.detector"):
            detector.detect(downloaded_sample)
        assert "Detected transcript format: Teams Downloaded (Format 2)" in caplog.text


class TestPriorityOrder:
    """The default order decides which cleaner wins on overlapping input."""

    def test_default_order(self, detector):
        keys = [c.key for c in detector.available_cleaners()]
        assert keys == ["teams_direct_paste", "teams_downloaded", "teams_docx", "simple"]

    def test_available_cleaners_is_a_copy(self, detector):
        detector.available_cleaners().clear()
        assert len(detector.available_cleaners()) == 4

    def test_default_order_picks_direct_paste(self, detector):
        assert detector.detect(DIRECT_AND_DOWNLOADED).key == "teams_direct_paste"
        assert detector.detect_and_clean(DIRECT_AND_DOWNLOADED).cleaned_text == (
            "John Smith\nHello everyone"
        )

    def test_swapped_order_changes_classification(self):
        swapped = TranscriptDetector([
            TeamsDownloadedCleaner(),
            TeamsDirectPasteCleaner(),
            TeamsDocxCleaner(),
            SimpleTranscriptCleaner(),
        ])
        assert swapped.detect(DIRECT_AND_DOWNLOADED).key == "teams_downloaded"

    def test_fallback_first_swallows_everything(self, docx_sample):
        fallback_first = TranscriptDetector([
            SimpleTranscriptCleaner(),
            TeamsDirectPasteCleaner(),
            TeamsDownloadedCleaner(),
            TeamsDocxCleaner(),
        ])
        assert fallback_first.detect(docx_sample).key == "simple"

    def test_empty_cleaner_list_rejected(self):
        with pytest.raises(ValueError):
            TranscriptDetector([])

    def test_falls_back_to_last_cleaner_when_none_accepts(self):
        only_teams = TranscriptDetector([TeamsDirectPasteCleaner(), TeamsDocxCleaner()])
        assert only_teams.detect("nothing here").key == "teams_docx"


class TestGetCleaner:

    def test_known_key(self, detector):
        assert isinstance(detector.get_cleaner("teams_docx"), TeamsDocxCleaner)

    def test_unknown_key(self, detector):
        with pytest.raises(KeyError, match="Unknown cleaner 'nope'"):
            detector.get_cleaner("nope")
