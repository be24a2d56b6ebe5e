"""Transcript Cleaner: format-sniffing meeting transcript normalizer.

WHY: Meeting transcripts arrive in several messy layouts (Teams direct
paste, Teams download, .docx export, ad-hoc "Name: text" notes). Nothing
downstream can rely on a consistent shape until the speaker turns are
recovered. This package recognizes the layout without a format tag and
rewrites it into one canonical "speaker / utterance" form.

HOW: Three-stage pipeline: detect (probe cleaners in priority order),
parse (cleaner-specific line scanner into SpeakerEntry IR), format
(shared canonical renderer). Each stage is independently testable.

RULES:
- All cleaners produce the same SpeakerEntry IR and canonical output
- Adding a new input layout = one new cleaner module plus one registry line
- Cleaning never raises; unrecognized input yields an empty string
"""

__version__ = "0.1.0"
