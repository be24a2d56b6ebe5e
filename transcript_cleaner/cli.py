"""Command-line interface for the transcript cleaner.

WHY: Users clean transcripts from the terminal, in scripts, or from an
editor's "run command on file" hook. The CLI wires file/stdin reading,
layout detection, note-section splicing, and output writing behind a
single command.

HOW: Uses argparse to accept an input file (or "-" for stdin), an
optional forced cleaner, note handling, and output destination. Meeting
notes (text containing the transcript heading) get only their transcript
section rewritten; anything else is cleaned as a whole. Status messages
go to stderr; cleaned text goes to stdout unless --output or --in-place
is given.

RULES:
- Positional argument: input file path, or "-" for stdin
- --cleaner KEY bypasses detection (keys from the CLEANERS registry)
- --note / --no-note forces note handling on or off (default: auto)
- --output and --in-place are mutually exclusive; --in-place needs a file
- An empty cleaning result never overwrites a file
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from transcript_cleaner import __version__
from transcript_cleaner.cleaners import CLEANERS
from transcript_cleaner.cleaners.base import BaseCleaner
from transcript_cleaner.config import LOG_LEVEL, SKIP_IF_SUMMARY, TRANSCRIPT_HEADING
from transcript_cleaner.detector import TranscriptDetector
from transcript_cleaner.notes import (
    REASON_CLEANED,
    clean_note,
    extract_transcript_section,
    replace_transcript_section,
)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> NoReturn:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_input(input_file: str) -> str:
    if input_file == "-":
        return sys.stdin.read()

    path = Path(input_file)
    if not path.is_file():
        _fail("File not found: {}".format(path))
    return path.read_text(encoding="utf-8")


def _write_output(text: str, args: argparse.Namespace) -> None:
    if args.in_place:
        Path(args.input_file).write_text(text, encoding="utf-8")
        _status("Saved: {}".format(args.input_file))
    elif args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        _status("Saved: {}".format(args.output))
    else:
        sys.stdout.write(text)
        if text and not text.endswith("\n"):
            sys.stdout.write("\n")


def _is_note(text: str, args: argparse.Namespace) -> bool:
    if args.note is not None:
        return args.note
    return extract_transcript_section(text, args.heading) is not None


def _list_cleaners(detector: TranscriptDetector) -> None:
    for priority, cleaner in enumerate(detector.available_cleaners(), start=1):
        print("{}. {:<20} {}".format(priority, cleaner.key, cleaner.name))


def _run(args: argparse.Namespace) -> None:
    """Clean one input according to *args*."""
    detector = TranscriptDetector()

    if args.list_cleaners:
        _list_cleaners(detector)
        return

    if args.input_file is None:
        _fail("the following arguments are required: input_file")
    if args.in_place and args.input_file == "-":
        _fail("--in-place needs a file, not stdin")

    text = _read_input(args.input_file)
    note_mode = _is_note(text, args)

    if note_mode:
        section = extract_transcript_section(text, args.heading)
        if section is None:
            _fail("No '{}' section found in {}".format(args.heading, args.input_file))
        target = section
    else:
        target = text

    if args.detect_only and not args.cleaner:
        print(detector.detect(target).name)
        return

    if note_mode and not args.cleaner:
        # clean_note runs detection itself and may skip the note entirely.
        result = clean_note(
            text,
            detector=detector,
            heading=args.heading,
            skip_if_summary=args.skip_if_summary,
        )
        if result.cleaner_name:
            _status("Using cleaner: {}".format(result.cleaner_name))
        if result.reason != REASON_CLEANED:
            _status("Transcript left unchanged ({})".format(result.reason))
            if args.in_place:
                return
        output = result.document
    else:
        cleaner = _select_cleaner(detector, target, args.cleaner)
        if args.detect_only:
            print(cleaner.name)
            return
        _status("Using cleaner: {}".format(cleaner.name))
        output = _clean_with(cleaner, text, target, note_mode, args)
        if output is None:
            return

    _write_output(output, args)


def _select_cleaner(
    detector: TranscriptDetector,
    target: str,
    key: Optional[str],
) -> BaseCleaner:
    if not key:
        return detector.detect(target)
    try:
        return detector.get_cleaner(key)
    except KeyError as exc:
        _fail(exc.args[0])


def _clean_with(
    cleaner: BaseCleaner,
    text: str,
    target: str,
    note_mode: bool,
    args: argparse.Namespace,
) -> Optional[str]:
    """Run *cleaner*; returns the text to write, or None when nothing should be written."""
    if note_mode:
        cleaned = cleaner.clean(target)
        if not cleaned:
            _status("Warning: {} recognized no speaker turns; input left unchanged".format(
                cleaner.name
            ))
            if args.in_place:
                return
            output = text
        else:
            output = replace_transcript_section(text, cleaned, args.heading)
    else:
        output = cleaner.clean(target)
        if not output:
            _status("Warning: {} recognized no speaker turns".format(cleaner.name))
            if args.in_place or args.output:
                _status("Nothing written.")
                return

    return output


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without touching files.
    """
    available = ", ".join(CLEANERS.keys())
    parser = argparse.ArgumentParser(
        prog="transcript-cleaner",
        description="Detect the layout of a meeting transcript (Teams paste, "
                    "Teams download, .docx export, or generic) and rewrite it "
                    "as 'Speaker / utterance' blocks.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Transcript or meeting note to clean ('-' reads stdin).",
    )

    parser.add_argument(
        "--cleaner",
        default=None,
        help="Force a cleaner instead of detecting one. Available: {}.".format(available),
    )

    parser.add_argument(
        "--note",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Treat input as a meeting note and clean only its transcript "
             "section (default: auto-detect from the heading).",
    )

    parser.add_argument(
        "--heading",
        default=TRANSCRIPT_HEADING,
        help="Heading that starts the transcript section (default: %(default)s).",
    )

    parser.add_argument(
        "--skip-if-summary",
        action=argparse.BooleanOptionalAction,
        default=SKIP_IF_SUMMARY,
        help="Leave notes that already have a summary untouched (default: %(default)s).",
    )

    destination = parser.add_mutually_exclusive_group()
    destination.add_argument(
        "--output",
        default=None,
        help="Write the result to this file instead of stdout.",
    )
    destination.add_argument(
        "--in-place",
        action="store_true",
        help="Rewrite the input file.",
    )

    parser.add_argument(
        "--detect-only",
        action="store_true",
        help="Print the detected cleaner name and exit.",
    )

    parser.add_argument(
        "--list-cleaners",
        action="store_true",
        help="List cleaners in detection priority order and exit.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    _run(args)


if __name__ == "__main__":
    main()
