"""FastAPI application exposing the transcript cleaner.

WHY: Clients that cannot run Python in-process still need detection and
cleaning, plus the note-level "clean the transcript section" operation.
FastAPI provides request validation and OpenAPI docs for free.

HOW: A single module-level TranscriptDetector is shared by all requests;
it holds no per-call state, so no locking is needed. Endpoints are thin
wrappers around detector and notes functions.

RULES:
- Error responses use the ErrorResponse schema
- Unknown cleaner keys are a 400, oversized text is a 413
- An empty cleaning result is reported (empty=true), never an error
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException

from transcript_cleaner import __version__
from transcript_cleaner.config import API_HOST, API_PORT, MAX_REQUEST_CHARS, SKIP_IF_SUMMARY
from transcript_cleaner.detector import TranscriptDetector
from transcript_cleaner.notes import clean_note
from transcript_cleaner.server.models import (
    CleanerInfo,
    CleanRequest,
    CleanResponse,
    DetectRequest,
    DetectResponse,
    ErrorResponse,
    HealthResponse,
    NoteCleanRequest,
    NoteCleanResponse,
)

logger = logging.getLogger(__name__)

detector = TranscriptDetector()

app = FastAPI(
    title="Transcript Cleaner API",
    description=(
        "Detects the layout of a meeting transcript (Teams direct paste, "
        "Teams download, .docx export, or generic 'Name: text') and rewrites "
        "it as canonical 'Speaker / utterance' blocks."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


def _check_size(text: str) -> None:
    """Raise HTTPException if *text* exceeds MAX_REQUEST_CHARS."""
    if len(text) > MAX_REQUEST_CHARS:
        raise HTTPException(
            status_code=413,
            detail="Text too large ({} chars, max {})".format(len(text), MAX_REQUEST_CHARS),
        )


# ---------------------------------------------------------------------------
# Endpoints: Cleaning
# ---------------------------------------------------------------------------


@app.post(
    "/clean",
    response_model=CleanResponse,
    tags=["cleaning"],
    summary="Clean a transcript",
    description=(
        "Detects the transcript layout (or uses the requested cleaner) and "
        "returns the canonical text. 'empty' is true when no speaker turns "
        "were recognized."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Unknown cleaner key"},
        413: {"model": ErrorResponse, "description": "Text too large"},
    },
)
async def clean_transcript(request: CleanRequest) -> CleanResponse:
    _check_size(request.text)

    if request.cleaner:
        try:
            cleaner = detector.get_cleaner(request.cleaner)
        except KeyError as exc:
            raise HTTPException(status_code=400, detail=exc.args[0])
        cleaned = cleaner.clean(request.text)
        name, key = cleaner.name, cleaner.key
    else:
        result = detector.detect_and_clean(request.text)
        cleaned, name, key = result.cleaned_text, result.cleaner_name, result.cleaner_key

    logger.debug("Cleaned %d chars with %s", len(request.text), key)
    return CleanResponse(cleaner=name, cleaner_key=key, cleaned=cleaned, empty=not cleaned)


@app.post(
    "/detect",
    response_model=DetectResponse,
    tags=["cleaning"],
    summary="Detect a transcript's layout",
    responses={413: {"model": ErrorResponse, "description": "Text too large"}},
)
async def detect_format(request: DetectRequest) -> DetectResponse:
    _check_size(request.text)
    cleaner = detector.detect(request.text)
    return DetectResponse(cleaner=cleaner.name, cleaner_key=cleaner.key)


@app.post(
    "/notes/clean",
    response_model=NoteCleanResponse,
    tags=["cleaning"],
    summary="Clean the transcript section of a meeting note",
    description=(
        "Finds the transcript section of a markdown note, cleans it, and "
        "returns the whole note. Everything outside the section is unchanged. "
        "The note is returned untouched when the section is missing, too "
        "short, yields nothing, or the note already has a summary."
    ),
    responses={413: {"model": ErrorResponse, "description": "Document too large"}},
)
async def clean_note_transcript(request: NoteCleanRequest) -> NoteCleanResponse:
    _check_size(request.document)
    skip = SKIP_IF_SUMMARY if request.skip_if_summary is None else request.skip_if_summary
    result = clean_note(request.document, detector=detector, skip_if_summary=skip)
    return NoteCleanResponse(
        document=result.document,
        changed=result.changed,
        cleaner=result.cleaner_name,
        reason=result.reason,
    )


# ---------------------------------------------------------------------------
# Endpoints: Cleaners and health
# ---------------------------------------------------------------------------


@app.get(
    "/cleaners",
    response_model=List[CleanerInfo],
    tags=["cleaners"],
    summary="List cleaners in detection order",
)
async def list_cleaners() -> List[CleanerInfo]:
    return [
        CleanerInfo(key=cleaner.key, name=cleaner.name, priority=priority)
        for priority, cleaner in enumerate(detector.available_cleaners(), start=1)
    ]


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the transcript-cleaner-api console script."""
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
