"""Core intermediate representation and canonical rendering.

WHY: Every cleaner recovers the same thing, an ordered list of speaker
turns, and every cleaner must render it identically. Keeping both here
means the four cleaners only differ in how they scan lines.

HOW: ir.py defines SpeakerEntry, canonical.py holds the per-call entry
collector and the canonical formatter.

RULES:
- SpeakerEntry is the contract between parsing and formatting
- Nothing in core knows about any particular input layout
"""
