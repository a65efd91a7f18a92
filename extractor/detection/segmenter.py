"""Carve paper text into one context window per detected model."""

from __future__ import annotations

from dataclasses import dataclass

from extractor.detection.detector import Candidate

LOOKBEHIND_CHARS = 100
LOOKAHEAD_CHARS = 1500  # only applies to the last candidate


@dataclass(frozen=True)
class Chunk:
    """Context window attributed to a single model mention."""

    key: str
    name: str
    offset: int
    text: str


def window_bounds(offsets: list[int], index: int, text_length: int) -> tuple[int, int]:
    """Return ``(start, end)`` of the window for the candidate at *index*.

    The window opens ``LOOKBEHIND_CHARS`` before the mention and closes at the
    next mention, or ``LOOKAHEAD_CHARS`` after it for the final one.  Windows
    of mentions closer than the look-behind overlap.
    """
    offset = offsets[index]
    start = max(0, offset - LOOKBEHIND_CHARS)
    if index + 1 < len(offsets):
        end = offsets[index + 1]
    else:
        end = min(text_length, offset + LOOKAHEAD_CHARS)
    return start, end


def segment(text: str, candidates: list[Candidate]) -> list[Chunk]:
    """Build one chunk per candidate, preserving candidate order."""
    offsets = [c.offset for c in candidates]
    chunks = []
    for i, candidate in enumerate(candidates):
        start, end = window_bounds(offsets, i, len(text))
        chunks.append(
            Chunk(key=candidate.key, name=candidate.name, offset=candidate.offset, text=text[start:end])
        )
    return chunks
