"""Quantization / compression notes quoted from the paper text."""

from __future__ import annotations

from extractor.fields.cascade import Strategy

MAX_NOTE_CHARS = 200

CASCADE: tuple[Strategy, ...] = (
    Strategy(
        "technique-with-method",
        r"(?:quantiz|compress|prun)[^.]*"
        r"(?:GPTQ|AWQ|GGUF|SqueezeLLM|bitsandbytes|4-bit|8-bit|INT4|INT8)[^.]*",
    ),
    Strategy(
        "method-with-impact",
        r"(?:GPTQ|AWQ|GGUF|SqueezeLLM)[^.]*(?:accuracy|degradation|drop|loss|performance|retains?)[^.]*",
    ),
    Strategy("bit-width-with-figure", r"(?:4-bit|8-bit|INT4|INT8)\s*quantiz[^.]*(?:\d+(?:\.\d+)?%?)[^.]*"),
)


def tidy_note(raw: str) -> str | None:
    """Trim, cap at MAX_NOTE_CHARS with an ellipsis, capitalize the first letter."""
    note = raw.strip()
    if not note:
        return None
    if len(note) > MAX_NOTE_CHARS:
        note = note[:MAX_NOTE_CHARS] + "..."
    return note[0].upper() + note[1:]


def extract_compression_note(text: str) -> str | None:
    for strategy in CASCADE:
        match = strategy.search(text)
        if match is None:
            continue
        note = tidy_note(match.group(0))
        if note is not None:
            return note
    return None
