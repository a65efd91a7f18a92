"""Weight-memory footprint per precision: observed in text or estimated."""

from __future__ import annotations

import math

from extractor.fields.cascade import NUMBER, Strategy, parse_number, round_half_up
from extractor.records import MemoryFootprint

BYTES_PER_PARAM: dict[str, float] = {
    "fp16": 2.0,
    "int8": 1.0,
    "int4": 0.5,
}

EXPLICIT: dict[str, Strategy] = {
    "fp16": Strategy("fp16", r"(?:FP16|half[- ]precision|16[- ]?bit)[^.]*?" + NUMBER + r"\s*GB"),
    "int8": Strategy("int8", r"(?:INT8|8[- ]?bit)[^.]*?" + NUMBER + r"\s*GB"),
    "int4": Strategy("int4", r"(?:INT4|4[- ]?bit|GPTQ|AWQ|GGUF)[^.]*?" + NUMBER + r"\s*GB"),
}


def estimate_gb(parameter_count: int, precision: str) -> float | None:
    """Linear weight-size estimate in GB, rounded to one decimal."""
    gb = parameter_count * BYTES_PER_PARAM[precision] / 1e9
    return round_half_up(gb, 1) if math.isfinite(gb) else None


def extract_memory(text: str, parameter_count: int) -> MemoryFootprint:
    """Explicit "<precision> ... N GB" mentions win over the linear estimate.

    Without a parameter count, precisions not mentioned stay None.
    """
    values: dict[str, float | None] = {}
    for precision, strategy in EXPLICIT.items():
        match = strategy.search(text)
        value = parse_number(match.group(1)) if match else None
        if value is None and parameter_count > 0:
            value = estimate_gb(parameter_count, precision)
        values[precision] = value
    return MemoryFootprint(**values)
