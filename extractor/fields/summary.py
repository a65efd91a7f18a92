"""One-line summaries built from extracted fields."""

from __future__ import annotations

import re

from extractor.fields.cascade import round_half_up
from extractor.records import KeyBenchmarks

_CONTEXT_WINDOW = re.compile(r"([\d,]+)\s*[Kk]\s*(?:token)?\s*(?:context|ctx)")

# (benchmark, threshold, strength) in display order
STRENGTHS: tuple[tuple[str, float, str], ...] = (
    ("MMLU", 70, "knowledge"),
    ("HumanEval", 50, "code"),
    ("GSM8K", 70, "math"),
)


def format_param_count(count: int, *, allow_trillions: bool = False) -> str:
    """Format e.g. 8_000_000_000 as "8.0B" and 125_000_000 as "125M"."""
    if allow_trillions and count >= 1e12:
        return f"{round_half_up(count / 1e12, 1):.1f}T"
    if count >= 1e9:
        return f"{round_half_up(count / 1e9, 1):.1f}B"
    if count >= 1e6:
        return f"{round_half_up(count / 1e6):.0f}M"
    return str(count)


def build_summary(parameter_count: int, benchmarks: KeyBenchmarks, text: str) -> str:
    parts = []
    if parameter_count > 0:
        parts.append(f"{format_param_count(parameter_count)} parameter model")
    else:
        parts.append("Model")

    context = _CONTEXT_WINDOW.search(text)
    if context:
        parts.append(f"{context.group(1)}K context")

    strengths = []
    for label, threshold, strength in STRENGTHS:
        score = benchmarks.score(label)
        if score is not None and score > threshold:
            strengths.append(strength)
    if strengths:
        parts.append(f"strong on {', '.join(strengths)}")

    return ", ".join(parts)
