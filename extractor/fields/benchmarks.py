"""Benchmark score extraction (MMLU, HumanEval, GSM8K)."""

from __future__ import annotations

from extractor.fields.cascade import SUBJECT, Strategy, parse_number
from extractor.records import BENCHMARK_LABELS, BenchmarkScore, KeyBenchmarks

# A score never runs into the shot count, e.g. the 5 in "(5-shot)"
SCORE = r"(\d+(?:\.\d+)?)(?!\d|\.\d|\s*-\s*shot)"
# Shot counts are capped at four digits
SHOTS = r"\s*(?:\(\s*(\d{1,4})-shot\s*\))?"

CASCADE: tuple[Strategy, ...] = (
    Strategy("label-then-score", SUBJECT + r"[^.]*?" + SCORE + r"\s*%?\s*(?:on\s+" + SUBJECT + r")?" + SHOTS),
    Strategy("score-on-label", SCORE + r"\s*%?\s*(?:on|for)\s+" + SUBJECT + SHOTS),
    Strategy("label-score-of", SUBJECT + r"\s*(?:score)?\s*(?:of|:)?\s*" + SCORE + r"\s*%?" + SHOTS),
)

SHOTS_NEARBY = Strategy("shots-after-label", SUBJECT + r"[^.]*?(?<!\d)(\d{1,4})-shot")


def extract_benchmark(text: str, label: str) -> BenchmarkScore | None:
    """Find the first in-range score for *label* in *text*, with its shot count."""
    for strategy in CASCADE:
        match = strategy.search(text, label)
        if match is None:
            continue
        score = parse_number(match.group(1))
        if score is None or not 0 < score <= 100:
            continue

        shots_raw = match.group(2)
        if shots_raw is None:
            nearby = SHOTS_NEARBY.search(text, label)
            shots_raw = nearby.group(1) if nearby else None
        shots = int(shots_raw) if shots_raw is not None else None
        return BenchmarkScore(score=score, shots=shots)

    return None


def extract_benchmarks(text: str) -> KeyBenchmarks:
    return KeyBenchmarks(**{label: extract_benchmark(text, label) for label in BENCHMARK_LABELS})
