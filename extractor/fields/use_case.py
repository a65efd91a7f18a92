"""Best use-case inference from chunk vocabulary and benchmark scores."""

from __future__ import annotations

from dataclasses import dataclass

from extractor.records import KeyBenchmarks, UseCase


@dataclass(frozen=True)
class UseCaseRule:
    """Fires when any keyword occurs and the benchmark (if any) clears the threshold."""

    label: UseCase
    keywords: tuple[str, ...] = ()
    benchmark: str | None = None
    threshold: float = 0.0

    def matches(self, lowered: str, benchmarks: KeyBenchmarks) -> bool:
        if self.keywords and not any(word in lowered for word in self.keywords):
            return False
        if self.benchmark is None:
            return True
        score = benchmarks.score(self.benchmark)
        return score is not None and score > self.threshold


CODING_WORDS = ("code", "coding", "programming")
REASONING_WORDS = ("math", "reasoning")

RULES: tuple[UseCaseRule, ...] = (
    UseCaseRule(UseCase.CODING, CODING_WORDS, "HumanEval", 60),
    UseCaseRule(UseCase.REASONING, REASONING_WORDS, "GSM8K", 70),
    UseCaseRule(UseCase.CHAT, ("chat", "conversation", "dialogue")),
    UseCaseRule(UseCase.INSTRUCTION_FOLLOWING, ("instruction", "instruct")),
    UseCaseRule(UseCase.MULTILINGUAL, ("multilingual", "translation")),
    # Benchmark-only fallbacks
    UseCaseRule(UseCase.CODING, benchmark="HumanEval", threshold=60),
    UseCaseRule(UseCase.REASONING, benchmark="GSM8K", threshold=80),
    UseCaseRule(UseCase.GENERAL_PURPOSE, benchmark="MMLU", threshold=70),
)


def infer_use_case(text: str, benchmarks: KeyBenchmarks) -> UseCase:
    lowered = text.lower()
    for rule in RULES:
        if rule.matches(lowered, benchmarks):
            return rule.label
    return UseCase.GENERAL_PURPOSE
