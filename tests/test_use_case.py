"""Tests for the use-case decision table."""

import pytest

from extractor.fields.use_case import RULES, infer_use_case
from extractor.records import BenchmarkScore, KeyBenchmarks, UseCase


def _benchmarks(**scores: float) -> KeyBenchmarks:
    return KeyBenchmarks(**{label: BenchmarkScore(score=s) for label, s in scores.items()})


NEUTRAL_TEXT = "The model is evaluated on standard suites."


class TestKeywordRules:
    def test_coding_needs_humaneval_above_60(self):
        assert infer_use_case("Strong at code synthesis.", _benchmarks(HumanEval=65)) == UseCase.CODING

    def test_coding_keyword_without_score_falls_through(self):
        assert infer_use_case("Strong at code synthesis.", _benchmarks(HumanEval=50)) == UseCase.GENERAL_PURPOSE

    def test_reasoning(self):
        assert infer_use_case("Good at math word problems.", _benchmarks(GSM8K=75)) == UseCase.REASONING

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Tuned for dialogue.", UseCase.CHAT),
            ("An Instruct variant is released.", UseCase.INSTRUCTION_FOLLOWING),
            ("Evaluated on translation pairs.", UseCase.MULTILINGUAL),
        ],
    )
    def test_keyword_only_rules(self, text, expected):
        assert infer_use_case(text, KeyBenchmarks()) == expected

    def test_earlier_rule_wins(self):
        text = "A chat model that also writes code."
        assert infer_use_case(text, _benchmarks(HumanEval=70)) == UseCase.CODING
        assert infer_use_case(text, _benchmarks(HumanEval=40)) == UseCase.CHAT


class TestBenchmarkFallbacks:
    def test_humaneval(self):
        assert infer_use_case(NEUTRAL_TEXT, _benchmarks(HumanEval=65, GSM8K=90)) == UseCase.CODING

    def test_gsm8k_above_80(self):
        assert infer_use_case(NEUTRAL_TEXT, _benchmarks(GSM8K=85)) == UseCase.REASONING

    def test_gsm8k_at_75_is_not_enough(self):
        assert infer_use_case(NEUTRAL_TEXT, _benchmarks(GSM8K=75)) == UseCase.GENERAL_PURPOSE

    def test_mmlu(self):
        assert infer_use_case(NEUTRAL_TEXT, _benchmarks(MMLU=75)) == UseCase.GENERAL_PURPOSE

    def test_default(self):
        assert infer_use_case(NEUTRAL_TEXT, KeyBenchmarks()) == UseCase.GENERAL_PURPOSE


def test_rule_table_order():
    assert [rule.label for rule in RULES[:5]] == [
        UseCase.CODING,
        UseCase.REASONING,
        UseCase.CHAT,
        UseCase.INSTRUCTION_FOLLOWING,
        UseCase.MULTILINGUAL,
    ]
