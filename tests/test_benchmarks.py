"""Tests for benchmark score extraction."""

from extractor.fields.benchmarks import CASCADE, extract_benchmark, extract_benchmarks
from extractor.records import BenchmarkScore, KeyBenchmarks


def test_cascade_order():
    assert [s.name for s in CASCADE] == ["label-then-score", "score-on-label", "label-score-of"]


class TestScores:
    def test_label_then_score_with_shots(self):
        result = extract_benchmark("Its MMLU score of 69.4% (5-shot) is competitive.", "MMLU")
        assert result == BenchmarkScore(score=69.4, shots=5)

    def test_score_on_label(self):
        result = extract_benchmark("It reaches 45.2% on HumanEval.", "HumanEval")
        assert result == BenchmarkScore(score=45.2, shots=None)

    def test_label_is_case_insensitive(self):
        assert extract_benchmark("mmlu 55%", "MMLU").score == 55

    def test_shot_count_is_not_a_score(self):
        """The 5 in "(5-shot)" is skipped in favour of the real score."""
        result = extract_benchmark("MMLU (5-shot): 70.1", "MMLU")
        assert result == BenchmarkScore(score=70.1, shots=5)

    def test_shots_found_later_in_chunk(self):
        text = "GSM8K accuracy is 56.8% with chain-of-thought; GSM8K is run 8-shot."
        result = extract_benchmark(text, "GSM8K")
        assert result.score == 56.8
        assert result.shots == 8

    def test_overlong_shot_count_ignored(self):
        text = "MMLU 50% (" + "9" * 5000 + "-shot)"
        assert extract_benchmark(text, "MMLU") == BenchmarkScore(score=50, shots=None)

    def test_four_digit_shot_count(self):
        assert extract_benchmark("MMLU 50% (1024-shot)", "MMLU").shots == 1024


class TestRejections:
    def test_missing_label(self):
        assert extract_benchmark("No benchmarks are reported.", "MMLU") is None

    def test_score_above_100(self):
        assert extract_benchmark("MMLU rises to 150 with extra data.", "MMLU") is None

    def test_zero_score(self):
        assert extract_benchmark("HumanEval 0% pass rate", "HumanEval") is None


def test_extract_benchmarks_all_labels():
    text = "MMLU of 70.0%. HumanEval of 40.0%."
    result = extract_benchmarks(text)
    assert isinstance(result, KeyBenchmarks)
    assert result.score("MMLU") == 70.0
    assert result.score("HumanEval") == 40.0
    assert result.GSM8K is None
