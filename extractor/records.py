"""Data model for extracted model-efficiency records."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

BENCHMARK_LABELS = ("MMLU", "HumanEval", "GSM8K")


class UseCase(str, Enum):
    CODING = "coding"
    REASONING = "reasoning"
    CHAT = "chat"
    INSTRUCTION_FOLLOWING = "instruction-following"
    MULTILINGUAL = "multilingual"
    GENERAL_PURPOSE = "general-purpose"


def canonical_key(name: str) -> str:
    """Identity key for a model name: lower-cased, whitespace and hyphens removed."""
    return "".join(ch for ch in name.lower() if not ch.isspace() and ch != "-")


class BenchmarkScore(BaseModel):
    """A single benchmark result as a percentage."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., gt=0, le=100)
    shots: int | None = Field(None, ge=0, description="In-context examples, e.g. 5 for 5-shot")


class KeyBenchmarks(BaseModel):
    model_config = ConfigDict(frozen=True)

    MMLU: BenchmarkScore | None = None
    HumanEval: BenchmarkScore | None = None
    GSM8K: BenchmarkScore | None = None

    def score(self, label: str) -> float | None:
        """Return the score for *label*, or None when it was not found."""
        result = getattr(self, label)
        return result.score if result is not None else None


class MemoryFootprint(BaseModel):
    """Weight memory in GB per precision, observed in text or estimated."""

    model_config = ConfigDict(frozen=True)

    fp16: float | None = Field(None, ge=0)
    int8: float | None = Field(None, ge=0)
    int4: float | None = Field(None, ge=0)


class ModelRecord(BaseModel):
    """Validated model-efficiency record extracted from paper text."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_name: str
    parameter_count: int = Field(0, ge=0, description="Total parameters (0 when not determined)")
    key_benchmarks: KeyBenchmarks = Field(default_factory=KeyBenchmarks)
    memory_footprint_gb: MemoryFootprint = Field(default_factory=MemoryFootprint)
    compression_performance: str | None = Field(
        None, description="Quantization note, at most 200 chars plus an ellipsis"
    )
    best_use_case: UseCase = UseCase.GENERAL_PURPOSE
    one_line_summary: str = ""

    @property
    def canonical_key(self) -> str:
        return canonical_key(self.model_name)
