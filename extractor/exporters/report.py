"""Terminal views of extracted records: comparison table and per-model cards.

Read-only consumers of the extraction output.  Best benchmark scores and the
smallest memory footprints are marked with ``*``.
"""

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from extractor.fields.summary import format_param_count
from extractor.records import BENCHMARK_LABELS, ModelRecord

MISSING = "--"
BEST_MARK = "*"

TABLE_HEADERS = ["Model", "Params", *BENCHMARK_LABELS, "FP16", "INT4", "Use Case"]


def _best(values: list[float | None], pick=max) -> float | None:
    present = [v for v in values if v is not None]
    return pick(present) if present else None


def _cell(value: float | None, best: float | None) -> str:
    if value is None:
        return MISSING
    mark = BEST_MARK if value == best else ""
    return f"{mark}{value:.1f}"


def _params(count: int) -> str:
    return format_param_count(count, allow_trillions=True) if count > 0 else MISSING


def _gb(value: float | None) -> str:
    return f"{value:.1f} GB" if value is not None else MISSING


def comparison_table(records: list[ModelRecord]) -> Table:
    """Side-by-side comparison of every record."""
    best_scores = {
        label: _best([r.key_benchmarks.score(label) for r in records]) for label in BENCHMARK_LABELS
    }
    smallest_fp16 = _best([r.memory_footprint_gb.fp16 for r in records], pick=min)
    smallest_int4 = _best([r.memory_footprint_gb.int4 for r in records], pick=min)

    table = Table(title="Model comparison")
    table.add_column("Model", style="cyan", no_wrap=True)
    table.add_column("Params", justify="right")
    for header in TABLE_HEADERS[2:-1]:
        table.add_column(header, justify="right", style="green")
    table.add_column("Use Case", style="magenta")

    for r in records:
        table.add_row(
            Text(r.model_name),
            _params(r.parameter_count),
            *(_cell(r.key_benchmarks.score(label), best_scores[label]) for label in BENCHMARK_LABELS),
            _cell(r.memory_footprint_gb.fp16, smallest_fp16),
            _cell(r.memory_footprint_gb.int4, smallest_int4),
            r.best_use_case.value,
        )
    return table


def model_card(record: ModelRecord) -> Panel:
    memory = record.memory_footprint_gb
    scores = []
    for label in BENCHMARK_LABELS:
        result = getattr(record.key_benchmarks, label)
        if result is None:
            scores.append(f"{label}: {MISSING}")
        elif result.shots is not None:
            scores.append(f"{label}: {result.score:.1f}% ({result.shots}-shot)")
        else:
            scores.append(f"{label}: {result.score:.1f}%")

    lines = [
        record.one_line_summary,
        f"Params: {_params(record.parameter_count)}   FP16: {_gb(memory.fp16)}   "
        f"INT8: {_gb(memory.int8)}   INT4: {_gb(memory.int4)}",
        "   ".join(scores),
    ]
    if record.compression_performance:
        lines.append(f"Compression: {record.compression_performance}")

    # Paper text may contain square brackets, so no markup parsing here
    return Panel(
        Text("\n".join(lines)),
        title=Text(f"{record.model_name}  [{record.best_use_case.value}]", style="bold"),
        title_align="left",
    )


def model_cards(records: list[ModelRecord]) -> Group:
    return Group(*(model_card(r) for r in records))
