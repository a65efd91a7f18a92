"""Assemble model-efficiency records from paper text.

Pure computation: text in, freshly built records out.  Never raises on string
input; fields that cannot be found degrade to None, 0 or the default use-case.
"""

from __future__ import annotations

import logging

from extractor.detection.detector import detect_models
from extractor.detection.segmenter import Chunk, segment
from extractor.fields.benchmarks import extract_benchmarks
from extractor.fields.compression import extract_compression_note
from extractor.fields.memory import extract_memory
from extractor.fields.params import extract_param_count
from extractor.fields.summary import build_summary
from extractor.fields.use_case import infer_use_case
from extractor.records import ModelRecord

logger = logging.getLogger(__name__)


def build_record(chunk: Chunk) -> ModelRecord:
    """Run every field extractor over one chunk."""
    parameter_count = extract_param_count(chunk.text, chunk.name)
    benchmarks = extract_benchmarks(chunk.text)
    return ModelRecord(
        model_name=chunk.name,
        parameter_count=parameter_count,
        key_benchmarks=benchmarks,
        memory_footprint_gb=extract_memory(chunk.text, parameter_count),
        compression_performance=extract_compression_note(chunk.text),
        best_use_case=infer_use_case(chunk.text, benchmarks),
        one_line_summary=build_summary(parameter_count, benchmarks, chunk.text),
    )


def resolve_duplicates(built: list[tuple[Chunk, ModelRecord]]) -> list[ModelRecord]:
    """Keep one record per canonical key, preferring the longest source chunk.

    Ties keep the earliest record.  Surviving records stay in first-seen order.
    """
    best: dict[str, tuple[int, ModelRecord]] = {}
    for chunk, record in built:
        current = best.get(record.canonical_key)
        if current is None or len(chunk.text) > current[0]:
            if current is not None:
                logger.debug("Replacing duplicate %s with longer context", record.model_name)
            best[record.canonical_key] = (len(chunk.text), record)
    return [record for _, record in best.values()]


def sort_records(records: list[ModelRecord]) -> list[ModelRecord]:
    """Largest models first; equal counts keep detection order."""
    return sorted(records, key=lambda r: r.parameter_count, reverse=True)


def extract_models(text: str) -> list[ModelRecord]:
    """Extract model-efficiency records from unstructured research-paper text."""
    candidates = detect_models(text)
    if not candidates:
        return []

    chunks = segment(text, candidates)
    built = [(chunk, build_record(chunk)) for chunk in chunks]
    records = sort_records(resolve_duplicates(built))
    logger.debug("Extracted %d records from %d chunks", len(records), len(chunks))
    return records
