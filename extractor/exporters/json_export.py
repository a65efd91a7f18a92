"""Export extracted records as raw JSON."""

import json
import logging
from pathlib import Path

from extractor.config import EXPORT_DIR
from extractor.records import ModelRecord

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "model-comparison.json"


def to_rows(records: list[ModelRecord]) -> list[dict]:
    return [record.model_dump(mode="json") for record in records]


def to_json(records: list[ModelRecord]) -> str:
    return json.dumps(to_rows(records), indent=2)


def export_models(
    records: list[ModelRecord],
    output_dir: Path | None = None,
) -> Path:
    """Write records to model-comparison.json, keeping extraction order."""
    if output_dir is None:
        output_dir = EXPORT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / EXPORT_FILENAME
    path.write_text(to_json(records) + "\n")
    logger.info("Exported %d models to %s", len(records), path)
    return path
