"""Parameter-count extraction from a model's context window."""

from __future__ import annotations

import logging
import math

from extractor.fields.cascade import NUMBER, SUBJECT, Strategy, parse_number

logger = logging.getLogger(__name__)

BILLION = 1e9
MILLION = 1e6


def _scale_strategies(scale: str, unit: str, spelled: str) -> tuple[Strategy, ...]:
    """The five proximity strategies for one magnitude (``b`` or ``m``)."""
    long_unit = rf"{unit}(?:{spelled})?\s*(?:parameters?)?"
    return (
        Strategy(f"{scale}:name-then-count", SUBJECT + r"[^.]*?" + NUMBER + r"\s*" + long_unit),
        Strategy(f"{scale}:count-then-name", NUMBER + r"\s*" + long_unit + r"[^.]*?" + SUBJECT),
        Strategy(f"{scale}:name-suffix", SUBJECT + r"\s*" + NUMBER + unit),
        Strategy(f"{scale}:name-prefix", NUMBER + unit + r"\s*" + SUBJECT),
        Strategy(f"{scale}:anywhere", NUMBER + r"\s*" + unit),
    )


# (strategies, multiplier) in priority order
CHUNK_CASCADE: tuple[tuple[tuple[Strategy, ...], float], ...] = (
    (_scale_strategies("billion", "b", "illion"), BILLION),
    (_scale_strategies("million", "m", "illion"), MILLION),
)

# Fallback: digits embedded in the display name, e.g. "Llama 3.1 8B"
NAME_CASCADE: tuple[tuple[Strategy, float], ...] = (
    (Strategy("name:billion", NUMBER + r"\s*b"), BILLION),
    (Strategy("name:million", NUMBER + r"\s*m"), MILLION),
)


def _scaled(raw: str | None, multiplier: float) -> int | None:
    value = parse_number(raw)
    if value is None:
        return None
    scaled = value * multiplier
    return round(scaled) if math.isfinite(scaled) else None


def extract_param_count(text: str, model_name: str) -> int:
    """Estimate the parameter count of *model_name* from its context *text*.

    Returns 0 when nothing usable is found.
    """
    for strategies, multiplier in CHUNK_CASCADE:
        for strategy in strategies:
            match = strategy.search(text, model_name)
            if match is None:
                continue
            count = _scaled(match.group(1), multiplier)
            if count is not None:
                logger.debug("%s: %d params via %s", model_name, count, strategy.name)
                return count

    for strategy, multiplier in NAME_CASCADE:
        match = strategy.search(model_name)
        if match is None:
            continue
        count = _scaled(match.group(1), multiplier)
        if count is not None:
            logger.debug("%s: %d params via %s", model_name, count, strategy.name)
            return count

    return 0
