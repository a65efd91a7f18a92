"""Model detector: find distinct model-name mentions in paper text."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from extractor.detection.patterns import PATTERN_BANK, NameRule
from extractor.records import canonical_key

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Candidate:
    """First mention of one distinct model identity."""

    key: str
    name: str
    offset: int


def normalize_name(raw: str) -> str:
    """Trim and collapse internal whitespace to single spaces."""
    return _WHITESPACE.sub(" ", raw).strip()


def detect_models(text: str, rules: tuple[NameRule, ...] = PATTERN_BANK) -> list[Candidate]:
    """Scan *text* with every rule and return candidates ordered by first offset.

    A key seen again keeps whichever mention occurs earliest in the text; on
    equal offsets the rule applied first wins.
    """
    found: dict[str, Candidate] = {}

    for rule in rules:
        for raw, offset in rule.find_all(text):
            name = normalize_name(raw)
            if not name:
                continue
            key = canonical_key(name)
            existing = found.get(key)
            if existing is None or offset < existing.offset:
                found[key] = Candidate(key=key, name=name, offset=offset)

    candidates = sorted(found.values(), key=lambda c: c.offset)
    logger.debug("Detected %d candidate models", len(candidates))
    return candidates
