"""Ordered regex strategies shared by the field extractors.

A cascade is a tuple of named strategies tried in order until one yields a
value.  Templates may contain a ``{subject}`` placeholder that is replaced by
the escaped model name or benchmark label before compiling.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

SUBJECT = "{subject}"

# A decimal number such as 8, 3.8 or 69.4
NUMBER = r"(\d+(?:\.\d+)?)"


@dataclass(frozen=True)
class Strategy:
    name: str
    template: str
    flags: int = re.IGNORECASE

    def compile(self, subject: str = "") -> re.Pattern[str]:
        return re.compile(self.template.replace(SUBJECT, re.escape(subject)), self.flags)

    def search(self, text: str, subject: str = "") -> re.Match[str] | None:
        """Search *text* from the start; no scan position survives the call."""
        return self.compile(subject).search(text)


def parse_number(raw: str | None) -> float | None:
    """Parse a captured number, returning None for empty or non-finite values."""
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def round_half_up(value: float, places: int = 0) -> float:
    """Round to *places* decimals with halves going up, e.g. 0.25 -> 0.3."""
    scale = 10**places
    return math.floor(value * scale + 0.5) / scale
