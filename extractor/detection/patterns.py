"""Pattern bank: ordered name-matching rules for known model families.

Rules are applied in table order.  Each family rule is case-insensitive; the
generic fallback keys on a leading capital letter and is case-sensitive.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

GENERIC_FAMILY = "generic"


@dataclass(frozen=True)
class NameRule:
    """A named, stateless rule whose first group captures a model name."""

    family: str
    regex: re.Pattern[str]

    def find_all(self, text: str) -> list[tuple[str, int]]:
        """Return every ``(captured_name, offset)`` in *text*, in order."""
        return [(m.group(1), m.start()) for m in self.regex.finditer(text)]


def _family(family: str, pattern: str) -> NameRule:
    return NameRule(family=family, regex=re.compile(pattern, re.IGNORECASE))


# ---------------------------------------------------------------------------
# Rule table (priority order)
# ---------------------------------------------------------------------------

PATTERN_BANK: tuple[NameRule, ...] = (
    _family("llama", r"\b(Llama\s*[\d.]+(?:\s*[\d.]+[BM])?)"),
    _family("mistral", r"\b(Mistral\s*[\d.]+[BM]?(?:\s*(?:Instruct|Chat))?)"),
    _family("gpt", r"\b(GPT-?[\d.]+(?:-(?:turbo|mini))?)"),
    _family("gemma", r"\b(Gemma\s*[\d.]+[BM]?)"),
    _family("phi", r"\b(Phi-?[\d.]+(?:\s*[\d.]+[BM])?)"),
    _family("falcon", r"\b(Falcon-?[\d.]+[BM]?)"),
    _family("qwen", r"\b(Qwen-?[\d.]+[BM]?)"),
    _family("mpt", r"\b(MPT-?[\d.]+[BM]?)"),
    _family("bloom", r"\b(BLOOM-?[\d.]+[BM]?)"),
    _family("vicuna", r"\b(Vicuna-?[\d.]+[BM]?)"),
    _family("claude", r"\b(Claude\s*[\d.]+(?:\s*(?:Opus|Sonnet|Haiku))?)"),
    _family("deepseek", r"\b(DeepSeek(?:-?(?:V\d+|Coder|Math))?\s*[\d.]*[BM]?)"),
    _family("yi", r"\b(Yi-?[\d.]+[BM]?)"),
    _family("command", r"\b(Command(?:\s*R)?(?:\s*[\d.]+)?)"),
    # "Orca 2 (13B parameters)" style mentions of families not listed above
    NameRule(
        family=GENERIC_FAMILY,
        regex=re.compile(
            r"\b([A-Z][a-zA-Z0-9-]+(?:\s+[\d.]+)?)\s*\(\s*[\d.]+[BbMmTt]\s*(?:parameters?)?\s*\)"
        ),
    ),
)

FAMILIES: tuple[str, ...] = tuple(rule.family for rule in PATTERN_BANK)
