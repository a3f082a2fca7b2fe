"""Pre-written messages served when the generation API cannot answer."""

from __future__ import annotations

import random
from typing import Protocol, Sequence

from core.models import Kind
from prompts.templates import FALLBACK_MESSAGES, GENERIC_FALLBACK


class RandomSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str:
        ...


def fallback_messages(kind: str | None, target_name: str = "Shrabani") -> list[str]:
    """Return the rendered fallback list for a kind, or the generic list."""
    parsed = Kind.parse(kind)
    templates = FALLBACK_MESSAGES[parsed.value] if parsed else GENERIC_FALLBACK
    return [t.safe_substitute(target_name=target_name) for t in templates]


def pick_fallback(
    kind: str | None,
    target_name: str = "Shrabani",
    rng: RandomSource | None = None,
) -> str:
    """Pick one fallback message uniformly at random."""
    source = rng or random
    return source.choice(fallback_messages(kind, target_name))
