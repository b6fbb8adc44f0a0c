"""Generation of length-restricted object names."""

from __future__ import annotations

import random
import re
from typing import Protocol, Sequence

MAX_NAME_LENGTH = 63
RANDOM_LENGTH = 5
MAX_GENERATED_NAME_LENGTH = MAX_NAME_LENGTH - RANDOM_LENGTH - 1

# Characters used for random suffixes: no vowels and no easily confused
# digits, so suffixes never spell words.
ALPHANUMS = "bcdfghjklmnpqrstvwxz2456789"

_TRAILING_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]+\Z")


class _Chooser(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


def random_string(length: int, rng: _Chooser) -> str:
    """Return ``length`` random characters drawn from :data:`ALPHANUMS`."""
    return "".join(rng.choice(ALPHANUMS) for _ in range(length))


class SimpleNameGenerator:
    """Builds names no longer than a standard object name (63 characters)."""

    def __init__(self, rng: _Chooser | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def restrict_length_with_random_suffix(self, base: str) -> str:
        """Shorten ``base`` if needed and append a dash and a random suffix."""
        base = base[:MAX_GENERATED_NAME_LENGTH]
        return f"{base}-{random_string(RANDOM_LENGTH, self._rng)}"

    def restrict_length(self, base: str) -> str:
        """Shorten ``base`` to the maximum length and trim trailing symbols.

        Raises ValueError if no alphanumeric character is left to end on.
        """
        trimmed = _TRAILING_NON_ALPHANUMERIC.sub("", base[:MAX_NAME_LENGTH])
        if not trimmed:
            raise ValueError(f"name {base!r} has no alphanumeric character to end on")
        return trimmed


SIMPLE_NAME_GENERATOR = SimpleNameGenerator()