"""Canonical word list loading and the replenishable word queue."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Sequence, TypeVar

from .models import PLACEHOLDER

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_WORDLIST = Path(__file__).parent / "data" / "words.txt"


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a Fisher-Yates shuffled copy of items."""
    rng = rng or random.Random()
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def load_wordlist(path: Path | None = None) -> list[str]:
    """Load the canonical word list from file.

    Blank lines and ``#`` comments are ignored, duplicates keep their first
    position.
    """
    if path is None:
        path = DEFAULT_WORDLIST

    with open(path, "r", encoding="utf-8") as f:
        words = [line.strip() for line in f]
    words = [w for w in words if w and not w.startswith("#")]
    return list(dict.fromkeys(words))


class WordQueue:
    """Shuffled words with a cursor, refilled when the cursor runs off the end.

    Refilling reshuffles the canonical list together with whatever is still
    unused, so no unseen word gets dropped. Words may repeat once the queue
    has wrapped.
    """

    def __init__(
        self,
        canonical: Sequence[str],
        rng: random.Random | None = None,
        placeholder: str = PLACEHOLDER,
    ):
        self._canonical = list(canonical)
        self._rng = rng or random.Random()
        self._placeholder = placeholder
        self._words: list[str] = shuffle(self._canonical, self._rng)
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def words(self) -> list[str]:
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def is_empty(self) -> bool:
        return not self._words

    def current(self) -> str:
        """Current word, or the placeholder when there are no words at all."""
        if not self._words:
            return self._placeholder
        return self._words[self._index]

    def remaining(self) -> list[str]:
        """Words after the cursor that have not been shown yet."""
        return self._words[self._index + 1:]

    def advance(self) -> None:
        """Move to the next word, refilling the queue when exhausted."""
        if not self._words:
            return
        if self._index + 1 >= len(self._words):
            self._words = shuffle(self._canonical + self.remaining(), self._rng)
            self._index = 0
            logger.debug("Word queue refilled with %d words", len(self._words))
            return
        self._index += 1

    def rewind(self) -> None:
        self._index = 0

    def reshuffle(self) -> None:
        """Discard the current order and shuffle the canonical list anew."""
        self._words = shuffle(self._canonical, self._rng)
        self._index = 0
