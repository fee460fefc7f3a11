"""Random permutations of a deck.

Both helpers take an optional ``rng`` (anything with a ``shuffle(list)``
method, normally ``random.Random``). Passing the same seeded generator state
reproduces the same permutation for decks of equal length. When ``rng`` is
omitted a new unseeded ``random.Random`` is used for that call only.

A single ``random.Random`` shared between threads must be guarded by the
caller.
"""

from __future__ import annotations

import logging
import random
from typing import List, Protocol

from .card import Card

logger = logging.getLogger(__name__)


class Shuffler(Protocol):
    def shuffle(self, x: List[Card]) -> None: ...


def shuffle(cards: List[Card], rng: Shuffler | None = None) -> List[Card]:
    """Shuffle ``cards`` in place (Fisher-Yates) and return the same list."""

    rng = rng if rng is not None else random.Random()
    rng.shuffle(cards)
    logger.debug("Shuffled %d cards", len(cards))
    return cards


def shuffled(cards: List[Card], rng: Shuffler | None = None) -> List[Card]:
    """Return a shuffled copy of ``cards``; the input list is left alone."""

    return shuffle(list(cards), rng)
