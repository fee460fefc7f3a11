from __future__ import annotations

import logging
from typing import List

from .card import RANKS, SUITS, Card, absolute_rank
from .options import DeckOption

logger = logging.getLogger(__name__)


def new_deck(*options: DeckOption) -> List[Card]:
    """Return a fresh deck as a list of cards.

    With no options this is a standard 52-card deck in the default order:
    spades, diamonds, clubs, hearts, with ranks ascending inside each suit
    (Ace, Two, ..., Ten, J, Q, K).

    Options run once each, in the order given. Each receives the list the
    previous one returned, so ``new_deck(with_jokers(2), with_extra_decks(1))``
    and ``new_deck(with_extra_decks(1), with_jokers(2))`` are different decks.
    The caller owns the returned list.
    """

    cards = [Card(suit=suit, rank=rank) for suit in SUITS for rank in RANKS]
    cards = default_sort(cards)

    for opt in options:
        before = len(cards)
        cards = opt(cards)
        logger.debug(
            "Applied %s: %d -> %d cards",
            getattr(opt, "__name__", repr(opt)),
            before,
            len(cards),
        )

    logger.debug("Built deck of %d cards with %d option(s)", len(cards), len(options))
    return cards


def _default_key(card: Card) -> tuple[int, int]:
    # Suit breaks the joker / king-of-hearts tie on absolute rank.
    return absolute_rank(card), int(card.suit)


def default_sort(cards: List[Card]) -> List[Card]:
    """Sort ``cards`` in place into the default order and return the same list.

    Useful for putting a shuffled deck back in order. Jokers sort last.
    """

    cards.sort(key=_default_key)
    return cards
