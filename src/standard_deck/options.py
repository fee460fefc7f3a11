from __future__ import annotations

import functools
import logging
from typing import Callable, List

from .card import Card, Rank, Suit, joker

logger = logging.getLogger(__name__)

DeckOption = Callable[[List[Card]], List[Card]]
Comparator = Callable[[int, int], bool]
# Receives the current deck and returns a "less" function over its indices.
DeckSorter = Callable[[List[Card]], Comparator]


class DeckOptionError(ValueError):
    """Raised when a deck option is constructed with arguments it cannot use."""


def with_jokers(count: int) -> DeckOption:
    """Return the deck with ``count`` jokers added to the end.

    The list passed in is not modified. A count of zero or less adds nothing.
    """

    def _add_jokers(cards: List[Card]) -> List[Card]:
        return cards + [joker() for _ in range(count)]

    return _add_jokers


def with_extra_decks(copies: int) -> DeckOption:
    """Return the deck followed by ``copies`` extra copies of itself.

    The list passed in is not modified.

    Raises:
        DeckOptionError: If ``copies`` is negative. This happens when the
            option is created, not when the deck is built.
    """

    if copies < 0:
        raise DeckOptionError(f"extra deck count cannot be negative: {copies}")

    def _extra_decks(cards: List[Card]) -> List[Card]:
        return list(cards) * (copies + 1)

    return _extra_decks


def with_filter(keep: Callable[[Card], bool]) -> DeckOption:
    """Return a new deck holding only the cards for which ``keep`` is true."""

    def _filter(cards: List[Card]) -> List[Card]:
        return [card for card in cards if keep(card)]

    return _filter


def with_sorter(sorter: DeckSorter) -> DeckOption:
    """Sort the deck in place with the "less" function ``sorter`` builds for it.

    The less function receives positions in the deck as it was before sorting
    started, so closures over ``cards[i]`` stay valid for the whole sort.
    """

    def _sort(cards: List[Card]) -> List[Card]:
        less = sorter(cards)

        def compare(i: int, j: int) -> int:
            if less(i, j):
                return -1
            if less(j, i):
                return 1
            return 0

        order = sorted(range(len(cards)), key=functools.cmp_to_key(compare))
        cards[:] = [cards[idx] for idx in order]
        return cards

    return _sort


def exclude_ranks(*ranks: Rank) -> Callable[[Card], bool]:
    """Predicate for ``with_filter`` that drops every card of the given ranks."""

    dropped = set(ranks)

    def _keep(card: Card) -> bool:
        return card.rank not in dropped

    return _keep


def only_suits(*suits: Suit) -> Callable[[Card], bool]:
    """Predicate for ``with_filter`` that keeps only the given suits."""

    kept = set(suits)
    return lambda card: card.suit in kept


def by_rank_then_suit(cards: List[Card]) -> Comparator:
    """Order by rank first (all aces, then all twos...) with jokers last."""

    def key(card: Card) -> tuple[int, int, int]:
        return (int(card.suit == Suit.JOKER), int(card.rank), int(card.suit))

    def less(i: int, j: int) -> bool:
        return key(cards[i]) < key(cards[j])

    return less

