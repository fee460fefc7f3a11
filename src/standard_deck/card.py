from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple


class Suit(IntEnum):
    """Card suits. Values define the default suit order."""

    SPADE = 0
    DIAMOND = 1
    CLUB = 2
    HEART = 3
    JOKER = 4  # special, not a real suit


class Rank(IntEnum):
    """Card ranks Ace..K.

    ``NONE`` is not a real rank. It is only carried by jokers so they have
    something in the rank slot.
    """

    NONE = 0
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


SUITS: Tuple[Suit, ...] = (Suit.SPADE, Suit.DIAMOND, Suit.CLUB, Suit.HEART)
RANKS: Tuple[Rank, ...] = tuple(Rank(value) for value in range(Rank.ACE, Rank.KING + 1))
DECK_SIZE = len(SUITS) * len(RANKS)

SUIT_NAMES: Dict[Suit, str] = {
    Suit.SPADE: "Spade",
    Suit.DIAMOND: "Diamond",
    Suit.CLUB: "Club",
    Suit.HEART: "Heart",
    Suit.JOKER: "Joker",
}

RANK_NAMES: Dict[Rank, str] = {
    Rank.ACE: "Ace",
    Rank.TWO: "Two",
    Rank.THREE: "Three",
    Rank.FOUR: "Four",
    Rank.FIVE: "Five",
    Rank.SIX: "Six",
    Rank.SEVEN: "Seven",
    Rank.EIGHT: "Eight",
    Rank.NINE: "Nine",
    Rank.TEN: "Ten",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


@dataclass(frozen=True)
class Card:
    """A single playing card.

    Attributes:
        suit: One of the four real suits, or ``Suit.JOKER``.
        rank: ``Rank.ACE`` through ``Rank.KING`` for real cards. Jokers
            built by this package use ``Rank.NONE``.

    Nothing checks that a hand-built card is sensible; ``Card(Suit.SPADE,
    Rank.NONE)`` is accepted as-is.
    """

    suit: Suit
    rank: Rank

    @property
    def is_joker(self) -> bool:
        return self.suit == Suit.JOKER

    def __str__(self) -> str:
        return card_label(self)


def joker() -> Card:
    return Card(suit=Suit.JOKER, rank=Rank.NONE)


def absolute_rank(card: Card) -> int:
    """Return the card's position key in the default order.

    Spades take 1..13, diamonds 14..26, clubs 27..39, hearts 40..52. A joker
    also maps to 52 and ties with the king of hearts; ``default_sort`` breaks
    that tie on suit so jokers still come last.
    """

    return int(card.suit) * int(Rank.KING) + int(card.rank)


def _rank_name(rank: int) -> str:
    try:
        return RANK_NAMES[Rank(rank)]
    except (KeyError, ValueError):
        return f"Rank({int(rank)})"


def _suit_name(suit: int) -> str:
    try:
        return SUIT_NAMES[Suit(suit)]
    except (KeyError, ValueError):
        return f"Suit({int(suit)})"


def card_label(card: Card) -> str:
    """Human readable label such as ``"Ace of Hearts"`` or ``"Joker"``."""

    if card.suit == Suit.JOKER:
        return "Joker"
    return f"{_rank_name(card.rank)} of {_suit_name(card.suit)}s"


def parse_rank(text: str) -> Rank:
    """Look up a rank by display name (``"Ace"``, ``"K"``) or number (``"2"``)."""

    token = text.strip().lower()
    if token.isdigit():
        value = int(token)
        if Rank.ACE <= value <= Rank.KING:
            return Rank(value)
        raise ValueError(f"Unknown rank: {text!r}")
    for rank, name in RANK_NAMES.items():
        if token in (name.lower(), rank.name.lower()):
            return rank
    raise ValueError(f"Unknown rank: {text!r}")


def parse_suit(text: str) -> Suit:
    """Look up a real suit by name. Plurals such as ``"Hearts"`` are accepted."""

    token = text.strip().lower()
    if token.endswith("s"):
        token = token[:-1]
    for suit in SUITS:
        if token == SUIT_NAMES[suit].lower():
            return suit
    raise ValueError(f"Unknown suit: {text!r}")
