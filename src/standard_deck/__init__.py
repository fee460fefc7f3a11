"""Playing-card deck construction toolkit."""

from .card import (
    DECK_SIZE,
    RANKS,
    SUITS,
    Card,
    Rank,
    Suit,
    absolute_rank,
    card_label,
    joker,
    parse_rank,
    parse_suit,
)
from .config import DeckConfig, DeckConfigError, build_from_config, load_config
from .deck import default_sort, new_deck
from .options import (
    DeckOption,
    DeckOptionError,
    DeckSorter,
    by_rank_then_suit,
    exclude_ranks,
    only_suits,
    with_extra_decks,
    with_filter,
    with_jokers,
    with_sorter,
)
from .shuffle import shuffle, shuffled

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "SUITS",
    "RANKS",
    "DECK_SIZE",
    "absolute_rank",
    "card_label",
    "joker",
    "parse_rank",
    "parse_suit",
    "new_deck",
    "default_sort",
    "DeckOption",
    "DeckSorter",
    "DeckOptionError",
    "with_jokers",
    "with_extra_decks",
    "with_filter",
    "with_sorter",
    "exclude_ranks",
    "only_suits",
    "by_rank_then_suit",
    "shuffle",
    "shuffled",
    "DeckConfig",
    "DeckConfigError",
    "load_config",
    "build_from_config",
]
