from __future__ import annotations

import json
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .card import Card, parse_rank, parse_suit
from .deck import default_sort, new_deck
from .options import (
    DeckOption,
    by_rank_then_suit,
    exclude_ranks,
    only_suits,
    with_extra_decks,
    with_filter,
    with_jokers,
    with_sorter,
)
from .shuffle import shuffle

Step = Tuple[str, Any]

STEP_KINDS = ("jokers", "extra_decks", "exclude_ranks", "only_suits", "sort")
SORT_MODES = ("default", "rank")


class DeckConfigError(ValueError):
    """Raised when a deck configuration entry cannot be interpreted."""


@dataclass
class DeckConfig:
    """Declarative description of a deck.

    ``steps`` is an ordered list of ``(kind, value)`` pairs. Each becomes one
    deck option and they run in list order.
    """

    steps: List[Step] = field(default_factory=list)
    shuffle: bool = False
    seed: int | None = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeckConfig":
        entries = data.get("options", [])
        if not isinstance(entries, list):
            raise DeckConfigError(f"\"options\" must be a list: {entries!r}")
        steps: List[Step] = []
        for entry in entries:
            if not isinstance(entry, dict) or len(entry) != 1:
                raise DeckConfigError(f"Option entries must have exactly one key: {entry!r}")
            ((kind, value),) = entry.items()
            steps.append((kind, value))
        shuffle = data.get("shuffle", False)
        if not isinstance(shuffle, bool):
            raise DeckConfigError(f"\"shuffle\" must be true or false: {shuffle!r}")
        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise DeckConfigError(f"\"seed\" must be an integer or null: {seed!r}")
        config = cls(steps=steps, shuffle=shuffle, seed=seed)
        config.options()  # validate eagerly
        return config

    def options(self) -> List[DeckOption]:
        return [step_to_option(kind, value) for kind, value in self.steps]


def _as_count(kind: str, value: Any) -> int:
    if isinstance(value, bool):
        raise DeckConfigError(f"Invalid deck option {kind!r}: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise DeckConfigError(f"Invalid deck option {kind!r}: {value!r}") from exc


def _as_list(kind: str, value: Any) -> List[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        raise DeckConfigError(f"Invalid deck option {kind!r}: expected a name or list, got {value!r}")
    return [str(name) for name in value]


def step_to_option(kind: str, value: Any) -> DeckOption:
    if kind == "jokers":
        return with_jokers(_as_count(kind, value))
    if kind == "extra_decks":
        return with_extra_decks(_as_count(kind, value))
    if kind == "exclude_ranks":
        try:
            ranks = [parse_rank(name) for name in _as_list(kind, value)]
        except ValueError as exc:
            raise DeckConfigError(str(exc)) from exc
        return with_filter(exclude_ranks(*ranks))
    if kind == "only_suits":
        try:
            suits = [parse_suit(name) for name in _as_list(kind, value)]
        except ValueError as exc:
            raise DeckConfigError(str(exc)) from exc
        return with_filter(only_suits(*suits))
    if kind == "sort":
        if value == "default":
            return default_sort
        if value == "rank":
            return with_sorter(by_rank_then_suit)
        raise DeckConfigError(f"Unknown sort mode {value!r}; expected one of {SORT_MODES}")
    raise DeckConfigError(f"Unknown deck option {kind!r}; expected one of {STEP_KINDS}")


def load_config(path: Path) -> DeckConfig:
    with path.open() as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise DeckConfigError(f"{path} must contain a JSON object")
    return DeckConfig.from_dict(data)


def build_from_config(config: DeckConfig) -> List[Card]:
    cards = new_deck(*config.options())
    if config.shuffle:
        shuffle(cards, random.Random(config.seed))
    return cards
