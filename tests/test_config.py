import json
import random

import pytest

from standard_deck.card import Rank, Suit
from standard_deck.config import DeckConfig, DeckConfigError, build_from_config, load_config
from standard_deck.deck import new_deck
from standard_deck.options import DeckOptionError
from standard_deck.shuffle import shuffle


def test_from_dict_preserves_option_order():
    config = DeckConfig.from_dict(
        {"options": [{"jokers": 2}, {"extra_decks": 1}, {"exclude_ranks": ["Two", "3"]}]}
    )

    assert config.steps == [
        ("jokers", 2),
        ("extra_decks", 1),
        ("exclude_ranks", ["Two", "3"]),
    ]
    cards = build_from_config(config)

    # 54 cards doubled, then eight twos and eight threes removed.
    assert len(cards) == 108 - 16
    assert sum(1 for c in cards if c.suit == Suit.JOKER) == 4
    assert not any(c.rank in (Rank.TWO, Rank.THREE) for c in cards)


def test_only_suits_and_sort_steps():
    config = DeckConfig.from_dict(
        {"options": [{"only_suits": ["Hearts", "spade"]}, {"sort": "rank"}]}
    )

    cards = build_from_config(config)

    assert len(cards) == 26
    assert [c.rank for c in cards[:2]] == [Rank.ACE, Rank.ACE]
    assert [c.suit for c in cards[:2]] == [Suit.SPADE, Suit.HEART]


def test_default_sort_step_undoes_rank_sort():
    config = DeckConfig(steps=[("sort", "rank"), ("sort", "default")])

    assert build_from_config(config) == new_deck()


def test_shuffle_uses_seed():
    config = DeckConfig.from_dict({"options": [{"jokers": 1}], "shuffle": True, "seed": 12})

    expected = shuffle(new_deck(*config.options()), random.Random(12))

    assert build_from_config(config) == expected
    assert build_from_config(config) == expected


@pytest.mark.parametrize(
    "data",
    [
        {"options": [{"wildcards": 1}]},
        {"options": [{"jokers": 1, "extra_decks": 1}]},
        {"options": ["jokers"]},
        {"options": [{"exclude_ranks": "Twelve"}]},
        {"options": [{"only_suits": ["Stars"]}]},
        {"options": [{"sort": "backwards"}]},
        {"options": [{"jokers": None}]},
        {"options": [{"jokers": "many"}]},
        {"options": [{"extra_decks": True}]},
        {"options": [{"exclude_ranks": 5}]},
        {"options": {"jokers": 1}},
        {"shuffle": "false"},
        {"seed": "7"},
        {"seed": 1.5},
    ],
)
def test_from_dict_rejects_bad_entries(data):
    with pytest.raises(DeckConfigError):
        DeckConfig.from_dict(data)


def test_negative_extra_decks_fails_when_loading():
    with pytest.raises(DeckOptionError):
        DeckConfig.from_dict({"options": [{"extra_decks": -2}]})


def test_load_config_reads_json(tmp_path):
    path = tmp_path / "deck.json"
    path.write_text(json.dumps({"options": [{"jokers": 3}], "seed": 4}))

    config = load_config(path)

    assert config.steps == [("jokers", 3)]
    assert config.seed == 4
    assert config.shuffle is False
    assert len(build_from_config(config)) == 55


def test_load_config_requires_object(tmp_path):
    path = tmp_path / "deck.json"
    path.write_text("[]")

    with pytest.raises(DeckConfigError):
        load_config(path)


def test_shuffle_flag_must_be_boolean():
    assert DeckConfig.from_dict({"shuffle": False}).shuffle is False
    assert DeckConfig.from_dict({"shuffle": True, "seed": None}).shuffle is True
