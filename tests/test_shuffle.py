import random
from collections import Counter

from standard_deck.card import Card, Rank, Suit
from standard_deck.deck import default_sort, new_deck
from standard_deck.options import with_extra_decks, with_jokers
from standard_deck.shuffle import shuffle, shuffled


class _ReverseRng:
    def shuffle(self, seq):
        # Deterministic permutation for tests
        seq.reverse()


def test_shuffle_returns_same_list():
    cards = new_deck()

    assert shuffle(cards, random.Random(1)) is cards


def test_shuffle_keeps_the_same_cards():
    original = new_deck(with_jokers(2), with_extra_decks(1))
    cards = shuffle(list(original), random.Random(5))

    assert Counter(cards) == Counter(original)
    assert cards != original


def test_shuffle_is_reproducible_with_same_seed():
    first = shuffle(new_deck(), random.Random(42))
    second = shuffle(new_deck(), random.Random(42))
    other = shuffle(new_deck(), random.Random(43))

    assert first == second
    assert other != first


def test_shuffle_without_rng_still_permutes():
    cards = shuffle(new_deck())

    assert sorted(cards, key=lambda c: (c.suit, c.rank)) == new_deck()


def test_shuffle_uses_supplied_rng():
    cards = shuffle(new_deck(), _ReverseRng())

    assert cards[0] == Card(Suit.HEART, Rank.KING)
    assert cards[-1] == Card(Suit.SPADE, Rank.ACE)


def test_shuffled_leaves_input_untouched():
    cards = new_deck()

    result = shuffled(cards, random.Random(9))

    assert cards == new_deck()
    assert result is not cards
    assert default_sort(result) == cards


def test_round_trip_through_default_sort():
    for seed in range(5):
        assert default_sort(shuffle(new_deck(), random.Random(seed))) == new_deck()
