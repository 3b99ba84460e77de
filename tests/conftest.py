"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by the card, deck and game tests.
"""

import pytest

from holecard.blackjack.blackjack import BlackjackGame
from holecard.common.card import Card, Rank, Suit
from holecard.common.deck import Deck
from holecard.common.io_interface import TestIOInterface


@pytest.fixture
def io_interface():
    return TestIOInterface()


@pytest.fixture
def stacked_deck(mocker):
    """
    Build a full deck whose first cards are the given ones, in order.

    Shuffling the returned deck leaves it untouched.
    """

    def _stack(*cards: Card) -> Deck:
        rest = [card for card in Deck().cards if card not in cards]
        deck = Deck(list(cards) + rest)
        mocker.patch.object(deck, "shuffle", return_value=deck)
        return deck

    return _stack


@pytest.fixture
def make_game(stacked_deck):
    """
    Build a game over a stacked deck and a TestIOInterface preloaded with input.

    Cards are dealt in order: player, dealer (hole card), player, dealer, then
    any hits.
    """

    def _make(cards, inputs=()):
        io_interface = TestIOInterface(list(inputs))
        game = BlackjackGame(io_interface, deck=stacked_deck(*cards))
        return game, io_interface

    return _make


def card(rank: Rank, suit: Suit = Suit.SPADES) -> Card:
    return Card(suit, rank)


@pytest.fixture
def cards():
    """Shorthand factory: cards(Rank.TEN, Rank.NINE) gives distinct cards."""

    def _cards(*ranks: Rank):
        used = set()
        result = []
        for rank in ranks:
            for suit in Suit:
                candidate = card(rank, suit)
                if candidate not in used:
                    used.add(candidate)
                    result.append(candidate)
                    break
            else:
                raise ValueError(f"Only four cards of rank {rank} exist.")
        return result

    return _cards
