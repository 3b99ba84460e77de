"""
This module contains the Deck class, which represents a deck of cards.

>>> deck = Deck()
>>> deck.size
52
>>> deck.deal()
Card(Clubs, 2)
>>> deck.size
51
"""

import random
from typing import List, Optional

from holecard.common.card import Card, Rank, Suit


class DeckExhaustedError(Exception):
    """Raised when a card is requested from an empty deck."""

    pass


class Deck:
    """
    A class representing a deck of cards.

    Cards are dealt from the front of the sequence.
    """

    # Precompute the default deck
    _default_deck = [Card(suit, rank) for suit in Suit for rank in Rank]

    def __init__(
        self,
        cards: Optional[List[Card]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, a default deck will be constructed.
        :param rng: A random number generator used for shuffling (optional).
                    Defaults to the module-level generator.
        >>> deck = Deck()
        >>> deck.size
        52
        """
        if cards is None:
            self.cards: List[Card] = self.initialize_default_deck()
        else:
            self.cards = cards.copy()
        self._rng = rng

    def initialize_default_deck(self) -> List[Card]:
        """
        Construct a default deck with all possible combinations of suits and ranks.

        :return: A list of Card instances representing the default deck.
        >>> deck = Deck()
        >>> len(deck.cards)
        52
        """
        return self._default_deck.copy()

    def shuffle(self):
        """
        Shuffle the cards in the deck in place.
        >>> deck = Deck()
        >>> original_order = deck.cards.copy()
        >>> print(deck.shuffle())
        Deck of 52 cards
        >>> set(deck.cards) == set(original_order)
        True
        """
        if self._rng is None:
            random.shuffle(self.cards)
        else:
            self._rng.shuffle(self.cards)
        return self

    def deal(self) -> Card:
        """
        Remove the card at the front of the deck and return it.

        :return: A card instance.
        :raises DeckExhaustedError: If the deck has no cards left.
        """
        if not self.cards:
            raise DeckExhaustedError("Cannot deal from an empty deck.")
        return self.cards.pop(0)

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.

        :return: The size of the deck.
        """
        return len(self.cards)

    def is_empty(self) -> bool:
        """
        Check if the deck is empty.

        :return: True if the deck is empty, False otherwise.
        """
        return len(self.cards) == 0

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"
