"""
This module contains the Hand class, an ordered collection of cards held by
one participant.

A hand is append-only: cards arrive from the deck and stay until the session
ends. Both the player and the dealer hold a Hand rather than being one.
"""
from typing import List

from holecard.common.card import Card


class Hand:
    """
    A hand of cards in the order they were received.

    The hand's value is computed from its cards on every call.
    """

    def __init__(self):
        self._cards: List[Card] = []

    @property
    def cards(self) -> List[Card]:
        """Returns the cards in the hand."""
        return self._cards

    def add_card(self, card: Card) -> None:
        """
        Adds a card to the hand.

        Args:
            card: The card to add.
        """
        self._cards.append(card)

    def value(self) -> int:
        """Sum of the effective values of all cards in the hand."""
        return sum(card.effective_value() for card in self._cards)

    def sorted_cards(self) -> List[Card]:
        """
        Returns the cards ordered for display.

        Highest value first; cards of equal value are ordered by rank label,
        so numeric cards (empty label) come before named ones.
        The hand itself is left untouched.
        """
        return sorted(
            self._cards, key=lambda card: (-card.effective_value(), card.label)
        )

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        """
        Returns a string representation of the hand for debugging.

        Returns:
            A string in the form "Hand([Card(...), ...])".
        """
        return f"Hand({self.cards!r})"

    def __str__(self) -> str:
        """
        Returns a string representation of the hand for display.

        Returns:
            The display form of each card, separated by spaces.
        """
        return " ".join(str(card) for card in self.cards)
