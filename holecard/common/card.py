"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Clubs, Diamonds, Hearts, and Spades.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Two through Ten, Jack, Queen, King, and Ace.

- `Card`: An immutable playing card. A card has a suit and a rank, knows its
point value, and renders itself for debugging and for display.

This module is part of the `holecard` package.
"""

from dataclasses import dataclass
from enum import Enum, unique

LEFT_BRACKET = "〚"
RIGHT_BRACKET = "〛"


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    CLUBS = "Clubs"
    DIAMONDS = "Diamonds"
    HEARTS = "Hearts"
    SPADES = "Spades"

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck.

    Numeric ranks carry their number as a string; named ranks carry their name.
    """

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"
    ACE = "Ace"

    @property
    def label(self) -> str:
        """The rank name, or an empty string for numeric ranks."""
        if self.value.isdigit():
            return ""
        return self.value

    @property
    def base_value(self) -> int:
        """
        The raw value of the rank.

        Faces are worth 10 and the Ace carries 0 as a sentinel; see
        `Card.effective_value` for what an Ace actually scores.
        """
        if self == Rank.ACE:
            return 0
        if self.value.isdigit():
            return int(self.value)
        return 10

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Card:
    """
    Class representing a playing card. This class is a member of a card deck.

    >>> card = Card(Suit.HEARTS, Rank.ACE)
    >>> card.effective_value()
    1
    >>> print(card)
    〚Ace of Hearts〛
    >>> card
    Card(Hearts, Ace, 0)
    """

    suit: Suit
    rank: Rank

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")

    @property
    def label(self) -> str:
        return self.rank.label

    @property
    def base_value(self) -> int:
        return self.rank.base_value

    def effective_value(self) -> int:
        """
        The number of points this card contributes to a hand.

        An Ace always counts as 1. There is no soft 11.
        """
        if self.base_value == 0:
            return 1
        return self.base_value

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string in the form "Card(suit[, label], base value)".
        """
        parts = [str(self.suit)]
        if self.label:
            parts.append(self.label)
        parts.append(str(self.base_value))
        return f"Card({', '.join(parts)})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: A string in the form "〚rank of suit〛".
        """
        face = self.label or str(self.base_value)
        return f"{LEFT_BRACKET}{face} of {self.suit}{RIGHT_BRACKET}"
