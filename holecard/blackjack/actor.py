"""
This module provides the `Player` and `Dealer` classes for a game of Blackjack.

Both participants hold a `Hand` and expose the same hand operations
(receiving a card, reporting the hand value, describing the cards), but each
owns its own way of taking a turn:

- `Player` is driven by a person through an IOInterface. It tracks whether
  it has stood or busted and asks for hit/stand until it gets a valid answer.
  Its messages go through the `say` callable it is given, so the game can
  pace them like the rest of its output.
- `Dealer` follows a fixed policy: draw while the hand is worth less than 17.
  Its first card is the hole card, kept face down until the game reveals it.

Exceptions:
    - `InvalidActionError`: Raised when a player is asked to act after its turn is over.

This module is part of the `holecard` package.
"""

from typing import Callable, List, Optional

from holecard.blackjack.action import Action
from holecard.blackjack.constants import DEALER_STAND_VALUE, FACE_DOWN, SHORT_PAUSE
from holecard.common.card import LEFT_BRACKET, RIGHT_BRACKET, Card
from holecard.common.hand import Hand
from holecard.common.io_interface import IOInterface

PROMPT = "Will you hit (h) or stand (s)?"


class InvalidActionError(Exception):
    """Raised when a player attempts to perform an action that is not currently valid."""

    pass


class Player:
    """The person playing against the dealer."""

    def __init__(
        self,
        name: str,
        io_interface: IOInterface,
        say: Optional[Callable[[str, float], None]] = None,
    ):
        self.name = name
        self.io_interface = io_interface
        self._say = say if say is not None else self._output
        self.hand = Hand()
        self.stood = False
        self.busted = False

    @property
    def cards(self) -> List[Card]:
        return self.hand.cards

    def receive_card(self, card: Card) -> None:
        """Add a dealt card to the player's hand."""
        self.hand.add_card(card)

    def value(self) -> int:
        return self.hand.value()

    def can_act(self) -> bool:
        """A player may act until they stand or bust."""
        return not (self.stood or self.busted)

    def stand(self):
        """Player chooses to stop drawing cards."""
        self.stood = True

    def bust(self):
        self.busted = True

    def decide_action(self) -> Action:
        """
        Ask the player to hit or stand.

        Keeps asking until a valid answer is given. Standing ends the
        player's turn here; hitting leaves the turn open and it is up to the
        game to deal the card.
        """
        if not self.can_act():
            raise InvalidActionError(f"{self.name} cannot act after the turn is over.")

        while True:
            self._say(PROMPT, 0.0)
            action = Action.from_input(self.io_interface.input(""))
            if action is not None:
                break
            self._say("Invalid choice.", SHORT_PAUSE)

        if action == Action.STAND:
            self.stand()
        return action

    def _output(self, message: str, pause: float = 0.0) -> None:
        self.io_interface.output(message)

    def describe(self) -> str:
        """The player's cards, highest first."""
        cards = " ".join(str(card) for card in self.hand.sorted_cards())
        return f"Your cards:\n{cards}"

    def __str__(self) -> str:
        return self.describe()


class Dealer:
    """The automated opponent."""

    def __init__(self, name: str = "Dealer"):
        self.name = name
        self.hand = Hand()

    @property
    def cards(self) -> List[Card]:
        return self.hand.cards

    @property
    def hole_card(self) -> Optional[Card]:
        """The dealer's first card, or None before the deal."""
        if not self.hand.cards:
            return None
        return self.hand.cards[0]

    def receive_card(self, card: Card) -> None:
        """Adds a card to dealer's hand."""
        self.hand.add_card(card)

    def value(self) -> int:
        return self.hand.value()

    def should_hit(self) -> bool:
        """Determine if dealer should hit."""
        return self.value() < DEALER_STAND_VALUE

    def describe(self, hole_card_revealed: bool) -> str:
        """The dealer's cards in the order dealt, hole card hidden until revealed."""
        shown = []
        cards = self.hand.cards
        if not hole_card_revealed and cards:
            shown.append(f"{LEFT_BRACKET}{FACE_DOWN}{RIGHT_BRACKET}")
            cards = cards[1:]
        shown.extend(str(card) for card in cards)
        return f"Dealer's cards: {len(self.hand)}\n" + " ".join(shown)
