"""
Round outcomes for a game of Blackjack.

A round ends in one of four ways: the player wins, the dealer wins, the two
tie, or the player busts before the dealer ever plays. The last case is
signalled by `PlayerBustedError` and turned into a `GameResult` by the game.
"""

from dataclasses import dataclass
from enum import Enum, auto


class Outcome(Enum):
    """How a round ended."""

    PLAYER_WIN = auto()
    DEALER_WIN = auto()
    TIE = auto()
    PLAYER_BUST = auto()


@dataclass(frozen=True)
class GameResult:
    """
    The final result of a round.

    Attributes:
        outcome: How the round ended
        player_value: The player's final hand value
        dealer_value: The dealer's final hand value
    """

    outcome: Outcome
    player_value: int
    dealer_value: int


class PlayerBustedError(Exception):
    """Raised when the player's hand goes over the bust threshold."""

    def __init__(self, value: int):
        super().__init__(f"You busted! ({value})")
        self.value = value


def resolve(player_value: int, dealer_value: int) -> Outcome:
    """
    Compare the final hand values of a round the player did not bust.

    The comparison is purely numeric. A dealer hand over 21 is not treated
    as a loss for the dealer.
    """
    if player_value == dealer_value:
        return Outcome.TIE
    if player_value > dealer_value:
        return Outcome.PLAYER_WIN
    return Outcome.DEALER_WIN
