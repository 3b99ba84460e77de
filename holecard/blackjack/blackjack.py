"""
This module is used to play a round of Blackjack against the dealer.

The player is asked to hit or stand on the console until they stand or bust,
then the dealer reveals the hole card and draws to 17. Aces always count as 1.

Command line options:
`--pace` scales the pauses between messages (0 turns them off),
`--seed` makes the shuffle reproducible,
`--log_file` followed by a filename records the session to that file and
`--log-level` sets the level of the diagnostic log.
"""

import argparse
import logging
import random
import sys
import time
from typing import Optional, Union

from holecard.blackjack.actor import Dealer, Player
from holecard.blackjack.constants import BUST_THRESHOLD, LONG_PAUSE, PAUSE, SPLITTER
from holecard.blackjack.outcome import GameResult, Outcome, PlayerBustedError
from holecard.blackjack.state import GameState, ResolvedState, SetupState
from holecard.common.deck import Deck
from holecard.common.io_interface import (
    ConsoleIOInterface,
    IOInterface,
    LoggingIOInterface,
)

logger = logging.getLogger(__name__)


class BlackjackGame:
    """
    A class to represent a round of Blackjack.

    Attributes
    ----------
    io_interface : IOInterface
        Interface for input and output operations.
    deck : Deck
        The 52 cards for this round, shuffled once during setup.
    player : Player
        The person playing against the dealer.
    dealer : Dealer
        Dealer for the game.
    pace : float
        Multiplier for the pauses after each message. 0 disables them.
    current_state : GameState
        Current state of the game.
    result : GameResult
        The result of the round, None until it is resolved.
    """

    def __init__(
        self,
        io_interface: IOInterface,
        deck: Optional[Deck] = None,
        pace: float = 0.0,
        player_name: str = "Player",
    ):
        if pace < 0:
            raise ValueError(f"Pace must not be negative, got {pace}.")
        self.io_interface = io_interface
        self.deck = deck if deck is not None else Deck()
        self.player = Player(player_name, io_interface, say=self.say)
        self.dealer = Dealer()
        self.pace = pace
        self.current_state: GameState = SetupState()
        self.result: Optional[GameResult] = None
        self._hole_card_revealed = False

    @property
    def hole_card_revealed(self) -> bool:
        return self._hole_card_revealed

    def set_state(self, state: GameState):
        """Change the current state of the game."""
        logger.debug("Changing state to %s", state)
        self.current_state = state

    def play(self) -> GameResult:
        """Play the round until it reaches the resolved state and return the result."""
        if self.result is not None:
            return self.result

        try:
            while not isinstance(self.current_state, ResolvedState):
                self.current_state.handle(self)
        except PlayerBustedError as exc:
            self.say(str(exc), LONG_PAUSE)
            self.result = GameResult(Outcome.PLAYER_BUST, exc.value, self.dealer.value())
            self.set_state(ResolvedState())
        self.current_state.handle(self)
        return self.result

    def deal_to(self, participant: Union[Player, Dealer]):
        """Move the top card of the deck into a participant's hand."""
        card = self.deck.deal()
        participant.receive_card(card)
        logger.debug(
            "Dealt %r to %s (%d left in deck)", card, participant.name, self.deck.size
        )

    def check_player_bust(self):
        """
        Raise PlayerBustedError if the player's hand is over the threshold.

        The player is marked as busted first, so it can no longer act.
        """
        value = self.player.value()
        if value > BUST_THRESHOLD:
            self.player.bust()
            raise PlayerBustedError(value)

    def reveal_hole_card(self):
        """Turn the dealer's hole card face up. Only the first call has an effect."""
        if self._hole_card_revealed:
            return
        self._hole_card_revealed = True
        self.say("The dealer reveals the hole card!", PAUSE)
        self.say(self.dealer.describe(self._hole_card_revealed), PAUSE)

    def render_table(self) -> str:
        """The dealer's and the player's cards, framed by splitter lines."""
        return "\n".join(
            [
                SPLITTER,
                f"Cards left: {self.deck.size}",
                self.dealer.describe(self._hole_card_revealed),
                "",
                self.player.describe(),
                SPLITTER,
            ]
        )

    def show_table(self):
        self.say(self.render_table(), PAUSE)

    def say(self, message: str, pause: float = 0.0):
        """Output a message, then wait `pause` seconds scaled by the game's pace."""
        self.io_interface.output(message)
        delay = pause * self.pace
        if delay > 0:
            time.sleep(delay)


def create_io_interface(args) -> IOInterface:
    """Create the IO interface based on the command line arguments."""
    io_interface = ConsoleIOInterface()
    if args.log_file:
        io_interface = LoggingIOInterface(args.log_file, inner=io_interface)
    return io_interface


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play a round of Blackjack.")
    parser.add_argument(
        "--pace",
        type=float,
        default=1.0,
        help="Scale the pauses between messages; 0 disables them (default: 1.0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the shuffle so the round can be replayed.",
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Record the session to the specified file as well as the console.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Level of the diagnostic log written to stderr (default: WARNING)",
    )
    args = parser.parse_args(argv)
    if args.pace < 0:
        parser.error("--pace must not be negative")
    return args


def main(argv=None) -> int:
    """
    Main function to start the game.

    It handles command-line arguments, creates the game and plays one round.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    io_interface = create_io_interface(args)
    rng = random.Random(args.seed) if args.seed is not None else None
    game = BlackjackGame(io_interface, deck=Deck(rng=rng), pace=args.pace)

    try:
        game.play()
    except (EOFError, KeyboardInterrupt):
        io_interface.output("\nGame aborted.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
