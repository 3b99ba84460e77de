"""
This module provides the game state management for a round of Blackjack. It
uses the state design pattern to move the round through its stages:
SetupState, DealingState, PlayerTurnState, DealerTurnState and ResolvedState.

Classes:

GameState: An abstract base class for game states.
SetupState: The deck is shuffled.
DealingState: Two cards each are dealt, player first, alternating.
PlayerTurnState: The player hits or stands until they stand or bust.
DealerTurnState: The hole card is revealed and the dealer draws to 17.
ResolvedState: The hands are compared and the result is announced.

The handle method in each game state class performs the actions required in
that state, notifies the interface, and transitions to the next state. A
player bust is raised out of PlayerTurnState as a PlayerBustedError; the game
catches it and jumps straight to ResolvedState with the bust result.
"""

import logging
from abc import ABC, abstractmethod

from holecard.blackjack.action import Action
from holecard.blackjack.constants import PAUSE, SHORT_PAUSE
from holecard.blackjack.outcome import GameResult, Outcome, resolve

logger = logging.getLogger(__name__)

OUTCOME_MESSAGES = {
    Outcome.TIE: "You tied with the dealer.",
    Outcome.PLAYER_WIN: "You won!",
    Outcome.DEALER_WIN: "The dealer won :(",
}


class GameState(ABC):
    """
    Abstract base class for game states.
    """

    @abstractmethod
    def handle(self, game) -> None:
        """The method that handles the game state."""

    def __str__(self) -> str:
        return self.__class__.__name__


class SetupState(GameState):
    """
    The game state where the deck is shuffled.
    """

    def handle(self, game):
        game.say("Shuffling cards..", PAUSE)
        game.deck.shuffle()
        game.set_state(DealingState())


class DealingState(GameState):
    """
    The game state where the dealer is dealing the cards.
    """

    def handle(self, game):
        """
        Deals one card to the player, one to the dealer, and again, so the
        dealer's first card becomes the hole card.
        """
        game.say("Dealing cards..", PAUSE)
        for _ in range(2):
            game.deal_to(game.player)
            game.deal_to(game.dealer)
        game.set_state(PlayerTurnState())


class PlayerTurnState(GameState):
    """The game state where it's the player's turn to play."""

    def handle(self, game):
        """
        Runs the player's hit/stand loop and changes the game state to
        DealerTurnState once the player stands.

        The bust check runs after the opening deal and after every hit; a
        bust raises PlayerBustedError and ends the round.
        """
        player = game.player
        game.check_player_bust()
        while player.can_act():
            game.show_table()
            action = player.decide_action()
            logger.debug("%s chose %s", player.name, action.value)
            if action == Action.HIT:
                game.deal_to(player)
                game.check_player_bust()
        game.set_state(DealerTurnState())


class DealerTurnState(GameState):
    """
    The game state where it's the dealer's turn to play.
    """

    def handle(self, game):
        """Reveals the hole card, then hits until the dealer reaches 17."""
        game.reveal_hole_card()
        while game.dealer.should_hit():
            game.deal_to(game.dealer)
            game.show_table()
        game.set_state(ResolvedState())


class ResolvedState(GameState):
    """
    The game state where the round is over.
    """

    def handle(self, game):
        """
        Compares the hands, unless the player has already busted, and
        announces the result and both final values.
        """
        if game.result is None:
            player_value = game.player.value()
            dealer_value = game.dealer.value()
            outcome = resolve(player_value, dealer_value)
            game.result = GameResult(outcome, player_value, dealer_value)
            game.say(OUTCOME_MESSAGES[outcome], PAUSE)

        logger.info(
            "Round over: %s (player %d, dealer %d)",
            game.result.outcome.name,
            game.result.player_value,
            game.result.dealer_value,
        )
        game.say(f"Dealer card value: {game.result.dealer_value}", SHORT_PAUSE)
        game.say(f"User card value: {game.result.player_value}", SHORT_PAUSE)
