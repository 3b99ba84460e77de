"""Defines the Action enum for the choices a player can make on their turn."""
from enum import Enum
from typing import Optional


class Action(Enum):
    """Enum for the possible actions a player can take in a game of blackjack."""

    HIT = "hit"
    STAND = "stand"

    @property
    def shortcut(self) -> str:
        """Single-letter token accepted at the prompt."""
        return self.value[0]

    @classmethod
    def from_input(cls, text: str) -> Optional["Action"]:
        """
        Parse a line of player input.

        Accepts the action name or its first letter, in any case, with
        surrounding whitespace ignored. Returns None for anything else.
        """
        token = text.strip().lower()
        for action in cls:
            if token in (action.value, action.shortcut):
                return action
        return None
