"""Blackjack-specific constants."""

# A hand worth more than this is bust.
BUST_THRESHOLD = 21

# The dealer keeps drawing while below this value.
DEALER_STAND_VALUE = 17

SPLITTER = "━━━━━━━━━━━━━━━━━━♡♤♡━━━━━━━━━━━━━━━━━━"

FACE_DOWN = "Face Down"

# Relative pauses after each kind of message, scaled by the game's pace.
SHORT_PAUSE = 0.25
PAUSE = 0.5
LONG_PAUSE = 1.0
