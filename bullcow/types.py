"""
Labels and closed enums for clarity.
"""

from enum import Enum

Word = str  # lowercase isogram, length 3 -> 7


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GuessValidity(str, Enum):
    # UNINITIATED is only a starting value, classify_guess never returns it
    UNINITIATED = "uninitiated"
    OK = "ok"
    NOT_ISOGRAM = "not_isogram"
    UNEQUAL_LENGTH = "unequal_length"
    NOT_LOWERCASE = "not_lowercase"
    NOT_ALPHABETIC = "not_alphabetic"
