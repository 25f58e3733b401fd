"""
Pure game logic (no console, no round state).
Two jobs:
- classify a candidate guess against the hidden word length
- score a valid guess: bulls (right letter, right place) and
  cows (right letter, wrong place)

Guesses and hidden words are isograms, so every letter appears at most once.
"""

from .schemas import GuessResult
from .types import GuessValidity, Word


def is_alphabetic(candidate: str) -> bool:
    """True when every character is an English letter (A-Z or a-z)."""
    for letter in candidate:
        if not ("a" <= letter <= "z" or "A" <= letter <= "Z"):
            return False
    return True


def is_lowercase(candidate: str) -> bool:
    for letter in candidate:
        if letter < "a" or letter > "z":
            return False
    return True


def is_isogram(candidate: str) -> bool:
    return len(set(candidate)) == len(candidate)


def classify_guess(candidate: str, hidden_length: int) -> GuessValidity:
    """
    Checks run in this order and the first failing one wins:
      1. not alphabetic
      2. not lowercase
      3. wrong length
      4. repeated letter
    Example:
      classify_guess("a1a", 5) -> NOT_ALPHABETIC (not UNEQUAL_LENGTH)
    """
    validity = GuessValidity.UNINITIATED

    if not is_alphabetic(candidate):
        validity = GuessValidity.NOT_ALPHABETIC
    elif not is_lowercase(candidate):
        validity = GuessValidity.NOT_LOWERCASE
    elif len(candidate) != hidden_length:
        validity = GuessValidity.UNEQUAL_LENGTH
    elif not is_isogram(candidate):
        validity = GuessValidity.NOT_ISOGRAM
    else:
        validity = GuessValidity.OK

    return validity


def score_guess(hidden: Word, guess: Word) -> GuessResult:
    """
    Example:
      hidden = "quiz"
      guess  = "ziuq"
      every letter is present but none is in place -> bulls=0, cows=4
    """

    # 0. Validate lengths match
    n = len(hidden)
    if len(guess) != n:
        raise ValueError("Hidden word and guess must be the same length.")

    # 1. Remember where each letter of the guess sits
    letter_to_position = {}
    for position, letter in enumerate(guess):
        letter_to_position[letter] = position

    # 2. Walk the hidden word: same index -> bull, elsewhere in the guess -> cow
    bulls = 0
    cows = 0
    for position, letter in enumerate(hidden):
        if letter in letter_to_position:
            if letter_to_position[letter] == position:
                bulls += 1
            else:
                cows += 1

    return GuessResult(bulls=bulls, cows=cows)


def is_win(result: GuessResult, hidden: Word) -> bool:
    """Win = every letter of the hidden word is a bull."""
    return result.bulls == len(hidden)
