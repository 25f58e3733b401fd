"""
One round of Bulls and Cows held in memory.
- BullCowGame owns the word catalog and the current RoundState.
- Validation and scoring rules live in engine.py; this module only tracks
  the turn counter and the win/loss status.

Not thread-safe: callers must serialize access to a single instance.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .engine import classify_guess, is_win, score_guess
from .schemas import DEFAULT_CATALOG, GuessResult, WordCatalog
from .types import GameStatus, GuessValidity, Word

logger = logging.getLogger(__name__)


@dataclass
class RoundState:
    hidden_word: Word
    current_turn: int = 1
    status: GameStatus = GameStatus.IN_PROGRESS


class BullCowGame:
    def __init__(self, hidden_word_length: int, catalog: Optional[WordCatalog] = None) -> None:
        self._catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self._round: RoundState
        self.reset_with_new_word(hidden_word_length)

    @property
    def catalog(self) -> WordCatalog:
        return self._catalog

    # --- Getters ---

    def get_current_turn(self) -> int:
        return self._round.current_turn

    def get_max_turn(self) -> int:
        return self._catalog.max_turns_for(self.get_hidden_word_length())

    def get_hidden_word_length(self) -> int:
        return len(self._round.hidden_word)

    def get_game_status(self) -> GameStatus:
        return self._round.status

    # --- Game play ---

    def classify_guess(self, candidate: str) -> GuessValidity:
        return classify_guess(candidate, self.get_hidden_word_length())

    def submit_valid_guess(self, candidate: Word) -> GuessResult:
        """
        Score a guess that already classified as OK and advance the turn.
        The guess is not validated again here.
        """
        state = self._round
        result = score_guess(state.hidden_word, candidate)

        state.current_turn += 1

        # Won and Lost are terminal until the next reset
        if state.status == GameStatus.IN_PROGRESS:
            if is_win(result, state.hidden_word):
                state.status = GameStatus.WON
            elif state.current_turn > self.get_max_turn():
                state.status = GameStatus.LOST

        logger.debug(
            "turn %d scored: bulls=%d cows=%d status=%s",
            state.current_turn - 1, result.bulls, result.cows, state.status.value,
        )
        return result

    # --- Reset ---

    def reset_with_new_word(self, hidden_word_length: int) -> None:
        """
        Start a fresh round. Raises LookupError when the catalog has no word
        of that length; the current round is left untouched in that case.
        """
        hidden_word = self._catalog.word_for(hidden_word_length)
        self._round = RoundState(hidden_word=hidden_word)
        logger.debug(
            "new round: length=%d max_turns=%d",
            hidden_word_length, self._catalog.max_turns_for(hidden_word_length),
        )
