'''
Console Bulls and Cows

Flow:
intro -> pick word length -> play round -> play again?
                                          yes -> same word? -> yes: same length
                                                            -> no:  new length
                                          no  -> quit

All rules come from BullCowGame; this module only reads lines and prints.
'''

import argparse
import logging
from typing import Callable, List, Optional

from .config import Settings, configure_logging, load_settings
from .game import BullCowGame
from .schemas import DEFAULT_CATALOG, GuessResult, WordCatalog
from .types import GameStatus, GuessValidity

logger = logging.getLogger(__name__)

CORRECTIONS = {
    GuessValidity.NOT_ALPHABETIC: "Enter a word containing only lowercase english letters :  ",
    GuessValidity.NOT_LOWERCASE: "Enter a word containing only lowercase english letters :  ",
    GuessValidity.NOT_ISOGRAM: "Enter a word containing no repeating letters :  ",
}


class QuitGame(Exception):
    """Raised when the player closes the input stream."""


def banner(text: str) -> str:
    line = "=" * len(text)
    return f"{line}\n{text}\n{line}\n"


def is_yes(response: str) -> bool:
    # empty answer counts as "no"
    return response[:1].lower() == "y"


def describe(result: GuessResult) -> str:
    return f"Bulls : {result.bulls}, Cows : {result.cows}"


class ConsoleShell:
    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        settings: Optional[Settings] = None,
        catalog: Optional[WordCatalog] = None,
    ) -> None:
        self._input = input_fn
        self._output = output
        self._settings = settings if settings is not None else Settings()
        self._catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self.game: Optional[BullCowGame] = None

    # --- Input helpers ---

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except (EOFError, KeyboardInterrupt):
            raise QuitGame()

    def ask_yes_no(self, question: str) -> bool:
        return is_yes(self._ask(f"{question} (Y/N) : "))

    def ask_word_length(self) -> int:
        lowest, highest = min(self._catalog.lengths), max(self._catalog.lengths)
        prompt = f"Enter the length of the hidden word you want to play with (within {lowest} and {highest}) : "
        while True:
            raw = self._ask(prompt)
            try:
                length = int(raw.strip())
            except ValueError:
                length = 0
            if length in self._catalog.lengths:
                return length
            prompt = f"Please enter a valid length between {lowest} and {highest} : "

    def ask_valid_guess(self, game: BullCowGame) -> str:
        prompt = ""
        while True:
            guess = self._ask(prompt)
            validity = game.classify_guess(guess)
            if validity == GuessValidity.OK:
                return guess
            if validity == GuessValidity.UNEQUAL_LENGTH:
                prompt = f"Enter a word containing {game.get_hidden_word_length()} letters :  "
            else:
                prompt = CORRECTIONS[validity]

    # --- Game flow ---

    def start_round(self, length: int) -> BullCowGame:
        """Reset the current game, re-asking for a length the catalog rejects."""
        while True:
            try:
                if self.game is None:
                    self.game = BullCowGame(length, catalog=self._catalog)
                else:
                    self.game.reset_with_new_word(length)
                return self.game
            except LookupError as error:
                logger.warning("%s", error)
                length = self.ask_word_length()

    def play_single_round(self, game: BullCowGame) -> GameStatus:
        while game.get_game_status() == GameStatus.IN_PROGRESS:
            self._output(f"Current turn {game.get_current_turn()} out of {game.get_max_turn()} turns :  ")
            guess = self.ask_valid_guess(game)
            result = game.submit_valid_guess(guess)
            self._output(describe(result) + "\n")

        if game.get_game_status() == GameStatus.WON:
            self._output(banner("Congratulations! that's the word!"))
        else:
            self._output(banner("Oh no! You are out of guesses."))
        return game.get_game_status()

    def run(self) -> None:
        self._output(banner("Welcome to Bulls and Cows, a logical word game!"))
        try:
            length = self._settings.word_length or self.ask_word_length()
            game = self.start_round(length)

            while True:
                self.play_single_round(game)
                if not self.ask_yes_no("Do you want to play again?"):
                    break

                if self.ask_yes_no("Do you want to play with the same word?"):
                    game = self.start_round(game.get_hidden_word_length())
                else:
                    game = self.start_round(self.ask_word_length())
                self._output(banner("Let's play again!"))
        except QuitGame:
            self._output("\nExiting.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bullcow",
        description="Play Bulls and Cows, a logical word game.",
    )
    parser.add_argument(
        "--length",
        type=int,
        choices=list(DEFAULT_CATALOG.lengths),
        help="hidden word length; asked interactively when omitted",
    )
    parser.add_argument("--log-level", help="logging level (default from BULLCOW_LOG_LEVEL)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)

    if args.length is not None:
        settings = Settings(app_env=settings.app_env, log_level=settings.log_level, word_length=args.length)

    ConsoleShell(settings=settings).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
