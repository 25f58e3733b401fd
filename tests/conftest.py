"""
Shared fixtures:
- a tiny custom catalog so tests do not depend on the default words
- scripted console input/output for the shell
"""
import pytest
from typing import Callable, List

from bullcow.game import BullCowGame
from bullcow.schemas import WordCatalog


@pytest.fixture
def small_catalog() -> WordCatalog:
    return WordCatalog(words={2: "on", 3: "cab"}, max_turns={2: 1, 3: 2})


@pytest.fixture
def quiz_game() -> BullCowGame:
    # hidden word "quiz", max turn 6
    return BullCowGame(4)


class ScriptedConsole:
    """Feeds answers one by one and records every prompt and printed line."""

    def __init__(self, answers: List[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.lines: List[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, text: str) -> None:
        self.lines.append(text)

    @property
    def transcript(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def console() -> Callable[[List[str]], ScriptedConsole]:
    def make(answers: List[str]) -> ScriptedConsole:
        return ScriptedConsole(answers)
    return make
