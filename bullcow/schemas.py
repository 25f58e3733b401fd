"""
Explicit validation & Pydantic models
- WordCatalog: the fixed hidden word and turn budget for every word length.
  Validated once when built, read-only afterwards.
- GuessResult: the bulls/cows feedback for a single guess.
"""

from types import MappingProxyType
from typing import Mapping, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .types import Word


# 1. Feedback for a single guess
class GuessResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    bulls: int = Field(0, ge=0, description="Letters in the right place")
    cows: int = Field(0, ge=0, description="Letters in the word but in the wrong place")


# 2. Hidden words and max turns, both keyed by word length
class WordCatalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    words: Mapping[int, Word] = Field(..., description="Word length -> hidden word")
    max_turns: Mapping[int, int] = Field(..., description="Word length -> maximum allowed turn")

    @model_validator(mode="after")
    def check_tables(self) -> "WordCatalog":
        """
        Both tables must cover the same lengths, every word must be as long
        as its key and every turn budget must be positive.
        """
        if set(self.words) != set(self.max_turns):
            raise ValueError("words and max_turns must have the same word lengths.")

        for length, word in self.words.items():
            if len(word) != length:
                raise ValueError(f"Hidden word {word!r} is not {length} letters long.")
            if self.max_turns[length] <= 0:
                raise ValueError(f"Max turns for length {length} must be positive.")

        # read-only copies so the tables cannot change after validation
        object.__setattr__(self, "words", MappingProxyType(dict(self.words)))
        object.__setattr__(self, "max_turns", MappingProxyType(dict(self.max_turns)))
        return self

    @property
    def lengths(self) -> Tuple[int, ...]:
        return tuple(sorted(self.words))

    def word_for(self, length: int) -> Word:
        if length not in self.words:
            raise LookupError(
                f"No hidden word of length {length}; supported lengths are {list(self.lengths)}."
            )
        return self.words[length]

    def max_turns_for(self, length: int) -> int:
        if length not in self.max_turns:
            raise LookupError(
                f"No turn limit for length {length}; supported lengths are {list(self.lengths)}."
            )
        return self.max_turns[length]


DEFAULT_CATALOG = WordCatalog(
    words={3: "ant", 4: "quiz", 5: "plant", 6: "friend", 7: "academy"},
    max_turns={3: 4, 4: 6, 5: 8, 6: 11, 7: 16},
)
