"""
Testing the catalog and result models.
"""

import pytest
from pydantic import ValidationError

from bullcow.schemas import DEFAULT_CATALOG, GuessResult, WordCatalog


def test_default_catalog_tables():
    assert DEFAULT_CATALOG.lengths == (3, 4, 5, 6, 7)
    assert DEFAULT_CATALOG.word_for(6) == "friend"
    assert DEFAULT_CATALOG.max_turns_for(7) == 16


def test_catalog_lookup_outside_domain():
    with pytest.raises(LookupError):
        DEFAULT_CATALOG.word_for(8)
    with pytest.raises(LookupError):
        DEFAULT_CATALOG.max_turns_for(2)


def test_catalog_rejects_mismatched_keys():
    with pytest.raises(ValidationError):
        WordCatalog(words={3: "ant", 4: "quiz"}, max_turns={3: 4})


def test_catalog_rejects_word_of_wrong_length():
    with pytest.raises(ValidationError):
        WordCatalog(words={3: "quiz"}, max_turns={3: 4})


def test_catalog_rejects_non_positive_turns():
    with pytest.raises(ValidationError):
        WordCatalog(words={3: "ant"}, max_turns={3: 0})


def test_catalog_is_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_CATALOG.words = {}


def test_catalog_tables_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CATALOG.words[3] = "quiz"
    with pytest.raises(TypeError):
        DEFAULT_CATALOG.max_turns[3] = 0

    assert DEFAULT_CATALOG.word_for(3) == "ant"
    assert DEFAULT_CATALOG.max_turns_for(3) == 4


def test_catalog_copies_its_input():
    words = {3: "ant"}
    max_turns = {3: 4}
    catalog = WordCatalog(words=words, max_turns=max_turns)

    # changing the source dicts afterwards does not reach the catalog
    words[3] = "quiz"
    max_turns[3] = 0

    assert catalog.word_for(3) == "ant"
    assert catalog.max_turns_for(3) == 4


def test_guess_result_counts_are_non_negative():
    assert GuessResult().bulls == 0
    with pytest.raises(ValidationError):
        GuessResult(bulls=-1, cows=0)
