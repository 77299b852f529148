"""Shared fixtures: a small sorted word list standing in for the full dictionary."""

import pytest

from src.engine import WordIndex

WORDS = [
    "aa", "ab", "apple", "at", "be", "cat", "cats", "cot", "cut",
    "fin", "lizards", "nut", "oat", "os", "outback", "pimento", "to", "top",
]


@pytest.fixture
def index() -> WordIndex:
    """Word index over WORDS."""
    return WordIndex(sorted(WORDS))


@pytest.fixture
def word_file(tmp_path):
    """WORDS written as a newline-delimited word list file."""
    path = tmp_path / "words.txt"
    path.write_text("\n".join(sorted(WORDS)) + "\n")
    return path


@pytest.fixture
def words() -> list:
    """The words behind the ``index`` fixture, sorted."""
    return sorted(WORDS)
