"""Word list loading."""

from .wordlist import load_word_index

__all__ = ["load_word_index"]
