"""Sorted word list with exact and prefix-range lookups."""

from typing import Iterable, List, Optional, Sequence


def _is_lowercase_word(word: str) -> bool:
    return word.isascii() and word.isalpha() and word.islower()


class WordIndex:
    """
    An immutable, lexicographically sorted list of lowercase words.

    The list is checked once when the index is built: every entry must be
    lowercase ASCII letters and the entries must be in non-decreasing order.
    A list that fails the check is a corrupted dictionary, and a ValueError
    is raised rather than serving wrong answers.

    After construction the index is never modified, so one instance can be
    shared by every caller.
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str]):
        words = tuple(words)
        bad = next((w for w in words if not _is_lowercase_word(w)), None)
        if bad is not None:
            raise ValueError(f"Word list entry {bad!r} is not lowercase ASCII letters")
        for prev, word in zip(words, words[1:]):
            if word < prev:
                raise ValueError(f"Word list is not sorted: {prev!r} comes before {word!r}")
        self._words: Sequence[str] = words

    @classmethod
    def from_bytes(cls, data: bytes) -> "WordIndex":
        """Build an index from a newline-delimited ASCII word list."""
        lines = data.decode("ascii").splitlines()
        return cls(line.strip() for line in lines if line.strip())

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, i: int) -> str:
        return self._words[i]

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def contains(self, word: str) -> bool:
        """True if ``word`` (any case) is in the list."""
        word = word.lower()
        i = self._lower_bound(word)
        return i < len(self._words) and self._words[i] == word

    def prefix_range(self, prefix: str) -> Optional[range]:
        """
        Index range of every entry starting with ``prefix``.

        Returns None when no entry has the prefix. The empty prefix matches
        the whole list. The prefix is compared as given, so an uppercase
        prefix never matches.
        """
        words = self._words
        start = self._lower_bound(prefix)
        if start == len(words) or not words[start].startswith(prefix):
            return None if prefix else range(0, len(words))

        # Mirror search: first entry past the block of prefixed entries
        lo, hi = start + 1, len(words)
        while lo < hi:
            mid = (lo + hi) // 2
            if words[mid].startswith(prefix):
                lo = mid + 1
            else:
                hi = mid
        return range(start, lo)

    def words_with_prefix(self, prefix: str) -> List[str]:
        found = self.prefix_range(prefix)
        if found is None:
            return []
        return list(self._words[found.start:found.stop])

    def _lower_bound(self, key: str) -> int:
        """Leftmost index whose entry is not less than ``key``."""
        lo, hi = 0, len(self._words)
        while lo < hi:
            mid = (lo + hi) // 2
            if self._words[mid] < key:
                lo = mid + 1
            else:
                hi = mid
        return lo
