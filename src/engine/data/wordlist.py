"""Loading the word list that backs a WordIndex."""

import logging
from pathlib import Path

from ..wordindex import WordIndex

log = logging.getLogger(__name__)


def load_word_index(path: str | Path) -> WordIndex:
    '''
    Load a WordIndex from a newline-delimited, pre-sorted, lowercase word list.

    Raises FileNotFoundError if the file is missing and ValueError if the
    list is not sorted lowercase ASCII; neither is recoverable for a game.
    '''
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")
    index = WordIndex.from_bytes(path.read_bytes())
    log.info("Loaded %s words from %s", f"{len(index):,}", path)
    return index
