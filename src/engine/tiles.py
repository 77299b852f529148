"""Tile tables: letters, point values and the per-game supply."""

from typing import Dict, List, Literal

BOARD_SIZE = 15
CENTER = (7, 7)
MAX_TILES_PER_MOVE = 7
BINGO_BONUS = 50

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BLANK = "BLANK"

Letter = Literal[
    "A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L", "M",
    "N", "O", "P", "Q", "R", "S", "T", "U", "V", "W", "X", "Y", "Z",
]

# Official point values; blanks score nothing
TILE_POINTS: Dict[str, int] = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2,
    "H": 4, "I": 1, "J": 8, "K": 5, "L": 1, "M": 3, "N": 1,
    "O": 1, "P": 3, "Q": 10, "R": 1, "S": 1, "T": 1, "U": 1,
    "V": 4, "W": 4, "X": 8, "Y": 4, "Z": 10, BLANK: 0,
}

# Standard 100-tile distribution
TILE_DISTRIBUTION: Dict[str, int] = {
    "A": 9, "B": 2, "C": 2, "D": 4, "E": 12, "F": 2, "G": 3,
    "H": 2, "I": 9, "J": 1, "K": 1, "L": 4, "M": 2, "N": 6,
    "O": 8, "P": 2, "Q": 1, "R": 6, "S": 4, "T": 6, "U": 4,
    "V": 2, "W": 2, "X": 1, "Y": 2, "Z": 1, BLANK: 2,
}

_LETTER_BYTES: Dict[str, int] = {letter: ord("a") + i for i, letter in enumerate(LETTERS)}
_BYTE_LETTERS: Dict[int, str] = {byte: letter for letter, byte in _LETTER_BYTES.items()}


def letter_to_byte(letter: str) -> int:
    """Lowercase ASCII byte for a letter (``'A'`` -> ``0x61``)."""
    try:
        return _LETTER_BYTES[letter]
    except KeyError:
        raise ValueError(f"Not a letter: {letter!r}") from None


def byte_to_letter(byte: int) -> str:
    """Letter for a lowercase ASCII byte (``0x61`` -> ``'A'``)."""
    try:
        return _BYTE_LETTERS[byte]
    except KeyError:
        raise ValueError(f"Not a lowercase letter byte: {byte!r}") from None


def letter_ordinal(letter: str) -> int:
    """Zero-based alphabet position of a letter."""
    return letter_to_byte(letter) - ord("a")


def point_value(tile: str) -> int:
    """Point value of a tile (a letter or ``BLANK``)."""
    return TILE_POINTS[tile]


def full_tile_set() -> List[str]:
    """Every tile in a game's supply, unshuffled."""
    tiles: List[str] = []
    for tile, count in TILE_DISTRIBUTION.items():
        tiles.extend([tile] * count)
    return tiles
