"""Board model, premium-square layout and text rendering."""

from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from .models import BoardTile, Move, Position
from .tiles import BOARD_SIZE, LETTERS


class Modifier(str, Enum):
    DOUBLE_LETTER = "DL"
    TRIPLE_LETTER = "TL"
    DOUBLE_WORD = "DW"
    TRIPLE_WORD = "TW"


_TRIPLE_WORDS = [(0, 0), (0, 7), (0, 14), (7, 0), (7, 14), (14, 0), (14, 7), (14, 14)]
_DOUBLE_WORDS = [
    (7, 7), (1, 1), (2, 2), (3, 3), (4, 4), (10, 10), (11, 11), (12, 12), (13, 13),
    (1, 13), (2, 12), (3, 11), (4, 10), (13, 1), (12, 2), (11, 3), (10, 4),
]
_TRIPLE_LETTERS = [
    (1, 5), (1, 9), (5, 1), (5, 5), (5, 9), (5, 13),
    (9, 1), (9, 5), (9, 9), (9, 13), (13, 5), (13, 9),
]
_DOUBLE_LETTERS = [
    (0, 3), (0, 11), (3, 0), (11, 0), (14, 3), (14, 11), (3, 14), (11, 14),
    (2, 6), (2, 8), (3, 7), (6, 2), (8, 2), (7, 3), (6, 12), (8, 12),
    (7, 11), (12, 6), (12, 8), (11, 7), (6, 6), (6, 8), (8, 8), (8, 6),
]


def _build_modifiers() -> Mapping[Position, Modifier]:
    layout: Dict[Position, Modifier] = {}
    for cells, modifier in (
        (_TRIPLE_WORDS, Modifier.TRIPLE_WORD),
        (_DOUBLE_WORDS, Modifier.DOUBLE_WORD),
        (_TRIPLE_LETTERS, Modifier.TRIPLE_LETTER),
        (_DOUBLE_LETTERS, Modifier.DOUBLE_LETTER),
    ):
        for cell in cells:
            layout[Position(*cell)] = modifier
    return MappingProxyType(layout)


# Includes the center as a double word
MODIFIERS: Mapping[Position, Modifier] = _build_modifiers()


def modifier_at(pos: Tuple[int, int]) -> Optional[Modifier]:
    return MODIFIERS.get(Position(*pos))


def _empty_cells() -> List[List[Optional[BoardTile]]]:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


class Board(BaseModel):
    """
    A 15x15 grid of optional tiles.

    Boards are treated as values: applying a move returns a new board and
    leaves this one untouched.
    """

    cells: List[List[Optional[BoardTile]]] = Field(default_factory=_empty_cells)

    @field_validator("cells")
    @classmethod
    def _is_full_grid(cls, cells: List[List[Optional[BoardTile]]]) -> List[List[Optional[BoardTile]]]:
        if len(cells) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cells):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        if any(tile is not None and not tile.is_resolved for row in cells for tile in row):
            raise ValueError("Blanks on the board must stand for a letter")
        return cells

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Board":
        """
        Parse a board from its text form.

        Each row is 15 characters: ``.`` for an empty cell, an uppercase
        letter for a tile, a lowercase letter for a blank standing for it.
        Missing trailing rows are empty.
        """
        if len(rows) > BOARD_SIZE:
            raise ValueError(f"Board has {len(rows)} rows (max {BOARD_SIZE})")
        cells = _empty_cells()
        for r, row in enumerate(rows):
            row = row.strip()
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {BOARD_SIZE}")
            for c, ch in enumerate(row):
                if ch == ".":
                    continue
                if ch.upper() not in LETTERS:
                    raise ValueError(f"Invalid cell {ch!r} at ({r}, {c})")
                cells[r][c] = BoardTile.of(ch) if ch.isupper() else BoardTile.wildcard(ch.upper())
        return cls(cells=cells)

    def get(self, pos: Tuple[int, int]) -> Optional[BoardTile]:
        """Tile at ``pos``, or None for an empty or off-board cell."""
        row, col = pos
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return self.cells[row][col]
        return None

    def is_occupied(self, pos: Tuple[int, int]) -> bool:
        return self.get(pos) is not None

    def is_empty(self) -> bool:
        return all(tile is None for row in self.cells for tile in row)

    def tile_count(self) -> int:
        return sum(1 for row in self.cells for tile in row if tile is not None)

    def with_move_applied(self, move: Move) -> "Board":
        """A new board with the move's tiles placed. Blanks must be resolved."""
        cells = [row[:] for row in self.cells]
        for (row, col), tile in move.tiles:
            cells[row][col] = tile
        return Board(cells=cells)

    def render(self) -> str:
        """Render the board to its text form."""
        return "\n".join(
            "".join("." if tile is None else str(tile) for tile in row)
            for row in self.cells
        )

    def __str__(self) -> str:
        return self.render()
