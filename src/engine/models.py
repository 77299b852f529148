"""Data models for tiles, moves and move outcomes."""

from typing import Dict, List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .tiles import BLANK, BOARD_SIZE, CENTER, Letter, point_value


class Position(NamedTuple):
    """A cell on the board."""
    row: int
    col: int


class BoardTile(BaseModel):
    """
    A tile as placed on the board.

    Either a concrete letter, or a blank carrying the letter it stands for.
    A blank with no letter is an unresolved wildcard; it only ever appears
    in a proposed move, never on a board.
    """

    model_config = ConfigDict(frozen=True)

    letter: Optional[Letter] = None
    blank: bool = False

    @model_validator(mode="after")
    def _lettered_unless_blank(self) -> "BoardTile":
        if self.letter is None and not self.blank:
            raise ValueError("A non-blank tile must carry a letter")
        return self

    @classmethod
    def of(cls, letter: str) -> "BoardTile":
        """A regular lettered tile."""
        return cls(letter=letter)

    @classmethod
    def wildcard(cls, letter: Optional[str] = None) -> "BoardTile":
        """A blank, optionally already standing for ``letter``."""
        return cls(letter=letter, blank=True)

    @property
    def is_resolved(self) -> bool:
        return self.letter is not None

    @property
    def tile(self) -> str:
        """The rack tile this came from: its letter, or ``BLANK``."""
        return BLANK if self.blank else self.letter

    @property
    def points(self) -> int:
        return point_value(self.tile)

    def resolved(self, letter: str) -> "BoardTile":
        """This blank standing for ``letter``."""
        return BoardTile(letter=letter, blank=True)

    def __str__(self) -> str:
        if self.letter is None:
            return "?"
        return self.letter.lower() if self.blank else self.letter


Placement = Tuple[Position, BoardTile]


class Move(BaseModel):
    """
    A set of tile placements, sorted by position.

    Moves are not inherently valid: tiles may overlap each other or the
    board, be scattered, or spell nothing. Words formed on the board are
    represented as moves too.
    """

    model_config = ConfigDict(frozen=True)

    tiles: List[Placement] = Field(default_factory=list)

    @field_validator("tiles")
    @classmethod
    def _on_board_and_sorted(cls, tiles: List[Placement]) -> List[Placement]:
        for pos, _ in tiles:
            if not (0 <= pos.row < BOARD_SIZE and 0 <= pos.col < BOARD_SIZE):
                raise ValueError(f"Position {tuple(pos)} is off the board")
        return sorted(tiles, key=lambda placement: placement[0])

    @classmethod
    def from_placements(cls, placements: List[Tuple[Tuple[int, int], BoardTile]]) -> "Move":
        return cls(tiles=[(Position(*pos), tile) for pos, tile in placements])

    def __len__(self) -> int:
        return len(self.tiles)

    def positions(self) -> List[Position]:
        return [pos for pos, _ in self.tiles]

    def tile_at(self, pos: Tuple[int, int]) -> Optional[BoardTile]:
        for p, tile in self.tiles:
            if p == pos:
                return tile
        return None

    def contains_position(self, pos: Tuple[int, int]) -> bool:
        return self.tile_at(pos) is not None

    def crosses_center(self) -> bool:
        return self.contains_position(CENTER)

    def is_horizontal(self) -> bool:
        """All tiles share a row. True for a single tile."""
        row0 = self.tiles[0][0].row
        return all(pos.row == row0 for pos, _ in self.tiles)

    def is_vertical(self) -> bool:
        """All tiles share a column. True for a single tile."""
        col0 = self.tiles[0][0].col
        return all(pos.col == col0 for pos, _ in self.tiles)

    def is_straight_line(self) -> bool:
        return self.is_horizontal() or self.is_vertical()

    def unresolved_blanks(self) -> List[Position]:
        """Positions of blanks that still need a letter, in board order."""
        return [pos for pos, tile in self.tiles if not tile.is_resolved]

    def with_blank_fills(self, fills: Dict[Position, str]) -> "Move":
        """Copy with the blanks at the given positions standing for letters."""
        return Move(tiles=[
            (pos, tile.resolved(fills[pos]) if pos in fills else tile)
            for pos, tile in self.tiles
        ])

    def word(self) -> str:
        """Letters in board order, uppercase (``?`` for unresolved blanks)."""
        return "".join(tile.letter or "?" for _, tile in self.tiles)


class InvalidMove(BaseModel):
    """A player-facing explanation of why a move was rejected."""
    code: str
    explanation: str
    positions: List[Position] = Field(default_factory=list)


class PlayedMove(BaseModel):
    """
    An accepted move, the words it formed and their point values.

    The value of the whole move is the sum of its words plus any bonus
    awarded when it was committed.
    """
    move: Move
    word_values: List[Tuple[str, int]] = Field(default_factory=list)
    bonus: int = 0

    @property
    def words(self) -> List[str]:
        return [word for word, _ in self.word_values]

    @property
    def value(self) -> int:
        return sum(value for _, value in self.word_values) + self.bonus
