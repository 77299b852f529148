"""
Tests for tiles, the board model and move models.

Covers:
- Tile tables and the letter/byte mapping
- Board text form, immutability and model validation
- Move construction and helpers
"""

import pytest
from pydantic import ValidationError

from src.engine import BLANK, Board, BoardTile, Move, TILE_DISTRIBUTION, TILE_POINTS
from src.engine.tiles import byte_to_letter, full_tile_set, letter_ordinal, letter_to_byte, point_value

ROWS = [
    "...............",
    "...............",
    "...............",
    "...............",
    "...............",
    "........N......",
    "........U......",
    "......OaT......",
]


class TestTiles:
    """Tile supply and point values."""

    def test_full_set(self):
        tiles = full_tile_set()
        assert len(tiles) == 100
        assert tiles.count(BLANK) == 2
        assert sum(point_value(tile) for tile in tiles) == 187

    def test_every_tile_has_points(self):
        assert set(TILE_DISTRIBUTION) == set(TILE_POINTS)
        assert TILE_POINTS[BLANK] == 0

    def test_letter_bytes(self):
        assert letter_to_byte("A") == 0x61
        assert letter_to_byte("Z") == 0x7A
        assert byte_to_letter(0x61) == "A"
        assert letter_ordinal("C") == 2

    def test_letter_bytes_reject_non_letters(self):
        with pytest.raises(ValueError):
            letter_to_byte("a")
        with pytest.raises(ValueError):
            byte_to_letter(0x41)


class TestBoardTile:

    def test_str(self):
        assert str(BoardTile.of("Q")) == "Q"
        assert str(BoardTile.wildcard("Q")) == "q"
        assert str(BoardTile.wildcard()) == "?"

    def test_points(self):
        assert BoardTile.of("Q").points == 10
        assert BoardTile.wildcard("Q").points == 0

    def test_resolved(self):
        tile = BoardTile.wildcard().resolved("E")
        assert tile.is_resolved
        assert tile == BoardTile.wildcard("E")

    def test_letter_required_unless_blank(self):
        with pytest.raises(ValidationError):
            BoardTile()

    def test_letter_must_be_uppercase(self):
        with pytest.raises(ValidationError):
            BoardTile.of("a")


class TestBoard:
    """Board text form and value semantics."""

    def test_from_rows_and_render(self):
        board = Board.from_rows(ROWS)
        assert board.get((7, 7)) == BoardTile.wildcard("A")
        assert board.get((5, 8)) == BoardTile.of("N")
        assert board.tile_count() == 5
        assert board.render().splitlines()[:8] == ROWS
        assert len(board.render().splitlines()) == 15

    def test_get_off_board(self):
        assert Board().get((-1, 0)) is None
        assert Board().get((0, 15)) is None

    def test_from_rows_wrong_width(self):
        with pytest.raises(ValueError):
            Board.from_rows(["...."])

    def test_from_rows_bad_cell(self):
        with pytest.raises(ValueError):
            Board.from_rows(["......?........"])

    def test_wrong_size_grid(self):
        with pytest.raises(ValidationError):
            Board(cells=[[None] * 15 for _ in range(14)])

    def test_unresolved_blank_on_board(self):
        cells = [[None] * 15 for _ in range(15)]
        cells[7][7] = BoardTile.wildcard()
        with pytest.raises(ValidationError):
            Board(cells=cells)

    def test_with_move_applied_returns_new_board(self):
        board = Board()
        move = Move.from_placements([((7, 7), BoardTile.of("A"))])
        after = board.with_move_applied(move)
        assert board.is_empty()
        assert after.is_occupied((7, 7))
        assert after != board


class TestMove:
    """Move construction and geometry helpers."""

    def test_tiles_are_sorted(self):
        move = Move.from_placements([((7, 8), BoardTile.of("T")), ((7, 6), BoardTile.of("C"))])
        assert move.positions() == [(7, 6), (7, 8)]

    def test_off_board_position(self):
        with pytest.raises(ValidationError):
            Move.from_placements([((15, 0), BoardTile.of("A"))])

    def test_single_tile_is_both_directions(self):
        move = Move.from_placements([((3, 3), BoardTile.of("A"))])
        assert move.is_horizontal()
        assert move.is_vertical()

    def test_crosses_center(self):
        assert Move.from_placements([((7, 7), BoardTile.of("A"))]).crosses_center()
        assert not Move.from_placements([((7, 6), BoardTile.of("A"))]).crosses_center()

    def test_with_blank_fills(self):
        move = Move.from_placements([((0, 0), BoardTile.wildcard()), ((0, 1), BoardTile.of("T"))])
        assert move.word() == "?T"
        filled = move.with_blank_fills({(0, 0): "A"})
        assert filled.word() == "AT"
        assert filled.unresolved_blanks() == []
        assert move.unresolved_blanks() == [(0, 0)]
