"""Deriving the words a move forms on the board."""

from typing import List, Optional, Tuple

from .board import Board
from .models import BoardTile, Move, Placement, Position

Axis = Tuple[int, int]

VERTICAL: Axis = (1, 0)
HORIZONTAL: Axis = (0, 1)


def _tile_at(board: Board, move: Move, pos: Position) -> Optional[BoardTile]:
    """Board tile or pending move tile at ``pos``."""
    tile = board.get(pos)
    if tile is None:
        tile = move.tile_at(pos)
    return tile


def expand_in_axis(board: Board, move: Move, start: Placement, axis: Axis) -> Move:
    """
    Extend outward from one tile along an axis to the full run of tiles.

    Board tiles and the move's pending tiles both count as neighbors; the
    walk stops at the first empty or off-board cell in each direction.
    e.g. PAIN[TER] -> [PAINTER]
    """
    dr, dc = axis
    tiles: List[Placement] = [start]
    for step in (1, -1):
        row, col = start[0]
        while True:
            row, col = row + dr * step, col + dc * step
            pos = Position(row, col)
            tile = _tile_at(board, move, pos)
            if tile is None:
                break
            tiles.append((pos, tile))
    return Move(tiles=tiles)


def expand_move(board: Board, move: Move) -> Tuple[Move, List[Move]]:
    """
    Find the main word and crossing words formed by a validated move.

    Args:
        board: The board before the move
        move: A non-empty move that passed validation

    Returns:
        (main word, crossing words), each as a position-sorted Move
    """
    if len(move) == 1:
        start = move.tiles[0]
        vertical = expand_in_axis(board, move, start, VERTICAL)
        horizontal = expand_in_axis(board, move, start, HORIZONTAL)
        words = [m for m in (vertical, horizontal) if len(m) > 1]
        if not words:
            # Isolated tile; the disconnected check rejects it
            return vertical, []
        return words[0], words[1:]

    if move.is_horizontal():
        parallel, perpendicular = HORIZONTAL, VERTICAL
    else:
        parallel, perpendicular = VERTICAL, HORIZONTAL

    main_word = expand_in_axis(board, move, move.tiles[0], parallel)

    crossing_words: List[Move] = []
    for placement in move.tiles:
        lone = Move(tiles=[placement])
        crossing = expand_in_axis(board, lone, placement, perpendicular)
        if len(crossing) > 1:
            crossing_words.append(crossing)

    return main_word, crossing_words


def is_disconnected(board: Board, move: Move, main_word: Move, crossing_words: List[Move]) -> bool:
    """True if the move touches nothing already on a non-empty board."""
    return (
        len(main_word) == len(move)
        and not crossing_words
        and not board.is_empty()
    )
