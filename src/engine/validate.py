"""
Structural move validation.

Checks, in order (first failure wins):
1. The move places at least one tile
2. The move places no more than 7 tiles
3. No two tiles share a cell
4. All tiles lie on one row or one column
5. The tiles form an unbroken run, counting board tiles between them
6. On an empty board: the move covers the center and places 2+ tiles
7. On a non-empty board: no tile lands on an occupied cell
"""

from typing import List, Optional

from .board import Board
from .models import InvalidMove, Move, Position
from .tiles import MAX_TILES_PER_MOVE


def find_self_overlap(move: Move) -> Optional[Position]:
    """First position used by more than one tile, if any."""
    positions = move.positions()
    # Sorted, so duplicates are adjacent
    for a, b in zip(positions, positions[1:]):
        if a == b:
            return a
    return None


def is_contiguous(board: Board, move: Move) -> bool:
    """
    True if every cell between the first and last tile is covered, either
    by the move itself or by a tile already on the board.

    Precondition: the move is a non-empty straight line.
    """
    first, last = move.tiles[0][0], move.tiles[-1][0]
    if move.is_horizontal():
        cells = [Position(first.row, c) for c in range(first.col, last.col + 1)]
    else:
        cells = [Position(r, first.col) for r in range(first.row, last.row + 1)]
    return all(move.contains_position(cell) or board.is_occupied(cell) for cell in cells)


def validate_move(board: Board, move: Move) -> Optional[InvalidMove]:
    """
    Validate a move's shape against the board.

    Args:
        board: The board before the move
        move: The proposed move

    Returns:
        None if the move is structurally legal, otherwise the first
        InvalidMove found
    """
    if not move.tiles:
        return InvalidMove(code="EMPTY_MOVE", explanation="Empty move (impossible)")

    positions = move.positions()

    if len(move) > MAX_TILES_PER_MOVE:
        return InvalidMove(
            code="TOO_MANY_TILES",
            explanation=f"More than {MAX_TILES_PER_MOVE} tiles played (impossible)",
            positions=positions,
        )

    overlap = find_self_overlap(move)
    if overlap is not None:
        return InvalidMove(
            code="SELF_OVERLAP",
            explanation="Move is self-overlapping (impossible)",
            positions=[overlap],
        )

    if not move.is_straight_line():
        return InvalidMove(
            code="NOT_STRAIGHT_LINE",
            explanation="That move is not a straight line",
            positions=positions,
        )

    if not is_contiguous(board, move):
        return InvalidMove(
            code="NOT_CONTIGUOUS",
            explanation="That move is not contiguous",
            positions=positions,
        )

    if board.is_empty():
        if not move.crosses_center():
            return InvalidMove(
                code="MISSES_CENTER",
                explanation="The first move must play through the center",
                positions=positions,
            )
        if len(move) < 2:
            return InvalidMove(
                code="FIRST_MOVE_TOO_SHORT",
                explanation="The first move must be at least two letters",
                positions=positions,
            )
    else:
        covered: List[Position] = [pos for pos in positions if board.is_occupied(pos)]
        if covered:
            return InvalidMove(
                code="SPACE_OCCUPIED",
                explanation="Some spaces in that move are already covered (impossible)",
                positions=covered,
            )

    return None
