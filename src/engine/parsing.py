"""Text notation for moves."""

import re
from typing import List, Optional, Tuple

from .models import BoardTile, InvalidMove, Move, Placement, Position
from .tiles import BOARD_SIZE

MOVE_PATTERN = re.compile(r'^(\d+)\s+(\d+)\s+([HV])\s+([A-Za-z?.]+)$', re.IGNORECASE)


def parse_move(spec: str) -> Tuple[Optional[Move], Optional[InvalidMove]]:
    """
    Parse a move written as ``ROW COL H|V LETTERS``.

    Starting at (ROW, COL) and stepping right (H) or down (V), each
    character of LETTERS covers one cell:

    - ``A``-``Z``: a lettered tile
    - ``a``-``z``: a blank standing for that letter
    - ``?``: a blank whose letter is left to the resolver
    - ``.``: skip the cell (a tile already on the board is played through)

    e.g. ``5 8 V NU.`` places N at (5, 8) and U at (6, 8).

    Returns a tuple of (move, error); exactly one is None.
    """
    spec = spec.strip()
    match = MOVE_PATTERN.match(spec)
    if not match:
        return None, InvalidMove(
            code="INVALID_NOTATION",
            explanation=f"Invalid move format: '{spec}' (expected ROW COL H|V LETTERS)",
        )

    row, col = int(match.group(1)), int(match.group(2))
    dr, dc = (0, 1) if match.group(3).upper() == "H" else (1, 0)
    letters = match.group(4)

    end = Position(row + dr * (len(letters) - 1), col + dc * (len(letters) - 1))
    if row >= BOARD_SIZE or col >= BOARD_SIZE or end.row >= BOARD_SIZE or end.col >= BOARD_SIZE:
        return None, InvalidMove(
            code="INVALID_NOTATION",
            explanation=f"'{letters}' at ({row}, {col}) runs off the board",
        )

    placements: List[Placement] = []
    for i, ch in enumerate(letters):
        pos = Position(row + dr * i, col + dc * i)
        if ch == ".":
            continue
        if ch == "?":
            tile = BoardTile.wildcard()
        elif ch.isupper():
            tile = BoardTile.of(ch)
        else:
            tile = BoardTile.wildcard(ch.upper())
        placements.append((pos, tile))

    return Move(tiles=placements), None


def format_move(move: Move) -> str:
    """One-line listing of a move's tiles, e.g. ``(7,7)C (7,8)a``."""
    return " ".join(f"({pos.row},{pos.col}){tile}" for pos, tile in move.tiles)
