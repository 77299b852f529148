"""Move validation, word expansion, scoring and blank resolution."""

from .play import validate_and_play, PlayResult
from .validate import validate_move
from .expand import expand_move, is_disconnected
from .score import score_word, score_only
from .blanks import solve_for_blanks, resolve_blanks
from .models import Position, BoardTile, Move, InvalidMove, PlayedMove
from .board import Board, Modifier, MODIFIERS, modifier_at
from .wordindex import WordIndex
from .parsing import parse_move, format_move
from .data import load_word_index
from .tiles import (
    BOARD_SIZE,
    CENTER,
    MAX_TILES_PER_MOVE,
    BINGO_BONUS,
    BLANK,
    LETTERS,
    TILE_POINTS,
    TILE_DISTRIBUTION,
)

__all__ = [
    # Main entry points
    "validate_and_play",
    "PlayResult",
    "score_only",
    # Pipeline stages
    "validate_move",
    "expand_move",
    "is_disconnected",
    "score_word",
    "solve_for_blanks",
    "resolve_blanks",
    # Models
    "Position",
    "BoardTile",
    "Move",
    "InvalidMove",
    "PlayedMove",
    "Board",
    "Modifier",
    "MODIFIERS",
    "modifier_at",
    # Dictionary
    "WordIndex",
    "load_word_index",
    # Notation
    "parse_move",
    "format_move",
    # Constants
    "BOARD_SIZE",
    "CENTER",
    "MAX_TILES_PER_MOVE",
    "BINGO_BONUS",
    "BLANK",
    "LETTERS",
    "TILE_POINTS",
    "TILE_DISTRIBUTION",
]
