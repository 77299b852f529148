"""
Playing a move: validation, expansion, blank resolution, scoring and the
dictionary check, producing a new board only when every step succeeds.
"""

import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel

from .blanks import resolve_blanks
from .board import Board
from .expand import expand_move, is_disconnected
from .models import InvalidMove, Move, PlayedMove
from .score import score_word
from .tiles import BINGO_BONUS, MAX_TILES_PER_MOVE
from .validate import validate_move
from .wordindex import WordIndex

log = logging.getLogger(__name__)


class PlayResult(BaseModel):
    """Result of playing a move."""
    valid: bool
    board: Board
    played: Optional[PlayedMove] = None
    error: Optional[InvalidMove] = None
    rendered: Optional[str] = None


def _rejected(board: Board, error: InvalidMove) -> PlayResult:
    log.debug("Rejected move (%s): %s %s", error.code, error.explanation, error.positions)
    return PlayResult(valid=False, board=board, error=error, rendered=board.render())


def validate_and_play(board: Board, move: Move, index: WordIndex) -> PlayResult:
    """
    Play a move against a board.

    The input board is never modified. On success the result carries the
    new board and the PlayedMove; on failure it carries the first
    InvalidMove and the unchanged board.

    Args:
        board: The board before the move
        move: The proposed move (may contain unresolved blanks)
        index: Word list every formed word must be in

    Returns:
        PlayResult for the move
    """
    error = validate_move(board, move)
    if error is not None:
        return _rejected(board, error)

    main_word, crossing_words = expand_move(board, move)

    if is_disconnected(board, move, main_word, crossing_words):
        return _rejected(board, InvalidMove(
            code="DISCONNECTED",
            explanation="That move is disconnected",
            positions=move.positions(),
        ))

    move, main_word, crossing_words, error = resolve_blanks(move, main_word, crossing_words, index)
    if error is not None:
        return _rejected(board, error)

    # Score against the board before the move so that premium squares
    # only count for newly covered cells
    words: List[Tuple[Move, str, int]] = [
        (word, word.word(), score_word(board, word))
        for word in [main_word, *crossing_words]
    ]

    for word, text, _ in words:
        if not index.contains(text):
            return _rejected(board, InvalidMove(
                code="NOT_A_WORD",
                explanation=f"'{text}' is not a word",
                positions=word.positions(),
            ))

    bonus = BINGO_BONUS if len(move) == MAX_TILES_PER_MOVE else 0
    played = PlayedMove(
        move=move,
        word_values=[(text, value) for _, text, value in words],
        bonus=bonus,
    )
    new_board = board.with_move_applied(move)

    log.debug("Played %s for %d points", ", ".join(played.words), played.value)
    return PlayResult(valid=True, board=new_board, played=played, rendered=new_board.render())
