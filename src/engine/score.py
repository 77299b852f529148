"""Word scoring with premium squares."""

from .board import Board, Modifier, modifier_at
from .models import Move


def score_word(board: Board, word: Move) -> int:
    """
    Point value of one formed word.

    ``board`` must be the board *before* the move: tiles on cells that were
    already covered score their face value and never trigger a premium
    square. Newly covered cells apply their letter multiplier to the tile
    and fold their word multiplier into the word total.
    """
    score = 0
    word_multiplier = 1

    for pos, tile in word.tiles:
        modifier = None if board.is_occupied(pos) else modifier_at(pos)

        letter_multiplier = 1
        if modifier == Modifier.DOUBLE_LETTER:
            letter_multiplier = 2
        elif modifier == Modifier.TRIPLE_LETTER:
            letter_multiplier = 3
        elif modifier == Modifier.DOUBLE_WORD:
            word_multiplier *= 2
        elif modifier == Modifier.TRIPLE_WORD:
            word_multiplier *= 3

        score += tile.points * letter_multiplier

    return score * word_multiplier


def score_only(board: Board, formed_word: Move) -> int:
    """Score a formed word without playing anything."""
    return score_word(board, formed_word)
