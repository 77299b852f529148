"""
Resolving blank tiles.

A move may hold blanks that do not yet stand for a letter. The resolver
picks a letter for each so that the main word and every crossing word
through a blank are in the word list, preferring the alphabetically
earliest assignment.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from .models import InvalidMove, Move, Position
from .tiles import LETTERS, byte_to_letter, letter_to_byte
from .wordindex import WordIndex

# Letters around a blank in its crossing word
CrossingWord = Tuple[str, str]


def _assemble(segments: Sequence[str], fills: Sequence[str]) -> str:
    """Interleave segments with fills: s0 f0 s1 f1 ... s(len(fills))."""
    parts = [segments[0]]
    for fill, segment in zip(fills, segments[1:]):
        parts.append(fill)
        parts.append(segment)
    return "".join(parts)


def solve_for_blanks(
    segments: Sequence[str],
    crossing_words: Sequence[Optional[CrossingWord]],
    index: WordIndex,
) -> Optional[List[str]]:
    """
    Depth-first search for letters to put in each blank.

    Args:
        segments: Lowercase pieces of the main word between the blanks
            (one more segment than there are blanks; pieces may be empty)
        crossing_words: For each blank, the lowercase (prefix, suffix) of
            the crossing word through it, or None
        index: Word list to check against

    Returns:
        The uppercase letter for each blank in order, or None if no
        assignment makes every word valid
    """
    num_blanks = len(crossing_words)
    if len(segments) != num_blanks + 1:
        raise ValueError(f"{num_blanks} blanks need {num_blanks + 1} segments, got {len(segments)}")
    if num_blanks == 0:
        return [] if index.contains(segments[0]) else None

    alphabet = [chr(letter_to_byte(letter)) for letter in LETTERS]

    # Stack of committed letter ordinals, one frame per resolved blank
    stack: List[int] = []
    candidate = 0

    while True:
        if candidate == len(alphabet):
            if not stack:
                return None
            candidate = stack.pop() + 1
            continue

        blank = len(stack)
        letter = alphabet[candidate]
        fills = [alphabet[i] for i in stack] + [letter]
        partial = _assemble(segments, fills)

        if index.prefix_range(partial) is None:
            candidate += 1
            continue

        crossing = crossing_words[blank]
        if crossing is not None:
            prefix, suffix = crossing
            if not index.contains(prefix + letter + suffix):
                candidate += 1
                continue

        if blank == num_blanks - 1:
            if index.contains(partial):
                return [byte_to_letter(ord(fill)) for fill in fills]
            candidate += 1
            continue

        stack.append(candidate)
        candidate = 0


def _split_main_word(main_word: Move, blanks: Sequence[Position]) -> List[str]:
    segments: List[str] = []
    current: List[str] = []
    for pos, tile in main_word.tiles:
        if pos in blanks:
            segments.append("".join(current))
            current = []
        else:
            current.append(tile.letter.lower())
    segments.append("".join(current))
    return segments


def _crossing_around(pos: Position, crossing_words: Sequence[Move]) -> Optional[CrossingWord]:
    for word in crossing_words:
        positions = word.positions()
        if pos in positions:
            i = positions.index(pos)
            letters = word.word().lower()
            return letters[:i], letters[i + 1:]
    return None


def resolve_blanks(
    move: Move,
    main_word: Move,
    crossing_words: List[Move],
    index: WordIndex,
) -> Tuple[Move, Move, List[Move], Optional[InvalidMove]]:
    """
    Fill every unresolved blank in a move and in the words it forms.

    Returns:
        (move, main word, crossing words, error). On success the error is
        None and every blank stands for a letter; on failure the inputs are
        returned unchanged with an UNSOLVABLE_BLANKS error.
    """
    blanks = move.unresolved_blanks()
    if not blanks:
        return move, main_word, crossing_words, None

    segments = _split_main_word(main_word, blanks)
    crossings = [_crossing_around(pos, crossing_words) for pos in blanks]

    fills = solve_for_blanks(segments, crossings, index)
    if fills is None:
        return move, main_word, crossing_words, InvalidMove(
            code="UNSOLVABLE_BLANKS",
            explanation="No letters for the blank tiles make valid words",
            positions=blanks,
        )

    letters: Dict[Position, str] = dict(zip(blanks, fills))
    return (
        move.with_blank_fills(letters),
        main_word.with_blank_fills(letters),
        [word.with_blank_fills(letters) for word in crossing_words],
        None,
    )
