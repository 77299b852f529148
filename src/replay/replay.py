import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .models import ReplayConfig, ReplayResult, TurnRecord
from ..engine import Board, WordIndex, load_word_index, parse_move, validate_and_play

log = logging.getLogger(__name__)


class Replay(BaseModel):
    """
    Plays a configured list of moves, one after another, on a single board.

    Each move is parsed from notation, validated and scored against the
    current board; accepted moves replace the board, rejected ones leave it
    unchanged.

    Attributes:
        config: Replay configuration
        index: Word list shared by every move
        board: The current board
        turn_history: Outcome of every replayed move
        current_turn: Number of moves replayed so far
        is_complete: Whether the replay has finished
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: ReplayConfig
    index: WordIndex
    board: Board = Field(default_factory=Board)
    turn_history: List[TurnRecord] = Field(default_factory=list)
    current_turn: int = 0
    is_complete: bool = False
    end_reason: str = ""
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        config: Optional[ReplayConfig] = None,
        index: Optional[WordIndex] = None,
        **config_kwargs: Any
    ) -> "Replay":
        """
        Factory method to create a replay with its board and word list.

        Args:
            config: Optional ReplayConfig instance
            index: Word list to use instead of loading config.dictionary
            **config_kwargs: Config parameters if config not provided

        Returns:
            Configured Replay instance
        """
        if config is None:
            config = ReplayConfig(**config_kwargs)

        if index is None:
            index = load_word_index(config.dictionary)

        board = Board.from_rows(config.board) if config.board else Board()
        return cls(config=config, index=index, board=board)

    @property
    def total_score(self) -> int:
        return sum(turn.value for turn in self.turn_history if turn.valid)

    def step(self, notation: str) -> TurnRecord:
        """
        Replay a single move.

        Args:
            notation: The move as ROW COL H|V LETTERS

        Returns:
            TurnRecord for the move
        """
        if self.started_at is None:
            self.started_at = datetime.now()

        move, parse_error = parse_move(notation)
        if parse_error is not None:
            record = TurnRecord(
                turn_number=self.current_turn + 1,
                notation=notation,
                valid=False,
                error=parse_error,
                board=self.board.render(),
            )
        else:
            result = validate_and_play(self.board, move, self.index)
            if result.valid:
                self.board = result.board
                record = TurnRecord(
                    turn_number=self.current_turn + 1,
                    notation=notation,
                    valid=True,
                    word_values=result.played.word_values,
                    bonus=result.played.bonus,
                    value=result.played.value,
                    board=result.rendered,
                )
            else:
                record = TurnRecord(
                    turn_number=self.current_turn + 1,
                    notation=notation,
                    valid=False,
                    error=result.error,
                    board=result.rendered,
                )

        self.turn_history.append(record)
        self.current_turn += 1
        if not record.valid:
            log.info("Turn %d rejected: %s", record.turn_number, record.error.explanation)
        return record

    def run(
        self,
        on_turn: Optional[Callable[[TurnRecord], None]] = None,
        verbose: bool = False,
    ) -> ReplayResult:
        """
        Replay every configured move until done.

        Args:
            on_turn: Optional callback called after each move
            verbose: If True, print progress to stdout

        Returns:
            ReplayResult containing the full run data
        """
        if verbose:
            print(f"Replaying {len(self.config.moves)} moves")
            print(f"Dictionary: {len(self.index):,} words")
            print("-" * 40)

        while not self.is_complete:
            if self.current_turn >= len(self.config.moves):
                self.is_complete = True
                self.end_reason = "All moves replayed"
                break

            notation = self.config.moves[self.current_turn]
            record = self.step(notation)

            if verbose:
                print(f"\nTurn {record.turn_number}: {notation}")
                if record.valid:
                    for word, value in record.word_values:
                        print(f"  {word}: {value}")
                    if record.bonus:
                        print(f"  Bonus: {record.bonus}")
                    print(f"  ✓ {record.value} points")
                else:
                    positions = ", ".join(f"({r},{c})" for r, c in record.error.positions)
                    print(f"  ✗ {record.error.explanation}" + (f" at {positions}" if positions else ""))

            if on_turn:
                on_turn(record)

            if not record.valid and self.config.stop_on_invalid:
                self.is_complete = True
                self.end_reason = f"Stopped at invalid move {record.turn_number}"

        self.ended_at = datetime.now()

        if verbose:
            print("-" * 40)
            print(f"Replay complete: {self.end_reason}")
            print("\nFinal board:")
            print(self.board.render())

        return self.get_result()

    def get_result(self) -> ReplayResult:
        """Build the ReplayResult for the current state."""
        started = self.started_at or datetime.now()
        ended = self.ended_at or datetime.now()
        return ReplayResult(
            config=self.config,
            total_turns=self.current_turn,
            moves_played=sum(1 for turn in self.turn_history if turn.valid),
            moves_rejected=sum(1 for turn in self.turn_history if not turn.valid),
            total_score=self.total_score,
            end_reason=self.end_reason,
            final_board=self.board.render(),
            turn_history=self.turn_history,
            started_at=started.isoformat(),
            ended_at=ended.isoformat(),
            duration_seconds=(ended - started).total_seconds(),
        )

    def save_result(self, path: str | Path) -> None:
        """
        Save the replay result to a JSON file.

        Args:
            path: Path to save the result file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        result = self.get_result()
        with open(path, "w") as f:
            json.dump(result.model_dump(), f, indent=2, default=str)
