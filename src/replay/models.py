"""
Pydantic models for the replay layer.

Configuration and result records for replaying a list of moves against a
board. The replay logic itself lives in replay.py.
"""

from typing import List, Optional, Tuple
from pydantic import BaseModel, Field

from ..engine.models import InvalidMove


class ReplayConfig(BaseModel):
    """Configuration for a replay run."""
    dictionary: str
    board: List[str] = Field(default_factory=list)  # Initial board rows, empty board if omitted
    moves: List[str] = Field(default_factory=list)  # ROW COL H|V LETTERS
    stop_on_invalid: bool = False


class TurnRecord(BaseModel):
    """Outcome of one replayed move."""
    turn_number: int
    notation: str
    valid: bool
    word_values: List[Tuple[str, int]] = Field(default_factory=list)
    bonus: int = 0
    value: int = 0
    error: Optional[InvalidMove] = None
    board: Optional[str] = None  # Rendered board after the turn


class ReplayResult(BaseModel):
    """Result of a complete replay run."""
    config: ReplayConfig
    total_turns: int = 0
    moves_played: int = 0
    moves_rejected: int = 0
    total_score: int = 0
    end_reason: str = ""
    final_board: str = ""
    turn_history: List[TurnRecord] = Field(default_factory=list)
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
