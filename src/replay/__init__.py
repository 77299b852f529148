"""Replaying scripted moves for Scrabble Core."""

from .models import ReplayConfig, TurnRecord, ReplayResult
from .replay import Replay

__all__ = [
    "ReplayConfig",
    "TurnRecord",
    "ReplayResult",
    "Replay",
]
