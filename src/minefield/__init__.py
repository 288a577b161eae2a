"""
Minefield game module.

Provides the board engine (mine placement, reveal with flood fill,
flagging, win/lose classification) and a session controller that
drives a presentation layer.
"""
from .cell import Cell, CellState, ContentKind
from .board import Board, BoardConfig, GameState, DEFAULT_CONFIG
from .errors import (
    MinefieldError,
    ConfigurationError,
    OutOfBoundsError,
    CommandError,
)
from .session import BoardView, SessionDelegate, GameSession

__all__ = [
    "Cell",
    "CellState",
    "ContentKind",
    "Board",
    "BoardConfig",
    "GameState",
    "DEFAULT_CONFIG",
    "MinefieldError",
    "ConfigurationError",
    "OutOfBoundsError",
    "CommandError",
    "BoardView",
    "SessionDelegate",
    "GameSession",
]
