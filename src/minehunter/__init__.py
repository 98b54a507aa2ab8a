"""
Minehunter game module.

Provides the field and board engine, the game driver and the
gymnasium environment.
"""
__version__ = "0.1.0"

from .field import Field, plain_style
from .board import (
    Board,
    BoardConfig,
    ConfigurationError,
    GameState,
    DEFAULT_LEVEL,
    LEVELS,
    default_random_source,
)
from .game import Game
from .environment import MinesweeperEnv

__all__ = [
    "Field",
    "plain_style",
    "Board",
    "BoardConfig",
    "ConfigurationError",
    "GameState",
    "DEFAULT_LEVEL",
    "LEVELS",
    "default_random_source",
    "Game",
    "MinesweeperEnv",
]
