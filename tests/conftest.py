"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minehunter import Board, BoardConfig, Field, Game


# ============================================================================
# Helpers
# ============================================================================

def seeded(values: Iterable[int]) -> Callable[[int], int]:
    """Random source returning the given values in order."""
    values = iter(values)
    return lambda bound: next(values)


def tag_style(text: str, *styles: str) -> str:
    """Style function that makes applied styles visible in output."""
    return f"<{' '.join(styles)}>{text}</>"


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def board() -> Board:
    """Create a 10x5 board with 3 mines."""
    return Board(10, 5, 3)


@pytest.fixture
def mined_board() -> Board:
    """10x5 board with mines at (1,4), (5,1) and (3,3)."""
    board = Board(10, 5, 3)
    board.place_mines(1, 1, seeded([1, 4, 5, 1, 3, 3]))
    return board


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(10, 5, 0)


@pytest.fixture
def beginner_board() -> Board:
    """Create an easy difficulty board."""
    return Board.from_config(BoardConfig(9, 9, 10))


# ============================================================================
# Field Fixtures
# ============================================================================

@pytest.fixture
def covered_field() -> Field:
    """Create a covered field."""
    return Field()


@pytest.fixture
def mine_field() -> Field:
    """Create a field containing a mine."""
    return Field(mined=True)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def game() -> Game:
    """10x5 game with 3 mines placed deterministically."""
    return Game(10, 5, 3, random_source=seeded([8, 0, 8, 4, 0, 4]))
