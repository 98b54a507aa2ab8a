"""
Board module for Minehunter.

Implements the grid of fields with mine placement, adjacency counting,
cascading reveal, flag bookkeeping and round completion.
"""
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, Iterator, List, Tuple

import numpy as np

from .field import Field, StyleFn, plain_style


# ============================================================================
# Constants
# ============================================================================

class ConfigurationError(ValueError):
    """Raised when a board cannot be built from the given settings."""


class GameState(Enum):
    """Possible states of a round."""

    UNMINED = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


# Picks an integer in [0, bound)
RandomSource = Callable[[int], int]

_generator = random.Random()


def default_random_source(bound: int) -> int:
    """Pick a random integer lower than bound."""
    return _generator.randrange(bound)


@dataclass
class BoardConfig:
    """
    Configuration for a board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_limit: Total mines to place.
    """

    width: int = 16
    height: int = 16
    mine_limit: int = 40

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure dimensions and mine count are usable."""
        if self.width < 1 or self.height < 1:
            raise ConfigurationError("board dimensions must be positive")
        if self.mine_limit < 0:
            raise ConfigurationError("number of mines cannot be negative")


# Preset difficulty levels
LEVELS: Dict[str, BoardConfig] = {
    "easy": BoardConfig(9, 9, 10),
    "medium": BoardConfig(16, 16, 40),
    "hard": BoardConfig(30, 16, 99),
}
DEFAULT_LEVEL = "medium"


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minehunter grid.

    Fields are stored in a flat list indexed by ``y * width + x``.
    Mines are not placed until :meth:`place_mines` is called with the
    position of the first reveal, so that position and its neighbours
    are always safe.

    Coordinates passed to any method must lie within the grid.
    """

    def __init__(self, width: int, height: int, mine_limit: int) -> None:
        """
        Create an unmined board.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_limit: Total mines to place.

        Raises:
            ConfigurationError: If there are no fields left without a mine.
        """
        if mine_limit >= width * height:
            raise ConfigurationError(
                "cannot have more mines than available fields"
            )

        self.width = width
        self.height = height
        self.mine_limit = mine_limit
        self._fields: List[Field] = []
        self.reset()

    @classmethod
    def from_config(cls, config: BoardConfig) -> "Board":
        """Create a board from a configuration."""
        return cls(config.width, config.height, config.mine_limit)

    def reset(self) -> None:
        """Restore every field and counter for a new round."""
        self._fields = [Field() for _ in range(self.width * self.height)]
        self.flags_remaining = self.mine_limit
        self.unmarked_safe_fields_remaining = (
            self.width * self.height - self.mine_limit
        )
        self.mines_placed = False
        self._lost = False

    # ========================================================================
    # Field Access (Low-level)
    # ========================================================================

    def at(self, x: int, y: int) -> int:
        """Find the field index at a given position."""
        return y * self.width + x

    def field_at(self, x: int, y: int) -> Field:
        """Get the field at a given position."""
        return self._fields[self.at(x, y)]

    def within(self, x: int, y: int) -> bool:
        """Check if position is within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def mine(self, x: int, y: int) -> None:
        """Place a single mine at a given position."""
        self.field_at(x, y).set_mine()

    def mines(self) -> List[Field]:
        """Get all fields with a mine."""
        return [field for field in self._fields if field.mined]

    def is_flagged(self, x: int, y: int) -> bool:
        """Check whether a flag is placed at a given position."""
        return self.field_at(x, y).flagged

    # ========================================================================
    # Cursor Movement
    # ========================================================================

    def move_up(self, y: int) -> int:
        """Row above, wrapping to the bottom."""
        return self.height - 1 if y == 0 else y - 1

    def move_down(self, y: int) -> int:
        """Row below, wrapping to the top."""
        return 0 if y == self.height - 1 else y + 1

    def move_left(self, x: int) -> int:
        """Column to the left, wrapping to the right edge."""
        return self.width - 1 if x == 0 else x - 1

    def move_right(self, x: int) -> int:
        """Column to the right, wrapping to the left edge."""
        return 0 if x == self.width - 1 else x + 1

    # ========================================================================
    # Neighbour Utilities
    # ========================================================================

    def neighbors_of(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Enumerate positions around a field.

        Column offsets are iterated in the outer loop and row offsets
        in the inner loop, each from -1 to 1.

        Args:
            x: Column of the centre field.
            y: Row of the centre field.

        Yields:
            (x, y) tuples of neighbours inside the grid.
        """
        for offset_x in (-1, 0, 1):
            for offset_y in (-1, 0, 1):
                if offset_x == 0 and offset_y == 0:
                    continue
                close_x = x + offset_x
                close_y = y + offset_y
                if self.within(close_x, close_y):
                    yield close_x, close_y

    def count_mines_around(self, x: int, y: int) -> int:
        """Count mines in the fields next to a position."""
        return sum(
            1 for close_x, close_y in self.neighbors_of(x, y)
            if self.field_at(close_x, close_y).mined
        )

    # ========================================================================
    # Game Actions
    # ========================================================================

    def place_mines(
        self,
        exclude_x: int,
        exclude_y: int,
        random_source: RandomSource = default_random_source,
    ) -> None:
        """
        Fill the grid with mines away from the first revealed field.

        Draws positions until ``mine_limit`` distinct fields are mined.
        The excluded position, its neighbours and already mined fields
        are redrawn. The loop only ends once enough valid fields are
        found, so the mine limit must leave room outside the excluded
        neighbourhood.

        Args:
            exclude_x: Column of the first revealed field.
            exclude_y: Row of the first revealed field.
            random_source: Picks an integer in [0, bound).
        """
        excluded = set(self.neighbors_of(exclude_x, exclude_y))
        excluded.add((exclude_x, exclude_y))

        remaining = self.mine_limit
        while remaining > 0:
            mine_x = random_source(self.width)
            mine_y = random_source(self.height)
            if (mine_x, mine_y) in excluded:
                continue

            field = self.field_at(mine_x, mine_y)
            if field.mined:
                continue

            field.set_mine()
            remaining -= 1

        self.mines_placed = True

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal a field, cascading over fields without nearby mines.

        Revealing a mine uncovers the remaining mines and loses the
        round. A safe field gets its adjacent mine count, loses any
        flag and, when the count is zero, its covered neighbours are
        revealed in turn. Revealing an already uncovered safe field
        does nothing.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            True if the field had a mine, False otherwise.
        """
        field = self.field_at(x, y)
        if field.mined:
            field.reveal()
            self.uncover_all_mines()
            self._lost = True
            return True

        pending = [(x, y)]
        while pending:
            current_x, current_y = pending.pop()
            current = self.field_at(current_x, current_y)
            if not current.covered or current.mined:
                continue

            mine_count = self.count_mines_around(current_x, current_y)
            current.adjacent_mine_count = mine_count
            if current.flagged:
                self.toggle_flag(current_x, current_y)
            current.reveal()
            self.unmarked_safe_fields_remaining -= 1

            if mine_count == 0:
                pending.extend(self.neighbors_of(current_x, current_y))

        return False

    def uncover_all_mines(self) -> None:
        """Uncover unflagged mines and flags placed without a mine."""
        for field in self._fields:
            if field.mined != field.flagged:
                if field.flagged:
                    field.mark_wrong()
                field.reveal()

    def toggle_flag(self, x: int, y: int) -> None:
        """
        Add or remove a flag on a covered field.

        The flag budget may go negative when more flags than mines
        are placed.
        """
        field = self.field_at(x, y)
        if not field.covered:
            return
        self.flags_remaining += 1 if field.flagged else -1
        field.toggle_flag()

    # ========================================================================
    # State Accessors
    # ========================================================================

    def is_cleared(self) -> bool:
        """Check if every field without a mine is uncovered."""
        return self.unmarked_safe_fields_remaining == 0

    @property
    def game_state(self) -> GameState:
        """Get current round state."""
        if self._lost:
            return GameState.LOST
        if self.is_cleared():
            return GameState.WON
        if not self.mines_placed:
            return GameState.UNMINED
        return GameState.PLAYING

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = covered
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.fromiter(
            (field.to_observation() for field in self._fields),
            dtype=np.int8,
            count=len(self._fields),
        )
        return obs.reshape(self.height, self.width)

    def render(
        self, x: int, y: int, style_fn: StyleFn = plain_style
    ) -> str:
        """
        Render the grid one line per row.

        The field under the cursor is wrapped in a green background,
        or a red one when it is an uncovered mine.

        Args:
            x: Cursor column.
            y: Cursor row.
            style_fn: Decorates a glyph with the given style names.

        Returns:
            Rendered grid with a trailing newline after each row.
        """
        out = []
        for field_y in range(self.height):
            for field_x in range(self.width):
                field = self.field_at(field_x, field_y)
                rendered = field.render(style_fn)

                if field_x == x and field_y == y:
                    background = (
                        "on red" if field.mined and not field.covered
                        else "on green"
                    )
                    rendered = style_fn(rendered, background)

                out.append(rendered)
            out.append("\n")
        return "".join(out)
