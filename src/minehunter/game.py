"""
Game module for Minehunter.

Drives a board from player input: tracks the cursor, places mines on
the first uncover and reports the round status.
"""
from typing import Callable, Dict

from .board import Board, RandomSource, default_random_source
from .field import StyleFn, plain_style


# ============================================================================
# Constants
# ============================================================================

INTRO = "\n".join([
    "     ,-*",
    "    (_) Minehunter",
    "",
    "Movement",
    "     [↑]        [w]",
    "  [←][↓][→]  [a][s][d]",
    "",
    "Actions",
    "  Toggle Flag  f",
    "  Uncover      space",
    "  Restart      r",
    "  Quit         q",
    "",
    "Press any key to start!",
])

CTRL_X = "\x18"
EXIT_KEYS = frozenset({CTRL_X, "q"})


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single player session on one board.

    The board can be replayed with :meth:`reset`. Every action except
    restart and quit is ignored once the round is finished.
    """

    def __init__(
        self,
        width: int,
        height: int,
        mine_limit: int,
        style_fn: StyleFn = plain_style,
        random_source: RandomSource = default_random_source,
    ) -> None:
        """
        Initialize the game.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_limit: Total mines to place.
            style_fn: Decorates glyphs when rendering.
            random_source: Picks mine positions, see Board.place_mines.

        Raises:
            ConfigurationError: If the board cannot hold the mines.
        """
        self.board = Board(width, height, mine_limit)
        self.style_fn = style_fn
        self.random_source = random_source
        self._start_x = (width - 1) // 2
        self._start_y = (height - 1) // 2
        self._actions: Dict[str, Callable[[], None]] = {
            "h": self.move_left, "a": self.move_left, "left": self.move_left,
            "l": self.move_right, "d": self.move_right,
            "right": self.move_right,
            "j": self.move_down, "s": self.move_down, "down": self.move_down,
            "k": self.move_up, "w": self.move_up, "up": self.move_up,
            "f": self.flag, "g": self.flag,
            " ": self.uncover, "\r": self.uncover, "\n": self.uncover,
            "r": self.reset,
        }
        self.reset()

    def reset(self) -> None:
        """Start a new round on the same board."""
        self.cursor_x = self._start_x
        self.cursor_y = self._start_y
        self.lost = False
        self.board.reset()

    @property
    def finished(self) -> bool:
        """Check whether the round is lost or won."""
        return self.lost or self.board.is_cleared()

    def status(self) -> str:
        """Status line shown above the grid."""
        if self.lost:
            return "GAME OVER"
        if self.board.is_cleared():
            return "WINNER"
        return f"Flags {self.board.flags_remaining}"

    def render_grid(self) -> str:
        """Render the grid with the cursor highlighted."""
        return self.board.render(self.cursor_x, self.cursor_y, self.style_fn)

    # ========================================================================
    # Player Actions
    # ========================================================================

    def handle_key(self, key: str) -> bool:
        """
        Dispatch a key press.

        Args:
            key: A single character or an arrow name (up/down/left/right).

        Returns:
            False when the key asks to quit, True otherwise.
        """
        if key in EXIT_KEYS:
            return False
        action = self._actions.get(key)
        if action is not None:
            action()
        return True

    def flag(self) -> None:
        """Toggle the flag under the cursor."""
        if self.finished:
            return
        self.board.toggle_flag(self.cursor_x, self.cursor_y)

    def uncover(self) -> None:
        """Uncover the field under the cursor unless it has a flag."""
        if self.finished:
            return
        if self.board.is_flagged(self.cursor_x, self.cursor_y):
            return
        if not self.board.mines_placed:
            self.board.place_mines(
                self.cursor_x, self.cursor_y, self.random_source
            )
        self.lost = self.board.reveal(self.cursor_x, self.cursor_y)

    def move_up(self) -> None:
        """Move the cursor one row up."""
        if self.finished:
            return
        self.cursor_y = self.board.move_up(self.cursor_y)

    def move_down(self) -> None:
        """Move the cursor one row down."""
        if self.finished:
            return
        self.cursor_y = self.board.move_down(self.cursor_y)

    def move_left(self) -> None:
        """Move the cursor one column left."""
        if self.finished:
            return
        self.cursor_x = self.board.move_left(self.cursor_x)

    def move_right(self) -> None:
        """Move the cursor one column right."""
        if self.finished:
            return
        self.cursor_x = self.board.move_right(self.cursor_x)
