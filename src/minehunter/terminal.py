"""
Terminal front-end for Minehunter.

Reads raw key presses and paints the game with rich.
"""
import os
import select
import sys
import termios
import tty
from typing import Callable, Optional

from rich.align import Align
from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from .game import EXIT_KEYS, INTRO, Game


ESC = "\x1b"

# Arrow keys arrive as ESC [ A..D
ARROWS = {"A": "up", "B": "down", "C": "right", "D": "left"}


def rich_style(text: str, *styles: str) -> str:
    """Wrap text in rich markup for the given style names."""
    return f"[{' '.join(styles)}]{text}[/]"


def decode_key(read: Callable[[], str], ready: Callable[[], bool]) -> str:
    """
    Decode one key press from a character source.

    A lone escape is returned as soon as no further input is waiting.
    Arrow sequences become up/down/left/right; any other escape
    sequence is read to its end and reported as the escape key.

    Args:
        read: Returns the next input character, blocking if needed.
        ready: Checks whether another character is already waiting.

    Returns:
        The pressed character or an arrow name.
    """
    key = read()
    if key != ESC or not ready():
        return key

    sequence = read()
    if sequence == "[" and ready():
        code = read()
        if code in ARROWS:
            return ARROWS[code]
    while ready():
        read()
    return key


def read_key() -> str:
    """
    Read a single key press from stdin in raw mode.

    Returns:
        The pressed character, or up/down/left/right for arrow keys.
    """
    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return decode_key(
            lambda: os.read(fd, 1).decode(errors="replace"),
            lambda: bool(select.select([fd], [], [], 0.05)[0]),
        )
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def intro_panel() -> Align:
    """Controls help shown before the first key press."""
    return Align.center(
        Panel(Text(INTRO), padding=(0, 1)), vertical="middle"
    )


def game_panel(game: Game) -> Align:
    """Status line above the grid, framed together."""
    grid = Text.from_markup(game.render_grid().rstrip("\n"))
    return Align.center(
        Panel(
            Group(Text(game.status()), grid),
            padding=(0, 1),
            expand=False,
        ),
        vertical="middle",
    )


def play(
    game: Game,
    console: Optional[Console] = None,
    key_reader: Callable[[], str] = read_key,
) -> None:
    """
    Run the input loop until a quit key is pressed.

    Args:
        game: The game to drive.
        console: Console to paint on.
        key_reader: Blocks until the next key press and returns it.
    """
    console = console or Console()
    with Live(
        intro_panel(),
        console=console,
        auto_refresh=False,
        screen=True,
    ) as live:
        if key_reader() in EXIT_KEYS:
            return

        live.update(game_panel(game), refresh=True)
        while game.handle_key(key_reader()):
            live.update(game_panel(game), refresh=True)
