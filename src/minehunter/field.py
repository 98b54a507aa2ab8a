"""
Field module for Minehunter.

Represents a single grid cell with its cover, mine and flag state
and the number of mines found around it.
"""
from dataclasses import dataclass
from typing import Callable, Dict


# ============================================================================
# Constants
# ============================================================================

MINE = "*"
COVER = "░"
EMPTY = " "
FLAG = "F"
WRONG = "X"

# Style names understood by the terminal front-end (rich style names)
MINE_COUNT_TO_COLOR: Dict[int, str] = {
    1: "cyan",
    2: "green",
    3: "red",
    4: "blue",
    5: "magenta",
    6: "yellow",
    7: "bright_cyan",
    8: "bright_green",
}

StyleFn = Callable[..., str]


def plain_style(text: str, *styles: str) -> str:
    """Apply no styling."""
    return text


# ============================================================================
# Field Data Class
# ============================================================================

@dataclass
class Field:
    """
    A single field on the grid.

    Attributes:
        covered: Whether the field is still hidden from the player.
        mined: Whether the field hides a mine.
        flagged: Whether the player placed a flag here.
        wrongly_flagged: Set at the end of a lost round on flags
            that were placed on a field without a mine.
        adjacent_mine_count: Mines in the surrounding fields. Only
            meaningful once the field has been revealed.
    """

    covered: bool = True
    mined: bool = False
    flagged: bool = False
    wrongly_flagged: bool = False
    adjacent_mine_count: int = 0

    def toggle_flag(self) -> None:
        """Toggle the flag on a covered field."""
        if not self.covered:
            return
        self.flagged = not self.flagged

    def set_mine(self) -> None:
        """Hide a mine in this field."""
        self.mined = True

    def reveal(self) -> None:
        """Remove the cover."""
        self.covered = False

    def mark_wrong(self) -> None:
        """Mark the flag on this field as wrongly placed."""
        self.wrongly_flagged = True

    def render(self, style_fn: StyleFn = plain_style) -> str:
        """
        Render the field as a single glyph.

        Args:
            style_fn: Decorates a glyph with the given style names.

        Returns:
            The glyph, decorated when it carries a colour.
        """
        if not self.covered:
            if self.mined:
                return MINE
            if self.flagged and self.wrongly_flagged:
                return style_fn(WRONG, "on red")
            if self.adjacent_mine_count:
                return style_fn(
                    str(self.adjacent_mine_count),
                    MINE_COUNT_TO_COLOR[self.adjacent_mine_count],
                )
            return EMPTY
        if self.flagged:
            return FLAG
        return COVER

    def to_observation(self) -> int:
        """
        Convert field to an observation value.

        Returns:
            -1: Covered field
            -2: Covered field with a flag
            0-8: Revealed field with adjacent mine count
            9: Revealed mine
        """
        if self.covered:
            return -2 if self.flagged else -1
        if self.mined:
            return 9
        return self.adjacent_mine_count
