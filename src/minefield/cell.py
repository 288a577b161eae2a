"""
Cell module for the minefield engine.

Represents individual cells on the board with their state
(hidden/revealed/flagged) and content (mine/blank/adjacent count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MINE_SYMBOL = "%"
BLANK_SYMBOL = " "
FLAG_SYMBOL = "P"
HIDDEN_SYMBOL = " "

MINE_CODE = -1


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class ContentKind(Enum):
    """What a cell holds, fixed once mines are placed."""

    MINE = auto()
    BLANK = auto()
    ADJACENT = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Always 0 for a mine.
        state: Current visual state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell, clearing any flag on it.

        Returns:
            True if the cell changed state, False if it was already
            revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def place_mine(self) -> bool:
        """
        Turn this cell into a mine.

        Returns:
            False if the cell already holds a mine.
        """
        if self.is_mine:
            return False
        self.is_mine = True
        self.adjacent_mines = 0
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_blank(self) -> bool:
        """Check if cell is a non-mine with no adjacent mines."""
        return not self.is_mine and self.adjacent_mines == 0

    @property
    def content(self) -> ContentKind:
        """Classify the cell content for display."""
        if self.is_mine:
            return ContentKind.MINE
        if self.adjacent_mines == 0:
            return ContentKind.BLANK
        return ContentKind.ADJACENT

    def symbol(self) -> str:
        """Map cell content to its single display character."""
        kind = self.content
        if kind == ContentKind.MINE:
            return MINE_SYMBOL
        if kind == ContentKind.BLANK:
            return BLANK_SYMBOL
        return str(self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell content to a numeric code, ignoring visibility.

        Returns:
            -1: Mine
            0: Blank
            1-8: Adjacent mine count
        """
        if self.is_mine:
            return MINE_CODE
        return self.adjacent_mines
