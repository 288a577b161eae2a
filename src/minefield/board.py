"""
Board module for the minefield engine.

Implements the game board with mine placement, cell revealing,
flagging and win/lose classification.
"""
import logging
import random
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, ContentKind
from .errors import ConfigurationError, OutOfBoundsError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a minefield board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        min_mines: Fewest mines a board may hold.
        max_mines: Most mines a board may hold.
    """

    width: int = 20
    height: int = 10
    min_mines: int = 10
    max_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.min_mines < 0 or self.max_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        if self.max_mines < self.min_mines:
            raise ConfigurationError(
                f"max_mines ({self.max_mines}) is below "
                f"min_mines ({self.min_mines})"
            )
        if self.max_mines > self.total_cells:
            raise ConfigurationError(
                f"Too many mines (max {self.total_cells})"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height


DEFAULT_CONFIG = BoardConfig()


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minefield game board.

    Mines are laid out when the board is constructed; afterwards the
    board only changes through reveal() and flag(). A new game means a
    new Board.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        mines: Optional[Iterable[Position]] = None,
    ) -> None:
        """
        Create a board and place its mines.

        Args:
            config: Board configuration (default: 20x10 with 10 mines).
            rng: Random source for mine count and placement.
            mines: Fixed (x, y) mine positions; random placement when None.
        """
        self.config = config or DEFAULT_CONFIG
        self._rng = rng or random.Random()
        self._init_grid()
        self._mine_count = 0
        self._touched = False
        if mines is None:
            self._place_random_mines(self._choose_mine_count())
        else:
            self._place_fixed_mines(mines)

    @classmethod
    def from_mines(
        cls, config: BoardConfig, mines: Iterable[Position]
    ) -> "Board":
        """
        Build a board with a fixed mine layout.

        Args:
            config: Board configuration; the layout size must respect
                its mine bounds.
            mines: (x, y) positions that hold a mine.

        Returns:
            A new board with all cells hidden.
        """
        return cls(config, mines=mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of hidden, unflagged blank cells."""
        self._grid: List[List[Cell]] = [
            [Cell(is_mine=False, adjacent_mines=0)
             for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _choose_mine_count(self) -> int:
        """Pick a mine count within the configured bounds."""
        extra = self.config.max_mines - self.config.min_mines
        if extra > 0:
            extra = self._rng.randint(0, extra)
        return self.config.min_mines + extra

    def _place_random_mines(self, count: int) -> None:
        """
        Place mines one at a time by rejection sampling.

        Each attempt draws a uniform position and retries while it already
        holds a mine. With count equal to the cell count the last mines
        can take many attempts; there is no cap.
        """
        attempts = 0
        for _ in range(count):
            placed = False
            while not placed:
                x = self._rng.randrange(self.config.width)
                y = self._rng.randrange(self.config.height)
                placed = self._set_mine(x, y)
                attempts += 1
        logger.debug(
            "Placed %d mines on %dx%d board in %d attempts",
            count, self.config.width, self.config.height, attempts,
        )

    def _place_fixed_mines(self, mines: Iterable[Position]) -> None:
        """Place mines at the given positions after validating the layout."""
        positions = list(mines)
        if len(set(positions)) != len(positions):
            raise ConfigurationError("Mine layout contains duplicates")
        if not self.config.min_mines <= len(positions) <= self.config.max_mines:
            raise ConfigurationError(
                f"Mine layout has {len(positions)} mines, expected between "
                f"{self.config.min_mines} and {self.config.max_mines}"
            )
        for x, y in positions:
            if not self._is_valid_position(x, y):
                raise ConfigurationError(
                    f"Mine at ({x}, {y}) is outside the board"
                )
            self._set_mine(x, y)

    def _set_mine(self, x: int, y: int) -> bool:
        """
        Put a mine at (x, y) and update neighbor counts incrementally.

        Returns:
            False if there is already a mine there.
        """
        if not self._grid[y][x].place_mine():
            return False
        for nx, ny in self.neighbors(x, y):
            neighbor = self._grid[ny][nx]
            if not neighbor.is_mine:
                neighbor.adjacent_mines += 1
        self._mine_count += 1
        return True

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column index of center cell.
            y: Row index of center cell.

        Returns:
            List of (x, y) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _require_position(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y) or raise for an off-board position."""
        if not self._is_valid_position(x, y):
            raise OutOfBoundsError(
                x, y, self.config.width, self.config.height
            )
        return self._grid[y][x]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> GameState:
        """
        Reveal the cell at the given position.

        A mine loses the game and exposes the whole board. A blank cell
        also reveals its connected blank region and that region's border.
        Revealing an already revealed cell, or any cell once the game is
        over, changes nothing.

        Args:
            x: Column index to reveal.
            y: Row index to reveal.

        Returns:
            The game state after the reveal.
        """
        cell = self._require_position(x, y)
        state = self.game_state
        if state != GameState.PLAYING or cell.is_revealed:
            return state

        self._touched = True
        cell.reveal()
        if cell.is_mine:
            logger.debug("Mine revealed at (%d, %d)", x, y)
            self._reveal_all()
            return GameState.LOST

        if cell.is_blank:
            self._reveal_connected_blank(x, y)

        state = self.game_state
        if state == GameState.WON:
            logger.debug("All safe cells revealed after (%d, %d)", x, y)
        return state

    def _reveal_connected_blank(self, x: int, y: int) -> None:
        """Reveal every cell reachable through blank cells from (x, y)."""
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            for nx, ny in self.neighbors(cx, cy):
                neighbor = self._grid[ny][nx]
                if neighbor.is_revealed or neighbor.is_mine:
                    continue
                neighbor.reveal()
                if neighbor.is_blank:
                    stack.append((nx, ny))

    def _reveal_all(self) -> None:
        """Reveal every cell on the board."""
        for row in self._grid:
            for cell in row:
                cell.reveal()

    def flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            True if flag was toggled, False for a revealed cell or a
            finished game.
        """
        cell = self._require_position(x, y)
        if not self.is_playing:
            return False
        return cell.toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        """Number of columns."""
        return self.config.width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.config.height

    @property
    def mine_count(self) -> int:
        """Number of mines placed on this board."""
        return self._mine_count

    @property
    def game_state(self) -> GameState:
        """
        Classify the board.

        Playing until the first reveal. After that, lost as soon as any
        mine is revealed and won when every non-mine cell is revealed and
        every mine is not.
        """
        if not self._touched:
            return GameState.PLAYING
        won = True
        for row in self._grid:
            for cell in row:
                if cell.is_mine and cell.is_revealed:
                    return GameState.LOST
                if not cell.is_mine and not cell.is_revealed:
                    won = False
        return GameState.WON if won else GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.LOST

    def get_cell(self, x: int, y: int) -> Cell:
        """Get a copy of the cell at position, for inspection only."""
        return replace(self._require_position(x, y))

    def is_revealed(self, x: int, y: int) -> bool:
        """Check if the cell at position is revealed."""
        return self._require_position(x, y).is_revealed

    def is_flagged(self, x: int, y: int) -> bool:
        """Check if the cell at position is flagged."""
        return self._require_position(x, y).is_flagged

    def content_at(self, x: int, y: int) -> ContentKind:
        """Classify the content of the cell at position."""
        return self._require_position(x, y).content

    def display_symbol(self, x: int, y: int) -> str:
        """Display character for a cell; only meaningful once revealed."""
        return self._require_position(x, y).symbol()

    def mine_positions(self) -> List[Position]:
        """List (x, y) positions of all mines."""
        return [
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
            if self._grid[y][x].is_mine
        ]

    # ========================================================================
    # Diagnostics
    # ========================================================================

    def content_grid(self) -> np.ndarray:
        """
        Get the content of every cell as a numpy array, ignoring visibility.

        For debugging and tests only.

        Returns:
            2D int8 array indexed [y, x] where:
                -1 = mine
                0 = blank
                1-8 = adjacent mine count
        """
        grid = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y in range(self.config.height):
            for x in range(self.config.width):
                grid[y, x] = self._grid[y][x].to_observation()
        return grid

    def render(self) -> str:
        """Render every cell's content as a text table, ignoring visibility."""
        separator = "---" + "+---" * (self.config.width - 1)
        lines = []
        for y, row in enumerate(self._grid):
            lines.append(" " + "| ".join(cell.symbol() + " " for cell in row))
            if y != self.config.height - 1:
                lines.append(separator)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Board(width={self.config.width}, height={self.config.height}, "
            f"mines={self._mine_count}, state={self.game_state.name})"
        )
