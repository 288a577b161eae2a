"""
Game session: connects a presentation layer to the board engine.

The view reports player input through the SessionDelegate interface; the
session applies it to the board and pushes a full redraw back to the view.
Restarting and quitting are session decisions; the board knows nothing
about them.
"""
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from .board import Board, BoardConfig, GameState
from .cell import FLAG_SYMBOL, HIDDEN_SYMBOL

logger = logging.getLogger(__name__)

BoardFactory = Callable[[BoardConfig], Board]


# ============================================================================
# Presentation Interfaces
# ============================================================================

class BoardView(ABC):
    """Abstract view that draws the board and asks the end-of-game question."""

    @abstractmethod
    def set_label(self, x: int, y: int, label: str) -> None:
        """Show label on the cell at (x, y)."""

    @abstractmethod
    def set_disabled(self, x: int, y: int, disabled: bool) -> None:
        """Mark the cell at (x, y) as no longer clickable."""

    @abstractmethod
    def show_end_dialog(self, won: bool) -> None:
        """
        Tell the player the game is over and ask restart or quit.

        The answer must be reported through the delegate.
        """


class SessionDelegate(ABC):
    """Receives player input from a BoardView."""

    @abstractmethod
    def primary_interaction(self, x: int, y: int) -> None:
        """Player asked to reveal the cell at (x, y)."""

    @abstractmethod
    def secondary_interaction(self, x: int, y: int) -> None:
        """Player asked to toggle the flag on the cell at (x, y)."""

    @abstractmethod
    def end_dialog_selected_restart(self) -> None:
        """Player chose to start a new game."""

    @abstractmethod
    def end_dialog_selected_quit(self) -> None:
        """Player chose to leave."""


# ============================================================================
# Session
# ============================================================================

class GameSession(SessionDelegate):
    """
    Drives one player's sequence of games.

    Attributes:
        config: Configuration used for every new board.
        board: Board of the game currently being played.
        view: Attached view, or None before attach().
    """

    def __init__(
        self,
        on_quit: Callable[[], None],
        config: Optional[BoardConfig] = None,
        board_factory: Optional[BoardFactory] = None,
    ) -> None:
        """
        Initialize the session and create the first board.

        Args:
            on_quit: Called when the player chooses to quit.
            config: Board configuration (default: 20x10 with 10 mines).
            board_factory: Builds boards from config (default: Board).
        """
        self.config = config or BoardConfig()
        self._board_factory = board_factory or Board
        self._on_quit = on_quit
        self.board = self._board_factory(self.config)
        self.view: Optional[BoardView] = None
        self.games_started = 1

    def attach(self, view: BoardView) -> None:
        """Bind a view and draw the current board on it."""
        self.view = view
        self.update_view()

    # ========================================================================
    # Delegate Operations
    # ========================================================================

    def primary_interaction(self, x: int, y: int) -> None:
        """Reveal the cell and raise the end dialog when the game ends."""
        if not self.board.is_playing:
            return
        state = self.board.reveal(x, y)
        self.update_view()
        if state != GameState.PLAYING:
            logger.info("Game %d ended: %s", self.games_started, state.name)
            if self.view is not None:
                self.view.show_end_dialog(state == GameState.WON)

    def secondary_interaction(self, x: int, y: int) -> None:
        """Toggle the flag on the cell while the game is in progress."""
        if not self.board.is_playing:
            return
        self.board.flag(x, y)
        self.update_view()

    def end_dialog_selected_restart(self) -> None:
        """Replace the board with a fresh one and redraw."""
        self.board = self._board_factory(self.config)
        self.games_started += 1
        logger.info("Starting game %d", self.games_started)
        self.update_view()

    def end_dialog_selected_quit(self) -> None:
        """Hand the decision to leave to the quit collaborator."""
        logger.info("Quitting after %d game(s)", self.games_started)
        self._on_quit()

    # ========================================================================
    # Redraw
    # ========================================================================

    def label_for(self, x: int, y: int) -> str:
        """Label the view should show for the cell at (x, y)."""
        if self.board.is_flagged(x, y):
            return FLAG_SYMBOL
        if self.board.is_revealed(x, y):
            return self.board.display_symbol(x, y)
        return HIDDEN_SYMBOL

    def update_view(self) -> None:
        """Redraw every cell on the attached view."""
        if self.view is None:
            return
        for x in range(self.board.width):
            for y in range(self.board.height):
                self.view.set_label(x, y, self.label_for(x, y))
                self.view.set_disabled(x, y, self.board.is_revealed(x, y))
