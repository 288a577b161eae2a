"""
Unit tests for GameSession.

Tests that player input reaches the board, that every change is
redrawn in full, and the restart/quit lifecycle.
"""
from typing import Dict, List, Tuple

import pytest
from minefield import Board, BoardConfig, BoardView, GameSession, GameState

from conftest import WALL_CONFIG, make_wall_board


class RecordingView(BoardView):
    """View that remembers what it was told to draw."""

    def __init__(self) -> None:
        self.labels: Dict[Tuple[int, int], str] = {}
        self.disabled: Dict[Tuple[int, int], bool] = {}
        self.end_dialogs: List[bool] = []

    def set_label(self, x: int, y: int, label: str) -> None:
        self.labels[(x, y)] = label

    def set_disabled(self, x: int, y: int, disabled: bool) -> None:
        self.disabled[(x, y)] = disabled

    def show_end_dialog(self, won: bool) -> None:
        self.end_dialogs.append(won)


@pytest.fixture
def quits() -> List[bool]:
    return []


@pytest.fixture
def session(quits: List[bool]) -> GameSession:
    return GameSession(
        on_quit=lambda: quits.append(True),
        config=WALL_CONFIG,
        board_factory=make_wall_board,
    )


@pytest.fixture
def view(session: GameSession) -> RecordingView:
    view = RecordingView()
    session.attach(view)
    return view


# ============================================================================
# Redraw Tests
# ============================================================================

class TestRedraw:
    """Test pull-based redraw of the whole board."""

    def test_attach_draws_every_cell(
        self, session: GameSession, view: RecordingView
    ) -> None:
        """Attaching draws every cell hidden and enabled."""
        assert len(view.labels) == 15
        assert set(view.labels.values()) == {" "}
        assert not any(view.disabled.values())

    def test_update_without_view_is_noop(self, session: GameSession) -> None:
        """Redrawing without a view does nothing."""
        session.update_view()
        assert session.view is None

    def test_default_session_uses_default_board(self) -> None:
        """Default session plays on a 20x10 board."""
        session = GameSession(on_quit=lambda: None)
        assert isinstance(session.board, Board)
        assert (session.board.width, session.board.height) == (20, 10)


# ============================================================================
# Interaction Tests
# ============================================================================

class TestInteractions:
    """Test primary and secondary interactions."""

    def test_primary_reveals_and_redraws(
        self, session: GameSession, view: RecordingView
    ) -> None:
        """Primary interaction reveals and redraws."""
        session.primary_interaction(0, 1)
        assert [view.labels[(1, y)] for y in range(3)] == ["2", "3", "2"]
        assert view.disabled[(0, 0)] is True
        assert view.disabled[(3, 0)] is False
        assert view.end_dialogs == []

    def test_secondary_flags(
        self, session: GameSession, view: RecordingView
    ) -> None:
        """Secondary interaction toggles the flag label."""
        session.secondary_interaction(3, 1)
        assert view.labels[(3, 1)] == "P"
        session.secondary_interaction(3, 1)
        assert view.labels[(3, 1)] == " "

    def test_win_shows_end_dialog(
        self, session: GameSession, view: RecordingView
    ) -> None:
        """Winning raises the end dialog with won=True."""
        session.primary_interaction(0, 0)
        session.primary_interaction(4, 0)
        assert session.board.game_state == GameState.WON
        assert view.end_dialogs == [True]

    def test_loss_shows_end_dialog_and_mines(
        self, session: GameSession, view: RecordingView
    ) -> None:
        """Losing raises the end dialog and shows mines."""
        session.primary_interaction(2, 0)
        assert view.end_dialogs == [False]
        assert view.labels[(2, 1)] == "%"
        assert all(view.disabled.values())

    def test_all_mine_board_can_be_lost(self, quits: List[bool]) -> None:
        """A board with no safe cells still plays and ends in a loss."""
        session = GameSession(
            on_quit=lambda: quits.append(True),
            config=BoardConfig(2, 1, 2, 2),
        )
        view = RecordingView()
        session.attach(view)

        session.primary_interaction(0, 0)
        assert session.board.game_state == GameState.LOST
        assert view.end_dialogs == [False]
        assert view.labels == {(0, 0): "%", (1, 0): "%"}

    def test_input_after_game_over_is_ignored(
        self, session: GameSession, view: RecordingView
    ) -> None:
        """Input after the game ends changes nothing."""
        session.primary_interaction(2, 0)
        labels = dict(view.labels)
        session.primary_interaction(0, 0)
        session.secondary_interaction(4, 0)
        assert view.labels == labels
        assert view.end_dialogs == [False]


# ============================================================================
# Lifecycle Tests
# ============================================================================

class TestLifecycle:
    """Test restart and quit."""

    def test_restart_replaces_board(
        self, session: GameSession, view: RecordingView
    ) -> None:
        """Restart discards the board for a fresh one."""
        session.primary_interaction(2, 0)
        old_board = session.board
        session.end_dialog_selected_restart()
        assert session.board is not old_board
        assert session.board.is_playing is True
        assert session.games_started == 2
        assert set(view.labels.values()) == {" "}

    def test_quit_calls_collaborator(
        self, session: GameSession, quits: List[bool]
    ) -> None:
        """Quit calls the injected quit callable."""
        session.end_dialog_selected_quit()
        assert quits == [True]
