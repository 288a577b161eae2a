"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell


# ============================================================================
# Layouts
# ============================================================================

# A column of mines splitting a 5x3 board into two blank regions.
WALL_CONFIG = BoardConfig(5, 3, 3, 3)
WALL_MINES = [(2, 0), (2, 1), (2, 2)]

# A single mine in the middle of a 3x3 board.
CENTER_CONFIG = BoardConfig(3, 3, 1, 1)
CENTER_MINES = [(1, 1)]


def make_wall_board(config: BoardConfig = WALL_CONFIG) -> Board:
    """Board factory for the wall layout."""
    return Board.from_mines(config, WALL_MINES)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 20x10 board with 10 mines."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def seeded_board() -> Board:
    """Create a 9x9 board with 10 mines from a fixed seed."""
    return Board(BoardConfig(9, 9, 10, 10), random.Random(42))


@pytest.fixture
def center_board() -> Board:
    """Create a 3x3 board with one mine in the middle."""
    return Board.from_mines(CENTER_CONFIG, CENTER_MINES)


@pytest.fixture
def wall_board() -> Board:
    """Create a 5x3 board split by a column of mines."""
    return make_wall_board()


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10, 10)


@pytest.fixture
def ranged_config() -> BoardConfig:
    """Configuration with a mine-count range."""
    return BoardConfig(10, 10, 5, 15)
