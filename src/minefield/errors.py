"""
Exception types raised by the minefield package.
"""


class MinefieldError(Exception):
    """Base class for all minefield errors."""


class ConfigurationError(MinefieldError, ValueError):
    """Board configuration or fixed mine layout is inconsistent."""


class OutOfBoundsError(MinefieldError, IndexError):
    """A per-cell operation received a coordinate outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Position ({x}, {y}) is outside the {width}x{height} board"
        )
        self.x = x
        self.y = y


class CommandError(MinefieldError, ValueError):
    """Console input could not be parsed into a command."""
