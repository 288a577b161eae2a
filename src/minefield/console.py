"""
Text presentation layer for the minefield game.

Draws the board as a character grid and turns typed commands into
delegate calls. Holds no game state of its own beyond what the session
last drew.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional

from .errors import CommandError
from .session import BoardView, SessionDelegate

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

HIDDEN_MARK = "."

HELP_TEXT = (
    "Commands: r X Y (reveal), f X Y (flag/unflag), q (quit), h (help)"
)


# ============================================================================
# Command Parsing
# ============================================================================

@dataclass(frozen=True)
class Command:
    """
    A parsed console command.

    Attributes:
        action: One of "reveal", "flag", "quit", "help".
        x: Column for cell commands.
        y: Row for cell commands.
    """

    action: str
    x: int = 0
    y: int = 0


_CELL_ACTIONS = {"r": "reveal", "reveal": "reveal", "f": "flag", "flag": "flag"}
_PLAIN_ACTIONS = {"q": "quit", "quit": "quit", "h": "help", "help": "help"}


def parse_command(line: str) -> Command:
    """
    Parse one line of player input.

    Args:
        line: Raw input such as "r 3 4" or "q".

    Returns:
        The parsed command.

    Raises:
        CommandError: If the line is empty or malformed.
    """
    parts = line.strip().lower().split()
    if not parts:
        raise CommandError("Empty command")

    verb, args = parts[0], parts[1:]
    if verb in _PLAIN_ACTIONS:
        if args:
            raise CommandError(f"'{verb}' takes no arguments")
        return Command(_PLAIN_ACTIONS[verb])

    if verb not in _CELL_ACTIONS:
        raise CommandError(f"Unknown command '{verb}'")
    if len(args) != 2:
        raise CommandError(f"'{verb}' needs two coordinates: X Y")
    try:
        x, y = int(args[0]), int(args[1])
    except ValueError:
        raise CommandError(f"Coordinates must be integers, got {args}") from None
    return Command(_CELL_ACTIONS[verb], x, y)


# ============================================================================
# Console View
# ============================================================================

class ConsoleView(BoardView):
    """BoardView that prints to a text stream and reads typed answers."""

    def __init__(
        self,
        width: int,
        height: int,
        delegate: SessionDelegate,
        input_fn: Optional[InputFn] = None,
        output_fn: Optional[OutputFn] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.delegate = delegate
        self._input = input_fn or input
        self._output = output_fn or print
        self._labels: List[List[str]] = [
            [" "] * width for _ in range(height)
        ]
        self._disabled: List[List[bool]] = [
            [False] * width for _ in range(height)
        ]
        self.closed = False

    def set_label(self, x: int, y: int, label: str) -> None:
        self._labels[y][x] = label

    def set_disabled(self, x: int, y: int, disabled: bool) -> None:
        self._disabled[y][x] = disabled

    def show_end_dialog(self, won: bool) -> None:
        self._output(self.render())
        self._output("You won!" if won else "You lost!")
        if self._ask_restart():
            self.delegate.end_dialog_selected_restart()
        else:
            self.delegate.end_dialog_selected_quit()

    def _ask_restart(self) -> bool:
        """Ask until the player answers; end of input counts as quit."""
        while True:
            try:
                answer = self._input("Play again? [y/n] ").strip().lower()
            except EOFError:
                return False
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False

    def write(self, text: str) -> None:
        """Print a line of output."""
        self._output(text)

    def read(self, prompt: str) -> str:
        """Prompt for a line of input."""
        return self._input(prompt)

    def close(self) -> None:
        """Stop the input loop."""
        self.closed = True

    def contains(self, x: int, y: int) -> bool:
        """Check if (x, y) lies on the drawn board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def render(self) -> str:
        """Render the last drawn labels as a grid with coordinates."""
        lines = ["   " + "".join(f"{x:>3}" for x in range(self.width))]
        for y in range(self.height):
            row = ""
            for x in range(self.width):
                label = self._labels[y][x]
                if not self._disabled[y][x] and label == " ":
                    label = HIDDEN_MARK
                row += f"{label:>3}"
            lines.append(f"{y:>3}" + row)
        return "\n".join(lines)


# ============================================================================
# Input Loop
# ============================================================================

def run(view: ConsoleView) -> None:
    """
    Read commands and forward them to the view's delegate until quit.

    Args:
        view: Attached console view; its delegate must close it on quit.
    """
    view.write(HELP_TEXT)
    while not view.closed:
        view.write(view.render())
        try:
            line = view.read("> ")
        except EOFError:
            view.delegate.end_dialog_selected_quit()
            break

        try:
            command = parse_command(line)
        except CommandError as error:
            view.write(f"Invalid command: {error}")
            continue

        if command.action == "help":
            view.write(HELP_TEXT)
        elif command.action == "quit":
            view.delegate.end_dialog_selected_quit()
        elif not view.contains(command.x, command.y):
            view.write(
                f"({command.x}, {command.y}) is off the board "
                f"({view.width}x{view.height})"
            )
        elif command.action == "reveal":
            view.delegate.primary_interaction(command.x, command.y)
        else:
            view.delegate.secondary_interaction(command.x, command.y)
