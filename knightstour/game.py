"""Interactive knight's tour board: state, rendering and the play loop."""

from __future__ import annotations

import enum
from typing import Callable, TextIO

RESET = "\033[0m"
CLEAR_SCREEN = "\033[2J"
_HIGHLIGHT = "\033[30;47m"


class Color(enum.IntEnum):
    """Console colour numbers."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    AQUA = 3
    RED = 4
    PURPLE = 5
    YELLOW = 6
    LIGHT_GRAY = 7
    DARK_GRAY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_CYAN = 11
    LIGHT_RED = 12
    LIGHT_MAGENTA = 13
    LIGHT_YELLOW = 14
    WHITE = 15
    HIGHLIGHT = 240


_COLOR_CODES = {
    Color.BLACK: "\033[30m",
    Color.BLUE: "\033[34m",
    Color.GREEN: "\033[32m",
    Color.AQUA: "\033[36m",
    Color.RED: "\033[31m",
    Color.PURPLE: "\033[35m",
    Color.YELLOW: "\033[33m",
    Color.LIGHT_GRAY: "\033[37m",
    Color.DARK_GRAY: "\033[90m",
    Color.LIGHT_BLUE: "\033[94m",
    Color.LIGHT_GREEN: "\033[92m",
    Color.LIGHT_CYAN: "\033[96m",
    Color.LIGHT_RED: "\033[91m",
    Color.LIGHT_MAGENTA: "\033[95m",
    Color.LIGHT_YELLOW: "\033[93m",
    Color.WHITE: "\033[97m",
    Color.HIGHLIGHT: _HIGHLIGHT,
}


def color_code(color: int) -> str:
    """ANSI escape sequence for a colour number; unknown numbers reset."""
    return _COLOR_CODES.get(color, RESET)


class MoveOutcome(enum.Enum):
    """Result of a key press."""

    MOVED = "moved"
    OCCUPIED = "occupied"
    OFF_BOARD = "off_board"
    INVALID_KEY = "invalid_key"
    QUIT = "quit"
    WON = "won"
    LOST = "lost"


KEY_MOVES: dict[str, tuple[int, int]] = {
    "w": (-2, 1),
    "e": (-1, 2),
    "d": (1, 2),
    "c": (2, 1),
    "x": (2, -1),
    "z": (1, -2),
    "a": (-1, -2),
    "s": (-2, -1),
}


def move_instructions() -> str:
    """Keyboard help for the eight knight moves."""
    return (
        "Knight Move Instructions (Each move is in an 'L' shape):\n"
        "W: Moves 2 units UP, then 1 unit RIGHT\n"
        "E: Moves 2 units RIGHT, then 1 unit UP\n"
        "D: Moves 2 units RIGHT, then 1 unit DOWN\n"
        "C: Moves 2 units DOWN, then 1 unit RIGHT\n"
        "X: Moves 2 units DOWN, then 1 unit LEFT\n"
        "Z: Moves 2 units LEFT, then 1 unit DOWN\n"
        "A: Moves 2 units LEFT, then 1 unit UP\n"
        "S: Moves 2 units UP, then 1 unit LEFT\n"
        "NOTE : Press 'q' to quit the game.\n\n"
    )


def format_cell(text: str) -> str:
    """Pad a cell's text to the board's fixed cell width."""
    if text.strip() == "":
        return "    "
    if len(text) == 1:
        return f"  {text} "
    if len(text) == 2:
        return f" {text} "
    return f" {text}"


def _border(size: int) -> str:
    return color_code(Color.LIGHT_GREEN) + "+" + "----+" * size + "\n"


def render_board(
    cells: list[list[int | None]], highlight: tuple[int, int] | None = None
) -> str:
    """Draw the grid; the ``highlight`` square is shown in reverse colours."""
    size = len(cells)
    parts = [_border(size)]
    for i, line in enumerate(cells):
        parts.append(color_code(Color.LIGHT_GREEN) + "|")
        for j, value in enumerate(line):
            text = format_cell(" " if value is None else str(value))
            if (i, j) == highlight:
                parts.append(_HIGHLIGHT + text + RESET)
            else:
                parts.append(color_code(Color.LIGHT_BLUE) + text)
            parts.append(color_code(Color.LIGHT_GREEN) + "|")
        parts.append("\n")
        parts.append(_border(size))
    parts.append(color_code(Color.LIGHT_GRAY))
    return "".join(parts)


def render_solution(board: list[list[int]]) -> str:
    """Draw a solved board with every move number."""
    return render_board(board)


def _move_cursor(row: int, col: int) -> str:
    return f"\033[{row + 1};{col + 1}H"


def _clear_line(row: int) -> str:
    return _move_cursor(row + 2, 0) + " " * 300 + _move_cursor(row, 0)


class KnightTourGame:
    """A board on which the player moves a knight to visit every square."""

    def __init__(self, size: int, start_row: int, start_col: int) -> None:
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        if not (0 <= start_row < size and 0 <= start_col < size):
            raise ValueError(f"start square ({start_row}, {start_col}) is off the board")
        self.size = size
        self.row = start_row
        self.col = start_col
        self.cells: list[list[int | None]] = [[None] * size for _ in range(size)]
        self.moves_made = 1
        self.cells[start_row][start_col] = 1

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def _on_board(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def press(self, key: str) -> MoveOutcome:
        """Apply a key press and report what happened."""
        key = key.lower()
        if key == "q":
            return MoveOutcome.QUIT
        delta = KEY_MOVES.get(key)
        if delta is None:
            return MoveOutcome.INVALID_KEY
        row, col = self.row + delta[0], self.col + delta[1]
        if not self._on_board(row, col):
            return MoveOutcome.OFF_BOARD
        if self.cells[row][col] is not None:
            return MoveOutcome.OCCUPIED
        self.moves_made += 1
        self.row, self.col = row, col
        self.cells[row][col] = self.moves_made
        if self.is_complete():
            return MoveOutcome.WON
        if self.is_caught():
            return MoveOutcome.LOST
        return MoveOutcome.MOVED

    def is_caught(self) -> bool:
        """True when no knight move leads to a free square."""
        return not any(
            self._on_board(self.row + dr, self.col + dc)
            and self.cells[self.row + dr][self.col + dc] is None
            for dr, dc in KEY_MOVES.values()
        )

    def is_complete(self) -> bool:
        """True when every square has been visited."""
        return self.moves_made == self.size * self.size

    def render(self) -> str:
        """Full screen: instructions followed by the board."""
        return (
            _move_cursor(0, 0)
            + color_code(Color.LIGHT_YELLOW)
            + "\n\n"
            + move_instructions()
            + render_board(self.cells, self.position)
        )


_ERROR_MESSAGES = {
    MoveOutcome.OFF_BOARD: "\nYour move leads you to out of board.\nPlease press correct key.\n",
    MoveOutcome.INVALID_KEY: "\nINVALID key press!\nPlease press correct key.\n",
    MoveOutcome.OCCUPIED: "\nKnight already placed at that cell..\nPlease select different move.\n",
}


def play(game: KnightTourGame, read_key: Callable[[], str], out: TextIO) -> MoveOutcome:
    """Run the game loop until the player wins, loses or quits.

    ``read_key`` returns one key per call; an empty string ends the game
    as if the player had quit.
    """
    status_row = 2 * game.size + 14
    out.write(CLEAR_SCREEN)
    out.write(game.render())
    outcome = MoveOutcome.QUIT
    while True:
        key = read_key()
        if not key:
            outcome = MoveOutcome.QUIT
            break
        outcome = game.press(key)
        if outcome is MoveOutcome.QUIT:
            break
        message = _ERROR_MESSAGES.get(outcome)
        if message is not None:
            out.write(color_code(Color.LIGHT_RED) + _clear_line(status_row))
            out.write(message + color_code(Color.LIGHT_GRAY))
            continue
        out.write(_clear_line(status_row - 1))
        out.write(game.render())
        if outcome is MoveOutcome.WON:
            out.write(color_code(Color.LIGHT_MAGENTA) + _clear_line(status_row))
            out.write("\nCONGRATULATIONS YOU HAVE COMPLETED THE GAME!!\n\n")
            out.write(color_code(Color.LIGHT_GRAY))
            break
        if outcome is MoveOutcome.LOST:
            out.write(color_code(Color.LIGHT_RED) + _clear_line(status_row))
            out.write(
                "\nSorry you lost the game....\n"
                "Your knight does not have any move present.\n"
            )
            out.write(color_code(Color.LIGHT_GRAY))
            break
    out.write(_move_cursor(2 * game.size + 17, 0))
    return outcome