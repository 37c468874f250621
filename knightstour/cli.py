"""Console front end: welcome screen, rules, board size choice and the game."""

from __future__ import annotations

import argparse
import contextlib
import random
import sys
from typing import Iterator, Mapping, TextIO

from knightstour.game import (
    Color,
    KnightTourGame,
    color_code,
    play,
    render_solution,
)
from knightstour.solver import precompute_all_tours

TITLE = "WELCOME TO THE KNIGHT'S TOUR"
MIN_SIZE = 5
MAX_SIZE = 10


class _InputClosed(Exception):
    """Raised when the key stream ends while a choice is still required."""


def heading() -> str:
    """The boxed welcome banner."""
    width = len(TITLE) + 2
    purple = color_code(Color.PURPLE)
    return (
        purple
        + " " + "_" * width + "\n"
        + "|" + " " * width + "|\n"
        + "| " + color_code(Color.YELLOW) + TITLE + purple + " |\n"
        + "|" + "_" * width + "|\n\n"
        + color_code(Color.LIGHT_GRAY)
    )


def rules() -> str:
    """The rules of the game, with section colours."""
    section = color_code(Color.LIGHT_YELLOW)
    body = color_code(Color.LIGHT_GRAY)
    return (
        color_code(Color.LIGHT_GREEN)
        + "\n\n KNIGHT'S TOUR RULES:\n\n"
        + section + " Objective:\n" + body
        + "  - Visit every square of the chessboard exactly once using only knight moves.\n\n"
        + section + " Movement Rules:\n" + body
        + "  - The knight moves in an \"L\" shape:\n"
        + "    * 2 squares in one direction and then 1 square perpendicular.\n"
        + section + " Constraints:\n" + body
        + "  - You cannot revisit any square.\n"
        + "  - The knight must stay within the board boundaries.\n"
        + "  - All moves must be valid knight moves.\n\n"
        + section + " Winning Condition:\n" + body
        + "   Successfully visit all squares without repeating any cell.\n\n"
        + section + " Losing Condition:\n" + body
        + "   No legal moves left before completing all squares.\n\n"
        + body
    )


def read_key(stream: TextIO) -> str:
    """Read one key from ``stream``, skipping line breaks; '' at end of input."""
    while True:
        ch = stream.read(1)
        if ch == "":
            return ""
        if ch in "\r\n":
            continue
        return ch


def choose_start(
    tours: Mapping[tuple[int, int], list[list[int]]], rng: random.Random
) -> tuple[int, int]:
    """Pick a random start square among those that have a known tour."""
    if not tours:
        raise ValueError("no start square has a tour on this board")
    return rng.choice(list(tours))


@contextlib.contextmanager
def _single_keys(stream: TextIO) -> Iterator[None]:
    """Deliver key presses one at a time without echo when on a terminal."""
    try:
        import termios
        import tty
    except ImportError:
        termios = None
    if termios is None or not stream.isatty():
        yield
        return
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knightstour",
        description="Play the knight's tour on a board of 5 to 10 squares a side.",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for choosing the start square"
    )
    return parser


def _run(stdin: TextIO, out: TextIO, rng: random.Random) -> None:
    def next_key() -> str:
        out.flush()
        return read_key(stdin)

    def require_key() -> str:
        key = next_key()
        if not key:
            raise _InputClosed
        return key

    aqua = color_code(Color.AQUA)
    red = color_code(Color.RED)

    out.write(heading())
    prompt = "For reading rules press 'r' and for playing games press 'p' : "
    out.write(aqua + prompt)
    key = require_key()
    while key not in ("p", "r"):
        out.write(red + "!INVALID KEY PRESS.\n" + aqua + prompt)
        key = require_key()
    out.write(key)

    if key == "r":
        out.write(rules())
        out.write(aqua + "\nPress 'p' to start the game : ")
        key = require_key()
        while key != "p":
            out.write(red + "!INVALID KEY PRESS.\n" + aqua)
            out.write("Please press 'p' to start the game : ")
            key = require_key()
        out.write(key)

    out.write(
        aqua
        + "\n\nPlease enter the size of checkboard you want "
        f"(minimum is {MIN_SIZE} and maximum is {MAX_SIZE}) : "
    )
    key = require_key()
    out.write(key + "\n")
    size = ord(key) - ord("0")
    while not MIN_SIZE <= size <= MAX_SIZE:
        out.write(red + "!INVALID SIZE ENTERED.\nPlease enter the size again\n")
        out.write(color_code(Color.LIGHT_GRAY))
        size = ord(require_key()) - ord("0")

    tours = precompute_all_tours(size)
    start = choose_start(tours, rng)
    play(KnightTourGame(size, *start), next_key, out)

    out.write(
        "\nWAIT WAIT ,to view the solution for your board size press 's' "
        "or press any other key to end game.\n\n"
    )
    if next_key() in ("s", "S"):
        out.write(render_solution(tours[start]))


def main(argv: list[str] | None = None) -> int:
    """Run the interactive game; return the process exit status."""
    args = _build_parser().parse_args(argv)
    rng = random.Random(args.seed)
    out = sys.stdout
    out.write(color_code(Color.LIGHT_GRAY))
    with _single_keys(sys.stdin):
        try:
            _run(sys.stdin, out, rng)
        except _InputClosed:
            out.write("\n")
            out.flush()
            return 1
    out.write(color_code(Color.AQUA) + "\n\n!!THANKS FOR PLAYING GAME!!\n")
    out.write(color_code(Color.LIGHT_GRAY))
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())