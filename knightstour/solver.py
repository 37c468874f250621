"""Knight's tour search using Warnsdorff's rule with a distance tie-break."""

from __future__ import annotations

import math

KNIGHT_MOVES: tuple[tuple[int, int], ...] = (
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)


def is_on_board(row: int, col: int, size: int) -> bool:
    """Return True if (row, col) lies on a size x size board."""
    return 0 <= row < size and 0 <= col < size


def _is_unvisited(board: list[list[int | None]], row: int, col: int) -> bool:
    return is_on_board(row, col, len(board)) and board[row][col] is None


def degree(board: list[list[int | None]], row: int, col: int) -> int:
    """Count the unvisited squares a knight on (row, col) could move to.

    Unvisited squares of ``board`` hold ``None``.
    """
    return sum(
        1 for dr, dc in KNIGHT_MOVES if _is_unvisited(board, row + dr, col + dc)
    )


def distance_from_center(row: int, col: int, size: int) -> float:
    """Euclidean distance of (row, col) from the centre of the board."""
    center = (size - 1) / 2
    return math.hypot(row - center, col - center)


def solve_knight_tour(
    size: int, start_row: int, start_col: int
) -> list[list[int]] | None:
    """Find a tour from the given start square.

    Returns a board where each square holds the move number (1 for the
    start), or ``None`` if the heuristic gets trapped.
    """
    if size < 1:
        raise ValueError(f"board size must be positive, got {size}")
    if not is_on_board(start_row, start_col, size):
        raise ValueError(f"start square ({start_row}, {start_col}) is off the board")

    board: list[list[int | None]] = [[None] * size for _ in range(size)]
    row, col = start_row, start_col
    board[row][col] = 1

    for move_number in range(2, size * size + 1):
        best: tuple[int, int] | None = None
        best_degree = 0
        best_distance = 0.0
        for dr, dc in KNIGHT_MOVES:
            r, c = row + dr, col + dc
            if not _is_unvisited(board, r, c):
                continue
            d = degree(board, r, c)
            dist = distance_from_center(r, c, size)
            if (
                best is None
                or d < best_degree
                or (d == best_degree and dist > best_distance)
            ):
                best, best_degree, best_distance = (r, c), d, dist
        if best is None:
            return None
        row, col = best
        board[row][col] = move_number

    return [[cell for cell in line if cell is not None] for line in board]


def precompute_all_tours(size: int) -> dict[tuple[int, int], list[list[int]]]:
    """Solve from every square; map each successful start to its tour.

    Keys appear in row-major order of the start squares.
    """
    tours: dict[tuple[int, int], list[list[int]]] = {}
    for row in range(size):
        for col in range(size):
            tour = solve_knight_tour(size, row, col)
            if tour is not None:
                tours[(row, col)] = tour
    return tours