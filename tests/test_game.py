import io
import re

import pytest

from knightstour.game import (
    KEY_MOVES,
    Color,
    KnightTourGame,
    MoveOutcome,
    color_code,
    format_cell,
    move_instructions,
    play,
    render_board,
    render_solution,
)
from knightstour.solver import solve_knight_tour

ANSI = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

RING_KEYS = ["c", "w", "z", "d", "s", "x", "e"]


def _strip(text):
    return ANSI.sub("", text)


def _keys_for_tour(tour):
    positions = {}
    for r, line in enumerate(tour):
        for c, number in enumerate(line):
            positions[number] = (r, c)
    by_delta = {delta: key for key, delta in KEY_MOVES.items()}
    keys = []
    for n in range(1, len(positions)):
        (r1, c1), (r2, c2) = positions[n], positions[n + 1]
        keys.append(by_delta[(r2 - r1, c2 - c1)])
    return keys


def test_color_codes():
    assert color_code(Color.RED) == "\033[31m"
    assert color_code(Color.HIGHLIGHT) == "\033[30;47m"
    assert color_code(999) == "\033[0m"


def test_format_cell_widths():
    assert format_cell(" ") == "    "
    assert format_cell("7") == "  7 "
    assert format_cell("42") == " 42 "
    assert format_cell("100") == " 100"


def test_move_instructions_mentions_all_keys():
    text = move_instructions()
    for key in KEY_MOVES:
        assert f"{key.upper()}: Moves" in text
    assert "Press 'q' to quit" in text


def test_render_board_shape():
    cells = [[None] * 5 for _ in range(5)]
    lines = _strip(render_board(cells)).splitlines()
    assert len(lines) == 11
    assert lines[0] == "+" + "----+" * 5
    assert lines[1] == "|" + "    |" * 5


def test_render_solution_contains_all_numbers():
    tour = solve_knight_tour(5, 0, 0)
    plain = _strip(render_solution(tour))
    for n in range(1, 26):
        assert format_cell(str(n)) in plain


def test_initial_state():
    game = KnightTourGame(5, 1, 2)
    assert game.position == (1, 2)
    assert game.cells[1][2] == 1
    assert not game.is_complete()
    assert "\033[30;47m" + format_cell("1") + "\033[0m" in game.render()


def test_valid_move():
    game = KnightTourGame(5, 0, 0)
    assert game.press("c") is MoveOutcome.MOVED
    assert game.position == (2, 1)
    assert game.cells[2][1] == 2


def test_uppercase_key_moves():
    game = KnightTourGame(5, 0, 0)
    assert game.press("C") is MoveOutcome.MOVED
    assert game.position == (2, 1)


def test_off_board_move():
    game = KnightTourGame(5, 0, 0)
    assert game.press("w") is MoveOutcome.OFF_BOARD
    assert game.position == (0, 0)


def test_invalid_key():
    game = KnightTourGame(5, 0, 0)
    assert game.press("?") is MoveOutcome.INVALID_KEY


@pytest.mark.parametrize("key", ["q", "Q"])
def test_quit(key):
    assert KnightTourGame(5, 0, 0).press(key) is MoveOutcome.QUIT


def test_occupied_square():
    game = KnightTourGame(5, 0, 0)
    game.press("c")
    assert game.press("s") is MoveOutcome.OCCUPIED
    assert game.position == (2, 1)
    assert game.moves_made == 2


def test_small_boards():
    assert KnightTourGame(1, 0, 0).is_complete()
    game = KnightTourGame(2, 0, 0)
    assert game.is_caught()
    assert not game.is_complete()


def test_invalid_construction():
    with pytest.raises(ValueError):
        KnightTourGame(5, -1, 0)
    with pytest.raises(ValueError):
        KnightTourGame(0, 0, 0)


def test_ring_on_three_board_is_lost():
    game = KnightTourGame(3, 0, 0)
    outcomes = [game.press(k) for k in RING_KEYS]
    assert outcomes[:-1] == [MoveOutcome.MOVED] * (len(RING_KEYS) - 1)
    assert outcomes[-1] is MoveOutcome.LOST
    assert game.is_caught()
    assert game.cells[1][1] is None


def test_following_tour_wins():
    tour = solve_knight_tour(5, 0, 0)
    game = KnightTourGame(5, 0, 0)
    outcomes = [game.press(k) for k in _keys_for_tour(tour)]
    assert outcomes[-1] is MoveOutcome.WON
    assert game.cells == tour
    assert game.is_complete()


def test_play_win():
    tour = solve_knight_tour(5, 0, 0)
    keys = iter(_keys_for_tour(tour))
    out = io.StringIO()
    result = play(KnightTourGame(5, 0, 0), lambda: next(keys), out)
    assert result is MoveOutcome.WON
    assert "CONGRATULATIONS YOU HAVE COMPLETED THE GAME!!" in out.getvalue()


def test_play_loss_and_messages():
    keys = iter(["?", "w"] + RING_KEYS)
    out = io.StringIO()
    result = play(KnightTourGame(3, 0, 0), lambda: next(keys), out)
    text = out.getvalue()
    assert result is MoveOutcome.LOST
    assert "INVALID key press!" in text
    assert "Your move leads you to out of board." in text
    assert "Sorry you lost the game...." in text


def test_play_occupied_then_quit():
    keys = iter(["c", "s", "q"])
    out = io.StringIO()
    game = KnightTourGame(5, 0, 0)
    result = play(game, lambda: next(keys), out)
    assert result is MoveOutcome.QUIT
    assert "Knight already placed at that cell.." in out.getvalue()
    assert game.position == (2, 1)


def test_play_end_of_input_quits():
    out = io.StringIO()
    result = play(KnightTourGame(5, 0, 0), lambda: "", out)
    assert result is MoveOutcome.QUIT
    assert out.getvalue().startswith("\033[2J")