# knightstour

The knight's tour puzzle, played in your terminal. The goal is to move a knight
around the board so that it lands on every square exactly once.

## Installing

```
pip install .
```

## Playing

```
knightstour
knightstour --seed 42    # repeatable choice of starting square
```

A heading appears first. Press `r` to read the rules or `p` to start playing.
Next, type the board size as a single key. The valid digits are `5` to `9`. The
size check allows up to 10, but on most keyboards no single key reaches it. The
game solves the board from every square. It then picks a random starting square
from among those where the solver finds a complete tour.

On a POSIX terminal, the game reads each key as it is pressed, without echo. On
other systems, and when input does not come from a terminal, the game reads keys
from standard input and ignores line breaks.

Each move is an "L" shape. These keys make the moves:

| Key | Move                         |
|-----|------------------------------|
| W   | 2 up, then 1 right           |
| E   | 2 right, then 1 up           |
| D   | 2 right, then 1 down         |
| C   | 2 down, then 1 right         |
| X   | 2 down, then 1 left          |
| Z   | 2 left, then 1 down          |
| A   | 2 left, then 1 up            |
| S   | 2 up, then 1 left            |

Press `q` to quit. Each square shows the number of the move that reached it. The
square the knight stands on is shown in reverse colours.

The game rejects a move that would:

- leave the board,
- land on a square the knight has already visited.

It also rejects any key that is not a move. Each rejection shows a message, and
the game then waits for the next key.

You win when every square is filled. You lose when the knight has no free square
left to jump to.

When the game ends, the game offers the solver's tour from your starting square.
Press `s` to show it. Any other key exits.

The command exits with status 0. It exits with status 1 if input ends while it
is still waiting for a choice.

## Using it as a library

```python
from knightstour.solver import solve_knight_tour, precompute_all_tours
from knightstour.game import KnightTourGame, MoveOutcome, render_solution

board = solve_knight_tour(6, 0, 0)   # None if the heuristic gets trapped
if board is not None:
    print(render_solution(board))

tours = precompute_all_tours(5)      # {(row, col): board} for every solvable start

game = KnightTourGame(5, 0, 0)
outcome = game.press("c")            # 2 down, 1 right -> MoveOutcome.MOVED
print(outcome, game.position, game.is_complete(), game.is_caught())
print(game.render())
```

The `knightstour.game.play(game, read_key, out)` function runs the interactive
loop. It takes a callable that returns one key per call, and a text stream to
write to. It returns the final `MoveOutcome`, which is one of `WON`, `LOST` or
`QUIT`.

The solver follows Warnsdorff's rule. At each step it moves to the free square
with the fewest onward moves. When two squares tie, it picks the one farther
from the centre of the board. The solver does not backtrack, so it fails from
some starting squares.

## Running the tests

```
pip install ".[test]"
pytest
```