"""Knight's tour puzzle: a Warnsdorff-rule solver, a game board and a console front end."""

__version__ = "1.0.0"
__all__ = ["solver", "game", "cli"]