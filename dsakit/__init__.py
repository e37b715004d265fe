"""Classic array, geometry, matrix, stack and expression exercises in plain Python."""

__version__ = "0.1.0"
__all__ = ["arrays", "expressions", "geometry", "matrix", "puzzles", "stacks"]