"""Two-stack integer sorting with a restricted instruction set, and a checker for instruction sequences."""

__version__ = "1.0.0"
__all__ = ["parsing", "stacks", "solver", "cli", "checker"]