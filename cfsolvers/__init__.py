"""Solvers for competitive-programming problems on strings, arrays, graphs, grids, numbers and geometry."""

__version__ = "0.1.0"
__all__ = ["arrays", "cli", "geometry", "graphs", "grids", "numbers", "strings"]