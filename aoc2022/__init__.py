"""Solvers for the 2022 Advent of Code puzzles, days 1 to 12."""

__version__ = "1.0.0"