"""Tic-tac-toe strategy simulator."""

__version__ = "0.1.0"
