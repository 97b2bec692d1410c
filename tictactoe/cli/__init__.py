"""Command-line interface for tic-tac-toe."""
