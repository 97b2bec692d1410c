#!/usr/bin/env python3
"""
Tic-Tac-Toe - strategy simulator and scoring harness
"""

from tictactoe.cli.__main__ import main


if __name__ == '__main__':
    main()
