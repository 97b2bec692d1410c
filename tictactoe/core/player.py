"""Player marks for tic-tac-toe."""
from enum import IntEnum


class Mark(IntEnum):
    """Contents of a board cell. Non-empty marks double as player ids."""
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2

    @property
    def symbol(self) -> str:
        """Display symbol for this mark."""
        return SYMBOLS[self]

    def __str__(self):
        return str(int(self))


PLAYERS = (Mark.PLAYER_ONE, Mark.PLAYER_TWO)

SYMBOLS = {
    Mark.EMPTY: " ",
    Mark.PLAYER_ONE: "X",
    Mark.PLAYER_TWO: "O",
}


def opponent(player: Mark) -> Mark:
    """Get the other player."""
    if player == Mark.PLAYER_ONE:
        return Mark.PLAYER_TWO
    elif player == Mark.PLAYER_TWO:
        return Mark.PLAYER_ONE
    raise ValueError("EMPTY is not a player")
