"""Game state classes for tic-tac-toe."""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple
from .player import Mark, PLAYERS

BOARD_CELLS = 9

# Rows, then columns, then diagonals.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class InvalidMoveError(ValueError):
    """Raised when a move cannot be made on the current board."""


class GameStatus(Enum):
    PLAYING = "playing"
    TIED = "tied"
    WON = "won"


@dataclass(frozen=True)
class Move:
    """A single ply: a player's mark placed at a board position."""
    position: int
    player: Mark

    def __str__(self) -> str:
        return f"{int(self.player)}@{self.position}"


class GameState:
    """Board plus derived status and the player to move next.

    Status is recomputed from the board after every applied move.
    ``next_player`` is derived from mark counts only at construction and
    toggled incrementally afterwards.
    """

    def __init__(self, board: Optional[Sequence[int]] = None):
        if board is None:
            self._board: List[Mark] = [Mark.EMPTY] * BOARD_CELLS
        else:
            if len(board) != BOARD_CELLS:
                raise InvalidMoveError(f"Board must have {BOARD_CELLS} cells, got {len(board)}")
            try:
                self._board = [Mark(cell) for cell in board]
            except ValueError as e:
                raise InvalidMoveError(f"Invalid board cell: {e}") from e

        self.status = GameStatus.PLAYING
        self.winner: Optional[Mark] = None
        self._update_status()

        ones = self._board.count(Mark.PLAYER_ONE)
        twos = self._board.count(Mark.PLAYER_TWO)
        self.next_player = Mark.PLAYER_ONE if ones <= twos else Mark.PLAYER_TWO

    @property
    def board(self) -> Tuple[Mark, ...]:
        """Snapshot of the board cells."""
        return tuple(self._board)

    @property
    def is_won(self) -> bool:
        return self.status == GameStatus.WON

    @property
    def is_tied(self) -> bool:
        return self.status == GameStatus.TIED

    @property
    def is_playing(self) -> bool:
        return self.status == GameStatus.PLAYING

    @property
    def occupied_count(self) -> int:
        """Number of non-empty cells."""
        return sum(1 for cell in self._board if cell != Mark.EMPTY)

    def cell(self, position: int) -> Mark:
        return self._board[position]

    def legal_moves(self, player: Mark) -> List[Move]:
        """One move per empty cell, in position order."""
        return [
            Move(position, player)
            for position, cell in enumerate(self._board)
            if cell == Mark.EMPTY
        ]

    def apply(self, move: Move):
        """Place a mark on the board and update status and turn."""
        if not self.is_playing:
            raise InvalidMoveError(f"Cannot play {move} - game is over")
        if not 0 <= move.position < BOARD_CELLS:
            raise InvalidMoveError(f"Position {move.position} is off the board")
        if move.player == Mark.EMPTY:
            raise InvalidMoveError("Move must be made by a player")
        if self._board[move.position] != Mark.EMPTY:
            raise InvalidMoveError(f"Position {move.position} is already taken")

        self._board[move.position] = Mark(move.player)
        self._update_status()
        self.next_player = (
            Mark.PLAYER_TWO if self.next_player == Mark.PLAYER_ONE else Mark.PLAYER_ONE
        )

    def copy(self) -> "GameState":
        """Independent copy for simulating hypothetical moves."""
        clone = GameState.__new__(GameState)
        clone._board = list(self._board)
        clone.status = self.status
        clone.winner = self.winner
        clone.next_player = self.next_player
        return clone

    def _update_status(self):
        for player in PLAYERS:
            for a, b, c in WINNING_LINES:
                if self._board[a] == player and self._board[b] == player and self._board[c] == player:
                    self.status = GameStatus.WON
                    self.winner = player
                    return

        self.winner = None
        if Mark.EMPTY not in self._board:
            self.status = GameStatus.TIED
        else:
            self.status = GameStatus.PLAYING

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self._board == other._board and self.next_player == other.next_player

    def __repr__(self) -> str:
        cells = "".join(str(int(cell)) for cell in self._board)
        return f"GameState({cells}, {self.status.value}, next={int(self.next_player)})"
