"""Single game runner for tic-tac-toe."""
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple
from .game_state import GameState, Move
from .player import Mark

if TYPE_CHECKING:
    from ..simulation.strategies import Strategy

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Outcome of a finished game."""
    final_state: GameState
    moves: Tuple[Move, ...]

    @property
    def winner(self) -> Optional[Mark]:
        return self.final_state.winner

    @property
    def is_tied(self) -> bool:
        return self.final_state.is_tied

    @property
    def num_moves(self) -> int:
        return len(self.moves)

    def __str__(self) -> str:
        return "Moves: " + " ".join(str(m) for m in self.moves)


class Game:
    """Plays one game between two strategies."""

    def __init__(
        self,
        strategy_a: "Strategy",
        strategy_b: "Strategy",
        initial_state: Optional[GameState] = None
    ):
        if strategy_a.player == strategy_b.player:
            raise ValueError(f"Both strategies play as player {strategy_a.player}")

        if initial_state is None:
            self.state = GameState()
            if strategy_a.player != self.state.next_player:
                raise ValueError(
                    f"First strategy plays as player {strategy_a.player} "
                    f"but player {self.state.next_player} opens"
                )
        else:
            # The caller's board is never modified.
            self.state = initial_state.copy()
        self.strategies = {
            strategy_a.player: strategy_a,
            strategy_b.player: strategy_b,
        }
        self.log: List[Move] = []

    @property
    def current_strategy(self) -> "Strategy":
        """Strategy whose turn it is."""
        return self.strategies[self.state.next_player]

    def play_turn(self) -> Move:
        """Ask the player to move and apply the chosen move."""
        move = self.current_strategy.choose_move(self.state)
        self.state.apply(move)
        self.log.append(move)
        logger.debug("Played %s -> %r", move, self.state)
        return move

    def play(self) -> GameRecord:
        """Play until the game is won or tied."""
        while self.state.is_playing:
            self.play_turn()
        return GameRecord(final_state=self.state, moves=tuple(self.log))


def play_game(
    strategy_a: "Strategy",
    strategy_b: "Strategy",
    initial_state: Optional[GameState] = None
) -> GameRecord:
    """Play one game to completion.

    ``strategy_a`` opens on an empty board. With ``initial_state`` the board
    decides who moves next; the game is played on a copy of it.
    """
    return Game(strategy_a, strategy_b, initial_state).play()
