"""
One-ply lookahead strategy implementation.
"""
from typing import Optional
import numpy as np
from ...core.game_state import GameState, Move
from ...core.player import opponent
from .base import Strategy, StrategyConfig
from .random_move import RandomStrategy


class GreedyOneStepStrategy(Strategy):
    """
    Take an immediate win if there is one, otherwise block the opponent's
    immediate win, otherwise play randomly.

    Wins and blocks are searched in legal-move order, so the choice is
    deterministic whenever either exists.
    """

    def setup(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        config = RandomStrategy.get_default_config()
        config.parameters.update(seed=seed, rng=rng)
        self.fallback = RandomStrategy(self.player, config)

    def find_winning_move(self, state: GameState) -> Optional[Move]:
        """First move that wins on the spot."""
        for move in state.legal_moves(self.player):
            trial = state.copy()
            trial.apply(move)
            if trial.winner == self.player:
                return move
        return None

    def find_blocking_move(self, state: GameState) -> Optional[Move]:
        """First cell the opponent could take to win next turn."""
        other = opponent(self.player)
        for move in state.legal_moves(self.player):
            trial = state.copy()
            trial.apply(Move(move.position, other))
            if trial.winner == other:
                return move
        return None

    def choose_move(self, state: GameState) -> Move:
        move = self.find_winning_move(state)
        if move is None:
            move = self.find_blocking_move(state)
        if move is None:
            move = self.fallback.choose_move(state)
        return move

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="one_step_ahead",
            description="Win if possible, else block, else play randomly",
            parameters={"seed": None}
        )
