"""
Interactive strategy that asks a person for each move.
"""
from typing import Callable, Optional
from ...core.game_state import GameState, InvalidMoveError, Move
from ...core.notation import position_from_label
from .base import Strategy, StrategyConfig


class HumanStrategy(Strategy):
    """Read cell labels such as ``b2`` from a prompt callback."""

    def setup(
        self,
        prompt: Optional[Callable[[GameState], str]] = None,
        on_invalid: Optional[Callable[[str], None]] = None
    ):
        if prompt is None:
            raise ValueError("HumanStrategy needs a prompt callback")
        self.prompt = prompt
        self.on_invalid = on_invalid

    def choose_move(self, state: GameState) -> Move:
        if not state.is_playing:
            raise InvalidMoveError("No legal moves left - game is over")

        legal = {m.position: m for m in state.legal_moves(self.player)}
        while True:
            answer = self.prompt(state)
            try:
                position = position_from_label(answer)
                if position not in legal:
                    raise InvalidMoveError(f"Cell [{answer.strip()}] is already taken")
            except InvalidMoveError as e:
                if self.on_invalid is None:
                    raise
                self.on_invalid(str(e))
                continue
            return legal[position]

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="human",
            description="Ask a person for each move",
            parameters={"prompt": None, "on_invalid": None}
        )
