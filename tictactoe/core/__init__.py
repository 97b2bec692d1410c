"""Core game model for tic-tac-toe."""
from .game import Game, GameRecord, play_game
from .game_state import GameState, GameStatus, InvalidMoveError, Move
from .player import Mark, opponent

__all__ = [
    "Game",
    "GameRecord",
    "play_game",
    "GameState",
    "GameStatus",
    "InvalidMoveError",
    "Move",
    "Mark",
    "opponent",
]
