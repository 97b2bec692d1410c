"""
Tests for the board model: status detection, legal moves and move validation.
"""
import numpy as np
import pytest
from tictactoe.core.game_state import GameState, GameStatus, InvalidMoveError, Move, WINNING_LINES
from tictactoe.core.notation import label_for_position, position_from_label
from tictactoe.core.player import Mark, opponent


class TestGameStatus:
    """Status is derived from the board."""

    def test_empty_board_is_playing(self):
        state = GameState([0, 0, 0, 0, 0, 0, 0, 0, 0])
        assert state.status == GameStatus.PLAYING
        assert state.is_playing
        assert state.winner is None

    def test_top_row_wins_for_player_one(self):
        state = GameState([1, 1, 1, 0, 0, 0, 0, 0, 0])
        assert state.is_won
        assert state.winner == Mark.PLAYER_ONE

    def test_full_board_without_line_is_tied(self):
        state = GameState([1, 2, 1, 2, 1, 2, 2, 1, 2])
        assert state.is_tied
        assert not state.is_playing
        assert state.winner is None

    @pytest.mark.parametrize("line", WINNING_LINES)
    @pytest.mark.parametrize("player", [Mark.PLAYER_ONE, Mark.PLAYER_TWO])
    def test_every_line_wins(self, line, player):
        board = [0] * 9
        for position in line:
            board[position] = player
        state = GameState(board)
        assert state.status == GameStatus.WON
        assert state.winner == player

    def test_player_one_checked_first(self):
        # Not reachable in play, but the order must be fixed.
        state = GameState([1, 1, 1, 2, 2, 2, 0, 0, 0])
        assert state.winner == Mark.PLAYER_ONE

    def test_win_on_last_cell_is_not_a_tie(self):
        state = GameState([1, 2, 1, 2, 1, 2, 2, 1, 1])
        assert state.is_won
        assert state.winner == Mark.PLAYER_ONE


class TestConstruction:

    def test_next_player_from_mark_counts(self):
        assert GameState().next_player == Mark.PLAYER_ONE
        assert GameState([1, 0, 0, 0, 0, 0, 0, 0, 0]).next_player == Mark.PLAYER_TWO
        assert GameState([1, 2, 0, 0, 0, 0, 0, 0, 0]).next_player == Mark.PLAYER_ONE

    def test_rejects_wrong_size(self):
        with pytest.raises(InvalidMoveError):
            GameState([0] * 8)

    def test_rejects_unknown_mark(self):
        with pytest.raises(InvalidMoveError):
            GameState([3, 0, 0, 0, 0, 0, 0, 0, 0])

    def test_input_board_is_copied(self):
        board = [0] * 9
        state = GameState(board)
        state.apply(Move(4, Mark.PLAYER_ONE))
        assert board == [0] * 9


class TestMoves:

    def test_legal_moves_cover_empty_cells_in_order(self):
        state = GameState([1, 0, 2, 0, 0, 0, 0, 0, 1])
        moves = state.legal_moves(Mark.PLAYER_TWO)
        assert [m.position for m in moves] == [1, 3, 4, 5, 6, 7]
        assert all(m.player == Mark.PLAYER_TWO for m in moves)

    def test_no_legal_moves_on_full_board(self):
        state = GameState([1, 2, 1, 2, 1, 2, 2, 1, 2])
        assert state.legal_moves(Mark.PLAYER_ONE) == []

    def test_apply_toggles_next_player(self):
        state = GameState()
        state.apply(Move(0, Mark.PLAYER_ONE))
        assert state.next_player == Mark.PLAYER_TWO
        assert state.cell(0) == Mark.PLAYER_ONE
        state.apply(Move(4, Mark.PLAYER_TWO))
        assert state.next_player == Mark.PLAYER_ONE

    def test_apply_detects_win(self):
        state = GameState([1, 1, 0, 2, 2, 0, 0, 0, 0])
        state.apply(Move(2, Mark.PLAYER_ONE))
        assert state.winner == Mark.PLAYER_ONE

    def test_occupied_cell_is_rejected(self):
        state = GameState()
        state.apply(Move(4, Mark.PLAYER_ONE))
        with pytest.raises(InvalidMoveError):
            state.apply(Move(4, Mark.PLAYER_TWO))
        assert state.cell(4) == Mark.PLAYER_ONE

    @pytest.mark.parametrize("position", [-1, 9, 42])
    def test_out_of_range_is_rejected(self, position):
        with pytest.raises(InvalidMoveError):
            GameState().apply(Move(position, Mark.PLAYER_ONE))

    def test_empty_mark_is_rejected(self):
        with pytest.raises(InvalidMoveError):
            GameState().apply(Move(0, Mark.EMPTY))

    def test_move_after_game_end_is_rejected(self):
        state = GameState([1, 1, 1, 2, 2, 0, 0, 0, 0])
        with pytest.raises(InvalidMoveError):
            state.apply(Move(5, Mark.PLAYER_TWO))

    def test_invalid_move_error_is_value_error(self):
        assert issubclass(InvalidMoveError, ValueError)

    def test_copy_is_independent(self):
        state = GameState([1, 0, 0, 0, 2, 0, 0, 0, 0])
        clone = state.copy()
        clone.apply(Move(8, Mark.PLAYER_ONE))
        assert state.cell(8) == Mark.EMPTY
        assert state.next_player == Mark.PLAYER_ONE
        assert clone.next_player == Mark.PLAYER_TWO
        assert clone != state

    def test_move_string(self):
        assert str(Move(4, Mark.PLAYER_TWO)) == "2@4"


class TestReachableBoards:
    """Properties that hold over many random games."""

    def test_legal_plus_occupied_is_nine(self):
        rng = np.random.default_rng(7)
        for _ in range(50):
            state = GameState()
            while True:
                moves = state.legal_moves(state.next_player)
                assert len(moves) + state.occupied_count == 9
                if not state.is_playing:
                    break
                state.apply(moves[int(rng.integers(0, len(moves)))])

    def test_nine_alternating_moves_end_the_game(self):
        rng = np.random.default_rng(11)
        for _ in range(50):
            state = GameState()
            player = Mark.PLAYER_ONE
            for position in rng.permutation(9):
                if not state.is_playing:
                    break
                state.apply(Move(int(position), player))
                player = opponent(player)
            assert not state.is_playing
            assert state.is_won or state.is_tied

    def test_mark_counts_alternate(self):
        rng = np.random.default_rng(3)
        state = GameState()
        while state.is_playing:
            moves = state.legal_moves(state.next_player)
            state.apply(moves[int(rng.integers(0, len(moves)))])
            ones = state.board.count(Mark.PLAYER_ONE)
            twos = state.board.count(Mark.PLAYER_TWO)
            assert 0 <= ones - twos <= 1


class TestNotation:

    def test_labels_round_trip_corners(self):
        assert position_from_label("a1") == 0
        assert position_from_label("b2") == 4
        assert position_from_label(" C3 ") == 8
        assert label_for_position(2) == "a3"
        assert label_for_position(6) == "c1"

    @pytest.mark.parametrize("label", ["", "q", "d1", "a4", "a11", "1a"])
    def test_bad_labels(self, label):
        with pytest.raises(InvalidMoveError):
            position_from_label(label)

    def test_opponent(self):
        assert opponent(Mark.PLAYER_ONE) == Mark.PLAYER_TWO
        assert opponent(Mark.PLAYER_TWO) == Mark.PLAYER_ONE
        with pytest.raises(ValueError):
            opponent(Mark.EMPTY)
