"""
Tests for the NoGo game engine.
"""

import unittest

import numpy as np
import pytest

from engine.board import Board, Player
from engine.game import NoGoGame
from engine.move_generator import LegalMoveGenerator, Move, parse_move
from tests.utils_game_states import board_from_rows, full_board, single_move_board


class TestBoard(unittest.TestCase):
    """Test the Board class."""

    def test_board_initialization(self):
        board = Board()
        self.assertEqual(board.grid.shape, (9, 9))
        self.assertTrue(np.all(board.grid == 0))
        self.assertIsNone(board.last_player)
        self.assertEqual(board.move_count, 0)

    def test_neighbors(self):
        board = Board()
        self.assertEqual(sorted(board.get_neighbors(0)), [1, 9])
        self.assertEqual(len(board.get_neighbors(40)), 4)
        self.assertEqual(sorted(board.get_neighbors(80)), [71, 79])

    def test_place_on_empty_point(self):
        board = Board()
        self.assertTrue(board.place(40, Player.BLACK))
        self.assertEqual(board.get_player_at(40), Player.BLACK)
        self.assertEqual(board.last_player, Player.BLACK)
        self.assertEqual(board.move_count, 1)

    def test_occupied_point_is_illegal(self):
        board = Board()
        board.place(40, Player.BLACK)
        self.assertFalse(board.place(40, Player.WHITE))
        self.assertEqual(board.move_count, 1)

    def test_out_of_range_is_illegal(self):
        board = Board()
        self.assertFalse(board.place(-1, Player.BLACK))
        self.assertFalse(board.place(81, Player.BLACK))

    def test_suicide_is_illegal(self):
        board = Board()
        board.place(1, Player.WHITE)
        board.place(9, Player.WHITE)
        self.assertFalse(board.can_place(0, Player.BLACK))
        # The failed check must leave the point empty
        self.assertTrue(board.is_empty(0))

    def test_capture_is_illegal(self):
        board = Board()
        board.place(0, Player.WHITE)
        board.place(1, Player.BLACK)
        self.assertFalse(board.place(9, Player.BLACK))
        self.assertTrue(board.place(9, Player.WHITE))

    def test_copy_is_independent(self):
        board = Board()
        copy = board.copy()
        copy.place(0, Player.BLACK)
        self.assertTrue(board.is_empty(0))
        self.assertNotEqual(board, copy)

    def test_equality_compares_stones(self):
        a = Board()
        b = Board()
        a.place(10, Player.BLACK)
        b.place(10, Player.BLACK)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_str(self):
        board = Board()
        board.place(0, Player.BLACK)
        board.place(80, Player.WHITE)
        lines = str(board).split("\n")
        self.assertEqual(lines[0], "X........")
        self.assertEqual(lines[8], "........O")


class TestMoveGenerator(unittest.TestCase):
    """Test legal move generation."""

    def setUp(self):
        self.generator = LegalMoveGenerator()

    def test_empty_board_all_points_legal(self):
        moves = self.generator.get_legal_moves(Board(), Player.BLACK)
        self.assertEqual(len(moves), 81)
        self.assertEqual([m.index for m in moves], list(range(81)))

    def test_full_board_has_no_moves(self):
        board = full_board()
        for player in Player:
            self.assertEqual(self.generator.get_legal_moves(board, player), [])
            self.assertFalse(self.generator.has_legal_moves(board, player))

    def test_single_move_board(self):
        board = single_move_board()
        self.assertEqual(self.generator.get_legal_moves(board, Player.BLACK), [Move(0, Player.BLACK)])
        self.assertEqual(self.generator.get_legal_moves(board, Player.WHITE), [Move(1, Player.WHITE)])

    def test_apply_returns_copy(self):
        board = Board()
        after, legal = self.generator.apply(board, Move(4, Player.BLACK))
        self.assertTrue(legal)
        self.assertTrue(board.is_empty(4))
        self.assertEqual(after.get_player_at(4), Player.BLACK)

    def test_apply_illegal_leaves_board(self):
        board = full_board()
        after, legal = self.generator.apply(board, Move(0, Player.BLACK))
        self.assertFalse(legal)
        self.assertEqual(after, board)

    def test_is_move_legal_checks_owner(self):
        board = Board()
        self.assertFalse(self.generator.is_move_legal(board, Player.BLACK, Move(0, Player.WHITE)))
        self.assertTrue(self.generator.is_move_legal(board, Player.WHITE, Move(0, Player.WHITE)))

    def test_all_placements_is_a_fresh_list(self):
        first = self.generator.all_placements(Player.BLACK)
        first.reverse()
        second = self.generator.all_placements(Player.BLACK)
        self.assertEqual(second[0].index, 0)


@pytest.mark.parametrize("text,index", [("A9", 0), ("J1", 80), ("c4", 47), ("E5", 40)])
def test_parse_move(text, index):
    move = parse_move(text, Player.BLACK)
    assert move.index == index
    assert move.to_coordinate() == text.upper()


@pytest.mark.parametrize("text", ["", "Z1", "A0", "A10", "I5", "Ax"])
def test_parse_move_rejects_bad_coordinates(text):
    with pytest.raises(ValueError):
        parse_move(text, Player.BLACK)


class TestGame(unittest.TestCase):
    """Test turn order and game end."""

    def test_black_moves_first_and_turns_alternate(self):
        game = NoGoGame()
        self.assertEqual(game.get_current_player(), Player.BLACK)
        self.assertTrue(game.make_move(Move(0, Player.BLACK)))
        self.assertEqual(game.get_current_player(), Player.WHITE)
        self.assertEqual(len(game.game_history), 1)
        self.assertEqual(game.game_history[0]['action'], "A9")

    def test_wrong_player_move_rejected(self):
        game = NoGoGame()
        self.assertFalse(game.make_move(Move(0, Player.WHITE)))
        self.assertEqual(game.get_current_player(), Player.BLACK)

    def test_game_over_and_winner(self):
        game = NoGoGame(single_move_board())
        self.assertFalse(game.is_game_over())
        self.assertIsNone(game.get_winner())
        self.assertTrue(game.make_move(Move(0, Player.BLACK)))
        self.assertTrue(game.is_game_over())
        self.assertEqual(game.get_winner(), Player.BLACK)

    def test_game_copies_initial_board(self):
        board = Board()
        game = NoGoGame(board)
        game.make_move(Move(0, Player.BLACK))
        self.assertTrue(board.is_empty(0))

    def test_board_from_rows(self):
        board = board_from_rows(["X........"] + ["........."] * 7 + ["........O"])
        self.assertEqual(board.get_player_at(0), Player.BLACK)
        self.assertEqual(board.get_player_at(80), Player.WHITE)


if __name__ == "__main__":
    unittest.main()
