"""Tests for GameController: the per-move state machine."""

import logging

import pytest

from conftest import draw_pattern, place_line
from models.cell import EMPTY, Mark
from models.enums import Owner
from models.move import Move
from models.state import Draw, InProgress, Win
from services.board_logic import GameBoard
from services.game_controller import GameController


def test_initial_state():
    game = GameController()
    assert game.board.dimensions() == (15, 15)
    assert game.current_owner == Owner.A
    assert game.outcome == InProgress()
    assert game.move_count == 0
    assert game.line_length == 5
    assert not game.is_game_over


def test_invalid_line_length():
    with pytest.raises(ValueError):
        GameController(15, 15, line_length=0)


def test_accepted_move_flips_turn_and_counts():
    game = GameController()
    assert game.submit_move(Move(7, 7))
    assert game.board.get(7, 7) == Mark(Owner.A)
    assert game.current_owner == Owner.B
    assert game.move_count == 1

    assert game.submit_move(Move(7, 8))
    assert game.board.get(7, 8) == Mark(Owner.B)
    assert game.current_owner == Owner.A
    assert game.move_count == 2


@pytest.mark.parametrize("move", [Move(-1, 3), Move(15, 15)])
def test_out_of_bounds_move_rejected(move):
    game = GameController()
    assert not game.submit_move(move)
    assert game.current_owner == Owner.A
    assert game.move_count == 0
    assert len(game.board.empty_positions()) == 225


def test_occupied_move_rejected():
    game = GameController()
    game.submit_move(Move(0, 0))
    assert not game.submit_move(Move(0, 0))
    assert game.current_owner == Owner.B
    assert game.move_count == 1
    assert game.board.get(0, 0) == Mark(Owner.A)


def test_horizontal_win_keeps_last_mover_current():
    game = GameController(15, 15)
    b_moves = [Move(0, 0), Move(0, 2), Move(0, 4), Move(0, 6)]

    for i in range(4):
        assert game.submit_move(Move(7, i))
        assert game.current_owner == Owner.B
        assert game.outcome == InProgress()
        assert game.submit_move(b_moves[i])
        assert game.current_owner == Owner.A

    assert game.submit_move(Move(7, 4))
    assert game.outcome == Win(Owner.A)
    assert game.is_game_over
    assert game.current_owner == Owner.A
    assert game.move_count == 9
    assert game.status_message() == "Player 1 (X) wins!"


def test_terminal_game_rejects_moves():
    game = GameController(15, 15)
    for move in [Move(7, 0), Move(0, 0), Move(7, 1), Move(0, 2), Move(7, 2),
                 Move(0, 4), Move(7, 3), Move(0, 6), Move(7, 4)]:
        game.submit_move(move)
    assert game.is_game_over

    snapshot = game.board.copy()
    assert not game.submit_move(Move(10, 10))
    assert game.board == snapshot
    assert game.move_count == 9
    assert game.current_owner == Owner.A
    assert game.outcome == Win(Owner.A)


def test_second_player_can_win():
    game = GameController(15, 15)
    a_moves = [Move(14, 0), Move(14, 2), Move(14, 4), Move(14, 6), Move(14, 8)]
    for i in range(5):
        game.submit_move(a_moves[i])
        game.submit_move(Move(i, 10 - i))  # B's anti-diagonal
    assert game.outcome == Win(Owner.B)
    assert game.current_owner == Owner.B


def test_full_board_draw_only_on_last_move():
    game = GameController(15, 15)
    a_cells, b_cells = draw_pattern()
    assert len(a_cells) == 113 and len(b_cells) == 112

    order = []
    for i, a_cell in enumerate(a_cells):
        order.append(a_cell)
        if i < len(b_cells):
            order.append(b_cells[i])

    for row, col in order[:-1]:
        assert game.submit_move(Move(row, col))
        assert game.outcome == InProgress()

    row, col = order[-1]
    assert game.submit_move(Move(row, col))
    assert game.outcome == Draw()
    assert game.move_count == 225
    assert game.current_owner == Owner.A
    assert game.status_message() == "Game is a draw!"


def test_reset_restores_initial_state():
    game = GameController(9, 11)
    game.submit_move(Move(1, 1))
    game.submit_move(Move(2, 2))
    game.reset()

    fresh = GameController(9, 11)
    assert game.board == fresh.board
    assert game.current_owner == fresh.current_owner
    assert game.outcome == fresh.outcome
    assert game.move_count == fresh.move_count


def test_reset_after_win_accepts_moves_again():
    game = GameController(5, 5, line_length=3)
    for move in [Move(0, 0), Move(4, 4), Move(0, 1), Move(4, 2), Move(0, 2)]:
        game.submit_move(move)
    assert game.outcome == Win(Owner.A)

    game.reset()
    assert game.submit_move(Move(0, 0))


def test_load_snapshot_recomputes_outcome():
    game = GameController()
    board = GameBoard(15, 15)
    place_line(board, Owner.B, (3, 3), (1, 1), 5)

    game.load_snapshot(board, Owner.B, 9)
    assert game.board is board
    assert game.current_owner == Owner.B
    assert game.move_count == 9
    assert game.outcome == Win(Owner.B)
    assert not game.submit_move(Move(0, 0))


def test_load_snapshot_in_progress():
    game = GameController()
    game.submit_move(Move(0, 0))
    board = GameBoard(10, 10)
    board.set(4, 4, Mark(Owner.A))

    game.load_snapshot(board, Owner.B, 1)
    assert game.board.dimensions() == (10, 10)
    assert game.board.get(0, 0) == EMPTY
    assert game.outcome == InProgress()
    assert game.submit_move(Move(5, 5))
    assert game.board.get(5, 5) == Mark(Owner.B)


def test_rejected_snapshot_leaves_game_untouched():
    game = GameController()
    game.submit_move(Move(0, 0))
    original_board = game.board

    with pytest.raises(ValueError):
        game.load_snapshot(GameBoard(5, 5), Owner.A, -1)
    with pytest.raises(ValueError):
        game.load_snapshot(GameBoard(5, 5), "Z", 3)

    assert game.board is original_board
    assert game.current_owner == Owner.B
    assert game.move_count == 1


def test_from_snapshot_builds_game():
    board = GameBoard(6, 6)
    board.set(0, 0, Mark(Owner.A))
    game = GameController.from_snapshot(board, Owner.B, 1, line_length=4)
    assert game.board is board
    assert game.line_length == 4
    assert game.current_owner == Owner.B
    assert game.outcome == InProgress()


def test_from_snapshot_reuses_board_without_new_game_log(caplog):
    board = GameBoard(8, 9)
    caplog.clear()
    with caplog.at_level(logging.INFO):
        game = GameController.from_snapshot(board, Owner.A, 0)

    assert game.board is board
    messages = [record.getMessage() for record in caplog.records]
    assert not any(m.startswith("New game started") for m in messages)
    assert not any(m.startswith("Created new board") for m in messages)
    assert any(m.startswith("Snapshot loaded") for m in messages)


def test_from_snapshot_rejects_non_board():
    with pytest.raises(TypeError):
        GameController.from_snapshot("not a board", Owner.A, 0)


def test_recompute_after_editing():
    game = GameController()
    place_line(game.board, Owner.A, (0, 0), (0, 1), 5)
    assert game.outcome == InProgress()
    assert game.recompute_outcome() == Win(Owner.A)
    assert game.is_game_over
