import pytest

from quantum_ttt import EndpointChooser, Move, QuantumBoard, place_move, resolve_cycle


def test_place_without_cycle(board):
    outcome = place_move(board, Move(1, "X", 0, 1), EndpointChooser())
    assert outcome.placed
    assert outcome.cycle is None
    assert not outcome.collapsed
    assert not outcome.pending_collapse


def test_rejected_placement_leaves_board():
    board = QuantumBoard.from_symbols(["X", None, None, None, None, None, None, None, None])
    outcome = place_move(board, Move(1, "O", 0, 1), EndpointChooser())
    assert not outcome.placed
    assert board.cell_moves(1) == ()


def test_cycle_resolved_with_chooser(board, triangle_moves):
    x1, o1, x2 = triangle_moves
    place_move(board, x1)
    place_move(board, o1)

    outcome = place_move(board, x2, EndpointChooser(prefer="b"))

    assert outcome.cycle == [x1, o1, x2]
    assert outcome.winners == {x2: 2, o1: 1, x1: 0}
    assert outcome.collapsed
    assert board.symbols()[:3] == ["X", "O", "X"]


def test_cycle_left_pending_without_chooser(board, triangle_moves):
    x1, o1, x2 = triangle_moves
    place_move(board, x1)
    place_move(board, o1)

    outcome = place_move(board, x2)

    assert outcome.pending_collapse
    assert board.cell_moves(0) == (x1, x2)

    winners = resolve_cycle(board, outcome.cycle, 0)
    assert winners == {x1: 1, o1: 2, x2: 0}
    assert board.symbols()[:3] == ["X", "X", "O"]


def test_resolve_cycle_with_bad_winner_does_not_mutate(board, triangle_moves):
    x1, o1, x2 = triangle_moves
    place_move(board, x1)
    place_move(board, o1)
    outcome = place_move(board, x2)

    with pytest.raises(ValueError):
        resolve_cycle(board, outcome.cycle, 1)
    assert board.symbols() == [None] * 9
    assert board.cell_moves(2) == (o1, x2)


def test_diagonal_win_after_collapse(board):
    chooser = EndpointChooser()
    for move in (
        Move(1, "X", 0, 4),
        Move(1, "O", 1, 2),
        Move(2, "X", 4, 8),
        Move(2, "O", 1, 2),
    ):
        place_move(board, move, chooser)
    assert board.symbols()[1:3] == ["O", "O"]

    place_move(board, Move(3, "X", 0, 8), chooser)

    assert board.get_winners() == {"X"}
    assert not board.is_full()


def test_chooser_returning_foreign_cell_leaves_board_untouched(board, triangle_moves):
    x1, o1, x2 = triangle_moves
    place_move(board, x1)
    place_move(board, o1)

    with pytest.raises(ValueError):
        place_move(board, x2, lambda cycle: 5)

    assert board.cell_moves(0) == (x1,)
    assert board.cell_moves(2) == (o1,)
    assert board.symbols() == [None] * 9
