import pytest

from quantum_ttt import Cell, Move


def test_new_cell_is_empty_superposition():
    cell = Cell()
    assert not cell.is_collapsed
    assert cell.can_accept_superposition()
    assert cell.display == ""
    assert cell.moves == ()


def test_display_joins_labels_in_insertion_order():
    cell = Cell()
    cell.add_superposition(Move(1, "X", 0, 1))
    cell.add_superposition(Move(1, "O", 0, 2))
    assert cell.display == "X1,O1"
    assert str(cell) == "X1,O1"


def test_remove_superposition_is_idempotent():
    cell = Cell()
    move = Move(1, "X", 0, 1)
    twin = Move(1, "X", 0, 1)
    cell.add_superposition(move)
    cell.add_superposition(twin)

    cell.remove_superposition(move)
    cell.remove_superposition(move)

    assert cell.moves == (twin,)


def test_collapse_discards_pending_moves():
    cell = Cell()
    cell.add_superposition(Move(1, "X", 0, 1))
    cell.collapse("O")

    assert cell.is_collapsed
    assert cell.symbol == "O"
    assert cell.moves == ()
    assert cell.display == "O"
    assert not cell.can_accept_superposition()


def test_add_to_collapsed_cell_raises():
    cell = Cell()
    cell.collapse("X")
    with pytest.raises(RuntimeError):
        cell.add_superposition(Move(1, "O", 0, 1))
