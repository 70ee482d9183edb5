"""Shared fixtures for the quantum tic-tac-toe engine tests."""

from typing import List

import pytest

from quantum_ttt import Move, QuantumBoard


@pytest.fixture
def board() -> QuantumBoard:
    return QuantumBoard()


@pytest.fixture
def triangle_moves() -> List[Move]:
    """X1 0-1, O1 1-2 and the closing X2 0-2."""

    return [Move(1, "X", 0, 1), Move(1, "O", 1, 2), Move(2, "X", 0, 2)]


@pytest.fixture
def triangle_board(board: QuantumBoard, triangle_moves: List[Move]) -> QuantumBoard:
    """Board holding the first two triangle moves, ready for the closing one."""

    for move in triangle_moves[:2]:
        assert board.try_place(move)
    return board
