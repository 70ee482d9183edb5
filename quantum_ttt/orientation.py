"""Orientation of a detected cycle into one winning cell per move."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .move import Move


def orient_cycle(cycle: Sequence[Move], winner_cell: int) -> Dict[Move, int]:
    """Map every move of ``cycle`` to the cell it collapses onto.

    ``cycle`` is the output of ``QuantumBoard.detect_cycle``: the existing path
    followed by the triggering move, whose winning endpoint is ``winner_cell``.
    The remaining winners follow the same direction around the loop, so each
    cell in the loop is won by exactly one move.
    """

    if len(cycle) < 2:
        raise ValueError(f"A cycle needs at least two moves, got {len(cycle)}")
    newest = cycle[-1]
    if winner_cell not in newest.endpoints:
        raise ValueError(
            f"Cell {winner_cell} is not an endpoint of move {newest.label} {newest.endpoints}"
        )

    if len(cycle) == 2:
        older = cycle[0]
        return {newest: winner_cell, older: older.other(winner_cell)}

    cells = _loop_cells(cycle)
    if cells[-1] != winner_cell:
        cells.reverse()

    winners: Dict[Move, int] = {}
    for u, v in zip(cells, cells[1:]):
        move = _move_between(cycle, u, v, winners)
        winners[move] = v
    return winners


def _loop_cells(cycle: Sequence[Move]) -> List[int]:
    newest = cycle[-1]
    path = cycle[:-1]

    # The path normally runs cell_a -> cell_b; accept it listed the other way too.
    for start, end in ((newest.cell_a, newest.cell_b), (newest.cell_b, newest.cell_a)):
        cells = _walk(path, start)
        if cells is not None and cells[-1] == end:
            cells.append(start)
            return cells
    raise ValueError("Cycle path does not join the endpoints of its last move")


def _walk(path: Sequence[Move], start: int) -> Optional[List[int]]:
    cells = [start]
    for move in path:
        if cells[-1] not in move.endpoints:
            return None
        cells.append(move.other(cells[-1]))
    return cells


def _move_between(cycle: Sequence[Move], u: int, v: int, taken: Dict[Move, int]) -> Move:
    for move in cycle:
        if move not in taken and move.connects(u, v):
            return move
    raise ValueError(f"No unassigned cycle move links cells {u} and {v}")
