"""Quantum tic-tac-toe board: placement, cycle detection and collapse."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .cell import Cell
from .move import BOARD_CELLS, Move

logger = logging.getLogger(__name__)

WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


class QuantumBoard:
    """Nine cells linked by superposed moves.

    Moves are not stored by the board itself; each pending move is referenced
    by both of its endpoint cells until one of them collapses.
    """

    def __init__(self) -> None:
        self._cells: List[Cell] = [Cell() for _ in range(BOARD_CELLS)]

    @classmethod
    def from_symbols(cls, symbols: Sequence[Optional[str]]) -> "QuantumBoard":
        """Build a board whose non-``None`` entries are already collapsed."""

        if len(symbols) != BOARD_CELLS:
            raise ValueError(f"Expected {BOARD_CELLS} cells, got {len(symbols)}")
        board = cls()
        for cell, symbol in zip(board._cells, symbols):
            if symbol is not None:
                cell.collapse(symbol)
        return board

    # ---------- Placement ----------

    def try_place(self, move: Move) -> bool:
        """Register ``move`` on both endpoints; False leaves the board untouched."""

        cell_a = self._cell(move.cell_a)
        cell_b = self._cell(move.cell_b)
        if move.cell_a == move.cell_b:
            logger.debug("Rejected %r: endpoints are the same cell", move)
            return False
        if not (cell_a.can_accept_superposition() and cell_b.can_accept_superposition()):
            logger.debug("Rejected %r: endpoint already collapsed", move)
            return False

        cell_a.add_superposition(move)
        cell_b.add_superposition(move)
        return True

    # ---------- Cycle detection ----------

    def detect_cycle(self, move: Move) -> Optional[List[Move]]:
        """Return the cycle ``move`` would close, or None.

        Must run before ``move`` is placed. The result is the existing path
        from ``cell_a`` to ``cell_b`` in traversal order, followed by ``move``.
        """

        self._cell(move.cell_a)
        self._cell(move.cell_b)
        if move.cell_a == move.cell_b:
            return None

        path: List[Move] = []
        visited = [False] * BOARD_CELLS
        if not self._find_path(move.cell_a, move.cell_b, visited, path, exclude=move):
            return None

        cycle = path + [move]
        logger.debug("Move %r closes cycle %s", move, [m.label for m in cycle])
        return cycle

    def _find_path(
        self,
        current: int,
        target: int,
        visited: List[bool],
        path: List[Move],
        exclude: Move,
    ) -> bool:
        if current == target:
            return True
        visited[current] = True

        for neighbor, move in self._neighbors(current):
            if move is exclude or visited[neighbor]:
                continue
            path.append(move)
            if self._find_path(neighbor, target, visited, path, exclude):
                return True
            path.pop()
        return False

    def _neighbors(self, index: int) -> Iterable[Tuple[int, Move]]:
        for move in self._cells[index].moves:
            yield move.other(index), move

    # ---------- Collapse ----------

    def collapse_cycle(self, cycle: Sequence[Move], winner_by_move: Dict[Move, int]) -> None:
        """Collapse every cycle move onto its mapped winning cell.

        The losing endpoint drops the move. Afterwards any move still pending
        on a superposed cell whose partner cell is now classical is stripped
        from that cell as well.
        """

        for move in cycle:
            if move not in winner_by_move:
                raise ValueError(f"Winner mapping missing for move {move.label}")
            winner = winner_by_move[move]
            if winner not in move.endpoints:
                raise ValueError(
                    f"Cell {winner} is not an endpoint of move {move.label} {move.endpoints}"
                )

        for move in cycle:
            winner = winner_by_move[move]
            loser = move.other(winner)
            winning_cell = self._cells[winner]
            if winning_cell.is_collapsed:
                logger.warning(
                    "Cell %d already collapsed to '%s'; keeping it over %s",
                    winner,
                    winning_cell.symbol,
                    move.label,
                )
            else:
                winning_cell.collapse(move.player)
            self._cells[loser].remove_superposition(move)

        self._sweep_collapsed()
        logger.debug("Collapsed cycle; board is now %s", self.symbols())

    def _sweep_collapsed(self) -> None:
        for index, cell in enumerate(self._cells):
            if cell.is_collapsed:
                continue
            for move in cell.moves:
                if self._cells[move.other(index)].is_collapsed:
                    cell.remove_superposition(move)

    # ---------- Queries ----------

    def get_winners(self) -> Set[str]:
        winners: Set[str] = set()
        for a, b, c in WIN_LINES:
            symbol = self._cells[a].symbol
            if symbol is None:
                continue
            if self._cells[b].symbol == symbol and self._cells[c].symbol == symbol:
                winners.add(symbol)
        return winners

    def is_full(self) -> bool:
        return all(cell.is_collapsed for cell in self._cells)

    def clone(self) -> "QuantumBoard":
        """Structural copy; pending moves are shared since they are immutable."""

        copy = QuantumBoard()
        for source, target in zip(self._cells, copy._cells):
            if source.is_collapsed:
                target.collapse(source.symbol)
            else:
                for move in source.moves:
                    target.add_superposition(move)
        return copy

    def cell_display(self, index: int) -> str:
        return self._cell(index).display

    def is_cell_collapsed(self, index: int) -> bool:
        return self._cell(index).is_collapsed

    def cell_symbol(self, index: int) -> Optional[str]:
        return self._cell(index).symbol

    def cell_moves(self, index: int) -> Tuple[Move, ...]:
        return self._cell(index).moves

    def pending_moves(self) -> List[Move]:
        seen: List[Move] = []
        for cell in self._cells:
            for move in cell.moves:
                if move not in seen:
                    seen.append(move)
        return seen

    def symbols(self) -> List[Optional[str]]:
        return [cell.symbol for cell in self._cells]

    def _cell(self, index: int) -> Cell:
        if not 0 <= index < BOARD_CELLS:
            raise IndexError(f"Cell index out of range: {index}")
        return self._cells[index]

    def __str__(self) -> str:
        rows = []
        for start in range(0, BOARD_CELLS, 3):
            rows.append("".join(f"[{cell.display}]" for cell in self._cells[start : start + 3]))
        return "\n".join(rows)
