"""Single board square holding either a classical mark or pending moves."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .move import Move


class Cell:
    def __init__(self) -> None:
        self._moves: List[Move] = []
        self._symbol: Optional[str] = None

    @property
    def is_collapsed(self) -> bool:
        return self._symbol is not None

    @property
    def symbol(self) -> Optional[str]:
        return self._symbol

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def display(self) -> str:
        if self._symbol is not None:
            return self._symbol
        return ",".join(move.label for move in self._moves)

    def can_accept_superposition(self) -> bool:
        return not self.is_collapsed

    def add_superposition(self, move: Move) -> None:
        if self.is_collapsed:
            raise RuntimeError(f"Cell already collapsed to '{self._symbol}'")
        self._moves.append(move)

    def remove_superposition(self, move: Move) -> None:
        """Drop ``move`` from this cell; absent moves are ignored."""

        if move in self._moves:
            self._moves.remove(move)

    def collapse(self, symbol: str) -> None:
        """Fix the cell to ``symbol``.

        Pending moves are discarded here only; their other endpoints keep
        their references until the board sweeps them.
        """

        self._symbol = symbol
        self._moves.clear()

    def __str__(self) -> str:
        return self.display
