"""Superposed move record shared by the two cells it links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

BOARD_CELLS = 9


@dataclass(frozen=True, eq=False)
class Move:
    """One turn's quantum mark: ``player`` placed in both ``cell_a`` and ``cell_b``.

    Equality and hashing are by identity, so two moves linking the same pair
    of cells remain separate keys in a winner mapping.
    """

    number: int
    player: str
    cell_a: int
    cell_b: int

    def __post_init__(self) -> None:
        for cell in (self.cell_a, self.cell_b):
            if not 0 <= cell < BOARD_CELLS:
                raise IndexError(f"Cell index out of range: {cell}")

    @property
    def label(self) -> str:
        return f"{self.player}{self.number}"

    @property
    def endpoints(self) -> Tuple[int, int]:
        return self.cell_a, self.cell_b

    def other(self, cell: int) -> int:
        if cell == self.cell_a:
            return self.cell_b
        if cell == self.cell_b:
            return self.cell_a
        raise ValueError(f"Cell {cell} is not an endpoint of move {self.label}")

    def connects(self, u: int, v: int) -> bool:
        return (self.cell_a, self.cell_b) in ((u, v), (v, u))

    def __repr__(self) -> str:
        return f"Move({self.label}: {self.cell_a}-{self.cell_b})"
