"""Placement flow: detect, place, choose, orient and collapse."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .board import QuantumBoard
from .choosers import CollapseChooser
from .move import Move
from .orientation import orient_cycle

logger = logging.getLogger(__name__)


@dataclass
class PlacementOutcome:
    placed: bool
    cycle: Optional[List[Move]] = None
    winners: Dict[Move, int] = field(default_factory=dict)

    @property
    def collapsed(self) -> bool:
        return bool(self.winners)

    @property
    def pending_collapse(self) -> bool:
        return self.placed and self.cycle is not None and not self.winners


def place_move(
    board: QuantumBoard,
    move: Move,
    chooser: Optional[CollapseChooser] = None,
) -> PlacementOutcome:
    """Place ``move`` and, when it closes a cycle and a chooser is given, collapse it.

    The chooser's answer is oriented before the move is placed, so a bad
    winning cell raises without touching the board. Without a chooser a
    detected cycle is returned unresolved so the caller can finish it later
    with :func:`resolve_cycle`.
    """

    cycle = board.detect_cycle(move)
    winners: Dict[Move, int] = {}
    if cycle is not None and chooser is not None:
        winner_cell = chooser(cycle)
        logger.debug("Chooser resolved %s onto cell %d", move.label, winner_cell)
        winners = orient_cycle(cycle, winner_cell)

    if not board.try_place(move):
        return PlacementOutcome(placed=False)
    if winners:
        board.collapse_cycle(cycle, winners)
    return PlacementOutcome(placed=True, cycle=cycle, winners=winners)


def resolve_cycle(board: QuantumBoard, cycle: Sequence[Move], winner_cell: int) -> Dict[Move, int]:
    winners = orient_cycle(cycle, winner_cell)
    board.collapse_cycle(cycle, winners)
    return winners
