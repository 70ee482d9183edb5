"""Quantum tic-tac-toe rules engine."""

from .board import BOARD_CELLS, WIN_LINES, QuantumBoard
from .cell import Cell
from .choosers import CollapseChooser, EndpointChooser, QuantumCoinChooser
from .graph import are_entangled, entangled_groups, superposition_graph
from .move import Move
from .orientation import orient_cycle
from .resolution import PlacementOutcome, place_move, resolve_cycle

__all__ = [
    "BOARD_CELLS",
    "WIN_LINES",
    "QuantumBoard",
    "Cell",
    "Move",
    "orient_cycle",
    "CollapseChooser",
    "EndpointChooser",
    "QuantumCoinChooser",
    "superposition_graph",
    "entangled_groups",
    "are_entangled",
    "PlacementOutcome",
    "place_move",
    "resolve_cycle",
]
