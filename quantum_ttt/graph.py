"""networkx views of the pending-move graph of a quantum board."""

from __future__ import annotations

from typing import List

import networkx as nx

from .board import BOARD_CELLS, QuantumBoard


def superposition_graph(board: QuantumBoard) -> nx.MultiGraph:
    """Return cells as nodes and pending moves as parallel-safe edges."""

    graph = nx.MultiGraph()
    for index in range(BOARD_CELLS):
        symbol = board.cell_symbol(index)
        graph.add_node(index, symbol=symbol, collapsed=symbol is not None)
    for move in board.pending_moves():
        graph.add_edge(move.cell_a, move.cell_b, move=move)
    return graph


def entangled_groups(board: QuantumBoard) -> List[List[int]]:
    """Connected groups of cells that share at least one pending move."""

    graph = superposition_graph(board)
    groups = [
        sorted(component)
        for component in nx.connected_components(graph)
        if len(component) > 1
    ]
    return sorted(groups, key=lambda group: group[0])


def are_entangled(board: QuantumBoard, a: int, b: int) -> bool:
    graph = superposition_graph(board)
    if a not in graph or b not in graph:
        raise IndexError(f"Cell index out of range: {a if a not in graph else b}")
    return nx.has_path(graph, a, b)
