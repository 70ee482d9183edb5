"""Strategies that pick the winning cell of a cycle's triggering move."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

import numpy as np
import pennylane as qml

from .move import Move

logger = logging.getLogger(__name__)

CollapseChooser = Callable[[Sequence[Move]], int]


def _triggering_move(cycle: Sequence[Move]) -> Move:
    if not cycle:
        raise ValueError("Cannot choose a winner for an empty cycle")
    return cycle[-1]


class EndpointChooser:
    """Always resolves the triggering move onto the same endpoint."""

    def __init__(self, prefer: str = "a") -> None:
        if prefer not in ("a", "b"):
            raise ValueError(f"prefer must be 'a' or 'b', got '{prefer}'")
        self.prefer = prefer

    def __call__(self, cycle: Sequence[Move]) -> int:
        move = _triggering_move(cycle)
        return move.cell_a if self.prefer == "a" else move.cell_b


class QuantumCoinChooser:
    """Measure a single qubit rotated by ``angle`` to pick the endpoint.

    Outcome 0 selects ``cell_a`` and outcome 1 selects ``cell_b``; the default
    angle of pi/2 gives a fair coin.
    """

    def __init__(
        self,
        angle: float = np.pi / 2,
        seed: Optional[int] = None,
        device_name: str = "default.qubit",
    ) -> None:
        self.angle = float(angle)
        self.dev = qml.device(device_name, wires=1)
        self._qnode = qml.QNode(self._circuit, self.dev, interface="autograd")
        self._rng = np.random.default_rng(seed)

    def _circuit(self, angle: float):
        qml.RY(angle, wires=0)
        return qml.probs(wires=0)

    def probabilities(self) -> np.ndarray:
        probs = np.asarray(self._qnode(self.angle), dtype=float)
        return probs / probs.sum()

    def __call__(self, cycle: Sequence[Move]) -> int:
        move = _triggering_move(cycle)
        probs = self.probabilities()
        outcome = int(self._rng.choice(2, p=probs))
        logger.debug("Quantum coin for %s: p=%s outcome=%d", move.label, probs.tolist(), outcome)
        return move.cell_a if outcome == 0 else move.cell_b
