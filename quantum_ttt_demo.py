"""Replay a scripted quantum tic-tac-toe game and report each position."""

from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from quantum_ttt import (
    EndpointChooser,
    Move,
    QuantumBoard,
    QuantumCoinChooser,
    entangled_groups,
    place_move,
)
from quantum_ttt.choosers import CollapseChooser

PLAYERS = ("X", "O")

# Cell pairs played alternately by X and O.
SCRIPTED_PLACEMENTS: List[Tuple[int, int]] = [
    (0, 4),
    (1, 2),
    (4, 8),
    (1, 2),
    (0, 8),
    (3, 5),
]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--chooser",
        choices=["a", "b", "quantum"],
        default="a",
        help="Endpoint of the triggering move that wins each cycle",
    )
    parser.add_argument("--angle", type=float, default=None, help="RY angle for the quantum chooser")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the quantum chooser")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_chooser(args: argparse.Namespace) -> CollapseChooser:
    if args.chooser == "quantum":
        if args.angle is None:
            return QuantumCoinChooser(seed=args.seed)
        return QuantumCoinChooser(angle=args.angle, seed=args.seed)
    return EndpointChooser(prefer=args.chooser)


def replay(
    placements: Sequence[Tuple[int, int]],
    chooser: CollapseChooser,
) -> QuantumBoard:
    board = QuantumBoard()
    counts: Dict[str, int] = {player: 0 for player in PLAYERS}

    for turn, (cell_a, cell_b) in enumerate(placements):
        player = PLAYERS[turn % 2]
        move = Move(counts[player] + 1, player, cell_a, cell_b)
        outcome = place_move(board, move, chooser)
        if not outcome.placed:
            print(f"{move.label} {cell_a + 1}-{cell_b + 1}: rejected")
            continue
        counts[player] += 1

        print(f"== {move.label} {cell_a + 1}-{cell_b + 1} ==")
        if outcome.collapsed:
            resolved = ", ".join(f"{m.label}->{cell + 1}" for m, cell in outcome.winners.items())
            print(f"  Cycle collapsed: {resolved}")
        print(board)
        print(f"  Entangled groups: {entangled_groups(board)}")

        winners = board.get_winners()
        if winners:
            print(f"  Completed lines: {', '.join(sorted(winners))}")
            break
        if board.is_full():
            print("  Board full")
            break
    return board


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    replay(SCRIPTED_PLACEMENTS, build_chooser(args))


if __name__ == "__main__":
    main()
