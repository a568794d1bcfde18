#!/usr/bin/env python3
"""Count move sequences from the start position and self-check the engine."""

import argparse
import json
import logging

from tqdm.auto import tqdm

from loa.core import Board
from loa.validation import check_enumeration, check_round_trip, perft


def divide(board: Board, depth: int) -> dict:
    counts = {}
    for move in tqdm(board.enumerate_legal_moves(), desc=f"perft {depth}"):
        board.apply(move)
        try:
            counts[str(move)] = perft(board, depth - 1)
        finally:
            board.unmake()
    return counts


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--depth", type=int, default=3)
    parser.add_argument("--check", action="store_true", help="Also verify enumeration and apply/unmake")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    board = Board()
    if args.depth < 1:
        parser.error("--depth must be at least 1")
    counts = divide(board, args.depth)
    summary = {"depth": args.depth, "nodes": sum(counts.values()), "divide": counts}
    if args.check:
        check_enumeration(board)
        summary["round_trip_moves"] = check_round_trip(board, min(args.depth, 2))
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
