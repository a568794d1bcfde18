#!/usr/bin/env python3
"""Play Lines of Action at the console; both sides enter moves as text."""

import argparse
import logging
import sys

from loa.game import GameConfig, GameSession, load_yaml_config


def build_config(args: argparse.Namespace) -> GameConfig:
    cfg = load_yaml_config(args.config) if args.config else {}
    if args.tie_break is not None:
        cfg["tie_break"] = args.tie_break
    if args.max_moves is not None:
        cfg["max_moves"] = args.max_moves
    if args.show_board:
        cfg["show_board_after_move"] = True
    if args.no_prompt:
        cfg["prompt"] = False
    return GameConfig.from_mapping(cfg)


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Lines of Action in the console.")
    parser.add_argument("--config", type=str, default="configs/console.yaml")
    parser.add_argument("--tie-break", choices=["mover", "side_to_move", "draw"])
    parser.add_argument("--max-moves", type=int)
    parser.add_argument("--show-board", action="store_true")
    parser.add_argument("--no-prompt", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    session = GameSession(sys.stdin, sys.stdout, config=build_config(args))
    moves = session.run()
    print(f"{moves} moves played.")


if __name__ == "__main__":
    main()
