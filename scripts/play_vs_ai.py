#!/usr/bin/env python3
"""Play Lines of Action against the machine via the console, with optional logging & replay."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
import yaml

from loa import Board, MachinePlayer, Move, Piece, SearchConfig
from loa.evaluation import describe_winner


def load_config(path_str: Optional[str]) -> Dict:
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def prompt_human_move(board: Board) -> Move:
    legal = board.legal_moves()
    while True:
        raw = input(f"{board.turn.full_name} move (e.g. c1-c3, 'moves' to list, q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Game abandoned.")
            sys.exit(0)
        if raw.lower() == "moves":
            print(" ".join(str(move) for move in legal))
            continue
        try:
            move = Move.parse(raw.lower().replace(" ", "-"))
        except ValueError as exc:
            print(exc)
            continue
        if board.is_legal_move(move):
            return move
        print(f"Illegal move: {move}")


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Game log written to {path}")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    board = Board()
    move_limit = data.get("metadata", {}).get("move_limit")
    if move_limit:
        board.set_move_limit(move_limit)
    if verbose:
        print(board)
    for entry in moves:
        move = Move.parse(entry["move"])
        board.make_move(move)
        if verbose:
            print(f"{entry.get('actor', 'unknown')} ({entry.get('side', '?')}): {move}")
            print(board)
    summary = {
        "result": describe_winner(board.winner()),
        "moves": len(moves),
        "board": board.cells.tolist(),
    }
    if verbose:
        print(f"Result: {summary['result']}")
    return summary


def play_interactive(args: argparse.Namespace, cfg: Dict) -> None:
    search_cfg = dict(cfg.get("search", {}))
    if args.depth is not None:
        search_cfg["depth"] = args.depth
    machine = MachinePlayer(SearchConfig(**search_cfg), rng=np.random.default_rng(args.seed))
    move_limit = args.move_limit if args.move_limit is not None else cfg.get("move_limit")

    board = Board()
    if move_limit:
        board.set_move_limit(move_limit)
    human_side = Piece.BLACK if args.human_side == "black" else Piece.WHITE
    log_records: List[Dict] = []

    while not board.game_over():
        print(board)
        side = board.turn
        if side == human_side:
            move = prompt_human_move(board)
            actor = "human"
        else:
            move = machine.choose_move(board)
            actor = "ai"
            if move is None:
                print(f"{side.full_name} has no legal move.")
                break
            print(f"* {move}")
        board.make_move(move)
        log_records.append(
            {
                "move_index": board.moves_made() - 1,
                "actor": actor,
                "side": side.full_name,
                "move": str(move),
                "capture": board.moves[-1].is_capture,
            }
        )

    print(board)
    winner = board.winner()
    if winner in (Piece.BLACK, Piece.WHITE):
        print(f"{winner.full_name} wins.")
    else:
        print(f"Game ended: {describe_winner(winner)}.")

    if args.log_file:
        metadata = {
            "human_side": args.human_side,
            "search": search_cfg,
            "move_limit": move_limit,
            "result": describe_winner(winner),
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Lines of Action in the console against the machine.")
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--human-side", choices=["black", "white"], default="black")
    parser.add_argument("--depth", type=int)
    parser.add_argument("--move-limit", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args, load_config(args.config))


if __name__ == "__main__":
    main()
