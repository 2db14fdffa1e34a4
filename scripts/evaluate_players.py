#!/usr/bin/env python3
"""Evaluate the alpha-beta player against a baseline player."""

import argparse
import json
import logging
from pathlib import Path

import numpy as np
import yaml
from tqdm.auto import trange

from loa import MachinePlayer, RandomPlayer, SearchConfig
from loa.evaluation import EvaluationResult, evaluate_players


def merge(total: EvaluationResult, result: EvaluationResult) -> EvaluationResult:
    games = total.games_played + result.games_played
    return EvaluationResult(
        games_played=games,
        black_wins=total.black_wins + result.black_wins,
        white_wins=total.white_wins + result.white_wins,
        draws=total.draws + result.draws,
        average_length=(
            total.average_length * total.games_played + result.average_length * result.games_played
        )
        / max(1, games),
    )


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--episodes", type=int)
    parser.add_argument("--depth", type=int)
    parser.add_argument("--tiebreak-range", type=int)
    parser.add_argument("--move-limit", type=int)
    parser.add_argument("--machine-side", choices=["black", "white"], default="black")
    parser.add_argument("--baseline", choices=["random", "machine"], default="random")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    cfg = {}
    cfg_path = Path(args.config)
    if cfg_path.exists():
        cfg = yaml.safe_load(cfg_path.read_text()) or {}
    episodes = args.episodes if args.episodes is not None else cfg.get("episodes", 10)
    move_limit = args.move_limit if args.move_limit is not None else cfg.get("move_limit")

    search_cfg = dict(cfg.get("search", {}))
    if args.depth is not None:
        search_cfg["depth"] = args.depth
    if args.tiebreak_range is not None:
        search_cfg["tiebreak_range"] = args.tiebreak_range
    config = SearchConfig(**search_cfg)

    machine = MachinePlayer(config)
    baseline = RandomPlayer() if args.baseline == "random" else MachinePlayer(config)
    black, white = (machine, baseline) if args.machine_side == "black" else (baseline, machine)

    rng = np.random.default_rng(args.seed)
    total = EvaluationResult(games_played=0, black_wins=0, white_wins=0, draws=0, average_length=0.0)
    for _ in trange(episodes, desc="Games"):
        result = evaluate_players(
            black,
            white,
            episodes=1,
            move_limit=move_limit,
            seed=int(rng.integers(0, 2**31 - 1)),
        )
        total = merge(total, result)

    output = {
        "games": total.games_played,
        "machine_side": args.machine_side,
        "baseline": args.baseline,
        "depth": config.depth,
        "black_wins": total.black_wins,
        "white_wins": total.white_wins,
        "draws": total.draws,
        "average_length": total.average_length,
        "black_winrate": total.winrate_black(),
        "white_winrate": total.winrate_white(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
