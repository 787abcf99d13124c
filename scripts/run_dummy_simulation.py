#!/usr/bin/env python3
"""Drive a full STOP match with simulated players and print the journal summary."""

import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from stop_game.config import load_config, log_level
from stop_game.errors.handler import describe_reason
from stop_game.game.engine import MatchEngine
from stop_game.orchestrator import MatchOrchestrator
from stop_game.testing.dummy_players import run_dummy_match
from stop_game.types.match import EliminationReason


async def run_simulation(args: argparse.Namespace) -> None:
    config = load_config(args.config)
    if args.turn_seconds is not None:
        config = config.model_copy(update={"turn_seconds": args.turn_seconds})

    engine = MatchEngine(config=config, rng=random.Random(args.seed))
    orchestrator = MatchOrchestrator(engine=engine, tick_interval=args.tick_interval)

    names = [f"player_{idx}" for idx in range(args.num_players)]
    summary = await run_dummy_match(
        orchestrator,
        args.category,
        names,
        seed=args.seed,
        mistake_rate=args.mistake_rate,
    )

    for event in orchestrator.journal.events:
        if event["event"] == "word_accepted":
            print(f"  {event['player']}: [{event['letter']}] {event['word']}")
        elif event["event"] == "player_eliminated":
            reason = describe_reason(EliminationReason(event["reason"]))
            print(f"  {event['player']} eliminated: {reason}")

    print(f"Category: {summary.category}")
    print(f"Letters drawn: {' '.join(summary.letters_drawn)}")
    print(f"Turns: {summary.turns}, accepted words: {summary.accepted_words}")
    print(f"Elimination order: {', '.join(summary.elimination_order)}")
    print(f"Winner: {summary.winner}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a STOP match between simulated players."
    )
    parser.add_argument("--num-players", type=int, default=4, help="Number of simulated players")
    parser.add_argument("--category", default="Animais", help="Category label")
    parser.add_argument("--seed", type=int, default=None, help="Seed for letters and player choices")
    parser.add_argument("--mistake-rate", type=float, default=0.15, help="Chance a player answers wrongly")
    parser.add_argument("--turn-seconds", type=int, default=3, help="Countdown per turn")
    parser.add_argument(
        "--tick-interval",
        type=float,
        default=0.05,
        help="Real seconds per countdown tick (1.0 for wall-clock speed)",
    )
    parser.add_argument("--config", default=None, help="Optional TOML file with a [match] table")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    load_dotenv()
    logging.basicConfig(
        level=log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    asyncio.run(run_simulation(args))


if __name__ == "__main__":
    main()
