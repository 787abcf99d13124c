"""STOP word game - terminal entry point"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from stop_game.config import load_config, log_level
from stop_game.errors.handler import (
    InvalidSetup,
    NoLettersRemaining,
    describe_outcome,
)
from stop_game.game.engine import MatchEngine
from stop_game.orchestrator import MatchOrchestrator
from stop_game.types.match import CATEGORIES, MatchState
from stop_game.types.vote import VoteChoice

logger = logging.getLogger(__name__)

CONCEDE_COMMAND = "/stop"
VOTE_COMMAND = "/vote"


async def _ask(prompt: str) -> str:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, input, prompt)


def _print_state(state: MatchState) -> None:
    message = describe_outcome(state.last_outcome)
    if message:
        print(f"  -> {message}")


async def _run_vote(orchestrator: MatchOrchestrator) -> MatchState:
    player = orchestrator.current_player
    print(f"Vote on {player.name}'s word. Enter the number of hands for each side.")
    orchestrator.open_vote()

    for choice in (VoteChoice.YES, VoteChoice.NO):
        label = "eliminate" if choice == VoteChoice.YES else "keep"
        raw = await _ask(f"  votes to {label}: ")
        count = int(raw) if raw.strip().isdigit() else 0
        for _ in range(count):
            orchestrator.cast_vote(choice)

    return orchestrator.resolve_vote()


async def play(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    if args.turn_seconds is not None:
        config = config.model_copy(update={"turn_seconds": args.turn_seconds})

    orchestrator = MatchOrchestrator(engine=MatchEngine(config=config))

    try:
        state = orchestrator.start_match(args.category, args.players)
    except InvalidSetup as e:
        print(f"Cannot start match: {e}", file=sys.stderr)
        return 2

    print(f"Category: {state.category} | players: {', '.join(p.name for p in state.players)}")
    print(f"Type a word, {CONCEDE_COMMAND} to give up, {VOTE_COMMAND} to dispute the turn.")

    try:
        while not state.is_over:
            player = orchestrator.current_player
            await _ask(f"\n{player.name}, press Enter to draw a letter ")
            try:
                state = orchestrator.draw_letter()
            except NoLettersRemaining as e:
                print(f"{e}. The match cannot continue.")
                return 1

            answer = await _ask(
                f"[{state.current_letter}] {player.name} ({config.turn_seconds}s): "
            )

            if orchestrator.state.current_letter is None:
                # The clock already ended this turn
                state = orchestrator.state
            elif answer.strip() == CONCEDE_COMMAND:
                state = orchestrator.concede()
            elif answer.strip() == VOTE_COMMAND:
                state = await _run_vote(orchestrator)
            else:
                state = orchestrator.submit_word(answer)

            _print_state(state)

        print(f"\nGAME OVER - winner: {state.winner_name}")
        summary = orchestrator.journal.summary()
        print(f"{summary.accepted_words} words accepted in {summary.turns} turns")
        return 0
    finally:
        orchestrator.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a STOP word match in the terminal.")
    parser.add_argument("players", nargs="+", help="Player names, in turn order")
    parser.add_argument(
        "--category",
        default=CATEGORIES[0],
        help=f"Category label (e.g. {', '.join(CATEGORIES)})",
    )
    parser.add_argument("--turn-seconds", type=int, default=None, help="Override the countdown per turn")
    parser.add_argument("--config", default=None, help="Optional TOML file with a [match] table")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    load_dotenv()

    logging.basicConfig(
        level=log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    sys.exit(asyncio.run(play(args)))


if __name__ == "__main__":
    main()
