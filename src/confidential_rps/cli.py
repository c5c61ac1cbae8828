# Area: Console Host
"""
confidential_rps.cli — Command-line interface
=============================================

Interactive terminal game against the computer.

Usage:
    python -m confidential_rps                          # Defaults
    python -m confidential_rps --seed 42                # Reproducible computer
    python -m confidential_rps --config config.json     # Settings from file

Settings can also come from environment variables or a .env file:
    RPS_THINK_DELAY_SECONDS, RPS_SEED, RPS_LOG_FILE, RPS_LOG_LEVEL
"""

from __future__ import annotations
import argparse
import asyncio
import logging
import random
import sys
from dataclasses import replace
from typing import List, Optional, TextIO, Tuple

from ._config import GameConfig, load_config, validate_config
from ._engine.choices import Choice
from ._engine.resolver import RoundResolver
from ._engine.sealing import PassThroughSealer
from ._session.controller import SessionController
from ._shared.logging_config import enable_quiet_mode, log_round_error, setup_logging
from .console_observer import ConsoleObserver
from .errors import InvalidChoiceError, RPSGameError

logger = logging.getLogger("confidential_rps.cli")

SHORTCUTS = {
    "r": Choice.ROCK,
    "p": Choice.PAPER,
    "s": Choice.SCISSORS,
}
QUIT_COMMANDS = {"q", "quit", "exit"}
RESET_COMMANDS = {"reset", "new"}

PROMPT = "Your move [rock/paper/scissors, reset, quit]: "


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Confidential Rock Paper Scissors - play against the computer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m confidential_rps
  python -m confidential_rps --seed 42 --think-delay 0
  RPS_LOG_LEVEL=DEBUG python -m confidential_rps --config config.json
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the computer's moves (reproducible games)",
    )

    parser.add_argument(
        "--think-delay",
        type=float,
        help="Seconds the computer 'thinks' before each move",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Path of the JSON log file",
    )

    return parser.parse_args(argv)


def apply_overrides(config: GameConfig, args: argparse.Namespace) -> GameConfig:
    """Apply CLI flags on top of the loaded config."""
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.think_delay is not None:
        overrides["think_delay_seconds"] = args.think_delay
    if args.log_file is not None:
        overrides["log_file"] = args.log_file
    return replace(config, **overrides)


def build_controller(config: GameConfig, stream: Optional[TextIO] = None) -> SessionController:
    """Wire a SessionController with a console observer."""
    resolver = RoundResolver(
        rng=random.Random(config.seed),
        think_delay_seconds=config.think_delay_seconds,
    )
    return SessionController(
        resolver=resolver,
        sealer=PassThroughSealer(),
        observers=[ConsoleObserver(stream)],
    )


def parse_command(text: str) -> Tuple[str, Optional[Choice]]:
    """
    Interpret one line of user input.

    Returns:
        ("quit", None), ("reset", None) or ("play", choice)

    Raises:
        InvalidChoiceError: If the line is neither a command nor a move
    """
    normalized = text.strip().lower()
    if normalized in QUIT_COMMANDS:
        return "quit", None
    if normalized in RESET_COMMANDS:
        return "reset", None
    if normalized in SHORTCUTS:
        return "play", SHORTCUTS[normalized]
    return "play", Choice.parse(normalized)


async def handle_command(
    controller: SessionController,
    line: str,
    output_stream: TextIO,
) -> bool:
    """Run one line of input. Returns False when the player quits."""
    try:
        command, choice = parse_command(line)
        if command == "quit":
            return False
        if command == "reset":
            await controller.reset()
            return True
        print("Computer is thinking...", file=output_stream, flush=True)
        await controller.submit_choice(choice)
    except InvalidChoiceError as e:
        logger.debug(f"Rejected input {line.strip()!r}: {e}")
        print(f"{e}", file=output_stream, flush=True)
    except RPSGameError as e:
        log_round_error(e)
    return True


def run_session(
    controller: SessionController,
    input_stream: TextIO,
    output_stream: TextIO,
) -> None:
    """
    Read commands until quit or end of input.

    Lines are read on the calling thread between rounds, so Ctrl+C at the
    prompt interrupts right away. Only the commands run on the event loop.
    """
    loop = asyncio.new_event_loop()
    try:
        while True:
            print(PROMPT, end="", file=output_stream, flush=True)
            line = input_stream.readline()
            if not line:
                print(file=output_stream)
                return
            if not loop.run_until_complete(handle_command(controller, line, output_stream)):
                return
    finally:
        loop.close()


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
        validate_config(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(log_file_path=config.log_file, level=config.log_level_value)
    enable_quiet_mode()

    controller = build_controller(config)
    print("Confidential Rock Paper Scissors")
    try:
        run_session(controller, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        logger.info("Interrupted")

    print(f"Final score: {controller.state.player_score}-{controller.state.computer_score} "
          f"after {controller.state.rounds} rounds")
    return 0
