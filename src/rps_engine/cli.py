# Area: Shared
"""
rps_engine.cli — Command-line interface
========================================

Plays rock-paper-scissors against the computer in the terminal.

Usage:
    python -m rps_engine                          # Default settings
    python -m rps_engine --seed 42 --delay 0.5    # Reproducible, faster
    python -m rps_engine --config config.json     # Settings from a file

Settings can also come from environment variables (or a .env file):
    RPS_RESOLUTION_DELAY, RPS_SEED, RPS_STRICT_BUSY, RPS_LOG_LEVEL, RPS_LOG_FILE
"""

import argparse
import logging
import sys
from typing import Any, Callable, Dict, List, Optional

from .catalog import Outcome
from .errors import InvalidMoveError, SessionBusyError
from .session import GameSession
from .types import PENDING_MESSAGE, SessionSnapshot
from ._config import load_config, validate_config
from ._engine.enums import TurnState
from ._shared import setup_logging, log_engine_error

logger = logging.getLogger("rps_engine.cli")

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]

QUIT_COMMANDS = {"quit", "exit", "q"}
RESET_COMMANDS = {"reset", "restart"}
MOVE_ALIASES = {"r": "rock", "p": "paper", "s": "scissors"}

OUTCOME_BANNERS = {
    Outcome.WINS: "You won! 🎉",
    Outcome.LOSES: "You lost! 😔",
    Outcome.TIES: "It's a tie! 🤝",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="rps-engine",
        description="Play rock-paper-scissors against the computer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m rps_engine
  python -m rps_engine --seed 42 --delay 0
  RPS_LOG_LEVEL=DEBUG python -m rps_engine --log-file rps.log
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--env-file", type=str, help="Path to a .env file")
    parser.add_argument("--seed", type=int, help="Seed for the opponent's random moves")
    parser.add_argument(
        "--delay", type=float, help="Seconds before each turn resolves (default: 1.5)",
    )
    parser.add_argument("--log-file", type=str, help="Write JSON logs to this file")
    parser.add_argument(
        "--log-level", type=str.upper, help="DEBUG, INFO, WARNING, ERROR or CRITICAL",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Report moves entered while a turn is still resolving",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge file/env configuration with command-line overrides."""
    config = load_config(args.config, env_file=args.env_file)
    overrides = {
        "seed": args.seed,
        "resolution_delay_seconds": args.delay,
        "log_file": args.log_file,
        "log_level": args.log_level,
    }
    config.update({k: v for k, v in overrides.items() if v is not None})
    if args.strict:
        config["strict_busy"] = True
    validate_config(config)
    return config


def confirm(question: str, input_func: Optional[InputFunc] = None) -> bool:
    """Ask a yes/no question; anything but yes means no."""
    input_func = input_func or input
    try:
        answer = input_func(f"{question} [y/N]: ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def render_scoreboard(snapshot: SessionSnapshot) -> str:
    return f"You {snapshot.score.player}  VS  {snapshot.score.opponent} CPU"


def render_turn(snapshot: SessionSnapshot) -> str:
    """Describe a resolved turn in one line."""
    player, opponent = snapshot.player_move, snapshot.opponent_move
    if player is None or opponent is None or snapshot.outcome is None:
        return snapshot.status_message
    return (
        f"You: {player.glyph} {player}  CPU: {opponent.glyph} {opponent}"
        f"  →  {OUTCOME_BANNERS[snapshot.outcome]}"
    )


def play(
    session: GameSession,
    input_func: Optional[InputFunc] = None,
    output: OutputFunc = print,
    resolution_timeout: Optional[float] = None,
) -> SessionSnapshot:
    """
    Run the interactive loop until the player quits or input ends.

    Returns:
        The final session snapshot
    """
    input_func = input_func or input
    names = "/".join(m.identifier for m in session.all_moves())
    output("🎮 Rock Paper Scissors")
    output(render_scoreboard(session.current_state()))

    while True:
        try:
            command = input_func(f"Your move ({names}, reset, quit): ").strip().lower()
        except EOFError:
            break
        if not command:
            continue
        if command in QUIT_COMMANDS:
            break
        if command in RESET_COMMANDS:
            if confirm("Reset the score?", input_func):
                session.reset()
                output("Score reset.")
                output(render_scoreboard(session.current_state()))
            continue

        try:
            accepted = session.submit_move(MOVE_ALIASES.get(command, command))
        except InvalidMoveError as e:
            log_engine_error(e, level=logging.DEBUG)
            output(f"Invalid move. Choose one of: {names}")
            continue
        except SessionBusyError as e:
            log_engine_error(e)
            output("Still choosing... try again in a moment.")
            continue
        if not accepted:
            continue

        output(PENDING_MESSAGE)
        snapshot = session.wait_for_resolution(timeout=resolution_timeout)
        if snapshot.busy:
            output("Still choosing... try again in a moment.")
            continue
        if snapshot.turn_state is TurnState.IDLE:
            output("The computer could not choose a move. Try again.")
            continue
        output(render_turn(snapshot))
        output(render_scoreboard(snapshot))

    final = session.current_state()
    output(f"Final score: {render_scoreboard(final)}")
    return final


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(log_file_path=config["log_file"], level=config["log_level"])
    session = GameSession.from_config(config)
    logger.debug(f"Session {session.session_id} started with config {config}")

    try:
        play(session)
    except KeyboardInterrupt:
        print()
    return 0
