"""Command-line entry point: print a machine description and optionally trace a run."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from turing_algebra.algebra import RepeatMode, multiconcat, repeat
from turing_algebra.combinators import (
    DEFAULT_ALPHABET,
    consume_right,
    find_left,
    find_right,
    move_right,
)
from turing_algebra.core.automaton import Automaton
from turing_algebra.core.errors import FormatError
from turing_algebra.core.types import DEFAULT_ACCEPT_STATE, Status
from turing_algebra.engine.session import ExecutionSession, RunConfig
from turing_algebra.serialization import decode, encode

logger = logging.getLogger(__name__)

ANSI_BLUE = "\033[1;34m"
ANSI_RESET = "\033[0m"


def setup_logging(level: str = "WARNING") -> None:
    """Set up logging configuration. Logs go to stderr so stdout carries only the trace."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_demo_machine() -> Automaton:
    """
    Walk to the first ':', step over it, move right until a '#' is
    under the head, then return to the start of the input.
    """
    alphabet = DEFAULT_ALPHABET
    machine = multiconcat(
        [
            find_right(":", "move_to_colon", alphabet),
            consume_right(":", "pass_colon"),
            repeat(
                move_right(1, "step", alphabet),
                RepeatMode.DO_WHILE,
                "#",
                alphabet,
                "scan_to_hash",
            ),
            find_left("_", "move_back", alphabet),
            consume_right("_", "move_to_start"),
        ],
        alphabet,
        "demo",
    )
    # Finish in a readable accept state
    machine.redirect_state(machine.accept_state, DEFAULT_ACCEPT_STATE, alphabet)
    machine.set_accept_state(DEFAULT_ACCEPT_STATE)
    return machine


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="turing-algebra",
        description="Print a Turing machine description and optionally trace it on an input.",
    )
    parser.add_argument("input", nargs="?", help="Input string to load onto the tape")
    parser.add_argument(
        "--machine", type=str, help="Read the machine description from this file"
    )
    parser.add_argument(
        "--max-steps", type=int, default=None, help="Stop after this many steps"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Do not colour the tape snapshot"
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar on stderr"
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING", help="Logging level"
    )
    return parser


def load_machine(path: Optional[str]) -> Automaton:
    if path is None:
        return build_demo_machine()
    with open(path, encoding="utf-8") as fp:
        return decode(fp.read(), title=path)


def print_state(session: ExecutionSession, out: TextIO, color: bool = True) -> None:
    tape = session.tape()
    if color:
        tape = f"{ANSI_BLUE}{tape}{ANSI_RESET}"
    print(session.head(), file=out)
    print(tape, file=out)
    print(file=out)


def run_input(
    machine: Automaton,
    text: str,
    config: RunConfig,
    out: TextIO,
    color: bool = True,
) -> Status:
    """Trace `machine` on `text` and print the final status message."""
    session = machine.load_input(text)
    print_state(session, out, color)

    result = session.run(
        config,
        on_step=lambda s, _status: print_state(s, out, color),
    )
    if result.limit_reached:
        print(f"Machine still running after {result.steps} steps.", file=sys.stderr)
    else:
        print(result.status.message, file=out)
    return result.status


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        machine = load_machine(args.machine)
        description = encode(machine)
    except (FormatError, OSError) as exc:
        logger.error(f"Could not load machine: {exc}")
        print(exc, file=sys.stderr)
        return 1

    out = sys.stdout
    out.write(description)

    if args.input is None:
        return 0

    config = RunConfig(max_steps=args.max_steps, progress=args.progress)
    status = run_input(machine, args.input, config, out, color=not args.no_color)
    return 1 if status is Status.RUNNING else 0


if __name__ == "__main__":
    sys.exit(main())
