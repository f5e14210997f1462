#!/usr/bin/env python3
"""CLI for timing shell commands with a stopwatch breakdown."""

import argparse
import logging
import subprocess
import sys

from lapwatch import Stopwatch
from lapwatch.config import ConfigError, load_settings
from lapwatch.core import Colors

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def run_commands(stopwatch: Stopwatch, commands: list[str], repeat: int) -> list[str]:
    """Run each command repeat times, ticking after every run.

    Returns:
        Commands that exited with a non-zero status, once per failing run
    """
    failures = []
    for i in range(repeat):
        for command in commands:
            logger.debug(f"Run {i + 1}/{repeat}: {command}")
            result = subprocess.run(command, shell=True, stdout=subprocess.DEVNULL, check=False)
            stopwatch.tick(command)
            if result.returncode != 0:
                print(
                    f"{Colors.RED}[Failed] {command} (exit {result.returncode}){Colors.RESET}",
                    file=sys.stderr,
                )
                failures.append(command)
    return failures


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Time shell commands and print a per-command breakdown"
    )
    parser.add_argument(
        "commands",
        nargs="+",
        metavar="COMMAND",
        help="Shell commands to run, in order"
    )
    parser.add_argument(
        "-n", "--repeat",
        type=positive_int,
        default=1,
        help="Number of times to run the full command list (default: 1)"
    )
    parser.add_argument(
        "--unit",
        default="runs",
        help="Unit name used in the report (default: runs)"
    )
    parser.add_argument(
        "--echo",
        action="store_true",
        help="Print each command as it finishes"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable highlighting in the report"
    )
    parser.add_argument(
        "--disable",
        action="store_true",
        help="Run commands without measuring"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print debug information"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s %(name)s :: %(message)s",
    )

    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"{Colors.RED}Error: {e}{Colors.RESET}", file=sys.stderr)
        return 2

    stopwatch = Stopwatch(
        settings.enabled and not args.disable,
        settings.echo or args.echo,
        color=settings.color and not args.no_color,
    )

    try:
        failures = run_commands(stopwatch, args.commands, args.repeat)
    except KeyboardInterrupt:
        print(f"\n{Colors.DIM}Interrupted{Colors.RESET}", file=sys.stderr)
        return 130

    stopwatch.breakdown(args.repeat, args.unit)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
