"""CLI entry point.

Usage: claw-deps [command] [options] [path]
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from claw_deps.adapters import check_directory
from claw_deps.config import load_config
from claw_deps.detection import detect
from claw_deps.logging_config import setup_logging
from claw_deps.render import (
    print_header,
    print_not_detected,
    print_report,
    render_json,
    render_not_detected_json,
)
from claw_deps.summary import exit_code

logger = logging.getLogger(__name__)

COMMANDS = ("check", "outdated", "audit", "info", "help")
DEFAULT_COMMAND = "check"

DESCRIPTION = "Check project dependencies for outdated and vulnerable packages."

EPILOG = """\
commands:
  check     Check for outdated and vulnerable dependencies (default)
  outdated  List only outdated packages
  audit     Security audit only
  info      Show project dependency info
  help      Show this help

examples:
  claw-deps                    # Check current directory
  claw-deps check ./my-project # Check specific project
  claw-deps outdated --json    # List outdated as JSON
  claw-deps audit              # Security audit only

supported:
  npm, yarn, pnpm, bun (Node.js)
  pip, pipenv, poetry (Python)
  go mod (Go)
  cargo (Rust)

exit codes:
  0  everything up to date
  1  outdated packages, or no package manager / directory found
  2  vulnerabilities found
"""


@dataclass(frozen=True)
class Invocation:
    """Everything one run needs, resolved once from the command line."""

    command: str
    path: Path
    json_output: bool = False
    timeout: int = 60


class ArgumentParser(argparse.ArgumentParser):
    """Parser whose usage errors exit 1; exit 2 means vulnerabilities found."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="claw-deps",
        usage="%(prog)s [command] [options] [path]",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("targets", nargs="*", metavar="command/path", help=argparse.SUPPRESS)
    parser.add_argument("-j", "--json", action="store_true", help="Output as JSON")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging on stderr"
    )
    parser.add_argument(
        "--timeout",
        type=int,
        metavar="SECONDS",
        help="Per-command timeout for package-manager tools (default: from config, 60)",
    )
    parser.add_argument("--config", type=Path, metavar="FILE", help="Alternate config file")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__import__('claw_deps').__version__}"
    )
    return parser


def split_targets(targets: list[str]) -> tuple[str, str | None]:
    """Split positionals into (command, path).

    The first positional is a command only if it is a known one; otherwise
    it is the path.
    """
    if targets and targets[0] in COMMANDS:
        return targets[0], targets[1] if len(targets) > 1 else None
    return DEFAULT_COMMAND, targets[0] if targets else None


def run(invocation: Invocation) -> int:
    """Detect, check and render one directory. Returns the exit code."""
    directory = invocation.path

    if not directory.exists():
        print(f"Error: Directory not found: {directory}", file=sys.stderr)
        return 1

    manager = detect(directory)
    if manager is None:
        if invocation.json_output:
            print(render_not_detected_json(str(directory)))
        else:
            print_not_detected(str(directory))
        return 1

    if not invocation.json_output:
        print_header(manager.value, str(directory))

    report = check_directory(directory, manager, timeout=invocation.timeout)

    if invocation.json_output:
        print(render_json(report))
    else:
        print_report(report, invocation.command)

    return exit_code(report)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the claw-deps CLI.

    Returns:
        Exit code: 0 clean, 1 outdated or failure, 2 vulnerabilities.
    """
    parser = build_parser()
    args, unknown = parser.parse_known_intermixed_args(argv)

    config = load_config(args.config)
    setup_logging(config.log_level, verbose=args.verbose)
    if unknown:
        logger.debug("Ignoring unknown options: %s", " ".join(unknown))

    command, raw_path = split_targets(args.targets)
    if command == "help":
        parser.print_help()
        return 0

    invocation = Invocation(
        command=command,
        path=Path(os.path.abspath(raw_path or os.getcwd())),
        json_output=args.json,
        timeout=args.timeout if args.timeout and args.timeout > 0 else config.timeout,
    )
    return run(invocation)


if __name__ == "__main__":
    sys.exit(main())
