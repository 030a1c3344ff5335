"""Command-line argument parsing for killallgit."""

import argparse
from typing import Optional, Sequence

from killallgit.__version__ import __version__
from killallgit.constants import PROTECTED_ENV_VAR


def _add_common_clean_flags(parser: argparse.ArgumentParser, force_help: str) -> None:
    parser.add_argument("--force", action="store_true", help=force_help)
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List matching items without deleting",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output as JSON array (requires --dry-run)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="killallgit",
        description="A CLI tool for managing git worktrees and branches",
        epilog=f"Protected branches: main, master, develop, development, plus any names "
        f"listed (comma-separated) in the {PROTECTED_ENV_VAR} environment variable. "
        "Run without a command for the interactive menu.",
    )
    parser.add_argument("--version", action="version", version=f"killallgit {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    add = commands.add_parser("add", help="Add a resource")
    add_resources = add.add_subparsers(dest="resource", metavar="RESOURCE", required=True)
    add_worktree = add_resources.add_parser("worktree", help="Add a new worktree")
    add_worktree.add_argument("name", help="Name of the worktree")

    clean = commands.add_parser("clean", help="Clean up resources")
    clean_resources = clean.add_subparsers(dest="resource", metavar="RESOURCE", required=True)

    worktrees = clean_resources.add_parser("worktrees", help="Clean up worktrees")
    worktrees.add_argument(
        "pattern",
        nargs="?",
        help="Regex pattern to match worktree names (interactive if not provided)",
    )
    worktrees.add_argument("--all", action="store_true", dest="all_worktrees", help="Remove all worktrees")
    _add_common_clean_flags(worktrees, "Force removal even if there are uncommitted changes")

    branches = clean_resources.add_parser("branches", help="Clean up branches (local or remote)")
    branches.add_argument(
        "pattern",
        nargs="?",
        help='Pattern to match branches (e.g. "feat/.*" for local, "origin/feat/.*" for remote)',
    )
    _add_common_clean_flags(branches, "Skip confirmation prompts")

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "clean":
        if args.json_output and not args.dry_run:
            parser.error("--json requires --dry-run")
        if getattr(args, "all_worktrees", False) and args.pattern is not None:
            parser.error("--all cannot be used with a pattern")

    return args
