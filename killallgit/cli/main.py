"""Command-line entry point for killallgit"""

import os
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from killallgit.cli.args import parse_args
from killallgit.config import Config
from killallgit.core import InteractiveMenu, ResourceCleaner
from killallgit.exceptions import RequiresTerminalError
from killallgit.utils.logging import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)


def _runs_full_screen(args) -> bool:
    """Whether this invocation will open a full-screen prompt."""
    if args.command is None:
        return True
    if args.command != "clean" or args.dry_run:
        return False
    return args.pattern is None and not getattr(args, "all_worktrees", False)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    debug = parsed_args.debug

    try:
        interactive = sys.stdin.isatty()
        setup_logging(
            verbose=parsed_args.verbose,
            debug=debug,
            tui_mode=interactive and _runs_full_screen(parsed_args),
        )

        config = Config.from_env(
            force=getattr(parsed_args, "force", False),
            dry_run=getattr(parsed_args, "dry_run", False),
            json_output=getattr(parsed_args, "json_output", False),
            verbose=parsed_args.verbose,
            debug=debug,
            interactive=interactive,
        )
        logger.debug(f"Configuration: {config.to_dict()}")

        if parsed_args.command is None and not interactive:
            # Fail before touching the repository
            raise RequiresTerminalError()

        cleaner = ResourceCleaner(os.getcwd(), config)

        if parsed_args.command == "add":
            cleaner.add_worktree(parsed_args.name)
        elif parsed_args.command == "clean" and parsed_args.resource == "worktrees":
            cleaner.clean_worktrees(parsed_args.pattern, all_worktrees=parsed_args.all_worktrees)
        elif parsed_args.command == "clean":
            cleaner.clean_branches(parsed_args.pattern)
        else:
            InteractiveMenu(cleaner, cleaner.prompter).run()

        # Partial batch failures were already reported; they do not fail the command
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
