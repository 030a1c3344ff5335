"""Display service for cleanup results"""
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from killallgit.constants import SYMBOL_FIRE, SYMBOL_WARNING
from killallgit.formatters import (
    OutputMode,
    format_bullet_items,
    format_json_array,
    format_outcome,
    format_plain_listing,
    format_summary_lines,
)
from killallgit.models.resource import BatchSummary, DeletionOutcome
from killallgit.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


class DisplayService:
    """Renders listings, previews and batch progress.

    Machine-readable output (plain listings, JSON, created paths) goes through
    ``Console.out`` so it is never wrapped, highlighted or markup-parsed.
    """

    def __init__(self, output_console: Optional[Console] = None):
        self.console = output_console or console

    def _out(self, text: str) -> None:
        self.console.out(text, highlight=False)

    def print_listing(self, names: Sequence[str], mode: OutputMode) -> None:
        """Dry-run output: JSON array in JSON mode, otherwise one name per line."""
        if mode == OutputMode.JSON:
            self._out(format_json_array(names))
        elif names:
            self._out(format_plain_listing(names))

    def empty_result(self, mode: OutputMode, message: str) -> None:
        """Nothing to operate on: ``[]`` for JSON, silence for plain, message otherwise."""
        if mode == OutputMode.JSON:
            self._out(format_json_array([]))
        elif mode == OutputMode.INTERACTIVE:
            self.warning(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]{escape(message)}[/yellow]")

    def protected_items(self, names: Sequence[str], label: str) -> None:
        """List names that are skipped because they are protected."""
        if not names:
            return
        self.console.print(f"[yellow]{SYMBOL_WARNING} Protected {label} (skipped):[/yellow]")
        self.console.print(format_bullet_items(names, dim=True))
        self.console.print()

    def items_for_deletion(self, names: Sequence[str], item_label: str, context: str) -> None:
        """Header and bullet list of what is about to be deleted."""
        self.console.print(f"[cyan]Found {len(names)} {item_label} {escape(context)}:[/cyan]")
        self.console.print(format_bullet_items(names))

    def all_items_for_deletion(self, names: Sequence[str]) -> None:
        """Heading used by --all before removing every worktree."""
        self.console.print(f"[bold red]{SYMBOL_FIRE} Preparing to remove all worktrees...[/bold red]")
        self.console.print(format_bullet_items(names))

    def batch_started(self) -> None:
        self.console.print()

    def deletion_started(self, name: str) -> None:
        self.console.print(f"[red]Deleting[/red] [bold yellow]{escape(name)}[/bold yellow]... ", end="")

    def deletion_result(self, outcome: DeletionOutcome) -> None:
        self.console.print(format_outcome(outcome))

    def deletion_summary(self, summary: BatchSummary, item_label: str, target: str) -> None:
        """Counts after a batch; failures are a warning, never an error."""
        self.console.print()
        for line in format_summary_lines(summary, item_label, target):
            self.console.print(line)

    def worktree_created(self, path: Path) -> None:
        self._out(str(path))
