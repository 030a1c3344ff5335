"""Output formatting utilities."""

import json
from enum import Enum
from typing import List, Sequence

from rich.markup import escape

from killallgit.constants import (
    CLI_COLORS,
    SYMBOL_BULLET,
    SYMBOL_FAILURE,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    StyleType,
)
from killallgit.models.resource import BatchSummary, DeletionOutcome


class OutputMode(Enum):
    """Rendering contract for a command's result."""
    PLAIN = "plain"
    JSON = "json"
    INTERACTIVE = "interactive"


def select_output_mode(dry_run: bool, json_output: bool) -> OutputMode:
    """
    Pick the rendering contract from the flag pair alone.

    Args:
        dry_run: --dry-run was given
        json_output: --json was given

    Returns:
        OutputMode.JSON if json_output, PLAIN for a dry run, INTERACTIVE otherwise
    """
    if json_output:
        return OutputMode.JSON
    if dry_run:
        return OutputMode.PLAIN
    return OutputMode.INTERACTIVE


def format_json_array(names: Sequence[str]) -> str:
    """Single-line JSON array of names, e.g. ``["a","b"]`` or ``[]``."""
    return json.dumps(list(names), separators=(",", ":"), ensure_ascii=False)


def format_plain_listing(names: Sequence[str]) -> str:
    """One name per line, no decoration."""
    return "\n".join(names)


def _styled(text: str, style_type: str) -> str:
    style = CLI_COLORS[style_type]
    return f"[{style}]{text}[/{style}]"


def format_bullet_items(names: Sequence[str], dim: bool = False) -> str:
    """
    Format names as an indented bullet list with Rich markup.

    Args:
        names: Names to list (escaped, so brackets in names are kept literally)
        dim: Render as non-actionable (protected) entries

    Returns:
        Lines of the form "  • name"
    """
    lines = []
    for name in names:
        if dim:
            bullet = _styled(SYMBOL_BULLET, StyleType.PROTECTED)
            lines.append(f"  {bullet} {_styled(escape(name), StyleType.PROTECTED)}")
        else:
            lines.append(f"  {SYMBOL_BULLET} {_styled(escape(name), StyleType.ITEM)}")
    return "\n".join(lines)


def format_outcome(outcome: DeletionOutcome) -> str:
    """Checkmark on success, cross and dimmed message on failure."""
    if outcome.success:
        return f"[green]{SYMBOL_SUCCESS}[/green]"
    message = escape(outcome.message or "Unknown error")
    return f"{_styled(SYMBOL_FAILURE, StyleType.FAILURE)} [dim]{message}[/dim]"


def format_summary_lines(summary: BatchSummary, item_label: str, target: str) -> List[str]:
    """
    Format the end-of-batch summary.

    Example:
        ["✓ Deleted 2 local branches from local", "✗ Failed to delete 1 local branches"]
    """
    lines = [
        _styled(
            f"{SYMBOL_SUCCESS} Deleted {summary.succeeded} {item_label} from {escape(target)}",
            StyleType.SUCCESS,
        )
    ]
    if summary.failed > 0:
        lines.append(
            _styled(f"{SYMBOL_FAILURE} Failed to delete {summary.failed} {item_label}", StyleType.FAILURE)
        )
    return lines


def format_confirmation_prompt(item_label: str, count: int, target: str) -> str:
    """Question asked before a batch deletion."""
    return f"{SYMBOL_WARNING} Delete these {count} {item_label} from {target}?"
