"""Shared constants for killallgit."""

from typing import Tuple

# Branch names that can never be deleted
DEFAULT_PROTECTED_BRANCHES: Tuple[str, ...] = ("main", "master", "develop", "development")

# Comma-separated list of additional protected branch names
PROTECTED_ENV_VAR = "KILLALLGIT_PROTECTED"

# Worktrees live at <parent-of-repo-root>/WORKTREE_DIR_NAME/<repo-name>/<name>
WORKTREE_DIR_NAME = ".worktrees"

# Symbol constants
SYMBOL_SUCCESS = "✓"
SYMBOL_FAILURE = "✗"
SYMBOL_BULLET = "•"
SYMBOL_WARNING = "⚠️ "
SYMBOL_FIRE = "🔥"
SYMBOL_BACK = "← Back"


class StyleType:
    """Style types for console output."""

    ITEM = "item"
    PROTECTED = "protected"
    SUCCESS = "success"
    FAILURE = "failure"


# CLI colors (Rich style strings)
CLI_COLORS = {
    StyleType.ITEM: "bold yellow",
    StyleType.PROTECTED: "dim",
    StyleType.SUCCESS: "bold green",
    StyleType.FAILURE: "red",
}


# Hint shown whenever a multi-select prompt is opened
MULTI_SELECT_HINT = "space to toggle, enter to confirm, esc to cancel"
