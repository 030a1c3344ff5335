"""Git-related services for killallgit."""

from .operations import GitBackend
from .worktrees import WorktreeService, format_command_error

__all__ = [
    "GitBackend",
    "WorktreeService",
    "format_command_error",
]
