"""Custom exceptions for killallgit"""

from typing import Optional


class KillAllGitError(Exception):
    """Base exception for all killallgit errors."""
    pass


class NotARepositoryError(KillAllGitError):
    """Exception raised when no git repository encloses the working directory."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        error_msg = "Not in a git repository"
        if path:
            error_msg += f": {path}"
        super().__init__(error_msg)


class InvalidPatternError(KillAllGitError):
    """Exception raised when a filter pattern is not a valid regular expression."""

    def __init__(self, pattern: str, message: str):
        self.pattern = pattern
        self.message = message
        super().__init__(f"Invalid regex pattern '{pattern}': {message}")


class ListingError(KillAllGitError):
    """Exception raised when existing resources cannot be enumerated."""

    def __init__(self, resource: str, message: Optional[str] = None):
        self.resource = resource
        self.message = message

        error_msg = f"Failed to list {resource}"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class RequiresTerminalError(KillAllGitError):
    """Exception raised when a prompt is needed but stdin is not a terminal."""

    def __init__(self, hint: Optional[str] = None):
        self.hint = hint or (
            "Use command-line arguments instead.\n"
            "Run 'killallgit --help' for available commands."
        )
        super().__init__(f"Interactive mode requires a terminal. {self.hint}")


class GitOperationError(KillAllGitError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, name: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.name = name
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if name:
            error_msg += f" for '{name}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
