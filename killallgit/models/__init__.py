"""Data models for killallgit."""

from .resource import (
    BatchSummary,
    DeletionOutcome,
    MatchResult,
    ResourceKind,
)
from .scope import LocalScope, RemoteScope, Scope, LOCAL
from .worktree import WorktreeInfo

__all__ = [
    "BatchSummary",
    "DeletionOutcome",
    "MatchResult",
    "ResourceKind",
    "Scope",
    "LocalScope",
    "RemoteScope",
    "LOCAL",
    "WorktreeInfo",
]
