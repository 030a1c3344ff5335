"""Worktree records parsed from git."""

import os
from dataclasses import dataclass


@dataclass
class WorktreeInfo:
    """One entry of ``git worktree list --porcelain``."""

    path: str
    branch_name: str  # empty when detached
    commit_sha: str
    is_main: bool
    is_bare: bool = False
    is_orphaned: bool = False  # listed by git but the directory is gone

    @property
    def name(self) -> str:
        """Directory name used to address the worktree."""
        return os.path.basename(os.path.normpath(self.path))

    def __str__(self) -> str:
        parts = [self.name, self.branch_name or "(detached)"]
        if self.is_main:
            parts.append("main")
        if self.is_bare:
            parts.append("bare")
        if self.is_orphaned:
            parts.append("missing")
        return " ".join(parts)
