"""Deletion scope: local resources or the branches of one remote.

A scope knows which backend operations list and delete its resources and how
they are labelled, so the pattern filter and batch deleter never branch on
local versus remote themselves.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from killallgit.models.resource import ResourceKind

if TYPE_CHECKING:
    from killallgit.services.git import GitBackend


class Scope:
    """Base class for the closed set of scopes (LocalScope, RemoteScope)."""

    @property
    def display_label(self) -> str:
        """Target shown in prompts and summaries ("local" or the remote name)."""
        raise NotImplementedError

    def item_label(self, kind: ResourceKind) -> str:
        """Plural noun for resources of ``kind`` in this scope."""
        raise NotImplementedError

    def list_resources(self, backend: "GitBackend", kind: ResourceKind) -> List[str]:
        """List existing resource names of ``kind``; raises ListingError."""
        raise NotImplementedError

    def delete_one(
        self, backend: "GitBackend", kind: ResourceKind, name: str, force: bool
    ) -> Tuple[bool, Optional[str]]:
        """Delete one resource. Returns (success, error_message)."""
        raise NotImplementedError


@dataclass(frozen=True)
class LocalScope(Scope):
    """Worktrees and local branches of the current repository."""

    @property
    def display_label(self) -> str:
        return "local"

    def item_label(self, kind: ResourceKind) -> str:
        return "worktrees" if kind == ResourceKind.WORKTREE else "local branches"

    def list_resources(self, backend: "GitBackend", kind: ResourceKind) -> List[str]:
        if kind == ResourceKind.WORKTREE:
            return backend.list_worktrees()
        return backend.list_local_branches()

    def delete_one(
        self, backend: "GitBackend", kind: ResourceKind, name: str, force: bool
    ) -> Tuple[bool, Optional[str]]:
        if kind == ResourceKind.WORKTREE:
            return backend.delete_worktree(name, force=force)
        return backend.delete_local_branch(name, force=force)


@dataclass(frozen=True)
class RemoteScope(Scope):
    """Branches of one configured remote."""

    remote: str

    @property
    def display_label(self) -> str:
        return self.remote

    def item_label(self, kind: ResourceKind) -> str:
        self._check_kind(kind)
        return "remote branches"

    def list_resources(self, backend: "GitBackend", kind: ResourceKind) -> List[str]:
        self._check_kind(kind)
        return backend.list_remote_branches(self.remote)

    def delete_one(
        self, backend: "GitBackend", kind: ResourceKind, name: str, force: bool
    ) -> Tuple[bool, Optional[str]]:
        # A remote push-delete has no soft/hard distinction
        self._check_kind(kind)
        return backend.delete_remote_branch(self.remote, name)

    @staticmethod
    def _check_kind(kind: ResourceKind) -> None:
        if kind != ResourceKind.BRANCH:
            raise ValueError(f"Remote scope only holds branches, not {kind.value}s")


LOCAL = LocalScope()
