"""Git backend: listing and deleting worktrees and branches."""

import os
from pathlib import Path
from typing import List, Optional

import git

from killallgit.exceptions import ListingError, NotARepositoryError
from killallgit.services.git.worktrees import WorktreeService, format_command_error
from killallgit.utils.logging import get_logger

logger = get_logger(__name__)


class GitBackend:
    """Black-box git operations used by the cleanup engine.

    Listing methods return ordered name lists already parsed from git's
    output and raise ListingError on failure. Delete methods never raise for
    git failures; they return (success, error_message).
    """

    def __init__(self, repo_path: str):
        """Locate the repository enclosing ``repo_path``.

        Args:
            repo_path: Any directory inside the repository

        Raises:
            NotARepositoryError: If no repository encloses repo_path
        """
        try:
            repo = git.Repo(repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError):
            raise NotARepositoryError(repo_path)

        if repo.working_tree_dir is None:
            raise NotARepositoryError(repo_path)

        self.repo_path = str(repo.working_tree_dir)
        self.cwd = os.path.abspath(repo_path)
        self.worktree_service = WorktreeService(self.repo_path)
        repo.close()

        logger.debug(f"Git backend initialized at {self.repo_path}")

    def _get_repo(self):
        """Get a fresh git.Repo instance."""
        return git.Repo(self.repo_path)

    @property
    def repo_name(self) -> str:
        return Path(self.repo_path).name

    def worktree_path(self, name: str) -> Path:
        """Managed on-disk path of worktree ``name``."""
        return self.worktree_service.worktree_path(name)

    def get_current_branch(self) -> Optional[str]:
        """Checked-out branch, or None on a detached HEAD."""
        try:
            return self._get_repo().active_branch.name
        except TypeError:
            return None

    def list_worktrees(self) -> List[str]:
        """Names of removable linked worktrees."""
        return self.worktree_service.list_worktree_names(self.cwd)

    def list_local_branches(self) -> List[str]:
        """Local branch names, excluding the checked-out branch."""
        try:
            output = self._get_repo().git.branch("--format=%(refname:short)")
        except git.exc.GitCommandError as e:
            raise ListingError("local branches", format_command_error(e, "git branch"))

        current = self.get_current_branch()
        branches = [line.strip() for line in output.splitlines()]
        branches = [b for b in branches if b and b != current]
        logger.debug(f"Found {len(branches)} local branches (current: {current})")
        return branches

    def list_remote_branches(self, remote: str) -> List[str]:
        """Branch names on ``remote`` as known from its remote-tracking refs."""
        try:
            output = self._get_repo().git.branch("-r", "--format=%(refname)")
        except git.exc.GitCommandError as e:
            raise ListingError("remote branches", format_command_error(e, "git branch -r"))

        prefix = f"refs/remotes/{remote}/"
        branches = []
        for line in output.splitlines():
            ref = line.strip()
            if not ref.startswith(prefix):
                continue
            name = ref[len(prefix):]
            if name and name != "HEAD":
                branches.append(name)

        logger.debug(f"Found {len(branches)} branches on {remote}")
        return branches

    def list_configured_remotes(self) -> List[str]:
        """Remote names in git's order; empty on any failure."""
        try:
            output = self._get_repo().git.remote()
        except git.exc.GitCommandError as e:
            logger.debug(f"Could not list remotes: {e}")
            return []
        return [line.strip() for line in output.splitlines() if line.strip()]

    def delete_worktree(self, name: str, force: bool = False) -> tuple[bool, Optional[str]]:
        """Remove worktree ``name``; ``force`` discards uncommitted changes."""
        return self.worktree_service.remove_worktree(str(self.worktree_path(name)), force=force)

    def delete_local_branch(self, name: str, force: bool = False) -> tuple[bool, Optional[str]]:
        """Delete a local branch with ``-d``, or ``-D`` when forced."""
        flag = "-D" if force else "-d"
        try:
            self._get_repo().git.branch(flag, name)
            logger.info(f"Deleted local branch {name}")
            return True, None
        except git.exc.GitCommandError as e:
            error_msg = format_command_error(e, f"git branch {flag}")
            logger.debug(f"Failed to delete local branch {name}: {error_msg}")
            return False, error_msg

    def delete_remote_branch(self, remote: str, name: str) -> tuple[bool, Optional[str]]:
        """Delete ``name`` on ``remote`` with a push-delete."""
        try:
            self._get_repo().git.push(remote, "--delete", name)
            logger.info(f"Deleted branch {name} on {remote}")
            return True, None
        except git.exc.GitCommandError as e:
            error_msg = format_command_error(e, "git push --delete")
            logger.debug(f"Failed to delete {name} on {remote}: {error_msg}")
            return False, error_msg

    def create_worktree(self, name: str) -> Path:
        """Create worktree ``name``; raises GitOperationError on failure."""
        return self.worktree_service.add_worktree(name)
