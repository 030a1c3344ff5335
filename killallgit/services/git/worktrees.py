"""Worktree operations service for killallgit."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import git

from killallgit.constants import WORKTREE_DIR_NAME
from killallgit.exceptions import GitOperationError, ListingError
from killallgit.models.worktree import WorktreeInfo
from killallgit.utils.logging import get_logger

logger = get_logger(__name__)


def parse_worktree_porcelain(output: str) -> List[WorktreeInfo]:
    """Parse ``git worktree list --porcelain`` output.

    Format (blank line between entries)::

        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name

    Bare and detached entries carry a ``bare`` or ``detached`` line instead
    of ``branch``. The first entry is always the main working tree.
    """
    worktrees: List[WorktreeInfo] = []
    current: Dict[str, Any] = {}

    def flush():
        path = current.get("path", "")
        if path:
            worktrees.append(
                WorktreeInfo(
                    path=path,
                    branch_name=current.get("branch", ""),
                    commit_sha=current.get("HEAD", ""),
                    is_main=not worktrees,
                    is_bare=current.get("bare", False),
                    is_orphaned=not os.path.exists(path),
                )
            )
        current.clear()

    for line in output.split("\n"):
        line = line.strip()

        if not line:
            if current:
                flush()
            continue

        if line.startswith("worktree "):
            current["path"] = line.split(" ", 1)[1]
        elif line.startswith("HEAD "):
            current["HEAD"] = line.split(" ", 1)[1]
        elif line.startswith("branch "):
            branch_ref = line.split(" ", 1)[1]
            if branch_ref.startswith("refs/heads/"):
                current["branch"] = branch_ref[len("refs/heads/"):]
            else:
                current["branch"] = ""
        elif line == "bare":
            current["bare"] = True
        elif line.startswith("detached"):
            current["branch"] = ""

    # Last entry may lack a trailing blank line
    if current:
        flush()

    return worktrees


class WorktreeService:
    """Service for managing git worktrees."""

    def __init__(self, repo_path: str):
        """Initialize the worktree service.

        Args:
            repo_path: Root of the working tree the command runs in
        """
        self.repo_path = repo_path

    def _get_repo(self):
        """Get a fresh git.Repo instance."""
        return git.Repo(self.repo_path)

    @property
    def base_path(self) -> Path:
        """Directory holding this repository's managed worktrees."""
        root = Path(self.repo_path)
        return root.parent / WORKTREE_DIR_NAME / root.name

    def worktree_path(self, name: str) -> Path:
        """On-disk location of the worktree called ``name``."""
        return self.base_path / name

    def get_worktree_info(self) -> List[WorktreeInfo]:
        """Get detailed information about all worktrees.

        Raises:
            ListingError: If git cannot list the worktrees
        """
        try:
            output = self._get_repo().git.worktree("list", "--porcelain")
        except git.exc.GitCommandError as e:
            raise ListingError("worktrees", format_command_error(e, "git worktree list"))

        worktrees = parse_worktree_porcelain(output)
        logger.debug(f"Found {len(worktrees)} worktrees")
        for wt in worktrees:
            logger.debug(f"  {wt}")
        return worktrees

    def list_worktree_names(self, current_dir: Optional[str] = None) -> List[str]:
        """Names of linked worktrees that may be removed.

        The main working tree, bare entries and the worktree containing
        ``current_dir`` are left out.
        """
        current = os.path.realpath(current_dir or os.getcwd())
        names = []
        for wt in self.get_worktree_info():
            if wt.is_main or wt.is_bare or not wt.name:
                continue
            if _contains(os.path.realpath(wt.path), current):
                continue
            names.append(wt.name)
        return names

    def remove_worktree(self, path: str, force: bool = False) -> tuple[bool, Optional[str]]:
        """Remove a worktree at the specified path.

        Args:
            path: Path to the worktree directory
            force: Force removal even if working tree is dirty or locked

        Returns:
            Tuple of (success, error_message). error_message is None on success.
        """
        try:
            args = ["remove"]
            if force:
                args.append("--force")
            args.append(path)

            self._get_repo().git.worktree(*args)
            logger.info(f"Removed worktree at {path}")
            return True, None
        except git.exc.GitCommandError as e:
            error_msg = format_command_error(e, "git worktree remove")
            logger.debug(f"Failed to remove worktree at {path}: {error_msg}")
            return False, error_msg

    def add_worktree(self, name: str) -> Path:
        """Create a worktree called ``name`` under the managed base path.

        Returns:
            Absolute path of the new worktree

        Raises:
            GitOperationError: If git refuses to create the worktree
        """
        path = self.worktree_path(name)
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise GitOperationError("worktree add", name, f"Failed to create worktree base directory: {e}")

        try:
            self._get_repo().git.worktree("add", str(path))
        except git.exc.GitCommandError as e:
            raise GitOperationError("worktree add", name, format_command_error(e, "git worktree add"))

        logger.info(f"Created worktree {name} at {path}")
        return path.resolve()


def format_command_error(error: git.exc.GitCommandError, command: str) -> str:
    """Build a readable message from a GitCommandError."""
    stderr = (error.stderr if error.stderr else "").strip()
    status = error.status if error.status is not None else "unknown"

    # GitPython wraps captured stderr as "stderr: '...'"
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'").strip()

    if stderr:
        return f"{command} failed (exit {status}): {stderr}"
    return f"{command} failed with exit code {status}"


def _contains(directory: str, path: str) -> bool:
    try:
        return os.path.commonpath([directory, path]) == directory
    except ValueError:
        # Different drives on Windows
        return False
