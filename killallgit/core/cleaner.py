"""Cleanup pipeline: list, filter, protect, select or preview, delete."""

from pathlib import Path
from typing import List, Optional, Union

from killallgit.config import Config
from killallgit.exceptions import RequiresTerminalError
from killallgit.formatters import OutputMode, select_output_mode
from killallgit.models.resource import BatchSummary, MatchResult, ResourceKind
from killallgit.models.scope import LOCAL, RemoteScope, Scope
from killallgit.services.batch_deleter import BatchDeleter
from killallgit.services.display_service import DisplayService
from killallgit.services.git import GitBackend
from killallgit.services.pattern_filter import compile_pattern, filter_names
from killallgit.services.protection_service import ProtectionPolicy
from killallgit.services.scope_resolver import resolve_scope
from killallgit.services.selection_service import SelectionService
from killallgit.ui.prompter import Prompter, TerminalPrompter
from killallgit.utils.logging import get_logger

logger = get_logger(__name__)

NO_TERMINAL_CONFIRM_HINT = "Use --force to delete without confirmation or --dry-run to preview."


class ResourceCleaner:
    """Main class for cleaning up worktrees and branches."""

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict],
        backend: Optional[GitBackend] = None,
        prompter: Optional[Prompter] = None,
        display: Optional[DisplayService] = None,
    ):
        """Initialize ResourceCleaner.

        Args:
            repo_path: Directory inside the git repository
            config: Configuration dict or Config object
            backend: Git backend (defaults to a GitBackend for repo_path)
            prompter: Source of interactive answers (defaults to the terminal)
            display: Output renderer

        Raises:
            NotARepositoryError: If repo_path is not inside a git repository
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        self.backend = backend or GitBackend(repo_path)
        self.display = display or DisplayService()
        self.prompter = prompter or TerminalPrompter()
        self.protection = ProtectionPolicy(self.config.protected_branches)
        self.selection = SelectionService(self.prompter, self.display)
        self.deleter = BatchDeleter(self.backend, self.display)

        self.force = self.config.force
        self.dry_run = self.config.dry_run
        self.mode = select_output_mode(self.config.dry_run, self.config.json_output)

    def _require_terminal(self, hint: Optional[str] = None) -> None:
        if not self.config.interactive:
            raise RequiresTerminalError(hint)

    def _confirm(self, item_label: str, count: int, target: str) -> bool:
        if not self.force:
            self._require_terminal(NO_TERMINAL_CONFIRM_HINT)
        return self.selection.confirm_deletion(item_label, count, target, force=self.force)

    def _partition(self, kind: ResourceKind, names: List[str]) -> MatchResult:
        # Only branch names are subject to protection
        if kind == ResourceKind.BRANCH:
            return self.protection.partition(names)
        return MatchResult(protected=[], deletable=list(names))

    # Commands

    def add_worktree(self, name: str) -> Path:
        """Create a worktree and print its absolute path."""
        path = self.backend.create_worktree(name)
        self.display.worktree_created(path)
        return path

    def clean_worktrees(self, pattern: Optional[str] = None, all_worktrees: bool = False) -> Optional[BatchSummary]:
        """Remove worktrees matching ``pattern``, all of them, or an interactive pick."""
        if all_worktrees:
            return self._clean_all_worktrees()
        return self._clean(LOCAL, ResourceKind.WORKTREE, pattern)

    def clean_branches(self, pattern: Optional[str] = None) -> Optional[BatchSummary]:
        """Delete branches; a "<remote>/" prefix on the pattern targets that remote."""
        if pattern is not None:
            scope, core_pattern = resolve_scope(pattern, self.backend.list_configured_remotes())
            return self._clean(scope, ResourceKind.BRANCH, core_pattern)

        if self.dry_run:
            # Without a pattern a preview covers local branches
            return self._clean(LOCAL, ResourceKind.BRANCH, None)

        self._require_terminal()
        remotes = self.backend.list_configured_remotes()
        choice = self.selection.choose_scope(remotes)
        if choice is None:
            return None
        scope: Scope = LOCAL if choice == 0 else RemoteScope(remotes[choice - 1])
        return self._clean(scope, ResourceKind.BRANCH, None)

    # Pipeline

    def _clean(self, scope: Scope, kind: ResourceKind, pattern: Optional[str]) -> Optional[BatchSummary]:
        """Run the pipeline for one scope and kind.

        A pattern is compiled before anything is listed, so an invalid
        pattern aborts without side effects.
        """
        regex = compile_pattern(pattern) if pattern is not None else None
        item_label = scope.item_label(kind)

        names = scope.list_resources(self.backend, kind)
        logger.debug(f"Listed {len(names)} {item_label} in {scope.display_label}")
        if not names:
            self.display.empty_result(self.mode, self._none_found_message(scope, kind))
            return None

        if regex is not None:
            matching = filter_names(regex, names)
            if not matching:
                self.display.empty_result(
                    self.mode, self._none_found_message(scope, kind, pattern)
                )
                return None
        else:
            matching = names

        match = self._partition(kind, matching)

        if self.mode != OutputMode.INTERACTIVE:
            self.display.print_listing(match.deletable, self.mode)
            return None

        if pattern is None:
            return self._clean_interactive(scope, kind, match)

        self.display.protected_items(match.protected, "branches")
        if not match.deletable:
            self.display.warning("No deletable branches (all matched are protected).")
            return None

        context = f"matching '{pattern}'"
        if isinstance(scope, RemoteScope):
            context += f" on '{scope.remote}'"
        self.display.items_for_deletion(match.deletable, item_label, context)

        if not self._confirm(item_label, len(match.deletable), scope.display_label):
            return None
        return self.deleter.delete_all(scope, kind, match.deletable, force=self.force)

    def _clean_interactive(self, scope: Scope, kind: ResourceKind, match: MatchResult) -> Optional[BatchSummary]:
        """Multi-select among deletable names, then confirm and delete."""
        self._require_terminal()
        item_label = scope.item_label(kind)
        noun = "worktrees" if kind == ResourceKind.WORKTREE else "branches"

        if not match.deletable:
            if isinstance(scope, RemoteScope):
                message = f"No deletable remote branches on '{scope.remote}' (all are protected)."
            else:
                message = f"No deletable {item_label} (all are protected)."
            self.display.protected_items(match.protected, "branches (not selectable)")
            self.display.warning(message)
            return None

        if isinstance(scope, RemoteScope):
            prompt = f"Select branches to delete from '{scope.remote}'"
        else:
            prompt = f"Select {item_label} to delete"

        result = self.selection.select(match.deletable, prompt, noun, protected=match.protected)
        if not result.confirmed:
            return None

        self.display.items_for_deletion(result.selected, item_label, "selected for deletion")
        if not self._confirm(item_label, len(result.selected), scope.display_label):
            return None
        return self.deleter.delete_all(scope, kind, result.selected, force=self.force)

    def _clean_all_worktrees(self) -> Optional[BatchSummary]:
        names = self.backend.list_worktrees()
        if not names:
            self.display.empty_result(self.mode, "No worktrees found.")
            return None

        if self.mode != OutputMode.INTERACTIVE:
            self.display.print_listing(names, self.mode)
            return None

        self.display.all_items_for_deletion(names)
        if not self._confirm("worktrees", len(names), LOCAL.display_label):
            return None
        return self.deleter.delete_all(LOCAL, ResourceKind.WORKTREE, names, force=self.force)

    @staticmethod
    def _none_found_message(scope: Scope, kind: ResourceKind, pattern: Optional[str] = None) -> str:
        if kind == ResourceKind.WORKTREE:
            noun = "worktrees"
        elif isinstance(scope, RemoteScope):
            noun = "remote branches"
        else:
            noun = "local branches"

        where = f" on '{scope.remote}'" if isinstance(scope, RemoteScope) else ""
        if pattern is None:
            return f"No {noun} found{where}."
        return f"No {noun} matching '{pattern}' found{where}."
