"""Sequential, failure-tolerant batch deletion."""

from typing import TYPE_CHECKING, Sequence

from killallgit.models.resource import BatchSummary, DeletionOutcome, ResourceKind
from killallgit.models.scope import Scope
from killallgit.utils.logging import get_logger

if TYPE_CHECKING:
    from killallgit.services.display_service import DisplayService
    from killallgit.services.git import GitBackend

logger = get_logger(__name__)


class BatchDeleter:
    """Deletes resources one at a time through the backend.

    A failed item is recorded and the batch moves on; nothing is retried and
    nothing is rolled back.
    """

    def __init__(self, backend: "GitBackend", display: "DisplayService"):
        self.backend = backend
        self.display = display

    def delete_one(self, scope: Scope, kind: ResourceKind, name: str, force: bool) -> DeletionOutcome:
        """
        Delete a single resource.

        Worktrees whose managed directory has disappeared fail with
        "path not found" without calling git.
        """
        if kind == ResourceKind.WORKTREE:
            path = self.backend.worktree_path(name)
            if not path.exists():
                logger.debug(f"Worktree path {path} does not exist")
                return DeletionOutcome.failure(name, "path not found")

        try:
            success, error_message = scope.delete_one(self.backend, kind, name, force)
        except OSError as e:
            # git itself could not be started
            success, error_message = False, str(e)

        if success:
            return DeletionOutcome.ok(name)
        return DeletionOutcome.failure(name, error_message or "Unknown error")

    def delete_all(
        self, scope: Scope, kind: ResourceKind, names: Sequence[str], force: bool = False
    ) -> BatchSummary:
        """
        Delete every name in order, reporting each outcome as it completes.

        Args:
            scope: Where the resources live
            kind: Worktrees or branches
            names: Names to delete, processed in this order
            force: Remove dirty worktrees / force-delete unmerged local branches

        Returns:
            BatchSummary with succeeded and failed counts
        """
        summary = BatchSummary()
        item_label = scope.item_label(kind)
        logger.info(f"Deleting {len(names)} {item_label} from {scope.display_label}")

        self.display.batch_started()
        for name in names:
            self.display.deletion_started(name)
            outcome = self.delete_one(scope, kind, name, force)
            self.display.deletion_result(outcome)
            summary.record(outcome)
            if not outcome.success:
                logger.info(f"Failed to delete {name}: {outcome.message}")

        self.display.deletion_summary(summary, item_label, scope.display_label)
        if summary.has_failures:
            logger.warning(f"{summary.failed} of {len(names)} {item_label} could not be deleted")
        return summary
