"""Tests for BatchDeleter"""
from unittest.mock import Mock

from killallgit.models.resource import ResourceKind
from killallgit.models.scope import LOCAL, RemoteScope
from killallgit.services.batch_deleter import BatchDeleter


class TestDeleteAll:
    """Test sequential, failure-tolerant deletion."""

    def test_all_succeed(self, fake_backend, display, output):
        """Test a clean batch reports every deletion."""
        deleter = BatchDeleter(fake_backend, display)

        summary = deleter.delete_all(LOCAL, ResourceKind.BRANCH, ["feature/a", "feature/b"])

        assert summary.succeeded == 2
        assert summary.failed == 0
        assert fake_backend.local_branches == ["main", "bugfix/fix-123"]
        assert "Deleted 2 local branches from local" in output()

    def test_failure_does_not_stop_batch(self, fake_backend, display, output):
        """Test the item after a failure is still attempted."""
        fake_backend.failing["feature/b"] = "error: branch 'feature/b' not found"
        deleter = BatchDeleter(fake_backend, display)

        summary = deleter.delete_all(
            LOCAL, ResourceKind.BRANCH, ["feature/a", "feature/b", "bugfix/fix-123"]
        )

        assert summary.succeeded == 2
        assert summary.failed == 1
        assert [call[1] for call in fake_backend.deleted] == ["feature/a", "feature/b", "bugfix/fix-123"]
        assert [o.success for o in summary.outcomes] == [True, False, True]
        assert summary.outcomes[1].message == "error: branch 'feature/b' not found"
        assert "Failed to delete 1 local branches" in output()

    def test_order_preserved(self, fake_backend, display):
        """Test names are processed in the given order."""
        deleter = BatchDeleter(fake_backend, display)
        deleter.delete_all(LOCAL, ResourceKind.BRANCH, ["bugfix/fix-123", "feature/a"])

        assert [call[1] for call in fake_backend.deleted] == ["bugfix/fix-123", "feature/a"]

    def test_force_passed_through(self, fake_backend, display):
        """Test force reaches the local branch delete."""
        deleter = BatchDeleter(fake_backend, display)
        deleter.delete_all(LOCAL, ResourceKind.BRANCH, ["feature/a"], force=True)

        assert fake_backend.deleted == [("delete_local_branch", "feature/a", True)]

    def test_remote_scope(self, fake_backend, display, output):
        """Test remote deletions go through the remote push-delete."""
        deleter = BatchDeleter(fake_backend, display)

        summary = deleter.delete_all(RemoteScope("origin"), ResourceKind.BRANCH, ["feature/a"])

        assert summary.succeeded == 1
        assert fake_backend.deleted == [("delete_remote_branch", "origin", "feature/a")]
        assert "Deleted 1 remote branches from origin" in output()

    def test_empty_batch(self, fake_backend, display):
        """Test an empty batch deletes nothing."""
        summary = BatchDeleter(fake_backend, display).delete_all(LOCAL, ResourceKind.BRANCH, [])

        assert summary.succeeded == 0
        assert summary.failed == 0
        assert fake_backend.deleted == []


class TestDeleteWorktree:
    """Test worktree-specific deletion checks."""

    def test_existing_worktree_removed(self, fake_backend, display):
        """Test a worktree whose directory exists is removed."""
        fake_backend.make_worktree_dirs("wt-one")
        deleter = BatchDeleter(fake_backend, display)

        outcome = deleter.delete_one(LOCAL, ResourceKind.WORKTREE, "wt-one", force=False)

        assert outcome.success
        assert fake_backend.deleted == [("delete_worktree", "wt-one", False)]

    def test_missing_path_fails_without_git(self, fake_backend, display):
        """Test a missing directory fails with "path not found" and no backend call."""
        deleter = BatchDeleter(fake_backend, display)

        outcome = deleter.delete_one(LOCAL, ResourceKind.WORKTREE, "wt-two", force=True)

        assert not outcome.success
        assert outcome.message == "path not found"
        assert fake_backend.deleted == []

    def test_spawn_failure_recorded(self, fake_backend, display):
        """Test an OSError from the backend becomes a failed outcome."""
        fake_backend.delete_local_branch = Mock(side_effect=OSError("git not found"))
        deleter = BatchDeleter(fake_backend, display)

        summary = deleter.delete_all(LOCAL, ResourceKind.BRANCH, ["feature/a", "feature/b"])

        assert summary.failed == 2
        assert summary.outcomes[0].message == "git not found"

    def test_missing_error_message(self, fake_backend, display):
        """Test a failure without a message still carries one."""
        fake_backend.delete_local_branch = Mock(return_value=(False, None))
        outcome = BatchDeleter(fake_backend, display).delete_one(
            LOCAL, ResourceKind.BRANCH, "feature/a", force=False
        )

        assert outcome.message == "Unknown error"
