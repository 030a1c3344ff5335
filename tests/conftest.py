"""Pytest fixtures for killallgit tests"""
import io
import tempfile
from pathlib import Path

import git
import pytest
from rich.console import Console

from killallgit.constants import PROTECTED_ENV_VAR
from killallgit.services.display_service import DisplayService
from killallgit.ui.prompter import Prompter


class FakeBackend:
    """In-memory stand-in for GitBackend that records every call."""

    def __init__(self, base_path, worktrees=None, local_branches=None, remote_branches=None, remotes=None):
        self.base_path = Path(base_path)
        self.worktrees = list(worktrees or [])
        self.local_branches = list(local_branches or [])
        self.remote_branches = {k: list(v) for k, v in (remote_branches or {}).items()}
        self.remotes = list(remotes if remotes is not None else self.remote_branches.keys())
        self.failing = {}  # name -> error message
        self.calls = []

    def worktree_path(self, name):
        return self.base_path / name

    def make_worktree_dirs(self, *names):
        for name in names or self.worktrees:
            self.worktree_path(name).mkdir(parents=True, exist_ok=True)

    def list_worktrees(self):
        self.calls.append(("list_worktrees",))
        return list(self.worktrees)

    def list_local_branches(self):
        self.calls.append(("list_local_branches",))
        return list(self.local_branches)

    def list_remote_branches(self, remote):
        self.calls.append(("list_remote_branches", remote))
        return list(self.remote_branches.get(remote, []))

    def list_configured_remotes(self):
        return list(self.remotes)

    def _result(self, name):
        if name in self.failing:
            return False, self.failing[name]
        return True, None

    def delete_worktree(self, name, force=False):
        self.calls.append(("delete_worktree", name, force))
        success, error = self._result(name)
        if success:
            self.worktrees.remove(name)
        return success, error

    def delete_local_branch(self, name, force=False):
        self.calls.append(("delete_local_branch", name, force))
        success, error = self._result(name)
        if success:
            self.local_branches.remove(name)
        return success, error

    def delete_remote_branch(self, remote, name):
        self.calls.append(("delete_remote_branch", remote, name))
        success, error = self._result(name)
        if success:
            self.remote_branches[remote].remove(name)
        return success, error

    def create_worktree(self, name):
        self.calls.append(("create_worktree", name))
        path = self.worktree_path(name)
        path.mkdir(parents=True, exist_ok=True)
        self.worktrees.append(name)
        return path

    @property
    def deleted(self):
        return [call for call in self.calls if call[0].startswith("delete_")]


class FakePrompter(Prompter):
    """Prompter that replays scripted answers and records the questions."""

    def __init__(self, one=(), many=(), confirm=(), text=()):
        self.one_answers = list(one)
        self.many_answers = list(many)
        self.confirm_answers = list(confirm)
        self.text_answers = list(text)
        self.questions = []

    def choose_one(self, prompt, options):
        self.questions.append(("one", prompt, list(options)))
        return self.one_answers.pop(0)

    def choose_many(self, prompt, options, protected=()):
        self.questions.append(("many", prompt, list(options), list(protected)))
        return self.many_answers.pop(0)

    def confirm(self, prompt):
        self.questions.append(("confirm", prompt))
        return self.confirm_answers.pop(0)

    def ask_text(self, prompt):
        self.questions.append(("text", prompt))
        return self.text_answers.pop(0)


@pytest.fixture(autouse=True)
def clean_protected_env(monkeypatch):
    """Keep the developer's own protected-name override out of the tests."""
    monkeypatch.delenv(PROTECTED_ENV_VAR, raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a configuration dictionary for a forced, non-interactive run."""
    return {
        'protected_branches': [],
        'force': True,
        'dry_run': False,
        'json_output': False,
        'verbose': False,
        'debug': False,
        'interactive': False,
    }


@pytest.fixture
def output_console():
    """Console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)


@pytest.fixture
def display(output_console):
    """DisplayService rendering into output_console."""
    return DisplayService(output_console)


@pytest.fixture
def output(output_console):
    """Callable returning everything printed so far."""
    return lambda: output_console.file.getvalue()


@pytest.fixture
def fake_backend(temp_dir):
    """Backend with a few worktrees, local branches and an origin remote."""
    return FakeBackend(
        temp_dir / ".worktrees" / "repo",
        worktrees=["wt-one", "wt-two", "feature-wt"],
        local_branches=["feature/a", "feature/b", "main", "bugfix/fix-123"],
        remote_branches={
            "origin": ["develop", "feature/a", "feature/remote-only", "main"],
            "upstream": ["main", "release/1.0"],
        },
        remotes=["origin", "upstream"],
    )


def _init_repo(repo_path: Path) -> git.Repo:
    repo = git.Repo.init(repo_path)
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")
    repo.git.branch('-M', 'main')
    return repo


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with a single commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = _init_repo(repo_path)

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Repository with feature and bugfix branches next to main."""
    for name in ["feature/a", "feature/b", "bugfix/fix-123", "develop"]:
        git_repo.git.branch(name)
    yield git_repo


@pytest.fixture
def git_repo_with_remote(git_repo_with_branches, temp_dir):
    """Repository whose branches are all pushed to a bare 'origin' remote."""
    repo = git_repo_with_branches
    bare_path = temp_dir / "bare.git"
    bare = git.Repo.init(bare_path, bare=True)

    repo.create_remote('origin', str(bare_path))
    repo.git.push('-u', 'origin', 'main')
    for name in ["feature/a", "feature/b", "bugfix/fix-123", "develop"]:
        repo.git.push('origin', name)

    yield repo

    bare.close()


def remote_branch_names(repo: git.Repo, remote: str = "origin") -> list:
    """Branches present in the remote repository itself."""
    url = repo.remote(remote).url
    output = git.Repo(url).git.branch("--format=%(refname:short)")
    return [line.strip() for line in output.splitlines() if line.strip()]
