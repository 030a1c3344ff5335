"""Protection policy for branch names"""

from typing import Iterable, List, Sequence, Tuple

from killallgit.constants import DEFAULT_PROTECTED_BRANCHES
from killallgit.models.resource import MatchResult


class ProtectionPolicy:
    """Decides whether a branch name is protected from deletion.

    The built-in names are always protected; ``extra_names`` comes from
    configuration and is fixed for the lifetime of the policy.
    """

    def __init__(self, extra_names: Iterable[str] = ()):
        self.builtin_names: Tuple[str, ...] = DEFAULT_PROTECTED_BRANCHES
        self.extra_names: Tuple[str, ...] = tuple(
            name.strip() for name in extra_names if name.strip()
        )

    @property
    def names(self) -> List[str]:
        return list(self.builtin_names) + [n for n in self.extra_names if n not in self.builtin_names]

    def is_protected(self, name: str) -> bool:
        """Exact, case-sensitive match against built-in and configured names."""
        return name in self.builtin_names or name in self.extra_names

    def partition(self, names: Sequence[str]) -> MatchResult:
        """Split names into protected and deletable, preserving order."""
        protected = []
        deletable = []
        for name in names:
            if self.is_protected(name):
                protected.append(name)
            else:
                deletable.append(name)
        return MatchResult(protected=protected, deletable=deletable)

