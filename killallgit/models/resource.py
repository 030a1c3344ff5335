"""Resource model and deletion results"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional


class ResourceKind(Enum):
    """Kind of version-control resource."""
    WORKTREE = "worktree"
    BRANCH = "branch"


@dataclass(frozen=True)
class MatchResult:
    """Partition of a name list into protected and deletable names."""
    protected: List[str] = field(default_factory=list)
    deletable: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class DeletionOutcome:
    """Result of a single deletion attempt."""
    name: str
    success: bool
    message: Optional[str] = None  # Set on failure only

    @classmethod
    def ok(cls, name: str) -> "DeletionOutcome":
        return cls(name=name, success=True)

    @classmethod
    def failure(cls, name: str, message: str) -> "DeletionOutcome":
        return cls(name=name, success=False, message=message)


@dataclass
class BatchSummary:
    """Counts of a finished batch, folded from outcomes in processing order."""
    succeeded: int = 0
    failed: int = 0
    outcomes: List[DeletionOutcome] = field(default_factory=list)

    def record(self, outcome: DeletionOutcome) -> None:
        self.outcomes.append(outcome)
        if outcome.success:
            self.succeeded += 1
        else:
            self.failed += 1

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[DeletionOutcome]) -> "BatchSummary":
        summary = cls()
        for outcome in outcomes:
            summary.record(outcome)
        return summary

    @property
    def has_failures(self) -> bool:
        return self.failed > 0
