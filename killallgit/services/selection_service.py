"""Interactive selection of resources to delete.

The flow is a small state machine::

    IDLE -> PRESENTING -> CONFIRMED(subset) | EMPTY_SELECTION | CANCELLED

Every terminal state is reachable with a scripted Prompter, so no real
terminal is needed to exercise it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Sequence

from killallgit.formatters import format_confirmation_prompt
from killallgit.ui.prompter import Prompter
from killallgit.utils.logging import get_logger

if TYPE_CHECKING:
    from killallgit.services.display_service import DisplayService

logger = get_logger(__name__)


class SelectionState(Enum):
    """States of the selection flow."""
    IDLE = "idle"
    PRESENTING = "presenting"
    CONFIRMED = "confirmed"
    EMPTY_SELECTION = "empty-selection"
    CANCELLED = "cancelled"


TERMINAL_STATES = {
    SelectionState.CONFIRMED,
    SelectionState.EMPTY_SELECTION,
    SelectionState.CANCELLED,
}


@dataclass
class SelectionResult:
    """Outcome of a selection; ``selected`` is non-empty only when CONFIRMED."""
    state: SelectionState
    selected: List[str] = field(default_factory=list)

    @property
    def confirmed(self) -> bool:
        return self.state == SelectionState.CONFIRMED


class SelectionService:
    """Turns a list of deletable names into a chosen subset or a defined no-op."""

    def __init__(self, prompter: Prompter, display: "DisplayService"):
        self.prompter = prompter
        self.display = display
        self.state = SelectionState.IDLE

    def _transition(self, state: SelectionState) -> None:
        logger.debug(f"Selection state {self.state.value} -> {state.value}")
        self.state = state

    def select(
        self,
        deletable: Sequence[str],
        prompt: str,
        item_label: str,
        protected: Sequence[str] = (),
    ) -> SelectionResult:
        """
        Present deletable names for multi-selection.

        Args:
            deletable: Names offered as choices, in listing order
            prompt: Question shown above the choices
            item_label: Plural noun used in messages ("worktrees", "branches")
            protected: Names shown as information only, never selectable

        Returns:
            SelectionResult in one of the terminal states
        """
        self.state = SelectionState.IDLE
        names = list(deletable)
        self._transition(SelectionState.PRESENTING)

        indices = self.prompter.choose_many(prompt, names, protected)

        if indices is None:
            self._transition(SelectionState.CANCELLED)
            self.display.warning("Selection cancelled.")
            return SelectionResult(self.state)

        if not indices:
            self._transition(SelectionState.EMPTY_SELECTION)
            self.display.warning(f"No {item_label} selected.")
            return SelectionResult(self.state)

        selected = [names[i] for i in sorted(set(indices))]
        self._transition(SelectionState.CONFIRMED)
        return SelectionResult(self.state, selected)

    def choose_scope(self, remotes: Sequence[str]) -> Optional[int]:
        """
        Ask whether to clean local branches or the branches of a remote.

        Returns:
            0 for local branches, i + 1 for remotes[i], None if cancelled
        """
        options = ["Local branches"] + [f"Remote: {remote}" for remote in remotes]
        choice = self.prompter.choose_one("Which branches do you want to clean?", options)
        if choice is None:
            self.display.warning("Selection cancelled.")
        return choice

    def confirm_deletion(self, item_label: str, count: int, target: str, force: bool = False) -> bool:
        """
        Second confirmation step before a batch deletion.

        Args:
            item_label: Plural noun for the items
            count: Number of items about to be deleted
            target: "local" or the remote name
            force: Skip the question and proceed

        Returns:
            True to proceed; anything but an explicit yes is a cancel
        """
        if force:
            return True
        proceed = self.prompter.confirm(format_confirmation_prompt(item_label, count, target))
        if not proceed:
            self.display.warning("Operation cancelled.")
        return proceed
