"""Interactive main menu shown when no subcommand is given."""

from enum import Enum
from typing import Callable, Dict, Optional

from killallgit.constants import SYMBOL_BACK
from killallgit.ui.prompter import Prompter
from killallgit.utils.logging import get_logger

logger = get_logger(__name__)


class MenuState(Enum):
    """Screens of the main menu."""
    MAIN = "main"
    ADD = "add"
    CLEAN = "clean"
    DONE = "done"


MAIN_OPTIONS = ["Add", "Clean", "Exit"]
ADD_OPTIONS = ["Worktree", SYMBOL_BACK]
CLEAN_OPTIONS = ["Worktrees", "Branches", SYMBOL_BACK]


class InteractiveMenu:
    """Main menu state machine: MAIN -> ADD | CLEAN -> action -> DONE.

    "Back" and escape in a submenu return to MAIN; "Exit" or escape in MAIN
    ends the menu. At most one action runs per invocation.
    """

    def __init__(self, cleaner, prompter: Prompter):
        self.cleaner = cleaner
        self.prompter = prompter
        self.state = MenuState.MAIN

    def run(self) -> None:
        self.state = MenuState.MAIN
        while self.state != MenuState.DONE:
            handler = self._handlers()[self.state]
            next_state = handler()
            logger.debug(f"Menu {self.state.value} -> {next_state.value}")
            self.state = next_state

    def _handlers(self) -> Dict[MenuState, Callable[[], MenuState]]:
        return {
            MenuState.MAIN: self._main,
            MenuState.ADD: self._add,
            MenuState.CLEAN: self._clean,
        }

    def _main(self) -> MenuState:
        choice = self.prompter.choose_one("What would you like to do?", MAIN_OPTIONS)
        if choice == 0:
            return MenuState.ADD
        if choice == 1:
            return MenuState.CLEAN
        return MenuState.DONE

    def _add(self) -> MenuState:
        choice = self.prompter.choose_one("Add what?", ADD_OPTIONS)
        if choice != 0:
            return MenuState.MAIN

        name: Optional[str] = self.prompter.ask_text("Worktree name")
        if not name:
            return MenuState.MAIN
        self.cleaner.add_worktree(name)
        return MenuState.DONE

    def _clean(self) -> MenuState:
        choice = self.prompter.choose_one("Clean what?", CLEAN_OPTIONS)
        if choice == 0:
            self.cleaner.clean_worktrees()
            return MenuState.DONE
        if choice == 1:
            self.cleaner.clean_branches()
            return MenuState.DONE
        return MenuState.MAIN
