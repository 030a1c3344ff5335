"""Prompt front-ends used by the selection state machine and the menu."""

from typing import List, Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt

from killallgit.ui.screens import ConfirmApp, MultiSelectApp, SingleSelectApp


class Prompter:
    """Questions the interactive flows can ask.

    ``None`` from a choice method means the operator cancelled (escape).
    """

    def choose_one(self, prompt: str, options: Sequence[str]) -> Optional[int]:
        """Index of the chosen option, or None if cancelled."""
        raise NotImplementedError

    def choose_many(
        self, prompt: str, options: Sequence[str], protected: Sequence[str] = ()
    ) -> Optional[List[int]]:
        """Indices of chosen options (possibly empty), or None if cancelled.

        ``protected`` names are shown for information only.
        """
        raise NotImplementedError

    def confirm(self, prompt: str) -> bool:
        """True only on an explicit affirmative answer."""
        raise NotImplementedError

    def ask_text(self, prompt: str) -> Optional[str]:
        """Free-text answer, or None if nothing was entered."""
        raise NotImplementedError


class TerminalPrompter(Prompter):
    """Prompter backed by Textual applications and Rich prompts."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def choose_one(self, prompt: str, options: Sequence[str]) -> Optional[int]:
        return SingleSelectApp(prompt, options).run()

    def choose_many(
        self, prompt: str, options: Sequence[str], protected: Sequence[str] = ()
    ) -> Optional[List[int]]:
        return MultiSelectApp(prompt, options, protected).run()

    def confirm(self, prompt: str) -> bool:
        return bool(ConfirmApp(prompt).run())

    def ask_text(self, prompt: str) -> Optional[str]:
        answer = Prompt.ask(f"[cyan]{prompt}[/cyan]", console=self.console, default="", show_default=False)
        return answer.strip() or None
