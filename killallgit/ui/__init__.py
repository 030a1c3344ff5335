"""Terminal prompts for killallgit."""

from .prompter import Prompter, TerminalPrompter

__all__ = ["Prompter", "TerminalPrompter"]
