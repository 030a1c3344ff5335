"""Full-screen prompt applications built on Textual.

Each application runs until the operator answers and returns the answer
from ``App.run()``: a list of chosen indices, a single index, or a bool.
Escape always cancels.
"""

from typing import List, Optional, Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.widgets import Button, Footer, OptionList, SelectionList, Static

from killallgit.constants import MULTI_SELECT_HINT


class MultiSelectApp(App[Optional[List[int]]]):
    """Pick any number of items; returns chosen indices or None when cancelled."""

    DEFAULT_CSS = """
    #prompt {
        padding: 1 1 0 1;
        color: $accent;
        text-style: bold;
    }

    #protected-note {
        padding: 0 1;
        color: $text-muted;
    }

    SelectionList {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("enter", "confirm", "Confirm", priority=True),
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, prompt: str, items: Sequence[str], protected: Sequence[str] = ()):
        super().__init__()
        self.prompt = prompt
        self.items = list(items)
        self.protected = list(protected)

    def compose(self) -> ComposeResult:
        yield Static(Text(f"{self.prompt} ({MULTI_SELECT_HINT})"), id="prompt")
        if self.protected:
            note = "Protected (not selectable): " + ", ".join(self.protected)
            yield Static(Text(note), id="protected-note")
        yield SelectionList[int](
            *[(Text(item, style="bold yellow"), index) for index, item in enumerate(self.items)],
            id="choices",
        )
        yield Footer()

    def action_confirm(self) -> None:
        selected = self.query_one("#choices", SelectionList).selected
        # selection order is click order; report in listing order
        self.exit(sorted(selected))

    def action_cancel(self) -> None:
        self.exit(None)


class SingleSelectApp(App[Optional[int]]):
    """Pick exactly one item; returns its index or None when cancelled."""

    DEFAULT_CSS = """
    #prompt {
        padding: 1 1 0 1;
        text-style: bold;
    }

    OptionList {
        height: auto;
        max-height: 1fr;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, prompt: str, items: Sequence[str]):
        super().__init__()
        self.prompt = prompt
        self.items = list(items)

    def compose(self) -> ComposeResult:
        yield Static(Text(self.prompt), id="prompt")
        yield OptionList(*[Text(item, style="cyan") for item in self.items], id="choices")
        yield Footer()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Handle enter or click on an option."""
        self.exit(event.option_index)

    def action_cancel(self) -> None:
        self.exit(None)


class ConfirmApp(App[bool]):
    """Binary cancel/proceed dialog. "No" holds focus, so enter alone cancels."""

    DEFAULT_CSS = """
    Screen {
        align: center middle;
    }

    #confirm-dialog {
        width: 80%;
        height: auto;
        border: thick $background 80%;
        background: $surface;
        padding: 1 2;
    }

    #confirm-message {
        width: 100%;
        height: auto;
        padding: 1 0;
        color: $error;
        text-style: bold;
    }

    #button-container {
        width: 100%;
        height: auto;
        align: center middle;
        padding: 1 0;
    }

    Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    AUTO_FOCUS = "#no"

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-dialog"):
            yield Static(Text(self.message), id="confirm-message")
            with Container(id="button-container"):
                yield Button("❌ No, cancel", variant="primary", id="no")
                yield Button("💥 Yes, delete them!", variant="error", id="yes")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press."""
        self.exit(event.button.id == "yes")

    def action_cancel(self) -> None:
        self.exit(False)
