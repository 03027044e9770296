"""About / help dialog."""

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label

from smart_todo import __version__

HELP_TEXT = (
    "If there are any problems, please reach our technical team.\n"
    "Filters combine: a task is shown only when it matches every one.\n"
    "The search box looks in name, description, category, priority and due date."
)


class AboutScreen(ModalScreen[None]):
    """Shows version and help text with a single Close button."""

    DEFAULT_CSS = """
    AboutScreen {
        align: center middle;
    }

    #about {
        width: 60;
        height: auto;
        padding: 1 2;
        border: thick $accent;
        background: $surface;
    }

    #about-heading {
        text-style: bold;
        margin-bottom: 1;
    }

    #about-message {
        margin-bottom: 1;
    }
    """

    BINDINGS = [Binding("escape", "close", "Close")]

    def compose(self) -> ComposeResult:
        with Vertical(id="about"):
            yield Label("Need help? We're here.", id="about-heading")
            yield Label(f"Smart ToDo {__version__}\n\n{HELP_TEXT}", id="about-message")
            yield Button("Close", variant="primary", id="close")

    @on(Button.Pressed, "#close")
    def action_close(self) -> None:
        self.dismiss(None)
