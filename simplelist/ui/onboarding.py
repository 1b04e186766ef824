"""One-time welcome view shown before the people list."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Static

from ..config.constants import CONTINUE_LABEL, WELCOME_TEXT


class OnboardingView(Widget):
    """Centered welcome text with a Continue button."""

    DEFAULT_CSS = """
    OnboardingView {
        height: 1fr;
        align: center middle;
        background: $surface;
    }

    #onboarding-box {
        width: auto;
        height: auto;
        align-horizontal: center;
    }

    #welcome {
        width: auto;
        text-style: bold;
    }

    #continue {
        margin: 1 0 0 0;
    }
    """

    class Continued(Message):
        """The user asked to leave onboarding."""

    def compose(self) -> ComposeResult:
        with Vertical(id="onboarding-box"):
            yield Static(WELCOME_TEXT, id="welcome")
            yield Button(CONTINUE_LABEL, id="continue", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#continue", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "continue":
            event.stop()
            self.post_message(self.Continued())
