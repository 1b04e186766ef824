"""A single expandable card in the people list."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Static

from ..config.constants import DETAIL_TEXT
from ..models.person import Person

EXPAND_ICON = "▼"
COLLAPSE_ICON = "▲"


class PersonRow(Widget):
    """
    Card showing a person's avatar, name and age.

    The detail paragraph below the header is only displayed while the row
    carries the ``-expanded`` class.
    """

    DEFAULT_CSS = """
    PersonRow {
        height: auto;
        margin: 0 1 1 1;
        padding: 1 2;
        background: $primary;
        color: $text;
    }

    PersonRow .row-header {
        height: auto;
    }

    PersonRow .avatar {
        width: 5;
        height: 3;
        margin: 0 1 0 0;
        content-align: center middle;
        background: $primary-darken-2;
        text-style: bold;
    }

    PersonRow .row-text {
        width: 1fr;
        height: auto;
    }

    PersonRow .name {
        text-style: bold;
    }

    PersonRow .expand-button {
        min-width: 5;
        width: 5;
    }

    PersonRow .detail {
        display: none;
        padding: 1 1 0 1;
    }

    PersonRow.-expanded .detail {
        display: block;
    }
    """

    class ToggleRequested(Message):
        """The expand button of a row was pressed."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, person: Person, index: int, expanded: bool = False, **kwargs) -> None:
        super().__init__(**kwargs)
        self.person = person
        self.index = index
        self._expanded = expanded

    def compose(self) -> ComposeResult:
        with Horizontal(classes="row-header"):
            avatar = Static(self.person.name[:1].upper(), classes="avatar", markup=False)
            # The image reference is only passed through for display
            avatar.tooltip = self.person.image_ref or None
            yield avatar
            with Vertical(classes="row-text"):
                yield Static(self.person.name, classes="name", markup=False)
                yield Static(self.person.summary, classes="summary", markup=False)
            yield Button(self._icon(), classes="expand-button")
        yield Static(DETAIL_TEXT, classes="detail", markup=False)

    def on_mount(self) -> None:
        self.set_expanded(self._expanded)

    @property
    def expanded(self) -> bool:
        return self._expanded

    def set_expanded(self, expanded: bool) -> None:
        self._expanded = expanded
        self.set_class(expanded, "-expanded")
        self.query_one(".expand-button", Button).label = self._icon()

    def _icon(self) -> str:
        return COLLAPSE_ICON if self._expanded else EXPAND_ICON

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.ToggleRequested(self.index))
