"""
PeopleList - scrollable column of PersonRow cards with an "Up" button.

The widget is the rendering side of ListController and ItemExpansionState:
it reports the first visible row after every scroll change, shows the Up
button when the controller says so, and redraws a single row when its
expansion flag flips.
"""

from __future__ import annotations

import asyncio
import logging
from bisect import bisect_right
from collections.abc import Hashable, Sequence

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.css.query import NoMatches
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Static

from ..config.constants import DEFAULT_SCROLL_DURATION, UP_LABEL
from ..models.person import PersonList
from .person_row import PersonRow
from .state import ItemExpansionState, ListController

logger = logging.getLogger(__name__)


def first_visible_row(row_bottoms: Sequence[float], scroll_y: float) -> int:
    """Index of the first row whose bottom edge lies below ``scroll_y``.

    ``row_bottoms`` must be ascending. A row that ends exactly at the top of
    the viewport is already scrolled out of view.
    """
    if not row_bottoms:
        return 0
    return min(bisect_right(row_bottoms, scroll_y), len(row_bottoms) - 1)


class PeopleScroll(VerticalScroll):
    """Scroll container that announces scrolling started by the user."""

    class UserScrolled(Message):
        """Mouse wheel or keyboard scroll, as opposed to a programmatic one."""

    def _user_scrolled(self) -> None:
        self.post_message(self.UserScrolled())

    def on_mouse_scroll_down(self) -> None:
        self._user_scrolled()

    def on_mouse_scroll_up(self) -> None:
        self._user_scrolled()

    def action_scroll_down(self) -> None:
        self._user_scrolled()
        super().action_scroll_down()

    def action_scroll_up(self) -> None:
        self._user_scrolled()
        super().action_scroll_up()

    def action_page_down(self) -> None:
        self._user_scrolled()
        super().action_page_down()

    def action_page_up(self) -> None:
        self._user_scrolled()
        super().action_page_up()

    def action_scroll_home(self) -> None:
        self._user_scrolled()
        super().action_scroll_home()

    def action_scroll_end(self) -> None:
        self._user_scrolled()
        super().action_scroll_end()


class PeopleList(Widget):
    """The main screen: every person as an expandable card."""

    DEFAULT_CSS = """
    PeopleList {
        height: 1fr;
    }

    #people-scroll {
        height: 1fr;
    }

    #people-empty {
        width: 100%;
        content-align: center middle;
        color: $text-muted;
    }

    #up-bar {
        dock: bottom;
        height: auto;
        align: center middle;
        display: none;
    }

    #up-bar.visible {
        display: block;
    }

    #up-button {
        background: $secondary;
        min-width: 10;
    }
    """

    def __init__(
        self,
        people: PersonList,
        controller: ListController,
        expansion: ItemExpansionState,
        scroll_duration: float = DEFAULT_SCROLL_DURATION,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.people = people
        self.controller = controller
        self.expansion = expansion
        self.scroll_duration = scroll_duration

    def compose(self) -> ComposeResult:
        with PeopleScroll(id="people-scroll"):
            if self.people.is_empty:
                yield Static("No people to show", id="people-empty")
            for index, person in enumerate(self.people):
                yield PersonRow(
                    person,
                    index,
                    expanded=self.expansion.is_expanded(index),
                    id=f"person-{index}",
                )
        with Horizontal(id="up-bar"):
            yield Button(UP_LABEL, id="up-button")

    def on_mount(self) -> None:
        self.controller.animator = self._animate_to_row
        self.controller.on_top_button_change = self._set_top_button_visible
        self.expansion.on_toggle = self._on_row_toggled

        scroll = self.query_one(PeopleScroll)
        self.watch(scroll, "scroll_y", self._on_scroll_y, init=False)
        self._set_top_button_visible(self.controller.should_show_top_button())
        scroll.focus()
        logger.info("People list mounted with %d rows", len(self.people))

    def on_unmount(self) -> None:
        self.controller.interrupt()
        self.controller.animator = None
        self.controller.on_top_button_change = None
        self.expansion.on_toggle = None

    # -- Scroll position reporting --

    def first_visible_index(self) -> int:
        scroll = self.query_one(PeopleScroll)
        bottoms = [row.virtual_region.bottom for row in scroll.query(PersonRow)]
        return first_visible_row(bottoms, scroll.scroll_y)

    def _on_scroll_y(self, scroll_y: float) -> None:
        self.controller.on_scroll_position_changed(self.first_visible_index())

    def on_people_scroll_user_scrolled(self, message: PeopleScroll.UserScrolled) -> None:
        message.stop()
        self.controller.interrupt()

    # -- Controller callbacks --

    def _set_top_button_visible(self, visible: bool) -> None:
        self.query_one("#up-bar", Horizontal).set_class(visible, "visible")

    def _on_row_toggled(self, key: Hashable, expanded: bool) -> None:
        try:
            row = self.query_one(f"#person-{key}", PersonRow)
        except NoMatches:
            logger.debug("No row rendered for key %r", key)
            return
        row.set_expanded(expanded)

    async def _animate_to_row(self, index: int) -> None:
        """Scroll so ``index`` is the first visible row, resolving when done."""
        scroll = self.query_one(PeopleScroll)
        rows = list(scroll.query(PersonRow))
        target_y = rows[index].virtual_region.y if 0 < index < len(rows) else 0
        if scroll.scroll_y == target_y:
            return

        if self.scroll_duration <= 0:
            scroll.scroll_to(y=target_y, animate=False)
            return

        done = asyncio.Event()
        scroll.scroll_to(
            y=target_y,
            animate=True,
            duration=self.scroll_duration,
            on_complete=done.set,
        )
        await done.wait()

    # -- User actions --

    def on_person_row_toggle_requested(self, message: PersonRow.ToggleRequested) -> None:
        message.stop()
        self.expansion.toggle(message.index)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "up-button":
            event.stop()
            self.controller.scroll_to_top()
