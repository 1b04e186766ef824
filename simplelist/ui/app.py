"""
SimpleListApp - the Textual application.

Owns the session state (onboarding flag, scroll controller, expansion
flags) and swaps the onboarding view for the people list once onboarding is
dismissed. State objects outlive the widgets that render them.
"""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Footer

from ..config.constants import DEFAULT_SCROLL_DURATION, DEFAULT_THEME
from ..config.ui_config import set_theme
from ..models.person import PersonList
from .onboarding import OnboardingView
from .people_list import PeopleList
from .state import AppState, ItemExpansionState, ListController
from .themes import get_opposite_theme, register_all_themes

logger = logging.getLogger(__name__)


class SimpleListApp(App[None]):
    """Onboarding splash followed by the expandable people list."""

    TITLE = "simplelist"

    CSS = """
    #view-mount {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("u", "scroll_top", "Up"),
        Binding("t", "toggle_theme", "Theme"),
    ]

    def __init__(
        self,
        people: PersonList,
        *,
        show_onboarding: bool = True,
        theme_name: str = DEFAULT_THEME,
        scroll_duration: float = DEFAULT_SCROLL_DURATION,
        persist_theme: bool = True,
    ):
        super().__init__()
        self._people = people
        self.theme_name = theme_name
        self.scroll_duration = scroll_duration
        self.persist_theme = persist_theme

        self.app_state = AppState(
            show_onboarding=show_onboarding,
            on_onboarding_dismissed=self._on_onboarding_dismissed,
        )
        self.list_controller = ListController(item_count=len(people))
        self.expansion_state = ItemExpansionState()

    @property
    def people(self) -> PersonList:
        return self._people

    def compose(self) -> ComposeResult:
        with Container(id="view-mount"):
            if self.app_state.is_onboarding_active():
                yield OnboardingView(id="onboarding")
            else:
                yield self._build_people_list()
        yield Footer()

    def on_mount(self) -> None:
        register_all_themes(self)
        self.theme = self.theme_name
        logger.info(
            "App started (people=%d, onboarding=%s, theme=%s)",
            len(self._people),
            self.app_state.is_onboarding_active(),
            self.theme_name,
        )

    def _build_people_list(self) -> PeopleList:
        return PeopleList(
            self._people,
            self.list_controller,
            self.expansion_state,
            scroll_duration=self.scroll_duration,
            id="people-list",
        )

    def on_onboarding_view_continued(self, message: OnboardingView.Continued) -> None:
        message.stop()
        self.app_state.dismiss_onboarding()

    def _on_onboarding_dismissed(self) -> None:
        self.call_later(self._show_people)

    async def _show_people(self) -> None:
        """Replace the onboarding view with the people list."""
        mount_point = self.query_one("#view-mount", Container)
        await mount_point.remove_children()
        await mount_point.mount(self._build_people_list())

    # -- Actions --

    def action_scroll_top(self) -> None:
        """Animate the list back to the first row."""
        if self.app_state.is_onboarding_active():
            return
        self.list_controller.scroll_to_top()

    def action_toggle_theme(self) -> None:
        """Switch between the dark and light themes."""
        self.theme_name = get_opposite_theme(self.theme_name)
        self.theme = self.theme_name
        if self.persist_theme:
            set_theme(self.theme_name)
