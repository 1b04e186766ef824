"""Top-level screen state: onboarding first, then the main list."""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class AppState:
    """
    Decides which top-level view is active.

    Two states, Onboarding and Main. Dismissing onboarding moves to Main,
    which is terminal for the session.
    """

    def __init__(
        self,
        show_onboarding: bool = True,
        on_onboarding_dismissed: Callable[[], None] | None = None,
    ):
        self._onboarding_active = show_onboarding
        self.on_onboarding_dismissed = on_onboarding_dismissed

    def is_onboarding_active(self) -> bool:
        return self._onboarding_active

    def dismiss_onboarding(self) -> None:
        """Leave onboarding. Safe to call any number of times."""
        if not self._onboarding_active:
            return
        self._onboarding_active = False
        logger.info("Onboarding dismissed")
        if self.on_onboarding_dismissed:
            self.on_onboarding_dismissed()
