"""
Scroll state for the people list.

The list widget reports the index of its first visible row after every
scroll change. From that single number the controller derives whether the
"Up" button should be shown, and it runs the animated scroll back to the
first row as a background task.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from ...config.constants import DEFAULT_SCROLL_STEP_DELAY

logger = logging.getLogger(__name__)

# Async callable that scrolls the rendered list so ``target_index`` becomes
# the first visible row. Progress is reported back through
# ListController.on_scroll_position_changed like any other scroll.
ScrollAnimator = Callable[[int], Awaitable[None]]


class ListController:
    """
    Owns the scroll position of the displayed list.

    - Derives ``show_top_button`` from the reported first visible index
    - Runs scroll-to-top in a single task slot: a new request or a manual
      scroll cancels the one in flight
    - Notifies ``on_top_button_change`` only when the derived flag flips
    """

    def __init__(
        self,
        item_count: int,
        animator: ScrollAnimator | None = None,
        on_top_button_change: Callable[[bool], None] | None = None,
        step_delay: float = DEFAULT_SCROLL_STEP_DELAY,
    ):
        """Initialize the controller.

        Args:
            item_count: Number of rows in the displayed list
            animator: Scrolls the rendered list; when omitted the controller
                steps its own position toward the target
            on_top_button_change: Callback when the "Up" button should
                appear or disappear
            step_delay: Seconds between steps of the built-in animator
        """
        self._item_count = max(0, item_count)
        self.animator = animator
        self.on_top_button_change = on_top_button_change
        self.step_delay = step_delay

        self._position: int = 0
        self._show_top_button: bool = False
        self._scroll_task: asyncio.Task[None] | None = None

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def position(self) -> int:
        """Most recently reported first visible index, after clamping."""
        return self._position

    @property
    def scroll_pending(self) -> asyncio.Task[None] | None:
        """The in-flight scroll-to-top task, if any."""
        if self._scroll_task is not None and self._scroll_task.done():
            return None
        return self._scroll_task

    def on_scroll_position_changed(self, first_visible_index: Any) -> None:
        """Record the first visible row index and recompute the button flag."""
        index = self._clamp(first_visible_index)
        self._position = index

        show = index > 0
        if show == self._show_top_button:
            return
        self._show_top_button = show
        logger.debug("Top button %s at index %d", "shown" if show else "hidden", index)
        if self.on_top_button_change:
            self.on_top_button_change(show)

    def should_show_top_button(self) -> bool:
        return self._show_top_button

    def scroll_to_top(self) -> asyncio.Task[None]:
        """Start the animated scroll back to the first row.

        Must be called from a running event loop. Any scroll-to-top already
        in flight is cancelled and replaced.
        """
        self._cancel_pending("superseded")
        task = asyncio.get_running_loop().create_task(self._run_scroll(0))
        self._scroll_task = task
        return task

    def interrupt(self) -> None:
        """Cancel an in-flight scroll-to-top because the user scrolled."""
        self._cancel_pending("interrupted by user scroll")

    def _cancel_pending(self, reason: str) -> None:
        task = self._scroll_task
        self._scroll_task = None
        if task is not None and not task.done():
            logger.debug("Cancelling scroll-to-top: %s", reason)
            task.cancel()

    async def _run_scroll(self, target: int) -> None:
        try:
            if self.animator is not None:
                await self.animator(target)
            else:
                await self._step_to(target)
        except asyncio.CancelledError:
            logger.debug("Scroll to %d cancelled at index %d", target, self._position)
            raise
        finally:
            if self._scroll_task is asyncio.current_task():
                self._scroll_task = None

    async def _step_to(self, target: int) -> None:
        """Halve the distance to ``target`` on every step."""
        while self._position > target:
            await asyncio.sleep(self.step_delay)
            distance = self._position - target
            self.on_scroll_position_changed(target + distance // 2)

    def _clamp(self, value: Any) -> int:
        if self._item_count == 0:
            return 0
        try:
            index = int(value)
        except (TypeError, ValueError, OverflowError):
            logger.debug("Ignoring malformed scroll index %r", value)
            return 0
        return max(0, index)
