"""Per-row expand/collapse flags."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable

logger = logging.getLogger(__name__)


class ItemExpansionState:
    """
    Track which rows are expanded.

    Rows are independent: expanding one never collapses another. Only
    expanded keys are stored, so an unknown key reads as collapsed.
    """

    def __init__(self, on_toggle: Callable[[Hashable, bool], None] | None = None):
        self.on_toggle = on_toggle
        self._expanded: set[Hashable] = set()

    def toggle(self, key: Hashable) -> bool:
        """Flip the flag for ``key`` and return the new value."""
        if key in self._expanded:
            self._expanded.remove(key)
            expanded = False
        else:
            self._expanded.add(key)
            expanded = True
        logger.debug("Row %r %s", key, "expanded" if expanded else "collapsed")
        if self.on_toggle:
            self.on_toggle(key, expanded)
        return expanded

    def is_expanded(self, key: Hashable) -> bool:
        return key in self._expanded

    @property
    def expanded_keys(self) -> frozenset[Hashable]:
        return frozenset(self._expanded)

    def __len__(self) -> int:
        return len(self._expanded)
