"""
UI state containers for simplelist.

Provides:
- AppState: onboarding gate for the top-level view
- ListController: scroll position, scroll-to-top signal and animated scroll
- ItemExpansionState: per-row expanded/collapsed flags
"""

from .app_state import AppState
from .expansion import ItemExpansionState
from .list_controller import ListController, ScrollAnimator

__all__ = [
    "AppState",
    "ItemExpansionState",
    "ListController",
    "ScrollAnimator",
]
