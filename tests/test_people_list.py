"""Tests for the PeopleList widget and its scroll-to-index helper."""

from __future__ import annotations

import asyncio

import pytest
from textual.app import App, ComposeResult
from textual.widgets import Button, Static

from simplelist.models.person import PersonList, sample_people
from simplelist.ui.people_list import PeopleList, PeopleScroll, first_visible_row
from simplelist.ui.person_row import COLLAPSE_ICON, EXPAND_ICON, PersonRow
from simplelist.ui.state import ItemExpansionState, ListController

# ---------------------------------------------------------------------------
# first_visible_row
# ---------------------------------------------------------------------------


class TestFirstVisibleRow:
    def test_no_rows(self):
        assert first_visible_row([], 12) == 0

    def test_at_top(self):
        assert first_visible_row([5, 10, 15], 0) == 0

    def test_inside_first_row(self):
        assert first_visible_row([5, 10, 15], 4.5) == 0

    def test_row_ending_at_viewport_top_is_hidden(self):
        assert first_visible_row([5, 10, 15], 5) == 1

    def test_deep_scroll(self):
        assert first_visible_row([5, 10, 15, 20], 16) == 3

    def test_past_the_end_clamps_to_last_row(self):
        assert first_visible_row([5, 10], 50) == 1


# ---------------------------------------------------------------------------
# Test app
# ---------------------------------------------------------------------------


class PeopleListTestApp(App[None]):
    def __init__(self, people: PersonList, scroll_duration: float = 0.05) -> None:
        super().__init__()
        self.people = people
        self.controller = ListController(item_count=len(people))
        self.expansion = ItemExpansionState()
        self.scroll_duration = scroll_duration

    def compose(self) -> ComposeResult:
        yield PeopleList(
            self.people,
            self.controller,
            self.expansion,
            scroll_duration=self.scroll_duration,
            id="people-list",
        )


async def _settle(pilot) -> None:
    """Let message handlers, layout and refresh catch up."""
    await pilot.pause()
    await pilot.pause(0.05)
    await pilot.pause()


async def _scroll_to_bottom(app: PeopleListTestApp, pilot) -> PeopleScroll:
    scroll = app.query_one(PeopleScroll)
    scroll.scroll_to(y=scroll.max_scroll_y, animate=False)
    await _settle(pilot)
    return scroll


# ---------------------------------------------------------------------------
# Tests: Layout
# ---------------------------------------------------------------------------


class TestPeopleListLayout:
    @pytest.mark.asyncio
    async def test_one_row_per_person(self):
        app = PeopleListTestApp(sample_people(12))
        async with app.run_test(size=(80, 24)) as pilot:
            await _settle(pilot)
            rows = list(app.query(PersonRow))
            assert len(rows) == 12
            assert [row.index for row in rows] == list(range(12))

    @pytest.mark.asyncio
    async def test_row_shows_name_and_age(self):
        app = PeopleListTestApp(sample_people(3))
        async with app.run_test(size=(80, 24)) as pilot:
            await _settle(pilot)
            row = app.query_one("#person-0", PersonRow)
            name = row.query_one(".name", Static)
            summary = row.query_one(".summary", Static)
            assert str(name.content) == row.person.name
            assert str(summary.content) == row.person.summary

    @pytest.mark.asyncio
    async def test_avatar_tooltip_passes_image_ref_through(self):
        people = sample_people(1)
        app = PeopleListTestApp(people)
        async with app.run_test(size=(80, 24)) as pilot:
            await _settle(pilot)
            avatar = app.query_one("#person-0 .avatar", Static)
            assert avatar.tooltip == people[0].image_ref

    @pytest.mark.asyncio
    async def test_empty_list_shows_placeholder(self):
        app = PeopleListTestApp(PersonList())
        async with app.run_test(size=(80, 24)) as pilot:
            await _settle(pilot)
            assert app.query_one("#people-empty", Static) is not None
            assert not app.query(PersonRow)
            assert app.controller.should_show_top_button() is False

    @pytest.mark.asyncio
    async def test_up_button_hidden_at_start(self):
        app = PeopleListTestApp(sample_people(30))
        async with app.run_test(size=(80, 24)) as pilot:
            await _settle(pilot)
            assert not app.query_one("#up-bar").has_class("visible")


# ---------------------------------------------------------------------------
# Tests: Expansion
# ---------------------------------------------------------------------------


class TestPeopleListExpansion:
    @pytest.mark.asyncio
    async def test_button_toggles_only_its_row(self):
        app = PeopleListTestApp(sample_people(5))
        async with app.run_test(size=(80, 40)) as pilot:
            await _settle(pilot)
            first = app.query_one("#person-0", PersonRow)
            second = app.query_one("#person-1", PersonRow)
            collapsed_height = first.outer_size.height

            first.query_one(".expand-button", Button).press()
            await _settle(pilot)

            assert app.expansion.is_expanded(0) is True
            assert app.expansion.is_expanded(1) is False
            assert first.has_class("-expanded")
            assert not second.has_class("-expanded")
            assert str(first.query_one(".expand-button", Button).label) == COLLAPSE_ICON
            assert first.outer_size.height > collapsed_height

    @pytest.mark.asyncio
    async def test_second_press_collapses(self):
        app = PeopleListTestApp(sample_people(5))
        async with app.run_test(size=(80, 40)) as pilot:
            await _settle(pilot)
            row = app.query_one("#person-2", PersonRow)
            button = row.query_one(".expand-button", Button)

            button.press()
            await _settle(pilot)
            button.press()
            await _settle(pilot)

            assert app.expansion.is_expanded(2) is False
            assert not row.has_class("-expanded")
            assert str(button.label) == EXPAND_ICON

    @pytest.mark.asyncio
    async def test_several_rows_stay_expanded(self):
        app = PeopleListTestApp(sample_people(5))
        async with app.run_test(size=(80, 40)) as pilot:
            await _settle(pilot)
            for index in (0, 3):
                row = app.query_one(f"#person-{index}", PersonRow)
                row.query_one(".expand-button", Button).press()
                await _settle(pilot)

            assert app.expansion.expanded_keys == frozenset({0, 3})

    @pytest.mark.asyncio
    async def test_rows_pick_up_existing_state(self):
        people = sample_people(4)
        app = PeopleListTestApp(people)
        app.expansion.toggle(1)
        async with app.run_test(size=(80, 40)) as pilot:
            await _settle(pilot)
            assert app.query_one("#person-1", PersonRow).has_class("-expanded")
            assert not app.query_one("#person-0", PersonRow).has_class("-expanded")


# ---------------------------------------------------------------------------
# Tests: Scroll
# ---------------------------------------------------------------------------


class TestPeopleListScroll:
    @pytest.mark.asyncio
    async def test_scrolling_away_shows_up_button(self):
        app = PeopleListTestApp(sample_people(30))
        async with app.run_test(size=(80, 24)) as pilot:
            await _settle(pilot)
            await _scroll_to_bottom(app, pilot)

            assert app.controller.position > 0
            assert app.controller.should_show_top_button() is True
            assert app.query_one("#up-bar").has_class("visible")

    @pytest.mark.asyncio
    async def test_up_button_returns_to_first_row(self):
        app = PeopleListTestApp(sample_people(30))
        async with app.run_test(size=(80, 24)) as pilot:
            await _settle(pilot)
            await _scroll_to_bottom(app, pilot)

            app.query_one("#up-button", Button).press()
            await _settle(pilot)
            task = app.controller.scroll_pending
            if task is not None:
                await asyncio.wait_for(task, timeout=5)
            await pilot.wait_for_scheduled_animations()
            await _settle(pilot)

            assert app.query_one(PeopleScroll).scroll_y == 0
            assert app.controller.position == 0
            assert app.controller.should_show_top_button() is False
            assert not app.query_one("#up-bar").has_class("visible")

    @pytest.mark.asyncio
    async def test_instant_scroll_when_duration_is_zero(self):
        app = PeopleListTestApp(sample_people(30), scroll_duration=0)
        async with app.run_test(size=(80, 24)) as pilot:
            await _settle(pilot)
            await _scroll_to_bottom(app, pilot)

            app.controller.scroll_to_top()
            await _settle(pilot)
            await _settle(pilot)

            assert app.controller.position == 0
            assert app.controller.should_show_top_button() is False

    @pytest.mark.asyncio
    async def test_user_scroll_interrupts_scroll_to_top(self):
        app = PeopleListTestApp(sample_people(30), scroll_duration=5)
        async with app.run_test(size=(80, 24)) as pilot:
            await _settle(pilot)
            await _scroll_to_bottom(app, pilot)

            task = app.controller.scroll_to_top()
            await _settle(pilot)
            app.query_one(PeopleScroll).post_message(PeopleScroll.UserScrolled())
            await _settle(pilot)

            assert task.done()
            assert task.cancelled()
            assert app.controller.scroll_pending is None
