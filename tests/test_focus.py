"""
test_focus.py — Tests for the focus / side-panel state machine.

The deferred clear runs on the event loop, so these tests are async and use
a short clear_delay instead of the real panel animation time.
"""

import asyncio

import pytest

from fencemap.services.focus import FocusController
from fencemap.services.map_view import WebMercatorMap
from fencemap.services.region_resolver import resolve

DELAY = 0.02


@pytest.fixture()
def cleared():
    return []


@pytest.fixture()
def controller(cleared):
    return FocusController(
        WebMercatorMap(1200, 800),
        panel_width=420,
        clear_delay=DELAY,
        on_cleared=lambda: cleared.append(True),
    )


async def _wait_for_clear():
    await asyncio.sleep(DELAY * 5)


class TestSelect:

    async def test_select_opens_panel_and_flies(self, controller):
        plan = controller.select("Ohio")
        assert plan is not None
        assert plan.target == resolve("Ohio")
        assert plan.adjusted is True
        assert controller.state.focused == "Ohio"
        assert controller.state.occlusion_width == 420
        assert controller.panel_open

    async def test_map_ends_on_adjusted_center(self, controller):
        plan = controller.select("Ohio")
        assert controller.map_view.get_center() == plan.center
        assert controller.state.zoom == 7

    async def test_select_records_one_flight(self, controller):
        zooms = []
        controller.map_view.on_zoom(zooms.append)
        controller.select("Ohio")
        (flight,) = controller.map_view.transitions
        assert flight.animate is True
        assert flight.zoom == 7
        assert zooms == [7]

    async def test_repeat_select_is_ignored(self, controller):
        controller.select("Ohio")
        flights = len(controller.map_view.transitions)
        assert controller.select("Ohio") is None
        assert len(controller.map_view.transitions) == flights
        assert controller.panel_open

    async def test_switching_division_flies_again(self, controller):
        controller.select("Ohio")
        plan = controller.select("Hawaii")
        assert plan is not None
        assert controller.state.focused == "Hawaii"

    async def test_defaults_come_from_settings(self):
        c = FocusController(WebMercatorMap(800, 600))
        assert c.panel_width == 420
        assert c.clear_delay == pytest.approx(0.3)


class TestClosePanel:

    async def test_occlusion_drops_immediately(self, controller):
        controller.select("Ohio")
        controller.close_panel()
        assert controller.state.occlusion_width == 0
        assert not controller.panel_open
        assert controller.state.focused == "Ohio"
        assert controller.clear_pending

    async def test_focus_cleared_after_delay(self, controller, cleared):
        controller.select("Ohio")
        controller.close_panel()
        await _wait_for_clear()
        assert controller.state.focused is None
        assert not controller.clear_pending
        assert cleared == [True]

    async def test_double_close_clears_once(self, controller, cleared):
        controller.select("Ohio")
        controller.close_panel()
        controller.close_panel()
        await _wait_for_clear()
        assert cleared == [True]

    async def test_reopen_inside_window_keeps_focus(self, controller, cleared):
        controller.select("Ohio")
        controller.close_panel()
        controller.select("Gulf Coast")
        await _wait_for_clear()
        assert controller.state.focused == "Gulf Coast"
        assert controller.panel_open
        assert cleared == []

    async def test_same_division_flies_again_after_clear(self, controller):
        controller.select("Ohio")
        controller.close_panel()
        await _wait_for_clear()
        assert controller.select("Ohio") is not None

    async def test_dispose_cancels_pending_clear(self, controller, cleared):
        controller.select("Ohio")
        controller.close_panel()
        controller.dispose()
        await _wait_for_clear()
        assert cleared == []
        assert controller.state.focused == "Ohio"


class TestMapEvents:

    async def test_zoom_events_update_state(self, controller):
        controller.map_view.set_zoom(9)
        assert controller.state.zoom == 9

    async def test_resize_reaches_map(self, controller):
        controller.resize(640, 480)
        assert controller.map_view.get_size() == (640, 480)
