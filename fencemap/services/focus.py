"""
focus.py — Focus / side-panel state machine for one map session.

Rules
─────
- select(division): open the panel (occlusion = panel width), cancel any
  pending deferred clear, and fly to the division. Selecting the division
  that is already focused does not start a second transition.
- close_panel(): occlusion drops to 0 immediately; the focused division is
  cleared only after the panel's exit animation (clear_delay seconds) so the
  panel can still render it while sliding out. Closing again inside that
  window cancels and reschedules the timer; there is never more than one.
- Zoom events from the map keep ViewportState.zoom current.

Everything runs on the asyncio event loop thread: the deferred clear is a
loop.call_later handle, and each transition (snapshot → project → restore →
fly) completes synchronously inside select().
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from fencemap.core.config import settings
from fencemap.models.viewport import TransitionPlan, ViewportState
from fencemap.services.map_view import MapView
from fencemap.services.viewport import plan_transition, run_transition
from fencemap.services.zoom import clamp_zoom

logger = logging.getLogger(__name__)


class FocusController:
    def __init__(
        self,
        map_view: MapView,
        panel_width: Optional[int] = None,
        clear_delay: Optional[float] = None,
        on_cleared: Optional[Callable[[], None]] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.map_view = map_view
        self.panel_width = settings.panel_width if panel_width is None else panel_width
        self.clear_delay = (
            settings.panel_animation_ms / 1000.0 if clear_delay is None else clear_delay
        )
        self.state = ViewportState(zoom=clamp_zoom(map_view.get_zoom()))
        self._on_cleared = on_cleared
        self._loop = loop
        self._previous: Optional[str] = None
        self._clear_handle: Optional[asyncio.TimerHandle] = None
        map_view.on_zoom(self._on_zoom)

    @property
    def panel_open(self) -> bool:
        return self.state.occlusion_width > 0

    @property
    def clear_pending(self) -> bool:
        return self._clear_handle is not None

    def select(self, division: str) -> Optional[TransitionPlan]:
        """Focus a division. Returns the applied transition, or None for a repeat focus."""
        self._cancel_pending_clear()
        self._update(focused=division, occlusion_width=self.panel_width)

        if division == self._previous:
            logger.debug("Ignoring repeat focus on %s", division)
            return None
        self._previous = division

        plan = plan_transition(self.map_view, division, self.state.occlusion_width)
        return run_transition(self.map_view, plan)

    def close_panel(self) -> None:
        self._update(occlusion_width=0)
        self._cancel_pending_clear()
        loop = self._loop or asyncio.get_running_loop()
        self._clear_handle = loop.call_later(self.clear_delay, self._clear_focus)

    def resize(self, width: float, height: float) -> None:
        resize = getattr(self.map_view, "resize", None)
        if resize is not None:
            resize(width, height)

    def dispose(self) -> None:
        self._cancel_pending_clear()

    # ── Internals ─────────────────────────────────────────────────────────────

    def _update(self, **changes) -> None:
        self.state = self.state.model_copy(update=changes)

    def _on_zoom(self, zoom: float) -> None:
        self._update(zoom=clamp_zoom(zoom))

    def _cancel_pending_clear(self) -> None:
        if self._clear_handle is not None:
            self._clear_handle.cancel()
            self._clear_handle = None

    def _clear_focus(self) -> None:
        self._clear_handle = None
        self._previous = None
        self._update(focused=None)
        if self._on_cleared is not None:
            self._on_cleared()
