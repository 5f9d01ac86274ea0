"""
viewport.py — Coordinate resolution and focus-transition routes.

Routes:
  GET  /api/v1/resolve            — coordinate + jurisdiction + jitter for any name
  POST /api/v1/viewport/focus     — where to fly when a division is focused
  WS   /api/v1/viewport/session   — stateful focus / panel session

HOW THE DATA FLOWS
──────────────────
1. The user clicks a bubble or a Top-5 card; the side panel opens.
2. The front end POSTs its current map state (zoom, center, container size,
   panel open?) to /viewport/focus.
3. The route rebuilds that viewport as a WebMercatorMap, picks the target
   zoom, shifts the center so the division lands in the middle of the
   area the panel does not cover, and returns the TransitionPlan.
4. The front end calls flyTo(plan.center, plan.zoom, {duration, easeLinearity}).

The WebSocket session keeps that state server-side instead: the client
streams select / close / zoom / resize frames and receives transition
plans, plus a "cleared" frame once the panel's exit animation has finished.

TESTING
────────
  pytest tests/test_viewport_api.py -v

  curl "http://localhost:8000/api/v1/resolve?name=Atlantis"
  curl -X POST http://localhost:8000/api/v1/viewport/focus \\
    -H 'Content-Type: application/json' \\
    -d '{"division": "Hawaii", "zoom": 4, "container_width": 1200, "container_height": 700}'
"""

import asyncio
import logging

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from fencemap.core.config import settings
from fencemap.models.viewport import (
    FocusRequest,
    ResolveResponse,
    SessionMessage,
    TransitionPlan,
)
from fencemap.services.focus import FocusController
from fencemap.services.geo_tables import DIVISION_COORDINATES
from fencemap.services.map_view import WebMercatorMap
from fencemap.services.region_resolver import (
    DEFAULT_JITTER_RANGE,
    is_region_name,
    jitter,
    resolve,
    resolve_jurisdiction,
)
from fencemap.services.viewport import plan_transition, run_transition

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["viewport"])


@router.get("/resolve", response_model=ResolveResponse)
async def resolve_name(
    name: str = Query(..., min_length=1, max_length=200),
    jitter_range: float = Query(default=DEFAULT_JITTER_RANGE, ge=0.0, le=5.0),
):
    """
    Resolve any region name to a coordinate.

    Never 404s: names with no curated point fall back to their state
    centroid, and unrecognised names to the center of the contiguous US.
    """
    coord = resolve(name)
    return ResolveResponse(
        name=name,
        lat=coord.lat,
        lng=coord.lng,
        jurisdiction=resolve_jurisdiction(name),
        curated=name in DIVISION_COORDINATES,
        kind="region" if is_region_name(name) else "state",
        jitter=jitter(name, jitter_range),
    )


@router.post("/viewport/focus", response_model=TransitionPlan)
async def focus_division(payload: FocusRequest):
    """
    Compute the fly-to destination for a focused division.

    The client's viewport is rebuilt per request, so concurrent requests
    never share map state.
    """
    map_view = WebMercatorMap(
        payload.container_width,
        payload.container_height,
        center=payload.center,
        zoom=payload.zoom,
    )
    occlusion = settings.panel_width if payload.panel_open else 0
    plan = plan_transition(map_view, payload.division, occlusion)
    return run_transition(map_view, plan)


# ── WebSocket focus session ────────────────────────────────────────────────────

@router.websocket("/viewport/session")
async def viewport_session(websocket: WebSocket):
    """
    Stateful focus session.

    Client frames (JSON):
      {"type": "resize", "width": 1200, "height": 700}
      {"type": "zoom",   "zoom": 5}
      {"type": "select", "division": "Gulf Coast"}
      {"type": "close"}

    Server frames:
      {"type": "transition", "plan": {...}, "state": {...}}
      {"type": "ignored",    "state": {...}}     ← repeat focus on the same division
      {"type": "state",      "state": {...}}
      {"type": "cleared",    "state": {...}}     ← panel exit animation finished
      {"type": "error",      "detail": "..."}
    """
    await websocket.accept()
    pending: set[asyncio.Task] = set()

    def _notify_cleared() -> None:
        task = asyncio.ensure_future(
            websocket.send_json({"type": "cleared", "state": controller.state.model_dump()})
        )
        pending.add(task)
        task.add_done_callback(pending.discard)

    # 0×0 until the client reports its container size
    controller = FocusController(WebMercatorMap(0, 0), on_cleared=_notify_cleared)

    try:
        while True:
            raw = await websocket.receive_json()
            try:
                msg = SessionMessage.model_validate(raw)
            except ValidationError as exc:
                await websocket.send_json({"type": "error", "detail": str(exc)})
                continue

            if msg.type == "select":
                if not msg.division:
                    await websocket.send_json({"type": "error", "detail": "select needs a division"})
                    continue
                plan = controller.select(msg.division)
                if plan is None:
                    await websocket.send_json({"type": "ignored", "state": controller.state.model_dump()})
                else:
                    await websocket.send_json({
                        "type":  "transition",
                        "plan":  plan.model_dump(mode="json"),
                        "state": controller.state.model_dump(),
                    })
                continue

            if msg.type == "close":
                controller.close_panel()
            elif msg.type == "zoom" and msg.zoom is not None:
                controller.map_view.set_zoom(msg.zoom)
            elif msg.type == "resize" and msg.width is not None and msg.height is not None:
                controller.resize(msg.width, msg.height)
            await websocket.send_json({"type": "state", "state": controller.state.model_dump()})
    except WebSocketDisconnect:
        # Client closed the tab or navigated away
        logger.info("Viewport session client disconnected")
    except Exception as exc:
        logger.warning("Viewport session error: %s", exc)
    finally:
        controller.dispose()
        for task in pending:
            task.cancel()
