"""
viewport.py — Center the focused division in the part of the map the side
panel does not cover.

HOW THE CORRECTION WORKS
────────────────────────
When the detail panel opens, the map container is pushed right by
`occlusion_width` px and its rightmost `occlusion_width` px are clipped.
Centering the map on the target would leave the target off-center in what
is still visible. The visible area's center sits occlusion_width / 2 px left
of the container center, so the map center must sit the same distance
*right* of the target:

  1. snapshot zoom + center
  2. move_silently(target, target_zoom)   ← establishes the projection
  3. p = lat_lng_to_container_point(target); p.x += occlusion_width / 2
  4. adjusted = container_point_to_lat_lng(p)
  5. restore the snapshot
  6. clamp adjusted to valid lat/lng

Steps 1, 2 and 5 run inside `projected_view`, a context manager that
restores the original view on every exit path. Both moves are silent: no
zoom listener fires and no transition is recorded. The sequence is
synchronous, so nothing else can touch the map between snapshot and restore.

Any failure (container not measured yet, projection error) logs a warning
and falls back to the unadjusted target.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fencemap.models.map import Coordinate, Point, clamp_coordinate
from fencemap.models.viewport import TransitionPlan
from fencemap.services.map_view import MapView
from fencemap.services.region_resolver import resolve
from fencemap.services.zoom import FOCUS_FLOOR_ZOOM, target_zoom

logger = logging.getLogger(__name__)

FLY_TO_DURATION       = 1.5   # seconds
FLY_TO_EASE_LINEARITY = 0.1


@contextmanager
def projected_view(map_view: MapView, center: Coordinate, zoom: float) -> Iterator[MapView]:
    """Temporarily move the map to (center, zoom); always restore on exit."""
    saved_zoom = map_view.get_zoom()
    saved_center = map_view.get_center()
    try:
        map_view.move_silently(center, zoom)
        yield map_view
    finally:
        map_view.move_silently(saved_center, saved_zoom)


def adjusted_center(
    map_view: MapView,
    target: Coordinate,
    zoom: float,
    occlusion_width: float,
) -> Coordinate:
    """Map center that puts `target` in the middle of the unoccluded area."""
    if occlusion_width <= 0:
        return target

    try:
        width, height = map_view.get_size()
        if width <= 0 or height <= 0:
            logger.debug("Map container not measured yet; centering on target")
            return target

        with projected_view(map_view, target, zoom):
            target_point = map_view.lat_lng_to_container_point(target)
            shifted = Point(target_point.x + occlusion_width / 2, target_point.y)
            moved = map_view.container_point_to_lat_lng(shifted)
    except Exception as exc:
        logger.warning("Adjusted center calculation failed, using target coordinates: %s", exc)
        return target

    return clamp_coordinate(moved.lat, moved.lng)


def plan_transition(map_view: MapView, division: str, occlusion_width: float) -> TransitionPlan:
    """Destination (center + zoom) for focusing `division` on this map."""
    target = resolve(division)
    current = int(round(map_view.get_zoom()))
    zoom = max(FOCUS_FLOOR_ZOOM, target_zoom(division, current))
    center = adjusted_center(map_view, target, zoom, occlusion_width)

    return TransitionPlan(
        division=division,
        target=target,
        center=center,
        zoom=zoom,
        occlusion_width=occlusion_width,
        adjusted=center != target,
        animate=True,
        duration=FLY_TO_DURATION,
        ease_linearity=FLY_TO_EASE_LINEARITY,
    )


def run_transition(map_view: MapView, plan: TransitionPlan) -> TransitionPlan:
    """
    Fly to the planned view. If the animated transition fails, jump straight
    to the unadjusted target instead and return the plan that was applied.
    """
    try:
        map_view.fly_to(
            plan.center,
            plan.zoom,
            duration=plan.duration,
            ease_linearity=plan.ease_linearity,
        )
        return plan
    except Exception as exc:
        logger.warning("fly_to %s failed, falling back to set_view: %s", plan.division, exc)

    map_view.set_view(plan.target, plan.zoom, animate=False)
    return plan.model_copy(update={
        "center":   plan.target,
        "adjusted": False,
        "animate":  False,
        "duration": 0.0,
    })
