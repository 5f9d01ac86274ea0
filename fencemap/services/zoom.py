"""
zoom.py — Zoom bounds and the focus zoom picked for a selected division.

Zoom levels follow the tile-map convention: each +1 doubles the scale.
  3   whole continent (minimum)
  4   initial view of the contiguous US
  6–8 focus on a single division
  10  maximum
"""

from fencemap.models.viewport import MAX_ZOOM, MIN_ZOOM
from fencemap.services.geo_tables import REMOTE_JURISDICTIONS
from fencemap.services.region_resolver import resolve_jurisdiction

MAX_TARGET_ZOOM  = 8    # focusing never zooms past this
FOCUS_FLOOR_ZOOM = 6    # ...and never lands below this
REMOTE_BASE_ZOOM = 6    # Hawaii / Alaska: wider view for large or isolated territory
BASE_ZOOM        = 7    # everything else


def clamp_zoom(zoom: float) -> int:
    return int(max(MIN_ZOOM, min(MAX_ZOOM, round(zoom))))


def target_zoom(identifier: str, current_zoom: int) -> int:
    """
    Zoom level to fly to when `identifier` is focused.

    Zoomed out below the base → jump to the base. Already at or past it →
    one level closer, capped at MAX_TARGET_ZOOM (so repeated focus keeps
    tightening the view instead of resetting it).
    """
    is_remote = resolve_jurisdiction(identifier) in REMOTE_JURISDICTIONS
    base = REMOTE_BASE_ZOOM if is_remote else BASE_ZOOM
    if current_zoom < base:
        return base
    return min(current_zoom + 1, MAX_TARGET_ZOOM)
