"""
radius.py — Bubble radius from a metric value and the current zoom.

    r = base * sqrt(max(value, 0)) * ZOOM_SCALE ** (zoom - DEFAULT_ZOOM)

then clamped to [MIN_RADIUS, MAX_RADIUS].

sqrt makes bubble *area* proportional to the value. The zoom factor is 1.0
at the default zoom (4), ~1.44 at 6 and ~2.07 at 8, so bubbles grow with the
map instead of shrinking into dots while the user zooms in.
"""

import math

from fencemap.models.viewport import INITIAL_ZOOM

MIN_RADIUS      = 3.0
MAX_RADIUS      = 50.0
BASE_MULTIPLIER = 1.8
ZOOM_SCALE      = 1.2


def zoom_factor(zoom: float) -> float:
    return ZOOM_SCALE ** (zoom - INITIAL_ZOOM)


def radius_for(value: float, zoom: float, base: float = BASE_MULTIPLIER) -> float:
    """Bubble radius in px. Negative or NaN values size as zero."""
    if math.isnan(value):
        value = 0.0
    calculated = base * math.sqrt(max(value, 0)) * zoom_factor(zoom)
    return max(MIN_RADIUS, min(MAX_RADIUS, calculated))
