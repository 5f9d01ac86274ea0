"""
marker_layout.py — Build the list of bubbles to draw for the current view.

Two modes:

  Single-metric   one bubble per division at its resolved coordinate,
                  sized and coloured by the selected metric.
  Overlay         up to three bubbles per division (Foil / Epee / Saber),
                  each pushed off the division center along its weapon's
                  fixed offset vector. Weapons with total 0 are skipped.

The overlay offset shrinks as the user zooms in:

    offset_scale = OVERLAY_BASE_OFFSET / max(zoom - 3, 1)

so at zoom ≤ 4 the three bubbles sit 0.3 × offset apart and by zoom 8 they
have nearly converged on the true position. The constants are tuned by eye;
adjust freely.

The placeholder division ("None") is never drawn. The free-text search is
a case-insensitive substring match on the division name and runs before
any marker is built.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence, Union

from fencemap.models.division import DerivedDivision
from fencemap.models.map import Coordinate, Marker, clamp_coordinate
from fencemap.models.metric import DominantMetric, SimpleMetric
from fencemap.services.metrics import WEAPON_FAMILIES
from fencemap.services.radius import radius_for
from fencemap.services.region_resolver import jitter, resolve

OVERLAY_BASE_OFFSET = 0.3
OVERLAY_ZOOM_PIVOT  = 3


def overlay_offset_scale(zoom: float) -> float:
    return OVERLAY_BASE_OFFSET / max(zoom - OVERLAY_ZOOM_PIVOT, 1)


def filter_divisions(divisions: Iterable[DerivedDivision], search: str = "") -> list[DerivedDivision]:
    """Case-insensitive substring filter on the division name."""
    needle = (search or "").lower()
    return [d for d in divisions if needle in d.name.lower()]


def _base_positions(
    divisions: Sequence[DerivedDivision],
    jitter_range: float,
) -> dict[str, Coordinate]:
    positions = {d.name: resolve(d.name) for d in divisions}
    if jitter_range <= 0:
        return positions

    # Only divisions that share an exact point are nudged apart.
    counts = Counter(p.as_tuple() for p in positions.values())
    for name, pos in positions.items():
        if counts[pos.as_tuple()] > 1:
            d_lat, d_lng = jitter(name, jitter_range)
            positions[name] = clamp_coordinate(pos.lat + d_lat, pos.lng + d_lng)
    return positions


def _single_metric_markers(
    divisions: Sequence[DerivedDivision],
    positions: dict[str, Coordinate],
    metric: Union[SimpleMetric, DominantMetric],
    zoom: int,
) -> list[Marker]:
    markers = []
    for d in divisions:
        pos = positions[d.name]
        markers.append(Marker(
            key=f"{d.name}|{metric.key}|single",
            division=d.name,
            lat=pos.lat,
            lng=pos.lng,
            radius=radius_for(metric.value_for(d), zoom),
            color=metric.color_for(d),
            weapon=metric.weapon_for(d),
            label=metric.label_for(d),
        ))
    return markers


def _overlay_markers(
    divisions: Sequence[DerivedDivision],
    positions: dict[str, Coordinate],
    zoom: int,
) -> list[Marker]:
    scale = overlay_offset_scale(zoom)
    markers = []
    for d in divisions:
        base = positions[d.name]
        for family in WEAPON_FAMILIES:
            total = d.total_for(family.name)
            if total <= 0:
                continue
            lat_offset, lng_offset = family.offset
            pos = clamp_coordinate(base.lat + lat_offset * scale, base.lng + lng_offset * scale)
            markers.append(Marker(
                key=f"{d.name}|{family.name}|overlay",
                division=d.name,
                lat=pos.lat,
                lng=pos.lng,
                radius=radius_for(total, zoom),
                color=family.color,
                weapon=family.name,
                label=f"{family.name}: {total}",
            ))
    return markers


def build_markers(
    divisions: Iterable[DerivedDivision],
    *,
    metric: Union[SimpleMetric, DominantMetric],
    zoom: int,
    overlay: bool = False,
    search: str = "",
    jitter_range: float = 0.0,
) -> list[Marker]:
    """
    Markers for the current view. `metric` is ignored in overlay mode.

    Output order follows the dataset order (and Foil → Epee → Saber within a
    division in overlay mode); callers should key on Marker.key, not index.
    """
    visible = [d for d in filter_divisions(divisions, search) if not d.is_placeholder]
    positions = _base_positions(visible, jitter_range)
    if overlay:
        return _overlay_markers(visible, positions, zoom)
    return _single_metric_markers(visible, positions, metric, zoom)
