"""
map_view.py — The map-engine boundary, plus an in-process Web Mercator map.

The viewport corrector only needs a handful of engine operations: read zoom,
center and container size; convert between geographic and container-pixel
coordinates; set the view immediately or fly to it. `MapView` names exactly
that surface, so a browser-side engine proxy or a test double can stand in.

`WebMercatorMap` implements it with the same pixel math as a tile map
running EPSG:3857 with 256 px tiles:

    world_px = TILE_SIZE * 2**zoom
    x        = world_px * (mercator_x / (2πR) + 0.5)
    y        = world_px * (0.5 - mercator_y / (2πR))

and the container origin placed so that `center` sits at the middle of a
width × height viewport. Nothing is drawn; "flying" moves the view
immediately and records the request in `transitions`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, runtime_checkable

from fencemap.models.map import Coordinate, Point, clamp_coordinate
from fencemap.models.viewport import INITIAL_ZOOM, MAX_ZOOM, MIN_ZOOM

EARTH_RADIUS = 6378137.0           # metres, spherical Web Mercator
MAX_MERCATOR_LAT = 85.0511287798   # latitudes beyond this are not projected
TILE_SIZE = 256

ZoomListener = Callable[[float], None]


@runtime_checkable
class MapView(Protocol):
    def get_zoom(self) -> float: ...

    def get_center(self) -> Coordinate: ...

    def get_size(self) -> tuple[float, float]: ...

    def set_zoom(self, zoom: float, animate: bool = False) -> None: ...

    def set_view(
        self,
        center: Coordinate,
        zoom: float,
        animate: bool = False,
        duration: Optional[float] = None,
    ) -> None: ...

    def fly_to(
        self,
        center: Coordinate,
        zoom: float,
        duration: float,
        ease_linearity: float,
    ) -> None: ...

    def lat_lng_to_container_point(self, coord: Coordinate) -> Point: ...

    def container_point_to_lat_lng(self, point: Point) -> Coordinate: ...

    def on_zoom(self, listener: ZoomListener) -> None: ...

    def move_silently(self, center: Coordinate, zoom: float) -> None: ...


# ── Projection helpers ────────────────────────────────────────────────────────

def lonlat_to_web_mercator(lng: float, lat: float) -> tuple[float, float]:
    """Longitude/latitude (degrees) → Web Mercator metres."""
    lat = max(-MAX_MERCATOR_LAT, min(MAX_MERCATOR_LAT, lat))
    x = math.radians(lng) * EARTH_RADIUS
    y = math.log(math.tan(math.pi / 4.0 + math.radians(lat) / 2.0)) * EARTH_RADIUS
    return x, y


def web_mercator_to_lonlat(x: float, y: float) -> tuple[float, float]:
    """Web Mercator metres → longitude/latitude (degrees)."""
    lng = math.degrees(x / EARTH_RADIUS)
    lat = math.degrees(2.0 * math.atan(math.exp(y / EARTH_RADIUS)) - math.pi / 2.0)
    return lng, lat


def world_size(zoom: float) -> float:
    return TILE_SIZE * (2.0 ** zoom)


def project(coord: Coordinate, zoom: float) -> Point:
    """Geographic → absolute world pixel at `zoom`."""
    mx, my = lonlat_to_web_mercator(coord.lng, coord.lat)
    half = math.pi * EARTH_RADIUS
    size = world_size(zoom)
    return Point(size * (mx / (2 * half) + 0.5), size * (0.5 - my / (2 * half)))


def unproject(point: Point, zoom: float) -> Coordinate:
    """Absolute world pixel at `zoom` → geographic (clamped to valid ranges)."""
    half = math.pi * EARTH_RADIUS
    size = world_size(zoom)
    mx = (point.x / size - 0.5) * 2 * half
    my = (0.5 - point.y / size) * 2 * half
    lng, lat = web_mercator_to_lonlat(mx, my)
    return clamp_coordinate(lat, lng)


# ── In-process map ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Transition:
    """A recorded view change (what a browser engine would animate)."""

    center:         Coordinate
    zoom:           float
    animate:        bool
    duration:       Optional[float] = None
    ease_linearity: Optional[float] = None


class WebMercatorMap:
    """A headless map viewport: width × height px centred on `center` at `zoom`."""

    def __init__(
        self,
        width: float,
        height: float,
        center: Optional[Coordinate] = None,
        zoom: float = INITIAL_ZOOM,
        min_zoom: float = MIN_ZOOM,
        max_zoom: float = MAX_ZOOM,
    ):
        self.width = width
        self.height = height
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self._center = center or Coordinate(lat=39.8283, lng=-98.5795)
        self._zoom = self._limit_zoom(zoom)
        self._listeners: list[ZoomListener] = []
        self.transitions: list[Transition] = []

    def __repr__(self) -> str:
        return (
            f"WebMercatorMap({self.width}x{self.height}, "
            f"center=({self._center.lat:.4f}, {self._center.lng:.4f}), zoom={self._zoom})"
        )

    # ── Queries ───────────────────────────────────────────────────────────────

    def get_zoom(self) -> float:
        return self._zoom

    def get_center(self) -> Coordinate:
        return self._center

    def get_size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def lat_lng_to_container_point(self, coord: Coordinate) -> Point:
        px = project(coord, self._zoom)
        origin = self._pixel_origin()
        return Point(px.x - origin.x, px.y - origin.y)

    def container_point_to_lat_lng(self, point: Point) -> Coordinate:
        origin = self._pixel_origin()
        return unproject(Point(point.x + origin.x, point.y + origin.y), self._zoom)

    # ── Mutations ─────────────────────────────────────────────────────────────

    def set_zoom(self, zoom: float, animate: bool = False) -> None:
        self._apply(self._center, zoom)

    def set_view(
        self,
        center: Coordinate,
        zoom: float,
        animate: bool = False,
        duration: Optional[float] = None,
    ) -> None:
        self._apply(center, zoom)
        self.transitions.append(Transition(self._center, self._zoom, animate, duration))

    def fly_to(
        self,
        center: Coordinate,
        zoom: float,
        duration: float,
        ease_linearity: float,
    ) -> None:
        self._apply(center, zoom)
        self.transitions.append(
            Transition(self._center, self._zoom, True, duration, ease_linearity)
        )

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def on_zoom(self, listener: ZoomListener) -> None:
        self._listeners.append(listener)

    def move_silently(self, center: Coordinate, zoom: float) -> None:
        """Reposition without firing zoom listeners or recording a transition."""
        self._apply(center, zoom, notify=False)

    # ── Internals ─────────────────────────────────────────────────────────────

    def _limit_zoom(self, zoom: float) -> float:
        return max(self.min_zoom, min(self.max_zoom, zoom))

    def _pixel_origin(self) -> Point:
        center_px = project(self._center, self._zoom)
        return Point(center_px.x - self.width / 2.0, center_px.y - self.height / 2.0)

    def _apply(self, center: Coordinate, zoom: float, notify: bool = True) -> None:
        previous = self._zoom
        self._center = center
        self._zoom = self._limit_zoom(zoom)
        if notify and self._zoom != previous:
            for listener in list(self._listeners):
                listener(self._zoom)
