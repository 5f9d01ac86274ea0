"""
map.py — Pydantic models for geographic coordinates and map markers.

Coordinates are produced by the region resolver and never mutated. Markers
are ephemeral: rebuilt on every change to metric, zoom, search filter or
overlay mode, and carry no identity beyond `key`, which the front end uses
to diff the rendered list.
"""

from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

MIN_LAT, MAX_LAT = -90.0, 90.0
MIN_LNG, MAX_LNG = -180.0, 180.0


class Coordinate(BaseModel):
    """A (latitude, longitude) pair in degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=MIN_LAT, le=MAX_LAT)
    lng: float = Field(..., ge=MIN_LNG, le=MAX_LNG)

    def as_tuple(self) -> tuple[float, float]:
        return (self.lat, self.lng)


class Point(NamedTuple):
    """A container-pixel position (origin at the map's top-left corner)."""

    x: float
    y: float


def clamp_coordinate(lat: float, lng: float) -> Coordinate:
    """Build a Coordinate, clamping each axis into its valid range."""
    return Coordinate(
        lat=max(MIN_LAT, min(MAX_LAT, lat)),
        lng=max(MIN_LNG, min(MAX_LNG, lng)),
    )


class Marker(BaseModel):
    """A single bubble to draw on the map."""

    key:      str              # "<division>|<weapon or metric>|<mode>", stable across renders
    division: str
    lat:      float = Field(..., ge=MIN_LAT, le=MAX_LAT)
    lng:      float = Field(..., ge=MIN_LNG, le=MAX_LNG)
    radius:   float            # px, already clamped to [MIN_RADIUS, MAX_RADIUS]
    color:    str              # hex
    weapon:   Optional[str] = None   # set in overlay mode and for "most popular weapon"
    label:    str              # tooltip text, e.g. "Foil Rated: 318"


class MarkerResponse(BaseModel):
    """Response shape for GET /api/v1/markers."""

    metric:  str
    overlay: bool
    zoom:    int
    count:   int
    markers: list[Marker]
