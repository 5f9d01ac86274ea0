"""
viewport.py — Pydantic models for map viewport state and focus transitions.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from fencemap.models.map import Coordinate

# Tile-map zoom levels: each +1 doubles the scale.
INITIAL_ZOOM = 4    # contiguous US
MIN_ZOOM     = 3
MAX_ZOOM     = 10


class ViewportState(BaseModel):
    """What the dashboard currently shows."""

    zoom:            int = Field(default=INITIAL_ZOOM, ge=MIN_ZOOM, le=MAX_ZOOM)
    occlusion_width: int = Field(default=0, ge=0)    # 0, or the panel width while open
    focused:         Optional[str] = None            # division shown in the side panel


class TransitionPlan(BaseModel):
    """Where the map should go when a division is focused."""

    division:        str
    target:          Coordinate   # the division's own coordinate
    center:          Coordinate   # map center to move to (target shifted for the panel)
    zoom:            int
    occlusion_width: float = 0
    adjusted:        bool         # False when center == target (no panel, or fallback)
    animate:         bool = True
    duration:        float = 1.5  # seconds; 0 for an immediate jump
    ease_linearity:  float = 0.1


# ── Requests / responses ─────────────────────────────────────────────────────

class FocusRequest(BaseModel):
    """Request body for POST /api/v1/viewport/focus — the client's current map state."""

    division:         str = Field(..., min_length=1, max_length=200)
    zoom:             int = Field(default=INITIAL_ZOOM, ge=MIN_ZOOM, le=MAX_ZOOM)
    center:           Optional[Coordinate] = None   # omit → initial US-centered view
    container_width:  int = Field(..., ge=0, le=20000)
    container_height: int = Field(..., ge=0, le=20000)
    panel_open:       bool = True


class ResolveResponse(BaseModel):
    """Response shape for GET /api/v1/resolve."""

    name:         str
    lat:          float
    lng:          float
    jurisdiction: str
    curated:      bool    # True when the name has a hand-picked coordinate
    kind:         str     # "state" | "region"
    jitter:       tuple[float, float]


class SessionMessage(BaseModel):
    """Client → server frame on the viewport session WebSocket."""

    type:     Literal["select", "close", "zoom", "resize"]
    division: Optional[str] = None
    zoom:     Optional[int] = Field(default=None, ge=MIN_ZOOM, le=MAX_ZOOM)
    width:    Optional[int] = Field(default=None, ge=0)
    height:   Optional[int] = Field(default=None, ge=0)
