"""
markers.py — Bubble layout routes.

Routes:
  GET  /api/v1/metrics   — selectable metrics + legend colours
  GET  /api/v1/markers   — bubbles for the current metric / zoom / overlay / search

The front end re-requests /markers on every zoomend, metric switch, overlay
toggle and search keystroke (debounced); markers carry a stable `key` so the
rendering layer can diff the list instead of redrawing it.

TESTING
────────
  pytest tests/test_markers_api.py -v

  curl "http://localhost:8000/api/v1/markers?metric=most_popular_weapon&zoom=6"
  curl "http://localhost:8000/api/v1/markers?overlay=true&q=california"
"""

import logging

from fastapi import APIRouter, Depends, Query

from fencemap.core.dataset import get_divisions
from fencemap.models.map import MarkerResponse
from fencemap.models.metric import DEFAULT_METRIC, METRICS, Metric, MetricKey, get_metric
from fencemap.models.viewport import INITIAL_ZOOM, MAX_ZOOM, MIN_ZOOM
from fencemap.services.marker_layout import build_markers

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["markers"])


@router.get("/metrics", response_model=list[Metric])
async def list_metrics():
    """Metric definitions in menu order (the last one is the derived "most popular weapon")."""
    return list(METRICS)


@router.get("/markers", response_model=MarkerResponse)
async def get_markers(
    metric: MetricKey = Query(default=DEFAULT_METRIC, description="Ignored when overlay=true"),
    zoom: int = Query(default=INITIAL_ZOOM, ge=MIN_ZOOM, le=MAX_ZOOM),
    overlay: bool = Query(default=False, description="One bubble per weapon instead of one per division"),
    q: str = Query(default="", max_length=100, description="Case-insensitive name filter"),
    jitter: float = Query(default=0.0, ge=0.0, le=2.0, description="Separate divisions that share a point"),
    divisions=Depends(get_divisions),
):
    """
    Marker list for the map.

    Response shape (MarkerResponse):
      markers : list of Marker — key, division, lat, lng, radius (px), color, weapon, label
      count   : len(markers)
    """
    markers = build_markers(
        divisions,
        metric=get_metric(metric),
        zoom=zoom,
        overlay=overlay,
        search=q,
        jitter_range=jitter,
    )
    logger.debug("Built %d markers (metric=%s zoom=%d overlay=%s)", len(markers), metric, zoom, overlay)
    return MarkerResponse(
        metric=metric,
        overlay=overlay,
        zoom=zoom,
        count=len(markers),
        markers=markers,
    )
