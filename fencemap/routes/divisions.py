"""
divisions.py — Division table, rankings and CSV export routes.

Routes:
  GET  /api/v1/divisions              — derived table (optional ?q= search)
  GET  /api/v1/divisions/top          — Top-N divisions for a metric
  GET  /api/v1/divisions/export.csv   — CSV download (rate-limited)
  GET  /api/v1/divisions/{name}       — one division: totals, coordinate, weapon breakdown

Every route reads the immutable table injected by get_divisions(), which
answers 503 while no dataset is loaded.

TESTING
────────
  pytest tests/test_divisions_api.py -v

  curl "http://localhost:8000/api/v1/divisions?q=texas"
  curl "http://localhost:8000/api/v1/divisions/top?metric=total_foil"
  curl -OJ http://localhost:8000/api/v1/divisions/export.csv
  curl "http://localhost:8000/api/v1/divisions/Metropolitan%20NYC"
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import Response

from fencemap.core.config import settings
from fencemap.core.dataset import dataset_store, get_divisions
from fencemap.core.rate_limit import limiter
from fencemap.models.division import (
    DerivedDivision,
    DivisionDetail,
    DivisionSummary,
    RankedDivision,
)
from fencemap.models.metric import DEFAULT_METRIC, MetricKey, get_metric
from fencemap.services.export import EXPORT_FILENAME, divisions_to_csv
from fencemap.services.marker_layout import filter_divisions
from fencemap.services.metrics import dominant_category, weapon_breakdown
from fencemap.services.rankings import DEFAULT_TOP_N, top_divisions
from fencemap.services.region_resolver import is_region_name, resolve, resolve_jurisdiction

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/divisions", tags=["divisions"])


def _summary(d: DerivedDivision) -> DivisionSummary:
    return DivisionSummary(
        name=d.name,
        kind="region" if is_region_name(d.name) else "state",
        members=d.members,
        total_foil=d.total_foil,
        total_epee=d.total_epee,
        total_saber=d.total_saber,
    )


# ── Routes ────────────────────────────────────────────────────────────────────

@router.get("", response_model=list[DivisionSummary])
async def list_divisions(
    q: str = Query(default="", max_length=100, description="Case-insensitive name filter"),
    include_placeholder: bool = Query(default=False, description="Include the 'None' (unassigned) row"),
    divisions=Depends(get_divisions),
):
    """Derived division table in dataset order."""
    rows = filter_divisions(divisions, q)
    if not include_placeholder:
        rows = [d for d in rows if not d.is_placeholder]
    return [_summary(d) for d in rows]


@router.get("/top", response_model=list[RankedDivision])
async def get_top_divisions(
    metric: MetricKey = Query(default=DEFAULT_METRIC),
    limit: int = Query(default=DEFAULT_TOP_N, ge=1, le=50),
    divisions=Depends(get_divisions),
):
    """Divisions with the highest non-zero value for `metric`."""
    return top_divisions(divisions, get_metric(metric), limit)


@router.get("/export.csv", response_class=Response)
@limiter.limit(settings.export_rate_limit)
async def export_divisions(request: Request, divisions=Depends(get_divisions)):
    """Download the derived table as CSV (placeholder row excluded)."""
    logger.info("CSV export requested (%d divisions)", len(divisions))
    return Response(
        content=divisions_to_csv(divisions),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.get("/{name}", response_model=DivisionDetail)
async def get_division(name: str, divisions=Depends(get_divisions)):
    """Everything the side panel needs for one division."""
    division = dataset_store.by_name.get(name)
    if division is None:
        raise HTTPException(status_code=404, detail=f"Unknown division: {name}")

    coord = resolve(division.name)
    top = dominant_category(division)
    return DivisionDetail(
        **_summary(division).model_dump(),
        lat=coord.lat,
        lng=coord.lng,
        jurisdiction=resolve_jurisdiction(division.name),
        most_popular_weapon=top.name,
        most_popular_total=top.total,
        weapons=weapon_breakdown(division),
    )
