"""
test_marker_layout.py — Tests for the single-metric and overlay bubble layouts.
"""

import pytest

from fencemap.models.metric import get_metric
from fencemap.services.marker_layout import (
    build_markers,
    filter_divisions,
    overlay_offset_scale,
)
from fencemap.services.metrics import derive
from fencemap.services.radius import radius_for
from fencemap.services.region_resolver import jitter, resolve


def _by_key(markers):
    return {m.key: m for m in markers}


# ── Search filter ─────────────────────────────────────────────────────────────

class TestFilterDivisions:

    def test_case_insensitive_substring(self, divisions):
        names = [d.name for d in filter_divisions(divisions, "CALIFORNIA")]
        assert names == ["Southern California", "Central California", "Northern California"]

    def test_empty_search_keeps_everything(self, divisions):
        assert len(filter_divisions(divisions, "")) == len(divisions)

    def test_no_match(self, divisions):
        assert filter_divisions(divisions, "atlantis") == []


# ── Single-metric mode ────────────────────────────────────────────────────────

class TestSingleMetricMarkers:

    def test_one_marker_per_drawable_division(self, divisions):
        markers = build_markers(divisions, metric=get_metric("members"), zoom=4)
        assert len(markers) == len(divisions) - 1
        assert "None" not in {m.division for m in markers}

    def test_keys_are_unique(self, divisions):
        markers = build_markers(divisions, metric=get_metric("members"), zoom=4)
        assert len({m.key for m in markers}) == len(markers)

    def test_marker_fields(self, divisions):
        markers = build_markers(divisions, metric=get_metric("total_epee"), zoom=6)
        nj = _by_key(markers)["New Jersey|total_epee|single"]
        assert (nj.lat, nj.lng) == resolve("New Jersey").as_tuple()
        assert nj.radius == pytest.approx(radius_for(271, 6))
        assert nj.color == "#ff7f0e"
        assert nj.weapon is None
        assert nj.label == "Epee Rated: 271"

    def test_most_popular_uses_winning_weapon(self, divisions):
        markers = build_markers(divisions, metric=get_metric("most_popular_weapon"), zoom=4)
        gulf = _by_key(markers)["Gulf Coast|most_popular_weapon|single"]
        assert gulf.weapon == "Foil"
        assert gulf.color == "#2ca02c"
        assert gulf.label == "Most Popular: Foil (237)"

    def test_search_applies_before_layout(self, divisions):
        markers = build_markers(divisions, metric=get_metric("members"), zoom=4, search="ohio")
        assert [m.division for m in markers] == ["Northern Ohio", "Southwest Ohio"]

    def test_search_for_placeholder_draws_nothing(self, divisions):
        assert build_markers(divisions, metric=get_metric("members"), zoom=4, search="None") == []

    def test_radius_follows_zoom(self, divisions):
        metric = get_metric("members")
        low = _by_key(build_markers(divisions, metric=metric, zoom=3))
        high = _by_key(build_markers(divisions, metric=metric, zoom=8))
        key = "Kansas|members|single"
        assert high[key].radius > low[key].radius


# ── Overlay mode ──────────────────────────────────────────────────────────────

class TestOverlayMarkers:

    def test_zero_total_weapons_skipped(self, divisions):
        markers = build_markers(divisions, metric=get_metric("members"), zoom=4, overlay=True)
        alaska = [m for m in markers if m.division == "Alaska"]
        assert [m.weapon for m in alaska] == ["Saber"]

    def test_three_bubbles_in_weapon_order(self, divisions):
        markers = build_markers(divisions, metric=get_metric("members"), zoom=4, overlay=True)
        nj = [m for m in markers if m.division == "New Jersey"]
        assert [m.weapon for m in nj] == ["Foil", "Epee", "Saber"]
        assert [m.label for m in nj] == ["Foil: 191", "Epee: 271", "Saber: 227"]
        assert [m.color for m in nj] == ["#2ca02c", "#ff7f0e", "#d62728"]

    def test_offsets_scale_with_zoom(self, divisions):
        base = resolve("New Jersey")
        for zoom in (4, 6, 8):
            markers = _by_key(build_markers(
                divisions, metric=get_metric("members"), zoom=zoom, overlay=True,
            ))
            foil = markers["New Jersey|Foil|overlay"]
            scale = overlay_offset_scale(zoom)
            assert foil.lat == pytest.approx(base.lat - 0.15 * scale)
            assert foil.lng == pytest.approx(base.lng - 0.15 * scale)

    def test_metric_ignored(self, divisions):
        a = build_markers(divisions, metric=get_metric("members"), zoom=5, overlay=True)
        b = build_markers(divisions, metric=get_metric("total_saber"), zoom=5, overlay=True)
        assert a == b

    def test_all_zero_division_draws_nothing(self):
        d = derive({"name": "Empty", "members": 4})
        assert build_markers([d], metric=get_metric("members"), zoom=4, overlay=True) == []


class TestOverlayOffsetScale:

    @pytest.mark.parametrize("zoom, expected", [(3, 0.3), (4, 0.3), (5, 0.15), (8, 0.06)])
    def test_values(self, zoom, expected):
        assert overlay_offset_scale(zoom) == pytest.approx(expected)


# ── Jitter ────────────────────────────────────────────────────────────────────

class TestCoincidentPoints:

    def test_only_shared_points_are_jittered(self):
        rows = [derive({"name": n, "members": 5}) for n in ("Atlantis", "Lemuria", "Ohio")]
        markers = _by_key(build_markers(
            rows, metric=get_metric("members"), zoom=4, jitter_range=0.7,
        ))
        kansas = resolve("Atlantis")
        for name in ("Atlantis", "Lemuria"):
            d_lat, d_lng = jitter(name, 0.7)
            m = markers[f"{name}|members|single"]
            assert m.lat == pytest.approx(kansas.lat + d_lat)
            assert m.lng == pytest.approx(kansas.lng + d_lng)

        ohio = markers["Ohio|members|single"]
        assert (ohio.lat, ohio.lng) == resolve("Ohio").as_tuple()

    def test_no_jitter_by_default(self):
        rows = [derive({"name": n, "members": 5}) for n in ("Atlantis", "Lemuria")]
        markers = build_markers(rows, metric=get_metric("members"), zoom=4)
        assert markers[0].lat == markers[1].lat
        assert markers[0].lng == markers[1].lng
