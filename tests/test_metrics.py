"""
test_metrics.py — Tests for weapon totals, "most popular weapon" and the
per-weapon breakdown shown in the side panel.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

import fencemap.models
from fencemap.models.division import DerivedDivision, DivisionRecord
from fencemap.models.metric import METRICS, DominantMetric, get_metric
from fencemap.services.metrics import (
    WEAPON_FAMILIES,
    aggregate,
    derive,
    dominant_category,
    weapon_breakdown,
)


def _row(name="Test", **counts):
    return {"name": name, "members": counts.pop("members", 10), **counts}


# ── derive / aggregate ────────────────────────────────────────────────────────

class TestDerive:

    def test_totals_sum_all_five_ratings(self, division):
        nj = division("New Jersey")
        assert (nj.total_foil, nj.total_epee, nj.total_saber) == (191, 271, 227)

    def test_placeholder_row_is_derived_too(self, division):
        none = division("None")
        assert (none.total_foil, none.total_epee, none.total_saber) == (318, 312, 255)
        assert none.is_placeholder
        assert dominant_category(none).name == "Foil"
        assert dominant_category(none).total == 318

    def test_missing_counts_read_as_zero(self):
        d = derive(_row(Foil_A=5))
        assert d.total_foil == 5
        assert d.total_epee == 0
        assert d.total_saber == 0

    def test_accepts_records_and_dicts(self):
        record = DivisionRecord(name="X", members=3, Epee_C=2)
        assert derive(record).total_epee == derive(record.model_dump()).total_epee == 2

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            derive(_row(Foil_A=-1))

    def test_aggregate_is_idempotent(self, divisions):
        again = aggregate(divisions)
        assert [d.model_dump() for d in again] == [d.model_dump() for d in divisions]

    def test_aggregate_preserves_order(self):
        rows = [_row("B"), _row("A"), _row("C")]
        assert [d.name for d in aggregate(rows)] == ["B", "A", "C"]

    def test_rating_keys(self):
        assert WEAPON_FAMILIES[0].rating_keys == ("Foil_A", "Foil_B", "Foil_C", "Foil_D", "Foil_E")


# ── dominant_category ─────────────────────────────────────────────────────────

class TestDominantCategory:

    def test_largest_total_wins(self, division):
        top = dominant_category(division("New Jersey"))
        assert top.name == "Epee"
        assert top.total == 271
        assert top.color == "#ff7f0e"

    def test_tie_goes_to_first_declared_weapon(self):
        d = derive(_row(Foil_A=4, Saber_A=4))
        assert dominant_category(d).name == "Foil"

    def test_later_weapon_must_be_strictly_greater(self):
        d = derive(_row(Epee_A=4, Saber_A=5))
        assert dominant_category(d).name == "Saber"

    def test_all_zero_returns_first_weapon_with_zero(self):
        top = dominant_category(derive(_row()))
        assert top.name == "Foil"
        assert top.total == 0

    def test_model_method_matches_service(self, divisions):
        for d in divisions:
            assert d.dominant_weapon() == dominant_category(d)

    def test_models_do_not_import_services(self):
        package = Path(fencemap.models.__file__).parent
        for source in package.glob("*.py"):
            assert "fencemap.services" not in source.read_text(), source.name


# ── weapon_breakdown ──────────────────────────────────────────────────────────

class TestWeaponBreakdown:

    def test_sorted_by_total_descending(self, division):
        stats = weapon_breakdown(division("New Jersey"))
        assert [s.name for s in stats] == ["Epee", "Saber", "Foil"]

    def test_share_of_max(self, division):
        stats = weapon_breakdown(division("New Jersey"))
        assert stats[0].share_of_max == pytest.approx(100.0)
        assert stats[2].share_of_max == pytest.approx(191 / 271 * 100)

    def test_only_first_is_most_popular(self, division):
        stats = weapon_breakdown(division("New Jersey"))
        assert [s.is_most_popular for s in stats] == [True, False, False]

    def test_ratings_listed_a_to_e(self, division):
        foil = next(s for s in weapon_breakdown(division("New Jersey")) if s.name == "Foil")
        assert [(r.label, r.value) for r in foil.ratings] == [
            ("A", 44), ("B", 24), ("C", 24), ("D", 39), ("E", 60),
        ]

    def test_all_zero_division(self):
        stats = weapon_breakdown(derive(_row()))
        assert [s.name for s in stats] == ["Foil", "Epee", "Saber"]
        assert all(s.share_of_max == 0.0 for s in stats)
        assert not any(s.is_most_popular for s in stats)


# ── Metric definitions ────────────────────────────────────────────────────────

class TestMetrics:

    def test_menu_order(self):
        assert [m.key for m in METRICS] == [
            "members", "total_foil", "total_epee", "total_saber", "most_popular_weapon",
        ]

    def test_simple_metric_reads_field(self, division):
        nj = division("New Jersey")
        metric = get_metric("total_saber")
        assert metric.value_for(nj) == 227
        assert metric.color_for(nj) == "#d62728"
        assert metric.weapon_for(nj) is None
        assert metric.label_for(nj) == "Saber Rated: 227"

    def test_dominant_metric_follows_winning_weapon(self, division):
        nj = division("New Jersey")
        metric = get_metric("most_popular_weapon")
        assert isinstance(metric, DominantMetric)
        assert metric.value_for(nj) == 271
        assert metric.color_for(nj) == "#ff7f0e"
        assert metric.weapon_for(nj) == "Epee"
        assert metric.label_for(nj) == "Most Popular: Epee (271)"

    def test_unknown_metric_raises_key_error(self):
        with pytest.raises(KeyError):
            get_metric("height")

    def test_derived_model_type(self, divisions):
        assert all(isinstance(d, DerivedDivision) for d in divisions)
