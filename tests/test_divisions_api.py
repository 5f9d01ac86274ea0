"""
test_divisions_api.py — Tests for the /api/v1/divisions routes.
"""

from unittest.mock import patch

import pytest

from fencemap.core.dataset import unload_dataset


class TestListDivisions:
    async def test_returns_200(self, client):
        r = await client.get("/api/v1/divisions")
        assert r.status_code == 200

    async def test_placeholder_hidden_by_default(self, client):
        data = (await client.get("/api/v1/divisions")).json()
        assert len(data) == 68
        assert "None" not in {d["name"] for d in data}

    async def test_placeholder_on_request(self, client):
        data = (await client.get("/api/v1/divisions?include_placeholder=true")).json()
        assert data[0]["name"] == "None"
        assert len(data) == 69

    async def test_row_shape(self, client):
        row = (await client.get("/api/v1/divisions")).json()[0]
        assert row == {
            "name": "New Jersey",
            "kind": "state",
            "members": 1648,
            "total_foil": 191,
            "total_epee": 271,
            "total_saber": 227,
        }

    async def test_search(self, client):
        data = (await client.get("/api/v1/divisions?q=california")).json()
        assert [d["name"] for d in data] == [
            "Southern California", "Central California", "Northern California",
        ]
        assert {d["kind"] for d in data} == {"region"}

    async def test_503_without_dataset(self, client):
        unload_dataset()
        r = await client.get("/api/v1/divisions")
        assert r.status_code == 503
        assert r.json()["detail"] == "Dataset not loaded"


class TestTopDivisions:
    async def test_default_is_top_five_members(self, client):
        data = (await client.get("/api/v1/divisions/top")).json()
        assert [d["name"] for d in data] == [
            "New Jersey", "New England", "Southern California", "Virginia", "Metropolitan NYC",
        ]
        assert data[0] == {
            "rank": 1, "name": "New Jersey", "value": 1648, "color": "#1f77b4", "weapon": None,
        }

    async def test_metric_and_limit(self, client):
        data = (await client.get("/api/v1/divisions/top?metric=total_foil&limit=2")).json()
        assert [(d["name"], d["value"]) for d in data] == [("Gulf Coast", 237), ("New England", 200)]

    async def test_unknown_metric_rejected(self, client):
        r = await client.get("/api/v1/divisions/top?metric=height")
        assert r.status_code == 422

    async def test_limit_bounds(self, client):
        assert (await client.get("/api/v1/divisions/top?limit=0")).status_code == 422
        assert (await client.get("/api/v1/divisions/top?limit=51")).status_code == 422


class TestDivisionDetail:
    async def test_detail(self, client):
        r = await client.get("/api/v1/divisions/Metropolitan NYC")
        assert r.status_code == 200

        data = r.json()
        assert (data["lat"], data["lng"]) == (40.7128, -74.006)
        assert data["jurisdiction"] == "NY"
        assert data["kind"] == "region"
        assert data["weapons"][0]["name"] == data["most_popular_weapon"]

    async def test_weapon_breakdown(self, client):
        data = (await client.get("/api/v1/divisions/New Jersey")).json()
        assert data["most_popular_weapon"] == "Epee"
        assert data["most_popular_total"] == 271
        weapons = data["weapons"]
        assert [w["name"] for w in weapons] == ["Epee", "Saber", "Foil"]
        assert weapons[0]["is_most_popular"] is True
        assert weapons[0]["share_of_max"] == pytest.approx(100.0)
        assert [r["label"] for r in weapons[0]["ratings"]] == ["A", "B", "C", "D", "E"]

    async def test_unknown_division_404(self, client):
        r = await client.get("/api/v1/divisions/Atlantis")
        assert r.status_code == 404
        assert r.json()["detail"] == "Unknown division: Atlantis"


class TestExport:
    async def test_csv_download(self, client):
        r = await client.get("/api/v1/divisions/export.csv")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/csv")
        assert r.headers["content-disposition"] == 'attachment; filename="fencing-divisions.csv"'

        lines = r.text.strip().split("\n")
        assert lines[0] == "Division,Members,Foil Total,Epee Total,Saber Total"
        assert lines[1] == "New Jersey,1648,191,271,227"
        assert len(lines) == 69

    async def test_export_is_not_a_division_name(self, client):
        """The literal export route must win over /{name}."""
        r = await client.get("/api/v1/divisions/export.csv")
        assert "Unknown division" not in r.text

    async def test_429_when_limit_exceeded(self, client):
        from fencemap.core.rate_limit import limiter

        with patch.object(limiter.limiter, "hit", return_value=False):
            r = await client.get("/api/v1/divisions/export.csv")

        assert r.status_code == 429
        assert "error" in r.json()
