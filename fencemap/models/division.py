"""
division.py — Pydantic models for division records and their derived totals.

Row shape (one per division, as exported by the federation):

  {
    "name": "New Jersey",
    "members": 1648,
    "Foil_A": 44, "Foil_B": 24, ..., "Foil_E": 60,
    "Epee_A": 57, ...,
    "Saber_A": 36, ..., "Saber_E": 74
  }

Every count is a non-negative integer. A missing sub-count is read as 0, so
an all-zero (or nearly empty) row is valid and flows through every
derivation without special-casing.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

RATINGS: tuple[str, ...] = ("A", "B", "C", "D", "E")


@dataclass(frozen=True)
class WeaponFamily:
    """Display + layout config for one weapon. Single source of truth."""

    name:   str
    color:  str
    offset: tuple[float, float]   # (dLat, dLon) unit offset used in overlay mode

    @property
    def rating_keys(self) -> tuple[str, ...]:
        return tuple(f"{self.name}_{r}" for r in RATINGS)


# Declaration order is the tie-break for the most popular weapon and the
# default row order of the weapon breakdown.
WEAPON_FAMILIES: tuple[WeaponFamily, ...] = (
    WeaponFamily("Foil",  "#2ca02c", (-0.15, -0.15)),
    WeaponFamily("Epee",  "#ff7f0e", (0.15, -0.15)),
    WeaponFamily("Saber", "#d62728", (0.0, 0.15)),
)


class WeaponTotal(NamedTuple):
    name:  str
    total: int
    color: str


# Members with no division assigned. Exported, never drawn or ranked.
PLACEHOLDER_DIVISION = "None"


class DivisionRecord(BaseModel):
    """A raw division row: member count plus rated fencers per weapon/rating."""

    model_config = ConfigDict(frozen=True)

    name:    str = Field(..., min_length=1)
    members: int = Field(default=0, ge=0)   # raw population count

    # ── Rated fencers (A = highest rating) ────────────────────────────────────
    Foil_A:  int = Field(default=0, ge=0)
    Foil_B:  int = Field(default=0, ge=0)
    Foil_C:  int = Field(default=0, ge=0)
    Foil_D:  int = Field(default=0, ge=0)
    Foil_E:  int = Field(default=0, ge=0)
    Epee_A:  int = Field(default=0, ge=0)
    Epee_B:  int = Field(default=0, ge=0)
    Epee_C:  int = Field(default=0, ge=0)
    Epee_D:  int = Field(default=0, ge=0)
    Epee_E:  int = Field(default=0, ge=0)
    Saber_A: int = Field(default=0, ge=0)
    Saber_B: int = Field(default=0, ge=0)
    Saber_C: int = Field(default=0, ge=0)
    Saber_D: int = Field(default=0, ge=0)
    Saber_E: int = Field(default=0, ge=0)

    def rating_count(self, weapon: str, rating: str) -> int:
        return getattr(self, f"{weapon}_{rating}", 0) or 0

    @property
    def is_placeholder(self) -> bool:
        return self.name == PLACEHOLDER_DIVISION


class DerivedDivision(DivisionRecord):
    """A division row extended with one summed total per weapon family."""

    total_foil:  int = Field(default=0, ge=0)
    total_epee:  int = Field(default=0, ge=0)
    total_saber: int = Field(default=0, ge=0)

    def total_for(self, weapon: str) -> int:
        return getattr(self, f"total_{weapon.lower()}")

    def weapon_totals(self) -> list[WeaponTotal]:
        return [WeaponTotal(f.name, self.total_for(f.name), f.color) for f in WEAPON_FAMILIES]

    def dominant_weapon(self) -> WeaponTotal:
        """
        Weapon with the largest total.

        Ties go to the first-declared weapon, and an all-zero division returns
        the first weapon with total 0, never None.
        """
        totals = self.weapon_totals()
        best = totals[0]
        for candidate in totals[1:]:
            if candidate.total > best.total:
                best = candidate
        return best


# ── API response shapes ───────────────────────────────────────────────────────

class RatingCount(BaseModel):
    """One bar of the per-weapon rating chart."""

    label: str   # "A" … "E"
    value: int


class WeaponStats(BaseModel):
    """Per-weapon summary shown in the division detail panel."""

    name:            str
    total:           int
    color:           str
    share_of_max:    float   # 0–100, relative to the strongest weapon in this division
    is_most_popular: bool
    ratings:         list[RatingCount]


class DivisionSummary(BaseModel):
    """Row of GET /api/v1/divisions."""

    name:        str
    kind:        str         # "state" | "region"
    members:     int
    total_foil:  int
    total_epee:  int
    total_saber: int


class DivisionDetail(DivisionSummary):
    """GET /api/v1/divisions/{name} — everything the side panel renders."""

    lat:                 float
    lng:                 float
    jurisdiction:        str
    most_popular_weapon: str
    most_popular_total:  int
    weapons:             list[WeaponStats]


class RankedDivision(BaseModel):
    """One card of the Top-N strip."""

    rank:   int
    name:   str
    value:  int
    color:  str
    weapon: Optional[str] = None   # set only for the "most popular weapon" metric
