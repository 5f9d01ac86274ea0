"""
metrics.py — Per-division weapon totals and "most popular weapon".

USAGE
─────
    from fencemap.services.metrics import aggregate, dominant_category

    divisions = aggregate(rows)            # rows: DivisionRecord or plain dicts
    top = dominant_category(divisions[0])  # WeaponTotal(name="Foil", total=318, ...)

All functions here are pure: no I/O, no logging, no failure modes beyond
pydantic validation of malformed input rows.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Union

from fencemap.models.division import (
    RATINGS,
    WEAPON_FAMILIES,
    DerivedDivision,
    DivisionRecord,
    RatingCount,
    WeaponFamily,
    WeaponStats,
    WeaponTotal,
)


RowLike = Union[DivisionRecord, Mapping[str, object]]


def family_total(record: DivisionRecord, family: WeaponFamily) -> int:
    return sum(record.rating_count(family.name, r) for r in RATINGS)


def derive(record: RowLike) -> DerivedDivision:
    """Sum each weapon's five rating counts into a `total_<weapon>` field."""
    if not isinstance(record, DivisionRecord):
        record = DivisionRecord.model_validate(record)
    data = record.model_dump()
    for family in WEAPON_FAMILIES:
        data[f"total_{family.name.lower()}"] = family_total(record, family)
    return DerivedDivision.model_validate(data)


def aggregate(records: Iterable[RowLike]) -> list[DerivedDivision]:
    """Derive every row. Re-aggregating derived rows yields the same totals."""
    return [derive(r) for r in records]


def weapon_totals(division: DerivedDivision) -> list[WeaponTotal]:
    return division.weapon_totals()


def dominant_category(division: DerivedDivision) -> WeaponTotal:
    """
    Weapon with the largest total (see DerivedDivision.dominant_weapon).

    Never None, so callers can render a "no rated fencers" state without a
    null check.
    """
    return division.dominant_weapon()


def weapon_breakdown(division: DerivedDivision) -> list[WeaponStats]:
    """Weapons sorted by total (desc) with rating bars and share-of-max."""
    families = sorted(
        WEAPON_FAMILIES,
        key=lambda f: division.total_for(f.name),
        reverse=True,
    )
    max_total = max((division.total_for(f.name) for f in families), default=0)

    stats = []
    for idx, family in enumerate(families):
        total = division.total_for(family.name)
        stats.append(WeaponStats(
            name=family.name,
            total=total,
            color=family.color,
            share_of_max=(total / max_total) * 100 if max_total > 0 else 0.0,
            is_most_popular=idx == 0 and total > 0,
            ratings=[
                RatingCount(label=r, value=division.rating_count(family.name, r))
                for r in RATINGS
            ],
        ))
    return stats
