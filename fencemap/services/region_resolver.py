"""
region_resolver.py — Division name → map coordinate.

USAGE
─────
    from fencemap.services.region_resolver import resolve, jitter

    resolve("Metropolitan NYC")   # curated point  → Coordinate(lat=40.7128, lng=-74.006)
    resolve("Ohio Valley")        # substring "Ohio" → Ohio centroid
    resolve("Atlantis")           # no match       → Kansas centroid
    jitter("Gulf Coast")          # stable (dLat, dLon) in [-0.7, 0.7]

Resolution order
────────────────
1. Curated division coordinate (geo_tables.DIVISION_COORDINATES).
2. Jurisdiction code, first hit wins:
     a. division → code table
     b. exact jurisdiction name ("Ohio" → "OH")
     c. first jurisdiction name contained in the identifier
     d. DEFAULT_JURISDICTION
3. Centroid for that code, or the default centroid if the code is unknown.

`resolve` is total: it never raises and never returns None. A miss is not
an error — the marker simply lands on a less precise point.
"""

from __future__ import annotations

from fencemap.models.map import Coordinate, clamp_coordinate
from fencemap.services.geo_tables import (
    DEFAULT_JURISDICTION,
    DIVISION_COORDINATES,
    DIVISION_JURISDICTIONS,
    JURISDICTION_CENTROIDS,
    JURISDICTION_CODES,
    REGION_KEYWORDS,
)

DEFAULT_JITTER_RANGE = 0.7

_UINT32_MASK = 0xFFFFFFFF


def resolve_jurisdiction(identifier: str) -> str:
    """Return the two-letter jurisdiction code a division is anchored to."""
    code = DIVISION_JURISDICTIONS.get(identifier)
    if code:
        return code
    code = JURISDICTION_CODES.get(identifier)
    if code:
        return code
    for name, code in JURISDICTION_CODES.items():
        if name in identifier:
            return code
    return DEFAULT_JURISDICTION


def resolve(identifier: str) -> Coordinate:
    """Resolve a division (or any free-form region name) to a coordinate."""
    curated = DIVISION_COORDINATES.get(identifier)
    if curated is None:
        code = resolve_jurisdiction(identifier)
        curated = JURISDICTION_CENTROIDS.get(code, JURISDICTION_CENTROIDS[DEFAULT_JURISDICTION])
    lat, lng = curated
    return Coordinate(lat=lat, lng=lng)


def is_region_name(identifier: str) -> bool:
    """True for sub-state divisions ("Gulf Coast"), False for plain states ("Ohio")."""
    if identifier in JURISDICTION_CODES:
        return False
    if any(keyword in identifier for keyword in REGION_KEYWORDS):
        return True
    return len(identifier.split()) > 1


# ── Deterministic jitter ──────────────────────────────────────────────────────

def _utf16_units(text: str):
    # Fold UTF-16 code units, not code points, so non-BMP characters hash
    # the same way a browser's charCodeAt() loop would.
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def string_hash(text: str) -> int:
    """Unsigned 32-bit multiply-by-31-and-add fold of the text's code units."""
    h = 0
    for unit in _utf16_units(text):
        h = (h * 31 + unit) & _UINT32_MASK
    return h


def jitter(identifier: str, jitter_range: float = DEFAULT_JITTER_RANGE) -> tuple[float, float]:
    """
    Stable pseudo-random (dLat, dLon) offset for an identifier.

    Two disjoint slices of the hash (low bits, and bits from 10 upward) are
    each reduced mod 1000 and mapped onto [-1, 1], then scaled by
    `jitter_range`. Same identifier and range → bit-identical output on
    every run and platform.
    """
    h = string_hash(identifier)
    rand_a = ((h % 1000) / 999) * 2 - 1
    rand_b = (((h >> 10) % 1000) / 999) * 2 - 1
    return (rand_a * jitter_range, rand_b * jitter_range)


def jittered(identifier: str, jitter_range: float = DEFAULT_JITTER_RANGE) -> Coordinate:
    """The resolved coordinate nudged by `jitter`, clamped to valid ranges."""
    base = resolve(identifier)
    d_lat, d_lng = jitter(identifier, jitter_range)
    return clamp_coordinate(base.lat + d_lat, base.lng + d_lng)
