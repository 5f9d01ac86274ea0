"""
Division dataset management.

Architecture decision: the table is static, so it is loaded and derived
once at startup into a module-level singleton. FastAPI's dependency
injection (get_divisions) gives routes read-only access without importing
the singleton directly.

Source: the bundled seed table (fencemap/data/divisions.py), or the JSON
file named by settings.dataset_path — a list of row objects with the same
keys.

The dataset is loaded in FastAPI's lifespan (startup) and dropped on
shutdown.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from fastapi import HTTPException
from pydantic import ValidationError

from fencemap.data.divisions import SEED_ROWS
from fencemap.models.division import DerivedDivision
from fencemap.services.metrics import aggregate

logger = logging.getLogger(__name__)


class DatasetStore:
    """
    Holds the derived division table.

    Tests can swap .divisions and .by_name on the singleton and restore them afterwards.
    """

    divisions: tuple[DerivedDivision, ...] = ()
    by_name: Mapping[str, DerivedDivision] = MappingProxyType({})
    source: Optional[str] = None


# Module-level singleton — all app code references this object
dataset_store = DatasetStore()


def _read_rows(path: str) -> list[dict]:
    with Path(path).open(encoding="utf-8") as fh:
        rows = json.load(fh)
    if not isinstance(rows, list):
        raise ValueError(f"Expected a JSON list of rows in {path}")
    return rows


def install(rows: Iterable, source: str) -> None:
    """Derive `rows` and publish them on the store. Raises on invalid rows."""
    divisions = tuple(aggregate(rows))
    by_name: dict[str, DerivedDivision] = {}
    for d in divisions:
        if d.name in by_name:
            raise ValueError(f"Duplicate division name: {d.name!r}")
        by_name[d.name] = d

    dataset_store.divisions = divisions
    dataset_store.by_name = MappingProxyType(by_name)
    dataset_store.source = source


def load_dataset(path: Optional[str] = None) -> None:
    """
    Load and derive the division table.

    Called once at app startup (via lifespan). A missing or malformed file
    is logged and leaves the store empty: the API keeps running and every
    data endpoint answers 503 until a good table is configured.
    """
    source = path or "seed"
    logger.info("Loading division dataset from %s", source)
    try:
        rows = SEED_ROWS if path is None else _read_rows(path)
        install(rows, source)
        logger.info("Division dataset ready (%d divisions)", len(dataset_store.divisions))
    except (OSError, ValueError, ValidationError) as exc:
        logger.warning(
            "Division dataset unavailable: %s. "
            "API running in degraded mode — data endpoints will return 503.",
            exc,
        )
        unload_dataset()


def unload_dataset() -> None:
    dataset_store.divisions = ()
    dataset_store.by_name = MappingProxyType({})
    dataset_store.source = None


def get_divisions() -> tuple[DerivedDivision, ...]:
    """
    FastAPI dependency — inject the derived division table.

    Raises 503 while the table is empty so the front end shows its
    loading / empty state instead of an empty map.
    """
    if not dataset_store.divisions:
        raise HTTPException(status_code=503, detail="Dataset not loaded")
    return dataset_store.divisions
