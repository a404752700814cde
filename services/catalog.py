"""
Dessert catalog: the built-in list, JSON loading, and dessert selection.

A catalog is a non-empty tuple of Dessert sorted ascending by
start_production_amount. Entries may share a threshold; the later one wins.
"""

from __future__ import annotations

import json
import logging
import os
from bisect import bisect_right
from typing import Any, Iterable, Optional, Sequence, Tuple

from models.dessert import Dessert
from services.config import Config

logger = logging.getLogger(__name__)

Catalog = Tuple[Dessert, ...]


class CatalogError(ValueError):
    """Raised when a catalog is empty, unsorted, or cannot be read."""


_DEFAULT_CATALOG: Catalog = (
    Dessert("Cupcake", 5, 0),
    Dessert("Donut", 10, 5),
    Dessert("Eclair", 15, 20),
    Dessert("Froyo", 30, 50),
    Dessert("Gingerbread", 50, 100),
    Dessert("Honeycomb", 100, 200),
    Dessert("Ice Cream Sandwich", 500, 500),
    Dessert("Jellybean", 1000, 1000),
    Dessert("KitKat", 2000, 2000),
    Dessert("Lollipop", 3000, 4000),
    Dessert("Marshmallow", 4000, 8000),
    Dessert("Nougat", 5000, 16000),
    Dessert("Oreo", 6000, 20000),
)


def default_catalog() -> Catalog:
    """Return the built-in dessert list."""
    return _DEFAULT_CATALOG


def validate_catalog(desserts: Iterable[Dessert]) -> Catalog:
    """
    Check catalog invariants and return the catalog as a tuple.

    Raises:
        CatalogError: if empty, holds a non-Dessert, or is not sorted
                      ascending by start_production_amount.
    """
    catalog = tuple(desserts)
    if not catalog:
        raise CatalogError("catalog must contain at least one dessert")
    for item in catalog:
        if not isinstance(item, Dessert):
            raise CatalogError(f"catalog entries must be Dessert, got {type(item).__name__}")
    for prev, cur in zip(catalog, catalog[1:]):
        if cur.start_production_amount < prev.start_production_amount:
            raise CatalogError(
                f"catalog not sorted: {cur.name!r} ({cur.start_production_amount}) "
                f"follows {prev.name!r} ({prev.start_production_amount})"
            )
    return catalog


def load_catalog(path: str) -> Catalog:
    """
    Load and validate a catalog from a JSON file.

    The file holds a list of objects with name, price and
    start_production_amount (see Dessert.to_dict()).
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw: Any = json.load(f)
    except (OSError, ValueError) as e:
        raise CatalogError(f"cannot read catalog {path!r}: {e}") from e

    if not isinstance(raw, list):
        raise CatalogError(f"catalog {path!r} must be a JSON list")
    try:
        desserts = [Dessert.from_dict(item) for item in raw]
    except (TypeError, AttributeError, ValueError) as e:
        raise CatalogError(f"bad dessert in catalog {path!r}: {e}") from e

    catalog = validate_catalog(desserts)
    logger.info("Loaded %d desserts from %s", len(catalog), path)
    return catalog


def resolve_catalog(environ: Optional[dict] = None) -> Catalog:
    """Use the JSON catalog named by the env override if set, else the default."""
    env = os.environ if environ is None else environ
    path = env.get(Config.CATALOG_ENV_VAR)
    if path:
        return load_catalog(path)
    return default_catalog()


def select_dessert(catalog: Sequence[Dessert], desserts_sold: int) -> Dessert:
    """
    Return the last dessert whose start_production_amount <= desserts_sold.

    Falls back to the first dessert when desserts_sold is below every
    threshold. Assumes catalog is sorted (see validate_catalog()).

    Examples:
        >>> cat = (Dessert("a", 1, 0), Dessert("b", 2, 5), Dessert("c", 3, 5))
        >>> select_dessert(cat, 4).name
        'a'
        >>> select_dessert(cat, 5).name
        'c'
    """
    thresholds = [d.start_production_amount for d in catalog]
    idx = bisect_right(thresholds, desserts_sold) - 1
    return catalog[idx] if idx >= 0 else catalog[0]
