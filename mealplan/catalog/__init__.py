"""
Recipe catalog providers.

Responsibilities:
- Load the bundled recipe dataset from disk.
- Search the remote recipe service by ingredient.
- Report any failure as "no catalog" so planning always has a list to filter.
"""
from __future__ import annotations

import logging

from ..recipes.models import CatalogSource, Recipe
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .errors import CatalogError
from .local import load_local_catalog
from .remote import fetch_remote_catalog

logger = logging.getLogger(__name__)


def get_catalog(
    source: CatalogSource = CatalogSource.local,
    ingredients: list[str] | tuple[str, ...] = (),
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> list[Recipe]:
    """Return the recipes from ``source``, or an empty list if it fails."""
    try:
        if source is CatalogSource.remote:
            return fetch_remote_catalog(ingredients, config)
        return load_local_catalog(config)
    except CatalogError:
        logger.warning("Recipe catalog unavailable, planning with no recipes", exc_info=True)
        return []
