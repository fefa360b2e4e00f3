from __future__ import annotations

import logging

import requests

from ..recipes.models import Recipe
from .cache import cache_get, cache_set
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .errors import CatalogDecodeError, CatalogTransportError
from .local import parse_records

logger = logging.getLogger(__name__)


def fetch_remote_catalog(
    ingredients: list[str] | tuple[str, ...],
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> list[Recipe]:
    """
    Search the remote recipe service by ingredient.

    Results are cached per ingredient query for ``config.cache_ttl`` seconds.
    """
    if not config.api_key:
        raise CatalogTransportError("SPOONACULAR_API_KEY is not configured")

    query = ",".join(ingredients)
    # same search whatever the order or case of the selection
    normalized = sorted({t.strip().casefold() for t in ingredients if t.strip()})
    cache_key = {"url": config.search_url, "ingredients": normalized}
    cached = cache_get(cache_key, config.cache_ttl)
    if cached is not None:
        return cached

    try:
        resp = requests.get(
            config.search_url,
            params={"apiKey": config.api_key, "ingredients": query},
            timeout=config.timeout,
        )
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise CatalogTransportError(f"Recipe search failed: {exc}") from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise CatalogDecodeError(f"Recipe search returned invalid JSON: {exc}") from exc

    recipes = parse_records(payload)
    logger.info("Remote search for %r returned %d recipes", query, len(recipes))
    cache_set(cache_key, recipes, config.cache_ttl)
    return recipes
