from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from ..recipes.models import Recipe
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .errors import CatalogDecodeError, CatalogNotFoundError

logger = logging.getLogger(__name__)


def parse_records(records: object) -> list[Recipe]:
    """Validate a decoded JSON array into recipes, keeping document order."""
    if not isinstance(records, list):
        raise CatalogDecodeError(f"Expected a list of recipes, got {type(records).__name__}")
    try:
        return [Recipe.model_validate(r) for r in records]
    except ValidationError as exc:
        raise CatalogDecodeError(str(exc)) from exc


def load_local_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> list[Recipe]:
    """
    Read the bundled recipe document.

    The file holds a single object whose ``config.local_key`` entry is the
    recipe array.
    """
    path = config.local_path
    if not path.is_file():
        raise CatalogNotFoundError(f"Recipe catalog not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as exc:
        raise CatalogDecodeError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(document, dict) or config.local_key not in document:
        raise CatalogDecodeError(f"{path} has no '{config.local_key}' array")

    recipes = parse_records(document[config.local_key])
    logger.info("Loaded %d recipes from %s", len(recipes), path)
    return recipes
