from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "recetas.json"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where recipes come from.

    The local document is the bundled dataset unless ``MEALPLAN_CATALOG_PATH``
    points elsewhere; the remote search needs ``SPOONACULAR_API_KEY``.
    """

    local_path: Path = field(
        default_factory=lambda: Path(os.getenv("MEALPLAN_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    )
    local_key: str = "recetas"
    api_key: str = field(default_factory=lambda: os.getenv("SPOONACULAR_API_KEY", ""))
    search_url: str = "https://api.spoonacular.com/recipes/findByIngredients"
    timeout: float = 10.0
    cache_ttl: int = field(default_factory=lambda: int(os.getenv("MEALPLAN_CACHE_TTL", "300")))


DEFAULT_CATALOG_CONFIG = CatalogConfig()
