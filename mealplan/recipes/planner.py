from __future__ import annotations

import logging

from ..catalog import get_catalog
from ..catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .explanation import explain
from .filtering import filter_recipes, stage_report
from .models import CatalogSource, PlanResponse, PreferenceSet

logger = logging.getLogger(__name__)


def build_plan(
    prefs: PreferenceSet,
    source: CatalogSource = CatalogSource.local,
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> PlanResponse:
    """Fetch a catalog, keep what matches ``prefs`` and explain an empty result."""
    catalog = get_catalog(source, prefs.included, config)

    matches = filter_recipes(catalog, prefs)
    stages = stage_report(catalog, prefs)

    message = None
    if not matches:
        message = explain(prefs)
        logger.info("No recipes matched out of %d: %s", len(catalog), message)

    return PlanResponse(
        recipes=matches,
        total_candidates=len(catalog),
        message=message,
        stages=stages,
    )
