from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException

from .catalog import get_catalog
from .catalog.cache import get_cache_stats
from .catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .recipes.models import (
    PlanRequest,
    PlanResponse,
    PreparationStep,
    RecipeDetail,
    StepsRequest,
)
from .recipes.options import form_options
from .recipes.planner import build_plan
from .recipes.steps import segment

app = FastAPI(title="Meal Plan Recipe API", version="1.0.0")


def catalog_config() -> CatalogConfig:
    return DEFAULT_CATALOG_CONFIG


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return form_options()


# ── Planning ─────────────────────────────────────────────────────────────


@app.post("/plan", response_model=PlanResponse)
def plan(
    body: PlanRequest,
    config: CatalogConfig = Depends(catalog_config),
) -> PlanResponse:
    return build_plan(body.to_preferences(), body.source, config)


@app.get("/recipes/{recipe_id}", response_model=RecipeDetail)
def recipe_detail(
    recipe_id: int,
    config: CatalogConfig = Depends(catalog_config),
) -> RecipeDetail:
    for recipe in get_catalog(config=config):
        if recipe.id == recipe_id:
            return RecipeDetail(recipe=recipe, steps=segment(recipe.preparation))
    raise HTTPException(status_code=404, detail="Recipe not found")


@app.post("/steps", response_model=list[PreparationStep])
def steps(body: StepsRequest) -> list[PreparationStep]:
    return segment(body.text)


# ── Diagnostics ──────────────────────────────────────────────────────────


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
