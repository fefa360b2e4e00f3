from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from .models import CaloricPhase, PreferenceSet, Recipe, StageCount

logger = logging.getLogger(__name__)

Predicate = Callable[[Recipe], bool]


def _allergen_stage(excluded: tuple[str, ...]) -> Predicate:
    blocked = set(excluded)

    def keep(recipe: Recipe) -> bool:
        # Missing allergen data is not a violation
        if recipe.allergens is None:
            return True
        return not any(tag in blocked for tag in recipe.allergens)

    return keep


def _ingredient_stage(included: tuple[str, ...]) -> Predicate:
    tokens = [t.casefold() for t in included]

    def keep(recipe: Recipe) -> bool:
        # Missing ingredient list never satisfies an inclusion
        if recipe.ingredients is None:
            return False
        return any(
            token in ingredient.name.casefold()
            for ingredient in recipe.ingredients
            for token in tokens
        )

    return keep


def _phase_stage(phase: CaloricPhase) -> Predicate:
    def keep(recipe: Recipe) -> bool:
        if recipe.calories is None:
            return True
        return phase.admits(recipe.calories)

    return keep


def active_stages(prefs: PreferenceSet) -> list[tuple[str, Predicate]]:
    """Return the (name, predicate) pairs for every constraint that is set, in
    the fixed order allergens → ingredients → calories."""
    stages: list[tuple[str, Predicate]] = []
    if prefs.excluded:
        stages.append(("allergens", _allergen_stage(prefs.excluded)))
    if prefs.included:
        stages.append(("ingredients", _ingredient_stage(prefs.included)))
    if prefs.phase is not None:
        stages.append(("calories", _phase_stage(prefs.phase)))
    return stages


def filter_recipes(recipes: Iterable[Recipe], prefs: PreferenceSet) -> list[Recipe]:
    """
    Keep the recipes compatible with every active preference.

    Survivors keep their catalog order; nothing is reordered, deduplicated or
    mutated. With no active constraint the catalog comes back unchanged.
    """
    stages = active_stages(prefs)
    return [r for r in recipes if all(keep(r) for _, keep in stages)]


def stage_report(recipes: Sequence[Recipe], prefs: PreferenceSet) -> list[StageCount]:
    """Count how many recipes are still standing after each active stage."""
    remaining = list(recipes)
    report: list[StageCount] = []
    for name, keep in active_stages(prefs):
        remaining = [r for r in remaining if keep(r)]
        report.append(StageCount(stage=name, remaining=len(remaining)))
        logger.debug("Stage %s left %d of %d recipes", name, len(remaining), len(recipes))
    return report
