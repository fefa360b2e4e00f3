from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

_REMOTE_PREFIX = "http"


class CaloricPhase(str, Enum):
    """Calorie band picked for the day (training, match, recovery)."""

    low = "low"
    medium = "medium"
    high = "high"

    @property
    def label(self) -> str:
        return _PHASE_LABELS[self]

    def admits(self, calories: int) -> bool:
        if self is CaloricPhase.low:
            return calories < 800
        if self is CaloricPhase.medium:
            return calories < 1200
        return calories >= 1200


_PHASE_LABELS: dict[CaloricPhase, str] = {
    CaloricPhase.low: "<800",
    CaloricPhase.medium: "<1200",
    CaloricPhase.high: "1200+",
}


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    amount: str
    unit: str


class RemoteImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["remote"] = "remote"
    url: str


class LocalAsset(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["local"] = "local"
    name: str


ImageSource = Annotated[Union[RemoteImage, LocalAsset], Field(discriminator="kind")]


def classify_image(reference: str) -> RemoteImage | LocalAsset:
    """Turn a raw image string from a catalog into a tagged image source."""
    if reference.startswith(_REMOTE_PREFIX):
        return RemoteImage(url=reference)
    return LocalAsset(name=reference)


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    title: str = Field(..., min_length=1)
    image: ImageSource
    ready_in_minutes: int = Field(..., ge=0, alias="readyInMinutes")
    servings: int = Field(..., ge=1)
    source_url: str | None = Field(default=None, alias="sourceUrl")
    recipe_id: str | None = Field(default=None, alias="recipeId")
    description: str | None = None
    allergens: tuple[str, ...] | None = None
    ingredients: tuple[Ingredient, ...] | None = None
    preparation: str | None = None
    calories: int | None = Field(default=None, ge=0)
    protein: int | None = Field(default=None, ge=0)
    carbs: int | None = Field(default=None, ge=0)
    fat: int | None = Field(default=None, ge=0)

    @field_validator("image", mode="before")
    @classmethod
    def _classify_image(cls, v):
        if isinstance(v, str):
            return classify_image(v)
        return v


def _dedupe(values) -> tuple[str, ...]:
    seen: list[str] = []
    for v in values:
        # blank tokens would match every ingredient name as a substring
        if v.strip() and v not in seen:
            seen.append(v)
    return tuple(seen)


class PreferenceSet(BaseModel):
    """
    The combined filter criteria of one plan request.

    Built fresh for every call to the filter. Lists keep their selection order
    and sets are sorted, so the no-match explanation always lists choices the
    same way.
    """

    model_config = ConfigDict(frozen=True)

    included: tuple[str, ...] = ()
    excluded: tuple[str, ...] = ()
    phase: CaloricPhase | None = None

    @field_validator("included", "excluded", mode="before")
    @classmethod
    def _coerce_choices(cls, v):
        if v is None:
            return ()
        if isinstance(v, str):
            return [v]
        # unordered input is sorted so the explanation text is stable
        if isinstance(v, (set, frozenset)):
            return sorted(v, key=str)
        return v

    @field_validator("included", "excluded")
    @classmethod
    def _drop_repeats(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return _dedupe(v)

    @property
    def is_empty(self) -> bool:
        return not self.included and not self.excluded and self.phase is None


class PreparationStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    step_number: int = Field(..., ge=1)
    instruction: str


# ── API payloads ─────────────────────────────────────────────────────────


class CatalogSource(str, Enum):
    local = "local"
    remote = "remote"


class PlanRequest(BaseModel):
    ingredients: list[str] = Field(default_factory=list)
    exclusions: list[str] = Field(default_factory=list)
    phase: CaloricPhase | None = None
    source: CatalogSource = CatalogSource.local

    def to_preferences(self) -> PreferenceSet:
        return PreferenceSet(
            included=self.ingredients,
            excluded=self.exclusions,
            phase=self.phase,
        )


class StageCount(BaseModel):
    stage: str
    remaining: int


class PlanResponse(BaseModel):
    recipes: list[Recipe]
    total_candidates: int
    message: str | None = None
    stages: list[StageCount] = Field(default_factory=list)


class StepsRequest(BaseModel):
    text: str = Field(..., max_length=20000)


class RecipeDetail(BaseModel):
    recipe: Recipe
    steps: list[PreparationStep]
