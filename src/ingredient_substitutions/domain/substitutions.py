"""Domain models for ingredient substitutions."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class Nutrition(BaseModel):
    """Macro values for one serving of an ingredient."""

    model_config = _MODEL_CONFIG

    calories: float = Field(ge=0)
    fat: float = Field(ge=0)
    carbs: float = Field(ge=0)
    protein: float = Field(ge=0)
    serving_description: str | None = None


class NutritionComparison(BaseModel):
    """Before/after macros for a substitution."""

    model_config = _MODEL_CONFIG

    original: Nutrition
    substitute: Nutrition


class SubstitutionItem(BaseModel):
    """One candidate replacement for an ingredient.

    ``ratio`` is free text meant for display and is never parsed.
    """

    model_config = _MODEL_CONFIG

    substitute_ingredient: str = Field(min_length=1)
    ratio: str = Field(min_length=1)
    category: str | None = None
    notes: str | None = None
    nutrition: NutritionComparison | None = None


class CatalogEntry(BaseModel):
    """Primary catalog record for one original ingredient."""

    model_config = _MODEL_CONFIG

    original_ingredient: str = Field(min_length=1)
    synonyms: tuple[str, ...] = ()
    category: str | None = None
    substitutions: tuple[SubstitutionItem, ...] = ()


class SubstitutionSuggestions(BaseModel):
    """A query echoed back with its substitution results."""

    model_config = _MODEL_CONFIG

    query: str
    substitutions: tuple[SubstitutionItem, ...] = ()
