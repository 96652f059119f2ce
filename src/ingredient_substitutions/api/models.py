"""Pydantic models for the substitutions HTTP API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ingredient_substitutions.domain.substitutions import SubstitutionItem


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchResponse(_CamelModel):
    """Autocomplete results."""

    results: list[str]


class SubstitutionsResponse(_CamelModel):
    """Substitutions for one ingredient."""

    substitutions: list[SubstitutionItem]


class AISuggestionRequest(_CamelModel):
    """Body for AI substitution requests."""

    ingredient: str = ""
    cuisine: str | None = None
    dietary_restrictions: list[str] = []


class AISuggestionResponse(_CamelModel):
    """AI substitution payload; ``substitutions`` mirrors ``ai_substitutions``."""

    ok: bool = True
    query: str
    ai_substitutions: list[SubstitutionItem]
    substitutions: list[SubstitutionItem]
