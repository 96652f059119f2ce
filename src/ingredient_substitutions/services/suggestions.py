"""LLM-backed substitution suggestions with catalog fallback."""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, Field, ValidationError

from ingredient_substitutions.domain.substitutions import (
    SubstitutionItem,
    SubstitutionSuggestions,
)
from ingredient_substitutions.services.cache import Cache
from ingredient_substitutions.services.normalizer import normalize
from ingredient_substitutions.services.resolver import SubstitutionResolver

MAX_AI_SUGGESTIONS = 6

_NULLABLE_STRING = {"anyOf": [{"type": "string"}, {"type": "null"}]}
_NUTRITION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "calories": {"type": "number", "minimum": 0},
        "fat": {"type": "number", "minimum": 0},
        "carbs": {"type": "number", "minimum": 0},
        "protein": {"type": "number", "minimum": 0},
    },
    "required": ["calories", "fat", "carbs", "protein"],
    "additionalProperties": False,
}

SUGGESTION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "query": {"type": "string"},
        "substitutions": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "substituteIngredient": {"type": "string"},
                    "ratio": {"type": "string"},
                    "category": _NULLABLE_STRING,
                    "notes": _NULLABLE_STRING,
                    "nutrition": {
                        "anyOf": [
                            {
                                "type": "object",
                                "properties": {
                                    "original": _NUTRITION_SCHEMA,
                                    "substitute": _NUTRITION_SCHEMA,
                                },
                                "required": ["original", "substitute"],
                                "additionalProperties": False,
                            },
                            {"type": "null"},
                        ]
                    },
                },
                "required": [
                    "substituteIngredient",
                    "ratio",
                    "category",
                    "notes",
                    "nutrition",
                ],
                "additionalProperties": False,
            },
        },
    },
    "required": ["query", "substitutions"],
    "additionalProperties": False,
}

SYSTEM_PROMPT = (
    "You are a concise culinary expert. Given an ingredient, return smart "
    "substitutions with exact swap ratios and one or two practical cooking notes. "
    "Dietary tags (vegan, gluten-free, kosher, halal) should influence choices "
    "when obvious. Prefer 3-5 high quality items relevant to the ingredient. "
    "Include rough nutrition per the amount implied by the ratio "
    "(total calories, grams of fat, carbs and protein)."
)

_logger = logging.getLogger(__name__)


class SuggestionClient(Protocol):
    """Interface for LLM substitution generation."""

    async def suggest(
        self,
        *,
        model: str,
        store: bool,
        instructions: str,
        prompt: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Return raw structured suggestions."""


class _SuggestionPayload(BaseModel):
    query: str = ""
    substitutions: list[SubstitutionItem] = Field(
        min_length=1, max_length=MAX_AI_SUGGESTIONS
    )


@dataclass
class AISuggestionService:
    """Generates substitutions with an LLM, falling back to the catalogs."""

    resolver: SubstitutionResolver
    cache: Cache
    client: SuggestionClient | None = None
    model: str = "gpt-4o-mini"
    store: bool = False
    cache_ttl_seconds: int = 3600

    async def suggest(
        self,
        ingredient: str | None,
        *,
        cuisine: str | None = None,
        dietary_restrictions: Iterable[str] = (),
    ) -> SubstitutionSuggestions:
        """Return suggestions for an ingredient; never raises for bad input."""
        trimmed = (ingredient or "").strip()
        if not trimmed:
            return SubstitutionSuggestions(query="", substitutions=())
        cuisine_value = (cuisine or "").strip() or None
        dietary = sorted({normalize(tag) for tag in dietary_restrictions} - {""})

        if self.client is None:
            return self._fallback(trimmed)

        cache_key = _cache_key(
            self.resolver.normalizer.to_canonical_key(trimmed), cuisine_value, dietary
        )
        cached = self.cache.get(cache_key)
        if isinstance(cached, SubstitutionSuggestions):
            return cached

        prompt = json.dumps(
            {
                "ingredient": trimmed,
                "cuisine": cuisine_value,
                "dietaryRestrictions": dietary,
            }
        )
        try:
            raw = await self.client.suggest(
                model=self.model,
                store=self.store,
                instructions=SYSTEM_PROMPT,
                prompt=prompt,
                schema=SUGGESTION_SCHEMA,
            )
        except Exception:
            _logger.exception("AI substitution request failed: query=%s", trimmed)
            return self._fallback(trimmed)

        try:
            payload = _SuggestionPayload.model_validate(raw)
        except ValidationError as exc:
            _logger.warning(
                "AI substitution output rejected: query=%s errors=%s",
                trimmed,
                exc.error_count(),
            )
            return self._fallback(trimmed)

        unique = _dedupe(payload.substitutions)
        if not unique:
            return self._fallback(trimmed)
        result = SubstitutionSuggestions(
            query=payload.query.strip() or trimmed,
            substitutions=tuple(unique[:MAX_AI_SUGGESTIONS]),
        )
        self.cache.set(cache_key, result, ttl_seconds=self.cache_ttl_seconds)
        return result

    def _fallback(self, query: str) -> SubstitutionSuggestions:
        items = self.resolver.get_substitutions(query)[:MAX_AI_SUGGESTIONS]
        return SubstitutionSuggestions(query=query, substitutions=tuple(items))


def _dedupe(items: list[SubstitutionItem]) -> list[SubstitutionItem]:
    """Drop repeated substitute names, keeping the first."""
    seen: set[str] = set()
    unique: list[SubstitutionItem] = []
    for item in items:
        name = normalize(item.substitute_ingredient)
        if not name or name in seen:
            continue
        seen.add(name)
        unique.append(item)
    return unique


def _cache_key(key: str, cuisine: str | None, dietary: list[str]) -> str:
    return f"ai:substitutions:{key}:{normalize(cuisine)}:{','.join(dietary)}"
