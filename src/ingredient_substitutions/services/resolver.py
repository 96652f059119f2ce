"""Substitution lookup and ingredient search."""

import logging
from dataclasses import dataclass

from ingredient_substitutions.domain.substitutions import (
    SubstitutionItem,
    SubstitutionSuggestions,
)
from ingredient_substitutions.services.catalog import CatalogStore
from ingredient_substitutions.services.normalizer import Normalizer, normalize

MAX_SEARCH_RESULTS = 20

_logger = logging.getLogger(__name__)


@dataclass
class SubstitutionResolver:
    """Answers substitution and autocomplete queries over a catalog store.

    Every operation is total: empty, malformed or unknown input yields an
    empty result instead of an exception.
    """

    catalog: CatalogStore
    normalizer: Normalizer
    search_limit: int = MAX_SEARCH_RESULTS

    def get_substitutions(self, raw_ingredient: str | None) -> list[SubstitutionItem]:
        """Return deduplicated substitutes, primary catalog first."""
        key = self.normalizer.to_canonical_key(raw_ingredient)
        if not key:
            return []
        merged: list[SubstitutionItem] = []
        seen: set[str] = set()
        for source in self.catalog.sources():
            for item in source.lookup(key):
                name = normalize(item.substitute_ingredient)
                if not name or name in seen:
                    continue
                seen.add(name)
                merged.append(item)
        _logger.debug("Substitutions lookup: key=%s results=%s", key, len(merged))
        return merged

    def search_ingredients(self, query: str | None) -> list[str]:
        """Return known keys starting with the query, then those containing it."""
        needle = normalize(query)
        if not needle:
            return []
        starts_with: list[str] = []
        contains: list[str] = []
        for key in self.catalog.all_known_keys():
            if key.startswith(needle):
                starts_with.append(key)
            elif needle in key:
                contains.append(key)
        limit = min(self.search_limit, MAX_SEARCH_RESULTS)
        return [*starts_with, *contains][:limit]

    def generate_suggestions(self, query: str | None) -> SubstitutionSuggestions:
        """Pair the trimmed query with its substitutions."""
        trimmed = (query or "").strip()
        if not trimmed:
            return SubstitutionSuggestions(query="", substitutions=())
        return SubstitutionSuggestions(
            query=trimmed,
            substitutions=tuple(self.get_substitutions(trimmed)),
        )
