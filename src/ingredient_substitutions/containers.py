"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ingredient_substitutions.adapters.openai_suggestion_client import (
    OpenAISuggestionClient,
)
from ingredient_substitutions.config import Settings
from ingredient_substitutions.services.cache import InMemoryCache
from ingredient_substitutions.services.catalog import CatalogStore
from ingredient_substitutions.services.loader import build_catalog, load_catalog_document
from ingredient_substitutions.services.resolver import SubstitutionResolver
from ingredient_substitutions.services.suggestions import AISuggestionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: CatalogStore
    resolver: SubstitutionResolver
    suggestion_service: AISuggestionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Raises ``CatalogError`` when the catalog data is malformed.
    """
    resolved_settings = settings or Settings()
    document = load_catalog_document(resolved_settings.catalog_path)
    catalog, normalizer = build_catalog(
        document, strict_aliases=resolved_settings.strict_aliases
    )
    resolver = SubstitutionResolver(
        catalog=catalog,
        normalizer=normalizer,
        search_limit=resolved_settings.search_limit,
    )
    openai_client = (
        OpenAISuggestionClient.create(resolved_settings.openai_api_key)
        if resolved_settings.openai_api_key
        else None
    )
    suggestion_service = AISuggestionService(
        resolver=resolver,
        cache=InMemoryCache(),
        client=openai_client,
        model=resolved_settings.openai_model,
        store=resolved_settings.openai_store,
        cache_ttl_seconds=resolved_settings.ai_cache_ttl_seconds,
    )

    async def close_resources() -> None:
        if openai_client is not None:
            await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        resolver=resolver,
        suggestion_service=suggestion_service,
        close_resources=close_resources,
    )
