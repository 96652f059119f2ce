"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from ingredient_substitutions.app_logging import PACKAGE_LOGGER
from ingredient_substitutions.config import Settings
from ingredient_substitutions.containers import AppContainer
from ingredient_substitutions.domain.substitutions import CatalogEntry, SubstitutionItem
from ingredient_substitutions.services.cache import InMemoryCache
from ingredient_substitutions.services.catalog import CatalogStore
from ingredient_substitutions.services.loader import (
    build_catalog,
    load_catalog_document,
)
from ingredient_substitutions.services.normalizer import AliasTable, Normalizer
from ingredient_substitutions.services.resolver import SubstitutionResolver
from ingredient_substitutions.services.suggestions import (
    AISuggestionService,
    SuggestionClient,
)


@dataclass
class FakeSuggestionClient(SuggestionClient):
    """Fake LLM client returning a fixed payload and recording prompts."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "query": "butter",
            "substitutions": [
                {
                    "substituteIngredient": "Ghee",
                    "ratio": "1:1",
                    "category": "dairy",
                    "notes": "Nutty flavor.",
                    "nutrition": None,
                },
                {
                    "substituteIngredient": "Avocado oil",
                    "ratio": "3/4 cup oil = 1 cup butter",
                    "category": None,
                    "notes": None,
                    "nutrition": {
                        "original": {
                            "calories": 1628,
                            "fat": 184,
                            "carbs": 1,
                            "protein": 2,
                        },
                        "substitute": {
                            "calories": 1440,
                            "fat": 163,
                            "carbs": 0,
                            "protein": 0,
                        },
                    },
                },
            ],
        }
    )
    prompts: list[str] = field(default_factory=list)

    async def suggest(
        self,
        *,
        model: str,
        store: bool,
        instructions: str,
        prompt: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        self.prompts.append(prompt)
        return self.payload


@dataclass
class FailingSuggestionClient(SuggestionClient):
    """Fake LLM client that always errors."""

    calls: int = 0

    async def suggest(
        self,
        *,
        model: str,
        store: bool,
        instructions: str,
        prompt: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        self.calls += 1
        raise RuntimeError("upstream unavailable")


def make_item(name: str, ratio: str = "1:1", **extra: object) -> SubstitutionItem:
    return SubstitutionItem(substitute_ingredient=name, ratio=ratio, **extra)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key=None, catalog_path=None)


@pytest.fixture
def builtin_catalog() -> tuple[CatalogStore, Normalizer]:
    return build_catalog(load_catalog_document(), strict_aliases=True)


@pytest.fixture
def resolver(builtin_catalog: tuple[CatalogStore, Normalizer]) -> SubstitutionResolver:
    catalog, normalizer = builtin_catalog
    return SubstitutionResolver(catalog=catalog, normalizer=normalizer)


@pytest.fixture
def fixture_resolver() -> SubstitutionResolver:
    """Resolver over a tiny hand-built catalog."""
    catalog = CatalogStore.from_data(
        [
            CatalogEntry(
                original_ingredient="Butter",
                synonyms=("Salted Butter",),
                substitutions=(
                    make_item("Margarine", notes="primary margarine"),
                    make_item("Olive oil", ratio="3:4"),
                ),
            ),
            CatalogEntry(
                original_ingredient="butter",
                substitutions=(make_item("Shadowed entry"),),
            ),
        ],
        {
            "butter": [
                make_item("margarine", notes="supplemental margarine"),
                make_item("  "),
                make_item("Ghee"),
            ],
            "peanut butter": [make_item("Almond butter")],
        },
    )
    normalizer = Normalizer(AliasTable.from_groups({"butter": ["beurre"]}))
    return SubstitutionResolver(catalog=catalog, normalizer=normalizer)


@pytest.fixture
def suggestion_client() -> FakeSuggestionClient:
    return FakeSuggestionClient()


@pytest.fixture
def container(
    settings: Settings,
    resolver: SubstitutionResolver,
    suggestion_client: FakeSuggestionClient,
) -> AppContainer:
    suggestion_service = AISuggestionService(
        resolver=resolver,
        cache=InMemoryCache(),
        client=suggestion_client,
        model=settings.openai_model,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=resolver.catalog,
        resolver=resolver,
        suggestion_service=suggestion_service,
        close_resources=close_resources,
    )
