"""Tests for the substitution resolver."""

from ingredient_substitutions.data.aliases import ALIASES
from ingredient_substitutions.services.normalizer import normalize
from ingredient_substitutions.services.resolver import (
    MAX_SEARCH_RESULTS,
    SubstitutionResolver,
)


def _names(items) -> list[str]:
    return [item.substitute_ingredient for item in items]


def test_butter_lists_primary_first_and_includes_coconut_oil(
    resolver: SubstitutionResolver,
) -> None:
    items = resolver.get_substitutions("butter")

    assert items
    assert items[0].substitute_ingredient == "margarine"
    assert "coconut oil" in [normalize(name) for name in _names(items)]


def test_alias_resolves_to_same_result(resolver: SubstitutionResolver) -> None:
    assert resolver.get_substitutions("2% milk") == resolver.get_substitutions("milk")
    assert resolver.get_substitutions("Skim-Milk") == resolver.get_substitutions(
        "milk"
    )
    assert resolver.get_substitutions("egg") == resolver.get_substitutions("eggs")


def test_eggs_deduplicates_across_catalogs(resolver: SubstitutionResolver) -> None:
    names = [name.lower() for name in _names(resolver.get_substitutions("eggs"))]

    assert sum("flax" in name for name in names) == 1
    assert sum("applesauce" in name for name in names) == 1
    assert "aquafaba" in names


def test_primary_catalog_wins_on_name_collision(
    resolver: SubstitutionResolver,
) -> None:
    items = {
        normalize(item.substitute_ingredient): item
        for item in resolver.get_substitutions("butter")
    }

    assert items["coconut oil"].notes == (
        "Solid at room temp; adds slight coconut flavor."
    )
    assert items["olive oil"].ratio == "1:0.75"


def test_supplemental_only_ingredient(resolver: SubstitutionResolver) -> None:
    items = resolver.get_substitutions("Cultured Buttermilk")

    assert _names(items)[0] == "Milk + lemon juice"
    assert resolver.get_substitutions("buttermilk") == items


def test_no_duplicate_names_for_any_known_key(
    resolver: SubstitutionResolver,
) -> None:
    queries = list(resolver.catalog.all_known_keys())
    for variants in ALIASES.values():
        queries.extend(variants)

    for query in queries:
        names = [normalize(name) for name in _names(resolver.get_substitutions(query))]
        assert len(names) == len(set(names)), query
        assert all(names), query


def test_unknown_and_empty_ingredients_return_empty(
    resolver: SubstitutionResolver,
) -> None:
    assert resolver.get_substitutions("xyzzy-not-a-real-ingredient") == []
    assert resolver.get_substitutions("") == []
    assert resolver.get_substitutions("   ") == []
    assert resolver.get_substitutions("!!!") == []
    assert resolver.get_substitutions(None) == []


def test_fixture_catalog_merge_order(fixture_resolver: SubstitutionResolver) -> None:
    items = fixture_resolver.get_substitutions("BEURRE")

    assert _names(items) == ["Margarine", "Olive oil", "Ghee"]
    assert items[0].notes == "primary margarine"


def test_fixture_catalog_synonym_lookup(fixture_resolver: SubstitutionResolver) -> None:
    assert _names(fixture_resolver.get_substitutions("salted butter")) == [
        "Margarine",
        "Olive oil",
    ]


def test_search_starts_with_before_contains(resolver: SubstitutionResolver) -> None:
    results = resolver.search_ingredients("butter")

    assert results == ["butter", "buttermilk", "unsalted butter", "salted butter"]


def test_search_but_includes_butter_first(resolver: SubstitutionResolver) -> None:
    results = resolver.search_ingredients("but")

    assert "butter" in results
    contains_only = [key for key in results if not key.startswith("but")]
    if contains_only:
        assert results.index("butter") < results.index(contains_only[0])


def test_search_partition_ordering(resolver: SubstitutionResolver) -> None:
    for query in ["a", "cream", "oil", "sugar", "milk", "flour", " Or "]:
        needle = normalize(query)
        results = resolver.search_ingredients(query)
        flags = [key.startswith(needle) for key in results]
        assert flags == sorted(flags, reverse=True), query
        assert all(needle in key for key in results), query


def test_search_is_capped(resolver: SubstitutionResolver) -> None:
    results = resolver.search_ingredients("a")

    assert len(results) == MAX_SEARCH_RESULTS
    assert len(set(results)) == len(results)


def test_search_limit_can_only_lower_cap(resolver: SubstitutionResolver) -> None:
    lowered = SubstitutionResolver(
        catalog=resolver.catalog, normalizer=resolver.normalizer, search_limit=3
    )
    raised = SubstitutionResolver(
        catalog=resolver.catalog, normalizer=resolver.normalizer, search_limit=500
    )

    assert len(lowered.search_ingredients("a")) == 3
    assert len(raised.search_ingredients("a")) == MAX_SEARCH_RESULTS


def test_search_empty_query_returns_nothing(resolver: SubstitutionResolver) -> None:
    assert resolver.search_ingredients("") == []
    assert resolver.search_ingredients("   ") == []
    assert resolver.search_ingredients("?!") == []
    assert resolver.search_ingredients("zzzz") == []


def test_search_normalizes_query(resolver: SubstitutionResolver) -> None:
    assert resolver.search_ingredients("  SOUR-cream ") == ["sour cream"]


def test_generate_suggestions_echoes_trimmed_query(
    resolver: SubstitutionResolver,
) -> None:
    result = resolver.generate_suggestions("  Sour Cream  ")

    assert result.query == "Sour Cream"
    assert result.substitutions
    assert result.substitutions[0].substitute_ingredient == "plain Greek yogurt"


def test_generate_suggestions_blank_query(resolver: SubstitutionResolver) -> None:
    result = resolver.generate_suggestions("   ")

    assert result.query == ""
    assert result.substitutions == ()


def test_generate_suggestions_unknown_keeps_query(
    resolver: SubstitutionResolver,
) -> None:
    result = resolver.generate_suggestions("Dragon Fruit")

    assert result.query == "Dragon Fruit"
    assert result.substitutions == ()
