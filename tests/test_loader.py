"""Tests for catalog loading."""

import json

import pytest

from ingredient_substitutions.services.errors import CatalogError
from ingredient_substitutions.services.loader import (
    build_catalog,
    builtin_catalog_data,
    load_catalog_document,
    parse_catalog_data,
    read_catalog_file,
)
from ingredient_substitutions.services.resolver import SubstitutionResolver


def test_builtin_catalog_validates() -> None:
    document = load_catalog_document()

    assert document.primary[0].original_ingredient == "butter"
    assert "eggs" in document.supplemental
    assert document.aliases["milk"]


def test_builtin_nutrition_has_serving_descriptions() -> None:
    document = load_catalog_document()

    for entry in document.primary:
        for item in entry.substitutions:
            if item.nutrition is None:
                continue
            assert item.nutrition.original.serving_description
            assert item.nutrition.substitute.serving_description


def test_json_catalog_file_replaces_builtins(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            {
                "primary": [
                    {
                        "originalIngredient": "Tahini",
                        "synonyms": ["sesame paste"],
                        "substitutions": [
                            {"substituteIngredient": "Sunflower seed butter", "ratio": "1:1"}
                        ],
                    }
                ],
                "supplemental": {
                    "tahini": [{"substituteIngredient": "Cashew butter", "ratio": "1:1"}]
                },
                "aliases": {"tahini": ["tahina"]},
            }
        ),
        encoding="utf-8",
    )

    catalog, normalizer = build_catalog(load_catalog_document(path))
    resolver = SubstitutionResolver(catalog=catalog, normalizer=normalizer)

    items = resolver.get_substitutions("Tahina")
    assert [item.substitute_ingredient for item in items] == [
        "Sunflower seed butter",
        "Cashew butter",
    ]
    assert resolver.get_substitutions("butter") == []
    assert catalog.all_known_keys() == ("tahini", "sesame paste")


def test_missing_catalog_file_raises(tmp_path) -> None:
    with pytest.raises(CatalogError):
        read_catalog_file(tmp_path / "missing.json")


def test_malformed_catalog_file_raises(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogError):
        read_catalog_file(path)


def test_negative_nutrition_is_rejected() -> None:
    raw = builtin_catalog_data()
    raw["supplemental"] = {
        "butter": [
            {
                "substituteIngredient": "Lard",
                "ratio": "1:1",
                "nutrition": {
                    "original": {"calories": -1, "fat": 0, "carbs": 0, "protein": 0},
                    "substitute": {"calories": 1, "fat": 0, "carbs": 0, "protein": 0},
                },
            }
        ]
    }

    with pytest.raises(CatalogError):
        parse_catalog_data(raw)


def test_empty_substitute_name_is_rejected() -> None:
    raw = {"supplemental": {"butter": [{"substituteIngredient": "", "ratio": "1:1"}]}}

    with pytest.raises(CatalogError):
        parse_catalog_data(raw)


def test_strict_aliases_fail_at_load() -> None:
    document = parse_catalog_data(
        {"aliases": {"milk": ["dairy milk"], "cream": ["dairy milk"]}}
    )

    with pytest.raises(CatalogError):
        build_catalog(document, strict_aliases=True)
