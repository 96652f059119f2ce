"""Ingredient substitution endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from ingredient_substitutions.api.models import (
    AISuggestionRequest,
    AISuggestionResponse,
    SearchResponse,
    SubstitutionsResponse,
)
from ingredient_substitutions.config import parse_dietary_restrictions
from ingredient_substitutions.domain.substitutions import SubstitutionSuggestions

if TYPE_CHECKING:
    from ingredient_substitutions.containers import AppContainer

router = APIRouter(prefix="/api/ingredients", tags=["substitutions"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get(
    "/substitutions/search",
    response_model=SearchResponse,
)
async def search_ingredients(request: Request, q: str = "") -> SearchResponse:
    """Autocomplete known ingredient keys."""
    results = _container(request).resolver.search_ingredients(q)
    return SearchResponse(results=results)


@router.get(
    "/ai-substitution",
    response_model=SubstitutionSuggestions,
    response_model_exclude_none=True,
)
async def ai_substitution(request: Request, q: str = "") -> SubstitutionSuggestions:
    """Catalog substitutions for an exact phrase, echoing the trimmed query."""
    return _container(request).resolver.generate_suggestions(q)


@router.post(
    "/ai-substitutions",
    response_model=AISuggestionResponse,
    response_model_exclude_none=True,
)
async def create_ai_substitutions(
    body: AISuggestionRequest, request: Request
) -> AISuggestionResponse | JSONResponse:
    """Generate substitutions for an ingredient given in the request body."""
    ingredient = body.ingredient.strip()
    if not ingredient:
        return _bad_request("Body must include 'ingredient' string.")
    return await _suggest(
        request,
        ingredient,
        cuisine=body.cuisine,
        dietary=parse_dietary_restrictions(body.dietary_restrictions),
    )


@router.get(
    "/{ingredient:path}/substitutions",
    response_model=SubstitutionsResponse,
    response_model_exclude_none=True,
)
async def get_substitutions(ingredient: str, request: Request) -> SubstitutionsResponse:
    """Return deduplicated substitutes for an ingredient."""
    substitutions = _container(request).resolver.get_substitutions(ingredient)
    return SubstitutionsResponse(substitutions=substitutions)


@router.get(
    "/{ingredient:path}/ai-substitutions",
    response_model=AISuggestionResponse,
    response_model_exclude_none=True,
)
async def get_ai_substitutions(
    ingredient: str,
    request: Request,
    cuisine: str | None = None,
    dietary: list[str] | None = Query(default=None),
) -> AISuggestionResponse | JSONResponse:
    """Generate substitutions, optionally filtered by cuisine and diet."""
    if not ingredient.strip():
        return _bad_request("Missing ingredient in path.")
    return await _suggest(
        request,
        ingredient.strip(),
        cuisine=cuisine,
        dietary=parse_dietary_restrictions(dietary),
    )


async def _suggest(
    request: Request, ingredient: str, *, cuisine: str | None, dietary: list[str]
) -> AISuggestionResponse:
    result = await _container(request).suggestion_service.suggest(
        ingredient, cuisine=cuisine, dietary_restrictions=dietary
    )
    items = list(result.substitutions)
    return AISuggestionResponse(
        query=result.query,
        ai_substitutions=items,
        substitutions=items,
    )


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"ok": False, "error": message},
    )
