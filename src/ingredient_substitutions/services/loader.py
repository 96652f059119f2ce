"""Load and validate substitution catalogs at startup."""

import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from ingredient_substitutions.data.aliases import ALIASES
from ingredient_substitutions.data.primary_catalog import PRIMARY_CATALOG
from ingredient_substitutions.data.supplemental_catalog import SUPPLEMENTAL_CATALOG
from ingredient_substitutions.domain.substitutions import CatalogEntry, SubstitutionItem
from ingredient_substitutions.services.catalog import CatalogStore
from ingredient_substitutions.services.errors import CatalogError
from ingredient_substitutions.services.normalizer import AliasTable, Normalizer

_logger = logging.getLogger(__name__)


class CatalogDocument(BaseModel):
    """All static substitution data in one validated document."""

    primary: list[CatalogEntry] = []
    supplemental: dict[str, list[SubstitutionItem]] = {}
    aliases: dict[str, list[str]] = {}


def builtin_catalog_data() -> dict[str, object]:
    """Return the compiled-in catalogs in document shape."""
    return {
        "primary": PRIMARY_CATALOG,
        "supplemental": SUPPLEMENTAL_CATALOG,
        "aliases": ALIASES,
    }


def parse_catalog_data(raw: dict[str, object]) -> CatalogDocument:
    """Validate raw catalog data."""
    try:
        return CatalogDocument.model_validate(raw)
    except ValidationError as exc:
        raise CatalogError(f"Invalid substitution catalog: {exc}") from exc


def read_catalog_file(path: str | Path) -> CatalogDocument:
    """Read and validate a JSON catalog file."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read substitution catalog {path}: {exc}") from exc
    try:
        return CatalogDocument.model_validate_json(content)
    except ValidationError as exc:
        raise CatalogError(f"Invalid substitution catalog {path}: {exc}") from exc


def load_catalog_document(path: str | Path | None = None) -> CatalogDocument:
    """Load the catalog file when given, otherwise the built-in tables."""
    if path:
        return read_catalog_file(path)
    return parse_catalog_data(builtin_catalog_data())


def build_catalog(
    document: CatalogDocument, *, strict_aliases: bool = False
) -> tuple[CatalogStore, Normalizer]:
    """Build the immutable store and normalizer from a validated document."""
    store = CatalogStore.from_data(document.primary, document.supplemental)
    aliases = AliasTable.from_groups(document.aliases, strict=strict_aliases)
    _logger.info(
        "Loaded substitution catalog: entries=%s supplemental=%s aliases=%s keys=%s",
        len(document.primary),
        len(document.supplemental),
        len(aliases),
        len(store.all_known_keys()),
    )
    return store, Normalizer(aliases)
