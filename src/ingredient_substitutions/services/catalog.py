"""Read-only substitution catalogs."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from ingredient_substitutions.domain.substitutions import CatalogEntry, SubstitutionItem
from ingredient_substitutions.services.normalizer import normalize


class SubstitutionSource(Protocol):
    """A catalog that can list substitutes for a canonical key."""

    name: str

    def lookup(self, canonical_key: str) -> list[SubstitutionItem]:
        """Return substitutes for the key in authored order."""

    def known_keys(self) -> Iterable[str]:
        """Return every normalized key this source can answer for."""


@dataclass
class PrimaryCatalog(SubstitutionSource):
    """Synonym-aware catalog of rich entries."""

    entries: Sequence[CatalogEntry]
    name: str = "primary"
    _index: dict[str, CatalogEntry] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.entries = tuple(self.entries)
        self._index = {}
        for entry in self.entries:
            for key in _entry_keys(entry):
                # Declaration order decides ties.
                self._index.setdefault(key, entry)

    def find_entry(self, canonical_key: str) -> CatalogEntry | None:
        """Return the first entry whose name or synonym matches the key."""
        return self._index.get(canonical_key)

    def lookup(self, canonical_key: str) -> list[SubstitutionItem]:
        entry = self.find_entry(canonical_key)
        if entry is None:
            return []
        return list(entry.substitutions)

    def known_keys(self) -> Iterable[str]:
        return self._index.keys()


@dataclass
class SupplementalCatalog(SubstitutionSource):
    """Flat catalog keyed directly by canonical key."""

    items_by_key: Mapping[str, Sequence[SubstitutionItem]]
    name: str = "supplemental"

    def __post_init__(self) -> None:
        merged: dict[str, tuple[SubstitutionItem, ...]] = {}
        for raw_key, items in self.items_by_key.items():
            key = normalize(raw_key)
            if not key:
                continue
            merged[key] = merged.get(key, ()) + tuple(items)
        self.items_by_key = merged

    def lookup(self, canonical_key: str) -> list[SubstitutionItem]:
        return list(self.items_by_key.get(canonical_key, ()))

    def known_keys(self) -> Iterable[str]:
        return self.items_by_key.keys()


@dataclass
class CatalogStore:
    """Immutable union of the primary and supplemental catalogs."""

    primary: PrimaryCatalog
    supplemental: SupplementalCatalog
    _known_keys: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        ordered: dict[str, None] = {}
        for source in self.sources():
            for key in source.known_keys():
                ordered.setdefault(key, None)
        self._known_keys = tuple(ordered)

    @classmethod
    def from_data(
        cls,
        entries: Sequence[CatalogEntry],
        supplemental: Mapping[str, Sequence[SubstitutionItem]],
    ) -> "CatalogStore":
        """Build a store from validated catalog models."""
        return cls(
            primary=PrimaryCatalog(entries),
            supplemental=SupplementalCatalog(supplemental),
        )

    def find_primary_entry(self, canonical_key: str) -> CatalogEntry | None:
        """Return the primary entry for a canonical key, if any."""
        return self.primary.find_entry(canonical_key)

    def find_supplemental_items(self, canonical_key: str) -> list[SubstitutionItem]:
        """Return supplemental substitutes for a canonical key."""
        return self.supplemental.lookup(canonical_key)

    def all_known_keys(self) -> tuple[str, ...]:
        """Return every known key, unique, in catalog declaration order."""
        return self._known_keys

    def sources(self) -> tuple[SubstitutionSource, ...]:
        """Return the sources in precedence order."""
        return (self.primary, self.supplemental)


def _entry_keys(entry: CatalogEntry) -> list[str]:
    keys = [normalize(entry.original_ingredient)]
    keys.extend(normalize(synonym) for synonym in entry.synonyms)
    return [key for key in keys if key]
