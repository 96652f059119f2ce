"""Ingredient name normalization and alias resolution."""

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from ingredient_substitutions.services.errors import CatalogError

_SEPARATORS = re.compile(r"[-_\s]+")
_DISALLOWED = re.compile(r"[^\w\s%]")
_WHITESPACE = re.compile(r"\s+")

_logger = logging.getLogger(__name__)


def normalize(value: str | None) -> str:
    """Lowercase, collapse separators and strip punctuation except ``%``."""
    if not value:
        return ""
    spaced = _SEPARATORS.sub(" ", value.lower())
    stripped = _DISALLOWED.sub("", spaced)
    return _WHITESPACE.sub(" ", stripped).strip()


def find_alias_conflicts(groups: Mapping[str, Iterable[str]]) -> list[str]:
    """Return human-readable conflicts in an alias table, in declaration order."""
    _, conflicts = _build_mapping(groups)
    return conflicts


def _build_mapping(
    groups: Mapping[str, Iterable[str]],
) -> tuple[dict[str, str], list[str]]:
    """Map normalized variants to canonical keys; first declaration wins."""
    canonical_keys = [normalize(canonical) for canonical in groups]
    mapping: dict[str, str] = {}
    conflicts: list[str] = []
    for canonical, variants in zip(canonical_keys, groups.values(), strict=True):
        if not canonical:
            conflicts.append("alias group with an empty canonical key")
            continue
        for raw_variant in variants:
            variant = normalize(raw_variant)
            if not variant or variant == canonical:
                continue
            if variant in canonical_keys:
                conflicts.append(
                    f"'{variant}' is a canonical key and cannot alias '{canonical}'"
                )
                continue
            existing = mapping.get(variant)
            if existing is not None and existing != canonical:
                conflicts.append(
                    f"'{variant}' maps to both '{existing}' and '{canonical}'"
                )
                continue
            mapping[variant] = canonical
    return mapping, conflicts


@dataclass(frozen=True)
class AliasTable:
    """Many-to-one mapping from normalized spellings to canonical keys."""

    mapping: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_groups(
        cls, groups: Mapping[str, Iterable[str]], *, strict: bool = False
    ) -> "AliasTable":
        """Build a validated alias table from ``canonical -> variants`` groups."""
        mapping, conflicts = _build_mapping(groups)
        if conflicts and strict:
            raise CatalogError(f"Invalid alias table: {conflicts[0]}")
        for conflict in conflicts:
            _logger.warning("Alias table conflict ignored: %s", conflict)
        return cls(mapping=mapping)

    def resolve(self, normalized: str) -> str:
        """Return the canonical key for a normalized string."""
        return self.mapping.get(normalized, normalized)

    def __len__(self) -> int:
        return len(self.mapping)


@dataclass(frozen=True)
class Normalizer:
    """Turns free-text ingredient names into canonical lookup keys."""

    aliases: AliasTable = field(default_factory=AliasTable)

    def normalize(self, value: str | None) -> str:
        return normalize(value)

    def resolve_alias(self, normalized: str) -> str:
        return self.aliases.resolve(normalized)

    def to_canonical_key(self, value: str | None) -> str:
        """Normalize then resolve aliases."""
        return self.resolve_alias(normalize(value))
