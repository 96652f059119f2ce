"""Errors raised while loading substitution data."""


class CatalogError(RuntimeError):
    """Static catalog or alias data is malformed."""
