from __future__ import annotations


class CatalogError(Exception):
    """Base class for every failure to produce a recipe catalog."""


class CatalogNotFoundError(CatalogError):
    """The local catalog document does not exist."""


class CatalogDecodeError(CatalogError):
    """The payload is not valid JSON or a record does not fit the Recipe schema."""


class CatalogTransportError(CatalogError):
    """The remote search could not be reached or answered with an error."""
