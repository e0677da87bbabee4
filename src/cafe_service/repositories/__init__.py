"""Repository layer for data access.

Catalog backends live here behind the CatalogStore protocol.
"""

from cafe_service.protocols import CatalogStore

from .default_catalog import DEFAULT_CATALOG
from .static_catalog_repository import CatalogLoadError, StaticCatalogRepository

__all__ = [
    "CatalogStore",
    "CatalogLoadError",
    "DEFAULT_CATALOG",
    "StaticCatalogRepository",
]
