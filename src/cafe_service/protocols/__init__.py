"""Protocol interfaces for swappable implementations.

Protocols use structural typing, so any catalog backend (in-memory,
JSON file, a database table) satisfies them without inheritance.

Usage:
    ```python
    from cafe_service.protocols import CatalogStore

    store: CatalogStore = StaticCatalogRepository.create()
    ```
"""

from .catalog_store import CatalogStore

__all__ = [
    "CatalogStore",
]
