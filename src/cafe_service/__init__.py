"""Cafe Service - lists the cafes registered for a city over HTTP.

This package follows a layered architecture:

Layers:
    - protocols: Interface contracts (CatalogStore)
    - repositories: Catalog backends (in-memory, JSON file)
    - services: Business logic (validation, filtering, rendering)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects for the JSON endpoints
    - entities: Domain models (internal)

Usage:
    ```python
    from cafe_service.services import CafeService

    service = CafeService.create()
    service.lookup(city="moscow", search="кофе")
    ```

For HTTP API:
    ```python
    from cafe_service.api.app import app
    ```
"""

__version__ = "0.1.0"

from cafe_service.config import settings  # noqa: E402
from cafe_service.entities import CafeQuery, CityCatalog, QueryError, QueryErrorKind  # noqa: E402
from cafe_service.handlers import CafeHandler  # noqa: E402
from cafe_service.protocols import CatalogStore  # noqa: E402
from cafe_service.repositories import CatalogLoadError, StaticCatalogRepository  # noqa: E402
from cafe_service.services import CafeService  # noqa: E402

__all__ = [
    "__version__",
    # Configuration
    "settings",
    # Protocols (interfaces)
    "CatalogStore",
    # Services (business logic)
    "CafeService",
    # Handlers (HTTP)
    "CafeHandler",
    # Repositories (data access)
    "StaticCatalogRepository",
    "CatalogLoadError",
    # Entities (domain models)
    "CafeQuery",
    "CityCatalog",
    "QueryError",
    "QueryErrorKind",
]
