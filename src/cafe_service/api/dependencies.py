"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Catalog, service and handler built once in the lifespan
    - Dependency functions retrieve them from request.app.state
    - No module-level mutable state; the catalog is read-only once built
"""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from cafe_service.handlers import CafeHandler
from cafe_service.protocols import CatalogStore
from cafe_service.repositories import StaticCatalogRepository
from cafe_service.services import CafeService


@dataclass(frozen=True)
class CafeParams:
    """Raw `/cafe` query parameters, None when absent."""

    city: str | None
    count: str | None
    search: str | None


def first_query_value(request: Request, name: str) -> str | None:
    """Get the first value of a query parameter, or None if absent."""
    values = request.query_params.getlist(name)
    return values[0] if values else None


def get_cafe_params(request: Request) -> CafeParams:
    """Read the cafe query parameters; repeated parameters keep their first value."""
    return CafeParams(
        city=first_query_value(request, "city"),
        count=first_query_value(request, "count"),
        search=first_query_value(request, "search"),
    )


def get_handler(request: Request) -> CafeHandler:
    """Dependency injection for CafeHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The CafeHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "cafe_handler", None)
    if handler is None:
        raise RuntimeError("CafeHandler not initialized. Check lifespan setup.")
    return handler


def build_lifespan(
    repository: CatalogStore | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build the lifespan context manager for a FastAPI app.

    Args:
        repository: Catalog backend to inject. If None, one is loaded
            from settings at startup.

    Returns:
        A lifespan function suitable for FastAPI(lifespan=...)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize all layers and store the handler in app.state.

        1. Repository (data access) - given, or created from settings
        2. Service (business logic) - wraps the repository
        3. Handler (HTTP endpoints) - stored in app.state.cafe_handler
        """
        catalog = repository if repository is not None else StaticCatalogRepository.create()

        cafe_service = CafeService.create(repository=catalog)
        app.state.cafe_handler = CafeHandler(cafe_service=cafe_service)

        print(f"✓ Catalog loaded from: {getattr(catalog, 'source', type(catalog).__name__)}")
        print(f"✓ Cities: {', '.join(catalog.cities())}")

        yield

        del app.state.cafe_handler
        print("✓ Cafe service shut down")

    return lifespan


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[CafeHandler, Depends(get_handler)]
CafeParamsDep = Annotated[CafeParams, Depends(get_cafe_params)]
