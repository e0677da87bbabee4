from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from cafe_service import __version__
from cafe_service.api.dependencies import CafeParamsDep, HandlerDep, build_lifespan
from cafe_service.config import settings
from cafe_service.dto import HealthCheckResponse, ServiceInfoResponse
from cafe_service.protocols import CatalogStore

# Read through CafeParamsDep, so declared here for the OpenAPI docs only
_CAFE_QUERY_PARAMETERS = [
    {
        "name": name,
        "in": "query",
        "required": False,
        "schema": {"type": "string"},
        "description": description,
    }
    for name, description in [
        ("city", "City key, e.g. moscow"),
        ("count", "Maximum number of cafes to return"),
        ("search", "Case-insensitive substring filter"),
    ]
]


def create_app(repository: CatalogStore | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        repository: Catalog backend to serve. If None, the catalog is
            loaded from settings when the app starts.

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Cafe Service API",
        description="Lists cafes registered for a city",
        version=__version__,
        lifespan=build_lifespan(repository),
    )

    @app.get("/", response_model=ServiceInfoResponse)
    async def root() -> ServiceInfoResponse:
        """Root endpoint with API information."""
        return ServiceInfoResponse(
            name="Cafe Service API",
            version=__version__,
            endpoints={
                "cafe": "/cafe",
                "health": "/health",
                "docs": "/docs",
            },
        )

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get(
        "/cafe",
        response_class=PlainTextResponse,
        openapi_extra={"parameters": _CAFE_QUERY_PARAMETERS},
    )
    async def cafe(handler: HandlerDep, params: CafeParamsDep) -> PlainTextResponse:
        """
        Comma-separated cafe names for a city.

        Unknown or missing city and a non-numeric count answer 400
        with a plain-text message. Repeated parameters keep their first value.
        """
        return await handler.get_cafes(city=params.city, count=params.count, search=params.search)

    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run(
        "cafe_service.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
