"""HTTP handlers for cafe lookups.

Handlers turn service results into HTTP responses: status codes and
plain-text bodies for the cafe endpoint, DTOs for the JSON endpoints.
"""

from fastapi import HTTPException, status
from fastapi.responses import PlainTextResponse

from cafe_service.dto import HealthCheckResponse
from cafe_service.entities import QueryError
from cafe_service.services import CafeService


class CafeHandler:
    """HTTP handlers for cafe operations.

    Example:
        ```python
        handler = CafeHandler(cafe_service=CafeService.create())

        @app.get("/cafe", response_class=PlainTextResponse)
        async def cafe(city: str | None = None, count: str | None = None, search: str | None = None):
            return await handler.get_cafes(city, count, search)
        ```
    """

    def __init__(self, cafe_service: CafeService) -> None:
        """Initialize the cafe handler.

        Args:
            cafe_service: The cafe service for business logic (required).
        """
        self._cafes = cafe_service

    async def get_cafes(
        self,
        city: str | None,
        count: str | None = None,
        search: str | None = None,
    ) -> PlainTextResponse:
        """Handle GET /cafe requests.

        Args:
            city: Raw `city` query parameter
            count: Raw `count` query parameter
            search: Raw `search` query parameter

        Returns:
            200 with comma-separated cafe names, or 400 with the error message
        """
        result = self._cafes.lookup(city=city, count=count, search=search)

        if isinstance(result, QueryError):
            return PlainTextResponse(result.message, status_code=status.HTTP_400_BAD_REQUEST)

        return PlainTextResponse(result, status_code=status.HTTP_200_OK)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Raises:
            HTTPException: 503 if the catalog is not usable
        """
        repository = self._cafes.repository
        if not repository.health_check():
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Cafe catalog is empty",
            )

        return HealthCheckResponse(status="healthy", cities=len(repository.cities()))
