"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable with any catalog backend.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from cafe_service.services import CafeService

    service = CafeService.create()
    body = service.lookup(city="moscow", count="2", search="кофе")
    ```
"""

from .cafe_service import CafeService

__all__ = [
    "CafeService",
]
