"""Catalog storage protocol.

Defines the interface for any backend that can answer which cafes
are registered for a city.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CatalogStore(Protocol):
    """Protocol for read-only cafe catalog backends.

    Example:
        ```python
        from cafe_service.protocols import CatalogStore

        repo: CatalogStore = StaticCatalogRepository.create()
        ```
    """

    def get_cafes(self, city: str) -> tuple[str, ...] | None:
        """Get the ordered cafe names for a city.

        Args:
            city: The city key, matched exactly

        Returns:
            Tuple of cafe names, or None if the city is not registered
        """
        ...

    def has_city(self, city: str) -> bool:
        """Check whether a city key is registered."""
        ...

    def cities(self) -> tuple[str, ...]:
        """List registered city keys in sorted order."""
        ...

    def health_check(self) -> bool:
        """Check if the catalog is usable.

        Returns:
            True if healthy, False otherwise
        """
        ...
