"""In-memory implementation of CatalogStore.

The catalog is built once (from the built-in data or a JSON file) and
never mutated afterwards, so one instance can serve concurrent requests
without locking.
"""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path

from cafe_service.config import settings
from cafe_service.entities import CityCatalog

from .default_catalog import DEFAULT_CATALOG


class CatalogLoadError(ValueError):
    """Raised when a catalog file cannot be read or has the wrong shape."""


class StaticCatalogRepository:
    """Read-only catalog held in process memory.

    This class satisfies the CatalogStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, catalog: CityCatalog, source: str = "memory") -> None:
        """Initialize the repository.

        Args:
            catalog: The immutable city catalog to serve.
            source: Human-readable origin of the catalog (for startup output).
        """
        self._catalog = catalog
        self._source = source

    @classmethod
    def create(cls, catalog_path: str | Path | None = None) -> "StaticCatalogRepository":
        """Factory method to create a repository from configuration.

        Args:
            catalog_path: JSON catalog file. If None, uses settings, and
                falls back to the built-in catalog when that is unset too.

        Returns:
            Configured StaticCatalogRepository instance

        Raises:
            CatalogLoadError: If the catalog file is missing or malformed
        """
        path = catalog_path or settings.catalog_path
        if path is None:
            return cls(CityCatalog.from_mapping(DEFAULT_CATALOG), source="built-in")
        return cls.from_json_file(path)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "StaticCatalogRepository":
        return cls(CityCatalog.from_mapping(mapping))

    @classmethod
    def from_json_file(cls, path: str | Path) -> "StaticCatalogRepository":
        """Load a catalog from a JSON object of city -> list of cafe names.

        Args:
            path: Path to the JSON file

        Returns:
            Repository serving the file's catalog

        Raises:
            CatalogLoadError: If the file cannot be read or parsed
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise CatalogLoadError(f"Cannot read catalog file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Invalid JSON in catalog file {path}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogLoadError(f"Catalog file {path} must contain a JSON object")
        for city, cafes in data.items():
            if not isinstance(cafes, list):
                raise CatalogLoadError(f"Catalog file {path}: cafes for {city!r} must be a list")

        try:
            catalog = CityCatalog.from_mapping(data)
        except ValueError as e:
            raise CatalogLoadError(f"Catalog file {path}: {e}") from e
        return cls(catalog, source=str(path))

    @property
    def source(self) -> str:
        return self._source

    def get_cafes(self, city: str) -> tuple[str, ...] | None:
        return self._catalog.get(city)

    def has_city(self, city: str) -> bool:
        return city in self._catalog

    def cities(self) -> tuple[str, ...]:
        return self._catalog.cities()

    def health_check(self) -> bool:
        """The catalog is healthy when at least one city is registered."""
        return len(self._catalog) > 0
