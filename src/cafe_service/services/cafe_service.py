"""Cafe service for core business logic.

Validates raw query parameters into a CafeQuery, then filters,
truncates and renders the city's cafe list.
"""

import re

from cafe_service.entities import CafeQuery, QueryError, QueryErrorKind
from cafe_service.protocols import CatalogStore
from cafe_service.repositories import StaticCatalogRepository

_COUNT_RE = re.compile(r"[0-9]+")
_MAX_COUNT = 2**63 - 1
_MAX_COUNT_DIGITS = len(str(_MAX_COUNT))


class CafeService:
    """Cafe lookup service.

    Validation returns tagged values (CafeQuery or QueryError) instead of
    raising, so the handler decides how each outcome maps to HTTP.

    Example:
        ```python
        from cafe_service.repositories import StaticCatalogRepository
        from cafe_service.services import CafeService

        service = CafeService(repository=StaticCatalogRepository.create())
        query = service.parse_query(city="moscow", count="2")
        if isinstance(query, CafeQuery):
            print(service.render(service.find_cafes(query)))
        ```
    """

    def __init__(self, repository: CatalogStore) -> None:
        """Initialize the cafe service.

        Args:
            repository: Catalog backend (required).
        """
        self._repository = repository

    @classmethod
    def create(cls, repository: CatalogStore | None = None) -> "CafeService":
        """Factory method to create CafeService with the configured catalog.

        Args:
            repository: Catalog backend. If None, builds one from settings.

        Returns:
            Configured CafeService instance
        """
        if repository is None:
            repository = StaticCatalogRepository.create()
        return cls(repository=repository)

    @property
    def repository(self) -> CatalogStore:
        return self._repository

    def parse_query(
        self,
        city: str | None,
        count: str | None = None,
        search: str | None = None,
    ) -> CafeQuery | QueryError:
        """Validate raw query parameters.

        The city is checked before the count, so a request that gets
        both wrong is reported as an unknown city.

        Counts must be plain ASCII digits that fit a signed 64-bit integer.

        Args:
            city: Raw city parameter (None if absent)
            count: Raw count parameter (None or "" means no limit)
            search: Raw search parameter (None means no filter)

        Returns:
            CafeQuery on success, QueryError otherwise
        """
        if city is None or not self._repository.has_city(city):
            return QueryError(QueryErrorKind.UNKNOWN_CITY)

        limit: int | None = None
        if count:
            digits = count.lstrip("0") or "0"
            if not _COUNT_RE.fullmatch(count) or len(digits) > _MAX_COUNT_DIGITS:
                return QueryError(QueryErrorKind.INCORRECT_COUNT)
            limit = int(digits)
            if limit > _MAX_COUNT:
                return QueryError(QueryErrorKind.INCORRECT_COUNT)

        return CafeQuery(city=city, count=limit, search=search or "")

    def find_cafes(self, query: CafeQuery) -> list[str]:
        """Filter and truncate the city's cafes.

        Business logic:
        1. Take the city's cafes in catalog order
        2. Keep names containing the search text, ignoring case
        3. Keep at most `count` names from the front

        Args:
            query: A validated query

        Returns:
            The matching cafe names, in catalog order
        """
        cafes = list(self._repository.get_cafes(query.city) or ())

        if query.search:
            needle = query.search.lower()
            cafes = [name for name in cafes if needle in name.lower()]

        if query.count is not None:
            cafes = cafes[: query.count]

        return cafes

    @staticmethod
    def render(cafes: list[str]) -> str:
        return ",".join(cafes)

    def lookup(
        self,
        city: str | None,
        count: str | None = None,
        search: str | None = None,
    ) -> str | QueryError:
        """Validate, filter and render in one call.

        Returns:
            The comma-separated body, or the QueryError that rejected the query
        """
        query = self.parse_query(city=city, count=count, search=search)
        if isinstance(query, QueryError):
            return query
        return self.render(self.find_cafes(query))
