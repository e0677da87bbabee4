"""Domain entities for internal representation.

These are frozen dataclasses used internally by services and
repositories. They are NOT used for API contracts - the cafe endpoint
answers in plain text and the JSON side endpoints use DTOs from the
dto package.
"""

from .cafe_query import CafeQuery, QueryError, QueryErrorKind
from .city_catalog import CityCatalog

__all__ = ["CafeQuery", "CityCatalog", "QueryError", "QueryErrorKind"]
