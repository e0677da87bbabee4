"""Cafe query and validation error entities."""

from dataclasses import dataclass
from enum import Enum


class QueryErrorKind(str, Enum):
    """The two ways a cafe query can be rejected."""

    UNKNOWN_CITY = "unknown city"
    INCORRECT_COUNT = "incorrect count"


@dataclass(frozen=True)
class CafeQuery:
    """A validated cafe lookup.

    Attributes:
        city: Registered city key
        count: Maximum number of names to return (None = no limit)
        search: Case-insensitive substring filter ("" = no filter)
    """

    city: str
    count: int | None = None
    search: str = ""


@dataclass(frozen=True)
class QueryError:
    """A rejected cafe lookup."""

    kind: QueryErrorKind

    @property
    def message(self) -> str:
        return self.kind.value
