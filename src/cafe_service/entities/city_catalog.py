"""City catalog domain entity."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class CityCatalog:
    """Read-only mapping from city key to an ordered tuple of cafe names.

    Keys are normalised (stripped, lowercased) once, when the catalog is
    built. Lookups afterwards are exact matches against those keys.

    Attributes:
        entries: Immutable view of city key -> cafe names
    """

    entries: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "CityCatalog":
        """Build a catalog from any mapping of city -> cafe names.

        Args:
            mapping: City names to sequences of cafe names.

        Returns:
            A new CityCatalog with normalised keys

        Raises:
            ValueError: If a key is blank or duplicated after normalisation,
                or a value is not a sequence of strings.
        """
        entries: dict[str, tuple[str, ...]] = {}
        for city, cafes in mapping.items():
            if not isinstance(city, str) or not city.strip():
                raise ValueError(f"City key must be a non-empty string, got {city!r}")
            key = city.strip().lower()
            if key in entries:
                raise ValueError(f"Duplicate city key after normalisation: {key!r}")
            if isinstance(cafes, str) or not isinstance(cafes, Iterable):
                raise ValueError(f"Cafes for {key!r} must be a list of names")
            names = tuple(cafes)
            if not all(isinstance(name, str) for name in names):
                raise ValueError(f"Cafe names for {key!r} must be strings")
            entries[key] = names
        return cls(entries=MappingProxyType(entries))

    def get(self, city: str) -> tuple[str, ...] | None:
        return self.entries.get(city)

    def cities(self) -> tuple[str, ...]:
        return tuple(sorted(self.entries))

    def __contains__(self, city: object) -> bool:
        return city in self.entries

    def __len__(self) -> int:
        return len(self.entries)
