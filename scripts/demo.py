#!/usr/bin/env python3
"""
Demo script for the cafe service.

Runs a few lookups against the configured catalog, the same way the
HTTP endpoint does, and prints status and body for each.
"""

from cafe_service.entities import QueryError
from cafe_service.services import CafeService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_lookups(service: CafeService) -> None:
    """Demonstrate successful and rejected lookups."""
    print_section("Cafe Lookups")

    queries = [
        {"city": "moscow"},
        {"city": "moscow", "count": "2"},
        {"city": "moscow", "search": "кофе"},
        {"city": "moscow", "search": "фасоль"},
        {"city": "omsk"},
        {"city": "tula", "count": "na"},
    ]

    for params in queries:
        result = service.lookup(**params)
        if isinstance(result, QueryError):
            print(f"❌ {params} -> 400 {result.message}")
        else:
            print(f"✅ {params} -> 200 {result!r}")


def main() -> None:
    service = CafeService.create()
    print(f"Cities: {', '.join(service.repository.cities())}")
    demo_lookups(service)


if __name__ == "__main__":
    main()
