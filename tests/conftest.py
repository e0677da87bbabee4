"""
Shared fixtures for the cafe service tests.
"""

import pytest
from fastapi.testclient import TestClient

from cafe_service.api.app import create_app
from cafe_service.repositories import StaticCatalogRepository
from cafe_service.services import CafeService

CATALOG = {
    "moscow": ["Мир кофе", "Сладкоежка", "Кофе и завтраки", "Сытый студент", "Ложка и вилка"],
    "tula": ["Тульский пряник", "Самовар"],
}


@pytest.fixture
def catalog():
    """Raw catalog data used by the test repository."""
    return CATALOG


@pytest.fixture
def repository():
    """Create an in-memory catalog repository."""
    return StaticCatalogRepository.from_mapping(CATALOG)


@pytest.fixture
def service(repository):
    """Create a cafe service over the test catalog."""
    return CafeService(repository=repository)


@pytest.fixture
def client(repository):
    """Create a test client with the lifespan running."""
    with TestClient(create_app(repository=repository)) as test_client:
        yield test_client
