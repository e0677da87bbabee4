"""
Tests for the cafe service API.
"""

import pytest
from fastapi.testclient import TestClient

from cafe_service.api.app import app, create_app
from cafe_service.handlers import CafeHandler
from cafe_service.repositories import StaticCatalogRepository


def cafes_of(response):
    """Split a comma-separated body into names."""
    return response.text.split(",") if response.text else []


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Cafe Service API"
    assert data["endpoints"]["cafe"] == "/cafe"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cities": 2}


def test_health_empty_catalog():
    """An empty catalog reports unhealthy."""
    with TestClient(create_app(repository=StaticCatalogRepository.from_mapping({}))) as client:
        response = client.get("/health")
    assert response.status_code == 503


def test_default_app_serves_builtin_catalog():
    """The module-level app loads the built-in catalog at startup."""
    with TestClient(app) as client:
        response = client.get("/cafe", params={"city": "moscow"})
    assert response.status_code == 200
    assert len(cafes_of(response)) == 5


@pytest.mark.parametrize(
    "params",
    [
        {"city": "moscow"},
        {"city": "tula"},
        {"city": "moscow", "search": "ложка"},
    ],
)
def test_cafe_when_ok(client, params):
    """Test known cities answer 200."""
    response = client.get("/cafe", params=params)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")


def test_cafe_lists_all_in_order(client, catalog):
    """Test the full list is returned in catalog order."""
    response = client.get("/cafe", params={"city": "moscow"})
    assert response.status_code == 200
    assert response.text == ",".join(catalog["moscow"])


@pytest.mark.parametrize(
    "url, message",
    [
        ("/cafe", "unknown city"),
        ("/cafe?city=omsk", "unknown city"),
        ("/cafe?city=Moscow", "unknown city"),
        ("/cafe?city=tula&count=na", "incorrect count"),
        ("/cafe?city=tula&count=-1", "incorrect count"),
        ("/cafe?city=tula&count=1.5", "incorrect count"),
        ("/cafe?count=na", "unknown city"),
        ("/cafe?city=tula&count=" + "9" * 5000, "incorrect count"),
        ("/cafe?city=tula&count=9223372036854775808", "incorrect count"),
    ],
)
def test_cafe_negative(client, url, message):
    """Test validation failures answer 400 with a plain message."""
    response = client.get(url)
    assert response.status_code == 400
    assert response.text.strip() == message


@pytest.mark.parametrize(
    "count, want",
    [
        (0, 0),
        (1, 1),
        (2, 2),
        (5, 5),
        (100, 5),
    ],
)
def test_cafe_count(client, catalog, count, want):
    """Test count truncates to a prefix of the list."""
    response = client.get("/cafe", params={"city": "moscow", "count": count})
    assert response.status_code == 200
    cafes = cafes_of(response)
    assert len(cafes) == want
    assert cafes == catalog["moscow"][:want]


def test_cafe_empty_count_means_no_limit(client):
    """Test an empty count value behaves as an absent one."""
    response = client.get("/cafe?city=moscow&count=")
    assert response.status_code == 200
    assert len(cafes_of(response)) == 5


@pytest.mark.parametrize(
    "search, want",
    [
        ("фасоль", 0),
        ("кофе", 2),
        ("КОФЕ", 2),
        ("вилка", 1),
    ],
)
def test_cafe_search(client, search, want):
    """Test search filters case-insensitively."""
    response = client.get("/cafe", params={"city": "moscow", "search": search})
    assert response.status_code == 200

    cafes = cafes_of(response)
    assert len(cafes) == want
    for cafe in cafes:
        assert search.lower() in cafe.lower()


def test_cafe_search_empty_body(client):
    """Test zero matches give an empty 200 body."""
    response = client.get("/cafe", params={"city": "moscow", "search": "фасоль"})
    assert response.status_code == 200
    assert response.text == ""


def test_cafe_search_then_count(client):
    """Test count applies after the search filter."""
    response = client.get("/cafe", params={"city": "moscow", "search": "кофе", "count": 1})
    assert response.status_code == 200
    assert cafes_of(response) == ["Мир кофе"]


def test_cafe_is_idempotent(client):
    """Test identical queries give identical bodies."""
    params = {"city": "moscow", "search": "о", "count": 3}
    first = client.get("/cafe", params=params)
    second = client.get("/cafe", params=params)
    assert first.text == second.text


def test_cafe_count_int64_max(client):
    """Test the largest 64-bit count is accepted and caps at the list size."""
    response = client.get("/cafe", params={"city": "moscow", "count": "9223372036854775807"})
    assert response.status_code == 200
    assert len(cafes_of(response)) == 5


def test_cafe_repeated_params_keep_first(client):
    """Test repeated query parameters use their first value."""
    response = client.get("/cafe?city=tula&city=omsk&count=1&count=na")
    assert response.status_code == 200
    assert response.text == "Тульский пряник"


def test_cafe_docs_list_query_params(client):
    """Test the OpenAPI schema documents the cafe query parameters."""
    schema = client.get("/openapi.json").json()
    names = [p["name"] for p in schema["paths"]["/cafe"]["get"]["parameters"]]
    assert names == ["city", "count", "search"]


class FalsyCatalogRepository(StaticCatalogRepository):
    """A store that is falsy but still serves its catalog."""

    def __len__(self):
        return 0


def test_injected_falsy_repository_is_used():
    """Test an injected store is used even when it is falsy."""
    repo = FalsyCatalogRepository.from_mapping({"omsk": ["Сибирь"]})
    with TestClient(create_app(repository=repo)) as client:
        response = client.get("/cafe", params={"city": "omsk"})
    assert response.status_code == 200
    assert response.text == "Сибирь"


def test_handler_requires_lifespan(repository):
    """Test the handler dependency fails before the lifespan has run."""
    client = TestClient(create_app(repository=repository))
    with pytest.raises(RuntimeError, match="CafeHandler not initialized"):
        client.get("/health")


def test_lifespan_clears_state(repository):
    """Test only the handler is kept in app.state, and only while running."""
    test_app = create_app(repository=repository)
    with TestClient(test_app):
        assert isinstance(test_app.state.cafe_handler, CafeHandler)
        assert not hasattr(test_app.state, "cafe_service")
        assert not hasattr(test_app.state, "repository")
    assert not hasattr(test_app.state, "cafe_handler")
