"""Tests for the product endpoints."""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError

from catalog_api.api.products import get_product_store
from catalog_api.catalog.memory import InMemoryProductStore
from catalog_api.main import app

BASE_URL = "/api/v1/products"


def product_body(**overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "name": "Adidas Socks",
        "description": "Sports socks",
        "price": 9.99,
        "category": "Footwear",
        "stock": 50,
        "image_url": "url5",
    }
    body.update(overrides)
    return body


class TestCreateProduct:
    """Tests for POST /api/v1/products."""

    def test_create_product(self, client: TestClient, api_store: InMemoryProductStore) -> None:
        response = client.post(BASE_URL, json=product_body())

        assert response.status_code == 200
        data = response.json()
        assert isinstance(data["id"], int)
        assert data["name"] == "Adidas Socks"
        assert data["price"] == 9.99
        assert len(api_store) == 5

    def test_optional_fields_default(self, client: TestClient) -> None:
        response = client.post(BASE_URL, json={"name": "Socks", "price": 1})

        assert response.status_code == 200
        data = response.json()
        assert data["description"] == ""
        assert data["category"] == ""
        assert data["image_url"] == ""
        assert data["stock"] == 0

    def test_missing_name_rejected(self, client: TestClient) -> None:
        response = client.post(BASE_URL, json={"price": 1})

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert any(d["field"] == "name" for d in data["details"])

    def test_blank_name_rejected(self, client: TestClient, api_store: InMemoryProductStore) -> None:
        response = client.post(BASE_URL, json=product_body(name="   "))

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"][0]["field"] == "name"
        assert len(api_store) == 4

    def test_negative_price_rejected(self, client: TestClient) -> None:
        response = client.post(BASE_URL, json=product_body(price=-1))

        assert response.status_code == 400
        assert any(d["field"] == "price" for d in response.json()["details"])

    def test_price_precision_enforced(
        self, client: TestClient, api_store: InMemoryProductStore
    ) -> None:
        assert client.post(BASE_URL, json=product_body(price=1.005)).status_code == 400
        assert client.post(BASE_URL, json=product_body(price=10_000_000_000)).status_code == 400
        assert len(api_store) == 4

    def test_negative_stock_rejected(self, client: TestClient) -> None:
        response = client.post(BASE_URL, json=product_body(stock=-3))

        assert response.status_code == 400


class TestGetProduct:
    """Tests for GET /api/v1/products/{id}."""

    def test_get_product(self, client: TestClient) -> None:
        response = client.get(f"{BASE_URL}/1")

        assert response.status_code == 200
        data = response.json()
        assert data == {
            "id": 1,
            "name": "Apple iPhone",
            "description": "Latest smartphone",
            "price": 999.99,
            "category": "Electronics",
            "stock": 5,
            "image_url": "url1",
        }

    def test_get_missing_product(self, client: TestClient) -> None:
        response = client.get(f"{BASE_URL}/999")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert data["message"] == "Product not found with id : '999'"

    def test_non_integer_id_rejected(self, client: TestClient) -> None:
        response = client.get(f"{BASE_URL}/abc")

        assert response.status_code == 400


class TestUpdateProduct:
    """Tests for PUT /api/v1/products/{id}."""

    def test_update_replaces_product(self, client: TestClient) -> None:
        response = client.put(f"{BASE_URL}/3", json={"name": "Nike Air", "price": 129.99})

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == 3
        assert data["name"] == "Nike Air"
        assert data["category"] == ""
        assert data["stock"] == 0

        assert client.get(f"{BASE_URL}/3").json()["name"] == "Nike Air"

    def test_update_missing_product(self, client: TestClient, api_store: InMemoryProductStore) -> None:
        response = client.put(f"{BASE_URL}/999", json=product_body())

        assert response.status_code == 404
        assert response.json()["error_code"] == "PRODUCT_NOT_FOUND"
        assert len(api_store) == 4

    def test_update_invalid_body(self, client: TestClient) -> None:
        response = client.put(f"{BASE_URL}/1", json=product_body(price="free"))

        assert response.status_code == 400


class TestDeleteProduct:
    """Tests for DELETE /api/v1/products/{id}."""

    def test_delete_product(self, client: TestClient) -> None:
        response = client.delete(f"{BASE_URL}/2")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{BASE_URL}/2").status_code == 404

    def test_delete_missing_product(self, client: TestClient, api_store: InMemoryProductStore) -> None:
        response = client.delete(f"{BASE_URL}/999")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert data["message"] == "Product not found with id : '999'"
        assert len(api_store) == 4


class TestSearchProducts:
    """Tests for GET /api/v1/products."""

    def test_defaults(self, client: TestClient) -> None:
        response = client.get(BASE_URL)

        assert response.status_code == 200
        data = response.json()
        assert data["page"] == 0
        assert data["page_size"] == 10
        assert data["total_elements"] == 4
        assert data["total_pages"] == 1
        assert data["has_next"] is False
        assert [p["name"] for p in data["content"]] == [
            "Apple iPhone",
            "Nike Shoes",
            "Samsung Phone",
            "Samsung TV",
        ]

    def test_search_by_name(self, client: TestClient) -> None:
        response = client.get(BASE_URL, params={"name": "PHONE"})

        data = response.json()
        assert data["total_elements"] == 2
        assert {p["id"] for p in data["content"]} == {1, 4}

    def test_name_takes_precedence_over_category(self, client: TestClient) -> None:
        response = client.get(BASE_URL, params={"name": "Nike", "category": "Electronics"})

        assert [p["name"] for p in response.json()["content"]] == ["Nike Shoes"]

    def test_search_by_category_sorted(self, client: TestClient) -> None:
        response = client.get(
            BASE_URL,
            params={"category": "Electronics", "sort_by": "price", "sort_order": "desc"},
        )

        prices = [p["price"] for p in response.json()["content"]]
        assert prices == [999.99, 699.99, 499.99]

    def test_search_by_price_range(self, client: TestClient) -> None:
        response = client.get(BASE_URL, params={"min_price": 400, "max_price": 1000})

        assert response.json()["total_elements"] == 3

    def test_single_price_bound_ignored(self, client: TestClient) -> None:
        response = client.get(BASE_URL, params={"max_price": 100})

        assert response.json()["total_elements"] == 4

    def test_paging(self, client: TestClient) -> None:
        first = client.get(BASE_URL, params={"page": 0, "page_size": 3}).json()
        second = client.get(BASE_URL, params={"page": 1, "page_size": 3}).json()

        assert first["total_pages"] == 2
        assert first["has_next"] is True
        assert len(first["content"]) == 3
        assert len(second["content"]) == 1
        assert second["has_next"] is False

    def test_unknown_sort_field_rejected(self, client: TestClient) -> None:
        response = client.get(BASE_URL, params={"sort_by": "rating"})

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"][0]["field"] == "sort_by"

    def test_unknown_sort_order_rejected(self, client: TestClient) -> None:
        response = client.get(BASE_URL, params={"sort_order": "sideways"})

        assert response.status_code == 400

    def test_negative_page_rejected(self, client: TestClient) -> None:
        response = client.get(BASE_URL, params={"page": -1})

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "page"

    def test_page_size_bounds(self, client: TestClient) -> None:
        assert client.get(BASE_URL, params={"page_size": 0}).status_code == 400
        assert client.get(BASE_URL, params={"page_size": 101}).status_code == 400

    def test_non_numeric_price_rejected(self, client: TestClient) -> None:
        response = client.get(BASE_URL, params={"min_price": "cheap", "max_price": 10})

        assert response.status_code == 400


class TestListings:
    """Tests for the unpaged listing endpoints."""

    def test_list_categories(self, client: TestClient) -> None:
        response = client.get(f"{BASE_URL}/categories")

        assert response.status_code == 200
        assert response.json() == ["Electronics", "Footwear"]

    def test_list_all(self, client: TestClient) -> None:
        response = client.get(f"{BASE_URL}/all")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [1, 2, 3, 4]


class TestStoreFailure:
    """Tests for record store errors at the HTTP edge."""

    def test_store_error_returns_503(self, client: TestClient) -> None:
        failing = AsyncMock()
        failing.find_by_id.side_effect = SQLAlchemyError("database is locked")
        app.dependency_overrides[get_product_store] = lambda: failing

        response = client.get(f"{BASE_URL}/1")

        assert response.status_code == 503
        assert response.json()["error_code"] == "STORE_ERROR"
