"""Integration tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from glazing.web import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


STOREFRONT = {
    "opening": {"width": 10, "height": 8},
    "grid": {"columns": 3, "rows": 2},
}


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestLayoutEndpoint:
    """POST /api/v1/grid/layout."""

    def test_layout(self, client: TestClient) -> None:
        response = client.post("/api/v1/grid/layout", json=STOREFRONT)
        assert response.status_code == 200
        layout = response.json()["layout"]
        assert layout["vertical_mullions"] == ["3.3333", "6.6667"]
        assert layout["horizontal_mullions"] == ["4.0000"]
        assert layout["perimeter"] == "36.0000"
        assert len(layout["panels"]) == 6
        assert layout["panels"][1]["x"] == "3.3333"

    def test_statistics_included(self, client: TestClient) -> None:
        stats = client.post("/api/v1/grid/layout", json=STOREFRONT).json()["statistics"]
        assert stats["total_members"] == 13
        assert stats["members_by_kind"]["horizontal"] == 3

    def test_grid_defaults(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/grid/layout", json={"opening": {"width": 10, "height": 8}}
        )
        assert response.status_code == 200
        layout = response.json()["layout"]
        assert (layout["columns"], layout["rows"]) == (2, 2)
        assert layout["mullion_width"] == "2.5000"

    def test_transom(self, client: TestClient) -> None:
        payload = {
            "opening": {"width": 10, "height": 10, "has_transom": True, "transom_height": 2},
            "grid": {"columns": 2, "rows": 2},
        }
        layout = client.post("/api/v1/grid/layout", json=payload).json()["layout"]
        assert layout["grid_height"] == "8.0000"
        assert layout["transom_bar"] == "8.0000"
        assert [p["row"] for p in layout["transom_panels"]] == [2, 2]

    def test_validation_errors(self, client: TestClient) -> None:
        payload = {
            "opening": {"width": 10, "height": 8},
            "grid": {"columns": 25, "mullion_width": 7},
        }
        response = client.post("/api/v1/grid/layout", json=payload)
        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert [(d["field"], d["message"]) for d in body["details"]] == [
            ("columns", "Columns must be between 1 and 20"),
            ("mullion_width", "Mullion width must be between 0 and 6 inches"),
        ]
        assert body["details"][0]["value"] == "25"

    def test_custom_spacing_unsupported(self, client: TestClient) -> None:
        payload = {
            "opening": {"width": 10, "height": 8},
            "grid": {"spacing": {"horizontal": "custom", "horizontal_offsets": [3]}},
        }
        response = client.post("/api/v1/grid/layout", json=payload)
        assert response.status_code == 400
        body = response.json()
        assert body["error_type"] == "unsupported_feature"
        assert body["details"] == {
            "feature": "custom_spacing",
            "field": "spacing.horizontal",
        }

    def test_oversized_dimension(self, client: TestClient) -> None:
        payload = {"opening": {"width": 1e24, "height": 8}}
        response = client.post("/api/v1/grid/layout", json=payload)
        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["field"] == "width"
        assert body["details"][0]["message"] == "Opening width must be at most 100000 feet"

    def test_unknown_field_rejected(self, client: TestClient) -> None:
        payload = {"opening": {"width": 10, "height": 8, "depth": 4}}
        response = client.post("/api/v1/grid/layout", json=payload)
        assert response.status_code == 422


class TestTakeoffEndpoint:
    """POST /api/v1/grid/takeoff."""

    def test_takeoff(self, client: TestClient) -> None:
        response = client.post("/api/v1/grid/takeoff", json=STOREFRONT)
        assert response.status_code == 200
        quantities = response.json()["quantities"]
        assert quantities["Sill"]["total_length"] == "10.0000"
        assert quantities["Head"]["total_length"] == "10.0000"
        assert quantities["Jamb"]["count"] == 2
        assert quantities["Jamb"]["total_length"] == "16.0000"
        assert quantities["Vertical"]["count"] == 2
        assert quantities["Vertical"]["length_each"] == "8.0000"
        assert quantities["Horizontal"]["count"] == 1

    def test_shared_catalog_name(self, client: TestClient) -> None:
        payload = {
            "opening": {"width": 10, "height": 8},
            "grid": {"columns": 3, "rows": 2, "components": {"horizontal": "Sill"}},
        }
        quantities = client.post("/api/v1/grid/takeoff", json=payload).json()["quantities"]
        assert "Horizontal" not in quantities
        assert quantities["Sill"]["roles"] == ["sill", "horizontal"]
        assert quantities["Sill"]["total_length"] == "20.0000"

    def test_glass(self, client: TestClient) -> None:
        glass = client.post("/api/v1/grid/takeoff", json=STOREFRONT).json()["glass"]
        assert glass["count"] == 6
        assert glass["transom_count"] == 0

    def test_invalid_opening(self, client: TestClient) -> None:
        payload = {"opening": {"width": 0, "height": -1}}
        response = client.post("/api/v1/grid/takeoff", json=payload)
        assert response.status_code == 422
        messages = [d["message"] for d in response.json()["details"]]
        assert messages == [
            "Opening width must be greater than 0",
            "Opening height must be greater than 0",
        ]


class TestValidateEndpoint:
    """POST /api/v1/validate."""

    def test_valid(self, client: TestClient) -> None:
        response = client.post("/api/v1/validate", json={"config": STOREFRONT})
        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_errors_with_paths(self, client: TestClient) -> None:
        config = {"opening": {"width": 10, "height": 8, "has_transom": True}}
        body = client.post("/api/v1/validate", json={"config": config}).json()
        assert body["is_valid"] is False
        assert body["errors"] == [
            {
                "message": "Transom height is required when transom is enabled",
                "path": "opening.transom_height",
            }
        ]

    def test_warnings(self, client: TestClient) -> None:
        config = {
            "opening": {"width": 1, "height": 8},
            "grid": {"columns": 2, "mullion_width": 6},
        }
        body = client.post("/api/v1/validate", json={"config": config}).json()
        assert body["is_valid"] is True
        assert body["warnings"][0]["path"] == "grid.mullion_width"

    def test_schema_error(self, client: TestClient) -> None:
        config = {"opening": {"width": "wide", "height": 8}}
        response = client.post("/api/v1/validate", json={"config": config})
        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "opening.width"
