"""
Tests for the calculator routes.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

NUMBERS_ERROR = {"error": "Both a and b must be numbers"}


class TestBinaryRoutes:
    @pytest.mark.parametrize(
        ("path", "operation", "result"),
        [
            ("add", "addition", 15),
            ("subtract", "subtraction", 5),
            ("multiply", "multiplication", 50),
            ("divide", "division", 2),
            ("power", "power", 100000),
        ],
    )
    def test_success(self, client: TestClient, path: str, operation: str, result: float) -> None:
        response = client.post(f"/api/calculate/{path}", json={"a": 10, "b": 5})
        assert response.status_code == 200
        assert response.json() == {"operation": operation, "a": 10, "b": 5, "result": result}

    @pytest.mark.parametrize("path", ["add", "subtract", "multiply", "divide", "power"])
    @pytest.mark.parametrize(
        "body",
        [{"a": "10", "b": 5}, {"a": 10}, {}, {"a": True, "b": 1}, {"a": None, "b": 1}],
    )
    def test_not_numbers(self, client: TestClient, path: str, body: dict) -> None:
        response = client.post(f"/api/calculate/{path}", json=body)
        assert response.status_code == 400
        assert response.json() == NUMBERS_ERROR

    def test_no_body(self, client: TestClient) -> None:
        response = client.post("/api/calculate/add")
        assert response.status_code == 400
        assert response.json() == NUMBERS_ERROR

    def test_nan_literal_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/calculate/add",
            content='{"a": NaN, "b": 1}',
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == NUMBERS_ERROR

    def test_fractional_result(self, client: TestClient) -> None:
        response = client.post("/api/calculate/divide", json={"a": 10, "b": 4})
        assert response.json()["result"] == 2.5

    def test_divide_by_zero(self, client: TestClient) -> None:
        response = client.post("/api/calculate/divide", json={"a": 10, "b": 0})
        assert response.status_code == 400
        assert response.json() == {"error": "Cannot divide by zero"}

    def test_power_zero_exponent(self, client: TestClient) -> None:
        assert client.post("/api/calculate/power", json={"a": 2, "b": 0}).json()["result"] == 1

    def test_power_undefined_result_is_null(self, client: TestClient) -> None:
        response = client.post("/api/calculate/power", json={"a": -8, "b": 0.5})
        assert response.status_code == 200
        assert response.json()["result"] is None

    def test_overflow_is_null(self, client: TestClient) -> None:
        response = client.post("/api/calculate/multiply", json={"a": 1e308, "b": 10})
        assert response.status_code == 200
        assert response.json()["result"] is None

    @pytest.mark.parametrize("body", [[1, 2], "10", 10])
    def test_non_object_body_has_no_operands(self, client: TestClient, body: object) -> None:
        response = client.post("/api/calculate/add", json=body)
        assert response.status_code == 400
        assert response.json() == NUMBERS_ERROR


class TestSqrtRoute:
    def test_success(self, client: TestClient) -> None:
        response = client.post("/api/calculate/sqrt", json={"number": 16})
        assert response.status_code == 200
        assert response.json() == {"operation": "square root", "number": 16, "result": 4}

    def test_negative(self, client: TestClient) -> None:
        response = client.post("/api/calculate/sqrt", json={"number": -4})
        assert response.status_code == 400
        assert response.json() == {"error": "Cannot calculate square root of negative number"}

    @pytest.mark.parametrize("body", [{}, {"number": "16"}, {"value": 16}])
    def test_not_a_number(self, client: TestClient, body: dict) -> None:
        response = client.post("/api/calculate/sqrt", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Number must be provided"}


class TestPercentageRoute:
    def test_success(self, client: TestClient) -> None:
        response = client.post("/api/calculate/percentage", json={"value": 25, "total": 100})
        assert response.status_code == 200
        assert response.json() == {
            "operation": "percentage",
            "value": 25,
            "total": 100,
            "result": 25,
            "formatted": "25.00%",
        }

    def test_zero_total(self, client: TestClient) -> None:
        response = client.post("/api/calculate/percentage", json={"value": 25, "total": 0})
        assert response.status_code == 400
        assert response.json() == {"error": "Total cannot be zero"}

    def test_not_numbers(self, client: TestClient) -> None:
        response = client.post("/api/calculate/percentage", json={"value": "25", "total": 100})
        assert response.status_code == 400
        assert response.json() == {"error": "Both value and total must be numbers"}


class TestNonObjectBodies:
    def test_sqrt(self, client: TestClient) -> None:
        response = client.post("/api/calculate/sqrt", json=[16])
        assert response.status_code == 400
        assert response.json() == {"error": "Number must be provided"}

    def test_percentage(self, client: TestClient) -> None:
        response = client.post("/api/calculate/percentage", json=[25, 100])
        assert response.status_code == 400
        assert response.json() == {"error": "Both value and total must be numbers"}
