from fastapi.testclient import TestClient
from restaurant_service.app import app
from restaurant_service.utils import sanitize_for_json
import math

client = TestClient(app)

def test_api_422():
    response = client.post("/valuation/calculate", json={"annualSales": "lots"})
    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["body", "annualSales"]

def test_api_422_non_finite():
    # The stdlib JSON encoder emits NaN / Infinity literals; the schema rejects them.
    response = client.post(
        "/valuation/calculate",
        content='{"annualSales": NaN}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    error = response.json()["detail"][0]
    assert error["loc"] == ["body", "annualSales"]
    # Echoed input comes back as null rather than an invalid NaN literal.
    assert error["input"] is None

    response = client.post(
        "/valuation/validate",
        content='{"desiredROI": Infinity}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert response.json()["detail"][0]["input"] is None

def test_sanitize_for_json_with_nan_and_inf():
    data = {
        "errors": [{"input": float("nan"), "loc": ("body", "annualSales")}],
        "high": float("inf"),
        "low": float("-inf"),
        "ok": 1.5,
    }

    sanitized = sanitize_for_json(data)

    assert sanitized["errors"][0]["input"] is None
    assert sanitized["errors"][0]["loc"] == ("body", "annualSales")
    assert sanitized["high"] is None
    assert sanitized["low"] is None
    assert sanitized["ok"] == 1.5
    assert not math.isnan(sanitized["ok"])
