from unittest.mock import patch

import requests
from fastapi.testclient import TestClient

from megacities.main import app

from conftest import make_response

GET = "megacities.services.geojson_loader.requests.get"

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_index_renders_both_tables(lagos_collection):
    with patch(GET, return_value=make_response(body=lagos_collection)):
        response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    page = response.text
    assert '<div id="mydiv">' in page
    assert "233,209" in page
    assert "Loaded GeoJSON." in page
    assert "<td" in page and "Lagos" in page
    assert "15,000,000" in page
    # city table comes before the GeoJSON section
    assert page.index("Madison") < page.index('id="geojson-section"')


def test_index_reports_fetch_failure():
    with patch(GET, return_value=make_response(status_code=404, reason="Not Found")):
        response = client.get("/")

    assert response.status_code == 200
    assert "Error loading GeoJSON: Fetch failed: 404 Not Found" in response.text
    assert "Show full properties" not in response.text


def test_list_cities():
    response = client.get("/api/cities")
    assert response.status_code == 200
    assert response.json()[0] == {"name": "Madison", "population": 233209, "size": "Medium"}
    assert [c["size"] for c in response.json()] == ["Medium", "Large", "Medium", "Small"]


def test_list_features(lagos_collection):
    with patch(GET, return_value=make_response(body=lagos_collection)):
        response = client.get("/api/features")

    assert response.status_code == 200
    assert response.json() == [{
        "index": 1,
        "name": "Lagos",
        "country": "-",
        "population": "15,000,000",
        "geometry": "Point: [3.3941795,6.4530538]",
        "properties": {"CITY": "Lagos", "POP_EST": 15000000},
    }]


def test_list_features_empty(empty_collection):
    with patch(GET, return_value=make_response(body=empty_collection)):
        response = client.get("/api/features")
    assert response.status_code == 200
    assert response.json() == []


def test_list_features_not_a_collection():
    with patch(GET, return_value=make_response(body={"type": "Point"})):
        response = client.get("/api/features")
    assert response.status_code == 422
    assert "not a FeatureCollection" in response.json()["detail"]


def test_list_features_upstream_failure():
    with patch(GET, side_effect=requests.exceptions.ConnectionError("refused")):
        response = client.get("/api/features")
    assert response.status_code == 502
    assert response.json()["detail"].startswith("GeoJSON unavailable")


def test_bundled_geojson_is_served():
    response = client.get("/data/MegaCities.geojson")
    assert response.status_code == 200
    data = response.json()
    assert data["type"] == "FeatureCollection"
    assert len(data["features"]) > 0
