import json
import sys
from pathlib import Path

import pytest
import requests


# Ensure project root is importable for tests
ROOT = str(Path(__file__).resolve().parent.parent)
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


def make_response(status_code=200, body=b"", reason="OK",
                  url="http://localhost:8000/data/MegaCities.geojson"):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response.encoding = "utf-8"
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def lagos_collection():
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"CITY": "Lagos", "POP_EST": 15000000},
                "geometry": {"type": "Point", "coordinates": [3.3941795, 6.4530538]},
            }
        ],
    }


@pytest.fixture
def empty_collection():
    return {"type": "FeatureCollection", "features": []}
