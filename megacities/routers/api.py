from fastapi import APIRouter
from typing import List

from megacities.exceptions.custom_exceptions import GeoDataUnavailableError, NotAFeatureCollectionError
from megacities.exceptions.geojson_exceptions import GeoDataError
from megacities.models.schemas import CitySummary, FeatureSummary
from megacities.services.city_table import summarize_cities
from megacities.services.geojson_loader import fetch_geojson, resolve_url
from megacities.utils.config import settings
from megacities.utils.geojson_utils import is_feature_collection, summarize_features
from megacities.utils.logging import get_logger

# Create a logger specific to this module
logger = get_logger("megacities.routers.api")

router = APIRouter(prefix="/api", tags=["api"], responses={404: {"description": "Not found"}})


@router.get("/cities", response_model=List[CitySummary])
async def list_cities():
    return summarize_cities()


@router.get("/features", response_model=List[FeatureSummary])
async def list_features():
    """
    Summary rows for the configured GeoJSON file, same fields as the page table.

    Example of Output
        ```json
        [
            {
            "index": 1,
            "name": "Lagos",
            "country": "-",
            "population": "15,000,000",
            "geometry": "Point: [3.39,6.45]",
            "properties": {"CITY": "Lagos", "POP_EST": 15000000}
            }
        ]
        ```
    """
    url = resolve_url(settings.page_origin, settings.geojson_path)
    try:
        data = await fetch_geojson(url, timeout=settings.fetch_timeout)
    except GeoDataError as e:
        logger.error(f"Feature summary failed: {e}")
        raise GeoDataUnavailableError(str(e))

    if not is_feature_collection(data):
        raise NotAFeatureCollectionError(f"got {type(data).__name__} from {url}")

    return [FeatureSummary(**s) for s in summarize_features(data["features"])]
