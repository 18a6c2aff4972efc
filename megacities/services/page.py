import asyncio
from typing import Optional

from megacities.services.city_table import render_city_table
from megacities.services.geojson_loader import GeoDataLoader
from megacities.utils.config import settings
from megacities.utils.dom import Document, Element
from megacities.utils.logging import get_logger

logger = get_logger("megacities.services.page")


def build_document(title: Optional[str] = None) -> Document:
    """Fresh page with the empty container both tables are appended to."""
    document = Document(title or settings.page_title)
    document.body.append(Element("div", id=settings.container_id))
    return document


def initialize(document: Document, geojson_path: Optional[str] = None,
               page_origin: Optional[str] = None) -> "asyncio.Task":
    """
    Entry point for one page load: the static city table is rendered
    synchronously, then the GeoJSON fetch is started. The returned task
    completes when the GeoJSON section is final.
    """
    container = document.get_element_by_id(settings.container_id)
    render_city_table(container)

    loader = GeoDataLoader(container, page_origin=page_origin)
    logger.debug("Page initialized, GeoJSON fetch started")
    return loader.load(geojson_path or settings.geojson_path)
