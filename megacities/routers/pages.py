from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from megacities.services.page import build_document, initialize
from megacities.utils.logging import get_logger

# Create a logger specific to this module
logger = get_logger("megacities.routers.pages")

router = APIRouter(prefix="", tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index():
    """Render the city table and the GeoJSON summary into one page"""
    document = build_document()
    task = initialize(document)
    await task
    logger.info("Page rendered")
    return HTMLResponse(content=document.to_html())
