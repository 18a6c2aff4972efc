import asyncio
from typing import Any, Optional
from urllib.parse import urljoin, urlparse

import requests

from megacities.exceptions.geojson_exceptions import GeoDataError, HttpStatusError, ParseError, NetworkError
from megacities.models.schemas import DisplayState, FeatureSummary, LoadState
from megacities.utils.config import settings
from megacities.utils.dom import Element
from megacities.utils.geojson_utils import (
    is_feature_collection,
    pretty_json,
    summarize_features,
    truncate_preview,
)
from megacities.utils.logging import get_logger

# Create a logger specific to this module
logger = get_logger("megacities.services.geojson_loader")

SECTION_STYLE = "margin-top:12px;padding:10px;background:rgba(255,255,255,0.9);border-radius:6px;"
HEADER_STYLE = "margin:0 0 8px 0;font-size:1rem"
STATUS_STYLE = "font-style:italic;margin-bottom:8px"
RAW_PRE_STYLE = "max-height:220px;overflow:auto;background:#f7f7f7;padding:8px;border-radius:4px;"
TABLE_STYLE = "width:100%;border-collapse:collapse;margin-top:8px"
TH_STYLE = "border-bottom:2px solid #666;padding:6px;text-align:left"
TD_STYLE = "border-bottom:1px solid #ddd;padding:6px;vertical-align:top"
DETAILS_CELL_STYLE = "padding:4px 8px 12px 8px;"
PROPS_PRE_STYLE = "white-space:pre-wrap;background:#fafafa;padding:8px;border-radius:4px;border:1px solid #eee;"
FALLBACK_PRE_STYLE = "background:#f7f7f7;padding:8px;border-radius:4px;max-height:250px;overflow:auto;"
HINT_STYLE = "margin-top:8px;color:#333"

SUMMARY_COLUMNS = ["#", "Name", "Country", "Population", "Geometry"]

LOADING_MESSAGE = "Loading GeoJSON…"
LOADED_MESSAGE = "Loaded GeoJSON."
NO_FEATURES_MESSAGE = "No features found in GeoJSON."
NOT_A_COLLECTION_MESSAGE = "GeoJSON is not a FeatureCollection. Showing contents:"
LOCAL_SERVER_HINT = (
    "Fetching from a file:// page can be blocked. Serve the page over HTTP "
    "(e.g. uvicorn megacities.main:app --port 8000) and open http://localhost:8000/."
)


def resolve_url(page_origin: str, resource_path: str) -> str:
    return urljoin(page_origin, resource_path)


def is_http_origin(page_origin: str) -> bool:
    return urlparse(page_origin).scheme in ("http", "https")


async def fetch_geojson(url: str, timeout: Optional[float] = None) -> Any:
    """
    GET the url and parse the body as JSON.

    Raises:
        NetworkError: the request could not complete
        HttpStatusError: the server answered with a non-success status
        ParseError: the body is not valid JSON
    """
    logger.info(f"Fetching GeoJSON from {url}")
    try:
        response = await asyncio.to_thread(requests.get, url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise NetworkError(url, str(e)) from e

    if not response.ok:
        raise HttpStatusError(response.status_code, response.reason)

    try:
        return response.json()
    except requests.exceptions.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in response: {e}") from e


class GeoDataLoader:
    """
    Fetches one GeoJSON document and renders it into a page section.

    A loader goes IDLE -> LOADING -> SUCCEEDED | FAILED exactly once; create
    a new loader for every page load.
    """

    def __init__(self, container: Element, page_origin: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.container = container
        self.page_origin = page_origin or settings.page_origin
        self.timeout = timeout if timeout is not None else settings.fetch_timeout
        self.display = DisplayState()
        self.section: Optional[Element] = None
        self.status: Optional[Element] = None
        self.content: Optional[Element] = None

    def load(self, resource_path: str) -> "asyncio.Task":
        """
        Show the loading placeholder right away and schedule the fetch.

        Must be called from a running event loop. Returns the task that
        finishes once the section is rendered, successfully or not.
        """
        if self.display.state is not LoadState.IDLE:
            raise RuntimeError("GeoDataLoader.load() can only be called once")

        self._build_section()
        self.display.state = LoadState.LOADING
        self.display.message = LOADING_MESSAGE

        url = resolve_url(self.page_origin, resource_path)
        return asyncio.get_running_loop().create_task(self._run(url))

    def _build_section(self):
        self.section = Element("section", id="geojson-section", style=SECTION_STYLE)
        self.section.append(Element("h3", text="GeoJSON — MegaCities", style=HEADER_STYLE))
        self.status = self.section.append(Element("div", text=LOADING_MESSAGE, style=STATUS_STYLE))
        self.content = self.section.append(Element("div", id="geojson-content"))
        self.container.append(self.section)

    async def _run(self, url: str):
        try:
            data = await fetch_geojson(url, timeout=self.timeout)
        except GeoDataError as e:
            self._fail(e)
            return

        self.display.state = LoadState.SUCCEEDED
        self.display.message = LOADED_MESSAGE
        self.status.set_text(LOADED_MESSAGE)
        self._render(data)

    def _render(self, data: Any):
        self.section.append(self._raw_preview(data))

        if not is_feature_collection(data):
            logger.warning("Loaded JSON is not a FeatureCollection, showing it verbatim")
            self.content.replace_children(
                Element("em", text=NOT_A_COLLECTION_MESSAGE),
                Element("pre", text=pretty_json(data), style=FALLBACK_PRE_STYLE),
            )
            return

        features = data["features"]
        if not features:
            self.content.replace_children(Element("em", text=NO_FEATURES_MESSAGE))
            return

        summaries = [FeatureSummary(**s) for s in summarize_features(features)]
        self.content.append(self._summary_table(summaries))
        logger.info(f"Rendered {len(summaries)} GeoJSON features")

    def _raw_preview(self, data: Any) -> Element:
        expander = Element("details")
        expander.append(Element("summary", text="Show raw JSON (truncated)"))
        expander.append(Element("pre", text=truncate_preview(pretty_json(data)), style=RAW_PRE_STYLE))
        return expander

    def _summary_table(self, summaries) -> Element:
        table = Element("table", style=TABLE_STYLE)

        header = table.append(Element("tr"))
        for label in SUMMARY_COLUMNS:
            header.append(Element("th", text=label, style=TH_STYLE))

        for summary in summaries:
            tr = table.append(Element("tr"))
            for value in (str(summary.index), summary.name, summary.country,
                          summary.population, summary.geometry):
                tr.append(Element("td", text=value, style=TD_STYLE))

            # Collapsible dump of every property, whatever was resolved above
            details_row = table.append(Element("tr"))
            cell = details_row.append(Element("td", style=DETAILS_CELL_STYLE, colspan=str(len(SUMMARY_COLUMNS))))
            details = cell.append(Element("details"))
            details.append(Element("summary", text="Show full properties"))
            details.append(Element("pre", text=pretty_json(summary.properties), style=PROPS_PRE_STYLE))

        return table

    def _fail(self, error: GeoDataError):
        logger.error(f"Error loading GeoJSON: {error}")

        message = f"Error loading GeoJSON: {error}"
        self.display.state = LoadState.FAILED
        self.display.message = message
        self.display.is_error = True
        self.display.error = error
        self.status.replace_children(Element("span", text=message, style="color:red"))

        # Best effort: any network failure on a non-HTTP page gets the hint
        if isinstance(error, NetworkError) and not is_http_origin(self.page_origin):
            hint = self.section.append(Element("div", style=HINT_STYLE))
            hint.append(Element("strong", text="Tip: "))
            hint.append(Element("span", text=LOCAL_SERVER_HINT))
