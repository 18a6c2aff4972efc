from typing import List, Optional, Sequence

from megacities.exceptions.page_exceptions import ContainerNotFoundError
from megacities.models.schemas import CityRecord, CitySummary
from megacities.utils.dom import Element
from megacities.utils.geojson_utils import format_number
from megacities.utils.logging import get_logger

# Create a logger specific to this module
logger = get_logger("megacities.services.city_table")

CITY_NAMES = [
    "Madison",
    "Milwaukee",
    "Green Bay",
    "Superior",
]

CITY_POPULATIONS = [
    233209,
    594833,
    104057,
    27244,
]

SMALL_CITY_LIMIT = 100_000
MEDIUM_CITY_LIMIT = 500_000

CELL_STYLE = "padding:6px 10px;border:1px solid #444;text-align:left;"
TABLE_STYLE = "border-collapse:collapse;margin-bottom:1rem;"


def classify_city_size(population: int) -> str:
    if population < SMALL_CITY_LIMIT:
        return "Small"
    elif population < MEDIUM_CITY_LIMIT:
        return "Medium"
    return "Large"


def build_city_records(names: Sequence[str], populations: Sequence[int]) -> List[CityRecord]:
    # Lists are an internal fixture and assumed aligned
    return [CityRecord(name=name, population=pop) for name, pop in zip(names, populations)]


def summarize_cities(names: Sequence[str] = CITY_NAMES,
                     populations: Sequence[int] = CITY_POPULATIONS) -> List[CitySummary]:
    return [
        CitySummary(name=r.name, population=r.population, size=classify_city_size(r.population))
        for r in build_city_records(names, populations)
    ]


def render_city_table(container: Optional[Element],
                      names: Sequence[str] = CITY_NAMES,
                      populations: Sequence[int] = CITY_POPULATIONS) -> Element:
    """
    Build the City / Population / City Size table and append it to the container.

    Raises:
        ContainerNotFoundError: if there is no container to append to
    """
    if container is None:
        raise ContainerNotFoundError("No container element to render the city table into")

    table = Element("table", style=TABLE_STYLE)

    header_row = table.append(Element("tr"))
    for label in ("City", "Population", "City Size"):
        header_row.append(Element("th", text=label, style=CELL_STYLE))

    for city in summarize_cities(names, populations):
        tr = table.append(Element("tr"))
        tr.append(Element("td", text=city.name, style=CELL_STYLE))
        tr.append(Element("td", text=format_number(city.population), style=CELL_STYLE))
        tr.append(Element("td", text=city.size, style=CELL_STYLE))

    container.append(table)
    logger.info(f"Rendered city table with {len(table.children) - 1} rows")
    return table
