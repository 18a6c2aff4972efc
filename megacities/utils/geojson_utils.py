import json
import math
from typing import Any, Dict, List, Optional, Sequence

from megacities.utils.logging import get_logger

# Create a logger specific to this module
logger = get_logger("megacities.utils.geojson_utils")

# GeoJSON files don't agree on attribute names; candidates are tried in order
NAME_KEYS = ["name", "Name", "NAME", "city", "City", "CITY", "title", "TITLE"]
COUNTRY_KEYS = ["country", "Country", "COUNTRY", "admin", "Admin", "ADM0_NAME"]
POPULATION_KEYS = ["population", "Population", "POP", "pop_est", "POP_EST", "POP_MAX", "POPULATION"]

NO_NAME = "(no name)"
NO_VALUE = "-"
NO_GEOMETRY = "(no geometry)"

RAW_PREVIEW_LIMIT = 4000
RAW_TRUNCATION_MARKER = "\n…(truncated)"
COORDINATE_PREVIEW_LIMIT = 120
COORDINATE_TRUNCATION_MARKER = "…"


def js_normalize(value: Any) -> Any:
    """Reshape a parsed JSON value so json.dumps matches JSON.stringify."""
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        if value.is_integer():
            return int(value)
        return value
    if isinstance(value, dict):
        return {k: js_normalize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [js_normalize(v) for v in value]
    return value


def is_truthy(value: Any) -> bool:
    """JavaScript truthiness: only null, false, 0, NaN and "" are falsy."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value != ""
    return True


def to_text(value: Any) -> str:
    """Render a property value the way a browser's String() would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    if isinstance(value, list):
        # Array.prototype.join renders null elements as empty strings
        return ",".join("" if v is None else to_text(v) for v in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def pick_prop(properties: Any, candidates: Sequence[str]) -> Any:
    """
    Return the value of the first candidate key that exists and holds
    something other than None or a blank string.

    Args:
        properties: The feature's properties mapping (may be missing)
        candidates: Keys to try, highest priority first

    Returns:
        The matching value, or None when no candidate matches
    """
    if not isinstance(properties, dict):
        return None

    for key in candidates:
        if key in properties:
            value = properties[key]
            if value is not None and to_text(value).strip() != "":
                return value
    return None


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_number(value: float) -> str:
    """Thousands separators, at most three fraction digits."""
    if isinstance(value, int):
        return f"{value:,}"
    if value != value or value in (float("inf"), float("-inf")):
        return str(value)
    if value.is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_population(value: Any) -> str:
    if not is_truthy(value):
        return NO_VALUE
    if is_number(value):
        return format_number(value)
    return to_text(value)


def resolve_name(properties: Any) -> str:
    value = pick_prop(properties, NAME_KEYS)
    return to_text(value) if is_truthy(value) else NO_NAME


def resolve_country(properties: Any) -> str:
    value = pick_prop(properties, COUNTRY_KEYS)
    return to_text(value) if is_truthy(value) else NO_VALUE


def resolve_population(properties: Any) -> str:
    return format_population(pick_prop(properties, POPULATION_KEYS))


def pretty_json(value: Any) -> str:
    return json.dumps(js_normalize(value), indent=2, ensure_ascii=False)


def compact_json(value: Any) -> str:
    return json.dumps(js_normalize(value), separators=(",", ":"), ensure_ascii=False)


def truncate_preview(text: str, limit: int = RAW_PREVIEW_LIMIT) -> str:
    if len(text) > limit:
        return text[:limit] + RAW_TRUNCATION_MARKER
    return text


def summarize_geometry(geometry: Any) -> str:
    """
    Geometry type plus a coordinate preview. Points show their full
    coordinates, everything else is cut at COORDINATE_PREVIEW_LIMIT characters.
    """
    if not is_truthy(geometry):
        return NO_GEOMETRY
    if not isinstance(geometry, dict):
        return ""

    text = to_text(geometry.get("type") or "")
    coordinates = geometry.get("coordinates")
    if isinstance(coordinates, list):
        coords_string = compact_json(coordinates)
        if geometry.get("type") == "Point":
            text += ": " + coords_string
        else:
            text += ": " + coords_string[:COORDINATE_PREVIEW_LIMIT]
            if len(coords_string) > COORDINATE_PREVIEW_LIMIT:
                text += COORDINATE_TRUNCATION_MARKER
    return text


def is_feature_collection(data: Any) -> bool:
    return (
        isinstance(data, dict)
        and data.get("type") == "FeatureCollection"
        and isinstance(data.get("features"), list)
    )


def feature_properties(feature: Any) -> Dict[str, Any]:
    if isinstance(feature, dict) and isinstance(feature.get("properties"), dict):
        return feature["properties"]
    return {}


def feature_geometry(feature: Any) -> Optional[Any]:
    if isinstance(feature, dict):
        return feature.get("geometry")
    return None


def summarize_features(features: List[Any]) -> List[Dict[str, Any]]:
    """Per-feature summary fields, in the array's original order."""
    summaries = []
    for i, feature in enumerate(features):
        properties = feature_properties(feature)
        summaries.append({
            "index": i + 1,
            "name": resolve_name(properties),
            "country": resolve_country(properties),
            "population": resolve_population(properties),
            "geometry": summarize_geometry(feature_geometry(feature)),
            "properties": properties,
        })
    logger.debug(f"Summarized {len(summaries)} features")
    return summaries
