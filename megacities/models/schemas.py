from pydantic import BaseModel, Field
from typing import Dict, Any, Optional
from dataclasses import dataclass
from enum import Enum

class CityRecord(BaseModel):
    name: str
    population: int

class CitySummary(CityRecord):
    size: str = Field(..., description="Small, Medium or Large")

class FeatureSummary(BaseModel):
    """One row of the GeoJSON summary table"""
    index: int = Field(..., description="1-based position in the features array")
    name: str
    country: str
    population: str
    geometry: str
    properties: Dict[str, Any] = {}

class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

@dataclass
class DisplayState:
    """Status shown to the user for one fetch attempt"""
    state: LoadState = LoadState.IDLE
    message: str = ""
    is_error: bool = False
    error: Optional[Exception] = None
