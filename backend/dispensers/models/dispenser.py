from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class WaterType(str, Enum):
    """Kind of water a dispenser provides"""
    STILL = "still"
    SPARKLING = "sparkling"
    FILTERED = "filtered"
    MIXED = "mixed"

class LocationType(str, Enum):
    INDOOR = "indoor"
    OUTDOOR = "outdoor"

class WaterDispenser(BaseModel):
    """A single water dispenser mapped from a WFS point feature.

    Serialised with camelCase aliases (``waterType``, ``locationType``) for map
    and list clients; Python code uses the snake_case attribute names.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    longitude: float
    latitude: float
    water_type: WaterType = Field(default=WaterType.STILL, alias="waterType")
    location_type: LocationType = Field(default=LocationType.OUTDOOR, alias="locationType")
    address: Optional[str] = None
    description: Optional[str] = None

class FetchResult(BaseModel):
    """Outcome of a dispenser fetch: either the records or the reason it failed"""
    ok: bool
    dispensers: List[WaterDispenser] = Field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def success(cls, dispensers: List[WaterDispenser]) -> "FetchResult":
        return cls(ok=True, dispensers=list(dispensers))

    @classmethod
    def failure(cls, reason: str) -> "FetchResult":
        return cls(ok=False, error=reason)
