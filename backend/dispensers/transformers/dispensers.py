import logging
from typing import Any, Dict, List

from .base import Transformer
from dispensers.models import WaterDispenser, WaterType, LocationType

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Water Dispenser"
ID_PREFIX = "dispenser-"

FALSY_STRINGS = {"", "false", "0", "no"}

def clean_value(value):
    """Clean string values"""
    if value is None:
        return None
    if not isinstance(value, str):
        return str(value)
    return value

def parse_water_type(value: Any) -> WaterType:
    """First token of a comma-separated ``water_types`` value.

    Missing values and unknown tokens both give ``WaterType.STILL``.
    """
    if not value:
        return WaterType.STILL
    token = str(value).split(',')[0].strip().lower()
    if not token:
        return WaterType.STILL
    try:
        return WaterType(token)
    except ValueError:
        logger.warning(f"Unknown water type '{token}', using '{WaterType.STILL.value}'")
        return WaterType.STILL

def parse_location_type(value: Any) -> LocationType:
    """``indoor`` when ``is_indoor`` is truthy, otherwise ``outdoor``"""
    if isinstance(value, str):
        value = value.strip().lower() not in FALSY_STRINGS
    return LocationType.INDOOR if value else LocationType.OUTDOOR

def feature_id(feature: Dict[str, Any], index: int) -> str:
    raw_id = feature.get('id')
    if raw_id is not None and str(raw_id):
        return str(raw_id)
    return f"{ID_PREFIX}{index}"

def feature_to_dispenser(feature: Dict[str, Any], index: int) -> WaterDispenser:
    """Map one GeoJSON feature to a WaterDispenser"""
    if not isinstance(feature, dict):
        raise ValueError(f"Feature {index} is not an object: {feature!r}")
    properties = feature.get('properties') or {}
    if not isinstance(properties, dict):
        raise ValueError(f"Feature {index} has non-object properties: {properties!r}")
    coordinates = feature['geometry']['coordinates']

    return WaterDispenser(
        id=feature_id(feature, index),
        name=clean_value(properties.get('name') or DEFAULT_NAME),
        longitude=coordinates[0],
        latitude=coordinates[1],
        water_type=parse_water_type(properties.get('water_types')),
        location_type=parse_location_type(properties.get('is_indoor')),
        address=clean_value(properties.get('address')),
        description=clean_value(properties.get('description')),
    )

class GeoJSONToDispensers(Transformer):
    def transform(self, data: Dict[str, Any]) -> List[WaterDispenser]:
        """Transform a GeoJSON feature collection into WaterDispenser records"""
        features = data['features']
        dispensers = [feature_to_dispenser(feature, index) for index, feature in enumerate(features)]
        logger.info(f"Mapped {len(dispensers):,} features to dispensers")
        return dispensers
