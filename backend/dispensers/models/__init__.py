from .dispenser import WaterDispenser, WaterType, LocationType, FetchResult

__all__ = [
    'WaterDispenser',
    'WaterType',
    'LocationType',
    'FetchResult'
]
