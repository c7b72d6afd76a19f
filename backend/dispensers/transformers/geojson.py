import geopandas as gpd
from shapely.geometry import Point
from typing import List
from .base import Transformer
from dispensers.models import WaterDispenser

class DispensersToGeoDataFrame(Transformer):
    def __init__(self, to_web_mercator: bool = False):
        self.to_web_mercator = to_web_mercator

    def transform(self, data: List[WaterDispenser]) -> gpd.GeoDataFrame:
        """Transform dispenser records into a point GeoDataFrame for map layers"""
        records = [dispenser.model_dump() for dispenser in data]
        for record in records:
            record['water_type'] = record['water_type'].value
            record['location_type'] = record['location_type'].value

        gdf = gpd.GeoDataFrame(
            records,
            columns=list(WaterDispenser.model_fields),
            geometry=[Point(d.longitude, d.latitude) for d in data],
            crs="EPSG:4326"
        )

        # Map clients draw in Web Mercator
        if self.to_web_mercator:
            gdf = gdf.to_crs(epsg=3857)
            
        return gdf
