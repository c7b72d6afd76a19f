import asyncio
import json
import logging
from typing import Optional, Sequence
from urllib.parse import urlencode

import aiohttp
from pydantic import ValidationError

from .base import DataSource, DataSourceError, SourceData
from dispensers.config.sources import WFSConfig

logger = logging.getLogger(__name__)

def format_coordinate(value) -> str:
    """Render a coordinate the way a browser joins numbers (no trailing .0)"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

def format_bbox(extent: Sequence[float], srs_name: str) -> str:
    """minX,minY,maxX,maxY,<srs>"""
    if len(extent) != 4:
        raise ValueError(f"Extent must have 4 values, got {len(extent)}")
    return ','.join([format_coordinate(v) for v in extent] + [srs_name])

class WFSDataSource(DataSource):
    """WFS data source implementation"""
    
    def __init__(self, config: dict):
        self._validate_config(config)
    
    def _validate_config(self, config: dict) -> bool:
        try:
            self.wfs_config = WFSConfig(**config)
            return True
        except ValidationError as e:
            raise DataSourceError(f"Invalid WFS configuration: {str(e)}")

    def _get_params(self, extent: Optional[Sequence[float]] = None) -> dict:
        """Get GetFeature request parameters, in request order"""
        params = {
            'service': 'WFS',
            'version': self.wfs_config.version,
            'request': 'GetFeature',
            'typename': self.wfs_config.layer,
            'outputFormat': self.wfs_config.output_format,
        }
        if extent is not None:
            params['srsname'] = self.wfs_config.srs_name
            params['bbox'] = format_bbox(extent, self.wfs_config.srs_name)
        params.update(self.wfs_config.additional_params)
        return params

    def build_url(self, extent: Optional[Sequence[float]] = None) -> str:
        """GetFeature URL for the whole layer, or for one bounding box"""
        query = urlencode(self._get_params(extent), safe=',:/')
        return f"{self.wfs_config.url}?{query}"
    
    async def fetch_data(self, extent: Optional[Sequence[float]] = None) -> SourceData:
        url = self.build_url(extent)
        timeout = aiohttp.ClientTimeout(total=self.wfs_config.timeout)
        
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                logger.debug(f"Requesting {url}")
                async with session.get(url) as response:
                    if not 200 <= response.status < 300:
                        raise DataSourceError(
                            f"WFS request failed with status {response.status}: {response.reason}"
                        )
                    
                    try:
                        geojson_data = await response.json(content_type=None)
                    except json.JSONDecodeError as e:
                        raise DataSourceError(f"WFS response is not valid JSON: {str(e)}")
                    
                    if not isinstance(geojson_data, dict) or not isinstance(geojson_data.get('features'), list):
                        raise DataSourceError("WFS response is not a GeoJSON feature collection")
                    
                    return SourceData(
                        data=geojson_data,
                        metadata={
                            'feature_count': len(geojson_data['features']),
                            'layer': self.wfs_config.layer,
                            'url': self.wfs_config.url
                        }
                    )
                    
        except aiohttp.ClientError as e:
            raise DataSourceError(f"WFS request failed: {str(e)}")
        except asyncio.TimeoutError:
            raise DataSourceError(f"WFS request timed out after {self.wfs_config.timeout}s")
    
    def get_metadata(self) -> dict:
        return {
            'name': self.wfs_config.name,
            'description': self.wfs_config.description,
            'type': 'WFS',
            'url': self.wfs_config.url,
            'layer': self.wfs_config.layer
        }