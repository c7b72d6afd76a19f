import os
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field
from enum import Enum
from dotenv import load_dotenv

load_dotenv()

class DataSourceType(str, Enum):
    """Supported data source types"""
    WFS = "wfs"

class SourceConfig(BaseModel):
    """Base configuration for all data sources"""
    type: DataSourceType
    name: str
    description: Optional[str] = None
    enabled: bool = True
    timeout: Optional[float] = None  # no timeout unless configured

class WFSConfig(SourceConfig):
    """WFS specific configuration"""
    type: DataSourceType = DataSourceType.WFS
    url: str
    layer: str
    version: str = "1.1.0"
    srs_name: str = "EPSG:3857"
    output_format: str = "application/json"
    additional_params: Dict[str, Any] = Field(default_factory=dict)

# Active data sources configuration
SOURCES = {
    "water_dispensers": WFSConfig(
        name="Water Dispensers",
        description="Public drinking water dispensers served as WFS point features",
        url="http://localhost:8080/geoserver/wfs",
        layer="water:dispensers"
    ),
}

def get_source_config(source_id: str) -> SourceConfig:
    """Get configuration for a specific source"""
    if source_id not in SOURCES:
        raise KeyError(f"Unknown source: {source_id}")
    return SOURCES[source_id]

def get_dispenser_config() -> WFSConfig:
    """Dispenser source config with WFS_URL / WFS_FEATURE_TYPE / WFS_TIMEOUT applied"""
    config = get_source_config("water_dispensers")
    overrides = {}
    if os.getenv('WFS_URL'):
        overrides['url'] = os.getenv('WFS_URL')
    if os.getenv('WFS_FEATURE_TYPE'):
        overrides['layer'] = os.getenv('WFS_FEATURE_TYPE')
    if os.getenv('WFS_TIMEOUT'):
        overrides['timeout'] = float(os.getenv('WFS_TIMEOUT'))
    return config.model_copy(update=overrides)
