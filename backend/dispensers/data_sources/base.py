from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Sequence
from datetime import datetime
from pydantic import BaseModel, Field

class DataSourceError(Exception):
    """Raised when a source cannot be configured, reached or parsed"""
    pass

class SourceData(BaseModel):
    """Raw payload of one fetch plus what was asked for"""
    data: Dict[str, Any]
    timestamp: datetime = Field(default_factory=datetime.now)
    metadata: Dict[str, Any] = Field(default_factory=dict)

class DataSource(ABC):
    """Base class for feature sources"""
    
    @abstractmethod
    def __init__(self, config: dict):
        """Initialize with configuration"""
        pass
    
    @abstractmethod
    async def fetch_data(self, extent: Optional[Sequence[float]] = None) -> SourceData:
        """Fetch all features, or only those inside ``extent`` (minX, minY, maxX, maxY)"""
        pass

    @abstractmethod
    def get_metadata(self) -> Dict[str, Any]:
        pass
    
    async def close(self):
        """Release resources held between fetches"""
        pass
