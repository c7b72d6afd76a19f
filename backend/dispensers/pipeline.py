from typing import Any, List, Optional, Sequence
from dispensers.data_sources.base import DataSource
from dispensers.transformers.base import Transformer
import logging

logger = logging.getLogger(__name__)

class Pipeline:
    def __init__(
        self,
        source: DataSource,
        transformers: List[Transformer] = None
    ):
        self.source = source
        self.transformers = transformers or []
    
    async def execute(self, extent: Optional[Sequence[float]] = None) -> Any:
        """Fetch from the source and run every transformer over the result"""
        try:
            # 1. Fetch data
            logger.info("Fetching data from source")
            result = await self.source.fetch_data(extent=extent)
            logger.info(f"Fetched {result.metadata.get('feature_count', 0):,} features")
            
            # 2. Apply transformations
            data = result.data
            for transformer in self.transformers:
                logger.info(f"Applying transformer: {transformer}")
                data = transformer.transform(data)
            
            return data
            
        except Exception as e:
            logger.error(f"Pipeline failed: {str(e)}")
            raise
        finally:
            await self.source.close()
