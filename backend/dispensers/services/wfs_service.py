import logging
from typing import List, Optional, Sequence

from dispensers.config.sources import WFSConfig
from dispensers.data_sources import WFSDataSource, DataSourceError
from dispensers.models import FetchResult, WaterDispenser
from dispensers.pipeline import Pipeline
from dispensers.transformers.dispensers import GeoJSONToDispensers
from .vector_source import ExtentVectorSource

class WFSService:
    """Fetches water dispensers from a WFS endpoint.

    Holds only the endpoint and feature type, so one instance can serve
    concurrent callers. Failures are reported through ``logger`` (the module
    logger unless another one is injected) and never raised.
    """

    def __init__(
        self,
        wfs_url: str,
        feature_type: str,
        logger: Optional[logging.Logger] = None,
        timeout: Optional[float] = None
    ):
        self.wfs_url = wfs_url
        self.feature_type = feature_type
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: WFSConfig, logger: Optional[logging.Logger] = None) -> "WFSService":
        return cls(config.url, config.layer, logger=logger, timeout=config.timeout)

    def _source(self) -> WFSDataSource:
        return WFSDataSource({
            'name': self.feature_type,
            'url': self.wfs_url,
            'layer': self.feature_type,
            'timeout': self.timeout,
        })

    def build_feature_url(self) -> str:
        return self._source().build_url()

    def create_vector_source(self) -> ExtentVectorSource:
        """Vector source descriptor that loads dispensers per visible extent"""
        source = self._source()
        return ExtentVectorSource(source.build_url, srs_name=source.wfs_config.srs_name)

    async def fetch_result(self, extent: Optional[Sequence[float]] = None) -> FetchResult:
        """Fetch and map dispensers (optionally only inside ``extent``), reporting failure instead of raising"""
        try:
            pipeline = Pipeline(
                source=self._source(),
                transformers=[GeoJSONToDispensers()]
            )
            dispensers = await pipeline.execute(extent=extent)
        except DataSourceError as e:
            self.logger.error(f"Error fetching water dispensers: {str(e)}")
            return FetchResult.failure(str(e))
        except (KeyError, TypeError, IndexError, ValueError) as e:
            self.logger.error(f"Error parsing water dispensers: {e.__class__.__name__}: {str(e)}")
            return FetchResult.failure(f"Malformed feature collection: {str(e)}")

        return FetchResult.success(dispensers)

    async def fetch_water_dispensers(self) -> List[WaterDispenser]:
        """All dispensers, or an empty list when the fetch fails"""
        result = await self.fetch_result()
        return result.dispensers
