from typing import Callable, Dict, List, Optional, Sequence, Tuple

Extent = Tuple[float, float, float, float]

class ExtentVectorSource:
    """Descriptor for a map layer that loads features for the visible extent.

    The map driver calls ``url(extent)`` whenever the view changes and fetches
    the result itself; nothing here performs I/O.
    """

    format = "geojson"
    strategy_name = "bbox"

    def __init__(self, url_function: Callable[[Sequence[float]], str], srs_name: str = "EPSG:3857"):
        self._url_function = url_function
        self.srs_name = srs_name

    def url(self, extent: Sequence[float]) -> str:
        return self._url_function(extent)

    def strategy(self, extent: Extent, resolution: Optional[float] = None) -> List[Extent]:
        """Load the whole requested extent in one request, at any resolution"""
        return [extent]

    def as_dict(self) -> Dict[str, str]:
        """JSON-friendly form for browser map clients"""
        template = self.url(("{minX}", "{minY}", "{maxX}", "{maxY}"))
        template = template.replace("%7B", "{").replace("%7D", "}")
        return {
            'format': self.format,
            'url_template': template,
            'strategy': self.strategy_name,
            'srs_name': self.srs_name,
        }
