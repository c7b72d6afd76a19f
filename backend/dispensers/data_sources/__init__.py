from .base import DataSource, SourceData, DataSourceError
from .wfs_source import WFSDataSource

__all__ = [
    'DataSource',
    'SourceData',
    'DataSourceError',
    'WFSDataSource'
]
