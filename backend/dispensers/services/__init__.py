from .vector_source import ExtentVectorSource
from .wfs_service import WFSService

__all__ = [
    'ExtentVectorSource',
    'WFSService'
]
