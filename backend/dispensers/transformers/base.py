from abc import ABC, abstractmethod
from typing import Any

class Transformer(ABC):
    """One step applied to fetched feature data by the pipeline."""
    
    @abstractmethod
    def transform(self, data: Any) -> Any:
        pass

    def __str__(self) -> str:
        return self.__class__.__name__
