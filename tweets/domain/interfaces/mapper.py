"""Interface for entity/document mappers."""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TSource = TypeVar("TSource")
TTarget = TypeVar("TTarget")


class IMapper(ABC, Generic[TSource, TTarget]):
    """
    Converts one shape into another without side effects.
    
    Used to keep the stored document shape separate from domain entities.
    """
    
    @abstractmethod
    def map(self, source: TSource) -> TTarget:
        """
        Map a source object to its target shape.
        
        Args:
            source: Object to convert
            
        Returns:
            Converted object
        """
        pass
