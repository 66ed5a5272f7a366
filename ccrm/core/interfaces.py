"""
Core interfaces and abstract base classes for the CCRM platform.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar


T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """Abstract base class for keyed entity collections."""
    
    @abstractmethod
    def put(self, key: str, entity: T) -> None:
        """Insert or overwrite the entity stored under key."""
        pass
    
    @abstractmethod
    def get(self, key: str) -> Optional[T]:
        """Find entity by key."""
        pass
    
    @abstractmethod
    def values(self) -> List[T]:
        """Snapshot of all stored entities."""
        pass
