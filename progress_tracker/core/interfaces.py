"""
Core interfaces and abstract base classes for the learning progress tracker.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar


T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """Abstract base class for in-memory repositories."""

    @abstractmethod
    def add(self, entity: T) -> T:
        """Store an entity."""
        pass

    @abstractmethod
    def find(self, entity_id: str) -> Optional[T]:
        """Find an entity by ID."""
        pass

    @abstractmethod
    def all(self) -> List[T]:
        """Get all entities in insertion order."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored entities."""
        pass


class NotificationSink(ABC):
    """Receives the notices produced for graduating students."""

    @abstractmethod
    def deliver(self, recipient: str, subject: str, body: str) -> None:
        """Deliver one notice."""
        pass
