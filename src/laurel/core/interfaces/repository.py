"""Read-only repository contract for structure storage."""

from abc import ABC, abstractmethod
from typing import Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Lookup of stored entities by ID."""

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Retrieve an entity by ID, or None when it does not exist."""

    @abstractmethod
    def list(self) -> Dict[str, T]:
        """Return all entities keyed by ID."""
