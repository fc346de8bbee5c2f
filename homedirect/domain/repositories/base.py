"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import ContextManager, List, Optional, Any, Protocol, TypeVar

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID, or None."""
        ...

    def list(self) -> List[T]:
        """List all entities in insertion order."""
        ...

    def create(self, obj_in: Any) -> T:
        """Create a new entity and assign its ID."""
        ...

    def update(self, id: int, obj_in: Any) -> T:
        """Merge fields into an existing entity. Raises EntityNotFoundException."""
        ...

    def delete(self, id: int) -> T:
        """Delete an entity by ID. Raises EntityNotFoundException."""
        ...

    def locked(self) -> ContextManager[Any]:
        """Critical section over this collection for read-check-mutate sequences."""
        ...
