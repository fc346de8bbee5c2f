"""
In-memory implementation of the Base Repository.
"""

from typing import Any, ContextManager, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from homedirect.core.clock import now
from homedirect.core.exceptions import EntityNotFoundException, ValidationFailedException
from homedirect.domain.repositories.base import BaseRepository
from homedirect.infrastructure.store import Table

ModelType = TypeVar("ModelType", bound=BaseModel)


def as_dict(obj_in: Any) -> dict:
    # Accepts a dict or a pydantic model
    if isinstance(obj_in, BaseModel):
        return obj_in.model_dump(exclude_unset=True)
    return dict(obj_in)


class InMemoryRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository over one store table.

    Records are immutable snapshots: an update stores a new copy, so a
    record handed to a caller never changes under its feet.
    """

    def __init__(self, table: Table, model: Type[ModelType]):
        self.table = table
        self.model = model

    def locked(self) -> ContextManager[Any]:
        return self.table.lock

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self.table.rows.get(id)

    def get_or_raise(self, id: int) -> ModelType:
        obj = self.get_by_id(id)
        if obj is None:
            raise EntityNotFoundException(
                f"{self.model.__name__} not found", details={"id": id}
            )
        return obj

    def list(self) -> List[ModelType]:
        with self.table.lock:
            return list(self.table.rows.values())

    def create(self, obj_in: Any) -> ModelType:
        obj_data = as_dict(obj_in)
        obj_data.pop("id", None)
        obj_data.setdefault("created_at", now())

        with self.table.lock:
            db_obj = self.model(id=self.table.next_id(), **obj_data)
            self.table.rows[db_obj.id] = db_obj
        return db_obj

    def update(self, id: int, obj_in: Any) -> ModelType:
        update_data = as_dict(obj_in)
        update_data.pop("id", None)

        with self.table.lock:
            db_obj = self.get_or_raise(id)
            # Only known fields are merged
            fields = {k: v for k, v in update_data.items() if k in self.model.model_fields}
            try:
                merged = self.model.model_validate({**db_obj.model_dump(), **fields})
            except ValidationError as e:
                raise ValidationFailedException(
                    f"Invalid {self.model.__name__} data",
                    details={"errors": e.errors(include_url=False, include_context=False)},
                )
            self.table.rows[id] = merged
        return merged

    def delete(self, id: int) -> ModelType:
        with self.table.lock:
            obj = self.table.rows.pop(id, None)
        if obj is None:
            raise EntityNotFoundException(
                f"{self.model.__name__} not found", details={"id": id}
            )
        return obj
