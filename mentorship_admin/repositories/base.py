from __future__ import annotations

from typing import Any, ClassVar, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from mentorship_admin.db import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Common single-statement CRUD helpers keyed on the model's primary key."""

    model: ClassVar[Type[Base]]
    pk: ClassVar[str]

    def __init__(self, db: Session) -> None:
        self.db = db

    def _pk_column(self):
        return getattr(self.model, self.pk)

    def find_all(self) -> List[T]:
        return self.db.query(self.model).order_by(self._pk_column()).all()

    def find_by_id(self, id_value: Any) -> Optional[T]:
        return self.db.query(self.model).filter(self._pk_column() == id_value).first()

    def add(self, values: dict) -> T:
        """Insert a row and return it as stored (server defaults included)."""
        entity = self.model(**values)
        self.db.add(entity)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(entity)
        return entity

    def stage_update(self, id_value: Any, changes: dict) -> int:
        """Issue the UPDATE inside the current transaction without committing."""
        return (
            self.db.query(self.model)
            .filter(self._pk_column() == id_value)
            .update(changes, synchronize_session=False)
        )

    def update(self, id_value: Any, changes: dict) -> int:
        """Apply ``changes`` to the row with this id; returns affected row count."""
        if not changes:
            # Nothing to write; report whether the row is there
            return 1 if self.find_by_id(id_value) is not None else 0
        try:
            count = self.stage_update(id_value, changes)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.expire_all()
        return count

    def remove(self, id_value: Any) -> int:
        """Delete the row with this id; returns deleted row count."""
        try:
            count = (
                self.db.query(self.model)
                .filter(self._pk_column() == id_value)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.expire_all()
        return count
