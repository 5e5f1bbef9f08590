"""Repository base class for identity-scoped records.

Wraps the handful of operations the plan service needs (upsert by primary
key, append, lookup) and converts store failures into `PersistenceError`
so callers see the store's message instead of a driver exception.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, Optional, List, Any
from core.exceptions import PersistenceError
from core.logger import get_logger
from database.models import Base

T = TypeVar('T', bound=Base)

logger = get_logger("core.repository")


class BaseRepository(Generic[T]):
    """Generic repository over one mapped table.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def _commit(self, operation: str) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("%s %s failed: %s", self.model.__tablename__, operation, exc)
            raise PersistenceError(str(exc.orig if getattr(exc, "orig", None) else exc), operation=operation) from exc

    def upsert(self, obj: T) -> T:
        """Insert or replace the row sharing ``obj``'s primary key.

        Last write wins: every mapped column of the stored row is replaced
        by the values on ``obj``.
        """
        try:
            merged = self.session.merge(obj)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError(str(exc), operation="upsert") from exc
        self._commit("upsert")
        self.session.refresh(merged)
        return merged

    def add(self, obj: T) -> T:
        """Append a new row."""
        self.session.add(obj)
        self._commit("insert")
        self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve a row by primary key (scalar or tuple), or None."""
        try:
            return self.session.get(self.model, id)
        except SQLAlchemyError as exc:
            raise PersistenceError(str(exc), operation="select") from exc

    def list_by(self, **filters: Any) -> List[T]:
        """Return all rows whose columns equal the given values."""
        try:
            return self.session.query(self.model).filter_by(**filters).all()
        except SQLAlchemyError as exc:
            raise PersistenceError(str(exc), operation="select") from exc
