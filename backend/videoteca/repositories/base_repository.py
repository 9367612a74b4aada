from contextlib import contextmanager
from typing import Generic, TypeVar, Type, Optional, List, Any, Dict
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import InstrumentedAttribute
from videoteca.db import Base

ModelType = TypeVar("ModelType", bound=Base)

class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations.

    ``where`` arguments are plain ``{column: value}`` mappings combined with AND,
    in the spirit of a query builder's ``findMany({where})``.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def _query(self, where: Optional[Dict[str, Any]] = None):
        query = self.db.query(self.model)
        if where:
            query = query.filter_by(**where)
        return query

    @contextmanager
    def _transaction(self):
        """Commit on success; roll the session back if the datastore fails"""
        try:
            yield
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def find_many(self, where: Optional[Dict[str, Any]] = None, order_by: Optional[InstrumentedAttribute] = None, descending: bool = False) -> List[ModelType]:
        """All rows matching ``where``"""
        query = self._query(where)
        if order_by is not None:
            query = query.order_by(order_by.desc() if descending else order_by.asc())
        return query.all()

    def find_first(self, where: Dict[str, Any]) -> Optional[ModelType]:
        """First row matching ``where`` or None"""
        return self._query(where).first()

    def find_unique(self, id: Any) -> Optional[ModelType]:
        """Get by primary key"""
        return self.db.get(self.model, id)

    def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """Create new object"""
        db_obj = self.model(**obj_in)
        with self._transaction():
            self.db.add(db_obj)
        self.db.refresh(db_obj)
        return db_obj

    def update_many(self, where: Dict[str, Any], data: Dict[str, Any]) -> int:
        """Update every row matching ``where``; returns the matched row count"""
        values = {field: value for field, value in data.items() if hasattr(self.model, field)}
        with self._transaction():
            count = self._query(where).update(values, synchronize_session=False)
        return count

    def delete_many(self, where: Dict[str, Any]) -> int:
        """Delete every row matching ``where``; returns the deleted row count"""
        with self._transaction():
            count = self._query(where).delete(synchronize_session=False)
        return count

    def count(self, where: Optional[Dict[str, Any]] = None) -> int:
        return self._query(where).count()

    def exists(self, **kwargs) -> bool:
        """Check if object exists"""
        return self._query(kwargs).first() is not None
