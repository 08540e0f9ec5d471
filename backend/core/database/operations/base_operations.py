# ------------------------------ IMPORTS ------------------------------
import logging
from typing import Any, Dict, Optional, Type
from sqlalchemy.orm import Session

from core.database.connection import Base

logger = logging.getLogger(__name__)

# ------------------------------ BASE OPERATIONS ------------------------------

class BaseOperations:
    """Generic get/create/update/delete by id for one model class."""

    model: Type[Base] = None

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, entity_id: int):
        return self.db.get(self.model, entity_id)

    def _save(self, entity, error_context: str):
        """Commit pending changes and refresh the entity, rolling back on failure."""
        try:
            self.db.commit()
            self.db.refresh(entity)
            return entity
        except Exception as e:
            logger.error(f"Error saving {error_context}: {e}")
            self.db.rollback()
            raise

    def create(self, data: Dict[str, Any]):
        """Insert a new row and return it with its assigned id."""
        entity = self.model(**data)
        self.db.add(entity)
        return self._save(entity, self.model.__tablename__)

    def update(self, entity_id: int, updates: Dict[str, Any]) -> Optional[Any]:
        """Merge the provided fields into an existing row; None if the id is unknown."""
        entity = self.get_by_id(entity_id)
        if not entity:
            return None

        for key, value in updates.items():
            setattr(entity, key, value)

        return self._save(entity, f"{self.model.__tablename__} {entity_id}")

    def delete(self, entity_id: int) -> bool:
        """Remove a row unconditionally; False if the id is unknown."""
        entity = self.get_by_id(entity_id)
        if not entity:
            return False

        try:
            self.db.delete(entity)
            self.db.commit()
            return True
        except Exception as e:
            logger.error(f"Error deleting {self.model.__tablename__} {entity_id}: {e}")
            self.db.rollback()
            raise

# ------------------------------ END OF FILE ------------------------------
