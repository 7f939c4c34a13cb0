"""
Repository interface and its SQLModel implementation.

:class:`Repository` is the capability every entity repository offers to
the service layer.  :class:`SQLModelRepository` implements it on top of
a SQLModel session; entity repositories subclass it and set ``model``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import delete as sa_delete
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import Session, SQLModel, select

from app.core.exceptions import PersistenceConflict
from app.db.types import utcnow

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


class Repository(ABC, Generic[ModelT]):
    """Data-access contract shared by all entity repositories."""

    @abstractmethod
    def get_all(self) -> list[ModelT]:
        """Return every stored record, oldest first."""
        ...

    @abstractmethod
    def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        """Return the record with ``entity_id`` or ``None``."""
        ...

    @abstractmethod
    def create(self, attributes: dict[str, Any]) -> ModelT:
        """Persist a new record built from validated ``attributes``.

        Raises:
            PersistenceConflict: a storage constraint rejected the insert
        """
        ...

    @abstractmethod
    def update(self, entity: ModelT, attributes: dict[str, Any]) -> bool:
        """Apply a partial set of ``attributes`` to ``entity`` and persist it.

        Returns ``False`` if the record no longer exists.

        Raises:
            PersistenceConflict: a storage constraint rejected the update
        """
        ...

    @abstractmethod
    def delete(self, entity: ModelT) -> bool:
        """Permanently remove ``entity``.  ``False`` if it was already gone."""
        ...


class SQLModelRepository(Repository[ModelT]):
    """Repository backed by a SQLModel session."""

    model: type[ModelT]

    # Columns whose constraints can fail on write; used to attribute an
    # IntegrityError to a field.
    conflict_fields: tuple[str, ...] = ()

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> list[ModelT]:
        statement = select(self.model).order_by(self.model.id)
        return list(self.session.exec(statement).all())

    def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.session.get(self.model, entity_id)

    def create(self, attributes: dict[str, Any]) -> ModelT:
        entity = self.model(**attributes)
        self.session.add(entity)
        self._commit()
        self.session.refresh(entity)
        return entity

    def update(self, entity: ModelT, attributes: dict[str, Any]) -> bool:
        if not inspect(entity).persistent:
            return False

        for key, value in attributes.items():
            setattr(entity, key, value)
        entity.updated_at = utcnow()
        self.session.add(entity)

        try:
            self._commit()
        except StaleDataError:
            self.session.rollback()
            logger.warning("%s %s vanished before update", self.model.__name__, entity.id)
            return False

        self.session.refresh(entity)
        return True

    def delete(self, entity: ModelT) -> bool:
        if not inspect(entity).persistent:
            return False

        entity_id = entity.id
        self._detach_dependents(entity)

        # Issued directly so a row removed by another transaction shows up
        # as a zero rowcount instead of passing silently
        statement = sa_delete(self.model).where(self.model.id == entity_id)
        result = self.session.connection().execute(statement)
        if result.rowcount != 1:
            self.session.rollback()
            logger.warning("%s %s vanished before delete", self.model.__name__, entity_id)
            return False

        self.session.expunge(entity)
        self._commit()
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _detach_dependents(self, entity: ModelT) -> None:
        """Hook run in the delete transaction before ``entity`` is removed."""

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            field = self._conflict_field(exc)
            logger.warning("Integrity violation on %s (field=%s): %s", self.model.__tablename__, field, exc.orig)
            raise PersistenceConflict(str(exc.orig), field=field) from exc

    def _conflict_field(self, exc: IntegrityError) -> Optional[str]:
        message = str(exc.orig).lower()
        for field in self.conflict_fields:
            if field in message:
                return field
        return None
