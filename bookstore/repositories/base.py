"""
Repository Base

Shared data-access operations for one SQLAlchemy model type.

Reads return an entity, None, or a list. Writes return a RepositoryResult
so a caller can tell *why* a mutation failed instead of receiving a bare
False.

Usage:
    repository = BookRepository(db, logger)
    result = repository.create(book)
    if not result.ok:
        ...
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookstore.database import Base

ModelT = TypeVar("ModelT", bound=Base)

# Primary keys are signed 64-bit integers in every supported database
MAX_ID = 2**63 - 1


class FailureReason(StrEnum):
    """Why a repository mutation did not happen."""

    NOT_FOUND = "not_found"
    PERSISTENCE_ERROR = "persistence_error"


@dataclass(frozen=True)
class RepositoryResult(Generic[ModelT]):
    """
    Outcome of a create/update/delete.

    Exactly one of `entity` (on success) or `failure` is set. `message`
    carries the database error text for logging; it is never sent to
    clients.
    """

    entity: ModelT | None = None
    failure: FailureReason | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, entity: ModelT) -> "RepositoryResult[ModelT]":
        return cls(entity=entity)

    @classmethod
    def fail(cls, reason: FailureReason, message: str) -> "RepositoryResult[ModelT]":
        return cls(failure=reason, message=message)


class SQLAlchemyRepository(Generic[ModelT]):
    """
    CRUD over a single model, keyed by its integer primary key.

    Subclasses set `model` and may set `load_options` to eager-load the
    relationships their mapper needs.
    """

    model: ClassVar[type[Base]]
    load_options: ClassVar[tuple[Any, ...]] = ()

    def __init__(self, db: Session, logger: logging.Logger) -> None:
        self.db = db
        self.logger = logger

    @property
    def name(self) -> str:
        return self.model.__name__

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def find_all(self) -> Sequence[ModelT]:
        stmt = select(self.model).options(*self.load_options).order_by(self.model.id)
        return self.db.execute(stmt).scalars().all()

    def find_by_id(self, entity_id: int) -> ModelT | None:
        if not 1 <= entity_id <= MAX_ID:
            return None
        stmt = (
            select(self.model)
            .options(*self.load_options)
            .where(self.model.id == entity_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def exists(self, entity_id: int) -> bool:
        """Check that a row with this id is present without loading it."""
        if not 1 <= entity_id <= MAX_ID:
            return False
        stmt = select(exists().where(self.model.id == entity_id))
        return bool(self.db.execute(stmt).scalar())

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def create(self, entity: ModelT) -> RepositoryResult[ModelT]:
        self.db.add(entity)
        return self._commit(entity, "create")

    def update(self, entity: ModelT) -> RepositoryResult[ModelT]:
        """
        Replace the stored row with `entity` (a detached instance carrying
        the target id and every column value).
        """
        if entity.id is None or not self.exists(entity.id):
            return RepositoryResult.fail(
                FailureReason.NOT_FOUND,
                f"{self.name} with id {entity.id} does not exist",
            )
        merged = self.db.merge(entity)
        return self._commit(merged, "update")

    def delete(self, entity: ModelT) -> RepositoryResult[ModelT]:
        self.db.delete(entity)
        return self._commit(entity, "delete", refresh=False)

    def _commit(
        self,
        entity: ModelT,
        operation: str,
        refresh: bool = True,
    ) -> RepositoryResult[ModelT]:
        try:
            self.db.commit()
            if refresh:
                self.db.refresh(entity)
        except SQLAlchemyError as exc:
            self.db.rollback()
            self.logger.error(f"{self.name} {operation} failed: {exc}")
            return RepositoryResult.fail(FailureReason.PERSISTENCE_ERROR, str(exc))
        return RepositoryResult.success(entity)
