"""Policy-enforcing gateway in front of the SQLAlchemy session."""
from __future__ import annotations

import logging
import uuid
from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from schoolboard.core.errors import (
    AuthorizationFailure,
    IntegrityFailure,
    IntegrityKind,
    NotFound,
)
from schoolboard.services.policy import Action, Caller, authorize, is_allowed

__all__ = ["Store", "classify_integrity_error"]

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


def classify_integrity_error(error: IntegrityError) -> IntegrityKind:
    """Map a driver error message onto a constraint category.

    Handles both SQLite ("UNIQUE constraint failed") and PostgreSQL
    ("duplicate key value violates unique constraint") wording.
    """
    message = str(error.orig).lower()
    if "unique" in message or "duplicate" in message:
        return "unique"
    if "foreign key" in message:
        return "foreign_key"
    if "not null" in message or "not-null" in message:
        return "not_null"
    if "check" in message:
        return "check"
    return "unknown"


class Store:
    """Thin wrapper that authorizes every row operation before touching the session.

    Writes are flushed immediately so constraint violations surface as
    :class:`IntegrityFailure` at the call site; committing stays with the
    caller of the service.
    """

    def __init__(self, db: Session, caller: Caller) -> None:
        self.db = db
        self.caller = caller

    def query(self, model: type[ModelT]) -> Query[ModelT]:
        """Return a query over rows the caller may read."""
        if not is_allowed(self.caller, Action.SELECT, model, {}):
            raise AuthorizationFailure()
        return self.db.query(model)

    def get(self, model: type[ModelT], row_id: uuid.UUID, *, label: str | None = None) -> ModelT:
        """Return a row by primary key or raise :class:`NotFound`."""
        row = self.query(model).filter(model.id == row_id).first()  # type: ignore[attr-defined]
        if row is None:
            name = label or model.__name__
            raise NotFound(f"{name} not found")
        return row

    def insert(self, row: ModelT) -> ModelT:
        authorize(self.caller, Action.INSERT, row)
        self.db.add(row)
        self._flush()
        return row

    def update(self, row: ModelT, changes: dict[str, Any]) -> ModelT:
        authorize(self.caller, Action.UPDATE, row, changes)
        for key, value in changes.items():
            setattr(row, key, value)
        self._flush()
        return row

    def delete(self, row: Any) -> None:
        authorize(self.caller, Action.DELETE, row)
        self.db.delete(row)
        self._flush()

    def commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as err:
            self._rollback_and_raise(err)

    def _flush(self) -> None:
        try:
            self.db.flush()
        except IntegrityError as err:
            self._rollback_and_raise(err)

    def _rollback_and_raise(self, err: IntegrityError) -> None:
        self.db.rollback()
        kind = classify_integrity_error(err)
        logger.warning("Integrity check rejected a write (%s): %s", kind, err.orig)
        raise IntegrityFailure(kind=kind) from err
