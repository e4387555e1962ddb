"""
Material order store.

Document-style access to the ``material_orders`` table. Expected outcomes
(record missing, database failure) are returned as a ``StoreResult``
instead of being raised, so callers decide how each kind is surfaced.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.core.logging_config import get_logger
from backend.app.db.models.models_v1 import MaterialOrder

log = get_logger(__name__)

T = TypeVar("T")


class StoreErrorKind(str, enum.Enum):
    not_found = "not_found"
    failure = "failure"


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    value: T | None = None
    error: StoreErrorKind | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def found(cls, value: T) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def missing(cls, order_id: str) -> "StoreResult[T]":
        return cls(error=StoreErrorKind.not_found, detail=f"no material order with id {order_id!r}")

    @classmethod
    def failed(cls, exc: Exception) -> "StoreResult[T]":
        return cls(error=StoreErrorKind.failure, detail=f"{type(exc).__name__}: {exc}")


class MaterialOrderStore:
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, exc: SQLAlchemyError) -> StoreResult:
        self.db.rollback()
        return StoreResult.failed(exc)

    def create(self, fields: dict[str, Any]) -> StoreResult[MaterialOrder]:
        try:
            order = MaterialOrder(**fields)
            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)
        except SQLAlchemyError as e:
            return self._fail(e)
        return StoreResult.found(order)

    def find_all(self) -> StoreResult[list[MaterialOrder]]:
        try:
            rows = (
                self.db.execute(select(MaterialOrder).order_by(MaterialOrder.created_at.asc()))
                .scalars()
                .all()
            )
        except SQLAlchemyError as e:
            return self._fail(e)
        return StoreResult.found(list(rows))

    def find_by_id(self, order_id: str) -> StoreResult[MaterialOrder]:
        try:
            order = self.db.get(MaterialOrder, order_id)
        except SQLAlchemyError as e:
            return self._fail(e)
        if not order:
            return StoreResult.missing(order_id)
        return StoreResult.found(order)

    def find_by_id_and_update(self, order_id: str, changes: dict[str, Any]) -> StoreResult[MaterialOrder]:
        """
        Merge ``changes`` into the stored record and return it refreshed.
        Columns absent from ``changes`` keep their stored value.
        """
        try:
            order = self.db.get(MaterialOrder, order_id)
            if not order:
                return StoreResult.missing(order_id)

            for column, value in changes.items():
                setattr(order, column, value)

            self.db.commit()
            self.db.refresh(order)
        except SQLAlchemyError as e:
            return self._fail(e)
        return StoreResult.found(order)

    def find_by_id_and_delete(self, order_id: str) -> StoreResult[str]:
        """Delete the record and return its id; the instance is unusable after commit."""
        try:
            order = self.db.get(MaterialOrder, order_id)
            if not order:
                return StoreResult.missing(order_id)

            self.db.delete(order)
            self.db.commit()
        except SQLAlchemyError as e:
            return self._fail(e)
        return StoreResult.found(order_id)
