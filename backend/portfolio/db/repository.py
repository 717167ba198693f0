"""
Generic repository helpers.

Thin wrappers over the ORM session used by every service: lookup by
surrogate id, lookup by a unique business code, save, delete and paging.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Optional, TypeVar

from sqlalchemy.orm import Query, Session

from portfolio.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


@dataclass
class Page:
    """One slice of a query result. `index` is 0-based."""

    items: list[Any]
    total: int
    index: int
    size: int
    total_pages: int = field(init=False)

    def __post_init__(self) -> None:
        self.total_pages = math.ceil(self.total / self.size) if self.size else 0


def find_by_id(db: Session, model: type[ModelT], entity_id: int) -> Optional[ModelT]:
    return db.get(model, entity_id)


def find_one_by(db: Session, model: type[ModelT], **criteria: Any) -> Optional[ModelT]:
    """Return the single row matching the given column values, if any."""
    return db.query(model).filter_by(**criteria).first()


def save(db: Session, entity: ModelT) -> ModelT:
    """Stage the entity and flush so generated keys are available."""
    db.add(entity)
    db.flush()
    return entity


def delete(db: Session, entity: Base) -> None:
    db.delete(entity)
    db.flush()


def paginate(query: Query, index: int, size: int) -> Page:
    """Apply offset/limit to an ordered query and count the full result."""
    total = query.order_by(None).count()
    items = query.offset(index * size).limit(size).all()
    return Page(items=items, total=total, index=index, size=size)
