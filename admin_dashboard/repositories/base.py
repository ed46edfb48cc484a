"""Shared data-access helpers for the reference tables (divisions, positions, roles)."""
import enum
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from admin_dashboard.database import unit_of_work

logger = logging.getLogger(__name__)


class DeleteOutcome(str, enum.Enum):
    """What a referential-guard delete actually did."""
    DELETED = "deleted"
    DEACTIVATED = "deactivated"


@dataclass
class Page:
    items: List[Any]
    total_items: int
    total_pages: int
    current_page: int
    page_size: int


def contains_pattern(search: str) -> str:
    """Substring pattern for ``ilike`` with the wildcards in ``search`` escaped."""
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def paginate(query: Query, page: int, limit: int) -> Page:
    """Apply 1-based offset pagination to a query."""
    total_items = query.count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    total_pages = (total_items + limit - 1) // limit
    return Page(
        items=items,
        total_items=total_items,
        total_pages=total_pages,
        current_page=page,
        page_size=limit,
    )


class ReferenceRepository:
    """CRUD for a table whose rows may be referenced by users.

    Subclasses set ``model``, ``search_columns`` and ``list_all_order`` and
    implement ``count_references``.
    """
    model: Any = None
    search_columns: tuple = ()
    list_all_order: tuple = ()

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, entity_id: int) -> Optional[Any]:
        return self.db.query(self.model).filter(self.model.id == entity_id).first()

    def create(self, entity, created_by: str):
        entity.created_by = created_by
        entity.updated_by = created_by
        with unit_of_work(self.db):
            self.db.add(entity)
        self.db.refresh(entity)
        return entity

    def update(self, entity, updated_by: str):
        entity.updated_by = updated_by
        with unit_of_work(self.db):
            self.db.add(entity)
        self.db.refresh(entity)
        return entity

    def count_references(self, entity_id: int) -> int:
        raise NotImplementedError

    def delete(self, entity) -> DeleteOutcome:
        """Remove the row, or deactivate it if anything still references it."""
        entity_id = entity.id
        with unit_of_work(self.db):
            if self.count_references(entity_id) > 0:
                entity.is_active = False
                outcome = DeleteOutcome.DEACTIVATED
            else:
                self.db.delete(entity)
                outcome = DeleteOutcome.DELETED
        logger.info("%s %s %s", self.model.__name__, entity_id, outcome.value)
        return outcome

    def list(self, page: int, limit: int, search: Optional[str] = None) -> Page:
        query = self.db.query(self.model)
        if search:
            search_term = contains_pattern(search)
            query = query.filter(
                or_(*(column.ilike(search_term, escape="\\") for column in self.search_columns))
            )
        return paginate(query.order_by(self.model.id), page, limit)

    def list_all(self) -> List[Any]:
        """All active rows, unpaginated."""
        return (
            self.db.query(self.model)
            .filter(self.model.is_active == True)  # noqa: E712
            .order_by(*self.list_all_order)
            .all()
        )
