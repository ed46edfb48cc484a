"""Position data access."""
from typing import Optional

from sqlalchemy import func

from admin_dashboard.models.position import Position
from admin_dashboard.models.user import User
from admin_dashboard.repositories.base import ReferenceRepository


class PositionRepository(ReferenceRepository):
    model = Position
    search_columns = (Position.code, Position.name)
    list_all_order = (Position.name,)

    def find_by_code(self, code: str) -> Optional[Position]:
        return self.db.query(Position).filter(Position.code == code).first()

    def count_references(self, entity_id: int) -> int:
        return self.db.query(func.count(User.id)).filter(User.position_id == entity_id).scalar()
