"""Division data access."""
from typing import Optional

from sqlalchemy import func

from admin_dashboard.models.division import Division
from admin_dashboard.models.user import User
from admin_dashboard.repositories.base import ReferenceRepository


class DivisionRepository(ReferenceRepository):
    model = Division
    search_columns = (Division.code, Division.name)
    list_all_order = (Division.name,)

    def find_by_code(self, code: str) -> Optional[Division]:
        return self.db.query(Division).filter(Division.code == code).first()

    def count_references(self, entity_id: int) -> int:
        return self.db.query(func.count(User.id)).filter(User.division_id == entity_id).scalar()
