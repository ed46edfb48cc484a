"""Role data access."""
from typing import List, Optional

from sqlalchemy import func

from admin_dashboard.models.role import Role
from admin_dashboard.models.user import UserRole
from admin_dashboard.repositories.base import ReferenceRepository


class RoleRepository(ReferenceRepository):
    model = Role
    search_columns = (Role.name,)
    list_all_order = (Role.level.desc(), Role.name)

    def find_by_name(self, name: str) -> Optional[Role]:
        return self.db.query(Role).filter(Role.name == name).first()

    def count_references(self, entity_id: int) -> int:
        return self.db.query(func.count(UserRole.id)).filter(UserRole.role_id == entity_id).scalar()

    def get_user_role_names(self, user_id: int) -> List[str]:
        """Names of every role currently assigned to a user."""
        rows = (
            self.db.query(Role.name)
            .join(UserRole, UserRole.role_id == Role.id)
            .filter(UserRole.user_id == user_id)
            .order_by(Role.name)
            .all()
        )
        return [name for (name,) in rows]
