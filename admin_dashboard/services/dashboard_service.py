"""Dashboard statistics."""
from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import Session

from admin_dashboard.models.division import Division
from admin_dashboard.models.position import Position
from admin_dashboard.models.user import User
from admin_dashboard.schemas.dashboard import DivisionCount, PositionCount, Statistics


class DashboardService:
    def __init__(self, db: Session):
        self.db = db

    def get_statistics(self) -> Statistics:
        """Head counts plus active users grouped by division and position."""
        total_users = self.db.query(func.count(User.id)).scalar()
        active_users = self.db.query(func.count(User.id)).filter(User.is_active == True).scalar()  # noqa: E712
        total_divisions = self.db.query(func.count(Division.id)).scalar()
        total_positions = self.db.query(func.count(Position.id)).scalar()

        per_division = (
            self.db.query(Division.name, func.count(User.id))
            .join(User, User.division_id == Division.id)
            .filter(User.is_active == True)  # noqa: E712
            .group_by(Division.name)
            .order_by(Division.name)
            .all()
        )
        per_position = (
            self.db.query(Position.name, func.count(User.id))
            .join(User, User.position_id == Position.id)
            .filter(User.is_active == True)  # noqa: E712
            .group_by(Position.name)
            .order_by(Position.name)
            .all()
        )

        start_of_month = date.today().replace(day=1)
        new_users_this_month = (
            self.db.query(func.count(User.id)).filter(User.join_date >= start_of_month).scalar()
        )

        return Statistics(
            total_users=total_users,
            active_users=active_users,
            total_divisions=total_divisions,
            total_positions=total_positions,
            users_per_division=[DivisionCount(division=name, count=count) for name, count in per_division],
            users_per_position=[PositionCount(position=name, count=count) for name, count in per_position],
            new_users_this_month=new_users_this_month,
        )
