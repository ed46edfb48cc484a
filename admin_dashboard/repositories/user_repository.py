"""User data access, including the user-role join table."""
import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from admin_dashboard.database import unit_of_work
from admin_dashboard.exceptions import DuplicateField
from admin_dashboard.models.user import User, UserRole
from admin_dashboard.repositories.base import Page, contains_pattern, paginate

logger = logging.getLogger(__name__)


def duplicate_field_message(exc: IntegrityError) -> Optional[str]:
    """Name the unique user column an IntegrityError tripped over, if any."""
    detail = str(exc.orig)
    if "employee_id" in detail:
        return "employee ID already exists"
    if "email" in detail:
        return "email already exists"
    return None


class UserRepository:
    """Persistence for users and their role assignments.

    Every write that touches more than one row runs inside a single unit of
    work so a failure leaves no partial user or role set behind.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_employee_id(self, employee_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.employee_id == employee_id).first()

    def _add_roles(self, user_id: int, role_ids: List[int], created_by: str) -> None:
        # dict.fromkeys drops duplicate ids while keeping request order
        for role_id in dict.fromkeys(role_ids):
            self.db.add(UserRole(user_id=user_id, role_id=role_id, created_by=created_by))

    def create(self, user: User, role_ids: List[int], created_by: str) -> User:
        """Insert the user and its role assignments atomically."""
        user.created_by = created_by
        user.updated_by = created_by
        try:
            with unit_of_work(self.db):
                self.db.add(user)
                self.db.flush()
                self._add_roles(user.id, role_ids, created_by)
        except IntegrityError as exc:
            message = duplicate_field_message(exc)
            if message is None:
                raise
            raise DuplicateField(message) from exc
        self.db.refresh(user)
        return user

    def update(self, user: User, role_ids: Optional[List[int]], updated_by: str) -> User:
        """Persist changed fields; replace the role set when ``role_ids`` is given.

        ``None`` leaves the current roles alone, an empty list clears them.
        """
        user.updated_by = updated_by
        try:
            with unit_of_work(self.db):
                self.db.add(user)
                self.db.flush()
                if role_ids is not None:
                    self.db.query(UserRole).filter(UserRole.user_id == user.id).delete(
                        synchronize_session=False
                    )
                    self._add_roles(user.id, role_ids, updated_by)
        except IntegrityError as exc:
            message = duplicate_field_message(exc)
            if message is None:
                raise
            raise DuplicateField(message) from exc
        self.db.refresh(user)
        return user

    def update_password(self, user: User, hashed_password: str, updated_by: str) -> None:
        user.password = hashed_password
        user.updated_by = updated_by
        with unit_of_work(self.db):
            self.db.add(user)

    def delete(self, user: User) -> None:
        """Hard-delete a user with its role assignments.

        Subordinates are detached from the deleted manager, never removed.
        """
        user_id = user.id
        with unit_of_work(self.db):
            self.db.query(UserRole).filter(UserRole.user_id == user_id).delete(
                synchronize_session=False
            )
            self.db.query(User).filter(User.manager_id == user_id).update(
                {User.manager_id: None}, synchronize_session=False
            )
            self.db.delete(user)
        logger.info("User %s deleted", user_id)

    def list(self, page: int, limit: int, search: Optional[str] = None) -> Page:
        query = self.db.query(User)
        if search:
            search_term = contains_pattern(search)
            query = query.filter(
                or_(
                    User.name.ilike(search_term, escape="\\"),
                    User.email.ilike(search_term, escape="\\"),
                    User.employee_id.ilike(search_term, escape="\\"),
                )
            )
        return paginate(query.order_by(User.id), page, limit)
