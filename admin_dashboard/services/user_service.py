"""User lifecycle: create, partial update, password reset, delete."""
import logging
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from admin_dashboard.auth import get_password_hash
from admin_dashboard.exceptions import DuplicateField, InvalidFormat, NotFound
from admin_dashboard.models.user import User
from admin_dashboard.repositories.role_repository import RoleRepository
from admin_dashboard.repositories.user_repository import UserRepository
from admin_dashboard.schemas.common import PaginatedResponse
from admin_dashboard.schemas.user import UserCreate, UserResponse, UserUpdate
from admin_dashboard.services.reference_data import normalize_paging

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"

# Columns that may be set to null through an update
NULLABLE_FIELDS = {"phone", "address", "profile_image", "division_id", "position_id", "manager_id"}


def parse_date(value: str, field_label: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, raising InvalidFormat otherwise."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise InvalidFormat(f"invalid {field_label} format, use YYYY-MM-DD")


def format_date(value: Optional[date]) -> Optional[str]:
    return value.strftime(DATE_FORMAT) if value else None


def build_user_response(user: User, role_names: List[str]) -> UserResponse:
    """Project a user row onto the public profile shape."""
    return UserResponse(
        id=user.id,
        uid=user.uid,
        employee_id=user.employee_id,
        name=user.name,
        email=user.email,
        phone=user.phone,
        address=user.address,
        birthdate=format_date(user.birthdate),
        join_date=format_date(user.join_date),
        profile_image=user.profile_image,
        division=user.division.name if user.division else None,
        position=user.position.name if user.position else None,
        is_manager=user.is_manager,
        manager=user.manager.name if user.manager else None,
        is_active=user.is_active,
        roles=role_names,
    )


class UserService:
    """Orchestrates user writes over the user and role repositories."""

    def __init__(self, db: Session):
        self.users = UserRepository(db)
        self.roles = RoleRepository(db)

    def _get_user(self, user_id: int) -> User:
        user = self.users.find_by_id(user_id)
        if not user:
            raise NotFound("User not found")
        return user

    def to_response(self, user: User) -> UserResponse:
        return build_user_response(user, self.roles.get_user_role_names(user.id))

    def get(self, user_id: int) -> UserResponse:
        return self.to_response(self._get_user(user_id))

    def create(self, request: UserCreate, created_by: str) -> UserResponse:
        if self.users.find_by_employee_id(request.employee_id):
            raise DuplicateField("employee ID already exists")
        if self.users.find_by_email(request.email):
            raise DuplicateField("email already exists")

        birthdate = parse_date(request.birthdate, "birthdate") if request.birthdate else None
        join_date = parse_date(request.join_date, "join date")

        user = User(
            employee_id=request.employee_id,
            name=request.name,
            email=request.email,
            password=get_password_hash(request.password),
            phone=request.phone,
            address=request.address,
            birthdate=birthdate,
            join_date=join_date,
            profile_image=request.profile_image,
            division_id=request.division_id,
            position_id=request.position_id,
            is_manager=request.is_manager,
            manager_id=request.manager_id,
            is_active=True,
        )
        user = self.users.create(user, request.role_ids, created_by)
        logger.info("User %s created by %s", user.employee_id, created_by)
        return self.to_response(user)

    def update(self, user_id: int, request: UserUpdate, updated_by: str) -> UserResponse:
        """Apply only the fields present in the request."""
        user = self._get_user(user_id)
        changes = request.model_dump(exclude_unset=True)
        role_ids = changes.pop("role_ids", None)

        email = changes.pop("email", None)
        if email and email != user.email:
            existing = self.users.find_by_email(email)
            if existing and existing.id != user.id:
                raise DuplicateField("email already exists")
            user.email = email

        if "birthdate" in changes:
            birthdate = changes.pop("birthdate")
            user.birthdate = parse_date(birthdate, "birthdate") if birthdate else None

        join_date = changes.pop("join_date", None)
        if join_date:
            user.join_date = parse_date(join_date, "join date")

        if changes.get("manager_id") is not None and changes["manager_id"] == user.id:
            raise InvalidFormat("a user cannot be their own manager")

        for field, value in changes.items():
            if value is None and field not in NULLABLE_FIELDS:
                continue
            setattr(user, field, value)

        user = self.users.update(user, role_ids, updated_by)
        logger.info("User %s updated by %s", user.employee_id, updated_by)
        return self.to_response(user)

    def update_password(self, user_id: int, password: str, updated_by: str) -> None:
        user = self._get_user(user_id)
        self.users.update_password(user, get_password_hash(password), updated_by)
        logger.info("Password reset for user %s by %s", user_id, updated_by)

    def delete(self, user_id: int) -> None:
        user = self._get_user(user_id)
        self.users.delete(user)

    def list(self, page: int, limit: int, search: Optional[str] = None) -> PaginatedResponse:
        page, limit = normalize_paging(page, limit)
        result = self.users.list(page, limit, search)
        return PaginatedResponse[UserResponse](
            total_items=result.total_items,
            total_pages=result.total_pages,
            current_page=result.current_page,
            page_size=result.page_size,
            items=[build_user_response(user, [role.name for role in user.roles]) for user in result.items],
        )
