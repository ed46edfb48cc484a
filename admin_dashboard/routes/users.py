"""User routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from admin_dashboard.auth import get_current_identity, require_admin
from admin_dashboard.database import get_db
from admin_dashboard.schemas.common import MessageResponse, PaginatedResponse
from admin_dashboard.schemas.user import PasswordUpdate, UserCreate, UserResponse, UserUpdate
from admin_dashboard.services.user_service import UserService
from admin_dashboard.tokens import Identity

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=PaginatedResponse[UserResponse])
def list_users(
    page: int = 1,
    limit: int = 10,
    search: Optional[str] = Query(None, description="Search by name, email or employee ID"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """List users, one page at a time."""
    return UserService(db).list(page, limit, search)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    """Create a user with its roles (admin only)."""
    return UserService(db).create(user_data, identity.employee_id)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    return UserService(db).get(user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    user_update: UserUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    """Update a user (admin only). Fields left out of the body are kept."""
    return UserService(db).update(user_id, user_update, identity.employee_id)


@router.put("/{user_id}/password", response_model=MessageResponse)
def update_user_password(
    user_id: int,
    password_data: PasswordUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    """Reset a user's password (admin only)."""
    UserService(db).update_password(user_id, password_data.password, identity.employee_id)
    return {"message": "Password updated successfully"}


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    """Delete a user and its role assignments (admin only)."""
    UserService(db).delete(user_id)
    return {"message": "User deleted successfully"}
