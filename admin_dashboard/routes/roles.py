"""Role routes."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from admin_dashboard.auth import get_current_identity, require_admin
from admin_dashboard.database import get_db
from admin_dashboard.schemas.common import MessageResponse, PaginatedResponse
from admin_dashboard.schemas.role import RoleRequest, RoleResponse
from admin_dashboard.services.reference_data import RoleService
from admin_dashboard.tokens import Identity

router = APIRouter(prefix="/roles", tags=["Roles"])


@router.get("", response_model=PaginatedResponse[RoleResponse])
def list_roles(
    page: int = 1,
    limit: int = 10,
    search: Optional[str] = Query(None, description="Search by name"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    return RoleService(db).list(page, limit, search)


@router.get("/all", response_model=List[RoleResponse])
def list_all_roles(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """List active roles, most senior first."""
    return RoleService(db).list_all()


@router.post("", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
def create_role(
    role_data: RoleRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    return RoleService(db).create(role_data, identity.employee_id)


@router.get("/{role_id}", response_model=RoleResponse)
def get_role(
    role_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    return RoleService(db).get(role_id)


@router.put("/{role_id}", response_model=RoleResponse)
def update_role(
    role_id: int,
    role_data: RoleRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    return RoleService(db).update(role_id, role_data, identity.employee_id)


@router.delete("/{role_id}", response_model=MessageResponse)
def delete_role(
    role_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    """Delete a role (admin only). Roles still assigned to users are deactivated instead."""
    RoleService(db).delete(role_id)
    return {"message": "Role deleted successfully"}
