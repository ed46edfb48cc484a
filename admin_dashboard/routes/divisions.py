"""Division routes."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from admin_dashboard.auth import get_current_identity, require_admin
from admin_dashboard.database import get_db
from admin_dashboard.schemas.common import MessageResponse, PaginatedResponse
from admin_dashboard.schemas.division import DivisionRequest, DivisionResponse
from admin_dashboard.services.reference_data import DivisionService
from admin_dashboard.tokens import Identity

router = APIRouter(prefix="/divisions", tags=["Divisions"])


@router.get("", response_model=PaginatedResponse[DivisionResponse])
def list_divisions(
    page: int = 1,
    limit: int = 10,
    search: Optional[str] = Query(None, description="Search by code or name"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    return DivisionService(db).list(page, limit, search)


@router.get("/all", response_model=List[DivisionResponse])
def list_all_divisions(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """List active divisions without pagination."""
    return DivisionService(db).list_all()


@router.post("", response_model=DivisionResponse, status_code=status.HTTP_201_CREATED)
def create_division(
    division_data: DivisionRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    return DivisionService(db).create(division_data, identity.employee_id)


@router.get("/{division_id}", response_model=DivisionResponse)
def get_division(
    division_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    return DivisionService(db).get(division_id)


@router.put("/{division_id}", response_model=DivisionResponse)
def update_division(
    division_id: int,
    division_data: DivisionRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    return DivisionService(db).update(division_id, division_data, identity.employee_id)


@router.delete("/{division_id}", response_model=MessageResponse)
def delete_division(
    division_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    """Delete a division (admin only). Divisions that still have users are deactivated instead."""
    DivisionService(db).delete(division_id)
    return {"message": "Division deleted successfully"}
