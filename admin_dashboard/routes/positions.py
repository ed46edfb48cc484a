"""Position routes."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from admin_dashboard.auth import get_current_identity, require_admin
from admin_dashboard.database import get_db
from admin_dashboard.schemas.common import MessageResponse, PaginatedResponse
from admin_dashboard.schemas.division import PositionRequest, PositionResponse
from admin_dashboard.services.reference_data import PositionService
from admin_dashboard.tokens import Identity

router = APIRouter(prefix="/positions", tags=["Positions"])


@router.get("", response_model=PaginatedResponse[PositionResponse])
def list_positions(
    page: int = 1,
    limit: int = 10,
    search: Optional[str] = Query(None, description="Search by code or name"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    return PositionService(db).list(page, limit, search)


@router.get("/all", response_model=List[PositionResponse])
def list_all_positions(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """List active positions without pagination."""
    return PositionService(db).list_all()


@router.post("", response_model=PositionResponse, status_code=status.HTTP_201_CREATED)
def create_position(
    position_data: PositionRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    return PositionService(db).create(position_data, identity.employee_id)


@router.get("/{position_id}", response_model=PositionResponse)
def get_position(
    position_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    return PositionService(db).get(position_id)


@router.put("/{position_id}", response_model=PositionResponse)
def update_position(
    position_id: int,
    position_data: PositionRequest,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    return PositionService(db).update(position_id, position_data, identity.employee_id)


@router.delete("/{position_id}", response_model=MessageResponse)
def delete_position(
    position_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
):
    """Delete a position (admin only). Positions that still have users are deactivated instead."""
    PositionService(db).delete(position_id)
    return {"message": "Position deleted successfully"}
