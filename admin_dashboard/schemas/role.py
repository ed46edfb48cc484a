"""Role schemas for request/response validation."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class RoleRequest(BaseModel):
    """Schema for creating or updating a role."""
    name: str = Field(min_length=1, max_length=50)
    level: int


class RoleResponse(RoleRequest):
    """Schema for role response."""
    id: int
    is_active: bool
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None

    class Config:
        from_attributes = True
