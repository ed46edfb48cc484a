"""Division and position schemas.

Both entities share the same shape: a unique code and a display name.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class CodedRequest(BaseModel):
    """Schema for creating or updating a division or position."""
    code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=100)


class CodedResponse(CodedRequest):
    id: int
    is_active: bool
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None

    class Config:
        from_attributes = True


DivisionRequest = CodedRequest
DivisionResponse = CodedResponse
PositionRequest = CodedRequest
PositionResponse = CodedResponse
