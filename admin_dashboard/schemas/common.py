"""Shared response schemas."""
from typing import Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of a list endpoint."""
    total_items: int
    total_pages: int
    current_page: int
    page_size: int
    items: List[T]


class MessageResponse(BaseModel):
    message: str
