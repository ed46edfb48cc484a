"""Dashboard statistics schemas."""
from typing import List
from pydantic import BaseModel


class DivisionCount(BaseModel):
    division: str
    count: int


class PositionCount(BaseModel):
    position: str
    count: int


class Statistics(BaseModel):
    """Aggregate counts shown on the dashboard."""
    total_users: int
    active_users: int
    total_divisions: int
    total_positions: int
    users_per_division: List[DivisionCount] = []
    users_per_position: List[PositionCount] = []
    new_users_this_month: int
