"""User schemas for request/response validation."""
from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

# bcrypt only hashes the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class UserCreate(BaseModel):
    """Schema for creating a user.

    Dates are plain ``YYYY-MM-DD`` strings; the user service parses them.
    """
    employee_id: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)
    phone: Optional[str] = None
    address: Optional[str] = None
    birthdate: Optional[str] = None
    join_date: str
    profile_image: Optional[str] = None
    division_id: Optional[int] = None
    position_id: Optional[int] = None
    is_manager: bool = False
    manager_id: Optional[int] = None
    role_ids: List[int] = []

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        return check_password_bytes(v)


class UserUpdate(BaseModel):
    """Schema for updating a user.

    Only fields present in the request body are applied. ``role_ids``
    omitted (or null) keeps the current roles; an empty list removes them.
    """
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    birthdate: Optional[str] = None
    join_date: Optional[str] = None
    profile_image: Optional[str] = None
    division_id: Optional[int] = None
    position_id: Optional[int] = None
    is_manager: Optional[bool] = None
    manager_id: Optional[int] = None
    is_active: Optional[bool] = None
    role_ids: Optional[List[int]] = None


class UserResponse(BaseModel):
    """Sanitized user profile; never carries the password hash."""
    id: int
    uid: str
    employee_id: str
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    birthdate: Optional[str] = None
    join_date: str
    profile_image: Optional[str] = None
    division: Optional[str] = None
    position: Optional[str] = None
    is_manager: bool
    manager: Optional[str] = None
    is_active: bool
    roles: List[str] = []


class PasswordUpdate(BaseModel):
    """Schema for resetting a user's password."""
    password: str = Field(min_length=6, max_length=72)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        return check_password_bytes(v)
