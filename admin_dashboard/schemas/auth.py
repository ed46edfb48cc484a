"""Login request and response schemas."""
from pydantic import BaseModel, EmailStr, Field

from admin_dashboard.schemas.user import UserResponse


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)


class LoginResponse(BaseModel):
    """Bearer token plus the profile of the user it was issued to."""
    token: str
    user: UserResponse
