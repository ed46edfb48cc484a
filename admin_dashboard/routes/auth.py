"""Authentication routes."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from admin_dashboard.auth import get_current_identity, get_token_codec
from admin_dashboard.database import get_db
from admin_dashboard.schemas.auth import LoginRequest, LoginResponse
from admin_dashboard.schemas.user import UserResponse
from admin_dashboard.services.auth_service import AuthService
from admin_dashboard.tokens import Identity, TokenCodec

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    codec: TokenCodec = Depends(get_token_codec),
):
    """Exchange email and password for a bearer token."""
    return AuthService(db, codec).authenticate(credentials.email, credentials.password)


@router.get("/profile", response_model=UserResponse)
def profile(
    db: Session = Depends(get_db),
    codec: TokenCodec = Depends(get_token_codec),
    identity: Identity = Depends(get_current_identity),
):
    """Get the profile of the authenticated user."""
    return AuthService(db, codec).get_profile(identity.user_id)
