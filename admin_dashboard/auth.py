"""Password hashing, bearer-token guard and role gates."""
import logging
from functools import lru_cache
from typing import Optional

import bcrypt
from fastapi import Depends, Header, Request

from admin_dashboard.config import settings
from admin_dashboard.exceptions import Forbidden, InvalidToken, Unauthenticated
from admin_dashboard.tokens import Identity, TokenCodec

logger = logging.getLogger(__name__)


def get_password_hash(password: str) -> str:
    """Hash a plaintext password with a fresh salt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


@lru_cache
def get_token_codec() -> TokenCodec:
    """Build the process-wide token codec from settings."""
    return TokenCodec(settings.JWT_SECRET, settings.JWT_EXPIRY, settings.JWT_ALGORITHM)


async def get_current_identity(
    request: Request,
    authorization: Optional[str] = Header(None),
    codec: TokenCodec = Depends(get_token_codec),
) -> Identity:
    """Require a valid ``Authorization: Bearer <token>`` header.

    The decoded identity is stored on ``request.state.identity`` for the
    role gates and handlers further down the chain.
    """
    if not authorization:
        raise Unauthenticated("Authorization header is required")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise Unauthenticated("Authorization header format must be Bearer {token}")

    try:
        identity = codec.decode(parts[1])
    except InvalidToken as exc:
        logger.info("Rejected bearer token: %s", exc.message)
        raise Unauthenticated("Invalid or expired token")

    request.state.identity = identity
    return identity


def require_role(*role_names: str):
    """Dependency factory: the caller needs at least one of the given roles."""
    allowed = frozenset(role_names)

    async def role_checker(
        request: Request,
        authenticated: Identity = Depends(get_current_identity),
    ) -> Identity:
        identity = getattr(request.state, "identity", None)
        if identity is None:
            raise Unauthenticated("Authorization header is required")
        if not identity.has_any_role(allowed):
            logger.info("User %s lacks any of roles %s", identity.employee_id, sorted(allowed))
            raise Forbidden()
        return identity

    return role_checker


require_admin = require_role(*settings.ADMIN_ROLES)
