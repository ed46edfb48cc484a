"""Login and profile lookup."""
import logging

from sqlalchemy.orm import Session

from admin_dashboard.auth import verify_password
from admin_dashboard.exceptions import AccountInactive, InvalidCredentials, NotFound
from admin_dashboard.repositories.role_repository import RoleRepository
from admin_dashboard.repositories.user_repository import UserRepository
from admin_dashboard.schemas.auth import LoginResponse
from admin_dashboard.schemas.user import UserResponse
from admin_dashboard.services.user_service import build_user_response
from admin_dashboard.tokens import Identity, TokenCodec

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session, codec: TokenCodec):
        self.users = UserRepository(db)
        self.roles = RoleRepository(db)
        self.codec = codec

    def authenticate(self, email: str, password: str) -> LoginResponse:
        """
        Check credentials and issue a token.

        Unknown email and wrong password raise the same InvalidCredentials
        error so callers cannot tell which accounts exist.
        """
        user = self.users.find_by_email(email)
        if not user:
            logger.warning("Failed login for unknown email")
            raise InvalidCredentials()

        if not user.is_active:
            logger.warning("Login attempt on inactive account %s", user.employee_id)
            raise AccountInactive()

        if not verify_password(password, user.password):
            logger.warning("Failed login for %s", user.employee_id)
            raise InvalidCredentials()

        role_names = self.roles.get_user_role_names(user.id)
        token = self.codec.issue(
            Identity(
                user_id=user.id,
                external_id=user.uid,
                employee_id=user.employee_id,
                email=user.email,
                roles=tuple(role_names),
            )
        )
        logger.info("User %s logged in", user.employee_id)
        return LoginResponse(token=token, user=build_user_response(user, role_names))

    def get_profile(self, user_id: int) -> UserResponse:
        user = self.users.find_by_id(user_id)
        if not user:
            raise NotFound("User not found")
        return build_user_response(user, self.roles.get_user_role_names(user.id))
