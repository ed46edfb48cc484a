"""Signed bearer tokens carrying a user's identity and role names."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Tuple

import jwt

from admin_dashboard.exceptions import InternalError, InvalidToken

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")

REQUIRED_CLAIMS = ["user_id", "external_id", "employee_id", "email", "roles", "iat", "nbf", "exp"]


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, as carried inside a token."""
    user_id: int
    external_id: str
    employee_id: str
    email: str
    roles: Tuple[str, ...] = ()

    def has_any_role(self, names: Iterable[str]) -> bool:
        return not set(self.roles).isdisjoint(names)


class TokenCodec:
    """Issues and verifies HMAC-signed JWTs.

    The secret is fixed at construction; instances hold no other state and
    are safe to share between concurrent requests.
    """

    def __init__(self, secret: str, expiry_hours: int, algorithm: str = "HS256"):
        if algorithm not in HMAC_ALGORITHMS:
            raise ValueError(f"Unsupported signing algorithm: {algorithm}")
        self._secret = secret
        self.expiry_hours = expiry_hours
        self.algorithm = algorithm

    def issue(self, identity: Identity) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "user_id": identity.user_id,
            "external_id": identity.external_id,
            "employee_id": identity.employee_id,
            "email": identity.email,
            "roles": list(identity.roles),
            "iat": now,
            "nbf": now,
            "exp": now + timedelta(hours=self.expiry_hours),
        }
        try:
            return jwt.encode(claims, self._secret, algorithm=self.algorithm)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise InternalError() from exc

    def decode(self, token: str) -> Identity:
        """
        Verify a token and return the identity it carries.

        Raises InvalidToken for malformed input, a bad signature, a
        non-HMAC algorithm header, or an expired token.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=list(HMAC_ALGORITHMS),
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.PyJWTError as exc:
            raise InvalidToken(str(exc)) from exc

        roles = claims["roles"]
        if not isinstance(roles, list):
            raise InvalidToken("roles claim must be a list")
        try:
            return Identity(
                user_id=int(claims["user_id"]),
                external_id=str(claims["external_id"]),
                employee_id=str(claims["employee_id"]),
                email=str(claims["email"]),
                roles=tuple(str(role) for role in roles),
            )
        except (TypeError, ValueError) as exc:
            raise InvalidToken("malformed identity claims") from exc
