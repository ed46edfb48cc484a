"""Tests for the bearer token codec."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from admin_dashboard.exceptions import InvalidToken
from admin_dashboard.tokens import Identity, TokenCodec

SECRET = "codec-test-secret-that-is-long-enough-for-hs256"


@pytest.fixture
def codec() -> TokenCodec:
    return TokenCodec(SECRET, expiry_hours=2)


@pytest.fixture
def identity() -> Identity:
    return Identity(
        user_id=7,
        external_id="5b1f4c52-8d6e-4a57-9f0e-0c4a4b7e2d11",
        employee_id="EMP007",
        email="bond@x.com",
        roles=("admin", "auditor"),
    )


def claims_for(identity: Identity, **overrides) -> dict:
    now = datetime.now(timezone.utc)
    claims = {
        "user_id": identity.user_id,
        "external_id": identity.external_id,
        "employee_id": identity.employee_id,
        "email": identity.email,
        "roles": list(identity.roles),
        "iat": now,
        "nbf": now,
        "exp": now + timedelta(hours=1),
    }
    claims.update(overrides)
    return claims


class TestIssueAndDecode:
    def test_decode_returns_issued_identity(self, codec, identity):
        decoded = codec.decode(codec.issue(identity))

        assert decoded.user_id == identity.user_id
        assert decoded.external_id == identity.external_id
        assert decoded.employee_id == identity.employee_id
        assert decoded.email == identity.email
        assert set(decoded.roles) == set(identity.roles)

    def test_identity_without_roles(self, codec):
        identity = Identity(user_id=1, external_id="uid-1", employee_id="E1", email="e@x.com")

        assert codec.decode(codec.issue(identity)).roles == ()

    def test_token_is_three_part_hs256(self, codec, identity):
        token = codec.issue(identity)

        assert token.count(".") == 2
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_expiry_follows_configured_hours(self, codec, identity):
        payload = jwt.decode(codec.issue(identity), SECRET, algorithms=["HS256"])

        assert payload["exp"] - payload["iat"] == 2 * 3600
        assert payload["nbf"] == payload["iat"]


class TestDecodeFailures:
    def test_expired_token(self, identity):
        expired_codec = TokenCodec(SECRET, expiry_hours=-1)
        token = expired_codec.issue(identity)

        with pytest.raises(InvalidToken):
            TokenCodec(SECRET, expiry_hours=2).decode(token)

    def test_wrong_secret(self, codec, identity):
        other = TokenCodec("a-completely-different-secret-value-123", expiry_hours=2)

        with pytest.raises(InvalidToken):
            codec.decode(other.issue(identity))

    def test_tampered_payload(self, codec, identity):
        header, payload, signature = codec.issue(identity).split(".")
        forged = jwt.encode(claims_for(identity, roles=["superuser"]), "a-guessed-secret-that-is-long-enough-too", algorithm="HS256")
        forged_payload = forged.split(".")[1]

        with pytest.raises(InvalidToken):
            codec.decode(".".join([header, forged_payload, signature]))

    @pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c", "Bearer abc"])
    def test_malformed_token(self, codec, token):
        with pytest.raises(InvalidToken):
            codec.decode(token)

    def test_unsigned_token_rejected(self, codec, identity):
        token = jwt.encode(claims_for(identity), None, algorithm="none")

        with pytest.raises(InvalidToken):
            codec.decode(token)

    def test_missing_claims_rejected(self, codec, identity):
        claims = claims_for(identity)
        del claims["roles"]
        token = jwt.encode(claims, SECRET, algorithm="HS256")

        with pytest.raises(InvalidToken):
            codec.decode(token)

    def test_non_list_roles_rejected(self, codec, identity):
        token = jwt.encode(claims_for(identity, roles="admin"), SECRET, algorithm="HS256")

        with pytest.raises(InvalidToken):
            codec.decode(token)

    def test_other_hmac_algorithm_accepted(self, codec, identity):
        token = jwt.encode(claims_for(identity), SECRET, algorithm="HS512")

        assert codec.decode(token).email == identity.email


def test_non_hmac_algorithm_refused_at_construction():
    with pytest.raises(ValueError):
        TokenCodec(SECRET, expiry_hours=1, algorithm="RS256")


def test_has_any_role():
    identity = Identity(user_id=1, external_id="u", employee_id="E1", email="e@x.com", roles=("hr",))

    assert identity.has_any_role(["admin", "hr"])
    assert not identity.has_any_role(["admin"])
    assert not identity.has_any_role([])
