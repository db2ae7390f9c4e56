"""Tests for JWTService."""

from datetime import timedelta
from uuid import UUID

import jwt
import pytest

from animelog_auth import InvalidTokenError, JWTService

USER_ID = UUID("12345678-1234-5678-1234-567812345678")
EMAIL = "test@example.com"
SECRET = "test-secret"


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=SECRET)


class TestJWTService:
    def test_empty_secret_is_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    def test_default_lifetime_is_24_hours(self, service):
        assert service.access_token_lifetime == timedelta(hours=24)

    def test_round_trip_preserves_identity(self, service):
        token = service.create_access_token(USER_ID, EMAIL)

        payload = service.verify_token(token)

        assert payload.user_id == USER_ID
        assert payload.email == EMAIL
        assert payload.is_access_token()

    def test_expired_token_is_rejected(self, service):
        token = service.create_access_token(
            USER_ID,
            EMAIL,
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            service.verify_token(token)

    def test_token_signed_with_other_secret_is_rejected(self, service):
        other = JWTService(secret_key="another-secret")
        token = other.create_access_token(USER_ID, EMAIL)

        with pytest.raises(InvalidTokenError):
            service.verify_token(token)

    def test_garbage_is_rejected(self, service):
        with pytest.raises(InvalidTokenError):
            service.verify_token("not.a.token")

    def test_missing_claims_are_rejected(self, service):
        token = jwt.encode({"foo": "bar"}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError, match="Malformed"):
            service.verify_token(token)
