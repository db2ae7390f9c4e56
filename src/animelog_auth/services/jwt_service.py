"""JWT token service.

Issues and verifies the bearer tokens that protect the catalog and
list endpoints.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from animelog_auth.exceptions import InvalidTokenError
from animelog_auth.schemas import TokenPayload

ACCESS_TOKEN_TYPE = "access"


class JWTService:
    """Sign and verify HS256 access tokens.

    A token carries the user id as ``sub``, the email, its type and the
    issue and expiry timestamps.

    Examples
    --------
    >>> service = JWTService(secret_key="change-me")
    >>> token = service.create_access_token(user.id, user.email)
    >>> service.verify_token(token).user_id == user.id
    True
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_lifetime = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_lifetime

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Encode a token for ``user_id``.

        ``expires_delta`` overrides the configured lifetime.
        """
        issued_at = datetime.now(tz=timezone.utc)
        claims = {
            "sub": str(user_id),
            "email": email,
            "type": ACCESS_TOKEN_TYPE,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or self._access_lifetime),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Decode ``token`` after checking its signature and expiry.

        Raises
        ------
        InvalidTokenError
            If the token is expired, tampered with, or lacks a claim
        """
        try:
            claims = jwt.decode(token, self._secret_key, algorithms=[self.ALGORITHM])
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            return TokenPayload(
                user_id=UUID(claims["sub"]),
                email=claims["email"],
                exp=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
                token_type=claims.get("type", ACCESS_TOKEN_TYPE),
            )
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
