"""Data classes shared by the auth services."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded content of a verified JWT."""

    user_id: UUID
    email: str
    exp: datetime
    token_type: str = "access"

    def is_access_token(self) -> bool:
        return self.token_type == "access"
