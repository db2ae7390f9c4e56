from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from animelog.domain.shared.time import utc_now
from animelog.domain.user.value_objects import Email, UserName


class User:
    """
    User aggregate root.

    Each user is uniquely identified by a random UUID generated at
    creation time. The email is the login identifier.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        name: Union[str, UserName],
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._name = name if isinstance(name, UserName) else UserName(name)
        self._id = id if id is not None else uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def name(self) -> str:
        return self._name.value

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(cls, email: Union[str, Email], name: Union[str, UserName]) -> "User":
        return cls(email=email, name=name)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: Union[str, Email],
        name: Union[str, UserName],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
