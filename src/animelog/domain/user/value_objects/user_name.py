"""Display name value object."""

from dataclasses import dataclass

from animelog.domain.user.exceptions import InvalidUserNameError

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 50


@dataclass(frozen=True)
class UserName:
    """A user's display name, stripped and length-checked."""

    value: str

    def __post_init__(self) -> None:
        stripped = (self.value or "").strip()
        if not MIN_NAME_LENGTH <= len(stripped) <= MAX_NAME_LENGTH:
            msg = (
                f"Name must be between {MIN_NAME_LENGTH} and "
                f"{MAX_NAME_LENGTH} characters"
            )
            raise InvalidUserNameError(msg)
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value
