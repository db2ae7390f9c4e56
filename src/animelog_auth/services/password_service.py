"""Password hashing service using bcrypt.

Provides secure password hashing and verification together with the
strength rules enforced at registration.
"""

import re

import bcrypt

from animelog_auth.exceptions import WeakPasswordError

# One lowercase, one uppercase, one digit and one special character;
# only letters, digits and the listed specials are accepted.
PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]+$",
)


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("My$ecure1")
    >>> service.verify("My$ecure1", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    MIN_LENGTH = 8
    MAX_LENGTH = 100

    def __init__(self, rounds: int = 10):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations).
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Returns
        -------
        True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Current requirements:
        - Between 8 and 100 characters
        - At least one lowercase letter, one uppercase letter, one digit
          and one special character out of ``@$!%*?&``

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} characters"
            raise WeakPasswordError(msg)

        if not PASSWORD_PATTERN.match(password):
            msg = (
                "Password must contain at least one uppercase letter, one "
                "lowercase letter, one number, and one special character"
            )
            raise WeakPasswordError(msg)
