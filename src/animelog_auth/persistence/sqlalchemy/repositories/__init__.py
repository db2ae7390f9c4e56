from animelog_auth.persistence.sqlalchemy.repositories.user_credential_repository import (  # NOQA: E501
    UserCredentialRepositorySQLAlchemy,
)

__all__ = ["UserCredentialRepositorySQLAlchemy"]
