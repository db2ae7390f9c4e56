"""Persistence implementations for animelog_auth.

Currently only SQLAlchemy is provided:

    from animelog_auth.persistence.sqlalchemy import (
        AuthBase,
        UserCredentialModel,
        UserCredentialRepositorySQLAlchemy,
    )
"""
