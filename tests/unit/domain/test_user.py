"""Tests for the User aggregate and its value objects."""

from uuid import UUID

import pytest

from animelog.domain.user import (
    Email,
    InvalidEmailError,
    InvalidUserNameError,
    User,
    UserName,
)


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  User@Example.COM ").value == "user@example.com"

    @pytest.mark.parametrize("value", ["", "plainaddress", "a@b", "@example.com"])
    def test_rejects_invalid(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)


class TestUserName:
    def test_strips_whitespace(self):
        assert UserName("  Asuka ").value == "Asuka"

    @pytest.mark.parametrize("value", ["", "A", "   x  ", "n" * 51])
    def test_rejects_out_of_bounds(self, value):
        with pytest.raises(InvalidUserNameError):
            UserName(value)


class TestUser:
    def test_create_assigns_random_uuid(self):
        first = User.create("a@example.com", "Rei")
        second = User.create("b@example.com", "Rei")

        assert isinstance(first.id, UUID)
        assert first.id != second.id

    def test_create_normalizes_email(self):
        user = User.create("Misato@Example.com", "Misato")

        assert user.email == "misato@example.com"
        assert user.name == "Misato"

    def test_equality_is_by_id(self):
        user = User.create("a@example.com", "Rei")
        same = User.reconstitute(
            id=user.id,
            email="other@example.com",
            name="Other",
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        assert user == same
        assert hash(user) == hash(same)
