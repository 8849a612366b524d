"""Unit tests for User entity."""

import pytest
from domain.entities import User
from domain.value_objects import Email, UserId, Username

from conftest import CREATED_AT, UPDATED_AT


class TestUserCreation:
    """Test User.create() and User.reconstruct()."""

    def test_create_assigns_id_and_equal_timestamps(self):
        user = User.create(Email.from_value("taro@example.com"), Username.from_value("taro"))
        assert isinstance(user.id, UserId)
        assert user.email.value == "taro@example.com"
        assert user.name.value == "taro"
        assert user.created_at == user.updated_at

    def test_reconstruct_keeps_every_field(self, stored_user, user_id):
        assert stored_user.id == user_id
        assert stored_user.email.value == "Taro@Example.com"
        assert stored_user.name.value == "taro_yamada"
        assert stored_user.created_at == CREATED_AT
        assert stored_user.updated_at == UPDATED_AT


class TestUserChanges:
    """Test change_email / change_name."""

    def test_change_email_returns_new_user(self, stored_user):
        changed = stored_user.change_email(Email.from_value("new@example.com"))
        assert changed.email.value == "new@example.com"
        assert changed.name == stored_user.name
        assert changed.id == stored_user.id
        assert changed.created_at == stored_user.created_at
        assert changed.updated_at >= stored_user.updated_at
        assert stored_user.email.value == "Taro@Example.com"

    def test_change_name_returns_new_user(self, stored_user):
        changed = stored_user.change_name(Username.from_value("hanako"))
        assert changed.name.value == "hanako"
        assert stored_user.name.value == "taro_yamada"

    def test_immutability(self, stored_user):
        with pytest.raises(Exception):  # FrozenInstanceError
            stored_user.name = Username.from_value("hanako")


class TestUserEquality:
    """Test identity-based equality."""

    def test_same_id_is_equal(self, stored_user):
        other = User.reconstruct(
            stored_user.id,
            Email.from_value("other@example.com"),
            Username.from_value("other"),
            CREATED_AT,
            CREATED_AT,
        )
        assert stored_user == other

    def test_different_id_is_not_equal(self, stored_user):
        other = User.reconstruct(
            UserId.generate(),
            stored_user.email,
            stored_user.name,
            stored_user.created_at,
            stored_user.updated_at,
        )
        assert stored_user != other
