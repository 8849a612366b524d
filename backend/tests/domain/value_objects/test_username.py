"""Unit tests for Username value object."""

import pytest
from domain.exceptions import ValidationError
from domain.value_objects import Username


class TestUsernameValidation:
    """Test Username validation logic."""

    @pytest.mark.parametrize("raw", ["abc", "taro_yamada", "user-123", "A" * 50])
    def test_valid_username_keeps_value(self, raw):
        assert Username.from_value(raw).value == raw

    def test_empty_username_raises_error(self):
        with pytest.raises(ValidationError, match="Username cannot be empty"):
            Username.from_value("")

    @pytest.mark.parametrize("raw", [" username", "username ", " username "])
    def test_padded_username_raises_error(self, raw):
        with pytest.raises(
            ValidationError, match="Username cannot have leading or trailing spaces"
        ):
            Username.from_value(raw)

    @pytest.mark.parametrize("raw", ["a", "ab"])
    def test_too_short_username_raises_error(self, raw):
        with pytest.raises(ValidationError, match="Username must be at least 3 characters"):
            Username.from_value(raw)

    def test_too_long_username_raises_error(self):
        with pytest.raises(ValidationError, match="Username must be at most 50 characters"):
            Username.from_value("a" * 51)

    @pytest.mark.parametrize("raw", ["user name", "user@name", "user.name", "ユーザー名", "user!"])
    def test_disallowed_characters_raise_error(self, raw):
        with pytest.raises(
            ValidationError,
            match="Username can only contain alphanumeric characters, underscores, and hyphens",
        ):
            Username.from_value(raw)


class TestUsernameEquality:
    """Test Username equality."""

    def test_same_username_is_equal(self):
        assert Username.from_value("taro") == Username.from_value("taro")

    def test_comparison_is_case_sensitive(self):
        assert Username.from_value("Taro") != Username.from_value("taro")
