"""Unit tests for account value objects."""

import pytest
from pydantic import ValidationError

from reef.domain.value import Email, Slug, Username


class TestUsername:
    """Tests for Username."""

    @pytest.mark.parametrize("value", ["alice", "Alice.Smith_2", "a-b", "007"])
    def test_valid(self, value):
        assert Username(value).root == value

    @pytest.mark.parametrize("value", ["", "ab", "-alice", "has space", "x" * 101])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            Username(value)


class TestEmail:
    """Tests for Email."""

    def test_normalized(self):
        """Emails are trimmed and lower-cased."""
        assert Email("  Alice@Example.ORG ").root == "alice@example.org"

    @pytest.mark.parametrize("value", ["", "alice", "a@b@c", "a b@c.d"])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            Email(value)


class TestSlug:
    """Tests for Slug derivation."""

    @pytest.mark.parametrize(
        "username,expected",
        [
            ("alice", "alice"),
            ("Alice.Smith_2", "alice-smith-2"),
            ("a..b", "a-b"),
            ("user-", "user"),
        ],
    )
    def test_from_username(self, username, expected):
        assert Slug.from_username(Username(username)) == Slug(expected)
