"""Unit tests for registration input validation."""

import pytest

from threadit.application.dtos import FieldError
from threadit.application.validation import validate_password, validate_register


class TestValidateRegister:
    def test_valid_input_passes(self):
        assert validate_register("alice", "alice@example.com", "secret123") is None

    @pytest.mark.parametrize(
        ("username", "email", "password", "expected"),
        [
            ("ab", "a@x.com", "secret", FieldError("username", "Username must be greater than 2")),
            ("a@b", "a@x.com", "secret", FieldError("username", 'Username cannot have "@" sign')),
            ("alice", "alice.example.com", "secret", FieldError("email", "Invalid email")),
            ("alice", "a@x.com", "abc", FieldError("password", "Password must be greater than 3")),
        ],
    )
    def test_each_rule_names_its_field(self, username, email, password, expected):
        assert validate_register(username, email, password) == expected

    def test_first_failure_wins(self):
        # Every rule fails; only the username length is reported
        error = validate_register("", "no-at-sign", "")

        assert error == FieldError("username", "Username must be greater than 2")

    def test_boundary_lengths(self):
        assert validate_register("abc", "a@x", "abcd") is None


class TestValidatePassword:
    def test_custom_field_name(self):
        error = validate_password("ab", field_name="newPassword")

        assert error == FieldError("newPassword", "Password must be greater than 3")

    def test_long_enough_password_passes(self):
        assert validate_password("abcd") is None
