"""Tests for user registration, lookups and password hashing."""

from __future__ import annotations

import pytest

from jay_auto_api.app.core.errors import DuplicateUsernameError, ValidationError
from jay_auto_api.app.core.security import hash_password, verify_password
from jay_auto_api.app.services.user_service import UserService


@pytest.fixture
def users(storage) -> UserService:
    return UserService(storage)


def test_create_user_hashes_password(users):
    user = users.create_user("jay", "hunter2")

    assert user.id
    assert user.password != "hunter2"
    assert verify_password("hunter2", user.password)


def test_lookup_by_id_and_username(users):
    user = users.create_user("jay", "hunter2")

    assert users.get_user(user.id) == user
    assert users.get_user_by_username("jay") == user


def test_absent_user_is_none(users):
    assert users.get_user("nope") is None
    assert users.get_user_by_username("nobody") is None


def test_duplicate_username_is_rejected(users):
    users.create_user("jay", "first")
    with pytest.raises(DuplicateUsernameError):
        users.create_user("  jay ", "second")


def test_blank_username_and_empty_password_are_rejected(users):
    with pytest.raises(ValidationError) as excinfo:
        users.create_user("   ", "")
    assert set(excinfo.value.errors) == {"username", "password"}


def test_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


def test_verify_password_rejects_malformed_hash():
    assert not verify_password("x", "not-a-hash")
    assert not verify_password("x", "zz$zz")
