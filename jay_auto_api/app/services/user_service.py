"""
Business logic for users.

User records are minimal: a username and a password hash.  The
repository enforces username uniqueness, so two concurrent
registrations of the same name cannot both succeed.
"""

import logging
from typing import Optional

from ..core.errors import ValidationError
from ..core.security import hash_password
from ..core.storage import Storage
from ..schemas.user import User

logger = logging.getLogger(__name__)


class UserService:
    """Creates and looks up users."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def create_user(self, username: str, password: str) -> User:
        """Register a new user and return the stored record.

        The username is trimmed.  The password is hashed before it
        reaches the repository; no complexity rules are applied.

        Raises
        ------
        ValidationError
            If the username is blank or the password is empty.
        DuplicateUsernameError
            If the username is already registered.
        """
        username = (username or "").strip()
        errors = {}
        if not username:
            errors["username"] = "Username is required"
        if not password:
            errors["password"] = "Password is required"
        if errors:
            raise ValidationError(errors)
        user = self.storage.create_user(username, hash_password(password))
        logger.info("Registered user %s (%s)", user.username, user.id)
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        return self.storage.get_user(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.storage.get_user_by_username(username)
