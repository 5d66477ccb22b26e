"""
Domain exceptions.

Services raise these instead of ``HTTPException`` so that they stay
usable outside of a request.  ``main.create_app`` registers handlers
that translate each one into an HTTP response.
"""

from typing import Dict


class JayAutoError(Exception):
    """Base class for all errors raised by the API's services."""


class ValidationError(JayAutoError):
    """One or more input fields failed their constraint.

    ``errors`` maps every failing field name to a human‑readable
    message, so a form can show all of them at once.
    """

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(self.errors)
        super().__init__(f"Invalid fields: {fields}")


class DuplicateUsernameError(JayAutoError):
    """A user with the requested username already exists."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username already taken: {username}")


class StorageError(JayAutoError):
    """The repository failed for a reason unrelated to the input.

    Callers may retry; it must never be reported as a validation
    problem.
    """
