"""
Pydantic models for user data.

``User`` is the stored record and carries the password hash; it never
leaves the service layer.  ``UserRead`` is what the API returns.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, examples=["jay"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    # PBKDF2 ``salthex$hashhex`` string, see ``core.security.hash_password``
    password: str


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    username: str
