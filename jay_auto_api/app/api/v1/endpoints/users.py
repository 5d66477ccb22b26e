"""
User endpoints for API v1.

Minimal registration and lookup.  Responses never include the
password hash.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from jay_auto_api.app.core.storage import Storage, get_storage
from jay_auto_api.app.schemas.user import UserCreate, UserRead
from jay_auto_api.app.services.user_service import UserService

router = APIRouter()


def get_user_service(storage: Storage = Depends(get_storage)) -> UserService:
    return UserService(storage)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, users: UserService = Depends(get_user_service)) -> UserRead:
    """Register a new user.

    Returns HTTP 409 if the username is already taken.
    """
    user = users.create_user(user_in.username, user_in.password)
    return UserRead(id=user.id, username=user.username)


@router.get("/by-username/{username}", response_model=UserRead)
def get_user_by_username(username: str, users: UserService = Depends(get_user_service)) -> UserRead:
    user = users.get_user_by_username(username)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead(id=user.id, username=user.username)


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: str, users: UserService = Depends(get_user_service)) -> UserRead:
    user = users.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead(id=user.id, username=user.username)
