"""
Repository abstraction and the in‑memory implementation.

``Storage`` is the interface every service depends on; ``MemStorage``
keeps all collections in process memory for the lifetime of the
application.  A persistent backend only needs to implement the same
abstract methods.

The application factory builds one repository per app, seeds it and
keeps it on ``app.state.storage``; route handlers obtain it with the
``get_storage`` dependency.
"""

from __future__ import annotations

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from fastapi import Request

from . import seed_data
from .errors import DuplicateUsernameError
from ..schemas.catalog import Car, Service, ShopInfo, Testimonial
from ..schemas.inquiry import ContactInquiry, ContactInquiryData
from ..schemas.user import User

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Interface of the repository owning every collection."""

    @abstractmethod
    def get_services(self) -> List[Service]:
        ...

    @abstractmethod
    def get_cars(self) -> List[Car]:
        ...

    @abstractmethod
    def get_testimonials(self) -> List[Testimonial]:
        ...

    @abstractmethod
    def get_shop_info(self) -> Optional[ShopInfo]:
        """Return the business details, or ``None`` if none are configured."""

    @abstractmethod
    def create_contact_inquiry(self, data: ContactInquiryData) -> ContactInquiry:
        """Store a validated inquiry, assigning ``id`` and ``created_at``."""

    @abstractmethod
    def get_contact_inquiries(self) -> List[ContactInquiry]:
        """Return all inquiries in insertion order."""

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    def create_user(self, username: str, password_hash: str) -> User:
        """Store a user.  Raises ``DuplicateUsernameError`` if the name is taken."""


class MemStorage(Storage):
    """Process‑memory repository.

    Every mutation goes through ``self._lock``.  Reads hand out new
    lists, so a caller iterating over inquiries never sees the list
    grow underneath it.  Stored records are frozen models and are
    shared as is.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._services: Tuple[Service, ...] = ()
        self._cars: Tuple[Car, ...] = ()
        self._testimonials: Tuple[Testimonial, ...] = ()
        self._shop_info: Optional[ShopInfo] = None
        # dicts keep insertion order
        self._inquiries: Dict[str, ContactInquiry] = {}
        self._users: Dict[str, User] = {}
        self._user_ids_by_name: Dict[str, str] = {}

    def seed(self) -> "MemStorage":
        """Load the static catalog.  Returns ``self`` for chaining."""
        with self._lock:
            self._services = tuple(Service(**item) for item in seed_data.SERVICES)
            self._cars = tuple(Car(**item) for item in seed_data.CARS)
            self._testimonials = tuple(Testimonial(**item) for item in seed_data.TESTIMONIALS)
            self._shop_info = ShopInfo(**seed_data.SHOP_INFO)
        logger.info(
            "Seeded catalog: %d services, %d cars, %d testimonials",
            len(self._services),
            len(self._cars),
            len(self._testimonials),
        )
        return self

    def get_services(self) -> List[Service]:
        return list(self._services)

    def get_cars(self) -> List[Car]:
        return list(self._cars)

    def get_testimonials(self) -> List[Testimonial]:
        return list(self._testimonials)

    def get_shop_info(self) -> Optional[ShopInfo]:
        return self._shop_info

    def create_contact_inquiry(self, data: ContactInquiryData) -> ContactInquiry:
        with self._lock:
            inquiry_id = self._new_id(self._inquiries)
            inquiry = ContactInquiry(
                id=inquiry_id,
                created_at=datetime.now(timezone.utc),
                **data.model_dump(),
            )
            self._inquiries[inquiry_id] = inquiry
        return inquiry

    def get_contact_inquiries(self) -> List[ContactInquiry]:
        with self._lock:
            return list(self._inquiries.values())

    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            user_id = self._user_ids_by_name.get(username)
            return self._users.get(user_id) if user_id else None

    def create_user(self, username: str, password_hash: str) -> User:
        with self._lock:
            if username in self._user_ids_by_name:
                raise DuplicateUsernameError(username)
            user = User(id=self._new_id(self._users), username=username, password=password_hash)
            self._users[user.id] = user
            self._user_ids_by_name[username] = user.id
        return user

    @staticmethod
    def _new_id(existing: Dict[str, object]) -> str:
        # uuid4 carries 122 random bits; the loop only guards the
        # theoretical collision.
        while True:
            candidate = str(uuid.uuid4())
            if candidate not in existing:
                return candidate


def init_storage() -> MemStorage:
    """Build and seed the default repository."""
    return MemStorage().seed()


def get_storage(request: Request) -> Storage:
    """FastAPI dependency returning the application's repository."""
    return request.app.state.storage
