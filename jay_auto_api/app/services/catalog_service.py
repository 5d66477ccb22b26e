"""
Read‑only access to the shop catalog.

Services, cars and testimonials come from the repository's seed and
never change, so these calls have no side effects and return the same
content in the same order every time.
"""

from typing import List, Optional

from ..core.storage import Storage
from ..schemas.catalog import Car, Service, ShopInfo, Testimonial


class CatalogService:
    """Service class for the catalog shown on the home page."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def list_services(self) -> List[Service]:
        return self.storage.get_services()

    def list_cars(self) -> List[Car]:
        return self.storage.get_cars()

    def list_testimonials(self) -> List[Testimonial]:
        return self.storage.get_testimonials()

    def get_shop_info(self) -> Optional[ShopInfo]:
        """Return contact details, opening hours and the service type keys."""
        return self.storage.get_shop_info()
