"""
Catalog endpoints for API v1.

These routes return the seeded services, used‑car inventory and
customer testimonials that the home page renders.  They are public,
read‑only and unpaginated.
"""

from typing import List

from fastapi import APIRouter, Depends

from jay_auto_api.app.core.storage import Storage, get_storage
from jay_auto_api.app.schemas.catalog import Car, Service, Testimonial
from jay_auto_api.app.services.catalog_service import CatalogService

router = APIRouter()


def get_catalog_service(storage: Storage = Depends(get_storage)) -> CatalogService:
    return CatalogService(storage)


@router.get("/services", response_model=List[Service], tags=["services"])
def list_services(catalog: CatalogService = Depends(get_catalog_service)) -> List[Service]:
    """Return every service the shop offers, in display order."""
    return catalog.list_services()


@router.get("/cars", response_model=List[Car], tags=["cars"])
def list_cars(catalog: CatalogService = Depends(get_catalog_service)) -> List[Car]:
    """Return the used‑car inventory."""
    return catalog.list_cars()


@router.get("/testimonials", response_model=List[Testimonial], tags=["testimonials"])
def list_testimonials(catalog: CatalogService = Depends(get_catalog_service)) -> List[Testimonial]:
    return catalog.list_testimonials()
