"""
Information endpoint for API v1.

Returns the shop's contact details, opening hours and the service type
keys offered by the contact form, so the front‑end does not have to
hard‑code them.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from jay_auto_api.app.api.v1.endpoints.catalog import get_catalog_service
from jay_auto_api.app.schemas.catalog import ShopInfo
from jay_auto_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("", response_model=ShopInfo)
def get_info(catalog: CatalogService = Depends(get_catalog_service)) -> ShopInfo:
    """Return the shop details.  HTTP 404 if the repository has none."""
    info = catalog.get_shop_info()
    if info is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shop info not configured")
    return info
