"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers (catalog, contact, info,
users).  When new domains are introduced, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import catalog, contact, info, users

router = APIRouter()

# The catalog router defines its own "/services", "/cars" and
# "/testimonials" paths.  Do not give it a prefix.
router.include_router(catalog.router)
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(info.router, prefix="/info", tags=["info"])
router.include_router(users.router, prefix="/users", tags=["users"])
