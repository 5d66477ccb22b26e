"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (catalog, contact inquiries, users) has its
schemas in ``schemas``, its business logic in ``services`` and its
routes in ``api/v1/endpoints``.  The repository shared by all services
lives in ``core.storage``.
"""

from .main import app, create_app  # noqa: F401
