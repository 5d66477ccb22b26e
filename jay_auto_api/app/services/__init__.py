"""
Service layer.

Each service encapsulates the business logic for one domain and works
against the ``Storage`` interface it is given, so the in‑memory
repository can be replaced by a persistent one without touching the
API handlers.
"""
