"""
Pydantic schema definitions for API payloads.

Each domain (catalog, inquiries, users) defines its own Pydantic
models for request and response bodies.  The in‑memory repository
stores these models directly.
"""
