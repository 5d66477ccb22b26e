"""
Top‑level package for the Jay Auto Repair API.

The backend of the Jay Auto Repair website: the service catalog, the
used‑car inventory, customer testimonials and the contact form.  All
functionality lives in submodules under ``app``.
"""

__all__ = []
