"""
Pydantic models for contact inquiries.

Inquiries are submitted through the contact form on the site.  The
stored record is immutable: the repository assigns ``id`` and
``created_at`` and nothing updates it afterwards.  On the wire the
field names follow the front‑end's camelCase (``serviceType``,
``createdAt``); Python code uses snake_case.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ContactInquiryData(BaseModel):
    """Validated, normalised inquiry fields, before storage."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    email: str
    phone: Optional[str] = None
    service_type: str = Field(..., alias="serviceType")
    message: str


class ContactInquiry(ContactInquiryData):
    """A stored inquiry, as returned by the API."""

    id: str = Field(..., examples=["3f0c2a56-8a0e-4c4e-9a51-7d7c6f1c2b11"])
    created_at: datetime = Field(..., alias="createdAt")
