"""
Contact form endpoints for API v1.

``POST /contact`` validates and records an inquiry.  The body is read
as a plain JSON object and checked by ``InquiryService`` so that every
invalid field is reported in one response::

    {"detail": "Validation failed", "errors": {"email": "..."}}

``GET /contact`` lists recorded inquiries for shop staff.  It is
guarded by ``require_admin`` when an admin token is configured.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from jay_auto_api.app.core.security import require_admin
from jay_auto_api.app.core.storage import Storage, get_storage
from jay_auto_api.app.schemas.inquiry import ContactInquiry
from jay_auto_api.app.services.inquiry_service import InquiryService

router = APIRouter()


def get_inquiry_service(storage: Storage = Depends(get_storage)) -> InquiryService:
    return InquiryService(storage)


@router.post("", response_model=ContactInquiry, status_code=status.HTTP_201_CREATED)
def submit_inquiry(
    payload: Dict[str, Any] = Body(
        ...,
        examples=[
            {
                "name": "Al",
                "email": "al@example.com",
                "phone": "(555) 987-6543",
                "serviceType": "repair",
                "message": "My brakes squeal loudly",
            }
        ],
    ),
    inquiries: InquiryService = Depends(get_inquiry_service),
) -> ContactInquiry:
    """Record a contact form submission.

    Returns HTTP 422 with a field → message mapping if any field is
    invalid; nothing is stored in that case.
    """
    return inquiries.submit_inquiry(payload)


@router.get("", response_model=List[ContactInquiry], dependencies=[Depends(require_admin)])
def list_inquiries(inquiries: InquiryService = Depends(get_inquiry_service)) -> List[ContactInquiry]:
    """Return all recorded inquiries, oldest first (no pagination)."""
    return inquiries.list_inquiries()
