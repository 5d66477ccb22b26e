"""
Business logic for contact inquiries.

Submissions are checked against ``INQUIRY_RULES``, a declarative table
with one row per form field.  Every row is evaluated before anything is
stored, and all failures are reported together in a single
``ValidationError``.  Only a fully valid submission reaches the
repository.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional

from email_validator import EmailNotValidError, validate_email

from ..core.errors import ValidationError
from ..core.storage import Storage
from ..schemas.inquiry import ContactInquiry, ContactInquiryData

logger = logging.getLogger(__name__)


def _is_email(value: str) -> bool:
    # Syntax only: local part, "@", a domain containing a dot.  No DNS
    # lookups, and reserved names such as .test or .local are accepted.
    try:
        validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    domain = value.rpartition("@")[2]
    return "." in domain.strip(".")


class FieldRule(NamedTuple):
    """Constraint on one submitted field.

    ``check`` receives the value with surrounding whitespace removed.
    Optional fields that are missing or blank skip the check.
    """

    field: str
    required: bool
    check: Callable[[str], bool]
    message: str


INQUIRY_RULES = (
    FieldRule("name", True, lambda v: len(v) >= 2, "Name must be at least 2 characters"),
    FieldRule("email", True, _is_email, "Please enter a valid email address"),
    FieldRule("phone", False, lambda v: True, "Phone must be text"),
    # Any non-empty key is accepted; the form's fixed list is a UI concern.
    FieldRule("serviceType", True, lambda v: len(v) > 0, "Please select a service type"),
    FieldRule("message", True, lambda v: len(v) >= 10, "Message must be at least 10 characters"),
)


def validate_fields(payload: Mapping[str, Any], rules=INQUIRY_RULES) -> Dict[str, Optional[str]]:
    """Apply ``rules`` to ``payload`` and return the cleaned values.

    Raises
    ------
    ValidationError
        Listing every field that failed, keyed by field name.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError({rule.field: rule.message for rule in rules if rule.required})
    cleaned: Dict[str, Optional[str]] = {}
    errors: Dict[str, str] = {}
    for rule in rules:
        raw = payload.get(rule.field)
        if raw is None:
            if rule.required:
                errors[rule.field] = rule.message
            else:
                cleaned[rule.field] = None
            continue
        if not isinstance(raw, str):
            errors[rule.field] = rule.message
            continue
        value = raw.strip()
        if not rule.required and not value:
            cleaned[rule.field] = None
        elif rule.check(value):
            cleaned[rule.field] = value
        else:
            errors[rule.field] = rule.message
    if errors:
        raise ValidationError(errors)
    return cleaned


class InquiryService:
    """Validates contact form submissions and records them."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def submit_inquiry(self, payload: Mapping[str, Any]) -> ContactInquiry:
        """Validate ``payload`` and store it as a new inquiry.

        ``payload`` uses the form's field names (``name``, ``email``,
        ``phone``, ``serviceType``, ``message``).  Unknown keys are
        ignored.  The returned record includes the assigned ``id`` and
        ``created_at``.
        """
        cleaned = validate_fields(payload)
        inquiry = self.storage.create_contact_inquiry(ContactInquiryData(**cleaned))
        logger.info("Recorded inquiry %s (service type %s)", inquiry.id, inquiry.service_type)
        return inquiry

    def list_inquiries(self) -> List[ContactInquiry]:
        """Return every recorded inquiry, oldest first.

        There is no pagination; this is meant for staff review of a
        small shop's inbox and grows with the process lifetime.
        """
        return self.storage.get_contact_inquiries()
