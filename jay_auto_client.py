"""Jay Auto Repair API client.

A thin wrapper around the REST API served by ``jay_auto_api`` for
scripts and other Python consumers (for example a staff tool that
pulls new inquiries).  The client uses the ``requests`` library and
exposes one method per operation:

* :meth:`list_services`, :meth:`list_cars`, :meth:`list_testimonials`
  – the public catalog.
* :meth:`get_info` – contact details and opening hours.
* :meth:`submit_inquiry` – send a contact form submission.
* :meth:`list_inquiries` – staff view of recorded inquiries.

Validation failures on :meth:`submit_inquiry` are raised as
:class:`jay_auto_api.app.core.errors.ValidationError`, the same error
the service layer raises, so callers can show every field message.
Any other failure raises :class:`ApiError`.

The admin token, when the server is configured with one, is passed as
``api_key`` and sent in the ``Authorization`` header.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from jay_auto_api.app.core.errors import JayAutoError, ValidationError


logger = logging.getLogger(__name__)


class ApiError(JayAutoError):
    """The API could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class JayAutoAPI:
    """Client for the Jay Auto Repair API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        api_prefix: str = "/api/v1",
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``https://jayautorepair.com``.
            api_key: Optional admin token.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` is included
                in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            api_prefix: Path under which the API is mounted.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Any:
        """Perform an HTTP request and return the decoded JSON body.

        Raises:
            ValidationError: on a 422 response carrying field errors.
            ApiError: on any other HTTP error or transport failure.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        logger.debug("Sending %s request to %s", method, url)
        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            raise ApiError(str(exc)) from exc

        if response.status_code >= 400:
            body = self._json_or_none(response)
            if response.status_code == 422 and isinstance(body, dict) and isinstance(body.get("errors"), dict):
                raise ValidationError(body["errors"])
            message = ""
            if isinstance(body, dict):
                message = str(body.get("detail") or body.get("message") or "")
            if not message:
                message = response.text or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            raise ApiError(message, status_code=response.status_code)

        if response.content:
            return response.json()
        return None

    @staticmethod
    def _json_or_none(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------
    def list_services(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/services")

    def list_cars(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/cars")

    def list_testimonials(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/testimonials")

    def get_info(self) -> Dict[str, Any]:
        return self._request("GET", "/info")

    # ------------------------------------------------------------------
    # Contact inquiries
    # ------------------------------------------------------------------
    def submit_inquiry(
        self,
        *,
        name: str,
        email: str,
        service_type: str,
        message: str,
        phone: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Submit a contact form entry and return the stored inquiry.

        Raises:
            ValidationError: listing every invalid field.
        """
        payload: Dict[str, Any] = {
            "name": name,
            "email": email,
            "serviceType": service_type,
            "message": message,
        }
        if phone is not None:
            payload["phone"] = phone
        return self._request("POST", "/contact", json_body=payload)

    def list_inquiries(self) -> List[Dict[str, Any]]:
        """Return all recorded inquiries, oldest first."""
        return self._request("GET", "/contact")
