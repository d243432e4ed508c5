"""
Contact form validation and submission.

Validation mirrors the rules the site's form enforces in the browser.
Submission posts the fields to a form-handling service (Formspree-style
endpoint that answers JSON).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

import requests

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_MESSAGE_LENGTH = 10

SUCCESS_MESSAGE = "Your message has been sent successfully! I'll get back to you soon."
FAILURE_MESSAGE = "There was an error sending your message. Please try again later."


class ContactValidationError(ValueError):
    """Raised when form fields fail validation."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))


def validate_contact_form(fields: dict[str, Any]) -> dict[str, str]:
    """Check the contact form fields.

    Returns:
        Mapping of field name to error message; empty when the form is valid.
    """
    errors: dict[str, str] = {}

    name = str(fields.get("name") or "").strip()
    email = str(fields.get("email") or "").strip()
    subject = str(fields.get("subject") or "")
    message = str(fields.get("message") or "").strip()

    if not name:
        errors["name"] = "Please enter your name"

    if not email:
        errors["email"] = "Please enter your email"
    elif not EMAIL_PATTERN.match(email):
        errors["email"] = "Please enter a valid email address"

    if not subject:
        errors["subject"] = "Please select a subject"

    if not message:
        errors["message"] = "Please enter your message"
    elif len(message) < MIN_MESSAGE_LENGTH:
        errors["message"] = f"Message should be at least {MIN_MESSAGE_LENGTH} characters long"

    return errors


@dataclass
class SubmissionResult:
    """Outcome of a submission."""

    ok: bool
    message: str
    status_code: int | None = None
    detail: str | None = None


class ContactClient:
    """Posts contact form fields to a form endpoint."""

    def __init__(
        self,
        endpoint: str,
        timeout: float = 10,
        session: requests.Session | None = None,
    ):
        """Initialize contact client.

        Args:
            endpoint: Form handler URL
            timeout: Request timeout in seconds
            session: Optional requests session (for connection reuse or tests)
        """
        if not endpoint:
            raise ValueError("A contact endpoint URL is required")
        self.endpoint = endpoint
        self.timeout = timeout
        self._session = session or requests.Session()

    def submit(self, fields: dict[str, Any]) -> SubmissionResult:
        """Validate and submit the form.

        Raises:
            ContactValidationError: If the fields fail validation

        Returns:
            SubmissionResult; transport and HTTP errors give ``ok=False``.
        """
        errors = validate_contact_form(fields)
        if errors:
            raise ContactValidationError(errors)

        try:
            response = self._session.post(
                self.endpoint,
                data=fields,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Error submitting form: %s", e)
            return SubmissionResult(ok=False, message=FAILURE_MESSAGE, detail=str(e))

        if response.ok:
            return SubmissionResult(
                ok=True, message=SUCCESS_MESSAGE, status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError:
            data = None
        detail = (data.get("error") if isinstance(data, dict) else None) or "Form submission failed"
        logger.error("Error submitting form: %s (%s)", detail, response.status_code)
        return SubmissionResult(
            ok=False,
            message=FAILURE_MESSAGE,
            status_code=response.status_code,
            detail=str(detail),
        )
