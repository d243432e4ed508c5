"""Contact form validation and submission."""

from folio.contact.form import (
    ContactClient,
    ContactValidationError,
    SubmissionResult,
    validate_contact_form,
)

__all__ = [
    "ContactClient",
    "ContactValidationError",
    "SubmissionResult",
    "validate_contact_form",
]
