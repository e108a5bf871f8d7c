# This file implements the gate applied to consultation submissions before they reach the ledger.
# It exists so presence and email-format rules are explicit and testable without HTTP.
# Missing required fields are reported before a malformed email, so a request without an
# email always fails as missing rather than invalid.

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from neuralink_backend.api.schemas.contact_schemas import ConsultationSubmission

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+", re.IGNORECASE)

DEFAULT_COMPANY = "Not specified"
DEFAULT_SERVICE_INTEREST = "General inquiry"


class ValidationFailure(str, Enum):
    MISSING_FIELDS = "missing_fields"
    INVALID_EMAIL = "invalid_email"

    @property
    def error(self) -> str:
        return _FAILURE_TEXT[self][0]

    @property
    def message(self) -> str:
        return _FAILURE_TEXT[self][1]


_FAILURE_TEXT: dict[ValidationFailure, tuple[str, str]] = {
    ValidationFailure.MISSING_FIELDS: (
        "Missing required fields",
        "Name, email, and message are required",
    ),
    ValidationFailure.INVALID_EMAIL: (
        "Invalid email",
        "Please provide a valid email address",
    ),
}


class ConsultationValidationError(ValueError):
    """Raised when a submission fails validation; `failure` names the rule."""

    def __init__(self, failure: ValidationFailure) -> None:
        self.failure = failure
        super().__init__(failure.message)


@dataclass(frozen=True)
class ConsultationFields:
    name: str
    email: str
    company: str
    message: str
    service_interest: str


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def validate_consultation(submission: ConsultationSubmission) -> ConsultationFields:
    """Check a raw submission and return normalized fields with defaults applied."""

    if not submission.name or not submission.email or not submission.message:
        raise ConsultationValidationError(ValidationFailure.MISSING_FIELDS)

    if not is_valid_email(submission.email):
        raise ConsultationValidationError(ValidationFailure.INVALID_EMAIL)

    return ConsultationFields(
        name=submission.name,
        email=submission.email,
        company=submission.company or DEFAULT_COMPANY,
        message=submission.message,
        service_interest=submission.service_interest or DEFAULT_SERVICE_INTEREST,
    )
