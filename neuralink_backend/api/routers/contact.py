# This file defines contact details and the consultation request endpoints.
# It exists so the public form submission and the demo review views share one ledger.
# Validation failures become 400 responses here; the ledger only ever sees normalized fields.
# The review endpoints are unauthenticated demo views and expose submitted personal data.

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from neuralink_backend.api.dependencies import get_consultation_ledger, get_contact_info
from neuralink_backend.api.error_handlers import APIError
from neuralink_backend.api.path_params import parse_record_id, record_id_label
from neuralink_backend.api.schemas.common import ErrorResponse
from neuralink_backend.api.schemas.contact_schemas import (
    ConsultationAccepted,
    ConsultationRequestList,
    ConsultationRequestRecord,
    ConsultationSubmission,
    ContactInfo,
)
from neuralink_backend.api.services.consultation_ledger import ConsultationLedger
from neuralink_backend.api.services.errors import RecordNotFoundError
from neuralink_backend.api.validation import ConsultationValidationError, validate_consultation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["contact"])
LedgerDep = Annotated[ConsultationLedger, Depends(get_consultation_ledger)]
ContactDep = Annotated[ContactInfo, Depends(get_contact_info)]

SUBMITTED_MESSAGE = "Consultation request submitted successfully"
ESTIMATED_RESPONSE_TIME = "24 hours"


@router.get("", response_model=ContactInfo)
def get_contact(contact_info: ContactDep) -> ContactInfo:
    return contact_info


@router.post(
    "/consultation",
    status_code=201,
    response_model=ConsultationAccepted,
    responses={400: {"model": ErrorResponse}},
)
def submit_consultation(
    ledger: LedgerDep,
    submission: ConsultationSubmission | None = None,
) -> ConsultationAccepted:
    try:
        fields = validate_consultation(submission or ConsultationSubmission())
    except ConsultationValidationError as exc:
        logger.info("Rejected consultation request: %s", exc.failure.value)
        raise APIError(
            status_code=400,
            error=exc.failure.error,
            message=exc.failure.message,
        ) from exc

    record = ledger.append(fields)
    return ConsultationAccepted(
        message=SUBMITTED_MESSAGE,
        request_id=record.id,
        estimated_response_time=ESTIMATED_RESPONSE_TIME,
    )


@router.get("/consultation-requests", response_model=ConsultationRequestList)
def list_consultation_requests(ledger: LedgerDep) -> ConsultationRequestList:
    return ledger.list_all()


@router.get(
    "/consultation-requests/{request_id}",
    response_model=ConsultationRequestRecord,
    responses={404: {"model": ErrorResponse}},
)
def get_consultation_request(request_id: str, ledger: LedgerDep) -> ConsultationRequestRecord:
    parsed_id = parse_record_id(request_id)
    try:
        return ledger.get_by_id(parsed_id)
    except RecordNotFoundError as exc:
        raise APIError(
            status_code=404,
            error="Request not found",
            message=(
                f"Consultation request with ID {record_id_label(request_id, parsed_id)} "
                "does not exist"
            ),
        ) from exc
