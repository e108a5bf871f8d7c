# This file implements the append-only ledger of consultation requests.
# It exists so id assignment, defaults, and timestamps are decided in one place.
# Ids equal 1-based insertion order; the append runs under a lock because sync
# FastAPI handlers execute on a threadpool.

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime

from neuralink_backend.api.schemas.contact_schemas import (
    ConsultationRequestList,
    ConsultationRequestRecord,
)
from neuralink_backend.api.services.errors import RecordNotFoundError
from neuralink_backend.api.validation import ConsultationFields
from neuralink_backend.common.clock import format_utc_timestamp, utc_now

logger = logging.getLogger(__name__)

PENDING_STATUS = "pending"


class ConsultationLedger:
    """In-memory, process-lifetime store of submitted consultation requests."""

    def __init__(self, *, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock
        self._records: list[ConsultationRequestRecord] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def append(self, fields: ConsultationFields) -> ConsultationRequestRecord:
        with self._lock:
            record = ConsultationRequestRecord(
                id=len(self._records) + 1,
                name=fields.name,
                email=fields.email,
                company=fields.company,
                message=fields.message,
                service_interest=fields.service_interest,
                timestamp=format_utc_timestamp(self._clock()),
                status=PENDING_STATUS,
            )
            self._records.append(record)

        logger.info("Stored consultation request id=%s", record.id)
        return record

    def list_all(self) -> ConsultationRequestList:
        with self._lock:
            snapshot = list(self._records)
        return ConsultationRequestList(total=len(snapshot), requests=snapshot)

    def get_by_id(self, request_id: int | None) -> ConsultationRequestRecord:
        # Ids are dense and 1-based, so position lookup is exact.
        with self._lock:
            if request_id is not None and 1 <= request_id <= len(self._records):
                return self._records[request_id - 1]
        raise RecordNotFoundError("Consultation request", request_id)
