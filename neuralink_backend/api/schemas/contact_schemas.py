# This file defines contact and consultation contracts.
# It exists so the inbound submission, the stored ledger record, and the public acknowledgement stay distinct.
# The submission model accepts every field as optional; presence and format rules live in the validation module.

from __future__ import annotations

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from neuralink_backend.api.schemas.common import CamelModel, FrozenCamelModel


class Address(FrozenCamelModel):
    street: str
    city: str
    state: str
    zip_code: str
    country: str


class SocialMedia(FrozenCamelModel):
    linkedin: str
    twitter: str
    github: str


class BusinessHours(FrozenCamelModel):
    monday: str
    tuesday: str
    wednesday: str
    thursday: str
    friday: str
    saturday: str
    sunday: str


class ContactInfo(FrozenCamelModel):
    company: str
    email: str
    phone: str
    location: str
    address: Address
    social_media: SocialMedia
    business_hours: BusinessHours
    response_time: str


class ConsultationSubmission(CamelModel):
    """Raw consultation form fields as posted by the site."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    name: str | None = None
    email: str | None = None
    company: str | None = None
    message: str | None = None
    service_interest: str | None = None


class ConsultationRequestRecord(FrozenCamelModel):
    id: int = Field(ge=1)
    name: str
    email: str
    company: str
    message: str
    service_interest: str
    timestamp: str
    status: str = "pending"


class ConsultationAccepted(CamelModel):
    message: str
    request_id: int
    estimated_response_time: str


class ConsultationRequestList(CamelModel):
    total: int = Field(ge=0)
    requests: list[ConsultationRequestRecord]
