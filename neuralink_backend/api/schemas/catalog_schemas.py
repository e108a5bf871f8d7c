# This file defines the catalog records served by the services and team endpoints.
# Records are frozen because the catalog is seeded once and never changes at runtime.

from __future__ import annotations

from pydantic import Field

from neuralink_backend.api.schemas.common import FrozenCamelModel


class Service(FrozenCamelModel):
    id: int = Field(ge=1)
    title: str
    description: str
    icon: str
    features: tuple[str, ...]
    price: str


class TeamMember(FrozenCamelModel):
    id: int = Field(ge=1)
    name: str
    role: str
    bio: str
    initials: str
    expertise: tuple[str, ...]
    education: str
    experience: str
    linkedin: str
