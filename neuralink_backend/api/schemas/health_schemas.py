# This file defines response schemas for the health and API descriptor endpoints.
# Stable health schemas make uptime checks straightforward to automate.

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    service: str


class ApiDescriptor(BaseModel):
    name: str
    version: str
    endpoints: list[str]
