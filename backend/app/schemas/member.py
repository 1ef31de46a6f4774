"""
Sycamore Backend — Pydantic Response Schemas
==============================================

What:  Pydantic models defining the JSON envelopes the API returns.
Why:   Response validation, serialization, and OpenAPI doc generation.
How:   Route handlers declare these as response models; FastAPI serializes them.

Envelope convention:
    Success bodies start with `success: true` followed by the payload.
    Failure bodies use fixed per-endpoint shapes (see DocumentationErrorResponse
    and MessageResponse) built by the global exception handlers.
"""

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Documentation
# ══════════════════════════════════════════════════════════════════════════


class DocumentationResponse(BaseModel):
    """Returned by GET /api/docs when the documentation file is readable."""
    success: bool = Field(default=True)
    documentation: str = Field(description="Full text content of the documentation file")


class DocumentationErrorResponse(BaseModel):
    """Returned by GET /api/docs with HTTP 404 when the file cannot be read."""
    success: bool = Field(default=False)
    error: str = Field(description="Human-readable failure reason")


# ══════════════════════════════════════════════════════════════════════════
# Members
# ══════════════════════════════════════════════════════════════════════════


class MemberSummary(BaseModel):
    """
    Compact member projection: identifier, display name, email.

    `name` is "<first> <last>" (see app.models.member.format_member_name).
    """
    id: uuid.UUID = Field(description="Unique member identifier")
    name: str = Field(description="First and last name separated by a single space")
    email: str = Field(description="Member email")


class MemberSearchResult(MemberSummary):
    """Search hit: the summary plus the avatar URL, if any."""
    avatar: Optional[str] = Field(default=None, description="Avatar image URL")


class MemberSampleResponse(BaseModel):
    """
    Returned by GET /api/mobile/members/test.

    Invariant: count == len(members), and never more than the sample limit (10).
    """
    success: bool = Field(default=True)
    count: int = Field(ge=0, description="Number of members returned")
    members: List[MemberSummary] = Field(description="Members in natural store order")


class MemberSearchResponse(BaseModel):
    """Returned by GET /api/mobile/members/search."""
    success: bool = Field(default=True)
    data: List[MemberSearchResult] = Field(description="Matching active members")


class SeedStatusResponse(BaseModel):
    """Returned by GET /api/mobile/members/seed."""
    success: bool = Field(default=True)
    exists: bool = Field(description="Whether the test member exists")
    member: Optional[MemberSummary] = Field(default=None)
    message: str


class SeedResponse(BaseModel):
    """Returned by POST /api/mobile/members/seed."""
    success: bool = Field(default=True)
    message: str
    member: MemberSummary


# ══════════════════════════════════════════════════════════════════════════
# Errors & Health
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """
    Failure body for member endpoints: a single public message.

    Example:
        {"message": "Failed to fetch members"}
    """
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
