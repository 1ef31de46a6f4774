"""
Sycamore Backend — Mobile Member Route Handlers
=================================================

What:  Member endpoints used by the mobile client.
How:   Thin handlers: pull query params and a pooled session, delegate to
       MemberService, return the envelope. DatabaseError raised by the
       service becomes HTTP 500 {message} in the global handler.

Routes:
    GET  /api/mobile/members/test     diagnostic sample (max 10)
    GET  /api/mobile/members/search   name/email search
    GET  /api/mobile/members/seed     test member status
    POST /api/mobile/members/seed     create test member if missing
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.schemas.member import (
    MemberSampleResponse,
    MemberSearchResponse,
    MessageResponse,
    SeedResponse,
    SeedStatusResponse,
)
from app.services.member_service import member_service

router = APIRouter(prefix="/api/mobile/members", tags=["Members"])


@router.get(
    "/test",
    response_model=MemberSampleResponse,
    responses={
        200: {"description": "Up to 10 members", "model": MemberSampleResponse},
        500: {"description": "Database unavailable", "model": MessageResponse},
    },
    summary="List a small sample of members for testing",
)
async def list_test_members(
    db: AsyncSession = Depends(get_db_session),
) -> MemberSampleResponse:
    return await member_service.list_sample(db, limit=settings.member_sample_limit)


@router.get(
    "/search",
    response_model=MemberSearchResponse,
    responses={
        200: {"description": "Matching members", "model": MemberSearchResponse},
        500: {"description": "Database unavailable", "model": MessageResponse},
    },
    summary="Search active members by name or email",
)
async def search_members(
    q: str | None = Query(default=None, description="Search term (at least 2 characters)"),
    db: AsyncSession = Depends(get_db_session),
) -> MemberSearchResponse:
    return await member_service.search(
        db,
        q,
        limit=settings.member_search_limit,
        min_length=settings.member_search_min_length,
    )


@router.get(
    "/seed",
    response_model=SeedStatusResponse,
    responses={500: {"description": "Database unavailable", "model": MessageResponse}},
    summary="Check whether the test member exists",
)
async def get_seed_status(
    db: AsyncSession = Depends(get_db_session),
) -> SeedStatusResponse:
    return await member_service.get_seed_status(db)


@router.post(
    "/seed",
    response_model=SeedResponse,
    responses={
        200: {"description": "Test member created or already existed", "model": SeedResponse},
        500: {"description": "Database unavailable", "model": MessageResponse},
    },
    summary="Create the test member if it does not exist",
)
async def seed_test_member(
    db: AsyncSession = Depends(get_db_session),
) -> SeedResponse:
    result, _created = await member_service.seed_test_member(db)
    return result
