"""
Sycamore Backend — Member Service (Business Logic)
====================================================

What:  Read-side member operations for the mobile API plus the test-member seed.
Why:   Keeps query construction and projection out of the route handlers.
How:   Each method runs one bounded query on the injected AsyncSession and
       projects rows into response schemas.
Who:   Called by app.routes.members.

Error Handling Strategy:
    Any failure talking to the store is logged here with its traceback and
    re-raised as DatabaseError carrying the endpoint's public message. The
    global handler turns that into HTTP 500 {message}; driver details never
    reach the client.
"""

import logging
import uuid
from typing import Any, List

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.member import Member, format_member_name
from app.schemas.member import (
    MemberSampleResponse,
    MemberSearchResponse,
    MemberSearchResult,
    MemberSummary,
    SeedResponse,
    SeedStatusResponse,
)

logger = logging.getLogger(__name__)

# Well-known account used by mobile client smoke tests
TEST_MEMBER_EMAIL = "test@example.com"


def _escape_like(value: str) -> str:
    """Escapes LIKE wildcards so the search term matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _summary(row: Any) -> MemberSummary:
    return MemberSummary(
        id=row.id,
        name=format_member_name(row.first_name, row.last_name),
        email=row.email,
    )


class MemberService:
    """
    Business logic layer for member operations.

    Responsibilities:
        - list_sample():       bounded, unfiltered diagnostic read
        - search():            name/email search over active members
        - get_seed_status():   does the test member exist?
        - seed_test_member():  create the test member if missing
    """

    async def list_sample(self, db: AsyncSession, limit: int = 10) -> MemberSampleResponse:
        """
        Return up to `limit` members projected to id, name, email.

        Query plan:
            SELECT id, first_name, last_name, email FROM members LIMIT :limit

        No ORDER BY: results keep the store's natural order.

        Raises:
            DatabaseError: connection or query failure (→ 500)
        """
        try:
            result = await db.execute(
                select(Member.id, Member.first_name, Member.last_name, Member.email)
                .limit(limit)
            )
            rows = result.all()
        except Exception as e:
            logger.error("Error fetching members: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch members",
                context={"error_type": type(e).__name__},
            ) from e

        members = [_summary(row) for row in rows]
        return MemberSampleResponse(success=True, count=len(members), members=members)

    async def search(
        self,
        db: AsyncSession,
        query: str | None,
        limit: int = 20,
        min_length: int = 2,
    ) -> MemberSearchResponse:
        """
        Case-insensitive substring search over active members.

        Matches first name, last name, email, or "<first> <last>". The term is
        stripped of surrounding whitespace before the length check, so "  a  "
        counts as one character. Terms shorter than `min_length` return an
        empty result without a query.

        Raises:
            DatabaseError: connection or query failure (→ 500)
        """
        term = (query or "").strip()
        if len(term) < min_length:
            return MemberSearchResponse(success=True, data=[])

        pattern = f"%{_escape_like(term)}%"
        full_name = Member.first_name + " " + Member.last_name

        try:
            result = await db.execute(
                select(
                    Member.id,
                    Member.first_name,
                    Member.last_name,
                    Member.email,
                    Member.avatar,
                )
                .where(
                    Member.is_active.is_(True),
                    or_(
                        Member.first_name.ilike(pattern, escape="\\"),
                        Member.last_name.ilike(pattern, escape="\\"),
                        Member.email.ilike(pattern, escape="\\"),
                        full_name.ilike(pattern, escape="\\"),
                    ),
                )
                .limit(limit)
            )
            rows = result.all()
        except Exception as e:
            logger.error("Member search error: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to search members",
                context={"error_type": type(e).__name__, "query_length": len(term)},
            ) from e

        data: List[MemberSearchResult] = [
            MemberSearchResult(
                id=row.id,
                name=format_member_name(row.first_name, row.last_name),
                email=row.email,
                avatar=row.avatar,
            )
            for row in rows
        ]
        return MemberSearchResponse(success=True, data=data)

    async def _find_test_member(self, db: AsyncSession) -> Member | None:
        result = await db.execute(select(Member).where(Member.email == TEST_MEMBER_EMAIL))
        return result.scalar_one_or_none()

    async def get_seed_status(self, db: AsyncSession) -> SeedStatusResponse:
        """Reports whether the test member exists."""
        try:
            member = await self._find_test_member(db)
        except Exception as e:
            logger.error("Error checking test member: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to check test member",
                context={"error_type": type(e).__name__},
            ) from e

        if member is None:
            return SeedStatusResponse(
                exists=False,
                member=None,
                message="Test member not found. POST to this endpoint to create one.",
            )
        return SeedStatusResponse(
            exists=True,
            member=_summary(member),
            message="Test member exists",
        )

    async def seed_test_member(self, db: AsyncSession) -> tuple[SeedResponse, bool]:
        """
        Create the test member unless one with the test email already exists.

        Returns:
            (response, created) — created is False when the member was already there.

        Raises:
            DatabaseError: connection, query or insert failure (→ 500)
        """
        try:
            existing = await self._find_test_member(db)
            if existing is not None:
                return (
                    SeedResponse(message="Test member already exists", member=_summary(existing)),
                    False,
                )

            member = Member(
                id=uuid.uuid4(),
                first_name="Test",
                last_name="User",
                email=TEST_MEMBER_EMAIL,
                phone="+1234567890",
                is_active=True,
            )
            db.add(member)
            # Flush so insert errors surface here; commit happens in get_db_session
            await db.flush()
        except Exception as e:
            logger.error("Error creating test member: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to create test member",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Test member created: %s", member.id)
        return (
            SeedResponse(message="Test member created successfully", member=_summary(member)),
            True,
        )


# ── Singleton Instance ────────────────────────────────────────────────────
# MemberService is stateless; sessions are passed per call
member_service = MemberService()
