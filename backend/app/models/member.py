"""
Sycamore Backend — Member SQLAlchemy Model
============================================

What:  ORM model representing the `members` table.
Why:   Maps member rows to Python objects for the lookup, search and seed services.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by MemberService and by the Alembic environment.

Ownership:
    Member lifecycle (creation, update, deletion) belongs to the admin
    application. This service only reads members, except for the single
    well-known test member the seed endpoint may insert.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Member(Base):
    """
    A person record in the member store.

    Query Patterns:
        - Diagnostic sample: SELECT id, first_name, last_name, email LIMIT 10
        - Search: case-insensitive LIKE on names/email WHERE is_active
        - Seed check: SELECT ... WHERE email = :email (unique index)
    """

    __tablename__ = "members"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique member identifier",
    )

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Unique: the seed endpoint relies on email identifying a member
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Contact email, unique per member",
    )

    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")

    avatar: Mapped[str | None] = mapped_column(
        String(512),
        nullable=True,
        default=None,
        comment="Avatar image URL",
    )

    # Inactive members are excluded from search results
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )

    date_joined: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_members_last_first", "last_name", "first_name"),
    )

    @property
    def full_name(self) -> str:
        return format_member_name(self.first_name, self.last_name)

    def __repr__(self) -> str:
        return f"<Member(id={self.id}, email='{self.email}')>"


def format_member_name(first_name: str | None, last_name: str | None) -> str:
    """
    Joins first and last name with a single space.

    Each part is stripped of surrounding whitespace and blank parts are
    dropped, so the result never has leading or trailing whitespace
    ("  Ada " + "Lovelace" -> "Ada Lovelace", "Ada" + "" -> "Ada").
    """
    parts = [part.strip() for part in (first_name, last_name) if part and part.strip()]
    return " ".join(parts)
