"""
SQLAlchemy ORM models.

Domain entities are mapped to/from these models inside the repository
implementations. Listing owners are referenced by student id without a
foreign key, so deleting an account leaves its listings in place.
"""
import uuid
from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    Date,
    DateTime,
    Enum as SAEnum,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from bachelor_point.domain.enums.account_role import AccountRole
from bachelor_point.domain.enums.account_status import AccountStatus
from bachelor_point.infrastructure.database.connection import Base

_account_role_enum = SAEnum(
    AccountRole,
    name="account_role",
    values_callable=lambda obj: [e.value for e in obj],
)

_account_status_enum = SAEnum(
    AccountStatus,
    name="account_status",
    values_callable=lambda obj: [e.value for e in obj],
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AccountModel(Base):
    __tablename__ = "accounts"

    student_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    gender: Mapped[str] = mapped_column(String(32), nullable=False)

    # Blob references
    id_card: Mapped[str] = mapped_column(String(512), nullable=False)
    photo: Mapped[str | None] = mapped_column(String(512), nullable=True)

    bio: Mapped[str | None] = mapped_column(Text, nullable=True)

    role: Mapped[AccountRole] = mapped_column(
        _account_role_enum, nullable=False, default=AccountRole.USER
    )
    status: Mapped[AccountStatus] = mapped_column(
        _account_status_enum, nullable=False, default=AccountStatus.PENDING, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=func.now()
    )


class ListingModel(Base):
    __tablename__ = "listings"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    owner_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    title: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    available_from: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[str] = mapped_column(String(32), nullable=False)
    rent: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    location: Mapped[str] = mapped_column(String(512), nullable=False)

    # Ordered list of blob references
    images: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=func.now()
    )
