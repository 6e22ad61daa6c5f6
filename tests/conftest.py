"""
Shared fixtures.

Environment is set before any bachelor_point module is imported so that the
settings object, the static mounts and the token service all pick up test
values.
"""
import os
import tempfile

os.environ.setdefault("STORAGE_ROOT", tempfile.mkdtemp(prefix="bachelor-point-test-"))
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import base64  # noqa: E402
from dataclasses import replace  # noqa: E402
from datetime import date  # noqa: E402
from decimal import Decimal  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402

from bachelor_point.application.interfaces.account_repository import AccountRepository  # noqa: E402
from bachelor_point.application.interfaces.listing_repository import ListingRepository  # noqa: E402
from bachelor_point.application.interfaces.security import PasswordHasher  # noqa: E402
from bachelor_point.application.use_cases.listing_details import ListingDetails  # noqa: E402
from bachelor_point.domain.entities.account import Account  # noqa: E402
from bachelor_point.domain.entities.listing import Listing  # noqa: E402
from bachelor_point.domain.enums.account_role import AccountRole  # noqa: E402
from bachelor_point.domain.enums.account_status import AccountStatus  # noqa: E402
from bachelor_point.domain.exceptions import ConflictError, NotFoundError  # noqa: E402
from bachelor_point.domain.value_objects.principal import Principal  # noqa: E402
from bachelor_point.infrastructure.security.jwt_tokens import JwtTokenService  # noqa: E402
from bachelor_point.infrastructure.storage.local_blob_store import LocalBlobStore  # noqa: E402

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
PNG_BASE64 = base64.b64encode(PNG_BYTES).decode("ascii")
PNG_DATA_URL = f"data:image/png;base64,{PNG_BASE64}"


# ---- In-memory adapters ----------------------------------------------------

class InMemoryAccountRepository(AccountRepository):
    """Stores copies so callers mutating an entity do not silently persist it."""

    def __init__(self, accounts: list[Account] | None = None) -> None:
        self.accounts: dict[str, Account] = {a.student_id: replace(a) for a in accounts or []}

    async def add(self, account: Account) -> None:
        if account.student_id in self.accounts or any(
            a.email == account.email for a in self.accounts.values()
        ):
            raise ConflictError("duplicate")
        self.accounts[account.student_id] = replace(account)

    async def save(self, account: Account) -> None:
        if account.student_id not in self.accounts:
            raise NotFoundError(f"Account {account.student_id} not found.")
        self.accounts[account.student_id] = replace(account)

    async def get_by_student_id(self, student_id: str) -> Account | None:
        account = self.accounts.get(student_id)
        return replace(account) if account else None

    async def get_by_email(self, email: str) -> Account | None:
        for account in self.accounts.values():
            if account.email == email:
                return replace(account)
        return None

    async def list_all(self) -> list[Account]:
        return [replace(a) for a in self.accounts.values()]

    async def delete(self, student_id: str) -> bool:
        return self.accounts.pop(student_id, None) is not None


class InMemoryListingRepository(ListingRepository):
    def __init__(self, listings: list[Listing] | None = None) -> None:
        self.listings: dict[UUID, Listing] = {l.id: replace(l) for l in listings or []}

    async def add(self, listing: Listing) -> None:
        self.listings[listing.id] = replace(listing, images=list(listing.images))

    async def get_by_id(self, listing_id: UUID) -> Listing | None:
        listing = self.listings.get(listing_id)
        return replace(listing, images=list(listing.images)) if listing else None

    async def list_all(self) -> list[Listing]:
        return [replace(l) for l in self.listings.values()]

    async def list_by_owner(self, owner_id: str) -> list[Listing]:
        return [replace(l) for l in self.listings.values() if l.owner_id == owner_id]

    async def update_owned(self, listing: Listing) -> bool:
        existing = self.listings.get(listing.id)
        if existing is None or existing.owner_id != listing.owner_id:
            return False
        self.listings[listing.id] = replace(listing, created_at=existing.created_at)
        return True

    async def delete(self, listing_id: UUID) -> bool:
        return self.listings.pop(listing_id, None) is not None


class RecordingSession:
    """Stand-in for AsyncSession that records what the request lifecycle did to it."""

    def __init__(self, rows=None) -> None:  # type: ignore[no-untyped-def]
        self.rows = rows or {}
        self.events: list[str] = []

    async def __aenter__(self) -> "RecordingSession":
        return self

    async def __aexit__(self, *exc_info) -> bool:  # type: ignore[no-untyped-def]
        self.events.append("close")
        return False

    async def get(self, model, key):  # type: ignore[no-untyped-def]
        return self.rows.get((model, key))

    async def commit(self) -> None:
        self.events.append("commit")

    async def rollback(self) -> None:
        self.events.append("rollback")


class PlainPasswordHasher(PasswordHasher):
    """Reversible stand-in so use-case tests don't pay for bcrypt."""

    async def hash(self, password: str) -> str:
        return f"hashed::{password}"

    async def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed::{password}"


# ---- Builders --------------------------------------------------------------

def build_account(**overrides) -> Account:  # type: ignore[no-untyped-def]
    defaults = dict(
        student_id="S1001",
        name="Rahim Uddin",
        email="rahim@example.edu",
        password_hash="hashed::secret",
        gender="male",
        id_card="identity-documents/1700000000000-aaaaaaaaaaaa.png",
        status=AccountStatus.APPROVED,
        role=AccountRole.USER,
    )
    defaults.update(overrides)
    return Account(**defaults)


def build_listing(**overrides) -> Listing:  # type: ignore[no-untyped-def]
    defaults = dict(
        owner_id="S1001",
        title="Single room near campus",
        description="Quiet room with attached bath.",
        available_from=date(2026, 11, 1),
        gender="male",
        rent=Decimal("4500.00"),
        location="Mirpur 10",
        images=["listing-images/1700000000000-bbbbbbbbbbbb.png"],
    )
    defaults.update(overrides)
    return Listing.create(**defaults)


def principal_for(account: Account) -> Principal:
    return Principal.from_account(account)


# ---- Fixtures --------------------------------------------------------------

@pytest.fixture()
def blob_store(tmp_path) -> LocalBlobStore:  # type: ignore[no-untyped-def]
    return LocalBlobStore(tmp_path / "uploads")


@pytest.fixture()
def account_repo() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture()
def listing_repo() -> InMemoryListingRepository:
    return InMemoryListingRepository()


@pytest.fixture()
def password_hasher() -> PlainPasswordHasher:
    return PlainPasswordHasher()


@pytest.fixture()
def token_service() -> JwtTokenService:
    return JwtTokenService(secret_key="unit-test-secret-key-of-sufficient-length", expires_minutes=60)


@pytest.fixture()
def listing_details():  # type: ignore[no-untyped-def]
    def _make(**overrides) -> ListingDetails:  # type: ignore[no-untyped-def]
        defaults = dict(
            title="Shared room",
            description="Two beds, one free.",
            available_from=date(2026, 12, 1),
            gender="female",
            rent=Decimal("3000"),
            location="Dhanmondi",
            images=[PNG_DATA_URL, PNG_BASE64],
        )
        defaults.update(overrides)
        return ListingDetails(**defaults)

    return _make


@pytest.fixture()
def make_account():  # type: ignore[no-untyped-def]
    return build_account


@pytest.fixture()
def make_listing():  # type: ignore[no-untyped-def]
    return build_listing


@pytest.fixture()
def as_principal():  # type: ignore[no-untyped-def]
    return principal_for


@pytest.fixture()
def recording_session():  # type: ignore[no-untyped-def]
    return RecordingSession


@pytest.fixture()
def png_base64() -> str:
    return PNG_BASE64


@pytest.fixture()
def png_data_url() -> str:
    return PNG_DATA_URL
