from dataclasses import dataclass, field
from datetime import datetime, timezone

from bachelor_point.domain.enums.account_role import AccountRole
from bachelor_point.domain.enums.account_status import AccountStatus
from bachelor_point.domain.value_objects.gender import normalize_gender


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Account:
    """
    A registered student. New accounts start pending and cannot post or browse
    listings until an admin approves them.
    """

    student_id: str
    name: str
    email: str
    password_hash: str
    gender: str
    id_card: str  # blob reference of the identity document

    bio: str | None = None
    photo: str | None = None  # blob reference

    role: AccountRole = AccountRole.USER
    status: AccountStatus = AccountStatus.PENDING

    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # -------------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------------

    @classmethod
    def register(
        cls,
        *,
        student_id: str,
        name: str,
        email: str,
        password_hash: str,
        gender: str,
        id_card: str,
    ) -> "Account":
        return cls(
            student_id=student_id.strip(),
            name=name.strip(),
            email=email.strip().lower(),
            password_hash=password_hash,
            gender=normalize_gender(gender),
            id_card=id_card,
        )

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def update_profile(self, bio: str, photo: str) -> None:
        self.bio = bio
        self.photo = photo
        self.updated_at = _utcnow()

    def approve(self) -> None:
        self.status = AccountStatus.APPROVED
        self.updated_at = _utcnow()

    def ban(self) -> None:
        """Revoke approval. Admin rights are dropped along with it."""
        self.status = AccountStatus.PENDING
        self.role = AccountRole.USER
        self.updated_at = _utcnow()

    def promote(self) -> None:
        self.role = AccountRole.ADMIN
        self.updated_at = _utcnow()
