from dataclasses import dataclass

from bachelor_point.domain.entities.account import Account
from bachelor_point.domain.enums.account_role import AccountRole
from bachelor_point.domain.enums.account_status import AccountStatus
from bachelor_point.domain.exceptions import ForbiddenError


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, built from the account row a verified token points at."""

    student_id: str
    email: str
    role: AccountRole
    status: AccountStatus

    @classmethod
    def from_account(cls, account: Account) -> "Principal":
        return cls(
            student_id=account.student_id,
            email=account.email,
            role=account.role,
            status=account.status,
        )

    @property
    def is_admin(self) -> bool:
        return self.role is AccountRole.ADMIN

    @property
    def is_approved(self) -> bool:
        return self.status.can_use_listings

    def require_admin(self) -> None:
        if not self.is_admin:
            raise ForbiddenError("Access denied.")

    def require_approved(self) -> None:
        if not self.is_approved:
            raise ForbiddenError("Your account is not approved yet!")
