from dataclasses import dataclass
from enum import Enum

import structlog

from bachelor_point.application.interfaces.account_repository import AccountRepository
from bachelor_point.domain.entities.account import Account
from bachelor_point.domain.exceptions import NotFoundError
from bachelor_point.domain.value_objects.principal import Principal

logger = structlog.get_logger(__name__)


class ModerationAction(str, Enum):
    APPROVE = "approve"
    BAN = "ban"
    PROMOTE = "promote"


@dataclass
class ModerateAccountInput:
    target_id: str
    action: ModerationAction


class ModerateAccount:
    """
    Use case: Admin-only status and role changes.

    approve -> status approved
    ban     -> status pending, role user
    promote -> role admin, status untouched

    Every action is idempotent; repeating it rewrites the same values.
    """

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def execute(self, principal: Principal, input_data: ModerateAccountInput) -> Account:
        principal.require_admin()

        account = await self._account_repo.get_by_student_id(input_data.target_id)
        if account is None:
            raise NotFoundError(f"Account {input_data.target_id} not found.")

        if input_data.action is ModerationAction.APPROVE:
            account.approve()
        elif input_data.action is ModerationAction.BAN:
            account.ban()
        else:
            account.promote()

        await self._account_repo.save(account)

        logger.info(
            "account_moderated",
            action=input_data.action.value,
            target_id=account.student_id,
            acting_admin=principal.student_id,
            status=account.status.value,
            role=account.role.value,
        )
        return account
