import structlog

from bachelor_point.application.interfaces.account_repository import AccountRepository
from bachelor_point.domain.exceptions import NotFoundError
from bachelor_point.domain.value_objects.principal import Principal

logger = structlog.get_logger(__name__)


class DeleteAccount:
    """
    Use case: Hard-delete an account row.

    Uploaded images and listings owned by the account are left in place.
    """

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def execute(self, principal: Principal, target_id: str) -> None:
        principal.require_admin()

        deleted = await self._account_repo.delete(target_id)
        if not deleted:
            raise NotFoundError(f"Account {target_id} not found.")

        logger.info("account_deleted", target_id=target_id, acting_admin=principal.student_id)
