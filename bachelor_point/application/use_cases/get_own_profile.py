from bachelor_point.application.interfaces.account_repository import AccountRepository
from bachelor_point.domain.entities.account import Account
from bachelor_point.domain.exceptions import NotFoundError
from bachelor_point.domain.value_objects.principal import Principal


class GetOwnProfile:
    """Use case: Load the caller's own account."""

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def execute(self, principal: Principal) -> Account:
        account = await self._account_repo.get_by_student_id(principal.student_id)
        if account is None:
            raise NotFoundError("Account not found.")
        return account
