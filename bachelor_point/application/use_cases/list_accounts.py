from bachelor_point.application.interfaces.account_repository import AccountRepository
from bachelor_point.domain.entities.account import Account
from bachelor_point.domain.value_objects.principal import Principal


class ListAccounts:
    """Use case: Admin view of every account, pending ones included."""

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def execute(self, principal: Principal) -> list[Account]:
        principal.require_admin()
        return await self._account_repo.list_all()
