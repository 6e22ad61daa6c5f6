from dataclasses import dataclass

import structlog

from bachelor_point.application.interfaces.account_repository import AccountRepository
from bachelor_point.application.interfaces.security import PasswordHasher, TokenService
from bachelor_point.application.validation import require_fields
from bachelor_point.domain.entities.account import Account
from bachelor_point.domain.exceptions import AccountNotFoundError, InvalidCredentialsError

logger = structlog.get_logger(__name__)


@dataclass
class AuthenticateAccountInput:
    identifier: str | None  # email or student id
    password: str | None


@dataclass
class AuthenticateAccountOutput:
    token: str
    account: Account


class AuthenticateAccount:
    """Use case: Exchange an email/student id and password for a session token."""

    def __init__(
        self,
        account_repo: AccountRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._account_repo = account_repo
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def execute(self, input_data: AuthenticateAccountInput) -> AuthenticateAccountOutput:
        require_fields(
            "Identifier and password are required.",
            identifier=input_data.identifier,
            password=input_data.password,
        )

        identifier = input_data.identifier.strip()
        if "@" in identifier:
            account = await self._account_repo.get_by_email(identifier.lower())
        else:
            account = await self._account_repo.get_by_student_id(identifier)

        if account is None:
            logger.info("login_rejected", reason="unknown_identifier")
            raise AccountNotFoundError()

        if not await self._password_hasher.verify(input_data.password, account.password_hash):
            logger.info("login_rejected", reason="password_mismatch", student_id=account.student_id)
            raise InvalidCredentialsError()

        token = self._token_service.issue(account)
        logger.info("account_authenticated", student_id=account.student_id)
        return AuthenticateAccountOutput(token=token, account=account)
