from dataclasses import dataclass

import structlog

from bachelor_point.application.interfaces.account_repository import AccountRepository
from bachelor_point.application.interfaces.blob_store import BlobStore
from bachelor_point.application.interfaces.security import PasswordHasher
from bachelor_point.application.validation import require_fields
from bachelor_point.domain.entities.account import Account
from bachelor_point.domain.enums.blob_namespace import BlobNamespace
from bachelor_point.domain.exceptions import BlobDecodeError, ConflictError, ValidationError

logger = structlog.get_logger(__name__)


@dataclass
class RegisterAccountInput:
    student_id: str | None
    name: str | None
    email: str | None
    password: str | None
    gender: str | None
    identity_document: str | None  # base64, optionally with a data:image prefix


class RegisterAccount:
    """
    Use case: Create a pending account with its identity document attached.

    The document is written to the blob store before the row is inserted; if
    the insert fails the document is removed again and the insert error
    propagates unchanged.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        blob_store: BlobStore,
        password_hasher: PasswordHasher,
    ) -> None:
        self._account_repo = account_repo
        self._blob_store = blob_store
        self._password_hasher = password_hasher

    async def execute(self, input_data: RegisterAccountInput) -> Account:
        require_fields(
            student_id=input_data.student_id,
            name=input_data.name,
            email=input_data.email,
            password=input_data.password,
            gender=input_data.gender,
            identity_document=input_data.identity_document,
        )

        student_id = input_data.student_id.strip()
        email = input_data.email.strip().lower()

        if await self._account_repo.get_by_student_id(student_id) is not None:
            raise ConflictError("An account with this student id already exists.")
        if await self._account_repo.get_by_email(email) is not None:
            raise ConflictError("An account with this email already exists.")

        password_hash = await self._password_hasher.hash(input_data.password)

        try:
            id_card = await self._blob_store.store(
                input_data.identity_document, BlobNamespace.IDENTITY_DOCUMENTS
            )
        except BlobDecodeError as exc:
            raise ValidationError("Identity document is not a valid base64 image.") from exc

        account = Account.register(
            student_id=student_id,
            name=input_data.name,
            email=email,
            password_hash=password_hash,
            gender=input_data.gender,
            id_card=id_card,
        )

        try:
            await self._account_repo.add(account)
        except Exception:
            await self._blob_store.remove(id_card)
            raise

        logger.info("account_registered", student_id=account.student_id)
        return account
