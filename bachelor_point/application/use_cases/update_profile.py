from dataclasses import dataclass

import structlog

from bachelor_point.application.interfaces.account_repository import AccountRepository
from bachelor_point.application.interfaces.blob_store import BlobStore
from bachelor_point.application.validation import require_fields
from bachelor_point.domain.entities.account import Account
from bachelor_point.domain.enums.blob_namespace import BlobNamespace
from bachelor_point.domain.exceptions import BlobDecodeError, NotFoundError, ValidationError
from bachelor_point.domain.value_objects.principal import Principal

logger = structlog.get_logger(__name__)


@dataclass
class UpdateProfileInput:
    bio: str | None
    photo: str | None  # base64


class UpdateProfile:
    """Use case: Replace the caller's bio and profile photo."""

    def __init__(self, account_repo: AccountRepository, blob_store: BlobStore) -> None:
        self._account_repo = account_repo
        self._blob_store = blob_store

    async def execute(self, principal: Principal, input_data: UpdateProfileInput) -> Account:
        require_fields(bio=input_data.bio, photo=input_data.photo)

        account = await self._account_repo.get_by_student_id(principal.student_id)
        if account is None:
            raise NotFoundError("Account not found.")

        try:
            photo = await self._blob_store.store(input_data.photo, BlobNamespace.PROFILE_PHOTOS)
        except BlobDecodeError as exc:
            raise ValidationError("Photo is not a valid base64 image.") from exc

        # The previous photo stays on disk; the row may still reference it until commit.
        account.update_profile(bio=input_data.bio.strip(), photo=photo)

        try:
            await self._account_repo.save(account)
        except Exception:
            await self._blob_store.remove(photo)
            raise

        logger.info("profile_updated", student_id=account.student_id)
        return account
