from dataclasses import dataclass
from uuid import UUID

import structlog

from bachelor_point.application.interfaces.account_repository import AccountRepository
from bachelor_point.application.interfaces.listing_repository import ListingRepository
from bachelor_point.domain.exceptions import ForbiddenError, NotFoundError
from bachelor_point.domain.value_objects.gender import genders_match
from bachelor_point.domain.value_objects.principal import Principal

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OwnerContact:
    name: str
    email: str
    student_id: str


class RevealContact:
    """
    Use case: Disclose a listing owner's contact details.

    Only requesters whose gender matches the listing's gender restriction see
    the owner's name, email and student id; nothing else of the owner's
    profile is returned.
    """

    def __init__(self, account_repo: AccountRepository, listing_repo: ListingRepository) -> None:
        self._account_repo = account_repo
        self._listing_repo = listing_repo

    async def execute(self, principal: Principal, listing_id: UUID) -> OwnerContact:
        requester = await self._account_repo.get_by_student_id(principal.student_id)
        if requester is None:
            raise NotFoundError("Account not found.")

        listing = await self._listing_repo.get_by_id(listing_id)
        if listing is None:
            raise NotFoundError("Listing not found.")

        if not genders_match(requester.gender, listing.gender):
            raise ForbiddenError("This listing is restricted to a different gender.")

        owner = await self._account_repo.get_by_student_id(listing.owner_id)
        if owner is None:
            raise NotFoundError("Listing owner not found.")

        logger.info(
            "contact_revealed",
            listing_id=str(listing_id),
            requester_id=requester.student_id,
            owner_id=owner.student_id,
        )
        return OwnerContact(name=owner.name, email=owner.email, student_id=owner.student_id)
