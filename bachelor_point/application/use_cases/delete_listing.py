from uuid import UUID

import structlog

from bachelor_point.application.interfaces.listing_repository import ListingRepository
from bachelor_point.domain.exceptions import NotFoundError
from bachelor_point.domain.value_objects.principal import Principal

logger = structlog.get_logger(__name__)


class DeleteListing:
    """
    Use case: Delete a listing by id.

    Not scoped by owner: any authenticated caller may delete any listing.
    Deletes by someone other than the owner are logged at warning level.
    """

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    async def execute(self, principal: Principal, listing_id: UUID) -> None:
        listing = await self._listing_repo.get_by_id(listing_id)
        if listing is None:
            raise NotFoundError("Listing not found.")

        if not listing.is_owned_by(principal.student_id):
            logger.warning(
                "listing_deleted_by_non_owner",
                listing_id=str(listing_id),
                owner_id=listing.owner_id,
                caller_id=principal.student_id,
            )

        if not await self._listing_repo.delete(listing_id):
            raise NotFoundError("Listing not found.")

        logger.info("listing_deleted", listing_id=str(listing_id))
