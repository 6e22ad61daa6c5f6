from uuid import UUID

from bachelor_point.application.interfaces.listing_repository import ListingRepository
from bachelor_point.domain.entities.listing import Listing
from bachelor_point.domain.exceptions import NotFoundError
from bachelor_point.domain.value_objects.principal import Principal


class ListListings:
    """Use case: Every listing, newest first. Approved accounts only."""

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    async def execute(self, principal: Principal) -> list[Listing]:
        principal.require_approved()
        return await self._listing_repo.list_all()


class GetListing:
    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    async def execute(self, principal: Principal, listing_id: UUID) -> Listing:
        principal.require_approved()
        listing = await self._listing_repo.get_by_id(listing_id)
        if listing is None:
            raise NotFoundError("Listing not found.")
        return listing


class ListOwnListings:
    """Use case: Listings posted by the caller."""

    def __init__(self, listing_repo: ListingRepository) -> None:
        self._listing_repo = listing_repo

    async def execute(self, principal: Principal) -> list[Listing]:
        principal.require_approved()
        return await self._listing_repo.list_by_owner(principal.student_id)
