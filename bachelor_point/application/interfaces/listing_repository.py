from abc import ABC, abstractmethod
from uuid import UUID

from bachelor_point.domain.entities.listing import Listing


class ListingRepository(ABC):
    """Port for persisting and querying Listing records."""

    @abstractmethod
    async def add(self, listing: Listing) -> None:
        ...

    @abstractmethod
    async def get_by_id(self, listing_id: UUID) -> Listing | None:
        ...

    @abstractmethod
    async def list_all(self) -> list[Listing]:
        ...

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> list[Listing]:
        ...

    @abstractmethod
    async def update_owned(self, listing: Listing) -> bool:
        """
        Overwrite the listing's content, matching on both id and owner_id.

        Returns False when no row matched, which covers both a missing listing
        and a caller who does not own it.
        """
        ...

    @abstractmethod
    async def delete(self, listing_id: UUID) -> bool:
        ...
