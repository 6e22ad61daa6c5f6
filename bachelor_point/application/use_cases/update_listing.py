from uuid import UUID

import structlog

from bachelor_point.application.interfaces.blob_store import BlobStore
from bachelor_point.application.interfaces.listing_repository import ListingRepository
from bachelor_point.application.use_cases.listing_details import ListingDetails
from bachelor_point.domain.entities.listing import Listing
from bachelor_point.domain.enums.blob_namespace import BlobNamespace
from bachelor_point.domain.exceptions import BlobDecodeError, NotFoundError, ValidationError
from bachelor_point.domain.value_objects.principal import Principal

logger = structlog.get_logger(__name__)


class UpdateListing:
    """
    Use case: Overwrite a listing owned by the caller.

    `images` may mix new base64 payloads with references the listing already
    holds; order is preserved. The write is scoped by id and owner, so a
    caller who does not own the listing gets NotFoundError, same as for a
    listing that does not exist.
    """

    def __init__(self, listing_repo: ListingRepository, blob_store: BlobStore) -> None:
        self._listing_repo = listing_repo
        self._blob_store = blob_store

    async def execute(
        self, principal: Principal, listing_id: UUID, details: ListingDetails
    ) -> Listing:
        details.validate()

        references: list[str] = []
        new_references: list[str] = []
        try:
            for image in details.images:
                reference, is_new = await self._blob_store.store_or_passthrough(
                    image, BlobNamespace.LISTING_IMAGES
                )
                references.append(reference)
                if is_new:
                    new_references.append(reference)

            listing = Listing.create(
                owner_id=principal.student_id,
                title=details.title,
                description=details.description,
                available_from=details.available_from,
                gender=details.gender,
                rent=details.rent,
                location=details.location,
                images=references,
            )
            listing.id = listing_id

            updated = await self._listing_repo.update_owned(listing)
        except BlobDecodeError as exc:
            await self._blob_store.remove_many(new_references)
            raise ValidationError("Images must be valid base64 images.") from exc
        except Exception:
            await self._blob_store.remove_many(new_references)
            raise

        if not updated:
            await self._blob_store.remove_many(new_references)
            raise NotFoundError("Listing not found or not authorized.")

        logger.info(
            "listing_updated",
            listing_id=str(listing_id),
            owner_id=principal.student_id,
            new_images=len(new_references),
        )
        # Reload so created_at/updated_at reflect the stored row
        stored = await self._listing_repo.get_by_id(listing_id)
        if stored is None:
            await self._blob_store.remove_many(new_references)
            raise NotFoundError("Listing not found.")
        return stored
