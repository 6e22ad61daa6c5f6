import structlog

from bachelor_point.application.interfaces.blob_store import BlobStore
from bachelor_point.application.interfaces.listing_repository import ListingRepository
from bachelor_point.application.use_cases.listing_details import ListingDetails
from bachelor_point.domain.entities.listing import Listing
from bachelor_point.domain.enums.blob_namespace import BlobNamespace
from bachelor_point.domain.exceptions import BlobDecodeError, ValidationError
from bachelor_point.domain.value_objects.principal import Principal

logger = structlog.get_logger(__name__)


class CreateListing:
    """
    Use case: Publish a listing for an approved account.

    Images are stored in input order. If any image fails, or the insert
    fails, every image written during this call is removed before the error
    propagates.
    """

    def __init__(self, listing_repo: ListingRepository, blob_store: BlobStore) -> None:
        self._listing_repo = listing_repo
        self._blob_store = blob_store

    async def execute(self, principal: Principal, details: ListingDetails) -> Listing:
        principal.require_approved()
        details.validate()

        stored: list[str] = []
        try:
            for image in details.images:
                stored.append(await self._blob_store.store(image, BlobNamespace.LISTING_IMAGES))

            listing = Listing.create(
                owner_id=principal.student_id,
                title=details.title,
                description=details.description,
                available_from=details.available_from,
                gender=details.gender,
                rent=details.rent,
                location=details.location,
                images=stored,
            )
            await self._listing_repo.add(listing)
        except BlobDecodeError as exc:
            await self._blob_store.remove_many(stored)
            raise ValidationError("Images must be valid base64 images.") from exc
        except Exception:
            await self._blob_store.remove_many(stored)
            raise

        logger.info(
            "listing_created",
            listing_id=str(listing.id),
            owner_id=listing.owner_id,
            image_count=len(listing.images),
        )
        return listing
