from enum import Enum


class BlobNamespace(str, Enum):
    """Storage buckets for uploaded images. Each maps to a subdirectory of the store root."""

    IDENTITY_DOCUMENTS = "identity-documents"
    PROFILE_PHOTOS = "profile-photos"
    LISTING_IMAGES = "listing-images"
