from abc import ABC, abstractmethod

from bachelor_point.domain.enums.blob_namespace import BlobNamespace

ENCODED_IMAGE_PREFIX = "data:image/"


class BlobStore(ABC):
    """Port for storing uploaded images and handing back relative references."""

    @abstractmethod
    async def store(self, payload: str, namespace: BlobNamespace) -> str:
        """Decode a base64 payload and persist it. Returns the blob reference."""
        ...

    @abstractmethod
    async def remove(self, reference: str) -> None:
        """Best-effort delete. Never raises."""
        ...

    @staticmethod
    def is_encoded(value: str) -> bool:
        return value.startswith(ENCODED_IMAGE_PREFIX)

    async def store_or_passthrough(self, value: str, namespace: BlobNamespace) -> tuple[str, bool]:
        """
        Store `value` if it is an encoded image, otherwise accept it as an
        existing reference. Returns (reference, newly_stored).
        """
        if self.is_encoded(value):
            return await self.store(value, namespace), True
        return value, False

    async def remove_many(self, references: list[str]) -> None:
        for reference in references:
            await self.remove(reference)
