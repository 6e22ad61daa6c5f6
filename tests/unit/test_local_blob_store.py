"""Unit tests for the filesystem blob store, against a real temp directory."""
import re
from unittest.mock import patch

import pytest

from bachelor_point.domain.enums.blob_namespace import BlobNamespace
from bachelor_point.domain.exceptions import BlobDecodeError, BlobWriteError
from bachelor_point.infrastructure.storage.local_blob_store import (
    LocalBlobStore,
    decode_image_payload,
)

_REFERENCE = re.compile(r"^listing-images/\d{13}-[0-9a-f]{12}\.png$")


class TestDecode:
    def test_strips_data_url_prefix(self, png_base64: str, png_data_url: str) -> None:
        assert decode_image_payload(png_data_url) == decode_image_payload(png_base64)

    def test_strips_non_png_prefix(self, png_base64: str) -> None:
        assert decode_image_payload(f"data:image/jpeg;base64,{png_base64}").startswith(b"\x89PNG")

    @pytest.mark.parametrize("payload", ["not base64 at all!", "QUJD=x", ""])
    def test_rejects_malformed(self, payload: str) -> None:
        with pytest.raises(BlobDecodeError):
            decode_image_payload(payload)


class TestStore:
    @pytest.mark.asyncio
    async def test_writes_file_and_returns_relative_reference(
        self, blob_store: LocalBlobStore, png_data_url: str
    ) -> None:
        reference = await blob_store.store(png_data_url, BlobNamespace.LISTING_IMAGES)

        assert _REFERENCE.match(reference)
        stored = blob_store.root / reference
        assert stored.read_bytes().startswith(b"\x89PNG")

    @pytest.mark.asyncio
    async def test_creates_namespace_directory_on_demand(
        self, blob_store: LocalBlobStore, png_base64: str
    ) -> None:
        assert not blob_store.namespace_dir(BlobNamespace.PROFILE_PHOTOS).exists()
        reference = await blob_store.store(png_base64, BlobNamespace.PROFILE_PHOTOS)
        assert reference.startswith("profile-photos/")
        assert blob_store.namespace_dir(BlobNamespace.PROFILE_PHOTOS).is_dir()

    @pytest.mark.asyncio
    async def test_consecutive_stores_get_distinct_names(
        self, blob_store: LocalBlobStore, png_base64: str
    ) -> None:
        references = {
            await blob_store.store(png_base64, BlobNamespace.LISTING_IMAGES) for _ in range(5)
        }
        assert len(references) == 5

    @pytest.mark.asyncio
    async def test_decode_error_writes_nothing(self, blob_store: LocalBlobStore) -> None:
        with pytest.raises(BlobDecodeError):
            await blob_store.store("%%%", BlobNamespace.LISTING_IMAGES)
        assert not blob_store.namespace_dir(BlobNamespace.LISTING_IMAGES).exists()

    @pytest.mark.asyncio
    async def test_os_error_becomes_blob_write_error(
        self, blob_store: LocalBlobStore, png_base64: str
    ) -> None:
        with patch(
            "bachelor_point.infrastructure.storage.local_blob_store._blocking_write",
            side_effect=PermissionError("read-only"),
        ):
            with pytest.raises(BlobWriteError):
                await blob_store.store(png_base64, BlobNamespace.LISTING_IMAGES)


class TestRemove:
    @pytest.mark.asyncio
    async def test_removes_stored_file(self, blob_store: LocalBlobStore, png_base64: str) -> None:
        reference = await blob_store.store(png_base64, BlobNamespace.IDENTITY_DOCUMENTS)
        await blob_store.remove(reference)
        assert not (blob_store.root / reference).exists()

    @pytest.mark.asyncio
    async def test_missing_file_is_not_an_error(self, blob_store: LocalBlobStore) -> None:
        await blob_store.remove("listing-images/does-not-exist.png")

    @pytest.mark.asyncio
    async def test_refuses_paths_outside_root(self, blob_store: LocalBlobStore, tmp_path) -> None:  # type: ignore[no-untyped-def]
        outside = tmp_path / "keep.txt"
        outside.write_text("keep")

        await blob_store.remove("../keep.txt")

        assert outside.exists()

    @pytest.mark.asyncio
    async def test_os_error_is_swallowed(self, blob_store: LocalBlobStore, png_base64: str) -> None:
        reference = await blob_store.store(png_base64, BlobNamespace.LISTING_IMAGES)
        with patch("pathlib.Path.unlink", side_effect=PermissionError("busy")):
            await blob_store.remove(reference)
        assert (blob_store.root / reference).exists()


class TestPassthrough:
    @pytest.mark.asyncio
    async def test_existing_reference_is_returned_unchanged(self, blob_store: LocalBlobStore) -> None:
        reference, is_new = await blob_store.store_or_passthrough(
            "listing-images/1700000000000-abc.png", BlobNamespace.LISTING_IMAGES
        )
        assert reference == "listing-images/1700000000000-abc.png"
        assert is_new is False

    @pytest.mark.asyncio
    async def test_encoded_image_is_stored(self, blob_store: LocalBlobStore, png_data_url: str) -> None:
        reference, is_new = await blob_store.store_or_passthrough(
            png_data_url, BlobNamespace.LISTING_IMAGES
        )
        assert is_new is True
        assert (blob_store.root / reference).is_file()

    def test_ensure_namespaces_creates_every_directory(self, blob_store: LocalBlobStore) -> None:
        blob_store.ensure_namespaces()
        for namespace in BlobNamespace:
            assert blob_store.namespace_dir(namespace).is_dir()
