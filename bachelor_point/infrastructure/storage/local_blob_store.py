"""
Filesystem blob store.

Images land in `<root>/<namespace>/<millis>-<random>.png` and are referenced
by the root-relative POSIX path, which is also the URL path the static file
mounts serve them under. Blocking file I/O runs in the default thread-pool
executor so it never stalls the event loop.
"""
import asyncio
import base64
import binascii
import re
import secrets
import time
from functools import partial
from pathlib import Path

import structlog

from bachelor_point.application.interfaces.blob_store import BlobStore
from bachelor_point.domain.enums.blob_namespace import BlobNamespace
from bachelor_point.domain.exceptions import BlobDecodeError, BlobWriteError

logger = structlog.get_logger(__name__)

_DATA_URL_PREFIX = re.compile(r"^data:image/[\w.+-]+;base64,")
_EXTENSION = ".png"  # fixed regardless of the uploaded format


def decode_image_payload(payload: str) -> bytes:
    """Strip an optional data URL prefix and strictly decode the base64 body."""
    body = _DATA_URL_PREFIX.sub("", payload.strip(), count=1)
    body = "".join(body.split())
    try:
        raw = base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise BlobDecodeError("Payload is not valid base64.") from exc
    if not raw:
        raise BlobDecodeError("Payload decodes to an empty file.")
    return raw


def _new_filename() -> str:
    return f"{int(time.time() * 1000)}-{secrets.token_hex(6)}{_EXTENSION}"


def _blocking_write(directory: Path, filename: str, raw: bytes) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    # "xb" refuses to overwrite an existing file
    with open(directory / filename, "xb") as f:
        f.write(raw)


class LocalBlobStore(BlobStore):
    """Stores decoded images under a root directory on the local disk."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def namespace_dir(self, namespace: BlobNamespace) -> Path:
        return self._root / namespace.value

    def ensure_namespaces(self) -> None:
        for namespace in BlobNamespace:
            self.namespace_dir(namespace).mkdir(parents=True, exist_ok=True)

    async def store(self, payload: str, namespace: BlobNamespace) -> str:
        raw = decode_image_payload(payload)
        filename = _new_filename()
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(
                None,
                partial(_blocking_write, self.namespace_dir(namespace), filename, raw),
            )
        except OSError as exc:
            logger.error(
                "blob_write_failed",
                namespace=namespace.value,
                filename=filename,
                error=str(exc),
            )
            raise BlobWriteError("Failed to save uploaded image.") from exc

        reference = f"{namespace.value}/{filename}"
        logger.debug("blob_stored", reference=reference, size=len(raw))
        return reference

    def resolve(self, reference: str) -> Path | None:
        """Map a reference to its absolute path, or None if it escapes the root."""
        candidate = (self._root / reference).resolve()
        if not candidate.is_relative_to(self._root) or candidate == self._root:
            return None
        return candidate

    async def remove(self, reference: str) -> None:
        path = self.resolve(reference)
        if path is None:
            logger.warning("blob_remove_rejected", reference=reference)
            return

        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, partial(path.unlink, missing_ok=True))
            logger.info("blob_removed", reference=reference)
        except OSError as exc:
            logger.error("blob_remove_failed", reference=reference, error=str(exc))
            # Not re-raised; callers invoke this while unwinding another error.
