import os

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import text

from bachelor_point.api.dependencies import get_blob_store
from bachelor_point.domain.enums.blob_namespace import BlobNamespace
from bachelor_point.infrastructure.database.connection import AsyncSessionLocal
from bachelor_point.infrastructure.storage.local_blob_store import LocalBlobStore

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["health"])


async def _database_status() -> str:
    try:
        async with AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
    except Exception as exc:
        logger.warning("health_database_unreachable", error=str(exc))
        return f"error: {exc}"
    return "connected"


def _storage_status(blob_store: LocalBlobStore) -> dict[str, str]:
    return {
        namespace.value: (
            "writable" if os.access(blob_store.namespace_dir(namespace), os.W_OK) else "not writable"
        )
        for namespace in BlobNamespace
    }


@router.get("/health")
async def health_check(blob_store: LocalBlobStore = Depends(get_blob_store)) -> dict:  # type: ignore[type-arg]
    """Liveness plus database reachability and per-namespace upload directory checks."""
    database = await _database_status()
    storage = _storage_status(blob_store)

    healthy = database == "connected" and all(s == "writable" for s in storage.values())
    return {
        "status": "healthy" if healthy else "degraded",
        "database": database,
        "storage": storage,
    }
