"""MongoDB connection for the chip set repository.

The calculator itself never touches the database; only the chip set
catalogue does. One Motor client is opened at startup and shared by the
request handlers through ``get_database()``.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from chipcalc.config import settings
from chipcalc.dal.chip_sets_dal import COLLECTION, LISTING_ORDER

logger = logging.getLogger("chipcalc.dal.database")

SERVER_SELECTION_TIMEOUT_MS = 5000

_client: Optional[AsyncIOMotorClient] = None
_database: Optional[AsyncIOMotorDatabase] = None


async def connect_to_mongo(
    mongo_url: Optional[str] = None, database_name: Optional[str] = None
) -> AsyncIOMotorDatabase:
    """Open the shared client and return the catalogue database.

    Args:
        mongo_url: Connection string; defaults to ``settings.MONGO_URL``.
        database_name: Database holding ``chip_sets``; defaults to
            ``settings.DATABASE_NAME``.

    Raises:
        Any driver error from the initial ping. The shared handles stay
        unset in that case, so ``get_database()`` keeps raising.
    """
    global _client, _database

    name = database_name or settings.DATABASE_NAME
    client = AsyncIOMotorClient(
        mongo_url or settings.MONGO_URL,
        serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS,
    )
    try:
        await client.admin.command("ping")
    except Exception:
        client.close()
        raise

    _client, _database = client, client[name]
    logger.info("Chip set store connected: %s", name)
    return _database


async def close_mongo_connection() -> None:
    """Close the shared client; ``get_database()`` raises afterwards."""
    global _client, _database

    if _client is not None:
        _client.close()
        logger.info("Chip set store disconnected")
    _client, _database = None, None


def get_database() -> AsyncIOMotorDatabase:
    """Return the catalogue database opened by ``connect_to_mongo()``.

    Raises:
        RuntimeError: No connection is open.
    """
    if _database is None:
        raise RuntimeError("Chip set store is not connected")
    return _database


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the index behind the catalogue listing order. Idempotent."""
    await db[COLLECTION].create_index(LISTING_ORDER, name="idx_preset_created")
    logger.info("Indexes ensured for %s", COLLECTION)
