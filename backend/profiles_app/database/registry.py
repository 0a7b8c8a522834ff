"""
Index management for the profiles database.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from profiles_app.database.databases import profiles_db

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create the indexes the profile store relies on.
    
    The unique email and username indexes make the insert itself
    report a credential conflict.
    """
    for collection_name, indexes in profiles_db.Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            await collection.create_index(keys, **kwargs)
        logger.debug("Indexes ensured on '%s'", collection_name)
