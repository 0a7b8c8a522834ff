"""
Database connection management for MongoDB.
"""
import logging
from typing import Callable, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from profiles_app.config import Settings, get_settings

logger = logging.getLogger(__name__)


class ConnectionPool:
    """
    Owns the single MongoDB client of an application context.
    
    The client is created on first access from the pool settings and
    released by `close()`.
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Callable[..., AsyncIOMotorClient] = AsyncIOMotorClient,
    ):
        self.settings = settings or get_settings()
        self._client_factory = client_factory
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None
    
    @property
    def is_open(self) -> bool:
        return self._client is not None
    
    def initialize(self) -> None:
        """Create the client and resolve the database handle (once)."""
        if self._client is not None:
            return
        
        settings = self.settings
        self._client = self._client_factory(
            settings.mongo_uri,
            maxPoolSize=settings.mongo_max_pool_size,
            minPoolSize=settings.mongo_min_pool_size,
            waitQueueTimeoutMS=settings.mongo_max_wait_ms,
        )
        self._database = self._client[settings.mongo_db_name]
        logger.info(
            "MongoDB client created for database '%s' (pool %d-%d)",
            settings.mongo_db_name,
            settings.mongo_min_pool_size,
            settings.mongo_max_pool_size,
        )
    
    def get_client(self) -> AsyncIOMotorClient:
        """Get or create the MongoDB client."""
        self.initialize()
        return self._client
    
    def get_database(self) -> AsyncIOMotorDatabase:
        """Get or create the shared database handle."""
        self.initialize()
        return self._database
    
    def close(self) -> None:
        """Close the client if it was opened."""
        if self._client is not None:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB client closed")
