"""
Application context wiring the connection pool, session and profile store.
"""
import logging
from typing import Optional

from profiles_app.config import Settings, get_settings
from profiles_app.database.connections import ConnectionPool
from profiles_app.database.registry import create_indexes
from profiles_app.services.profile_service import ProfileService
from profiles_app.session import SessionHolder

logger = logging.getLogger(__name__)


class AppContext:
    """
    Explicitly constructed owner of the process resources.
    
    Usage:
        async with AppContext() as context:
            profile = await context.profiles.login("alice", "secret")
    
    Entering creates the indexes; leaving closes the MongoDB client.
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        pool: Optional[ConnectionPool] = None,
        session: Optional[SessionHolder] = None,
    ):
        self.settings = settings or get_settings()
        self.pool = pool or ConnectionPool(self.settings)
        self.session = session or SessionHolder()
        self._profiles: Optional[ProfileService] = None
    
    @property
    def profiles(self) -> ProfileService:
        """Profile store bound to the pool's database (opens the pool on first use)."""
        if self._profiles is None:
            self._profiles = ProfileService(self.pool.get_database(), self.session)
        return self._profiles
    
    async def prepare(self) -> None:
        """Ensure the profiles indexes exist."""
        await create_indexes(self.pool.get_database())
        logger.info("Profiles indexes ensured")
    
    def close(self) -> None:
        """Release the database client; the next access reopens it."""
        self.pool.close()
        self._profiles = None
    
    async def __aenter__(self) -> "AppContext":
        await self.prepare()
        return self
    
    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()
